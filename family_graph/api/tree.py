"""Family tree API endpoints."""

import logging
from typing import Any

from pydantic import ValidationError
from quart import Blueprint, current_app, jsonify, request

from family_graph.graph import GenerationCycleError, build_family_tree, build_relation_view
from family_graph.schemas import DraftBatch, EntityDraft

logger = logging.getLogger(__name__)

tree_bp = Blueprint("tree", __name__)


def parse_draft(body: Any) -> EntityDraft:
    """Validate a request body holding one draft or {"drafts": [...]}.

    A body with a "drafts" key is a batch only; it may not also carry
    top-level persons or relationships.

    Raises:
        ValidationError: If the body is not a valid draft or batch
    """
    if isinstance(body, dict) and "drafts" in body:
        return DraftBatch.model_validate(body).merged()
    return EntityDraft.model_validate(body)


def _cycle_response(error: GenerationCycleError) -> tuple[Any, int]:
    return jsonify({"error": str(error), "cycle": error.member_ids}), 422


@tree_bp.route("/api/family/tree", methods=["POST"])
async def family_tree() -> tuple[Any, int]:
    """Build a positioned family tree from an entity draft.

    Query parameters:
        - layout: "grid" (default) or "radial"
        - center: Center member name for the radial layout

    Returns:
        JSON with members, connections and metadata
    """
    layout = request.args.get("layout", current_app.config["DEFAULT_LAYOUT"])
    center = request.args.get("center")

    try:
        draft = parse_draft(await request.get_json(force=True, silent=True))
        tree = build_family_tree(draft, layout=layout, center=center)
        return jsonify(tree.to_dict()), 200

    except ValidationError as e:
        return jsonify({"error": "Invalid entity draft", "details": e.errors(include_url=False)}), 400
    except GenerationCycleError as e:
        return _cycle_response(e)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        logger.exception("Failed to build family tree")
        return jsonify({"error": f"Failed to generate family tree data: {e!s}"}), 500


@tree_bp.route("/api/family/relations", methods=["POST"])
async def family_relations() -> tuple[Any, int]:
    """Build the "relations around me" view from an entity draft.

    Query parameters:
        - center: Center member name (default: the writer)

    Returns:
        JSON with center id, radially positioned members and all relations
    """
    center = request.args.get("center")

    try:
        draft = parse_draft(await request.get_json(force=True, silent=True))
        return jsonify(build_relation_view(draft, center=center)), 200

    except ValidationError as e:
        return jsonify({"error": "Invalid entity draft", "details": e.errors(include_url=False)}), 400
    except GenerationCycleError as e:
        return _cycle_response(e)
    except Exception as e:
        logger.exception("Failed to build relation view")
        return jsonify({"error": f"Failed to generate relation view: {e!s}"}), 500
