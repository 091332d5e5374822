"""Family tree pipeline: entity draft in, renderable payload out.

Every call builds its own graph from the draft it is given; nothing is kept
between calls.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from family_graph.config import settings
from family_graph.graph.builder import FamilyGraph, GraphBuilder
from family_graph.graph.connections import materialize
from family_graph.graph.generations import assign_generations, count_generations
from family_graph.graph.layout import apply_layout, compute_layout
from family_graph.graph.models import Connection, Member
from family_graph.graph.normalize import member_id, normalize_name
from family_graph.schemas import EntityDraft

logger = logging.getLogger(__name__)


@dataclass
class FamilyTree:
    """Positioned members and their connections."""

    members: list[Member] = field(default_factory=list)
    connections: list[Connection] = field(default_factory=list)

    @property
    def total_members(self) -> int:
        return len(self.members)

    @property
    def generations(self) -> int:
        return count_generations({m.id: m for m in self.members})

    def to_dict(self) -> dict[str, Any]:
        """Convert to the payload consumed by the visualization layer."""
        return {
            "members": [member.to_dict() for member in self.members],
            "connections": [connection.to_dict() for connection in self.connections],
            "metadata": {
                "totalMembers": self.total_members,
                "generations": self.generations,
            },
        }


def _center_id(center: str | None) -> str:
    """Resolve a center name (or subject alias) to a member id."""
    return member_id(normalize_name(center or settings.subject_name))


def build_graph(draft: EntityDraft) -> FamilyGraph:
    """Build the graph and assign generations.

    Raises:
        GenerationCycleError: If the parent/child edges contain a cycle
    """
    graph = GraphBuilder().build(draft.relationships, draft.persons)
    assign_generations(graph.members)
    return graph


def build_family_tree(
    draft: EntityDraft, layout: str = "grid", center: str | None = None
) -> FamilyTree:
    """Run the full pipeline for one draft.

    Args:
        draft: Validated entity draft
        layout: "grid" (generation rows) or "radial" (subject in the middle)
        center: Name of the radial center (default: the subject)

    Returns:
        FamilyTree ready for to_dict()

    Raises:
        GenerationCycleError: If the parent/child edges contain a cycle
        ValueError: If the layout name is unknown
    """
    graph = build_graph(draft)
    positions = compute_layout(graph.members, layout, _center_id(center))
    apply_layout(graph.members, positions)

    tree = FamilyTree(
        members=list(graph.members.values()),
        connections=materialize(graph.members),
    )
    logger.info(
        "Family tree: %d members, %d connections, %d generations",
        tree.total_members,
        len(tree.connections),
        tree.generations,
    )
    return tree


def build_relation_view(draft: EntityDraft, center: str | None = None) -> dict[str, Any]:
    """Build the "relations around me" view.

    Members are laid out radially around the center and every recorded relation
    is returned with its original type, including types that carry no
    generation information (kusin, vän, ...).

    Args:
        draft: Validated entity draft
        center: Name of the center member (default: the subject)

    Returns:
        Dict with center id, members and relations
    """
    graph = build_graph(draft)
    center_id = _center_id(center)
    apply_layout(graph.members, compute_layout(graph.members, "radial", center_id))

    return {
        "center": center_id if center_id in graph.members else None,
        "members": [member.to_dict() for member in graph.members.values()],
        "relations": [edge.to_dict() for edge in graph.edges],
    }
