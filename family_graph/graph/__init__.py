"""Family graph construction, generation assignment and layout."""

from family_graph.graph.builder import FamilyGraph, GraphBuilder, classify_relation
from family_graph.graph.connections import materialize
from family_graph.graph.generations import (
    GenerationCycleError,
    assign_generations,
    count_generations,
)
from family_graph.graph.layout import (
    LAYOUTS,
    apply_layout,
    banded_grid_layout,
    compute_layout,
    radial_layout,
)
from family_graph.graph.models import Connection, Member, Point, RelationEdge, RelationKind
from family_graph.graph.normalize import member_id, normalize_name
from family_graph.graph.registry import MemberRegistry
from family_graph.graph.tree import FamilyTree, build_family_tree, build_relation_view

__all__ = [
    "LAYOUTS",
    "Connection",
    "FamilyGraph",
    "FamilyTree",
    "GenerationCycleError",
    "GraphBuilder",
    "Member",
    "MemberRegistry",
    "Point",
    "RelationEdge",
    "RelationKind",
    "apply_layout",
    "assign_generations",
    "banded_grid_layout",
    "build_family_tree",
    "build_relation_view",
    "classify_relation",
    "compute_layout",
    "count_generations",
    "materialize",
    "member_id",
    "normalize_name",
    "radial_layout",
]
