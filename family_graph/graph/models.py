"""Data classes for family graph nodes and edges."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple

UNSET_GENERATION = -1


class RelationKind(str, Enum):
    """Edge shape a relation type string classifies into."""

    PARENT = "parent"
    SPOUSE = "spouse"
    OTHER = "other"


class Point(NamedTuple):
    x: float
    y: float


@dataclass
class Member:
    """A deduplicated person in the family graph."""

    id: str
    name: str
    generation: int = UNSET_GENERATION
    x: float = 0.0
    y: float = 0.0
    parents: list[str] = field(default_factory=list)
    children: list[str] = field(default_factory=list)
    spouse: str | None = None
    gender: str = "other"
    occupation: str | None = None
    location: str | None = None
    birth_year: int | None = None
    death_year: int | None = None
    description: str | None = None
    confidence: float | None = None

    # Set once a person entity (not just a relationship mention) described this member
    from_person: bool = field(default=False, repr=False)
    mention_confidences: list[float] = field(default_factory=list, repr=False)

    def add_parent(self, parent_id: str) -> None:
        if parent_id not in self.parents:
            self.parents.append(parent_id)

    def add_child(self, child_id: str) -> None:
        if child_id not in self.children:
            self.children.append(child_id)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the payload shape consumed by the tree renderer."""
        return {
            "id": self.id,
            "name": self.name,
            "birthYear": self.birth_year,
            "deathYear": self.death_year,
            "generation": self.generation,
            "x": self.x,
            "y": self.y,
            "parents": list(self.parents),
            "children": list(self.children),
            "spouse": self.spouse,
            "gender": self.gender,
            "occupation": self.occupation,
            "location": self.location,
            "confidence": self.confidence,
            "description": self.description,
        }


@dataclass
class RelationEdge:
    """A relationship as recorded by the graph builder.

    Parent edges are stored parent -> child regardless of how the source
    relationship was phrased.
    """

    source: str
    target: str
    type: str
    kind: RelationKind
    confidence: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "from": self.source,
            "to": self.target,
            "type": self.type,
            "kind": self.kind.value,
            "confidence": self.confidence,
        }


@dataclass
class Connection:
    """A typed connection for the renderer: ``child`` (parent -> child) or ``spouse``."""

    source: str
    target: str
    type: str

    def to_dict(self) -> dict[str, Any]:
        return {"from": self.source, "to": self.target, "type": self.type}
