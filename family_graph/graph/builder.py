"""Relationship classification and graph building.

Relationships read as "person1 is the <type> of person2". Parent types make
person1 a parent of person2, child types make person2 a parent of person1 and
spouse types link both members. Every other type is kept as a relation edge for
display but carries no generational ordering.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from family_graph.graph.models import Member, RelationEdge, RelationKind
from family_graph.graph.normalize import member_id, normalize_name
from family_graph.graph.registry import MemberRegistry
from family_graph.schemas import PersonEntity, RelationshipEntity

logger = logging.getLogger(__name__)

PARENT_TYPES = frozenset({"mor", "far"})
CHILD_TYPES = frozenset({"son", "dotter"})
SPOUSE_TYPES = frozenset({"make", "maka", "partner"})


def classify_relation(relation_type: str) -> tuple[RelationKind, bool]:
    """Classify a relation type string.

    Args:
        relation_type: Relation type as given by the extractor

    Returns:
        (kind, inverted) where inverted is True when person2 is the parent
    """
    key = relation_type.strip().lower()
    if key in PARENT_TYPES:
        return RelationKind.PARENT, False
    if key in CHILD_TYPES:
        return RelationKind.PARENT, True
    if key in SPOUSE_TYPES:
        return RelationKind.SPOUSE, False
    return RelationKind.OTHER, False


@dataclass
class FamilyGraph:
    """Members plus every recorded relation edge, both in build order."""

    members: dict[str, Member] = field(default_factory=dict)
    edges: list[RelationEdge] = field(default_factory=list)


class GraphBuilder:
    """Build a family graph from persons and relationships."""

    def __init__(
        self,
        subject_name: str | None = None,
        subject_aliases: Iterable[str] | None = None,
    ):
        """Initialize the graph builder.

        Args:
            subject_name: Display name for the writer (default from settings)
            subject_aliases: Aliases that refer to the writer (default from settings)
        """
        self.subject_name = subject_name
        self.subject_aliases = list(subject_aliases) if subject_aliases is not None else None

    def _normalize(self, name: str) -> str:
        return normalize_name(name, self.subject_name, self.subject_aliases)

    def build(
        self,
        relationships: Iterable[RelationshipEntity],
        persons: Iterable[PersonEntity] = (),
    ) -> FamilyGraph:
        """Build a fresh graph.

        Persons are registered first so their descriptions populate attributes.
        Names that only occur in relationships still become members.

        Args:
            relationships: Relationship entities
            persons: Person entities

        Returns:
            FamilyGraph with members keyed by id
        """
        registry = MemberRegistry()
        edges: list[RelationEdge] = []

        for person in persons:
            name = self._normalize(person.name)
            if not name:
                logger.warning("Skipping person with blank name")
                continue
            registry.register_person(person, name)

        for rel in relationships:
            edge = self._add_relationship(registry, rel)
            if edge is not None:
                edges.append(edge)

        registry.finalize_confidence()
        logger.debug("Built graph with %d members and %d edges", len(registry), len(edges))
        return FamilyGraph(members=registry.members, edges=edges)

    def _add_relationship(
        self, registry: MemberRegistry, rel: RelationshipEntity
    ) -> RelationEdge | None:
        name1 = self._normalize(rel.person1)
        name2 = self._normalize(rel.person2)
        if not name1 or not name2:
            logger.warning("Skipping %r relationship with a blank person name", rel.type)
            return None

        if member_id(name1) == member_id(name2):
            logger.warning("Skipping %r relationship of %r with themselves", rel.type, name1)
            return None

        person1 = registry.upsert(name1)
        person2 = registry.upsert(name2)
        person1.mention_confidences.append(rel.confidence)
        person2.mention_confidences.append(rel.confidence)

        kind, inverted = classify_relation(rel.type)

        if kind is RelationKind.PARENT:
            parent, child = (person2, person1) if inverted else (person1, person2)
            parent.add_child(child.id)
            child.add_parent(parent.id)
            return RelationEdge(parent.id, child.id, rel.type, kind, rel.confidence)

        if kind is RelationKind.SPOUSE:
            # Single spouse slot, last write wins
            for member, partner in ((person1, person2), (person2, person1)):
                if member.spouse is not None and member.spouse != partner.id:
                    logger.warning(
                        "Spouse of %s changes from %s to %s", member.id, member.spouse, partner.id
                    )
                member.spouse = partner.id

        return RelationEdge(person1.id, person2.id, rel.type, kind, rel.confidence)
