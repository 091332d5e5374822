"""Member registry: deduplicates persons into graph nodes keyed by id."""

import logging

from family_graph.graph.enrichment import enrich
from family_graph.graph.models import Member
from family_graph.graph.normalize import member_id
from family_graph.schemas import PersonEntity

logger = logging.getLogger(__name__)


class MemberRegistry:
    """Arena of members for a single graph build.

    Members keep insertion order, which the layouts rely on for stable output.
    """

    def __init__(self) -> None:
        self._members: dict[str, Member] = {}

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, member_id: str) -> bool:
        return member_id in self._members

    def __iter__(self):
        return iter(self._members.values())

    @property
    def members(self) -> dict[str, Member]:
        return self._members

    def get(self, member_id: str) -> Member | None:
        return self._members.get(member_id)

    def upsert(self, name: str) -> Member:
        """Return the member for a (normalized) name, creating it if needed.

        An existing member is returned unchanged.

        Args:
            name: Normalized display name

        Returns:
            The member with id derived from the name
        """
        key = member_id(name)
        member = self._members.get(key)
        if member is None:
            member = Member(id=key, name=name)
            self._members[key] = member
        return member

    def register_person(self, person: PersonEntity, name: str) -> Member:
        """Register a person entity, populating attributes from its description.

        A second person entity with the same id overwrites scalar attributes;
        relation lists are left alone.

        Args:
            person: Person entity from the draft
            name: The person's normalized name

        Returns:
            The registered member
        """
        member = self.upsert(name)
        if member.from_person:
            logger.debug("Person %r merges into existing member %s", person.name, member.id)

        attributes = enrich(name, person.description)
        member.name = name
        member.description = person.description or None
        member.birth_year = attributes["birth_year"]
        member.death_year = attributes["death_year"]
        member.gender = attributes["gender"]
        member.occupation = attributes["occupation"]
        member.location = attributes["location"]
        member.confidence = person.confidence
        member.from_person = True
        return member

    def finalize_confidence(self) -> None:
        """Derive confidence for members only seen in relationships.

        Such a member gets the mean confidence of the relationships that mention it.
        """
        for member in self._members.values():
            if member.from_person or not member.mention_confidences:
                continue
            member.confidence = sum(member.mention_confidences) / len(member.mention_confidences)
