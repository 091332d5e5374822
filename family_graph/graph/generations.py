"""Generation assignment by bounded fixed-point relaxation."""

import logging
from collections.abc import Mapping

from family_graph.graph.models import UNSET_GENERATION, Member

logger = logging.getLogger(__name__)


class GenerationCycleError(ValueError):
    """Parent/child edges contain a cycle, so generations cannot settle."""

    def __init__(self, member_ids: list[str]):
        self.member_ids = member_ids
        super().__init__(
            "Cycle in parent/child relationships involving: " + ", ".join(member_ids)
        )


def assign_generations(members: Mapping[str, Member]) -> int:
    """Assign a generation to every member in place.

    Members without parents are roots at generation 0. Each relaxation pass sets a
    member with known parent generations to max(parent generations) + 1 when that
    is larger than its current value, until a pass changes nothing. An acyclic
    graph of n members settles within n passes.

    Args:
        members: Members keyed by id

    Returns:
        Number of passes performed

    Raises:
        GenerationCycleError: If the parent/child edges contain a cycle
    """
    for member in members.values():
        member.generation = 0 if not member.parents else UNSET_GENERATION

    passes = 0
    changed: list[str] = []
    for passes in range(1, len(members) + 1):
        changed = _relax(members)
        if not changed:
            break

    if changed:
        # Members still improving on the last allowed pass sit on or below a cycle
        raise GenerationCycleError(changed)

    # A member whose ancestry never reaches a root sits on (or below) a cycle
    unsettled = [m.id for m in members.values() if m.generation == UNSET_GENERATION]
    if unsettled:
        raise GenerationCycleError(unsettled)

    logger.debug("Generations settled after %d passes", passes)
    return passes


def _relax(members: Mapping[str, Member]) -> list[str]:
    """Run one pass and return the ids of the members whose generation moved."""
    changed: list[str] = []
    for member in members.values():
        known = [
            members[parent_id].generation
            for parent_id in member.parents
            if parent_id in members and members[parent_id].generation != UNSET_GENERATION
        ]
        if not known:
            continue
        candidate = max(known) + 1
        if candidate > member.generation:
            member.generation = candidate
            changed.append(member.id)
    return changed


def count_generations(members: Mapping[str, Member]) -> int:
    """Count the distinct generation values present among members."""
    return len({member.generation for member in members.values()})
