"""Layout engine: banded grid and centered-radial positioning.

Both layouts are pure functions of member order and generations. They return
positions keyed by member id; ``apply_layout`` writes them onto the members.
"""

import logging
import math
from collections.abc import Mapping

from family_graph.config import settings
from family_graph.graph.models import Member, Point

logger = logging.getLogger(__name__)

LAYOUTS = ("grid", "radial")


def banded_grid_layout(
    members: Mapping[str, Member],
    horizontal_spacing: float | None = None,
    vertical_spacing: float | None = None,
) -> dict[str, Point]:
    """Place members in one row per generation.

    Members are spread along x in insertion order, starting from an offset
    centered on the total member count; y is generation * vertical spacing.

    Args:
        members: Members keyed by id, generations already assigned
        horizontal_spacing: Distance between neighbours in a row
        vertical_spacing: Distance between generation rows

    Returns:
        Position per member id
    """
    dx = settings.horizontal_spacing if horizontal_spacing is None else horizontal_spacing
    dy = settings.vertical_spacing if vertical_spacing is None else vertical_spacing
    start_x = -(len(members) * dx) / 2

    rows: dict[int, list[Member]] = {}
    for member in members.values():
        rows.setdefault(member.generation, []).append(member)

    positions: dict[str, Point] = {}
    for generation, row in rows.items():
        for index, member in enumerate(row):
            positions[member.id] = Point(start_x + index * dx, generation * dy)
    return positions


def radial_layout(
    members: Mapping[str, Member],
    center_id: str | None,
    center: tuple[float, float] | None = None,
    radius: float | None = None,
) -> dict[str, Point]:
    """Place one member at the center and everyone else on a circle around it.

    The others are indexed in insertion order and placed at angle
    2 * pi * index / count.

    Args:
        members: Members keyed by id
        center_id: Id of the member to put at the center (may be absent)
        center: Canvas center (default from settings)
        radius: Circle radius (default from settings)

    Returns:
        Position per member id
    """
    cx, cy = center or (settings.radial_center_x, settings.radial_center_y)
    r = settings.radial_radius if radius is None else radius

    positions: dict[str, Point] = {}
    if center_id in members:
        positions[center_id] = Point(cx, cy)

    others = [member for member in members.values() if member.id != center_id]
    count = len(others)
    for index, member in enumerate(others):
        angle = 2 * math.pi * index / count
        positions[member.id] = Point(cx + r * math.cos(angle), cy + r * math.sin(angle))
    return positions


def apply_layout(members: Mapping[str, Member], positions: Mapping[str, Point]) -> None:
    """Write computed positions onto the members."""
    for member_id, point in positions.items():
        member = members[member_id]
        member.x, member.y = point.x, point.y


def compute_layout(
    members: Mapping[str, Member], layout: str = "grid", center_id: str | None = None
) -> dict[str, Point]:
    """Dispatch to a layout by name.

    Raises:
        ValueError: If the layout name is unknown
    """
    logger.debug("Computing %s layout for %d members", layout, len(members))
    if layout == "grid":
        return banded_grid_layout(members)
    if layout == "radial":
        return radial_layout(members, center_id)
    raise ValueError(f"Unknown layout: {layout!r}. Expected one of {', '.join(LAYOUTS)}")
