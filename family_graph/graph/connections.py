"""Flatten a family graph into typed connections for the renderer."""

from collections.abc import Mapping

from family_graph.graph.models import Connection, Member


def materialize(members: Mapping[str, Member]) -> list[Connection]:
    """Emit connections for every parent/child and spouse link.

    Child connections always point parent -> child. A spouse pair is emitted
    once, from the member whose id sorts first. When a spouse slot was
    overwritten the link is one-sided and is emitted from the side that holds it.

    Args:
        members: Members keyed by id

    Returns:
        Connections in member order
    """
    connections: list[Connection] = []
    for member in members.values():
        for child_id in member.children:
            connections.append(Connection(member.id, child_id, "child"))

        if member.spouse is None:
            continue
        partner = members.get(member.spouse)
        mutual = partner is not None and partner.spouse == member.id
        if mutual and partner.id < member.id:
            continue
        connections.append(Connection(member.id, member.spouse, "spouse"))
    return connections
