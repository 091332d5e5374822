"""Pydantic schemas for extracted family entities."""

from family_graph.schemas.entities import (
    DateEntity,
    DraftBatch,
    EntityDraft,
    EventEntity,
    PersonEntity,
    PlaceEntity,
    RelationshipEntity,
    merge_drafts,
)

__all__ = [
    "PersonEntity",
    "PlaceEntity",
    "DateEntity",
    "EventEntity",
    "RelationshipEntity",
    "EntityDraft",
    "DraftBatch",
    "merge_drafts",
]
