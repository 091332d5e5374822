"""Pydantic schemas for extracted family entities.

These schemas describe the entity draft produced by the external extraction
service and are used to validate it before a family graph is built from it.
"""

import re
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, model_validator

ISO_DATE_PATTERN = re.compile(r"^\d{4}(-\d{2}(-\d{2})?)?$")


class PersonEntity(BaseModel):
    """A person mentioned in the text."""

    name: str = Field(description="Name as written by the extractor")
    description: str = Field(default="", description="Short description of the person")
    confidence: float = Field(
        default=0.0, ge=0.0, le=1.0, description="Confidence score for this person (0.0-1.0)"
    )


class PlaceEntity(BaseModel):
    """A place mentioned in the text."""

    name: str = Field(description="Place name")
    description: str = Field(default="", description="Short description of the place")
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


class DateEntity(BaseModel):
    """A dated (or loosely dated) happening."""

    model_config = ConfigDict(populate_by_name=True)

    date: str | None = Field(
        default=None, description="ISO 8601 date (YYYY, YYYY-MM or YYYY-MM-DD) or null"
    )
    date_text: str | None = Field(
        default=None,
        alias="dateText",
        description="Original phrase when the date could not be normalized",
    )
    description: str = Field(default="", description="What happened on this date")
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def move_free_text_date(self) -> "DateEntity":
        """Move a non-ISO date into date_text instead of rejecting it."""
        if self.date and not ISO_DATE_PATTERN.match(self.date):
            self.date_text = self.date
            self.date = None
        return self


class EventEntity(BaseModel):
    """An event mentioned in the text."""

    title: str = Field(description="Event title")
    description: str = Field(default="", description="Description of the event")
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


class RelationshipEntity(BaseModel):
    """A relationship between two people.

    ``type`` is read as "person1 is the <type> of person2", e.g. ``mor`` means
    person1 is the mother of person2 and ``son`` means person1 is the son of person2.
    """

    person1: str = Field(description="First person's name")
    person2: str = Field(description="Second person's name")
    type: str = Field(
        description="Relation type: mor, far, son, dotter, make, maka, partner, mormor, "
        "morfar, farmor, farfar, kusin, vän, kollega, syster, bror"
    )
    confidence: float = Field(
        default=0.0, ge=0.0, le=1.0, description="Confidence score for this relationship"
    )


class EntityDraft(BaseModel):
    """Complete entity draft from one or more text submissions."""

    persons: list[PersonEntity] = Field(default_factory=list)
    places: list[PlaceEntity] = Field(default_factory=list)
    dates: list[DateEntity] = Field(default_factory=list)
    events: list[EventEntity] = Field(default_factory=list)
    relationships: list[RelationshipEntity] = Field(default_factory=list)

    def is_empty(self) -> bool:
        """Check if the draft has nothing to build a graph from."""
        return not (self.persons or self.relationships)


def merge_drafts(drafts: Iterable[EntityDraft]) -> EntityDraft:
    """Aggregate several drafts into one, keeping draft order.

    Args:
        drafts: Drafts to combine

    Returns:
        A single EntityDraft with every list concatenated
    """
    merged = EntityDraft()
    for draft in drafts:
        merged.persons.extend(draft.persons)
        merged.places.extend(draft.places)
        merged.dates.extend(draft.dates)
        merged.events.extend(draft.events)
        merged.relationships.extend(draft.relationships)
    return merged


class DraftBatch(BaseModel):
    """Several drafts submitted together for aggregation.

    Top-level draft fields next to ``drafts`` are rejected rather than dropped.
    """

    model_config = ConfigDict(extra="forbid")

    drafts: list[EntityDraft] = Field(description="Drafts to merge, in order")

    def merged(self) -> EntityDraft:
        return merge_drafts(self.drafts)
