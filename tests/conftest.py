"""Shared fixtures for Family Graph tests."""

import pytest

from family_graph.schemas import EntityDraft, PersonEntity, RelationshipEntity


@pytest.fixture
def family_draft() -> EntityDraft:
    """A small three-generation family around the writer."""
    return EntityDraft(
        persons=[
            PersonEntity(name="Karl Johansson", description="Farfar, född 1920, bonde i Dalby", confidence=0.9),
            PersonEntity(name="Erik", description="Pappa, ingenjör från Lund", confidence=0.8),
            PersonEntity(name="Lena", description="Mamma, lärare, born 1955", confidence=0.85),
            PersonEntity(name="Jag", description="Skribenten", confidence=1.0),
        ],
        relationships=[
            RelationshipEntity(person1="Karl Johansson", person2="Erik", type="far", confidence=0.9),
            RelationshipEntity(person1="Erik", person2="Jag", type="far", confidence=0.95),
            RelationshipEntity(person1="Lena", person2="Skribenten", type="mor", confidence=0.95),
            RelationshipEntity(person1="Erik", person2="Lena", type="make", confidence=0.9),
            RelationshipEntity(person1="Sara", person2="Jag", type="kusin", confidence=0.6),
        ],
    )


@pytest.fixture
def draft_json(family_draft: EntityDraft) -> dict:
    """The family draft as the extraction service would send it."""
    return family_draft.model_dump(by_alias=True)
