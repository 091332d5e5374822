"""Name normalization for the identity subject."""

import re
from collections.abc import Iterable

from family_graph.config import settings

_WHITESPACE = re.compile(r"\s+")


def normalize_name(
    name: str,
    subject_name: str | None = None,
    aliases: Iterable[str] | None = None,
) -> str:
    """Map self-referential aliases ("jag", "the writer", ...) to the subject name.

    Args:
        name: Raw name from the extractor
        subject_name: Display name of the writer (default: settings.subject_name)
        aliases: Lower-case aliases that refer to the writer (default: settings)

    Returns:
        The subject name for an alias, otherwise the trimmed input
    """
    subject_name = subject_name or settings.subject_name
    if aliases is None:
        aliases = settings.subject_aliases
    alias_set = {a.strip().lower() for a in aliases}

    trimmed = name.strip()
    if trimmed.lower() in alias_set:
        return subject_name
    return trimmed


def member_id(name: str) -> str:
    """Derive a member id: lower-cased, with whitespace runs collapsed to hyphens."""
    return _WHITESPACE.sub("-", name.strip().lower())
