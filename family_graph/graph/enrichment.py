"""Best-effort attribute enrichment from free-text person descriptions.

Each heuristic is independent and low precision. A heuristic that finds nothing
returns None; none of them raise on odd input.
"""

import re
from collections.abc import Callable
from typing import Any

_BIRTH_PATTERNS = [
    re.compile(r"\bfödd\s+(\d{4})", re.IGNORECASE),
    re.compile(r"\bborn\s+(\d{4})", re.IGNORECASE),
]

_DEATH_PATTERNS = [
    re.compile(r"\bdöd\s+(\d{4})", re.IGNORECASE),
    re.compile(r"\bdied\s+(\d{4})", re.IGNORECASE),
    re.compile(r"†\s*(\d{4})"),
]

_MALE_WORDS = ["son", "far", "bror", "make", "man", "father", "brother", "husband"]
_FEMALE_WORDS = [
    "dotter", "mor", "syster", "maka", "kvinna", "daughter", "mother", "sister", "wife",
]
_MALE_PATTERN = re.compile(r"\b(" + "|".join(_MALE_WORDS) + r")\b", re.IGNORECASE)
_FEMALE_PATTERN = re.compile(r"\b(" + "|".join(_FEMALE_WORDS) + r")\b", re.IGNORECASE)

# Patronymic surname endings
_MALE_SUFFIXES = ("son", "sen")
_FEMALE_SUFFIXES = ("dotter", "dottir")

OCCUPATIONS = [
    "lärare", "läkare", "sjuksköterska", "ingenjör", "arbetare", "bonde", "köpman",
    "soldat", "präst", "artist", "författare", "musiker", "lågstadielärare",
    "rektor", "direktör", "handlare", "skeppsredare", "fabrikör", "mästare",
    "teacher", "doctor", "nurse", "engineer", "worker", "farmer", "merchant",
    "soldier", "priest", "writer", "musician",
]

_PLACE = r"([A-ZÅÄÖ][a-zåäöéü]+(?:-[A-ZÅÄÖ][a-zåäöéü]+)?)"

# Ordered: the more specific phrases first. Only the keyword is case-insensitive,
# the place itself must be capitalized.
LOCATION_PATTERNS = [
    re.compile(r"\b(?i:bosatt\s+i)\s+" + _PLACE),
    re.compile(r"\b(?i:född\s+i)\s+" + _PLACE),
    re.compile(r"\b(?i:från)\s+" + _PLACE),
    re.compile(r"\b(?i:i)\s+" + _PLACE),
    re.compile(r"\b(?i:born\s+in)\s+" + _PLACE),
    re.compile(r"\b(?i:lived\s+in)\s+" + _PLACE),
    re.compile(r"\b(?i:from)\s+" + _PLACE),
    re.compile(r"\b(?i:in)\s+" + _PLACE),
]


def _first_year(patterns: list[re.Pattern[str]], text: str) -> int | None:
    for pattern in patterns:
        match = pattern.search(text)
        if match:
            return int(match.group(1))
    return None


def extract_birth_year(name: str, description: str) -> int | None:
    """Find "född 1920" / "born 1920"."""
    return _first_year(_BIRTH_PATTERNS, description)


def extract_death_year(name: str, description: str) -> int | None:
    """Find "död 1990" / "died 1990" / "† 1990"."""
    return _first_year(_DEATH_PATTERNS, description)


def infer_gender(name: str, description: str) -> str:
    """Guess gender from role nouns, then from a patronymic surname.

    Returns:
        "male", "female" or "other"
    """
    if _MALE_PATTERN.search(description):
        return "male"
    if _FEMALE_PATTERN.search(description):
        return "female"

    parts = name.strip().lower().split()
    surname = parts[-1] if parts else ""
    if surname.endswith(_FEMALE_SUFFIXES):
        return "female"
    if surname.endswith(_MALE_SUFFIXES):
        return "male"
    return "other"


def extract_occupation(name: str, description: str) -> str | None:
    lowered = description.lower()
    for occupation in OCCUPATIONS:
        if occupation in lowered:
            return occupation[:1].upper() + occupation[1:]
    return None


def extract_location(name: str, description: str) -> str | None:
    for pattern in LOCATION_PATTERNS:
        match = pattern.search(description)
        if match:
            return match.group(1)
    return None


# attribute name -> heuristic
ENRICHERS: dict[str, Callable[[str, str], Any]] = {
    "birth_year": extract_birth_year,
    "death_year": extract_death_year,
    "gender": infer_gender,
    "occupation": extract_occupation,
    "location": extract_location,
}


def enrich(name: str, description: str | None) -> dict[str, Any]:
    """Run every heuristic over a person's description.

    Args:
        name: Display name of the person
        description: Free-text description (may be empty)

    Returns:
        Mapping of attribute name to the inferred value (None when not found)
    """
    text = description or ""
    return {attribute: heuristic(name, text) for attribute, heuristic in ENRICHERS.items()}
