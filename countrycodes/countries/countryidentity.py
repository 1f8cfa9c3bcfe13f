"""
Country Name Validation and Suggestions
---------------------------------------

Validation:
  is_valid(raw) -> bool
    The normalized input must name a supported country (case-insensitive).

Suggestions for an unrecognized name:
  1) Misspelling table: a known alias yields exactly one suggestion
  2) Otherwise every supported name, in directory order, is a candidate if
     - it contains the input, or
     - the input contains it, or
     - the two are within edit distance 2 (case-folded)
     The first three candidates found are returned.

Scored matching for review UIs:
  match_country(raw, k=5) -> list[dict]   # RapidFuzz WRatio over names + aliases
"""

from __future__ import annotations

import logging
from typing import List, Optional

try:
    from rapidfuzz import process, fuzz
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e

from countrycodes.countries.countryaliases import aliases_for, resolve_alias
from countrycodes.countries.countrydirectory import CountryDirectory, load_directory
from countrycodes.countries.countrynormalize import country_key, normalize_country_name
from countrycodes.exceptions import InvalidInputError
from countrycodes.utils.distance import within_distance

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 3
MAX_EDIT_DISTANCE = 2


def _normalized_or_none(raw: str) -> Optional[str]:
    try:
        return normalize_country_name(raw)
    except InvalidInputError:
        return None


def is_valid(raw: str, *, directory: Optional[CountryDirectory] = None) -> bool:
    """True when raw names a supported country.

    Args:
        raw: Country name as typed by a user
        directory: Optional directory to check against (defaults to the loaded one)

    Examples:
        >>> is_valid("India")
        True

        >>> is_valid("  new   zealand ")
        True

        >>> is_valid("   ")
        False
    """
    normalized = _normalized_or_none(raw)
    if normalized is None:
        return False
    directory = directory or load_directory()
    return directory.canonical_name(normalized) is not None


def _is_candidate(query_key: str, name: str, max_distance: int) -> bool:
    name_key = country_key(name)
    return (
        query_key in name_key
        or name_key in query_key
        or within_distance(query_key, name_key, max_distance)
    )


def suggest(
    raw: str,
    *,
    max_suggestions: int = MAX_SUGGESTIONS,
    max_distance: int = MAX_EDIT_DISTANCE,
    directory: Optional[CountryDirectory] = None,
) -> List[str]:
    """Suggest supported country names for an unrecognized input.

    Args:
        raw: Country name as typed by a user
        max_suggestions: Maximum number of names to return. Default 3.
        max_distance: Maximum edit distance for a fuzzy candidate. Default 2.
        directory: Optional directory to search (defaults to the loaded one)

    Returns:
        Canonical names, at most max_suggestions, no duplicates.
        Empty for blank input and for names that are already valid.

    Examples:
        >>> suggest("USA")
        ['United States']

        >>> suggest("Urited States")
        ['United States']

        >>> suggest("India")
        []
    """
    normalized = _normalized_or_none(raw)
    if normalized is None:
        return []

    directory = directory or load_directory()
    if directory.canonical_name(normalized) is not None:
        return []

    alias_hit = resolve_alias(normalized)
    if alias_hit:
        logger.debug(f"Alias match for {raw!r}: {alias_hit}")
        return [alias_hit]

    query_key = country_key(normalized)
    suggestions = []
    for name in directory.names:
        if len(suggestions) >= max_suggestions:
            break
        if _is_candidate(query_key, name, max_distance):
            suggestions.append(name)

    logger.debug(f"Suggestions for {raw!r}: {suggestions}")
    return suggestions


def match_country(
    raw: str,
    *,
    k: int = 5,
    directory: Optional[CountryDirectory] = None,
) -> List[dict]:
    """Top-K candidates + scores (for review UIs).

    Scores the input against every supported name and its aliases with
    RapidFuzz WRatio; each country keeps its best score.

    Args:
        raw: Country name to match
        k: Number of top candidates to return. Default 5.
        directory: Optional directory to search (defaults to the loaded one)

    Returns:
        List of dicts with name, calling_code, region and score (0-100),
        ordered by descending score, then name.

    Examples:
        >>> match_country("Untied Kingdom", k=2)[0]["name"]
        'United Kingdom'
    """
    normalized = _normalized_or_none(raw)
    if normalized is None or k <= 0:
        return []

    directory = directory or load_directory()

    choices = {}
    for name in directory.names:
        choices[(name, name)] = country_key(name)
        for alias in aliases_for(name):
            choices[(name, alias)] = alias

    best = {}
    for _, score, (name, _) in process.extract(
        country_key(normalized), choices, scorer=fuzz.WRatio, limit=None
    ):
        if score > best.get(name, -1.0):
            best[name] = score

    ranked = sorted(best.items(), key=lambda item: (-item[1], item[0]))[:k]
    return [
        {
            "name": name,
            "calling_code": directory.codes.get(name),
            "region": directory.lookup_region(name),
            "score": score,
        }
        for name, score in ranked
    ]


__all__ = [
    "MAX_SUGGESTIONS",
    "MAX_EDIT_DISTANCE",
    "is_valid",
    "suggest",
    "match_country",
]
