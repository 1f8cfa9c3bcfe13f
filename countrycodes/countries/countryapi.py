"""Country code lookup API.

Public API for calling-code and region lookups. Callers that serve these
over HTTP get plain dicts back (country_record, validate_country) and
render errors from the exception's to_dict().

Two lookup paths exist on purpose:
  - get_code(name) is keyed by the raw string, with no normalization
  - country_record(name) validates and canonicalizes first
"""

import logging
from typing import Iterable, List, Mapping, Optional

from countrycodes.countries.countrydirectory import (
    all_codes as _all_codes,
    all_supported_names as _all_supported_names,
    load_directory,
)
from countrycodes.countries.countryidentity import is_valid, suggest
from countrycodes.countries.countrynormalize import normalize_country_name
from countrycodes.exceptions import CountryNotFoundError, InvalidCountryNameError

logger = logging.getLogger(__name__)


def get_code(name: str) -> str:
    """Get the calling code for a country name.

    The name is used as-is: "India" resolves, "india" does not. Use
    country_record() to validate and canonicalize first.

    Args:
        name: Exact canonical country name

    Returns:
        Calling code (e.g., "+91")

    Raises:
        CountryNotFoundError: If the name has no calling-code entry

    Examples:
        >>> get_code("India")
        '+91'

        >>> get_code("Atlantis")
        Traceback (most recent call last):
        ...
        countrycodes.exceptions.CountryNotFoundError: Country not found: Atlantis
    """
    return load_directory().lookup_code(name)


def get_codes(names: Iterable[str]) -> List[Optional[str]]:
    """Batch get_code: calling codes, or None for names not found.

    Examples:
        >>> get_codes(["India", "Atlantis", "Germany"])
        ['+91', None, '+49']
    """
    directory = load_directory()
    results = []
    for name in names:
        try:
            results.append(directory.lookup_code(name))
        except CountryNotFoundError:
            logger.debug(f"No calling code for {name!r}")
            results.append(None)
    return results


def get_region(name: str) -> str:
    """Get the region for a country name; "Unknown" when unclassified.

    Examples:
        >>> get_region("India")
        'Asia'

        >>> get_region("Japan")
        'Unknown'
    """
    return load_directory().lookup_region(name)


def all_codes() -> Mapping[str, str]:
    """Read-only mapping of every country name to its calling code."""
    return _all_codes()


def all_supported_names() -> frozenset:
    """Every supported canonical country name."""
    return _all_supported_names()


def country_record(name: str) -> dict:
    """Validate a country name and return its code and region.

    Args:
        name: Country name as typed by a user (any case or spacing)

    Returns:
        {"countryName": canonical name, "countryCode": code, "region": region}

    Raises:
        InvalidCountryNameError: If the name is blank or not supported;
            carries up to three suggestions
        CountryNotFoundError: If the name is supported but has no calling code

    Examples:
        >>> country_record("  united   kingdom ")
        {'countryName': 'United Kingdom', 'countryCode': '+44', 'region': 'Europe'}
    """
    directory = load_directory()
    if not is_valid(name, directory=directory):
        suggestions = suggest(name, directory=directory)
        logger.debug(f"Rejected country name {name!r}; suggestions: {suggestions}")
        raise InvalidCountryNameError(name, suggestions)

    canonical = directory.canonical_name(normalize_country_name(name))
    return {
        "countryName": canonical,
        "countryCode": directory.lookup_code(canonical),
        "region": directory.lookup_region(canonical),
    }


def validate_country(name: str) -> dict:
    """Validation payload: {"countryName", "isValid", "suggestions"}.

    Suggestions are only computed for invalid names.

    Examples:
        >>> validate_country("Deutschland")
        {'countryName': 'Deutschland', 'isValid': False, 'suggestions': ['Germany']}
    """
    valid = is_valid(name)
    return {
        "countryName": name,
        "isValid": valid,
        "suggestions": [] if valid else suggest(name),
    }


__all__ = [
    "get_code",
    "get_codes",
    "get_region",
    "all_codes",
    "all_supported_names",
    "country_record",
    "validate_country",
]
