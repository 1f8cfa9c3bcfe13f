"""
Country Name Normalization Functions
------------------------------------

Two normalization functions for different use cases:
  1. normalize_country_name: the normalized display form of raw input
  2. country_key: case-folded comparison key used for every table lookup

Examples:
  >>> normalize_country_name("  united   STATES ")
  'United states'

  >>> country_key("  united   STATES ")
  'united states'

Only the first character of the whole name is capitalized, so multi-word
names do not come out in Title Case ("new zealand" -> "New zealand").
Lookups therefore never compare the normalized form directly against
canonical names; they compare country_key() values.
"""

from countrycodes.exceptions import InvalidInputError
from countrycodes.utils.normalize import (
    capitalize_first,
    collapse_whitespace,
    is_blank,
    normalize_key,
)


def normalize_country_name(raw: str) -> str:
    """
    Normalize a raw country name.

    Transformations:
      - Collapse internal whitespace runs to one space
      - Strip leading/trailing whitespace
      - Lowercase
      - Uppercase the first character of the whole string

    Args:
        raw: Country name as typed by a user

    Returns:
        Normalized name

    Raises:
        InvalidInputError: If raw is None, empty or whitespace-only

    Examples:
        >>> normalize_country_name("india")
        'India'

        >>> normalize_country_name("NEW   ZEALAND")
        'New zealand'
    """
    if is_blank(raw):
        raise InvalidInputError(raw)
    return capitalize_first(collapse_whitespace(str(raw)))


def country_key(name: str) -> str:
    """Case-folded comparison key for a country name ('' for blank input)."""
    if is_blank(name):
        return ""
    return normalize_key(str(name))


__all__ = [
    "normalize_country_name",
    "country_key",
]
