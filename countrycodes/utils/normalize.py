"""Shared text normalization utilities.

This module provides the generic whitespace and case handling used by the
country normalizer, directory and suggester.
"""

import re
import string


_WHITESPACE = re.compile(r"\s+")

# A-Z <-> a-z only; dotless i, long s and other non-ASCII letters map to themselves
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def ascii_lower(s: str) -> str:
    """Lowercase A-Z only; every other character is left as-is."""
    return s.translate(_ASCII_LOWER)


def ascii_upper(s: str) -> str:
    """Uppercase a-z only; every other character is left as-is."""
    return s.translate(_ASCII_UPPER)


def collapse_whitespace(s: str) -> str:
    """Collapse runs of whitespace to a single space and trim.

    Args:
        s: Raw text

    Returns:
        Text with single internal spaces and no leading/trailing whitespace

    Examples:
        >>> collapse_whitespace("  united   states ")
        'united states'

        >>> collapse_whitespace("New\\tZealand")
        'New Zealand'
    """
    if not s:
        return ""
    return _WHITESPACE.sub(" ", s).strip()


def is_blank(s) -> bool:
    """True when s is None, empty, or whitespace-only."""
    return s is None or not str(s).strip()


def normalize_key(s: str) -> str:
    """Comparison key: collapsed whitespace, ASCII lowercase.

    Two strings that differ only in A-Z case or spacing share the same key.

    Examples:
        >>> normalize_key("  New   ZEALAND ")
        'new zealand'
    """
    return ascii_lower(collapse_whitespace(s))


def capitalize_first(s: str) -> str:
    """ASCII-lowercase the whole string, then ASCII-uppercase its first character.

    Unlike str.title(), later words are left in lowercase.

    Examples:
        >>> capitalize_first("united STATES")
        'United states'
    """
    if not s:
        return ""
    s = ascii_lower(s)
    return ascii_upper(s[:1]) + s[1:]


__all__ = [
    "ascii_lower",
    "ascii_upper",
    "collapse_whitespace",
    "is_blank",
    "normalize_key",
    "capitalize_first",
]
