"""Common misspellings and colloquial names for supported countries.

Aliases are matched exactly after case folding; a hit bypasses fuzzy
matching entirely.
"""

from typing import List, Optional

from countrycodes.countries.countrynormalize import country_key


# alias (lowercase) -> canonical directory name
_ALIASES = {
    "us": "United States",
    "usa": "United States",
    "uk": "United Kingdom",
    "britain": "United Kingdom",
    "deutschland": "Germany",
    "deutchland": "Germany",
}


def resolve_alias(normalized: str) -> Optional[str]:
    """Canonical name for a known alias, or None.

    Args:
        normalized: Country name, any case

    Examples:
        >>> resolve_alias("Usa")
        'United States'

        >>> resolve_alias("Deutchland")
        'Germany'

        >>> resolve_alias("Atlantis") is None
        True
    """
    return _ALIASES.get(country_key(normalized))


def aliases_for(canonical: str) -> List[str]:
    """All known aliases of a canonical name, sorted.

    Examples:
        >>> aliases_for("United Kingdom")
        ['britain', 'uk']
    """
    key = country_key(canonical)
    return sorted(alias for alias, name in _ALIASES.items() if country_key(name) == key)


__all__ = [
    "resolve_alias",
    "aliases_for",
]
