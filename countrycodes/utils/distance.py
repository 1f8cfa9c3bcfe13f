"""Edit distance helpers.

Thin wrappers over RapidFuzz's Levenshtein implementation (unit cost for
insertion, deletion and substitution, compared per code point).
"""

try:
    from rapidfuzz.distance import Levenshtein
except ImportError as e:
    raise ImportError("rapidfuzz not installed. pip install rapidfuzz") from e


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance between two strings.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character edits turning a into b

    Examples:
        >>> edit_distance("kitten", "sitting")
        3

        >>> edit_distance("india", "india")
        0
    """
    return Levenshtein.distance(a or "", b or "")


def within_distance(a: str, b: str, max_distance: int) -> bool:
    """True when edit_distance(a, b) <= max_distance.

    Uses a score cutoff so the comparison stops as soon as the bound is
    exceeded.

    Examples:
        >>> within_distance("urited states", "united states", 2)
        True
    """
    if max_distance < 0:
        return False
    d = Levenshtein.distance(a or "", b or "", score_cutoff=max_distance)
    return d <= max_distance


__all__ = [
    "edit_distance",
    "within_distance",
]
