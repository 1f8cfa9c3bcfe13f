"""Shared utilities for the countrycodes package."""

from countrycodes.utils.dataloader import (
    find_data_file,
    load_yaml_file,
)
from countrycodes.utils.normalize import (
    collapse_whitespace,
    is_blank,
    normalize_key,
    capitalize_first,
    ascii_lower,
    ascii_upper,
)
from countrycodes.utils.distance import (
    edit_distance,
    within_distance,
)

__all__ = [
    # Data loading
    "find_data_file",
    "load_yaml_file",
    # Normalization
    "collapse_whitespace",
    "is_blank",
    "normalize_key",
    "capitalize_first",
    "ascii_lower",
    "ascii_upper",
    # Edit distance
    "edit_distance",
    "within_distance",
]
