"""Shared data loading utilities.

Finds and parses the packaged YAML tables.
"""

from pathlib import Path
from typing import List, Optional


def find_data_file(
    module_file: str,
    filenames: List[str],
) -> Optional[Path]:
    """Find a data file in the calling module's data/ directory.

    Args:
        module_file: __file__ from the calling module
        filenames: Candidate filenames, checked in order

    Returns:
        Path to the first file that exists, or None

    Examples:
        >>> # From countries/countrydirectory.py
        >>> path = find_data_file(__file__, ["countries.yaml"])
    """
    data_dir = Path(module_file).parent / "data"
    for filename in filenames:
        p = data_dir / filename
        if p.exists():
            return p
    return None


def load_yaml_file(path: Path) -> dict:
    """
    Load and parse YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If file does not exist
        ValueError: If the document is not a mapping
    """
    import yaml

    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    return data


__all__ = [
    "find_data_file",
    "load_yaml_file",
]
