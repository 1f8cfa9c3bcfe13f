"""Country directory: supported names, calling codes and regions.

The directory is loaded from countries.yaml once per process and exposed
through read-only views. Two independent tables are built from it:

  - name -> calling code, keyed by the exact canonical name
  - name -> region, keyed by the lowercase name, "Unknown" when absent

API:
  load_directory(path=None) -> CountryDirectory
  lookup_code(name) -> str                 # raises CountryNotFoundError
  lookup_region(name) -> str               # never raises
  all_codes() -> Mapping[str, str]
  all_supported_names() -> frozenset[str]
  canonical_name(name) -> Optional[str]
  list_countries(region=None) -> pd.DataFrame
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple, Union

import pandas as pd

from countrycodes.countries.countrynormalize import country_key
from countrycodes.exceptions import CountryNotFoundError
from countrycodes.utils.dataloader import find_data_file, load_yaml_file

logger = logging.getLogger(__name__)

DATA_PATH_ENV = "COUNTRYCODES_DATA_PATH"

UNKNOWN_REGION = "Unknown"
REGIONS = ("Asia", "Americas", "Europe", "Oceania", "Africa", UNKNOWN_REGION)

_CALLING_CODE = re.compile(r"\+\d+")


@dataclass(frozen=True)
class CountryDirectory:
    """Immutable view over the supported-country tables."""

    names: Tuple[str, ...]
    codes: Mapping[str, str]
    regions: Mapping[str, str]
    source: Optional[Path] = None
    _by_key: Mapping[str, str] = field(default_factory=dict, repr=False)

    @property
    def supported_names(self) -> frozenset:
        return frozenset(self.names)

    def canonical_name(self, name: str) -> Optional[str]:
        """Canonical spelling of a supported name, compared case-insensitively."""
        return self._by_key.get(country_key(name))

    def lookup_code(self, name: str) -> str:
        """Calling code for the exact name; no normalization is applied."""
        code = self.codes.get(name) if isinstance(name, str) else None
        if code is None:
            raise CountryNotFoundError(name)
        return code

    def lookup_region(self, name: str) -> str:
        return self.regions.get(country_key(name), UNKNOWN_REGION)


def build_directory(entries: Iterable[dict], source: Optional[Path] = None) -> CountryDirectory:
    """Validate raw entries and build a CountryDirectory.

    Args:
        entries: Dicts with 'name' and optional 'calling_code' / 'region'
        source: Where the entries came from (for error messages and logging)

    Returns:
        CountryDirectory with names in lexicographic order

    Raises:
        ValueError: On blank or duplicate names, malformed calling codes,
            or regions outside REGIONS
    """
    where = f" in {source}" if source else ""
    codes = {}
    regions = {}
    by_key = {}

    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(f"Country entry #{i}{where} is not a mapping: {entry!r}")

        name = str(entry.get("name") or "").strip()
        if not name:
            raise ValueError(f"Country entry #{i}{where} has no name")

        key = country_key(name)
        if key in by_key:
            raise ValueError(f"Duplicate country '{name}'{where} (already listed as '{by_key[key]}')")
        by_key[key] = name

        code = entry.get("calling_code")
        if code is not None:
            code = str(code).strip()
            if not _CALLING_CODE.fullmatch(code):
                raise ValueError(f"Invalid calling code for {name}{where}: {code!r} (expected '+<digits>')")
            codes[name] = code

        region = entry.get("region")
        if region is not None:
            region = str(region).strip()
            if region not in REGIONS:
                raise ValueError(f"Unknown region for {name}{where}: {region!r} (expected one of {', '.join(REGIONS)})")
            regions[key] = region

    return CountryDirectory(
        names=tuple(sorted(by_key.values())),
        codes=MappingProxyType(codes),
        regions=MappingProxyType(regions),
        source=source,
        _by_key=MappingProxyType(by_key),
    )


def _resolve_data_path(path: Optional[Union[str, Path]]) -> Path:
    """Pick the countries file: explicit path, then environment, then package data."""
    if path is not None:
        return Path(path)

    env_path = os.environ.get(DATA_PATH_ENV)
    if env_path:
        return Path(env_path)

    filenames = ["countries.yaml", "countries.yml"]
    found_path = find_data_file(module_file=__file__, filenames=filenames)
    if found_path is None:
        package_dir = Path(__file__).parent / "data"
        raise FileNotFoundError(
            f"No country directory found: {DATA_PATH_ENV} is not set and "
            f"{package_dir} has none of {', '.join(filenames)}. "
            f"Set {DATA_PATH_ENV} to a countries.yaml file or reinstall countrycodes."
        )
    return found_path


@lru_cache(maxsize=1)
def load_directory(path: Optional[Union[str, Path]] = None) -> CountryDirectory:
    """Load the country directory into memory.

    Loading priority:
    1. Explicit path if provided
    2. COUNTRYCODES_DATA_PATH environment variable
    3. Package data (countries/data/countries.yaml)

    Args:
        path: Optional explicit path to a countries.yaml file

    Returns:
        CountryDirectory, cached for the life of the process

    Raises:
        FileNotFoundError: If no data file is available
        ValueError: If the file contents are malformed
    """
    data_path = _resolve_data_path(path)
    data = load_yaml_file(data_path)
    entries = data.get("countries")
    if not isinstance(entries, list):
        raise ValueError(f"Expected a 'countries' list in {data_path}")

    directory = build_directory(entries, source=data_path)
    logger.info(
        f"Loaded {len(directory.names)} countries "
        f"({len(directory.codes)} calling codes, {len(directory.regions)} regions) from {data_path}"
    )
    return directory


def clear_cache():
    """Clear the LRU cache for load_directory.

    Useful for testing or when data needs to be reloaded.
    """
    load_directory.cache_clear()


def lookup_code(name: str) -> str:
    """Calling code for an exact canonical name.

    Raises:
        CountryNotFoundError: If the name has no calling-code entry

    Examples:
        >>> lookup_code("India")
        '+91'
    """
    return load_directory().lookup_code(name)


def lookup_region(name: str) -> str:
    """Region for a name, matched case-insensitively; "Unknown" if unclassified.

    Examples:
        >>> lookup_region("new zealand")
        'Oceania'

        >>> lookup_region("Atlantis")
        'Unknown'
    """
    return load_directory().lookup_region(name)


def all_codes() -> Mapping[str, str]:
    """Read-only mapping of canonical name -> calling code."""
    return load_directory().codes


def all_supported_names() -> frozenset:
    """Set of canonical supported country names."""
    return load_directory().supported_names


def canonical_name(name: str) -> Optional[str]:
    """Canonical spelling of a supported name, or None.

    Examples:
        >>> canonical_name("  united   KINGDOM")
        'United Kingdom'
    """
    return load_directory().canonical_name(name)


def list_countries(region: Optional[str] = None) -> pd.DataFrame:
    """List supported countries, optionally filtered by region.

    Args:
        region: Optional region filter (e.g., "Europe", "Unknown"),
                matched case-insensitively

    Returns:
        DataFrame with columns name, calling_code, region; calling_code is
        None for countries without a code

    Examples:
        >>> list_countries(region="Oceania")["name"].tolist()
        ['Australia', 'New Zealand']
    """
    directory = load_directory()
    df = pd.DataFrame(
        [
            {
                "name": name,
                "calling_code": directory.codes.get(name),
                "region": directory.lookup_region(name),
            }
            for name in directory.names
        ],
        columns=["name", "calling_code", "region"],
    )

    if region is not None:
        df = df[df["region"].str.lower() == str(region).strip().lower()]

    return df.reset_index(drop=True)


__all__ = [
    "CountryDirectory",
    "REGIONS",
    "UNKNOWN_REGION",
    "DATA_PATH_ENV",
    "build_directory",
    "load_directory",
    "clear_cache",
    "lookup_code",
    "lookup_region",
    "all_codes",
    "all_supported_names",
    "canonical_name",
    "list_countries",
]
