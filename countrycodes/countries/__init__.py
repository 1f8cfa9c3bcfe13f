"""Country name validation, suggestions and calling-code lookup."""

from countrycodes.countries.countryapi import (
    get_code,
    get_codes,
    get_region,
    all_codes,
    all_supported_names,
    country_record,
    validate_country,
)
from countrycodes.countries.countryidentity import (
    is_valid,
    suggest,
    match_country,
)
from countrycodes.countries.countrydirectory import (
    load_directory,
    list_countries,
    canonical_name,
)
from countrycodes.countries.countryaliases import resolve_alias
from countrycodes.countries.countrynormalize import normalize_country_name

__all__ = [
    "get_code",
    "get_codes",
    "get_region",
    "all_codes",
    "all_supported_names",
    "country_record",
    "validate_country",
    "is_valid",
    "suggest",
    "match_country",
    "load_directory",
    "list_countries",
    "canonical_name",
    "resolve_alias",
    "normalize_country_name",
]
