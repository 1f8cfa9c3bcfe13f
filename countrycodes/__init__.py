"""countrycodes - Country name validation and calling-code lookup

Public API for validating country names, suggesting corrections, and
looking up calling codes and regions.

Usage:
    from countrycodes import is_valid, suggest, get_code, get_region, country_record

    is_valid("India")               # True
    suggest("Urited States")        # ['United States']
    suggest("UK")                   # ['United Kingdom']
    get_code("India")               # '+91'
    get_region("India")             # 'Asia'
    country_record("new zealand")   # {'countryName': 'New Zealand', 'countryCode': '+64', 'region': 'Oceania'}
"""

__version__ = "0.0.1"

# ============================================================================
# Lookup API
# ============================================================================

from .countries.countryapi import (
    get_code,              # Primary API - calling code for an exact name
    get_codes,             # Batch calling-code lookup
    get_region,            # Region for a name ("Unknown" when unclassified)
    all_codes,             # Every name -> calling code
    all_supported_names,   # Every supported canonical name
    country_record,        # Validate, canonicalize, then look up code + region
    validate_country,      # Validation payload with suggestions
)

# ============================================================================
# Validation & Suggestions
# ============================================================================

from .countries.countryidentity import (
    is_valid,              # Is this a supported country name?
    suggest,               # Up to 3 corrections for an unrecognized name
    match_country,         # Top-K scored matches
)

from .countries.countrydirectory import (
    load_directory,        # Load (cached) country tables
    list_countries,        # DataFrame of supported countries
)

from .countries.countryaliases import resolve_alias
from .countries.countrynormalize import normalize_country_name
from .utils.distance import edit_distance

# ============================================================================
# Errors
# ============================================================================

from .exceptions import (
    CountryCodesError,
    InvalidInputError,
    InvalidCountryNameError,
    CountryNotFoundError,
)

__all__ = [
    # Version
    "__version__",

    # Lookup
    "get_code",
    "get_codes",
    "get_region",
    "all_codes",
    "all_supported_names",
    "country_record",
    "validate_country",

    # Validation & suggestions
    "is_valid",
    "suggest",
    "match_country",
    "load_directory",
    "list_countries",
    "resolve_alias",
    "normalize_country_name",
    "edit_distance",

    # Errors
    "CountryCodesError",
    "InvalidInputError",
    "InvalidCountryNameError",
    "CountryNotFoundError",
]
