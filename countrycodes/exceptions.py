"""Error types raised by the countrycodes API.

Each error also subclasses the matching built-in (ValueError, LookupError),
so callers that only know the built-ins still catch them.
"""

from typing import List, Optional


class CountryCodesError(Exception):
    """Base class for countrycodes errors."""


class InvalidInputError(CountryCodesError, ValueError):
    """Raised when a country name is empty or whitespace-only."""

    def __init__(self, value: Optional[str] = None):
        self.value = value
        super().__init__("Country name must not be empty")


class InvalidCountryNameError(CountryCodesError, ValueError):
    """Raised when a name is not a supported country.

    Carries up to three suggestions the caller can offer instead.
    """

    def __init__(self, country_name: str, suggestions: Optional[List[str]] = None):
        self.country_name = country_name
        self.suggestions = list(suggestions or [])
        if suggestions is None:
            message = f"Invalid country name: '{country_name}'"
        else:
            hint = ", ".join(self.suggestions) if self.suggestions else "N/A"
            message = f"Invalid country name: '{country_name}'. Did you mean one of: {hint}"
        super().__init__(message)

    def to_dict(self) -> dict:
        """Error payload: {'error', 'message', 'suggestions'}."""
        return {
            "error": "Invalid country name",
            "message": str(self),
            "suggestions": list(self.suggestions),
        }


class CountryNotFoundError(CountryCodesError, LookupError):
    """Raised when a name has no entry in the calling-code table."""

    def __init__(self, country_name: str):
        self.country_name = country_name
        super().__init__(f"Country not found: {country_name}")

    def to_dict(self) -> dict:
        """Error payload: {'error', 'message'}."""
        return {
            "error": "Country not found",
            "message": str(self),
        }


__all__ = [
    "CountryCodesError",
    "InvalidInputError",
    "InvalidCountryNameError",
    "CountryNotFoundError",
]
