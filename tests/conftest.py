"""Shared test fixtures and utilities for countrycodes tests."""

import pytest

from countrycodes.countries.countrydirectory import build_directory, clear_cache, load_directory


@pytest.fixture
def directory():
    """The packaged country directory."""
    return load_directory()


@pytest.fixture
def fresh_cache():
    """Clear the directory cache before and after a test that reloads data."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def sparse_directory():
    """Small directory where code and region tables disagree.

    - Atlantis has a region but no calling code
    - Lemuria has a calling code but no region
    """
    return build_directory([
        {"name": "India", "calling_code": "+91", "region": "Asia"},
        {"name": "Atlantis", "region": "Europe"},
        {"name": "Lemuria", "calling_code": "+999"},
    ])


@pytest.fixture
def sample_countries():
    """Fixture providing sample country names and their calling codes."""
    return {
        "India": "+91",
        "United States": "+1",
        "United Kingdom": "+44",
        "Germany": "+49",
        "New Zealand": "+64",
        "South Africa": "+27",
    }
