"""Tests for the country directory tables."""

import pytest

from countrycodes.countries.countrydirectory import (
    DATA_PATH_ENV,
    REGIONS,
    UNKNOWN_REGION,
    all_codes,
    all_supported_names,
    build_directory,
    canonical_name,
    list_countries,
    load_directory,
    lookup_code,
    lookup_region,
)
from countrycodes.exceptions import CountryNotFoundError


EXPECTED_NAMES = {
    "India", "United States", "United Kingdom", "Germany", "France",
    "Canada", "Australia", "Japan", "Brazil", "Mexico", "Italy",
    "China", "South Africa", "New Zealand", "Argentina",
}


# ---- Packaged data ----

def test_supported_names(directory):
    names = all_supported_names()
    assert names == EXPECTED_NAMES
    assert len(directory.names) == len(set(directory.names))
    assert all(name.strip() for name in names)


def test_names_are_sorted(directory):
    assert list(directory.names) == sorted(directory.names)


def test_all_codes_well_formed():
    codes = all_codes()
    assert codes["India"] == "+91"
    assert codes["United Kingdom"] == "+44"
    for name, code in codes.items():
        assert name in EXPECTED_NAMES
        assert code.startswith("+") and code[1:].isdigit()


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        all_codes()["Atlantis"] = "+0"
    with pytest.raises(AttributeError):
        all_supported_names().add("Atlantis")


def test_load_directory_is_cached():
    assert load_directory() is load_directory()


# ---- lookup_code ----

def test_lookup_code(sample_countries):
    for name, code in sample_countries.items():
        assert lookup_code(name) == code


def test_lookup_code_exact_name_only():
    """No normalization: case or spacing differences are not found"""
    with pytest.raises(CountryNotFoundError):
        lookup_code("india")
    with pytest.raises(CountryNotFoundError):
        lookup_code(" India")


def test_lookup_code_not_found():
    with pytest.raises(CountryNotFoundError) as excinfo:
        lookup_code("Atlantis")
    assert excinfo.value.country_name == "Atlantis"
    assert str(excinfo.value) == "Country not found: Atlantis"


def test_lookup_code_none():
    with pytest.raises(CountryNotFoundError):
        lookup_code(None)


# ---- lookup_region ----

@pytest.mark.parametrize("name,region", [
    ("India", "Asia"),
    ("China", "Asia"),
    ("United States", "Americas"),
    ("Argentina", "Americas"),
    ("France", "Europe"),
    ("New Zealand", "Oceania"),
    ("South Africa", "Africa"),
])
def test_lookup_region(name, region):
    assert lookup_region(name) == region


def test_lookup_region_case_insensitive():
    assert lookup_region("new zealand") == "Oceania"
    assert lookup_region("UNITED KINGDOM") == "Europe"


def test_lookup_region_unknown():
    assert lookup_region("Atlantis") == UNKNOWN_REGION
    assert lookup_region("") == UNKNOWN_REGION
    assert lookup_region(None) == UNKNOWN_REGION


def test_japan_has_code_but_no_region():
    """Code and region tables are independent"""
    assert lookup_code("Japan") == "+81"
    assert lookup_region("Japan") == UNKNOWN_REGION


def test_sparse_directory(sparse_directory):
    assert sparse_directory.lookup_region("Atlantis") == "Europe"
    with pytest.raises(CountryNotFoundError):
        sparse_directory.lookup_code("Atlantis")
    assert sparse_directory.lookup_code("Lemuria") == "+999"
    assert sparse_directory.lookup_region("Lemuria") == UNKNOWN_REGION
    assert sparse_directory.supported_names == {"India", "Atlantis", "Lemuria"}


# ---- canonical_name ----

def test_canonical_name():
    assert canonical_name("  united   KINGDOM") == "United Kingdom"
    assert canonical_name("New zealand") == "New Zealand"
    assert canonical_name("Atlantis") is None
    assert canonical_name("") is None


# ---- list_countries ----

def test_list_countries():
    df = list_countries()
    assert list(df.columns) == ["name", "calling_code", "region"]
    assert len(df) == len(EXPECTED_NAMES)
    assert set(df["region"]) <= set(REGIONS)


def test_list_countries_by_region():
    assert list_countries(region="Oceania")["name"].tolist() == ["Australia", "New Zealand"]
    assert list_countries(region="europe")["name"].tolist() == ["France", "Germany", "Italy", "United Kingdom"]
    assert list_countries(region="Unknown")["name"].tolist() == ["Japan"]
    assert list_countries(region="Antarctica").empty


# ---- build_directory validation ----

class TestBuildDirectory:
    """Load-time validation of directory entries"""

    def test_blank_name(self):
        with pytest.raises(ValueError, match="has no name"):
            build_directory([{"name": "  ", "calling_code": "+1"}])

    def test_duplicate_name(self):
        with pytest.raises(ValueError, match="Duplicate country"):
            build_directory([{"name": "India"}, {"name": "india"}])

    @pytest.mark.parametrize("code", ["91", "+9a", "+", "++91", "+ 91"])
    def test_bad_calling_code(self, code):
        with pytest.raises(ValueError, match="Invalid calling code"):
            build_directory([{"name": "India", "calling_code": code}])

    def test_unknown_region(self):
        with pytest.raises(ValueError, match="Unknown region"):
            build_directory([{"name": "India", "region": "Antarctica"}])

    def test_not_a_mapping(self):
        with pytest.raises(ValueError, match="is not a mapping"):
            build_directory(["India"])


# ---- Loading from other locations ----

COUNTRIES_YAML = """\
countries:
  - name: Atlantis
    calling_code: "+999"
    region: Europe
"""


def test_load_from_explicit_path(tmp_path, fresh_cache):
    p = tmp_path / "countries.yaml"
    p.write_text(COUNTRIES_YAML)

    directory = load_directory(p)
    assert directory.names == ("Atlantis",)
    assert directory.lookup_code("Atlantis") == "+999"
    assert directory.source == p


def test_load_from_environment(tmp_path, monkeypatch, fresh_cache):
    p = tmp_path / "countries.yaml"
    p.write_text(COUNTRIES_YAML)
    monkeypatch.setenv(DATA_PATH_ENV, str(p))

    assert all_supported_names() == {"Atlantis"}


def test_load_missing_countries_list(tmp_path, fresh_cache):
    p = tmp_path / "countries.yaml"
    p.write_text("regions: []\n")
    with pytest.raises(ValueError, match="Expected a 'countries' list"):
        load_directory(p)


def test_load_missing_file(tmp_path, fresh_cache):
    with pytest.raises(FileNotFoundError):
        load_directory(tmp_path / "missing.yaml")


def test_no_packaged_data(monkeypatch, fresh_cache):
    """Without an explicit path, environment override or packaged file"""
    from countrycodes.countries import countrydirectory

    monkeypatch.delenv(DATA_PATH_ENV, raising=False)
    monkeypatch.setattr(countrydirectory, "find_data_file", lambda **kwargs: None)

    with pytest.raises(FileNotFoundError, match=DATA_PATH_ENV) as excinfo:
        load_directory()
    assert "countries.yaml" in str(excinfo.value)
