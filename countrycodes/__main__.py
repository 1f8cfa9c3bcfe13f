"""
Command-line lookup of country calling codes.

Usage:
    python -m countrycodes <name> [<name> ...]
    python -m countrycodes --validate <name> [<name> ...]
    python -m countrycodes --match <name> [--k K]
    python -m countrycodes --list [--region REGION]

Examples:
    python -m countrycodes India "united kingdom"
    python -m countrycodes --validate USA "Urited States"
    python -m countrycodes --match "Untied States" --k 3
    python -m countrycodes --list --region Europe

Prints one JSON object per line. Exit status is 1 if any name failed to
resolve (or validate), 0 otherwise.
"""

import argparse
import json
import logging
import sys

from countrycodes.countries import (
    country_record,
    list_countries,
    match_country,
    validate_country,
)
from countrycodes.exceptions import CountryNotFoundError, InvalidCountryNameError


def _emit(payload):
    print(json.dumps(payload, ensure_ascii=False))


def resolve_cmd(names) -> int:
    status = 0
    for name in names:
        try:
            _emit(country_record(name))
        except (InvalidCountryNameError, CountryNotFoundError) as e:
            _emit(e.to_dict())
            status = 1
    return status


def validate_cmd(names) -> int:
    status = 0
    for name in names:
        result = validate_country(name)
        _emit(result)
        if not result["isValid"]:
            status = 1
    return status


def match_cmd(names, k: int) -> int:
    for name in names:
        _emit({"countryName": name, "matches": match_country(name, k=k)})
    return 0


def list_cmd(region) -> int:
    df = list_countries(region=region)
    for record in df.to_dict(orient="records"):
        _emit(record)
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="countrycodes",
        description="Look up country calling codes and regions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("names", nargs="*", help="Country names to look up")
    parser.add_argument("--validate", action="store_true", help="Validate names and show suggestions")
    parser.add_argument("--match", action="store_true", help="Show top-K scored matches")
    parser.add_argument("--k", type=int, default=5, help="Number of matches to return (default: 5)")
    parser.add_argument("--list", action="store_true", help="List supported countries")
    parser.add_argument("--region", help="Region filter for --list (e.g., Europe)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.list:
        return list_cmd(args.region)
    if not args.names:
        parser.print_help()
        return 2
    if args.match:
        return match_cmd(args.names, args.k)
    if args.validate:
        return validate_cmd(args.names)
    return resolve_cmd(args.names)


if __name__ == "__main__":
    sys.exit(main())
