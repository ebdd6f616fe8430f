"""Helpers for loading and discovering JSON test fixtures.

Plain functions rather than pytest fixtures, so test modules can call them at
import time for ``pytest.mark.parametrize``.
"""

import json
import pathlib

FIXTURES_DIR = pathlib.Path(__file__).parent / "fixtures"


def load_fixture(filename: str) -> dict:
    """Load a JSON fixture file from the fixtures directory."""
    with open(FIXTURES_DIR / filename, encoding="utf-8") as f:
        return json.load(f)


def discover_fixtures(prefix: str) -> list[str]:
    """Return the names of all fixture files starting with *prefix*.

    Dropping a new ``id_status_*.json`` capture into the fixtures directory is
    enough for the status tests to pick it up.
    """
    return sorted(p.name for p in FIXTURES_DIR.glob(f"{prefix}*.json"))


def get_fixture_meta(fixture_data: dict) -> dict:
    """Return the ``_fixture_meta`` block from a fixture."""
    return fixture_data.get("_fixture_meta", {})


def get_fixture_expected(fixture_data: dict) -> dict:
    """Return the ``_fixture_meta.expected`` block from a fixture."""
    return get_fixture_meta(fixture_data).get("expected", {})
