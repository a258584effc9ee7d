"""Pytest configuration and shared fixtures for unit tests."""

import copy
import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_envelope(name: str) -> dict:
    """Load a recorded CrossRef response envelope by name.

    Args:
        name: Fixture name without extension (e.g., "works_page")

    Returns:
        The decoded envelope
    """
    path = FIXTURES_DIR / "envelopes" / f"{name}.json"
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def page_envelope(start_index: int, per_page: int, total: int, items=None) -> dict:
    """Build a list envelope carrying pagination metadata."""
    return {
        "status": "ok",
        "message-type": "work-list",
        "message": {
            "total-results": total,
            "items": items if items is not None else [],
            "items-per-page": per_page,
            "query": {"start-index": start_index, "search-terms": None},
        },
    }


@pytest.fixture
def fixtures_dir():
    """Return the path to the fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def works_page():
    return load_envelope("works_page")


@pytest.fixture
def types_list():
    return load_envelope("types")


@pytest.fixture
def work_item():
    return load_envelope("work")


@pytest.fixture
def validation_failure():
    return load_envelope("validation_failure")


@pytest.fixture
def make_page():
    """Factory for list envelopes with arbitrary pagination metadata."""

    def _make(start_index=0, per_page=20, total=1000, items=None):
        return copy.deepcopy(page_envelope(start_index, per_page, total, items))

    return _make
