"""
Global fixtures live here

This tells pytest how to prepare example composite maps and documents for tests.
"""
import json
import pytest
from pathlib import Path


def make_example() -> dict:
    """A fresh copy of the example record used throughout the tests."""
    return {
        "1": {"1": 11, "2": 12},
        "2": {"1": 21, "2": 22},
        "3": {"1": {"1": {"1": "value"}}},
    }

# a sub record of the example above
SUBEXAMPLE = {
    "1": {"2": 12},
    "3": {"1": {"1": {"1": "value"}}},
}

@pytest.fixture
def example() -> dict:
    """
    Creates a fresh example composite map
    """
    return make_example()

@pytest.fixture
def subexample() -> dict:
    """The example filtered down to paths "1.2" and "3"."""
    return json.loads(json.dumps(SUBEXAMPLE))

@pytest.fixture
def example_json(tmp_path: Path) -> Path:
    """
    Writes the example record to a temporary JSON document
    """
    path = tmp_path / "record.json"
    path.write_text(json.dumps(make_example()), encoding="utf-8")
    return path
