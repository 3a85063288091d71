"""Pytest configuration and fixtures for test suite."""

import json
import sys
from pathlib import Path

import pytest

# Add src directory to path for imports
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def lccn_examples() -> dict:
    """Load the Library of Congress namespace example corpus."""
    with (FIXTURES_DIR / "lccn" / "namespace_examples.json").open(encoding="utf-8") as f:
        return json.load(f)
