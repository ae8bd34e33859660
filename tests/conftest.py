"""
Shared fixtures for the kinsoku test suite.
"""

import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import kinsoku
sys.path.insert(0, str(Path(__file__).parent.parent))

from kinsoku import ShiftJISValidator


class MappingOracle:
    """Byte oracle with hand-picked byte layouts; ASCII falls through to itself."""

    def __init__(self, mapping):
        self._mapping = mapping

    def encode_character(self, ch: str) -> bytes:
        value = self._mapping.get(ch)
        if isinstance(value, Exception):
            raise value
        if value is not None:
            return value
        if ord(ch) < 0x80:
            return ch.encode("ascii")
        return b"?"


@pytest.fixture(scope="session")
def validator():
    return ShiftJISValidator()


@pytest.fixture
def make_validator():
    """Build a validator backed by a MappingOracle."""

    def _make(mapping, config=None):
        return ShiftJISValidator(config=config, oracle=MappingOracle(mapping))

    return _make
