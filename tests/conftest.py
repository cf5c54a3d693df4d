"""Shared test fixtures for the bibicode test suite.

WHY: Most test modules need the same handful of numeral systems (decimal,
hex with its 0x prefix, bibi in both its flat and two-level forms, binary).
Centralizing them keeps every module testing against identical alphabets.

HOW: Module-level digit lists plus pytest fixtures that build the
NumeralSystem objects. The isolated_data_dir fixture points the user
definition directory at a temporary path.

RULES:
- Alphabets match the reference examples exactly (BIDAHO, 0x7d0, ...)
- Fixtures build fresh systems; nothing here depends on the catalog
"""

from typing import List

import pytest

from bibicode.core.numeral import NumeralSystem


DECIMAL_DIGITS: List[str] = list("0123456789")
HEX_DIGITS: List[str] = list("0123456789abcdef")
BIBI_DIGITS: List[str] = [
    "HO", "HA", "HE", "HI", "BO", "BA", "BE", "BI",
    "KO", "KA", "KE", "KI", "DO", "DA", "DE", "DI",
]
BIBI_LEVELS: List[List[str]] = [["H", "B", "K", "D"], ["O", "A", "E", "I"]]
BUDU_DASH_LEVELS: List[List[str]] = [
    ["B", "K", "D", "F", "G", "J", "L", "M", "N", "P", "R", "S", "T", "V", "X", "Z"],
    ["a-", "i-", "o-", "u-"],
]


@pytest.fixture
def dec():
    return NumeralSystem("", [DECIMAL_DIGITS])


@pytest.fixture
def hex_system():
    return NumeralSystem("0x", [HEX_DIGITS])


@pytest.fixture
def bibi():
    return NumeralSystem("", [BIBI_DIGITS])


@pytest.fixture
def bibi_levels():
    return NumeralSystem("", BIBI_LEVELS)


@pytest.fixture
def binary():
    return NumeralSystem("", [["0", "1"]])


@pytest.fixture
def isolated_data_dir(tmp_path, monkeypatch):
    """Point the user definition directory at an empty temp directory."""
    directory = tmp_path / "systems"
    directory.mkdir()
    monkeypatch.setenv("BIBICODE_DATA_DIR", str(directory))
    return directory
