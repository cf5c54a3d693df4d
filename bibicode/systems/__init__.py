"""Catalog of pre-registered numeral systems.

WHY: Most conversions use a handful of well-known systems (decimal,
hexadecimal, binary, base58 ...). Users refer to them by short names on
the command line instead of writing definition files.

HOW: CATALOG maps a name to a SystemDefinition. get_system() builds the
NumeralSystem for a name. To add a system, add one entry here.

RULES:
- Names are short lowercase identifiers used as CLI values
- Every entry must build without error
- hex uses lowercase letters; input is matched exactly as defined
"""

from __future__ import annotations

from typing import Dict

from bibicode.core.numeral import NumeralSystem
from bibicode.errors import SystemLookupError
from bibicode.systems.definition import SystemDefinition, load_definition, parse_definition

_DECIMAL = ["0", "1", "2", "3", "4", "5", "6", "7", "8", "9"]

CATALOG: Dict[str, SystemDefinition] = {
    "bin": SystemDefinition(prefix="0b", digits=["0", "1"]),
    "oct": SystemDefinition(prefix="0o", digits=["0", "1", "2", "3", "4", "5", "6", "7"]),
    "dec": SystemDefinition(digits=_DECIMAL),
    "hex": SystemDefinition(prefix="0x", digits=_DECIMAL + ["a", "b", "c", "d", "e", "f"]),
    # Bibi-binary, as defined by Boby Lapointe in 1968
    "bibi": SystemDefinition(digits=[
        "HO", "HA", "HE", "HI", "BO", "BA", "BE", "BI",
        "KO", "KA", "KE", "KI", "DO", "DA", "DE", "DI",
    ]),
    # Consonant + vowel syllables, easy to read aloud
    "budu": SystemDefinition(digits=[
        ["B", "K", "D", "F", "G", "J", "L", "M", "N", "P", "R", "S", "T", "V", "X", "Z"],
        ["a", "i", "o", "u"],
    ]),
    "utf8": SystemDefinition(digits=[
        ["■", "◀", "●", "♠", "♥",
         "♦", "♣", "⚑", "◆", "★"],
        ["□", "◁", "○", "♤", "♡",
         "♢", "♧", "⚐", "◇", "☆"],
    ]),
    # Bitcoin base58: no 0, O, I or l
    "base58": SystemDefinition(digits=list(
        "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
    )),
}


def get_system(name: str) -> NumeralSystem:
    """Build the catalog system registered under ``name``.

    Raises:
        SystemLookupError: If no system has that name.
    """
    definition = CATALOG.get(name)
    if definition is None:
        raise SystemLookupError(name, sorted(CATALOG))
    return definition.build()


__all__ = [
    "CATALOG",
    "SystemDefinition",
    "get_system",
    "load_definition",
    "parse_definition",
]
