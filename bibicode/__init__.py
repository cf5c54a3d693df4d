"""bibicode: convert natural numbers of any length between numeral systems.

WHY: Numbers can be written in any positional system: decimal, hex,
base58, or Boby Lapointe's bibi-binary ("2000" is "BIDAHO"). Systems may
use multi-character digits or digits composed from several symbol levels.
This package converts between any two such systems exactly, whatever the
length of the number.

HOW: Three-stage pipeline. The symbol parser reads a string into digit
values, the conversion engine moves the digits to the target base through
a binary pivot using carry-propagating scans, and the parser renders the
result. The Coder chains the stages for one source/target pair.

RULES:
- Natural numbers only: no sign, no fractional part, no length limit
- Numeral systems are validated once and immutable afterwards
- The core never logs, prints, or reads files; the systems package and
  the CLI do that
"""

from bibicode.core.coder import Coder
from bibicode.core.numeral import NumeralSystem, SymbolMatch, autodetect
from bibicode.core.parser import parse, render
from bibicode.errors import (
    BibicodeError,
    ConstructionError,
    ConversionError,
    DefinitionError,
    ParseError,
    SystemLookupError,
    TrailingInputError,
    UnrecognizedSymbolError,
)
from bibicode.systems import CATALOG, get_system

__version__ = "0.1.0"

__all__ = [
    "CATALOG",
    "BibicodeError",
    "Coder",
    "ConstructionError",
    "ConversionError",
    "DefinitionError",
    "NumeralSystem",
    "ParseError",
    "SymbolMatch",
    "SystemLookupError",
    "TrailingInputError",
    "UnrecognizedSymbolError",
    "autodetect",
    "get_system",
    "parse",
    "render",
]
