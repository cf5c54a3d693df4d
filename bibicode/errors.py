"""Exception hierarchy for bibicode.

WHY: Callers (the CLI, library users) need to tell a malformed numeral
system apart from a number that does not belong to a system, and both
apart from a lookup failure. Typed exceptions make each failure explicit
so nothing is ever silently defaulted (an unknown symbol never becomes 0).

HOW: BibicodeError is the single root. Construction, parsing, conversion,
lookup and definition-file failures each get a subclass carrying the data
needed to produce a useful message.

RULES:
- The core raises these and never catches them
- ConversionError is always chained to the ParseError that caused it
- Caller errors (bad digit value, base < 2 handed to the engine) are
  plain ValueError, not part of this hierarchy
"""

from __future__ import annotations

from typing import List, Optional


class BibicodeError(Exception):
    """Root of every error raised by bibicode."""


class ConstructionError(BibicodeError):
    """Raised when a numeral system description is invalid.

    RULES:
    - reason is a short human-readable explanation
    - No partial system is ever produced
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__("Invalid numeral system: {}".format(reason))


class ParseError(BibicodeError):
    """Raised when a string cannot be read in a numeral system.

    Attributes:
        text: The input string, after prefix stripping.
        position: Index in ``text`` where matching failed.
    """

    kind = "parse error"

    def __init__(self, text: str, position: int) -> None:
        self.text = text
        self.position = position
        super().__init__(
            "{} at position {}: {!r}".format(self.kind, position, text[position:position + 16])
        )


class UnrecognizedSymbolError(ParseError):
    """No combination of level symbols matches at the scan position."""

    kind = "unrecognized symbol"


class TrailingInputError(ParseError):
    """Characters remain that are too short to form any digit symbol."""

    kind = "trailing input"


class ConversionError(BibicodeError):
    """Raised by Coder.swap when the input cannot be converted.

    Attributes:
        side: "source" or "target", the system whose parse failed.
        cause: The underlying ParseError.
    """

    def __init__(self, side: str, cause: ParseError) -> None:
        self.side = side
        self.cause = cause
        super().__init__("Cannot read number in {} system: {}".format(side, cause))


class SystemLookupError(BibicodeError):
    """Raised when a numeral system name or path cannot be resolved."""

    def __init__(self, name: str, available: Optional[List[str]] = None) -> None:
        self.name = name
        self.available = list(available or [])
        message = "Unknown numeral system '{}'".format(name)
        if self.available:
            message += ". Available: {}".format(", ".join(self.available))
        super().__init__(message)


class DefinitionError(BibicodeError):
    """Raised when a numeral system definition file cannot be loaded."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__("Bad numeral system definition {}: {}".format(path, reason))
