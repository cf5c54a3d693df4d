"""Symbol parser: raw strings <-> digit-value sequences.

WHY: The conversion engine works on lists of digit values. Something has
to read a user's string in a given numeral system (stripping the optional
prefix, matching multi-character and multi-level symbols) and write digit
values back out as text.

HOW: parse() strips the system prefix when present, then repeatedly calls
NumeralSystem.symbol_match() from the current position until the string is
consumed. render() maps each digit value through digit_to_symbol() and
prepends the prefix.

RULES:
- Digit sequences are most-significant first
- An empty string (after prefix stripping) parses to [0]
- A failed match raises TrailingInputError when the text ends partway
  through a digit symbol, UnrecognizedSymbolError otherwise
- If the stripped text fails, the unstripped text is tried as digits
- No partial digit sequence is ever returned
- render() never strips leading zero digits; it may add some to reach width
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import List

from bibicode.core.numeral import NumeralSystem
from bibicode.errors import ParseError, TrailingInputError, UnrecognizedSymbolError


def parse(raw: str, system: NumeralSystem) -> List[int]:
    """Read ``raw`` as a number written in ``system``.

    When the prefix is present it is stripped first. If the stripped text
    does not parse, the whole input is tried as digits, since prefix
    characters may also be digit symbols ("Ba" with prefix "B").

    Args:
        raw: The number as text, with or without the system prefix.
        system: The numeral system the text is written in.

    Returns:
        Digit values, most significant first.

    Raises:
        UnrecognizedSymbolError: No digit symbol matches at some position.
        TrailingInputError: The text ends in the middle of a digit symbol.
    """
    if not system.has_prefix(raw):
        return _scan(raw, system)

    try:
        return _scan(system.strip_prefix(raw), system)
    except ParseError as exc:
        stripped_error = exc
    try:
        return _scan(raw, system)
    except ParseError:
        raise stripped_error from None


def _scan(text: str, system: NumeralSystem) -> List[int]:
    if not text:
        return [0]

    digits: List[int] = []
    position = 0
    while position < len(text):
        match = system.symbol_match(text, position)
        if match is None:
            if system.is_truncated_symbol(text, position):
                raise TrailingInputError(text, position)
            raise UnrecognizedSymbolError(text, position)
        digits.append(match.value)
        position = match.end
    return digits


def render(digits: Sequence[int], system: NumeralSystem, width: int = 0) -> str:
    """Write a digit-value sequence as text in ``system``.

    Leading zero digits are kept as given. When ``width`` is larger than
    the number of digits, zero symbols are added on the left.

    Raises:
        ValueError: If the sequence is empty or a value is out of range.
    """
    if not digits:
        raise ValueError("cannot render an empty digit sequence")
    padding = system.zero_symbol * max(0, width - len(digits))
    return system.prefix + padding + "".join(system.digit_to_symbol(d) for d in digits)
