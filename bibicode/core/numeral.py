"""Numeral system model: digit alphabets built from one or more symbol levels.

WHY: A numeral system is more than a list of characters. Hexadecimal uses
one character per digit, bibi-binary uses two-letter digits, and some
systems compose each digit from independent choices (a consonant then a
vowel). Every other component needs one model that maps a digit value to
its symbol string and back, whatever the shape of the alphabet.

HOW: A NumeralSystem holds an optional prefix and an ordered tuple of
levels. The base is the product of the level sizes. A digit value is
decomposed mixed-radix style into one index per level, the last level
varying fastest, and the symbol is the concatenation of the chosen level
symbols. Matching walks the levels in order, trying the longest candidate
symbol of each level first.

RULES:
- Instances are immutable and validated at construction
- Every level is non-empty, holds distinct non-empty strings, and is
  prefix-free (no symbol is a proper prefix of another in the same level)
- Prefix-free levels make the whole digit alphabet a prefix code, so the
  greedy match is the only possible match and value <-> symbol is a bijection
- base >= 2
- The prefix is supplied on output and optional on input
"""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Dict, Optional, Set, Tuple

from bibicode.errors import ConstructionError


@dataclass(frozen=True)
class SymbolMatch:
    """Result of matching one digit symbol inside a string.

    Attributes:
        symbol: The matched text (one symbol per level, concatenated).
        value: The digit value in [0, base).
        end: Index just past the matched text.
    """

    symbol: str
    value: int
    end: int


# Per-level lookup table: (symbol length, {symbol: index}) longest first.
_LevelTable = Tuple[Tuple[int, Dict[str, int]], ...]


def _normalize_levels(levels: Iterable[Sequence[str]]) -> Tuple[Tuple[str, ...], ...]:
    if isinstance(levels, str):
        raise ConstructionError("levels must be a list of symbol lists, got a string")
    normalized = []
    for index, level in enumerate(levels):
        if isinstance(level, str):
            raise ConstructionError(
                "level {} must be a list of symbols, got the string {!r}".format(index, level)
            )
        normalized.append(tuple(level))
    return tuple(normalized)


def _validate_level(index: int, level: Tuple[str, ...]) -> None:
    if not level:
        raise ConstructionError("level {} is empty".format(index))

    seen: Set[str] = set()
    for symbol in level:
        if not isinstance(symbol, str):
            raise ConstructionError(
                "level {} contains a non-string symbol {!r}".format(index, symbol)
            )
        if not symbol:
            raise ConstructionError("level {} contains an empty symbol".format(index))
        if symbol in seen:
            raise ConstructionError(
                "duplicate symbol {!r} in level {}".format(symbol, index)
            )
        seen.add(symbol)

    # In sorted order a prefix always sits right before one of its extensions.
    ordered = sorted(level)
    for shorter, longer in zip(ordered, ordered[1:]):
        if longer.startswith(shorter):
            raise ConstructionError(
                "symbol {!r} is a prefix of {!r} in level {} (ambiguous match)".format(
                    shorter, longer, index
                )
            )


def _build_table(level: Tuple[str, ...]) -> _LevelTable:
    by_length: Dict[int, Dict[str, int]] = {}
    for index, symbol in enumerate(level):
        by_length.setdefault(len(symbol), {})[symbol] = index
    return tuple(sorted(by_length.items(), reverse=True))


@dataclass(frozen=True)
class NumeralSystem:
    """An immutable positional numeral system.

    WHY: Source and target systems are defined independently and shared
    read-only by every conversion, so they must be validated once and
    never change afterwards.

    HOW: ``levels`` is normalized to a tuple of tuples and validated in
    ``__post_init__``. A per-level lookup table grouped by symbol length
    is precomputed so matching is a handful of dict lookups per level.

    RULES:
    - Raises ConstructionError on any invalid description
    - Two systems compare equal when prefix and levels are equal

    Args:
        prefix: Literal text written before every rendered number.
        levels: Ordered symbol lists; a single list for simple alphabets.
    """

    prefix: str
    levels: Tuple[Tuple[str, ...], ...]
    _tables: Tuple[_LevelTable, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.prefix is None:
            object.__setattr__(self, "prefix", "")
        if not isinstance(self.prefix, str):
            raise ConstructionError("prefix must be a string, got {!r}".format(self.prefix))

        levels = _normalize_levels(self.levels)
        if not levels:
            raise ConstructionError("at least one level of symbols is required")
        for index, level in enumerate(levels):
            _validate_level(index, level)

        object.__setattr__(self, "levels", levels)
        if self.base < 2:
            raise ConstructionError("base must be at least 2, got {}".format(self.base))
        object.__setattr__(self, "_tables", tuple(_build_table(level) for level in levels))

    @classmethod
    def from_digits(cls, digits: Sequence[str], prefix: str = "") -> NumeralSystem:
        """Build a single-level system from a flat list of digit symbols."""
        if isinstance(digits, str):
            digits = list(digits)
        return cls(prefix, (tuple(digits),))

    # ------------------------------------------------------------------
    # Derived properties
    # ------------------------------------------------------------------

    @property
    def base(self) -> int:
        return math.prod(len(level) for level in self.levels)

    @property
    def zero_symbol(self) -> str:
        """Symbol of digit value 0."""
        return "".join(level[0] for level in self.levels)

    @property
    def min_symbol_length(self) -> int:
        """Length of the shortest possible digit symbol."""
        return sum(min(len(symbol) for symbol in level) for level in self.levels)

    def symbols(self) -> Iterator[str]:
        """Iterate every digit symbol in digit-value order."""
        for parts in itertools.product(*self.levels):
            yield "".join(parts)

    # ------------------------------------------------------------------
    # Encoding and matching
    # ------------------------------------------------------------------

    def digit_to_symbol(self, value: int) -> str:
        """Return the symbol string of a digit value.

        The value is split into one index per level, last level least
        significant, then the chosen symbols are concatenated in level order.

        Raises:
            ValueError: If value is not in [0, base).
        """
        if not 0 <= value < self.base:
            raise ValueError(
                "digit value {} out of range for base {}".format(value, self.base)
            )
        parts = []
        for level in reversed(self.levels):
            value, index = divmod(value, len(level))
            parts.append(level[index])
        return "".join(reversed(parts))

    def symbol_match(self, text: str, position: int = 0) -> Optional[SymbolMatch]:
        """Match one digit symbol of this system at ``position`` in ``text``.

        Each level is matched in order, longest candidate first. Returns
        None when some level has no symbol at the current offset.
        """
        value = 0
        offset = position
        for level, table in zip(self.levels, self._tables):
            for length, index_of in table:
                index = index_of.get(text[offset:offset + length])
                if index is not None:
                    break
            else:
                return None
            value = value * len(level) + index
            offset += length
        return SymbolMatch(symbol=text[position:offset], value=value, end=offset)

    def is_truncated_symbol(self, text: str, position: int = 0) -> bool:
        """Tell whether ``text[position:]`` is a digit symbol cut short.

        True when the rest of the text is a proper prefix of some digit
        symbol, i.e. the end of the text was reached partway through the
        levels. Levels are prefix-free, so at most one walk is possible.
        """
        offset = position
        for level, table in zip(self.levels, self._tables):
            rest = text[offset:]
            if not rest:
                return offset > position
            for length, index_of in table:
                if text[offset:offset + length] in index_of:
                    offset += length
                    break
            else:
                return any(symbol.startswith(rest) for symbol in level)
        return False

    # ------------------------------------------------------------------
    # Prefix handling
    # ------------------------------------------------------------------

    def has_prefix(self, text: str) -> bool:
        return bool(self.prefix) and text.startswith(self.prefix)

    def strip_prefix(self, text: str) -> str:
        """Remove the prefix from ``text`` if it is there."""
        if self.has_prefix(text):
            return text[len(self.prefix):]
        return text

    def __str__(self) -> str:
        return ", ".join(self.symbols())


def autodetect(number: str, systems: Iterable[NumeralSystem]) -> Optional[NumeralSystem]:
    """Find the numeral system of ``number`` from its prefix.

    WHY: Inputs such as "0x7d0" or "0b1010" announce their system. When the
    caller does not know the source system, the prefix is the only reliable
    clue.

    RULES:
    - Only systems with a non-empty prefix are candidates
    - Returns the system only when exactly one candidate matches
    - Returns None when no candidate or several candidates match
    """
    matches = [system for system in systems if system.has_prefix(number)]
    if len(matches) == 1:
        return matches[0]
    return None
