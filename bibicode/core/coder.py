"""Coder: end-to-end conversion between two numeral systems.

WHY: Callers think in strings ("2000" in decimal -> "BIDAHO" in bibi), not
in digit lists and bit registers. The Coder binds a source and a target
system once and exposes a single swap() call for repeated conversions.

HOW: swap() = parse with the source system -> engine (source digits ->
bits -> target digits) -> render with the target system. A parse failure
is re-raised as ConversionError chained to the original ParseError.

RULES:
- A Coder holds only its two immutable systems; swap() keeps no state
- inverse() returns a Coder with source and target exchanged
- Output never carries leading zero digits beyond a single zero
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import List
from dataclasses import dataclass

from bibicode.core.engine import convert_digits
from bibicode.core.numeral import NumeralSystem
from bibicode.core.parser import parse, render
from bibicode.errors import ConversionError, ParseError


@dataclass(frozen=True)
class Coder:
    """Converts numbers written in ``source`` into ``target``.

    Attributes:
        source: Numeral system of the input strings.
        target: Numeral system of the output strings.
    """

    source: NumeralSystem
    target: NumeralSystem

    def convert(self, digits: Sequence[int]) -> List[int]:
        """Convert source digit values to target digit values."""
        return convert_digits(digits, self.source.base, self.target.base)

    def swap(self, raw: str, width: int = 0) -> str:
        """Convert one number from the source system to the target system.

        Args:
            raw: The number in the source system, prefix optional.
            width: Minimum number of target digits; zero symbols pad the left.

        Returns:
            The number in the target system, including the target prefix.

        Raises:
            ConversionError: If ``raw`` is not a valid source number.
        """
        try:
            digits = parse(raw, self.source)
        except ParseError as exc:
            raise ConversionError("source", exc) from exc
        return render(self.convert(digits), self.target, width)

    def inverse(self) -> Coder:
        return Coder(self.target, self.source)
