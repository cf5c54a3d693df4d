"""Radix conversion engine: exact base conversion through a binary pivot.

WHY: Numbers handed to bibicode have no length limit, and the source and
target bases are arbitrary (2, 10, 16, 58, 64 composite digits ...). The
conversion must be exact for every length without turning the whole number
into one native integer. Binary sits between any two bases, so only two
algorithms are needed: base-B digits -> bits, and bits -> base-B digits.

HOW: Both passes are carry-propagating scans over small cells, the
generalization of the classical "double dabble" technique.

  Forward pass (digits_to_bits): a bit register, least significant bit
  first, absorbs source digits most significant first. For each digit the
  register becomes ``register * base + digit``: one scan walks the bit
  cells, each cell computes ``bit * base + carry``, keeps the low bit and
  passes the rest up as carry. The incoming digit is the initial carry.
  Whatever carry is left at the top is appended bit by bit.

  Reverse pass (bits_to_digits): an array of base-B cells, least
  significant first, absorbs bits most significant first. For each bit
  every cell is doubled with the carry of the cell below added in; a cell
  that reaches base subtracts base and carries 1 upward. The incoming bit
  is the initial carry, so doubling and adding the bit happen in one scan.
  A carry past the top cell opens a new cell.

  Cell values stay below 2 * base and carries stay below base, so every
  step is a small exact integer operation.

RULES:
- Inputs and outputs are lists of small ints, most significant first
- Outputs are minimal: no leading zeros, and zero is exactly [0]
- Leading zeros in the input are accepted and do not change the value
- base >= 2; digits must lie in [0, base) and bits in {0, 1}
- Cost is O(input digits x output bits); no fixed-width buffers
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import List


def _check_base(base: int) -> None:
    if base < 2:
        raise ValueError("base must be at least 2, got {}".format(base))


def digits_to_bits(digits: Sequence[int], base: int) -> List[int]:
    """Convert base-``base`` digits to the minimal bit sequence.

    Args:
        digits: Digit values in [0, base), most significant first.
        base: Radix of the digits (>= 2).

    Returns:
        Bits, most significant first; [0] for the value zero.

    Raises:
        ValueError: If base < 2 or a digit is out of range.
    """
    _check_base(base)
    register: List[int] = []  # least significant bit first

    for digit in digits:
        if not 0 <= digit < base:
            raise ValueError("digit {} out of range for base {}".format(digit, base))
        carry = digit
        for i, bit in enumerate(register):
            cell = bit * base + carry
            register[i] = cell & 1
            carry = cell >> 1
        while carry:
            register.append(carry & 1)
            carry >>= 1

    if not register:
        return [0]
    register.reverse()
    return register


def bits_to_digits(bits: Sequence[int], base: int) -> List[int]:
    """Convert a bit sequence to minimal base-``base`` digits.

    Args:
        bits: Binary digits, most significant first.
        base: Target radix (>= 2).

    Returns:
        Digit values in [0, base), most significant first; [0] for zero.

    Raises:
        ValueError: If base < 2 or an element of bits is not 0 or 1.
    """
    _check_base(base)
    cells: List[int] = []  # least significant digit first

    for bit in bits:
        if bit not in (0, 1):
            raise ValueError("bit must be 0 or 1, got {!r}".format(bit))
        carry = bit
        for i, cell in enumerate(cells):
            doubled = cell * 2 + carry
            if doubled >= base:
                cells[i] = doubled - base
                carry = 1
            else:
                cells[i] = doubled
                carry = 0
        if carry:
            cells.append(carry)

    if not cells:
        return [0]
    cells.reverse()
    return cells


def convert_digits(digits: Sequence[int], source_base: int, target_base: int) -> List[int]:
    """Convert digits from ``source_base`` to ``target_base`` via binary."""
    return bits_to_digits(digits_to_bits(digits, source_base), target_base)
