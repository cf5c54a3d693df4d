"""Tests for the Coder, the end-to-end string conversion.

WHY: swap() is the operation users actually call. These tests pin the
reference conversions (2000 -> BIDAHO, 0x7d0 ...) and the guarantee that
converting there and back reproduces the original digits.

HOW: Coders are built from the conftest systems and from the catalog.
Long reference values were checked independently by long division.

RULES:
- Parse failures surface as ConversionError chained to the ParseError
"""

import random

import pytest

from bibicode.core.coder import Coder
from bibicode.core.numeral import NumeralSystem
from bibicode.core.parser import parse, render
from bibicode.errors import ConversionError, UnrecognizedSymbolError
from bibicode.systems import get_system

from .conftest import BUDU_DASH_LEVELS


class TestReferenceConversions:
    """The documented example conversions."""

    def test_decimal_to_flat_bibi(self, dec, bibi):
        assert Coder(dec, bibi).swap("2000") == "BIDAHO"

    def test_decimal_to_two_level_bibi(self, dec, bibi_levels):
        assert Coder(dec, bibi_levels).swap("2000") == "BIDAHO"

    def test_decimal_to_prefixed_hex(self, dec, hex_system):
        assert Coder(dec, hex_system).swap("2000") == "0x7d0"

    def test_hex_to_decimal_with_prefix(self, hex_system, dec):
        assert Coder(hex_system, dec).swap("0x7d0") == "2000"

    def test_hex_to_decimal_without_prefix(self, hex_system, dec):
        assert Coder(hex_system, dec).swap("7d0") == "2000"

    def test_binary_to_hex(self, binary):
        hex_plain = NumeralSystem.from_digits("0123456789abcdef")
        assert Coder(binary, hex_plain).swap("1111111111111111") == "ffff"


class TestCatalogConversions:
    """Conversions between built-in systems."""

    def test_hex_to_dec(self):
        assert Coder(get_system("hex"), get_system("dec")).swap("ffff") == "65535"

    def test_hex_to_bin(self):
        coder = Coder(get_system("hex"), get_system("bin"))
        assert coder.swap("f0ff") == "0b1111000011111111"

    def test_long_dec_to_hex(self):
        coder = Coder(get_system("dec"), get_system("hex"))
        result = coder.swap("324439924324324235436544328757654635345424324543")
        assert result == "0x38d463ad8fa67a74d6e9a610158623c60d2297bf"

    def test_long_hex_to_dec(self):
        coder = Coder(get_system("hex"), get_system("dec"))
        result = coder.swap("38d463ad8fa67a74d6e9a610158623c60d2297bf")
        assert result == "324439924324324235436544328757654635345424324543"

    def test_budu(self):
        assert Coder(get_system("dec"), get_system("budu")).swap("2000") == "MuGa"

    def test_base58(self):
        coder = Coder(get_system("dec"), get_system("base58"))
        assert coder.swap("57") == "z"
        assert coder.swap("58") == "21"

    def test_utf8(self):
        coder = Coder(get_system("dec"), get_system("utf8"))
        assert coder.swap("10") == "◀□"
        assert coder.swap("100") == "■◁■□"


class TestMultiCharacterLevels:
    """Levels whose symbols are several characters long."""

    HEX_VALUE = "de0b295669a9fd93d5f28d9ec85e40f4cb697bae"
    DASHED = "Fi-Xa-Du-Do-Ji-Li-Ri-Ro-Mu-Vo-Gu-Vi-Mu-Do-Fi-Pu-Sa-Ni-Mo-Ga-Fu-Gu-Du-Lo-Ju-So-So-"

    def test_hex_to_dashed_syllables(self):
        system = NumeralSystem("", BUDU_DASH_LEVELS)
        coder = Coder(get_system("hex"), system)
        assert coder.swap(self.HEX_VALUE) == self.DASHED
        assert coder.swap("0x" + self.HEX_VALUE) == self.DASHED

    def test_dashed_syllables_to_hex(self):
        system = NumeralSystem("", BUDU_DASH_LEVELS)
        coder = Coder(system, get_system("hex"))
        assert coder.swap(self.DASHED) == "0x" + self.HEX_VALUE


class TestZeroAndWidth:
    """Zero handling and fixed-width output."""

    def test_zero_is_single_zero_symbol(self, dec, bibi_levels):
        assert Coder(dec, bibi_levels).swap("0") == "HO"

    def test_zero_digits_collapse(self, dec, hex_system):
        assert Coder(dec, hex_system).swap("000") == "0x0"

    def test_empty_input_is_zero(self, hex_system, dec):
        assert Coder(hex_system, dec).swap("0x") == "0"

    def test_width_pads(self, dec, hex_system):
        assert Coder(dec, hex_system).swap("255", width=4) == "0x00ff"


class TestInverse:
    """inverse() swaps roles; A -> B -> A restores the digits."""

    def test_inverse_systems(self, dec, bibi):
        coder = Coder(dec, bibi)
        assert coder.inverse() == Coder(bibi, dec)

    def test_round_trip_string(self, dec, bibi_levels):
        coder = Coder(dec, bibi_levels)
        assert coder.inverse().swap(coder.swap("123456789012345678901234567890")) == (
            "123456789012345678901234567890"
        )

    @pytest.mark.parametrize("source_name,target_name", [
        ("dec", "bibi"), ("base58", "utf8"), ("budu", "bin"), ("oct", "base58"),
    ])
    def test_round_trip_digits(self, source_name, target_name):
        source = get_system(source_name)
        target = get_system(target_name)
        coder = Coder(source, target)
        rng = random.Random(len(source_name + target_name))
        digits = [rng.randrange(1, source.base)] + [
            rng.randrange(source.base) for _ in range(120)
        ]
        there = coder.swap(render(digits, source))
        back = coder.inverse().swap(there)
        assert parse(back, source) == digits


class TestConversionErrors:
    """Bad input raises ConversionError chained to the parse failure."""

    def test_unknown_symbol(self, dec, hex_system):
        with pytest.raises(ConversionError) as info:
            Coder(dec, hex_system).swap("12a")
        assert info.value.side == "source"
        assert isinstance(info.value.cause, UnrecognizedSymbolError)
        assert info.value.__cause__ is info.value.cause

    def test_target_symbols_not_accepted_as_source(self, dec, bibi):
        with pytest.raises(ConversionError):
            Coder(dec, bibi).swap("BIDAHO")
