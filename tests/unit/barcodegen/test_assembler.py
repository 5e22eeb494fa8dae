import pytest

from eanupc.barcodegen.assembler import (
    ADDON_START_GUARD,
    CENTRE_GUARD,
    SET_A,
    SET_B,
    START_GUARD,
    STOP_GUARD,
    UPCE_STOP_GUARD,
    PatternAssembler,
    draw_addon,
    draw_ean13,
    draw_upca,
    draw_upce,
    width_char,
)
from eanupc.barcodegen.matrix import decode_widths


class TestTables:
    @pytest.mark.parametrize("table", [SET_A, SET_B])
    def test_every_digit_is_seven_modules(self, table: tuple) -> None:
        for entry in table:
            assert len(entry) == 4
            assert sum(decode_widths(entry)) == 7

    def test_set_b_is_set_a_reversed(self) -> None:
        for a, b in zip(SET_A, SET_B):
            assert b == a[::-1]

    def test_set_a_has_odd_bar_parity(self) -> None:
        # Left-half digits start with a space: bars are runs 1 and 3
        for entry in SET_A:
            widths = decode_widths(entry)
            assert (widths[1] + widths[3]) % 2 == 1

    def test_guard_widths(self) -> None:
        assert sum(decode_widths(START_GUARD)) == 3
        assert sum(decode_widths(CENTRE_GUARD)) == 5
        assert sum(decode_widths(UPCE_STOP_GUARD)) == 6
        assert sum(decode_widths(ADDON_START_GUARD)) == 4


class TestWidthChar:
    @pytest.mark.parametrize("width,expected", [(1, "1"), (7, "7"), (9, "9"), (10, ":"), (11, ";"), (12, "<")])
    def test_encoding(self, width: int, expected: str) -> None:
        assert width_char(width) == expected
        assert decode_widths(expected) == [width]


class TestPatternAssembler:
    def test_chaining(self) -> None:
        asm = PatternAssembler().guard(START_GUARD).digit("5", "A").digit("5", "B")
        assert asm.pattern == "111" + "1231" + "1321"
        assert asm.modules == 17

    def test_set_c_shares_set_a_widths(self) -> None:
        assert PatternAssembler().digit("3", "C").pattern == SET_A[3]

    def test_centre_guard_position(self) -> None:
        asm = PatternAssembler().digits("1234", "AACC", centre_at=2)
        assert asm.pattern == SET_A[1] + SET_A[2] + CENTRE_GUARD + SET_A[3] + SET_A[4]

    def test_short_parity_rejected(self) -> None:
        with pytest.raises(ValueError):
            PatternAssembler().digits("1234", "AAA")

    def test_empty(self) -> None:
        asm = PatternAssembler()
        assert asm.pattern == ""
        assert asm.modules == 0


class TestDrawers:
    def test_upca(self) -> None:
        asm = draw_upca("036000291452")
        assert asm.modules == 95
        assert asm.pattern.startswith(START_GUARD + SET_A[0])
        assert asm.pattern[27:32] == CENTRE_GUARD
        assert asm.pattern.endswith(SET_A[2] + STOP_GUARD)
        assert len(asm.pattern) == 59

    def test_ean8(self) -> None:
        asm = draw_upca("55123457")
        assert asm.modules == 67
        assert asm.pattern[19:24] == CENTRE_GUARD

    def test_ean13_skips_leading_digit(self) -> None:
        asm = draw_ean13("9780195011098")
        assert asm.modules == 95
        # '7' in set A, '8' in set B for a leading 9
        assert asm.pattern[3:7] == SET_A[7]
        assert asm.pattern[7:11] == SET_B[8]

    def test_upce(self) -> None:
        asm = draw_upce("123450", "BAABBA")
        assert asm.modules == 51
        assert asm.pattern.startswith(START_GUARD + SET_B[1])
        assert asm.pattern.endswith(UPCE_STOP_GUARD)

    @pytest.mark.parametrize("digits,modules", [("12", 20), ("52495", 47)])
    def test_addon(self, digits: str, modules: int) -> None:
        asm = draw_addon(digits)
        assert asm.modules == modules
        assert asm.pattern.startswith(ADDON_START_GUARD)

    def test_addon_with_gap(self) -> None:
        asm = draw_addon("12", gap=10)
        assert asm.pattern.startswith(":" + ADDON_START_GUARD)
        assert asm.modules == 30

    def test_chained(self) -> None:
        asm = draw_ean13("9780195011098")
        draw_addon("12", asm, gap=7)
        assert asm.modules == 95 + 7 + 20
