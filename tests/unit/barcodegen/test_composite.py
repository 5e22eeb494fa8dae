import pytest

from eanupc.barcodegen.composite import (
    SEPARATOR_ROWS,
    reserve_separator_rows,
    separator_columns,
    shift_linear_row,
)
from eanupc.barcodegen.matrix import ModuleMatrix, decode_widths
from eanupc.model.enums import SymbolKind


class TestModuleMatrix:
    def test_empty(self) -> None:
        matrix = ModuleMatrix()
        assert matrix.rows == 0
        assert matrix.width == 0
        assert matrix.as_strings() == ()
        assert not matrix.module_is_set(3, 3)

    def test_set_and_unset(self) -> None:
        matrix = ModuleMatrix()
        matrix.set_module(1, 4)
        assert matrix.module_is_set(1, 4)
        assert not matrix.module_is_set(1, 3)
        matrix.unset_module(1, 4)
        assert not matrix.module_is_set(1, 4)

    def test_expand_bar_first(self) -> None:
        matrix = ModuleMatrix()
        matrix.expand("1121", height=5)
        assert matrix.rows == 1
        assert matrix.width == 5
        assert matrix.row_heights == [5]
        assert matrix.as_strings() == ("10110",)

    def test_expand_gap_character(self) -> None:
        matrix = ModuleMatrix()
        matrix.expand("1:1")
        assert matrix.width == 12
        assert matrix.as_strings() == ("1" + "0" * 10 + "1",)

    def test_rows_padded_to_width(self) -> None:
        matrix = ModuleMatrix()
        matrix.expand("3")
        matrix.expand("11111")
        assert matrix.as_strings() == ("11100", "10101")

    def test_decode_widths(self) -> None:
        assert decode_widths("112<") == [1, 1, 2, 12]


class TestSeparatorColumns:
    @pytest.mark.parametrize(
        "kind,width",
        [
            (SymbolKind.EAN8, 67),
            (SymbolKind.EAN13, 95),
            (SymbolKind.UPCA, 95),
            (SymbolKind.UPCE, 51),
        ],
    )
    def test_width_classes(self, kind: SymbolKind, width: int) -> None:
        assert separator_columns(kind) == ((1, width), (0, width + 1), (1, width))

    @pytest.mark.parametrize("kind", [SymbolKind.EAN2, SymbolKind.EAN5, SymbolKind.ISBN])
    def test_unsupported(self, kind: SymbolKind) -> None:
        with pytest.raises(ValueError, match="composite"):
            separator_columns(kind)


class TestReserveAndShift:
    def test_reserve(self) -> None:
        matrix = ModuleMatrix()
        modules = reserve_separator_rows(matrix, SymbolKind.EAN8, row_height=2)
        assert matrix.rows == SEPARATOR_ROWS
        assert matrix.row_heights == [2, 2, 2]
        assert modules == [(0, 1), (0, 67), (1, 0), (1, 68), (2, 1), (2, 67)]
        for row, column in modules:
            assert matrix.module_is_set(row, column)
        assert not matrix.module_is_set(0, 0)

    def test_shift_moves_last_row_right(self) -> None:
        matrix = ModuleMatrix()
        reserve_separator_rows(matrix, SymbolKind.UPCE)
        matrix.expand("111" + "1" * 42 + "111111")
        assert matrix.width == 51
        before = matrix.as_strings()[3]

        shift_linear_row(matrix)

        assert matrix.width == 53
        rows = matrix.as_strings()
        assert all(len(r) == 53 for r in rows)
        assert rows[3] == "0" + before + "0"
        # separator rows untouched
        assert rows[1][0] == "1" and rows[1][52] == "1"
        assert rows[0][1] == "1" and rows[0][51] == "1"
