"""
RU: Разделительные строки для композитных символов (ISO/IEC 24723, раздел 11.4).
EN: Composite row adapter: separator rows above the linear symbol and the
one-column shift that makes room for them.

Three rows are reserved. The outer two carry separator modules at
columns 1 and W, the middle one at 0 and W + 1, where W is the width
class of the linear symbol (67 EAN-8, 95 EAN-13/UPC-A, 51 UPC-E).
"""

from __future__ import annotations

import logging
from typing import Final, FrozenSet, List, Tuple

from eanupc.barcodegen.matrix import ModuleMatrix
from eanupc.model.enums import SymbolKind

logger = logging.getLogger(__name__)

__all__ = [
    "SEPARATOR_ROWS",
    "separator_columns",
    "reserve_separator_rows",
    "shift_linear_row",
]

SEPARATOR_ROWS: Final[int] = 3

# Only these forms have a composite-linked variant; EAN-2/EAN-5 and ISBN do not.
_COMPOSITE_KINDS: Final[FrozenSet[SymbolKind]] = frozenset(
    {SymbolKind.EAN8, SymbolKind.EAN13, SymbolKind.UPCA, SymbolKind.UPCE}
)


def separator_columns(kind: SymbolKind) -> Tuple[Tuple[int, int], ...]:
    """
    Separator module columns for each reserved row.

    >>> separator_columns(SymbolKind.EAN13)
    ((1, 95), (0, 96), (1, 95))
    """
    if kind not in _COMPOSITE_KINDS:
        raise ValueError(f"{kind.value} cannot carry a composite component")
    width = kind.linear_width
    return ((1, width), (0, width + 1), (1, width))


def reserve_separator_rows(
    matrix: ModuleMatrix, kind: SymbolKind, row_height: int = 2
) -> List[Tuple[int, int]]:
    """Write the separator rows at the matrix's next free row; return the set modules."""
    first_row = matrix.rows
    modules: List[Tuple[int, int]] = []
    for offset, columns in enumerate(separator_columns(kind)):
        row = first_row + offset
        for column in columns:
            matrix.set_module(row, column)
            modules.append((row, column))
        matrix.row_heights[row] = row_height
    matrix.rows += SEPARATOR_ROWS
    logger.debug("Reserved composite separator rows %d-%d for %s", first_row, matrix.rows - 1, kind.value)
    return modules


def shift_linear_row(matrix: ModuleMatrix) -> None:
    """Move the last row one column right, clear column 0, widen by 2."""
    row = matrix.rows - 1
    for column in range(matrix.width + 1, 0, -1):
        if matrix.module_is_set(row, column - 1):
            matrix.set_module(row, column)
        else:
            matrix.unset_module(row, column)
    matrix.unset_module(row, 0)
    matrix.width += 2
