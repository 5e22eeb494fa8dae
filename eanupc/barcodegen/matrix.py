"""
Module matrix: the addressable bitmap a width pattern is expanded into.

Rows grow on demand; ``width`` tracks the widest expanded row, and the
composite adapter may widen it further.
"""

from __future__ import annotations

from typing import List, Tuple

__all__ = ["ModuleMatrix", "decode_widths"]


def decode_widths(pattern: str) -> List[int]:
    """Run widths of a module pattern (gap characters included)."""
    return [ord(ch) - ord("0") for ch in pattern]


class ModuleMatrix:
    """Rows of dark (True) / light (False) modules with per-row heights."""

    def __init__(self) -> None:
        self._rows: List[List[bool]] = []
        self.row_heights: List[int] = []
        self.rows = 0
        self.width = 0

    def _ensure(self, row: int, column: int) -> None:
        while len(self._rows) <= row:
            self._rows.append([])
            self.row_heights.append(0)
        line = self._rows[row]
        if len(line) <= column:
            line.extend([False] * (column + 1 - len(line)))

    def set_module(self, row: int, column: int) -> None:
        self._ensure(row, column)
        self._rows[row][column] = True

    def unset_module(self, row: int, column: int) -> None:
        self._ensure(row, column)
        self._rows[row][column] = False

    def module_is_set(self, row: int, column: int) -> bool:
        if row >= len(self._rows) or column >= len(self._rows[row]):
            return False
        return self._rows[row][column]

    def expand(self, pattern: str, height: int = 0) -> None:
        """Draw ``pattern`` into the next free row, bar first."""
        row = self.rows
        column = 0
        bar = True
        for width in decode_widths(pattern):
            for _ in range(width):
                if bar:
                    self.set_module(row, column)
                column += 1
            bar = not bar
        self._ensure(row, max(column - 1, 0))
        self.row_heights[row] = height
        self.width = max(self.width, column)
        self.rows += 1

    def as_strings(self) -> Tuple[str, ...]:
        """One ``"1"``/``"0"`` string per row, padded to ``width``."""
        out = []
        for line in self._rows[: self.rows]:
            text = "".join("1" if m else "0" for m in line[: self.width])
            out.append(text.ljust(self.width, "0"))
        return tuple(out)
