"""
Bar/space width pattern assembly.

A module pattern is a string of run widths, bar first, alternating bar
and space. Each digit is four runs totalling 7 modules. A gap before a
chained add-on is one space run whose width is written as
``chr(ord("0") + gap)``, so gaps of 10-12 read ``:``, ``;`` and ``<``.
"""

from __future__ import annotations

import logging
from typing import Dict, Final, List, Optional, Tuple

from eanupc.barcodegen.parity import addon_parity, ean13_parity, flat_parity
from eanupc.model.enums import RepresentationSet

logger = logging.getLogger(__name__)

__all__ = [
    "SET_A",
    "SET_B",
    "START_GUARD",
    "CENTRE_GUARD",
    "STOP_GUARD",
    "UPCE_STOP_GUARD",
    "ADDON_START_GUARD",
    "ADDON_SEPARATOR_GUARD",
    "PatternAssembler",
    "draw_upca",
    "draw_ean13",
    "draw_upce",
    "draw_addon",
    "width_char",
]

# Representation sets A and C (EN Table 1)
SET_A: Final[Tuple[str, ...]] = (
    "3211", "2221", "2122", "1411", "1132", "1231", "1114", "1312", "1213", "3112",
)

# Representation set B (EN Table 1)
SET_B: Final[Tuple[str, ...]] = (
    "1123", "1222", "2212", "1141", "2311", "1321", "4111", "2131", "3121", "2113",
)

# Set C is drawn with the set A widths
_TABLES: Final[Dict[RepresentationSet, Tuple[str, ...]]] = {
    RepresentationSet.A: SET_A,
    RepresentationSet.B: SET_B,
}

START_GUARD: Final[str] = "111"
CENTRE_GUARD: Final[str] = "11111"
STOP_GUARD: Final[str] = "111"
UPCE_STOP_GUARD: Final[str] = "111111"
ADDON_START_GUARD: Final[str] = "112"
ADDON_SEPARATOR_GUARD: Final[str] = "11"


def width_char(width: int) -> str:
    """Encode a run width as a single pattern character."""
    return chr(ord("0") + width)


class PatternAssembler:
    """
    Append-only accumulator for a module pattern.

    Examples:
        >>> asm = PatternAssembler()
        >>> asm.guard(START_GUARD).digit("5", "A").pattern
        '1111231'
    """

    def __init__(self) -> None:
        self._parts: List[str] = []

    def guard(self, pattern: str) -> "PatternAssembler":
        self._parts.append(pattern)
        return self

    def digit(self, ch: str, rep_set: str) -> "PatternAssembler":
        table = _TABLES[RepresentationSet(rep_set).widths_set]
        self._parts.append(table[int(ch)])
        return self

    def gap(self, width: int) -> "PatternAssembler":
        self._parts.append(width_char(width))
        return self

    def digits(
        self, digits: str, parity: str, centre_at: Optional[int] = None
    ) -> "PatternAssembler":
        """Draw ``digits`` with ``parity``; centre guard before index ``centre_at``."""
        if len(parity) < len(digits):
            raise ValueError(f"parity {parity!r} shorter than digits {digits!r}")
        for i, ch in enumerate(digits):
            if i == centre_at:
                self.guard(CENTRE_GUARD)
            self.digit(ch, parity[i])
        return self

    @property
    def pattern(self) -> str:
        return "".join(self._parts)

    @property
    def modules(self) -> int:
        """Total width of the pattern in modules."""
        return sum(ord(ch) - ord("0") for ch in self.pattern)


def draw_upca(gtin: str, asm: Optional[PatternAssembler] = None) -> PatternAssembler:
    """UPC-A and EAN-8: all digits drawn, centre guard half way."""
    asm = asm or PatternAssembler()
    asm.guard(START_GUARD)
    asm.digits(gtin, flat_parity(len(gtin)), centre_at=len(gtin) // 2)
    asm.guard(STOP_GUARD)
    return asm


def draw_ean13(gtin: str, asm: Optional[PatternAssembler] = None) -> PatternAssembler:
    """EAN-13: the leading digit is carried by the left-half parity, not drawn."""
    asm = asm or PatternAssembler()
    asm.guard(START_GUARD)
    asm.digits(gtin[1:], ean13_parity(gtin), centre_at=6)
    asm.guard(STOP_GUARD)
    return asm


def draw_upce(compressed: str, parity: str, asm: Optional[PatternAssembler] = None) -> PatternAssembler:
    asm = asm or PatternAssembler()
    asm.guard(START_GUARD)
    asm.digits(compressed, parity)
    asm.guard(UPCE_STOP_GUARD)
    return asm


def draw_addon(digits: str, asm: Optional[PatternAssembler] = None, gap: int = 0) -> PatternAssembler:
    """EAN-2/EAN-5 add-on, preceded by ``gap`` when chained after a primary symbol."""
    asm = asm or PatternAssembler()
    parity = addon_parity(digits)
    if gap:
        asm.gap(gap)
    asm.guard(ADDON_START_GUARD)
    for i, ch in enumerate(digits):
        asm.digit(ch, parity[i])
        if i != len(digits) - 1:
            asm.guard(ADDON_SEPARATOR_GUARD)
    logger.debug("Add-on %s: parity %s, gap %d", digits, parity, gap)
    return asm
