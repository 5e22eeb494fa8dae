"""
RU: Таблицы чётности EAN/UPC (EN 797:1996) и выбор наборов A/B.
EN: Parity tables: which representation set (A, B, or C) draws each digit.

All tables checked against EN 797:1996.
"""

from __future__ import annotations

from typing import Final, Tuple

__all__ = [
    "ParityLookupError",
    "UPCE_PARITY_0",
    "UPCE_PARITY_1",
    "EAN2_PARITY",
    "EAN5_PARITY",
    "EAN13_PARITY",
    "upce_parity",
    "ean2_parity",
    "ean5_parity",
    "ean13_parity",
    "flat_parity",
    "addon_parity",
]

# Number sets for UPC-E, number system 0 (EN Table 4)
UPCE_PARITY_0: Final[Tuple[str, ...]] = (
    "BBBAAA", "BBABAA", "BBAABA", "BBAAAB", "BABBAA",
    "BAABBA", "BAAABB", "BABABA", "BABAAB", "BAABAB",
)

# Number system 1 is the mirror image of number system 0
UPCE_PARITY_1: Final[Tuple[str, ...]] = (
    "AAABBB", "AABABB", "AABBAB", "AABBBA", "ABAABB",
    "ABBAAB", "ABBBAA", "ABABAB", "ABABBA", "ABBABA",
)

# 2-digit add-on (EN Table 6)
EAN2_PARITY: Final[Tuple[str, ...]] = ("AA", "AB", "BA", "BB")

# 5-digit add-on (EN Table 7)
EAN5_PARITY: Final[Tuple[str, ...]] = (
    "BBAAA", "BABAA", "BAABA", "BAAAB", "ABBAA",
    "AABBA", "AAABB", "ABABA", "ABAAB", "AABAB",
)

# Left half of EAN-13, digits 2-6, keyed on the leading digit (EN Table 3)
EAN13_PARITY: Final[Tuple[str, ...]] = (
    "AAAAA", "ABABB", "ABBAB", "ABBBA", "BAABB",
    "BBAAB", "BBBAA", "BABAB", "BABBA", "BBABA",
)


class ParityLookupError(LookupError):
    """Parity key outside its table. Upstream validation makes this unreachable."""


def _lookup(table: Tuple[str, ...], index: int, name: str) -> str:
    if not 0 <= index < len(table):
        raise ParityLookupError(f"{name} parity key {index} outside 0..{len(table) - 1}")
    return table[index]


def _digit(ch: str, name: str) -> int:
    if len(ch) != 1 or not ch.isdigit():
        raise ParityLookupError(f"{name} parity key {ch!r} is not a digit")
    return int(ch)


def upce_parity(check_digit: str, number_system: int) -> str:
    """
    >>> upce_parity("5", 0)
    'BAABBA'
    """
    if number_system == 1:
        return _lookup(UPCE_PARITY_1, _digit(check_digit, "UPC-E"), "UPC-E")
    if number_system == 0:
        return _lookup(UPCE_PARITY_0, _digit(check_digit, "UPC-E"), "UPC-E")
    raise ParityLookupError(f"UPC-E number system {number_system} not 0 or 1")


def ean2_parity(digits: str) -> str:
    """
    Key is the add-on value modulo 4.

    >>> ean2_parity("12")
    'AA'
    >>> ean2_parity("14")
    'BA'
    """
    if len(digits) != 2:
        raise ParityLookupError(f"EAN-2 parity needs 2 digits, got {len(digits)}")
    value = 10 * _digit(digits[0], "EAN-2") + _digit(digits[1], "EAN-2")
    return _lookup(EAN2_PARITY, value % 4, "EAN-2")


def ean5_parity(digits: str) -> str:
    """
    Key is ``3 * (d0 + d2 + d4) + 9 * (d1 + d3)`` modulo 10.

    >>> ean5_parity("52495")
    'BABAA'
    """
    if len(digits) != 5:
        raise ParityLookupError(f"EAN-5 parity needs 5 digits, got {len(digits)}")
    values = [_digit(ch, "EAN-5") for ch in digits]
    parity_sum = 3 * (values[0] + values[2] + values[4]) + 9 * (values[1] + values[3])
    return _lookup(EAN5_PARITY, parity_sum % 10, "EAN-5")


def addon_parity(digits: str) -> str:
    if len(digits) == 2:
        return ean2_parity(digits)
    if len(digits) == 5:
        return ean5_parity(digits)
    raise ParityLookupError(f"add-on must be 2 or 5 digits, got {len(digits)}")


def ean13_parity(gtin: str) -> str:
    """
    Sets for the 12 drawn digits of an EAN-13 (the leading digit is implied).

    >>> ean13_parity("9780195011098")
    'ABBABACCCCCC'
    """
    left = _lookup(EAN13_PARITY, _digit(gtin[0], "EAN-13"), "EAN-13")
    return "A" + left + "C" * 6


def flat_parity(length: int) -> str:
    """UPC-A and EAN-8: set A left of the centre guard, set C right of it."""
    half = length // 2
    return "A" * half + "C" * (length - half)
