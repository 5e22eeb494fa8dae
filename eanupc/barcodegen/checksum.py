"""
RU: Контрольные цифры EAN/UPC (mod 10) и ISBN-10/SBN (mod 11).
EN: Check digit algorithms for the EAN/UPC family.

UPC and EAN weight the positions in opposite order: ``upc_check`` puts
weight 3 on even indices (counting from 0 at the left), ``ean_check`` on
odd ones. Both land weight 3 on the digit next to the check digit for the
input lengths they are used with (11 and 7 for UPC, 12 for EAN).
"""

from __future__ import annotations

import logging
from typing import Optional

from eanupc.barcodegen.errors import InvalidCheckDigitError
from eanupc.model.enums import Symbology

logger = logging.getLogger(__name__)

__all__ = ["upc_check", "ean_check", "isbn_check", "verify_check"]


def _weighted_mod10(digits: str, even_weight: int, odd_weight: int) -> str:
    count = 0
    for i, ch in enumerate(digits):
        count += int(ch) * (odd_weight if i & 1 else even_weight)
    return str((10 - count % 10) % 10)


def upc_check(digits: str) -> str:
    """
    UPC-A / UPC-E / EAN-8 check digit.

    >>> upc_check("03600029145")
    '2'
    """
    return _weighted_mod10(digits, even_weight=3, odd_weight=1)


def ean_check(digits: str) -> str:
    """
    EAN-13 / ISBN-13 check digit.

    >>> ean_check("400638133393")
    '1'
    """
    return _weighted_mod10(digits, even_weight=1, odd_weight=3)


def isbn_check(digits: str) -> str:
    """ISBN-10 / SBN check character over 9 digits; ``"X"`` stands for 10."""
    if len(digits) != 9:
        raise ValueError(f"ISBN-10 check needs 9 digits, got {len(digits)}")
    check = sum(int(ch) * weight for weight, ch in enumerate(digits, start=1)) % 11
    return "X" if check == 10 else str(check)


def verify_check(
    supplied: str,
    expected: str,
    *,
    code: int,
    symbology: Optional[Symbology] = None,
    message: str = "Invalid check digit",
    label: str = "",
) -> None:
    """
    Raise ``InvalidCheckDigitError`` when ``supplied`` differs from ``expected``.

    ``label`` only tags the debug log line (e.g. ``"UPC-A"``).
    """
    if supplied == expected:
        return
    logger.debug(
        "%s: invalid check digit %r, expected %r", label or "check", supplied, expected
    )
    raise InvalidCheckDigitError(
        message,
        code=code,
        symbology=symbology,
        context={"supplied": supplied, "expected": expected},
    )
