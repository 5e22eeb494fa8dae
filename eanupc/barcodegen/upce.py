"""
RU: Расширение и сжатие нулей UPC-E (EN 797, таблица 5).
EN: UPC-E zero suppression: 6-digit compressed code <-> 11-digit UPC-A equivalent.

The sixth compressed digit (``emode``) selects where the zeros go:

    emode 0-2   mfr = s0 s1 emode 0 0   item = 0 0 s2 s3 s4
    emode 3     mfr = s0 s1 s2 0 0      item = 0 0 0 s3 s4     (s2 not 0, 1, 2)
    emode 4     mfr = s0 s1 s2 s3 0     item = 0 0 0 0 s4      (s3 not 0)
    emode 5-9   mfr = s0 s1 s2 s3 s4    item = 0 0 0 0 emode   (s4 not 0)

The forbidden digits keep each equivalent reachable from exactly one mode.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Final, Optional, Tuple

from eanupc.barcodegen.checksum import upc_check, verify_check
from eanupc.barcodegen.errors import InvalidDataError
from eanupc.barcodegen.parity import upce_parity
from eanupc.model.enums import Symbology
from eanupc.model.symbol import UPCEExpansion

logger = logging.getLogger(__name__)

__all__ = ["split_upce_input", "expand_upce", "compress_upca"]

_NUMBER_SYSTEMS: Final[Dict[str, int]] = {"0": 0, "1": 1}


def split_upce_input(
    symbology: Symbology, source: str
) -> Tuple[int, str, Optional[str], Optional[str]]:
    """
    Separate number system, the 6 compressed digits and a supplied check digit.

    ``UPCE``/``UPCE_CC`` take 6 digits or number system + 6 digits.
    ``UPCE_CHK`` takes 6 digits + check, or number system + 6 digits + check.
    A leading digit other than 0 or 1 is drawn as number system 0 but kept
    as the printed system digit.

    Returns:
        ``(number_system, compressed, check, system_digit)``; ``check`` and
        ``system_digit`` are None when not supplied.
    """
    if not symbology.is_upce_class:
        raise ValueError(f"{symbology.value} is not a UPC-E symbology")
    with_check = symbology.expects_check_digit
    has_system_digit = len(source) == (8 if with_check else 7)
    number_system = 0
    system_digit = None
    if has_system_digit:
        system_digit = source[0]
        number_system = _NUMBER_SYSTEMS.get(system_digit, 0)
        if system_digit not in _NUMBER_SYSTEMS:
            logger.warning(
                "UPC-E number system %r not 0 or 1, encoding as number system 0", system_digit
            )
        source = source[1:]
    check = source[6] if with_check and len(source) > 6 else None
    return number_system, source[:6], check, system_digit


def _modes_0_to_2(s: str) -> str:
    return s[0] + s[1] + s[5] + "0000" + s[2] + s[3] + s[4]


def _mode_3(s: str) -> str:
    if s[2] in "012":
        # X3 shall not be 0, 1 or 2
        raise InvalidDataError("Invalid UPC-E data", code=271, context={"emode": "3", "digit": s[2]})
    return s[0] + s[1] + s[2] + "00000" + s[3] + s[4]


def _mode_4(s: str) -> str:
    if s[3] == "0":
        # X4 shall not be 0
        raise InvalidDataError("Invalid UPC-E data", code=272, context={"emode": "4", "digit": s[3]})
    return s[0] + s[1] + s[2] + s[3] + "00000" + s[4]


def _modes_5_to_9(s: str) -> str:
    if s[4] == "0":
        # X5 shall not be 0
        raise InvalidDataError("Invalid UPC-E data", code=273, context={"emode": s[5], "digit": s[4]})
    return s[0] + s[1] + s[2] + s[3] + s[4] + "0000" + s[5]


_EXPANDERS: Final[Dict[str, Callable[[str], str]]] = {
    "0": _modes_0_to_2,
    "1": _modes_0_to_2,
    "2": _modes_0_to_2,
    "3": _mode_3,
    "4": _mode_4,
    "5": _modes_5_to_9,
    "6": _modes_5_to_9,
    "7": _modes_5_to_9,
    "8": _modes_5_to_9,
    "9": _modes_5_to_9,
}


def expand_upce(
    compressed: str,
    number_system: int = 0,
    supplied_check: Optional[str] = None,
    symbology: Optional[Symbology] = None,
    system_digit: Optional[str] = None,
) -> UPCEExpansion:
    """
    Expand 6 compressed digits into the UPC-A equivalent.

    ``system_digit`` is the leading digit as supplied; it only changes the
    human readable text.

    Raises:
        InvalidDataError: forbidden digit for the selected mode (271-273).
        InvalidCheckDigitError: ``supplied_check`` does not match (274).

    >>> expand_upce("123450").equivalent
    '01200000345'
    """
    if len(compressed) != 6 or not compressed.isdigit():
        raise ValueError(f"UPC-E expansion needs 6 digits, got {compressed!r}")
    if number_system not in (0, 1):
        raise ValueError(f"UPC-E number system must be 0 or 1, got {number_system}")

    emode = compressed[5]
    try:
        body = _EXPANDERS[emode](compressed)
    except InvalidDataError as e:
        e.symbology = symbology
        raise
    equivalent = str(number_system) + body
    check_digit = upc_check(equivalent)
    if supplied_check is not None:
        verify_check(supplied_check, check_digit, code=274, symbology=symbology, label="UPC-E")

    expansion = UPCEExpansion(
        number_system=number_system,
        compressed=compressed,
        equivalent=equivalent,
        emode=emode,
        check_digit=check_digit,
        parity=upce_parity(check_digit, number_system),
        system_digit=system_digit,
    )
    logger.debug(
        "UPC-E: %s, equivalent: %s, check digit: %s, parity: %s",
        compressed,
        equivalent,
        check_digit,
        expansion.parity,
    )
    return expansion


def compress_upca(upca: str) -> UPCEExpansion:
    """
    Zero-suppress an 11- or 12-digit UPC-A number into its UPC-E form.

    A 12-digit input has its check digit verified. The first applicable
    mode wins in the order 0-2, 3, 4, 5-9.

    Raises:
        InvalidCheckDigitError: 12-digit input with a wrong check digit (270).
        InvalidDataError: number system not 0/1, or no zero-suppressed
            form exists (293).

    >>> compress_upca("01200000345").compressed
    '123450'
    """
    if len(upca) not in (11, 12) or not upca.isdigit():
        raise ValueError(f"UPC-A number must be 11 or 12 digits, got {upca!r}")
    if len(upca) == 12:
        verify_check(upca[11], upc_check(upca[:11]), code=270, symbology=Symbology.UPCA, label="UPC-A")
        upca = upca[:11]
    if upca[0] not in _NUMBER_SYSTEMS:
        raise InvalidDataError(
            "UPC-A number system must be 0 or 1 for UPC-E",
            code=293,
            symbology=Symbology.UPCE,
            context={"number_system": upca[0]},
        )

    mfr, item = upca[1:6], upca[6:11]
    if mfr[2] in "012" and mfr[3:] == "00" and item[:2] == "00":
        compressed = mfr[:2] + item[2:] + mfr[2]
    elif mfr[3:] == "00" and item[:3] == "000":
        compressed = mfr[:3] + item[3:] + "3"
    elif mfr[4] == "0" and item[:4] == "0000":
        compressed = mfr[:4] + item[4] + "4"
    elif item[:4] == "0000" and item[4] in "56789":
        compressed = mfr + item[4]
    else:
        raise InvalidDataError(
            "UPC-A number cannot be zero suppressed",
            code=293,
            symbology=Symbology.UPCE,
            context={"upca": upca},
        )
    return expand_upce(compressed, number_system=_NUMBER_SYSTEMS[upca[0]], symbology=Symbology.UPCE)
