"""
Input normalization: split on ``+``, validate characters and lengths,
left-pad each part with zeros to its canonical length.

Padding targets are table driven. Each symbology has an ordered list of
``(max_length, target)`` thresholds; the first threshold the part fits
under decides the padded length, and longer parts are passed through
unchanged for the dispatcher to accept or reject.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Final, Mapping, Optional, Tuple, Union

from eanupc.barcodegen.errors import InvalidCharacterError, WrongLengthError
from eanupc.config import DEFAULT_CONFIG, EncoderConfig
from eanupc.model.enums import (
    MAX_ADDON_LENGTH,
    MAX_INPUT_LENGTH,
    MAX_PRIMARY_LENGTH,
    Symbology,
)
from eanupc.model.symbol import EncodeOptions, NormalizedInput

logger = logging.getLogger(__name__)

__all__ = [
    "ADDON_SEPARATOR",
    "normalize",
    "split_parts",
    "primary_target_length",
    "addon_target_length",
    "resolve_addon_gap",
]

ADDON_SEPARATOR: Final[str] = "+"

_DIGITS: Final[frozenset] = frozenset("0123456789")
_ISBN_CHARS: Final[frozenset] = _DIGITS | {"X"}

Thresholds = Tuple[Tuple[int, int], ...]

_PRIMARY_TARGETS: Final[Mapping[Symbology, Thresholds]] = MappingProxyType(
    {
        Symbology.EANX: ((7, 7), (12, 12)),
        Symbology.EANX_CC: ((7, 7), (12, 12)),
        Symbology.EANX_CHK: ((8, 8), (13, 13)),
        Symbology.UPCA: ((11, 11),),
        Symbology.UPCA_CC: ((11, 11),),
        Symbology.UPCA_CHK: ((12, 12),),
        Symbology.UPCE: ((6, 6), (7, 7)),
        Symbology.UPCE_CC: ((6, 6), (7, 7)),
        Symbology.UPCE_CHK: ((7, 7), (8, 8)),
        Symbology.ISBNX: ((9, 9),),
    }
)

# Without an add-on, plain EAN requests may be a bare EAN-2 or EAN-5.
_BARE_ADDON_TARGETS: Final[Thresholds] = ((2, 2), (5, 5))
_BARE_ADDON_SYMBOLOGIES: Final[frozenset] = frozenset({Symbology.EANX, Symbology.EANX_CHK})

_ADDON_TARGETS: Final[Thresholds] = ((0, 0), (2, 2), (5, 5))


def _target(length: int, thresholds: Thresholds) -> Optional[int]:
    for max_length, target in thresholds:
        if length <= max_length:
            return target
    return None


def primary_target_length(symbology: Symbology, length: int, has_addon: bool) -> int:
    """
    Canonical length for a primary part of ``length`` characters.

    Returns ``length`` itself when no threshold applies.

    >>> primary_target_length(Symbology.EANX, 4, has_addon=False)
    5
    >>> primary_target_length(Symbology.EANX, 4, has_addon=True)
    7
    """
    if not has_addon and symbology in _BARE_ADDON_SYMBOLOGIES:
        bare = _target(length, _BARE_ADDON_TARGETS)
        if bare is not None:
            return bare
    target = _target(length, _PRIMARY_TARGETS[symbology])
    return length if target is None else target


def addon_target_length(length: int) -> int:
    target = _target(length, _ADDON_TARGETS)
    return length if target is None else target


def resolve_addon_gap(
    symbology: Symbology,
    override: Optional[int],
    config: EncoderConfig = DEFAULT_CONFIG,
) -> int:
    """Gap before a chained add-on: the override when in range, else the default."""
    default = config.addon_gap_for(symbology)
    if override is None:
        return default
    lo, hi = config.gap_range_for(symbology)
    if lo <= override <= hi:
        return override
    logger.warning(
        "Add-on gap %r outside %d-%d for %s, using %d",
        override,
        lo,
        hi,
        symbology.value,
        default,
    )
    return default


def split_parts(source: str) -> Tuple[str, str, bool]:
    """Split at the first ``+``: ``(primary, addon, with_addon)``."""
    primary, sep, addon = source.partition(ADDON_SEPARATOR)
    return primary, addon, bool(sep)


def _decode(raw: Union[str, bytes], symbology: Symbology) -> str:
    if isinstance(raw, str):
        return raw
    try:
        return bytes(raw).decode("ascii")
    except UnicodeDecodeError as e:
        raise _invalid_characters(symbology) from e


def _invalid_characters(symbology: Symbology) -> InvalidCharacterError:
    if symbology is Symbology.ISBNX:
        return InvalidCharacterError("Invalid characters in input", code=285, symbology=symbology)
    return InvalidCharacterError("Invalid characters in data", code=284, symbology=symbology)


def normalize(
    raw: Union[str, bytes],
    symbology: Symbology,
    options: Optional[EncodeOptions] = None,
    config: EncoderConfig = DEFAULT_CONFIG,
) -> NormalizedInput:
    """
    Produce the zero-padded ``(primary, addon)`` pair for ``symbology``.

    Raises:
        WrongLengthError: input over 19 characters (283), empty (282),
            primary over 13 or add-on over 5 characters (294).
        InvalidCharacterError: characters outside ``0-9+`` (284), or
            ``0-9Xx+`` for ISBN (285).
    """
    if len(raw) > MAX_INPUT_LENGTH:
        raise WrongLengthError(
            "Input too long",
            code=283,
            symbology=symbology,
            context={"length": len(raw)},
        )
    if len(raw) == 0:
        raise WrongLengthError("No input data", code=282, symbology=symbology)

    source = _decode(raw, symbology)
    if symbology is Symbology.ISBNX:
        source = source.upper()
        allowed = _ISBN_CHARS
    else:
        allowed = _DIGITS

    primary, addon, with_addon = split_parts(source)
    if any(ch not in allowed for ch in primary) or any(ch not in _DIGITS for ch in addon):
        raise _invalid_characters(symbology)

    if len(primary) > MAX_PRIMARY_LENGTH or len(addon) > MAX_ADDON_LENGTH:
        raise WrongLengthError(
            "Input too long",
            code=294,
            symbology=symbology,
            context={"primary": len(primary), "addon": len(addon)},
        )

    primary = primary.zfill(primary_target_length(symbology, len(primary), bool(addon)))
    addon = addon.zfill(addon_target_length(len(addon)))

    addon_gap = 0
    if with_addon:
        addon_gap = resolve_addon_gap(symbology, options.addon_gap if options else None, config)

    logger.debug(
        "Normalized %r for %s: primary=%s addon=%s gap=%d",
        source,
        symbology.value,
        primary,
        addon,
        addon_gap,
    )
    return NormalizedInput(primary=primary, addon=addon, addon_gap=addon_gap, with_addon=with_addon)
