from __future__ import annotations

import logging
from typing import Callable, Dict, FrozenSet, Optional, Set, Tuple, Union

from PIL import Image

from eanupc.barcodegen.assembler import (
    PatternAssembler,
    draw_addon,
    draw_ean13,
    draw_upca,
    draw_upce,
)
from eanupc.barcodegen.checksum import ean_check, isbn_check, upc_check, verify_check
from eanupc.barcodegen.composite import reserve_separator_rows, shift_linear_row
from eanupc.barcodegen.errors import (
    EncodeError,
    InvalidCharacterError,
    InvalidDataError,
    WrongLengthError,
)
from eanupc.barcodegen.matrix import ModuleMatrix
from eanupc.barcodegen.normalizer import normalize
from eanupc.barcodegen.render import render_image
from eanupc.barcodegen.upce import expand_upce, split_upce_input
from eanupc.config import DEFAULT_CONFIG, EncoderConfig
from eanupc.model.enums import DEFAULT_SYMBOLOGY, Symbology, SymbolKind
from eanupc.model.symbol import EncodeOptions, Symbol, SymbolBuilder

logger = logging.getLogger(__name__)

__all__ = [
    "encode",
    "BarcodeEncoder",
]

_ISBN13_PREFIXES: FrozenSet[str] = frozenset({"978", "979"})

# Primary lengths each symbology accepts after padding, with the code
# raised for anything else.
_ACCEPTED_LENGTHS: Dict[Symbology, Tuple[FrozenSet[int], int]] = {
    Symbology.EANX: (frozenset({2, 5, 7, 8, 12, 13}), 286),
    Symbology.EANX_CHK: (frozenset({2, 5, 7, 8, 12, 13}), 286),
    Symbology.EANX_CC: (frozenset({7, 12, 13}), 287),
    Symbology.UPCA: (frozenset({11, 12}), 288),
    Symbology.UPCA_CHK: (frozenset({11, 12}), 288),
    Symbology.UPCA_CC: (frozenset({11, 12}), 289),
    Symbology.UPCE: (frozenset({6, 7}), 290),
    Symbology.UPCE_CHK: (frozenset({7, 8}), 290),
    Symbology.UPCE_CC: (frozenset({6, 7}), 291),
}


def _check_length(symbology: Symbology, primary: str) -> None:
    lengths, code = _ACCEPTED_LENGTHS[symbology]
    if len(primary) not in lengths:
        raise WrongLengthError(
            "Input wrong length",
            code=code,
            symbology=symbology,
            context={"length": len(primary)},
        )


def _ean8(gtin: str, symbology: Symbology, asm: PatternAssembler) -> str:
    check = upc_check(gtin[:7])
    if len(gtin) == 7:
        gtin += check
    else:
        verify_check(gtin[7], check, code=276, symbology=symbology, label="EAN-8")
    logger.debug("EAN-8: gtin %s, check digit %s", gtin, check)
    draw_upca(gtin, asm)
    return gtin


def _ean13(gtin: str, symbology: Symbology, asm: PatternAssembler) -> str:
    check = ean_check(gtin[:12])
    if len(gtin) == 12:
        gtin += check
    else:
        verify_check(gtin[12], check, code=275, symbology=symbology, label="EAN-13")
    logger.debug("EAN-13: gtin %s, check digit %s", gtin, check)
    draw_ean13(gtin, asm)
    return gtin


def _encode_ean(symbology: Symbology, primary: str, asm: PatternAssembler) -> Tuple[SymbolKind, str]:
    _check_length(symbology, primary)
    if len(primary) in (2, 5):
        draw_addon(primary, asm)
        return (SymbolKind.EAN2 if len(primary) == 2 else SymbolKind.EAN5), primary
    if len(primary) in (7, 8):
        return SymbolKind.EAN8, _ean8(primary, symbology, asm)
    return SymbolKind.EAN13, _ean13(primary, symbology, asm)


def _encode_upca(symbology: Symbology, primary: str, asm: PatternAssembler) -> Tuple[SymbolKind, str]:
    _check_length(symbology, primary)
    check = upc_check(primary[:11])
    gtin = primary
    if len(gtin) == 11:
        gtin += check
    else:
        verify_check(gtin[11], check, code=270, symbology=symbology, label="UPC-A")
    logger.debug("UPC-A: gtin %s, check digit %s", gtin, check)
    draw_upca(gtin, asm)
    return SymbolKind.UPCA, gtin


def _encode_upce(symbology: Symbology, primary: str, asm: PatternAssembler) -> Tuple[SymbolKind, str]:
    _check_length(symbology, primary)
    number_system, compressed, supplied, system_digit = split_upce_input(symbology, primary)
    expansion = expand_upce(
        compressed, number_system, supplied, symbology=symbology, system_digit=system_digit
    )
    draw_upce(expansion.compressed, expansion.parity, asm)
    return SymbolKind.UPCE, expansion.text


def _encode_isbn(symbology: Symbology, primary: str, asm: PatternAssembler) -> Tuple[SymbolKind, str]:
    # X is only valid as an ISBN-10/SBN check character
    if "X" in primary[:-1]:
        raise InvalidCharacterError("Invalid characters in input", code=277, symbology=symbology)
    length = len(primary)
    if length not in (9, 10, 13):
        raise WrongLengthError(
            "Input wrong length", code=278, symbology=symbology, context={"length": length}
        )
    if length == 13 and primary.endswith("X"):
        raise InvalidCharacterError("Invalid characters in input", code=277, symbology=symbology)

    if length == 13:
        if primary[:3] not in _ISBN13_PREFIXES:
            raise InvalidDataError(
                "Invalid ISBN", code=279, symbology=symbology, context={"prefix": primary[:3]}
            )
        verify_check(
            primary[12],
            ean_check(primary[:12]),
            code=280,
            symbology=symbology,
            message="Incorrect ISBN check",
            label="ISBN",
        )
        gtin = primary[:12]
    else:
        label = "SBN" if length == 9 else "ISBN"
        isbn10 = "0" + primary if length == 9 else primary
        verify_check(
            isbn10[9],
            isbn_check(isbn10[:9]),
            code=281,
            symbology=symbology,
            message=f"Incorrect {label} check",
            label=f"ISBN(10)/{label}",
        )
        gtin = "978" + isbn10[:9]

    return SymbolKind.ISBN, _ean13(gtin, symbology, asm)


_PRIMARY_ENCODERS: Dict[
    Symbology, Callable[[Symbology, str, PatternAssembler], Tuple[SymbolKind, str]]
] = {
    Symbology.EANX: _encode_ean,
    Symbology.EANX_CHK: _encode_ean,
    Symbology.EANX_CC: _encode_ean,
    Symbology.UPCA: _encode_upca,
    Symbology.UPCA_CHK: _encode_upca,
    Symbology.UPCA_CC: _encode_upca,
    Symbology.UPCE: _encode_upce,
    Symbology.UPCE_CHK: _encode_upce,
    Symbology.UPCE_CC: _encode_upce,
    Symbology.ISBNX: _encode_isbn,
}


def encode(
    raw: Union[str, bytes],
    symbology: Symbology = DEFAULT_SYMBOLOGY,
    options: Optional[EncodeOptions] = None,
    config: EncoderConfig = DEFAULT_CONFIG,
) -> Symbol:
    """
    Encode ``raw`` as an EAN/UPC/ISBN symbol.

    Stages: normalize, check digit or UPC-E expansion, parity, pattern
    assembly, composite rows. Nothing is returned unless every stage
    succeeds.

    Args:
        raw: Digits, optionally followed by ``+`` and a 2 or 5 digit add-on.
        symbology: Requested variant (EAN by default).
        options: Add-on gap and row height overrides.
        config: Encoder defaults.

    Returns:
        The committed Symbol.

    Raises:
        EncodeError: any validation failure (see ``errors`` for codes).
        TypeError: ``symbology`` is not a Symbology.

    Examples:
        >>> encode("036000291452", Symbology.UPCA).text
        '036000291452'
        >>> encode("9780195011098+12", Symbology.EANX).text
        '9780195011098+12'
    """
    if not isinstance(symbology, Symbology):
        raise TypeError(f"symbology must be Symbology enum, got {type(symbology)!r}")
    options = options or EncodeOptions()

    try:
        normalized = normalize(raw, symbology, options, config)
        builder = SymbolBuilder(symbology=symbology, addon_gap=normalized.addon_gap)
        matrix = ModuleMatrix()
        asm = PatternAssembler()

        builder.kind, builder.text = _PRIMARY_ENCODERS[symbology](symbology, normalized.primary, asm)

        if normalized.addon:
            if len(normalized.addon) not in (2, 5):
                raise WrongLengthError(
                    "Add-on input wrong length", code=292, symbology=symbology
                )
            draw_addon(normalized.addon, asm, gap=normalized.addon_gap)
            builder.text += "+" + normalized.addon
    except EncodeError as e:
        logger.debug("Encoding %r as %s failed: %s", raw, symbology.value, e.errtxt)
        raise

    if symbology.is_composite:
        builder.separator_modules = reserve_separator_rows(
            matrix, builder.kind, config.separator_row_height
        )

    builder.pattern = asm.pattern
    matrix.expand(builder.pattern, options.height or config.linear_row_height)
    if symbology.is_composite:
        shift_linear_row(matrix)

    builder.rows = list(matrix.as_strings())
    builder.row_heights = matrix.row_heights[: matrix.rows]
    builder.width = matrix.width
    symbol = builder.build()
    logger.debug("%s: text %s, width %d, rows %d", symbology.value, symbol.text, symbol.width, symbol.row_count)
    return symbol


class BarcodeEncoder:
    """
    Object API over ``encode`` for callers that validate and render separately.

    Args:
        symbology: Requested variant.
        data: Payload string.
        options: Optional per-request options.
        config: Encoder defaults (``EncoderConfig()`` when omitted).
    """

    def __init__(
        self,
        symbology: Symbology,
        data: Union[str, bytes],
        options: Optional[EncodeOptions] = None,
        config: Optional[EncoderConfig] = None,
    ) -> None:
        if not isinstance(symbology, Symbology):
            raise TypeError(f"symbology must be Symbology enum, got {type(symbology)!r}")
        self.symbology = symbology
        self.data = data
        self.options = options or EncodeOptions()
        self.config = config or DEFAULT_CONFIG

    def validate(self) -> None:
        """
        Run the full pipeline and discard the result.

        Raises:
            EncodeError: at the first failing stage.
        """
        self.encode()

    def encode(self) -> Symbol:
        return encode(self.data, self.symbology, self.options, self.config)

    def render_image(
        self,
        scale: Optional[int] = None,
        quiet_zone: Optional[int] = None,
        strict: bool = True,
    ) -> Image.Image:
        """
        Encode and draw a preview.

        Args:
            scale: Pixels per module.
            quiet_zone: Blank modules around the symbol.
            strict: If True, raise on encode errors. If False, log a warning
                and return a white placeholder image.

        Raises:
            EncodeError: If strict and encoding failed.
        """
        try:
            symbol = self.encode()
        except EncodeError as e:
            if strict:
                raise
            logger.warning("%s; returning placeholder", e)
            size = (self.config.linear_row_height * 2, self.config.linear_row_height)
            return Image.new("RGB", size, "white")
        return render_image(symbol, scale=scale, quiet_zone=quiet_zone, config=self.config)

    @classmethod
    def supported_types(cls) -> Set[Symbology]:
        return set(_PRIMARY_ENCODERS)
