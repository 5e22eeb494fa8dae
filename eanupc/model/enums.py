"""
model/enums.py

(Краткое RU: Перечисления доменной модели кодировщика EAN/UPC.)

EN: Domain enums for the EAN/UPC encoder: request symbologies, the symbol
forms they resolve to, error kinds and representation sets.
NO encoding logic here!

See Also:
    - EN 797:1996 (EAN/UPC bar code symbology specification)
    - eanupc/barcodegen (for encoding logic)
"""

from __future__ import annotations

from enum import Enum
from typing import Final, Literal

# === SYMBOL LIMITS ===
MAX_INPUT_LENGTH: Final[int] = 19  # 13 + "+" + 5
MAX_PRIMARY_LENGTH: Final[int] = 13
MAX_ADDON_LENGTH: Final[int] = 5


class Symbology(str, Enum):
    """Requested symbology variant. EAN-13/8/2/5 are chosen by input length."""

    EANX = "eanx"
    EANX_CHK = "eanx_chk"
    EANX_CC = "eanx_cc"
    UPCA = "upca"
    UPCA_CHK = "upca_chk"
    UPCA_CC = "upca_cc"
    UPCE = "upce"
    UPCE_CHK = "upce_chk"
    UPCE_CC = "upce_cc"
    ISBNX = "isbnx"

    @property
    def legacy_id(self) -> int:
        """Legacy numeric symbology id."""
        return _LEGACY_IDS[self]

    @property
    def is_composite(self) -> bool:
        return self in {Symbology.EANX_CC, Symbology.UPCA_CC, Symbology.UPCE_CC}

    @property
    def is_upca_class(self) -> bool:
        return self in {Symbology.UPCA, Symbology.UPCA_CHK, Symbology.UPCA_CC}

    @property
    def is_upce_class(self) -> bool:
        return self in {Symbology.UPCE, Symbology.UPCE_CHK, Symbology.UPCE_CC}

    @property
    def expects_check_digit(self) -> bool:
        """True for variants where the caller always supplies the check digit."""
        return self in {Symbology.EANX_CHK, Symbology.UPCA_CHK, Symbology.UPCE_CHK}

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            self.EANX: "EAN (13/8/2/5)",
            self.EANX_CHK: "EAN с контрольной цифрой",
            self.EANX_CC: "EAN композитный",
            self.UPCA: "UPC-A",
            self.UPCA_CHK: "UPC-A с контрольной цифрой",
            self.UPCA_CC: "UPC-A композитный",
            self.UPCE: "UPC-E",
            self.UPCE_CHK: "UPC-E с контрольной цифрой",
            self.UPCE_CC: "UPC-E композитный",
            self.ISBNX: "ISBN (EAN-13)",
        }
        names_en = {
            self.EANX: "EAN (13/8/2/5)",
            self.EANX_CHK: "EAN + check digit",
            self.EANX_CC: "EAN composite",
            self.UPCA: "UPC-A",
            self.UPCA_CHK: "UPC-A + check digit",
            self.UPCA_CC: "UPC-A composite",
            self.UPCE: "UPC-E",
            self.UPCE_CHK: "UPC-E + check digit",
            self.UPCE_CC: "UPC-E composite",
            self.ISBNX: "ISBN (EAN-13)",
        }
        return names_ru[self] if lang == "ru" else names_en[self]


_LEGACY_IDS: Final[dict[Symbology, int]] = {
    Symbology.EANX: 13,
    Symbology.EANX_CHK: 14,
    Symbology.UPCA: 34,
    Symbology.UPCA_CHK: 35,
    Symbology.UPCE: 37,
    Symbology.UPCE_CHK: 38,
    Symbology.ISBNX: 69,
    Symbology.EANX_CC: 131,
    Symbology.UPCA_CC: 135,
    Symbology.UPCE_CC: 136,
}


class SymbolKind(str, Enum):
    """The symbol form a request resolved to after normalization."""

    EAN13 = "ean13"
    EAN8 = "ean8"
    EAN5 = "ean5"
    EAN2 = "ean2"
    UPCA = "upca"
    UPCE = "upce"
    ISBN = "isbn"

    @property
    def linear_width(self) -> int:
        """Width in modules of the primary symbol, without add-on."""
        return _LINEAR_WIDTHS[self]


_LINEAR_WIDTHS: Final[dict[SymbolKind, int]] = {
    SymbolKind.EAN13: 95,
    SymbolKind.EAN8: 67,
    SymbolKind.EAN5: 47,
    SymbolKind.EAN2: 20,
    SymbolKind.UPCA: 95,
    SymbolKind.UPCE: 51,
    SymbolKind.ISBN: 95,
}


class ErrorKind(str, Enum):
    INVALID_CHARACTER = "invalid_character"
    WRONG_LENGTH = "wrong_length"
    INVALID_CHECK_DIGIT = "invalid_check_digit"
    INVALID_DATA = "invalid_data"


class RepresentationSet(str, Enum):
    """EN 797 Table 1 number sets. C shares widths with A."""

    A = "A"
    B = "B"
    C = "C"

    @property
    def widths_set(self) -> "RepresentationSet":
        return RepresentationSet.B if self is RepresentationSet.B else RepresentationSet.A


DEFAULT_SYMBOLOGY: Final[Symbology] = Symbology.EANX


__all__ = [
    "Symbology",
    "SymbolKind",
    "ErrorKind",
    "RepresentationSet",
    "DEFAULT_SYMBOLOGY",
    "MAX_INPUT_LENGTH",
    "MAX_PRIMARY_LENGTH",
    "MAX_ADDON_LENGTH",
]
