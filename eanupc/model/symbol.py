# RU: Доменная модель результата кодирования: входные параметры, нормализованный ввод, расширение UPC-E и итоговый символ.
# EN: Encoding domain model: request options, normalized input, UPC-E expansion, and the committed Symbol with its builder.

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from .enums import MAX_PRIMARY_LENGTH, Symbology, SymbolKind

logger = logging.getLogger(__name__)

__all__ = [
    "EncodeOptions",
    "NormalizedInput",
    "UPCEExpansion",
    "Symbol",
    "SymbolBuilder",
]


@dataclass(frozen=True)
class EncodeOptions:
    """
    Per-request options.

    Attributes:
        addon_gap: White-space gap (modules) before a chained add-on.
            Honoured in 9-12 for UPC-A variants and 7-12 otherwise.
        height: Linear row height override (modules).
    """

    addon_gap: Optional[int] = None
    height: Optional[int] = None

    def __post_init__(self) -> None:
        if self.height is not None and self.height < 1:
            raise ValueError(f"height must be >= 1, got {self.height}")


@dataclass(frozen=True)
class NormalizedInput:
    primary: str
    addon: str = ""
    addon_gap: int = 0
    with_addon: bool = False

    def __post_init__(self) -> None:
        if len(self.primary) > MAX_PRIMARY_LENGTH:
            raise ValueError(f"primary part longer than {MAX_PRIMARY_LENGTH}: {self.primary!r}")
        if len(self.addon) not in (0, 2, 5):
            raise ValueError(f"add-on part must be 0, 2 or 5 long: {self.addon!r}")


@dataclass(frozen=True)
class UPCEExpansion:
    """UPC-E compressed code and its UPC-A equivalent (EN 797 Table 5)."""

    number_system: int
    compressed: str
    equivalent: str
    emode: str
    check_digit: str
    parity: str
    system_digit: Optional[str] = None

    @property
    def upca(self) -> str:
        """Full 12-digit UPC-A number."""
        return self.equivalent + self.check_digit

    @property
    def text(self) -> str:
        """
        Human readable UPC-E: system digit, 6 digits, check digit.

        The system digit is printed as supplied, even when it is not 0 or 1
        and the symbol is drawn as number system 0.
        """
        system = self.system_digit if self.system_digit is not None else str(self.number_system)
        return f"{system}{self.compressed}{self.check_digit}"


@dataclass(frozen=True)
class Symbol:
    """
    Encoded symbol, committed once per successful encode call.

    ``rows`` holds one ``"1"``/``"0"`` string per module row (``"1"`` is a
    dark module). Composite-linked symbols carry three separator rows
    above the linear row.

    Examples:
        sym = encode("9780195011098", Symbology.EANX)
        sym.text           # '9780195011098'
        sym.width          # 95
        sym.row_count      # 1
    """

    schema_version: ClassVar[str] = "1.0"

    symbology: Symbology
    kind: SymbolKind
    module_pattern: str
    text: str
    rows: Tuple[str, ...]
    row_heights: Tuple[int, ...]
    width: int
    separator_modules: Tuple[Tuple[int, int], ...] = ()
    addon_gap: int = 0

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def is_composite(self) -> bool:
        return bool(self.separator_modules)

    def module_is_set(self, row: int, column: int) -> bool:
        line = self.rows[row]
        return 0 <= column < len(line) and line[column] == "1"

    def to_dict(self) -> Dict[str, Any]:
        dct: Dict[str, Any] = asdict(self)
        dct["symbology"] = self.symbology.value
        dct["kind"] = self.kind.value
        dct["rows"] = list(self.rows)
        dct["row_heights"] = list(self.row_heights)
        dct["separator_modules"] = [list(m) for m in self.separator_modules]
        dct["schema_version"] = self.schema_version
        return dct

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Symbol":
        d = dict(d)
        if "schema_version" in d and d["schema_version"] != cls.schema_version:
            logger.warning(
                "Schema version mismatch (expected %s, got %s)",
                cls.schema_version,
                d["schema_version"],
            )
        d.pop("schema_version", None)
        d["symbology"] = Symbology(d["symbology"])
        d["kind"] = SymbolKind(d["kind"])
        d["rows"] = tuple(d["rows"])
        d["row_heights"] = tuple(d["row_heights"])
        d["separator_modules"] = tuple(tuple(m) for m in d.get("separator_modules", ()))
        return cls(**d)

    def __str__(self) -> str:
        return f"Symbol({self.kind.value}, text={self.text}, width={self.width})"


@dataclass
class SymbolBuilder:
    """
    Uncommitted encode state. Stages append to it; only ``build()`` produces
    a caller-visible ``Symbol``.
    """

    symbology: Symbology
    kind: Optional[SymbolKind] = None
    pattern: str = ""
    text: str = ""
    addon_gap: int = 0
    rows: List[str] = field(default_factory=list)
    row_heights: List[int] = field(default_factory=list)
    width: int = 0
    separator_modules: List[Tuple[int, int]] = field(default_factory=list)

    def build(self) -> Symbol:
        if self.kind is None:
            raise RuntimeError("SymbolBuilder.build() called before a symbol kind was set")
        if not self.rows:
            raise RuntimeError("SymbolBuilder.build() called before the pattern was expanded")
        return Symbol(
            symbology=self.symbology,
            kind=self.kind,
            module_pattern=self.pattern,
            text=self.text,
            rows=tuple(self.rows),
            row_heights=tuple(self.row_heights),
            width=self.width,
            separator_modules=tuple(self.separator_modules),
            addon_gap=self.addon_gap,
        )
