"""Domain model: enums, request options and the encoded Symbol."""

from .enums import ErrorKind, RepresentationSet, Symbology, SymbolKind
from .symbol import EncodeOptions, NormalizedInput, Symbol, SymbolBuilder, UPCEExpansion

__all__ = [
    "ErrorKind",
    "RepresentationSet",
    "Symbology",
    "SymbolKind",
    "EncodeOptions",
    "NormalizedInput",
    "Symbol",
    "SymbolBuilder",
    "UPCEExpansion",
]
