"""
Исключения кодировщика EAN/UPC.

Каждая ошибка несёт стабильный трёхзначный код (270–294, по одному на
место обнаружения) и вид ошибки ErrorKind. Код является непрозрачным
диагностическим идентификатором; поведение вызывающего кода следует
строить на ErrorKind или на классе исключения.

Example:
    >>> from eanupc import encode, Symbology
    >>> from eanupc.barcodegen.errors import EncodeError
    >>> try:
    ...     encode("036000291453", Symbology.UPCA)
    ... except EncodeError as e:
    ...     print(e.errtxt)
    270: Invalid check digit

Иерархия:
    EncodeError (базовое)
    ├── InvalidCharacterError
    ├── WrongLengthError
    ├── InvalidCheckDigitError
    └── InvalidDataError
"""

from __future__ import annotations

from typing import Any, ClassVar, Dict, Optional

from eanupc.model.enums import ErrorKind, Symbology

__all__: list[str] = [
    "EncodeError",
    "InvalidCharacterError",
    "WrongLengthError",
    "InvalidCheckDigitError",
    "InvalidDataError",
]


class EncodeError(Exception):
    """
    Базовое исключение для всех ошибок кодирования.

    Attributes:
        message: Короткое сообщение ("Invalid check digit")
        code: Номер места обнаружения ошибки (270–294)
        kind: Вид ошибки
        symbology: Запрошенная симвология (опционально)
        context: Дополнительный контекст для отладки (опционально)
    """

    kind: ClassVar[ErrorKind]

    def __init__(
        self,
        message: str,
        *,
        code: int,
        symbology: Optional[Symbology] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.symbology = symbology
        self.context = context or {}

    @property
    def errtxt(self) -> str:
        """Message prefixed with the numeric code, e.g. ``"283: Input too long"``."""
        return f"{self.code}: {self.message}"

    def __str__(self) -> str:
        parts = [self.__class__.__name__, ": ", self.errtxt]

        if self.symbology is not None:
            parts.append(f" [symbology={self.symbology.value}]")

        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f" ({ctx_str})")

        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code!r}, "
            f"symbology={self.symbology!r}, "
            f"context={self.context!r})"
        )


class InvalidCharacterError(EncodeError):
    """Input contains a character outside the accepted alphabet."""

    kind = ErrorKind.INVALID_CHARACTER


class WrongLengthError(EncodeError):
    """Primary or add-on part matches no canonical length, or input is too long."""

    kind = ErrorKind.WRONG_LENGTH


class InvalidCheckDigitError(EncodeError):
    """Supplied check digit/character differs from the recomputed one."""

    kind = ErrorKind.INVALID_CHECK_DIGIT


class InvalidDataError(EncodeError):
    """Symbology-specific structural rule violated (UPC-E digits, ISBN prefix)."""

    kind = ErrorKind.INVALID_DATA

