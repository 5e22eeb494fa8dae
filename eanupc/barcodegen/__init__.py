"""
barcodegen

Кодирование линейных символов EAN/UPC/ISBN.

- Нормализация ввода и дополнение нулями
- Контрольные цифры (mod 10 / mod 11) с обязательной проверкой
- Расширение и сжатие UPC-E
- Таблицы чётности EN 797 и сборка шаблона полос
- Разделительные строки композитных символов

Public API:
    - encode: кодирование строки в Symbol (function)
    - BarcodeEncoder: объектный API с validate/encode/render_image (class)
    - EncodeError и подклассы: ошибки с кодом 270–294 и ErrorKind

Примеры:
    >>> from eanupc.barcodegen import encode
    >>> from eanupc.model.enums import Symbology
    >>> encode("0123450", Symbology.UPCE).text
    '01234505'

Зависимости:
    Pillow (предпросмотр)
"""

from eanupc.barcodegen.encoder import BarcodeEncoder, encode
from eanupc.barcodegen.errors import (
    EncodeError,
    InvalidCharacterError,
    InvalidCheckDigitError,
    InvalidDataError,
    WrongLengthError,
)

__all__ = [
    "encode",
    "BarcodeEncoder",
    "EncodeError",
    "InvalidCharacterError",
    "WrongLengthError",
    "InvalidCheckDigitError",
    "InvalidDataError",
]
