"""
Пакет eanupc
============

Кодировщик линейных штрихкодов семейства EAN/UPC по EN 797:1996.

Этот пакет предоставляет:
    - EAN-13, EAN-8 и дополнения EAN-2/EAN-5
    - UPC-A и UPC-E (с расширением и сжатием нулей)
    - ISBN-10, ISBN-13 и SBN (кодируются как EAN-13)
    - Варианты с композитной связью (разделительные строки ISO/IEC 24723)
    - Контрольные цифры mod-10 и mod-11 с обязательной проверкой

Пример базового использования:
    >>> from eanupc import encode, Symbology
    >>> symbol = encode("03600029145", Symbology.UPCA)
    >>> symbol.text
    '036000291452'
    >>> symbol.module_pattern[:3]
    '111'

Управление конфигурацией:
    >>> import os
    >>> os.environ['EANUPC_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from eanupc import load_config, get_logger
    >>>
    >>> config = load_config()
    >>> logger = get_logger(__name__)
    >>> logger.debug("Отладочное логирование теперь включено")

Версия: 0.1.0
Лицензия: MIT
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__description__ = "EAN/UPC/ISBN linear barcode encoder (EN 797:1996)"
__license__ = "MIT"
__python_requires__ = ">=3.9"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

if sys.version_info < (3, 9):
    raise RuntimeError(
        f"eanupc требует Python 3.9 или выше. "
        f"Текущая версия: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

LOGGER_NAME = "eanupc"


def _setup_logging() -> None:
    """
    Инициализировать логирование пакета.

    Настраивает логгер ``eanupc``:
    - Консольный обработчик (stderr) для WARNING и выше
    - Ротирующий файловый обработчик, если задана переменная
      окружения EANUPC_LOG_FILE

    Уровень берётся из EANUPC_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR,
    CRITICAL). Повторные вызовы ничего не меняют.
    """
    log_level_str = os.environ.get("EANUPC_LOG_LEVEL", "INFO").upper()

    log_level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    log_level = log_level_map.get(log_level_str, logging.INFO)

    root_logger = logging.getLogger(LOGGER_NAME)
    if root_logger.handlers:
        return

    root_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt=("[%(asctime)s] %(levelname)-8s " "[%(name)s.%(funcName)s:%(lineno)d] %(message)s"),
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file = os.environ.get("EANUPC_LOG_FILE")
    if log_file:
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_file,
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            root_logger.warning(
                "Не удалось инициализировать файловое логирование: %s. "
                "Используется только консоль.",
                e,
            )


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер в пространстве имён ``eanupc``.

    Аргументы:
        module_name: Обычно ``__name__`` вызывающего модуля.

    Возвращает:
        logging.Logger с именем ``eanupc.<module_name>``.

    Пример:
        >>> logger = get_logger("labels")
        >>> logger.name
        'eanupc.labels'
    """
    if module_name.startswith(LOGGER_NAME):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{LOGGER_NAME}.main")
    clean_name = module_name.lstrip(".")
    return logging.getLogger(f"{LOGGER_NAME}.{clean_name}")


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

_DEFAULT_CONFIG: Dict[str, Any] = {
    "default_addon_gap": 7,
    "default_upca_addon_gap": 9,
    "linear_row_height": 50,
    "separator_row_height": 2,
    "quiet_zone": 10,
    "render_scale": 2,
}


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Загрузить настройки кодировщика из JSON-файла или вернуть значения
    по умолчанию.

    Ключи конфигурации:
        - default_addon_gap: int - Зазор перед дополнением (EAN, UPC-E, ISBN)
        - default_upca_addon_gap: int - Зазор перед дополнением UPC-A
        - linear_row_height: int - Высота линейной строки в модулях
        - separator_row_height: int - Высота разделительных строк композита
        - quiet_zone: int - Тихая зона при предпросмотре (в модулях)
        - render_scale: int - Масштаб предпросмотра (пикселей на модуль)

    Аргументы:
        config_path: Путь к файлу. Если None, ищется 'eanupc.json'
                    в текущем каталоге.

    Возвращает:
        Словарь со всеми ключами по умолчанию, поверх которых записаны
        пользовательские значения.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path("eanupc.json")

    config = _DEFAULT_CONFIG.copy()

    if config_path.exists():
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                user_config = json.load(f)

            if not isinstance(user_config, dict):
                raise ValueError(
                    f"Файл конфигурации должен содержать JSON-объект, "
                    f"получен {type(user_config).__name__}"
                )

            config.update(user_config)
            logger.info("Конфигурация загружена из %s", config_path)
            logger.debug("Конфигурация: %s", config)

        except json.JSONDecodeError as e:
            logger.warning(
                "Не удалось разобрать %s: недопустимый JSON в строке %d, столбце %d. "
                "Используется конфигурация по умолчанию.",
                config_path,
                e.lineno,
                e.colno,
            )
        except OSError as e:
            logger.warning(
                "Не удалось прочитать %s: %s. Используется конфигурация по умолчанию.",
                config_path,
                e,
            )
        except ValueError as e:
            logger.warning(
                "Недопустимый формат конфигурации: %s. "
                "Используется конфигурация по умолчанию.",
                e,
            )
    else:
        logger.debug("Файл конфигурации %s не найден, используются значения по умолчанию", config_path)

    return config


_setup_logging()

# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================

# Импорты после настройки логирования, чтобы модули получили готовый логгер.
from .barcodegen import (  # noqa: E402
    BarcodeEncoder,
    EncodeError,
    InvalidCharacterError,
    InvalidCheckDigitError,
    InvalidDataError,
    WrongLengthError,
    encode,
)
from .config import EncoderConfig  # noqa: E402
from .model.enums import ErrorKind, Symbology, SymbolKind  # noqa: E402
from .model.symbol import EncodeOptions, Symbol  # noqa: E402

__all__ = [
    "__version__",
    "get_logger",
    "load_config",
    "encode",
    "BarcodeEncoder",
    "EncoderConfig",
    "EncodeOptions",
    "Symbol",
    "Symbology",
    "SymbolKind",
    "ErrorKind",
    "EncodeError",
    "InvalidCharacterError",
    "WrongLengthError",
    "InvalidCheckDigitError",
    "InvalidDataError",
]
