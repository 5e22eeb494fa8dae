"""
Модульные тесты для eanupc/__init__.py
Тестирует метаданные, логирование, загрузку конфигурации и публичный API.
"""

import json
import logging
import logging.handlers
import re
from pathlib import Path
from unittest import mock

import pytest

import eanupc


class TestVersionMetadata:
    """Тестирование метаданных версии."""

    def test_version_format(self) -> None:
        assert re.match(r"^\d+\.\d+\.\d+$", eanupc.__version__)

    def test_version_components(self) -> None:
        expected = f"{eanupc.VERSION_MAJOR}.{eanupc.VERSION_MINOR}.{eanupc.VERSION_PATCH}"
        assert eanupc.__version__ == expected

    def test_metadata_attributes(self) -> None:
        for attr in ("__description__", "__license__", "__python_requires__"):
            value = getattr(eanupc, attr)
            assert isinstance(value, str) and value, f"{attr} должен быть непустой строкой"


class TestPublicAPI:
    """Тестирование экспортов публичного API."""

    def test_all_exports_exist(self) -> None:
        for name in eanupc.__all__:
            assert hasattr(eanupc, name), f"Имя '{name}' из __all__ не существует в модуле"

    def test_encode_via_package(self) -> None:
        symbol = eanupc.encode("03600029145", eanupc.Symbology.UPCA)
        assert symbol.text == "036000291452"
        assert symbol.module_pattern.startswith("111")


class TestLogging:
    """Тестирование настройки логирования."""

    def test_package_logger_configured(self) -> None:
        logger = logging.getLogger(eanupc.LOGGER_NAME)
        assert logger.handlers, "Логгер пакета должен иметь обработчики"

    def test_setup_is_idempotent(self) -> None:
        logger = logging.getLogger(eanupc.LOGGER_NAME)
        before = list(logger.handlers)
        eanupc._setup_logging()
        assert logger.handlers == before

    def test_file_handler_from_env(self, tmp_path: Path) -> None:
        log_file = tmp_path / "eanupc.log"
        logger = logging.getLogger(eanupc.LOGGER_NAME)
        saved_handlers = list(logger.handlers)
        saved_level = logger.level
        logger.handlers.clear()
        try:
            with mock.patch.dict(
                "os.environ", {"EANUPC_LOG_FILE": str(log_file), "EANUPC_LOG_LEVEL": "debug"}
            ):
                eanupc._setup_logging()
            assert logger.level == logging.DEBUG
            file_handlers = [h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
            assert len(file_handlers) == 1
            for h in logger.handlers:
                h.close()
        finally:
            logger.handlers[:] = saved_handlers
            logger.setLevel(saved_level)

    def test_unknown_level_falls_back_to_info(self) -> None:
        logger = logging.getLogger(eanupc.LOGGER_NAME)
        saved_handlers = list(logger.handlers)
        saved_level = logger.level
        logger.handlers.clear()
        try:
            with mock.patch.dict("os.environ", {"EANUPC_LOG_LEVEL": "verbose"}, clear=False):
                eanupc._setup_logging()
            assert logger.level == logging.INFO
        finally:
            logger.handlers[:] = saved_handlers
            logger.setLevel(saved_level)

    @pytest.mark.parametrize(
        "module_name,expected",
        [
            ("labels", "eanupc.labels"),
            ("eanupc.barcodegen", "eanupc.barcodegen"),
            ("__main__", "eanupc.main"),
            (".relative", "eanupc.relative"),
        ],
    )
    def test_get_logger_namespace(self, module_name: str, expected: str) -> None:
        assert eanupc.get_logger(module_name).name == expected


class TestLoadConfig:
    """Тестирование загрузки конфигурации."""

    def test_defaults_when_missing(self, tmp_path: Path) -> None:
        config = eanupc.load_config(tmp_path / "absent.json")
        assert config == eanupc._DEFAULT_CONFIG
        assert config is not eanupc._DEFAULT_CONFIG

    def test_user_values_merged(self, tmp_path: Path) -> None:
        path = tmp_path / "eanupc.json"
        path.write_text(json.dumps({"default_addon_gap": 10, "extra": True}), encoding="utf-8")
        config = eanupc.load_config(path)
        assert config["default_addon_gap"] == 10
        assert config["default_upca_addon_gap"] == 9
        assert config["extra"] is True

    def test_invalid_json(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "eanupc.json"
        path.write_text("{not json", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="eanupc"):
            config = eanupc.load_config(path)
        assert config == eanupc._DEFAULT_CONFIG
        assert "недопустимый JSON" in caplog.text

    def test_non_object_json(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "eanupc.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="eanupc"):
            config = eanupc.load_config(path)
        assert config == eanupc._DEFAULT_CONFIG
        assert "JSON-объект" in caplog.text

    def test_unreadable_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "eanupc.json"
        path.write_text("{}", encoding="utf-8")
        with mock.patch("builtins.open", side_effect=PermissionError("denied")):
            with caplog.at_level(logging.WARNING, logger="eanupc"):
                config = eanupc.load_config(path)
        assert config == eanupc._DEFAULT_CONFIG
        assert "denied" in caplog.text

    def test_default_path_in_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "eanupc.json").write_text(json.dumps({"quiet_zone": 4}), encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert eanupc.load_config()["quiet_zone"] == 4
