import logging

import pytest
from pydantic import ValidationError
from rich.logging import RichHandler

from core.config import AppSettings
from core.logging import configure_logging, get_logger


def test_settings_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    settings = AppSettings()
    assert settings.manifest_filename == "package.json"
    assert settings.command_max_width == 60
    assert settings.separator_padding == 40
    assert settings.log_level == "WARNING"


def test_settings_from_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SCRIPT_LIST_MANIFEST_FILENAME", "composer.json")
    monkeypatch.setenv("script_list_separator_padding", "5")
    settings = AppSettings()
    assert settings.manifest_filename == "composer.json"
    assert settings.separator_padding == 5


def test_settings_ignore_dotenv(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("SCRIPT_LIST_COMMAND_MAX_WIDTH=2\n", encoding="utf-8")
    assert AppSettings().command_max_width == 60


def test_settings_validation(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SCRIPT_LIST_COMMAND_MAX_WIDTH", "2")
    with pytest.raises(ValidationError):
        AppSettings()


def test_configure_logging_is_idempotent():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("debug")
        configure_logging(logging.INFO)
        handlers = [h for h in root.handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
        assert root.level == logging.INFO

        configure_logging("not-a-level")
        assert root.level == logging.WARNING
        assert get_logger("core.test").name == "core.test"
    finally:
        root.setLevel(previous)
