import logging

import pytest
from pydantic import ValidationError

from catalog_query.core.errors import LoadError, MissingFieldError
from catalog_query.core.logging import LoggingContextFilter, configure_logging, source_var
from catalog_query.core.settings import AppSettings, get_app_settings


@pytest.fixture()
def clean_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("CATALOG_DATA_FILE", "CATALOG_ENFORCE_UNIQUE_NUMBERS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_defaults(clean_env):
    settings = get_app_settings()
    assert settings.CATALOG_DATA_FILE == "brickset.json"
    assert settings.CATALOG_ENFORCE_UNIQUE_NUMBERS is False
    assert settings.LOG_LEVEL == "INFO"


def test_settings_from_environment(clean_env):
    clean_env.setenv("CATALOG_DATA_FILE", "/data/sets.json")
    clean_env.setenv("CATALOG_ENFORCE_UNIQUE_NUMBERS", "true")
    clean_env.setenv("LOG_LEVEL", "debug")
    settings = get_app_settings()
    assert settings.CATALOG_DATA_FILE == "/data/sets.json"
    assert settings.CATALOG_ENFORCE_UNIQUE_NUMBERS is True
    assert settings.LOG_LEVEL == "DEBUG"


def test_settings_from_dotenv(clean_env, tmp_path):
    (tmp_path / ".env").write_text("LOG_LEVEL=warning\n", encoding="utf-8")
    assert get_app_settings().LOG_LEVEL == "WARNING"


def test_settings_reject_unknown_log_level(clean_env):
    with pytest.raises(ValidationError):
        AppSettings(LOG_LEVEL="chatty")


def test_context_filter_injects_source():
    record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
    assert LoggingContextFilter().filter(record) is True
    assert record.source == "-"

    token = source_var.set("sets.json")
    try:
        LoggingContextFilter().filter(record)
    finally:
        source_var.reset(token)
    assert record.source == "sets.json"


def test_configure_logging_installs_single_handler():
    configure_logging(logging.DEBUG)
    configure_logging("WARNING")
    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.level == logging.WARNING
    assert any(isinstance(f, LoggingContextFilter) for f in root.handlers[0].filters)


def test_error_messages():
    err = LoadError("sets.json", "record source not found")
    assert str(err) == "sets.json: record source not found"
    assert str(MissingFieldError("theme", "3836")) == "missing mandatory field 'theme' on record '3836'"
    assert str(MissingFieldError("theme")) == "missing mandatory field 'theme'"
