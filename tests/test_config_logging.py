"""
Tests for settings, logging setup and the usage example.
"""

import io
import json
import logging

import pytest

from object_mapper.__main__ import build_example_mapper, main
from object_mapper.config import Settings, get_settings
from object_mapper.core.logging import get_logger, setup_logging


def test_settings_defaults() -> None:
    settings = Settings(_env_file=None)

    assert settings.log_level == "INFO"
    assert settings.log_format == "console"
    assert settings.skip_falsy_defaults is False


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OBJECT_MAPPER_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("OBJECT_MAPPER_LOG_FORMAT", "json")

    settings = get_settings()
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"
    assert get_settings() is settings


def test_json_logging(capsys: pytest.CaptureFixture[str]) -> None:
    """JSON format emits one object per line with renamed fields."""
    setup_logging(level="INFO", log_format="json")
    get_logger("object_mapper.tests").info("Rules applied", extra={"rule_count": 3})

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["message"] == "Rules applied"
    assert record["level"] == "INFO"
    assert record["logger"] == "object_mapper.tests"
    assert record["rule_count"] == 3


def test_console_logging(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(level="warning", log_format="console")
    logger = get_logger("object_mapper.tests")
    logger.info("hidden")
    logger.warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "| WARNING  | object_mapper.tests | shown" in err
    assert logging.getLogger("object_mapper").level == logging.WARNING


def test_package_logger_is_silent_by_default() -> None:
    """Importing the package installs only a NullHandler."""
    handlers = logging.getLogger("object_mapper").handlers

    assert any(isinstance(h, logging.NullHandler) for h in handlers)
    assert not any(type(h) is logging.StreamHandler for h in handlers)


def test_setup_logging_leaves_root_handlers_alone() -> None:
    """Only the package logger is configured; the host app keeps its handlers."""
    root_logger = logging.getLogger()
    app_handler = logging.StreamHandler(io.StringIO())
    root_logger.addHandler(app_handler)
    root_level = root_logger.level

    package_logger = setup_logging(level="DEBUG")

    assert app_handler in root_logger.handlers
    assert root_logger.level == root_level
    assert package_logger.name == "object_mapper"
    assert package_logger.propagate is False


def test_setup_logging_replaces_only_its_own_handler() -> None:
    """Calling it twice leaves one stream handler and keeps user handlers."""
    package_logger = logging.getLogger("object_mapper")
    user_handler = logging.StreamHandler(io.StringIO())
    package_logger.addHandler(user_handler)
    first, second = io.StringIO(), io.StringIO()

    setup_logging(stream=first)
    setup_logging(stream=second)
    get_logger("object_mapper.tests").info("once")

    assert user_handler in package_logger.handlers
    assert first.getvalue() == ""
    assert second.getvalue().count("once") == 1


def test_example_mapper() -> None:
    assert build_example_mapper().map(
        {"author": {"name": "Lukasz"}, "tags": ["rpc"]}
    ) == {"authorName": "Lukasz", "lastTag": "rpc"}


def test_main_prints_mapped_example(capsys: pytest.CaptureFixture[str]) -> None:
    main()

    assert json.loads(capsys.readouterr().out) == {
        "authorName": "Lukasz",
        "lastTag": "rpc",
    }
