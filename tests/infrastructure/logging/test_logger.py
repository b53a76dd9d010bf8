"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

import pytest

from src.infrastructure.logging import logger as logger_module


@pytest.fixture
def fake_build(monkeypatch):
    built = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: built,
    )
    return built


def test_builder_writes_under_project_logs(tmp_path, monkeypatch) -> None:
    """Log files land in logs/<subdir>/<stamp>_<prefix>.log."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240315"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("metrics-report-test")
        .subdir("reports")
        .prefix("report_logs")
        .console(False)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.name == "metrics-report-test"
    assert built.level == logging.DEBUG
    assert built.propagate is False
    assert len(built.handlers) == 1
    handler = built.handlers[0]
    assert isinstance(handler, logging.FileHandler)
    expected = tmp_path / "logs" / "reports" / "20240315_report_logs.log"
    assert handler.baseFilename == str(expected)
    assert builder.build() is built
    handler.close()
    built.removeHandler(handler)


def test_default_handlers_apply_formatter(tmp_path) -> None:
    fmt = logger_module.LoggerBuilder._default_formatter()

    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "dashboard.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_delegates_every_level(fake_build) -> None:
    logger_module.Logger._instance = None

    wrapper = logger_module.Logger("app")
    wrapper.debug("window loaded")
    wrapper.info("table built")
    wrapper.warning("summary mismatch")
    wrapper.error("payload missing")
    wrapper.critical("unreadable")

    fake_build.debug.assert_called_once_with("window loaded")
    fake_build.info.assert_called_once_with("table built")
    fake_build.warning.assert_called_once_with("summary mismatch")
    fake_build.error.assert_called_once_with("payload missing")
    fake_build.critical.assert_called_once_with("unreadable")
    assert logger_module.Logger("other") is wrapper
    logger_module.Logger._instance = None


def test_app_and_usage_loggers_are_separate_singletons(fake_build):
    logger_module.AppLogger._instance = None
    logger_module.UsageLogger._instance = None

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert isinstance(usage_logger, logger_module.UsageLogger)
    logger_module.AppLogger._instance = None
    logger_module.UsageLogger._instance = None
