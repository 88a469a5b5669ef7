"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from finpilot.infrastructure.logging import logger as logger_module


def test_builder_writes_dated_file_under_logs(tmp_path, monkeypatch):
    """LoggerBuilder places the log file in logs/<subdir>/."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240315"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("finpilot.test.builder")
        .subdir("reports")
        .prefix("dre")
        .console(False)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.level == logging.DEBUG
    assert built.propagate is False
    assert len(built.handlers) == 1
    expected = tmp_path / "logs" / "reports" / "20240315_dre.log"
    assert built.handlers[0].baseFilename == str(expected)
    assert builder.build() is built

    for handler in list(built.handlers):
        handler.close()
        built.removeHandler(handler)


def test_builder_uses_injected_factories(tmp_path, monkeypatch):
    """Custom formatter and handler factories are honored."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    console_handler = logging.NullHandler()
    seen = {}

    def file_factory(path, formatter):
        seen["path"] = path
        seen["formatter"] = formatter
        return file_handler

    built = (
        logger_module.LoggerBuilder()
        .name("finpilot.test.factories")
        .formatter(lambda: fmt)
        .file_handler(file_factory)
        .console_handler(lambda formatter: console_handler)
        .build()
    )

    assert built.handlers == [file_handler, console_handler]
    assert seen["formatter"] is fmt
    assert seen["path"].parent == tmp_path / "logs"

    for handler in list(built.handlers):
        built.removeHandler(handler)


def test_default_handlers_share_formatter(tmp_path):
    """Default handlers log at INFO with the given formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "app.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert isinstance(console_handler, logging.StreamHandler)
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_wrapper_delegates(monkeypatch):
    """Logger methods forward to the wrapped logging.Logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    wrapper = logger_module.Logger()
    wrapper.info("info")
    wrapper.warning("warning")
    wrapper.error("error")
    wrapper.debug("debug")
    wrapper.critical("critical")

    fake_logger.info.assert_called_once_with("info")
    fake_logger.warning.assert_called_once_with("warning")
    fake_logger.error.assert_called_once_with("error")
    fake_logger.debug.assert_called_once_with("debug")
    fake_logger.critical.assert_called_once_with("critical")
    assert logger_module.Logger() is wrapper


def test_app_and_usage_loggers_are_separate_singletons(monkeypatch):
    """Each logger family keeps its own singleton."""
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: MagicMock(),
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert isinstance(app_logger, logger_module.AppLogger)
    assert isinstance(usage_logger, logger_module.UsageLogger)
