"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_into_project_logs(tmp_path, monkeypatch):
    """LoggerBuilder should place log files under the project logs dir."""
    monkeypatch.setattr(
        logger_module,
        "get_project_root",
        lambda: tmp_path,
    )
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240101"),
    )

    builder = logger_module.LoggerBuilder()
    balances_logger = (
        builder.name("balances-test")
        .subdir("balances")
        .prefix("balance_run")
        .console(False)
        .level(logging.WARNING)
        .build()
    )

    assert balances_logger.name == "balances-test"
    assert balances_logger.level == logging.WARNING
    assert balances_logger.propagate is False
    assert len(balances_logger.handlers) == 1
    expected_path = (
        tmp_path / "logs" / "balances" / "20240101_balance_run.log"
    )
    assert balances_logger.handlers[0].baseFilename == str(expected_path)
    assert builder.build() is balances_logger


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should apply the provided formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "ledger.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.formatter is fmt
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt
    file_handler.close()


def test_app_logger_is_a_delegating_singleton(monkeypatch):
    """get_app_logger should return one instance wrapping the built logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)

    first = logger_module.get_app_logger()
    second = logger_module.get_app_logger()
    first.info("rates refreshed")
    first.warning("missing rate")
    first.error("failed")

    assert first is second
    fake_logger.info.assert_called_with("rates refreshed")
    fake_logger.warning.assert_called_with("missing rate")
    fake_logger.error.assert_called_with("failed")
