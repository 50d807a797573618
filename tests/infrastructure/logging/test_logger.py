"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from household_ledger.infrastructure.logging import logger as logger_module


def test_builder_writes_dated_file_under_subdir(tmp_path, monkeypatch):
    """Built loggers log into <root>/logs/<subdir>/<stamp>_<prefix>.log."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20241019"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("household_ledger.test_builder")
        .subdir("reports")
        .prefix("report_logs")
        .console(True)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.level == logging.DEBUG
    assert built.propagate is False
    file_handlers = [
        h for h in built.handlers if isinstance(h, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    expected = tmp_path / "logs" / "reports" / "20241019_report_logs.log"
    assert file_handlers[0].baseFilename == str(expected)
    assert len(built.handlers) == 2
    # A second build must not stack handlers.
    assert builder.build() is built
    assert len(built.handlers) == 2
    for handler in list(built.handlers):
        handler.close()
        built.removeHandler(handler)


def test_builder_uses_injected_handler_factories(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    created = []

    def _file_handler(path, fmt):
        created.append(path)
        handler = logging.NullHandler()
        handler.setFormatter(fmt)
        return handler

    built = (
        logger_module.LoggerBuilder()
        .name("household_ledger.test_factories")
        .formatter(lambda: logging.Formatter("%(message)s"))
        .file_handler(_file_handler)
        .build()
    )

    assert len(created) == 1
    assert created[0].parent == tmp_path / "logs" / "app"
    assert isinstance(built.handlers[0], logging.NullHandler)
    assert built.handlers[0].formatter._fmt == "%(message)s"
    built.removeHandler(built.handlers[0])


def test_logger_wrapper_delegates_every_level(monkeypatch):
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    wrapper = logger_module.Logger("household_ledger.wrapper")
    wrapper.debug("d")
    wrapper.info("i")
    wrapper.warning("w")
    wrapper.error("e")
    wrapper.critical("c")

    fake_logger.debug.assert_called_once_with("d")
    fake_logger.info.assert_called_once_with("i")
    fake_logger.warning.assert_called_once_with("w")
    fake_logger.error.assert_called_once_with("e")
    fake_logger.critical.assert_called_once_with("c")
    assert logger_module.Logger("other") is wrapper


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    built = []

    def _fake_build(self):
        built.append(self._subdir)
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built == ["app", "usage"]
