import logging

import pytest

import lazyscalar
from lazyscalar import logconfig


@pytest.fixture
def lazyscalar_logger():
    logger = logging.getLogger("lazyscalar")
    level = logger.level
    handlers = list(logger.handlers)
    yield logger
    logger.setLevel(level)
    logger.handlers = handlers


def test_trace_level_name():
    assert "TRACE" == logging.getLevelName(logconfig.TRACE)


class TestGetLevel:
    def test_default(self, monkeypatch):
        monkeypatch.delenv("LAZYSCALAR_LOGGING_LEVEL", raising=False)
        assert "WARNING" == logconfig.get_level()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("LAZYSCALAR_LOGGING_LEVEL", "DEBUG")
        assert "DEBUG" == logconfig.get_level()

    def test_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("LAZYSCALAR_LOGGING_LEVEL", " trace ")
        assert "TRACE" == logconfig.get_level()

    def test_numeric(self, monkeypatch):
        monkeypatch.setenv("LAZYSCALAR_LOGGING_LEVEL", "15")
        assert 15 == logconfig.get_level()


class TestGetHandler:
    def test_null_handler_by_default(self, monkeypatch):
        monkeypatch.delenv("LAZYSCALAR_USE_DEV_LOGGER", raising=False)
        monkeypatch.delenv("LAZYSCALAR_LOGGING_LEVEL", raising=False)
        handler = logconfig.get_handler()
        assert isinstance(handler, logging.NullHandler)
        assert logging.WARNING == handler.level

    def test_dev_logger(self, monkeypatch):
        monkeypatch.setenv("LAZYSCALAR_USE_DEV_LOGGER", "true")
        handler = logconfig.get_handler(level="INFO")
        assert isinstance(handler, logging.StreamHandler)
        assert logging.INFO == handler.level


def test_configure_root_logger(monkeypatch, lazyscalar_logger):
    monkeypatch.setenv("LAZYSCALAR_LOGGING_LEVEL", "DEBUG")
    lazyscalar_logger.handlers = []
    logconfig.configure_root_logger()
    assert logging.DEBUG == lazyscalar_logger.level
    assert 1 == len(lazyscalar_logger.handlers)


def test_init_is_idempotent(monkeypatch, lazyscalar_logger):
    monkeypatch.setattr(lazyscalar, "_is_initialized", False)
    lazyscalar_logger.handlers = []

    lazyscalar.init()
    lazyscalar.init()
    assert 1 == len(lazyscalar_logger.handlers)

    lazyscalar.init(force_reload=True)
    assert 2 == len(lazyscalar_logger.handlers)


def test_configure_root_logger_at_trace(monkeypatch, lazyscalar_logger):
    monkeypatch.setenv("LAZYSCALAR_LOGGING_LEVEL", "trace")
    lazyscalar_logger.handlers = []
    logconfig.configure_root_logger()
    assert logconfig.TRACE == lazyscalar_logger.level
    assert logconfig.TRACE == lazyscalar_logger.handlers[0].level
