import logging

from smart_trim.logger import get_logger


def test_get_logger_returns_logger():
    logger = get_logger("test_logger")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "test_logger"


def test_get_logger_does_not_duplicate_handlers():
    first = get_logger("test_logger_handlers")
    second = get_logger("test_logger_handlers")
    assert first is second
    assert len(second.handlers) == 1


def test_debug_level_from_environment(monkeypatch):
    monkeypatch.setenv("DEBUG_LOGS_ENABLED", "true")
    assert get_logger("test_logger_debug").level == logging.DEBUG

    monkeypatch.setenv("DEBUG_LOGS_ENABLED", "false")
    assert get_logger("test_logger_debug").level == logging.INFO
