from __future__ import annotations

import logging

import pytest

from vojker.utils.logging_setup import get_logger, level_from_env


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", logging.INFO),
        ("debug", logging.DEBUG),
        ("INFO,DEBUG", logging.DEBUG),
        (" warning , ", logging.WARNING),
        ("chatty", logging.INFO),
    ],
)
def test_level_from_env(raw, expected):
    assert level_from_env(raw) == expected


def test_level_from_env_reads_vojker_variable_first(monkeypatch):
    monkeypatch.setenv("VOJKER_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    assert level_from_env() == logging.ERROR


def test_get_logger_attaches_single_handler(monkeypatch):
    monkeypatch.setenv("VOJKER_LOG_LEVEL", "WARNING")

    logger = get_logger("vojker.test_logging")
    again = get_logger("vojker.test_logging")

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
