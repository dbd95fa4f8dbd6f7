import logging

import pytest

from sprig import config


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, True),
        ("", True),
        ("1", True),
        ("yes", True),
        ("0", False),
        ("false", False),
        ("Off", False),
        (" no ", False),
    ],
)
def test_stdlib_enabled(raw, expected, monkeypatch):
    if raw is None:
        monkeypatch.delenv("SPRIG_STDLIB", raising=False)
    else:
        monkeypatch.setenv("SPRIG_STDLIB", raw)
    assert config.stdlib_enabled() is expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, logging.WARNING),
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        ("bogus", logging.WARNING),
    ],
)
def test_get_log_level(raw, expected, monkeypatch):
    if raw is None:
        monkeypatch.delenv("SPRIG_LOG_LEVEL", raising=False)
    else:
        monkeypatch.setenv("SPRIG_LOG_LEVEL", raw)
    assert config.get_log_level() == expected


def test_configure_logging(monkeypatch):
    logger = logging.getLogger("sprig")
    original = logger.level
    monkeypatch.setenv("SPRIG_LOG_LEVEL", "DEBUG")
    try:
        config.configure_logging()
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(original)
