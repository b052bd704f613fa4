from __future__ import annotations

import logging

import pytest

from flareflux import config
from flareflux.logging_config import setup_logging
from flareflux.utils import (
    btu_per_minute_to_per_day,
    btu_to_kwh,
    format_number,
    fraction_to_percent,
    kwh_per_day_to_kw,
    percent_to_fraction,
)


def test_conversion_constants():
    assert config.MINUTES_PER_DAY == 1440
    assert config.BTU_PER_KWH == 3412
    assert config.HOURS_PER_DAY == 24


def test_conversions():
    assert btu_per_minute_to_per_day(1.0) == 1440.0
    assert btu_to_kwh(3412.0) == 1.0
    assert kwh_per_day_to_kw(24.0) == 1.0
    assert percent_to_fraction(100.0) == 1.0
    assert fraction_to_percent(0.5) == 50.0


@pytest.mark.parametrize(
    "value, expected",
    [
        (97500, "97,500"),
        (140_400_000, "140,400,000"),
        (41148.886284, "41,148.886"),
        (1714.5369284877, "1,714.537"),
        (0.35, "0.35"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize(
    "env, expected",
    [("", logging.INFO), ("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("bogus", logging.INFO)],
)
def test_log_level_from_env(monkeypatch, env, expected):
    monkeypatch.setenv("FLAREFLUX_LOG_LEVEL", env)
    assert config._log_level_from_env() == expected


def test_setup_logging_does_not_duplicate_handlers(tmp_path):
    log_file = tmp_path / "flareflux.log"
    setup_logging(level=logging.DEBUG)
    setup_logging(level=logging.DEBUG, log_file=str(log_file))

    logger = logging.getLogger("flareflux")
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG

    for handler in logger.handlers:
        handler.flush()
    assert "Logging initialized" in log_file.read_text(encoding="utf-8")

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


@pytest.mark.parametrize("env, expected", [("", None), ("  ", None), ("/tmp/flareflux.log", "/tmp/flareflux.log")])
def test_log_file_from_env(monkeypatch, env, expected):
    monkeypatch.setenv("FLAREFLUX_LOG_FILE", env)
    assert config._log_file_from_env() == expected


def test_setup_logging_reports_level_and_file(tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging(level=logging.INFO, log_file=str(log_file))

    logger = logging.getLogger("flareflux")
    for handler in list(logger.handlers):
        handler.flush()
        handler.close()
        logger.removeHandler(handler)

    text = log_file.read_text(encoding="utf-8")
    assert "level=INFO" in text
    assert f"file={log_file}" in text


@pytest.mark.parametrize(
    "msg_type_name, level",
    [
        ("QtDebugMsg", logging.DEBUG),
        ("QtInfoMsg", logging.INFO),
        ("QtWarningMsg", logging.WARNING),
        ("QtCriticalMsg", logging.ERROR),
    ],
)
def test_qt_messages_are_forwarded_to_the_app_logger(caplog, msg_type_name, level):
    from PySide6.QtCore import QtMsgType

    from flareflux.logging_config import qt_message_handler

    caplog.set_level(logging.DEBUG, logger="flareflux.qt")
    qt_message_handler(getattr(QtMsgType, msg_type_name), None, "QPainter::begin: Paint device returned engine == 0")

    records = [r for r in caplog.records if r.name == "flareflux.qt"]
    assert len(records) == 1
    assert records[0].levelno == level
    assert "QPainter::begin" in records[0].getMessage()
