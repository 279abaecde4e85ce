"""
Tests for the structured category logger
"""

import io

from models.enums import LogCategory, LogLevel
from utils.logger import Logger, configure_logger, get_category_logger, get_logger


def test_log_line_with_details():
    out = io.StringIO()
    logger = Logger(min_level=LogLevel.DEBUG, use_colors=False, stream=out)

    logger.info(LogCategory.LOADER, "Scene loaded", identifier="3", layers=4)

    lines = out.getvalue().splitlines()
    assert "LOADER" in lines[0]
    assert "✓ Scene loaded" in lines[0]
    assert lines[1].strip() == "├─ identifier: 3"
    assert lines[2].strip() == "└─ layers: 4"


def test_min_level_filters():
    out = io.StringIO()
    logger = Logger(min_level=LogLevel.WARN, use_colors=False, stream=out)

    logger.debug(LogCategory.PARSER, "hidden")
    logger.info(LogCategory.PARSER, "hidden")
    logger.warn(LogCategory.PARSER, "shown")

    assert "hidden" not in out.getvalue()
    assert "⚠ shown" in out.getvalue()


def test_colors_disabled_has_no_escape_codes():
    out = io.StringIO()
    Logger(use_colors=False, stream=out).error(LogCategory.SYSTEM, "boom")

    assert "\033[" not in out.getvalue()


def test_bound_logger_uses_singleton_settings():
    out = io.StringIO()
    log = get_category_logger(LogCategory.PLAYBACK)

    configure_logger(LogLevel.DEBUG, use_colors=False, stream=out)
    log.debug("Playback paused", layers=2)

    assert get_logger().stream is out
    assert "PLAYBACK" in out.getvalue()
    assert "└─ layers: 2" in out.getvalue()


def test_bound_logger_category_override():
    out = io.StringIO()
    base = Logger(use_colors=False, stream=out)

    base.for_category(LogCategory.PARSER).with_category(LogCategory.TIMELINE).info("derived")

    assert "TIMELINE" in out.getvalue()
