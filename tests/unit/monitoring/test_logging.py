# Copyright (c) 2025 Jonathan Piette
# This file is part of TheOpenMusicBox and is licensed for non-commercial use only.
# See the LICENSE file for details.

"""Tests for logging formatters and setup."""

import logging
import subprocess
import sys
from pathlib import Path

import pytest
from colorama import Fore, Style

from mpdweb.monitoring import setup_logging
from mpdweb.monitoring.logging.log_color_scheme import ColorScheme
from mpdweb.monitoring.logging.log_colored_formatter import ColoredLogFormatter

PROJECT_ROOT = Path(__file__).resolve().parents[3]


def make_record(msg="Test message", level=logging.INFO, name="mpdweb.test", **extra):
    record = logging.LogRecord(
        name=name,
        level=level,
        pathname="test.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    record.__dict__.update(extra)
    return record


class TestColoredLogFormatter:
    """Test colored log formatter."""

    @pytest.fixture
    def formatter(self):
        return ColoredLogFormatter()

    def test_is_logging_formatter(self, formatter):
        assert isinstance(formatter, logging.Formatter)

    def test_format_info_message(self, formatter):
        result = formatter.format(make_record())

        assert "Test message" in result
        assert Style.RESET_ALL in result

    def test_level_colors(self, formatter):
        assert Fore.YELLOW in formatter.format(make_record(level=logging.WARNING))
        assert Fore.RED in formatter.format(make_record(level=logging.ERROR))

    def test_component_name_simplified(self, formatter):
        result = formatter.format(make_record(name="mpdweb.infrastructure.mpd.session_invoker"))

        assert "[session_invoker]" in result
        assert "mpdweb.infrastructure" not in result

    def test_extra_appended(self, formatter):
        result = formatter.format(make_record(category="connection"))

        assert "(category=connection)" in result

    def test_no_extra_no_parentheses(self, formatter):
        assert formatter.format_extra({}) == ""
        assert formatter.format_extra(None) == ""

    def test_exception_included(self, formatter):
        try:
            raise ValueError("kaboom")
        except ValueError:
            record = make_record(level=logging.ERROR)
            record.exc_info = sys.exc_info()

        result = formatter.format(record)

        assert "ValueError: kaboom" in result


class TestColorScheme:
    """Test color scheme configuration."""

    def test_levels_covered(self):
        for level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            assert level in ColorScheme.COLORS
            assert level in ColorScheme.SYMBOLS

    def test_unknown_level(self):
        assert ColorScheme.color_for("TRACE") == ""
        assert ColorScheme.symbol_for("TRACE") == " "


class TestSetupLogging:
    """Test root logger setup."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_installs_single_handler(self):
        setup_logging("debug")
        root = setup_logging(logging.WARNING)

        ours = [h for h in root.handlers if isinstance(h.formatter, ColoredLogFormatter)]
        assert len(ours) == 1
        assert root.level == logging.WARNING

    def test_accepts_level_names(self):
        root = setup_logging("debug")

        assert root.level == logging.DEBUG


class TestMonitoringImport:
    """The package must load in a fresh interpreter."""

    def test_fresh_import_exposes_stdlib_logger(self):
        code = (
            "import logging, mpdweb.monitoring as m; "
            "assert isinstance(m.get_logger('mpdweb'), logging.Logger); "
            "assert m.setup_logging('info').level == logging.INFO; "
            "import mpdweb.application.app_factory"
        )

        result = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True, cwd=PROJECT_ROOT)

        assert result.returncode == 0, result.stderr

    def test_get_logger_returns_named_logger(self):
        from mpdweb.monitoring import get_logger

        logger = get_logger("mpdweb.routes")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "mpdweb.routes"
