#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#

"""Unit tests for textscaler.log module."""

from __future__ import annotations

import logging

import pytest

from textscaler.log import LOG_TRACE, Log


@pytest.fixture
def restore_level():
    logger = logging.getLogger("textscaler")
    level = logger.level
    yield logger
    logger.setLevel(level)


class TestLog:
    """Tests for Log."""

    def test_get_is_cached(self):
        """The same tag returns the same logger with a single handler."""
        first = Log.get("textscaler.test")
        second = Log.get("textscaler.test")

        assert first is second
        assert len(first.handlers) == 1

    def test_trace_level_name(self):
        """The custom trace level has a readable name."""
        assert logging.getLevelName(LOG_TRACE) == "TRACE"

    @pytest.mark.parametrize(
        "verbosity,expected",
        [
            (-1, logging.WARNING),
            (0, logging.WARNING),
            (1, logging.INFO),
            (2, logging.DEBUG),
            (3, LOG_TRACE),
            (9, LOG_TRACE),
        ],
    )
    def test_set_verbosity(self, restore_level, verbosity, expected):
        """-d flags map onto increasingly chatty levels."""
        assert Log.set_verbosity(verbosity) == expected
        assert restore_level.level == expected

    def test_children_inherit_level(self, restore_level):
        """Component loggers follow the namespace level."""
        Log.set_verbosity(2)

        assert Log.get("textscaler.test.child").isEnabledFor(logging.DEBUG)
