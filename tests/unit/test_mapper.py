#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#

"""Unit tests for textscaler.mapper module."""

from __future__ import annotations

import pytest

from textscaler.mapper import (
    format_value,
    from_slider_position,
    is_default,
    parse_value,
    snap,
    to_device_value,
    to_slider_position,
)

# ─────────────────────────────────────────────────────────────────────────────
# Slider projection
# ─────────────────────────────────────────────────────────────────────────────


class TestSliderPosition:
    """Tests for to_slider_position / from_slider_position."""

    @pytest.mark.parametrize(
        "value,min_,max_,expected",
        [
            (0.5, 0.5, 3.0, 0.0),
            (3.0, 0.5, 3.0, 1.0),
            (1.75, 0.5, 3.0, 0.5),
            (75, 0, 100, 0.75),
            (-5, -10, 10, 0.25),
        ],
    )
    def test_to_slider_position(self, value, min_, max_, expected):
        """Values map linearly onto [0, 1]."""
        assert to_slider_position(value, min_, max_) == pytest.approx(expected)

    def test_out_of_range_values_pin_to_ends(self):
        """Values outside the range land on the slider ends."""
        assert to_slider_position(-1.0, 0.5, 3.0) == 0.0
        assert to_slider_position(9.0, 0.5, 3.0) == 1.0

    @pytest.mark.parametrize("min_,max_", [(0.5, 3.0), (0.0, 100.0), (-10.0, 10.0)])
    def test_round_trip(self, min_, max_):
        """from(to(v)) is the identity within 1e-9 across the range."""
        for i in range(101):
            value = min_ + (max_ - min_) * i / 100
            position = to_slider_position(value, min_, max_)
            assert abs(from_slider_position(position, min_, max_) - value) < 1e-9

    def test_from_slider_position_clamps(self):
        """Positions outside [0, 1] still produce in-range values."""
        assert from_slider_position(1.5, 0.5, 3.0) == 3.0
        assert from_slider_position(-0.5, 0.5, 3.0) == 0.5


# ─────────────────────────────────────────────────────────────────────────────
# Text formatting and parsing
# ─────────────────────────────────────────────────────────────────────────────


class TestFormatValue:
    """Tests for format_value."""

    @pytest.mark.parametrize(
        "value,decimals,expected",
        [
            (1.0, 2, "1.00"),
            (1.256, 2, "1.26"),
            (75.0, 0, "75"),
            (74.6, 0, "75"),
            (-2.5, 1, "-2.5"),
            (-0.001, 2, "0.00"),
            (1234567.0, 1, "1234567.0"),
        ],
    )
    def test_format(self, value, decimals, expected):
        """Fixed decimals, '.' separator, sign kept, no negative zero."""
        assert format_value(value, decimals) == expected


class TestParseValue:
    """Tests for parse_value."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1", 1.0),
            ("1.25", 1.25),
            ("  2.5 ", 2.5),
            ("-3", -3.0),
            ("+4.", 4.0),
            (".5", 0.5),
            ("1e2", 100.0),
        ],
    )
    def test_valid(self, text, expected):
        """Plain and scientific decimals parse."""
        assert parse_value(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["", "   ", "abc", "1,5", "1.2.3", "nan", "inf", "-Infinity", "1_000", "12px", "1e999", None],
    )
    def test_invalid(self, text):
        """Anything else is reported as None instead of raising."""
        assert parse_value(text) is None

    @pytest.mark.parametrize("decimals", [0, 1, 2])
    def test_format_parse_round_trip(self, decimals):
        """parse(format(v, d)) == round(v, d) across the range."""
        for i in range(251):
            value = 0.5 + i * 0.01
            assert parse_value(format_value(value, decimals)) == pytest.approx(
                round(value, decimals), abs=1e-12
            )


# ─────────────────────────────────────────────────────────────────────────────
# Default detection and rounding
# ─────────────────────────────────────────────────────────────────────────────


class TestIsDefault:
    """Tests for is_default."""

    def test_integer_precision(self):
        """Within half a display unit of the default counts as default."""
        assert is_default(74.6, 75, 0) is True
        assert is_default(75.4, 75, 0) is True
        assert is_default(74.4, 75, 0) is False
        assert is_default(75.0, 75, 0) is True

    def test_two_decimals(self):
        """The tolerance shrinks with the display precision."""
        assert is_default(1.004, 1.0, 2) is True
        assert is_default(1.006, 1.0, 2) is False


class TestSnap:
    """Tests for snap."""

    def test_snap_to_precision(self):
        assert snap(1.2345, 2) == 1.23
        assert snap(74.6, 0) == 75.0


class TestToDeviceValue:
    """Tests for to_device_value."""

    @pytest.mark.parametrize(
        "value,min_,max_,expected",
        [
            (0, 0, 100, 0),
            (100, 0, 100, 100),
            (49.5, 0, 100, 50),
            (50.5, 0, 100, 51),
            (49.4, 0, 100, 49),
            (1.75, 0.5, 3.0, 50),
            (3.0, 0.5, 3.0, 100),
            (250, 0, 100, 100),
        ],
    )
    def test_rounds_half_up(self, value, min_, max_, expected):
        """Values are rounded, not truncated, into the device range."""
        result = to_device_value(value, min_, max_)
        assert isinstance(result, int)
        assert result == expected

    def test_custom_device_range(self):
        """The device range is configurable."""
        assert to_device_value(50, 0, 100, 0, 255) == 128
