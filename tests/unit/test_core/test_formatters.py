#!/usr/bin/env python3
"""Tests for human-readable value formatting."""

import click
import pytest

from xrplsale.core.formatters import (
    format_currency,
    format_date,
    format_datetime,
    format_number,
    format_percent,
    mask_secret,
    short_id,
    status_badge,
    truncate,
)


@pytest.mark.unit
class TestNumberFormatting:
    """Test counts, token quantities and XRP amounts."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1000000, "1,000,000"),
            ("1000000", "1,000,000"),
            ("0.500000", "0.5"),
            ("1234.5678", "1,234.5678"),
            (0, "0"),
        ],
    )
    def test_format_number(self, value, expected):
        assert format_number(value) == expected

    def test_format_number_passes_through_text(self):
        assert format_number("n/a") == "n/a"

    def test_format_number_large_supply(self):
        assert format_number("100000000000000000000000") == "100,000,000,000,000,000,000,000"
        assert format_number("123456789012345678901234.5") == "123,456,789,012,345,678,901,234.5"

    def test_format_number_non_finite_passes_through(self):
        assert format_number("Infinity") == "Infinity"
        assert format_number("NaN") == "NaN"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("1234.5", "1,234.50 XRP"),
            (100, "100.00 XRP"),
            ("0.123456789", "0.123457 XRP"),
            (None, "0.00 XRP"),
            ("100000000000000000000000", "100,000,000,000,000,000,000,000.00 XRP"),
            ("Infinity", "Infinity XRP"),
        ],
    )
    def test_format_currency(self, value, expected):
        assert format_currency(value) == expected

    def test_format_percent(self):
        assert format_percent(0.4567) == "45.7%"
        assert format_percent(None) == "N/A"


@pytest.mark.unit
class TestDateFormatting:
    """Test API timestamp rendering."""

    def test_format_date_iso_with_z(self):
        assert format_date("2025-03-05T14:30:00Z") == "Mar 05, 2025"

    def test_format_datetime(self):
        assert format_datetime("2025-03-05T14:30:00+00:00") == "March 05, 2025 at 14:30"

    def test_missing_date(self):
        assert format_date(None) == "-"
        assert format_datetime(None, default="Never") == "Never"

    def test_unparseable_date_passes_through(self):
        assert format_date("yesterday") == "yesterday"


@pytest.mark.unit
class TestTextHelpers:
    """Test badges, masking and truncation."""

    @pytest.mark.parametrize(
        "status,expected",
        [
            ("active", "🟢 Active"),
            ("upcoming", "🔵 Upcoming"),
            ("completed", "⚫ Completed"),
            ("paused", "🟡 Paused"),
            ("cancelled", "🔴 Cancelled"),
            ("ACTIVE", "🟢 Active"),
            ("archived", "archived"),
        ],
    )
    def test_status_badge(self, status, expected):
        assert click.unstyle(status_badge(status)) == expected

    def test_mask_secret_keeps_prefix(self):
        assert mask_secret("xs_live_abcdef") == "xs_live_******"

    def test_mask_short_secret(self):
        assert mask_secret("abc") == "abc"

    def test_truncate(self):
        assert truncate("A very long project name", 10) == "A very ..."
        assert truncate("Short", 10) == "Short"

    def test_short_id(self):
        assert short_id("prj_0123456789abcdef") == "prj_01234567..."
        assert short_id("prj_1") == "prj_1"
