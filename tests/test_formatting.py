"""Tests for the text and date formatting helpers."""

from datetime import date

from consultsite.services.formatting import (
    calculate_reading_time,
    format_date,
    format_phone_number,
    is_valid_email,
    slugify,
    truncate,
)


class TestFormatDate:
    def test_iso_string(self):
        assert format_date("2025-01-15") == "January 15, 2025"

    def test_timestamp_with_zulu(self):
        assert format_date("2024-11-03T08:00:00Z") == "November 3, 2024"

    def test_date_object(self):
        assert format_date(date(2024, 3, 5)) == "March 5, 2024"


class TestReadingTime:
    def test_rounds_up(self):
        assert calculate_reading_time("word " * 201) == 2

    def test_exact_minute(self):
        assert calculate_reading_time("word " * 200) == 1

    def test_empty(self):
        assert calculate_reading_time("   ") == 0


class TestSlugify:
    def test_basic(self):
        assert slugify("Hello, World!") == "hello-world"

    def test_collapses_separators(self):
        assert slugify("  AI / ML __ Implementation -- 2025 ") == "ai-ml-implementation-2025"

    def test_strips_accents(self):
        assert slugify("Café Déjà Vu") == "cafe-deja-vu"


class TestTruncate:
    def test_short_text_unchanged(self):
        assert truncate("short", 10) == "short"

    def test_long_text_gets_ellipsis(self):
        assert truncate("Hello wonderful world", 6) == "Hello..."


class TestContactHelpers:
    def test_valid_email(self):
        assert is_valid_email("jason@example.com")

    def test_invalid_email(self):
        assert not is_valid_email("not an email")
        assert not is_valid_email("missing@tld")

    def test_phone_formatting(self):
        assert format_phone_number("555.123.4567") == "(555) 123-4567"

    def test_phone_other_lengths_unchanged(self):
        assert format_phone_number("+44 20 7946 0958") == "+44 20 7946 0958"
