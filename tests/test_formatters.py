"""Tests for the formatters module."""

import pytest

from formatters import format_duration, format_views, slugify, time_ago


class TestFormatViews:
    """Test format_views()."""

    @pytest.mark.parametrize("n, expected", [
        (0, "0 views"),
        (500, "500 views"),
        (999, "999 views"),
        (1_000, "1.0K views"),
        (999_999, "1000.0K views"),
        (1_000_000, "1.0M views"),
        (999_999_999, "1000.0M views"),
        (1_000_000_000, "1.0B views"),
    ])
    def test_thresholds(self, n, expected) -> None:
        assert format_views(n) == expected

    def test_one_decimal_place(self) -> None:
        assert format_views(1_234_567) == "1.2M views"
        assert format_views(10_000_000) == "10.0M views"

    def test_exact_halves_round_up(self) -> None:
        # 1.25 is exactly representable, so it rounds up like toFixed(1)
        assert format_views(1_250) == "1.3K views"

    def test_inexact_halves_follow_binary_value(self) -> None:
        # 1.15 is stored as 1.1499999..., so it rounds down
        assert format_views(1_150) == "1.1K views"


class TestTimeAgo:
    """Test time_ago()."""

    @pytest.mark.parametrize("days, expected", [
        (0, "Today"),
        (1, "1 day ago"),
        (2, "2 days ago"),
        (29, "29 days ago"),
        (30, "1 months ago"),
        (59, "1 months ago"),
        (364, "12 months ago"),
        (365, "1 years ago"),
        (730, "2 years ago"),
        (1200, "3 years ago"),
    ])
    def test_buckets(self, days, expected) -> None:
        assert time_ago(days) == expected


class TestSlugify:
    """Test slugify()."""

    def test_lowercases_and_hyphenates(self) -> None:
        assert slugify("Relaxing Lo-fi Beats 42") == "relaxing-lo-fi-beats-42"

    def test_collapses_punctuation_runs(self) -> None:
        assert slugify("Cooking: 30-minute Meals 7") == "cooking-30-minute-meals-7"
        assert slugify("Study With Me — Focus Session 3") == "study-with-me-focus-session-3"

    def test_strips_leading_and_trailing_hyphens(self) -> None:
        assert slugify("  !Hello, World!  ") == "hello-world"

    def test_empty(self) -> None:
        assert slugify("") == ""


class TestFormatDuration:
    """Test format_duration()."""

    def test_pads_seconds(self) -> None:
        assert format_duration(3, 5) == "3:05"

    def test_minutes_not_padded(self) -> None:
        assert format_duration(12, 0) == "12:00"
        assert format_duration(1, 59) == "1:59"
