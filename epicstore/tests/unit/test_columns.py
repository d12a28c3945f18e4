"""Unit tests for column helpers."""

from epicstore.utils.columns import get_column_string


class TestGetColumnString:
    """Test fitting text into fixed-width columns."""

    def test_ellipsizes_to_width(self):
        assert get_column_string("hello world", 5) == "hello..."

    def test_zero_width(self):
        assert get_column_string("yo", 0) == ""

    def test_short_text_unchanged(self):
        assert get_column_string("kiss me", 20) == "kiss me"

    def test_exact_width_unchanged(self):
        assert get_column_string("exact", 5) == "exact"

    def test_combining_marks_not_split(self):
        """Test a base letter keeps its combining accent."""
        text = "e\u0301te\u0301"
        assert get_column_string(text, 4) == text
        assert get_column_string(text, 1) == "e\u0301..."

    def test_joined_emoji_counts_once(self):
        family = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
        assert get_column_string(family + "ab", 1) == family + "..."
