"""Tests for description text helpers.

Property-based tests check the truncation rules for arbitrary word sequences.
"""
from hypothesis import given, strategies as st

from metamanager.text import normalize_whitespace, truncate_description, truncate_words

words = st.lists(
    st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=12),
    min_size=1,
    max_size=40,
)
separators = st.sampled_from([" ", "  ", "\n", "\t ", " \r\n "])


class TestNormalizeWhitespace:
    """Tests for whitespace normalization."""

    def test_collapses_runs_and_trims(self):
        assert normalize_whitespace("  Hello \n\n  world\t! ") == "Hello world !"

    @given(words, separators)
    def test_result_has_single_spaces_only(self, parts, separator):
        """Property: normalized text never holds two consecutive spaces or other whitespace."""
        result = normalize_whitespace(f" {separator.join(parts)} ")

        assert "  " not in result
        assert result == result.strip()
        assert result == " ".join(parts)

    @given(st.text())
    def test_is_idempotent(self, text):
        once = normalize_whitespace(text)
        assert normalize_whitespace(once) == once


class TestTruncateWords:
    """Tests for word based truncation."""

    def test_keeps_requested_number_of_words(self):
        assert truncate_words("one two three", 2) == "one two..."

    def test_short_text_is_unchanged(self):
        assert truncate_words("one two", 5) == "one two"

    def test_preserves_original_spacing(self):
        assert truncate_words("one  two three", 2) == "one  two..."

    def test_custom_suffix(self):
        assert truncate_words("one two three", 1, suffix=" [more]") == "one [more]"


class TestTruncateDescription:
    """Tests for description truncation."""

    def test_truncates_on_word_boundary(self):
        text = "This   is   a   test    description that is definitely longer than thirty characters"

        assert truncate_description(text, 30) == "This is a test description..."

    def test_short_description_is_only_normalized(self):
        assert truncate_description("  A short\n description ", 150) == "A short description"

    def test_description_at_exact_length_is_kept(self):
        text = "x" * 10 + " " + "y" * 9

        assert truncate_description(text, 20) == text

    def test_single_long_word_falls_back_to_word_truncation(self):
        """A text without any space in the limit is shortened by words, not characters."""
        text = "a" * 200

        assert truncate_description(text, 150) == text

    def test_word_fallback_drops_extra_words(self):
        text = "supercalifragilistic is long"

        assert truncate_description(text, 2) == "supercalifragilistic is..."

    @given(words, separators, st.integers(min_value=1, max_value=200))
    def test_truncated_description_respects_length(self, parts, separator, length):
        """Property: a description cut on a space is a prefix of the normalized text within length."""
        normalized = " ".join(parts)
        result = truncate_description(separator.join(parts), length)

        if len(normalized) <= length:
            assert result == normalized
        elif " " in normalized[:length]:
            assert result.endswith("...")
            assert len(result) - 3 <= length
            assert normalized.startswith(result[:-3])
            assert not result[:-3].endswith(" ")
