"""Tests for word wrapping."""

import pytest

from boxlog.utils.display_width import display_width
from boxlog.utils.text_wrap import wrap_text


class TestWrapText:
    """Tests for wrap_text."""

    def test_empty_input_gives_one_empty_line(self) -> None:
        """Test empty text still produces a row."""
        assert wrap_text("", 10) == [""]

    def test_fits_on_one_line(self) -> None:
        """Test short text is returned as-is."""
        assert wrap_text("hello world", 20) == ["hello world"]

    def test_exact_fit(self) -> None:
        """Test text exactly as wide as the budget is not wrapped."""
        assert wrap_text("hello world", 11) == ["hello world"]

    def test_greedy_wrap(self) -> None:
        """Test words are accumulated greedily."""
        assert wrap_text("hello world foo bar", 11) == ["hello world", "foo bar"]

    def test_hard_split_long_word(self) -> None:
        """Test a word wider than the budget is split by character."""
        assert wrap_text("abcdefghij", 4) == ["abcd", "efgh", "ij"]

    def test_hard_split_after_words(self) -> None:
        """Test the current line is flushed before a hard split."""
        assert wrap_text("hi abcdefghij", 4) == ["hi", "abcd", "efgh", "ij"]

    def test_hard_split_remainder_continues(self) -> None:
        """Test text after a hard-split word joins the last chunk."""
        assert wrap_text("abcdef g", 4) == ["abcd", "ef g"]

    def test_wide_characters(self) -> None:
        """Test emoji are measured as two columns."""
        assert wrap_text("\U0001F600\U0001F600\U0001F600", 4) == [
            "\U0001F600\U0001F600",
            "\U0001F600",
        ]

    def test_single_character_wider_than_budget(self) -> None:
        """Test an unsplittable character still gets its own line."""
        assert wrap_text("\U0001F600", 1) == ["\U0001F600"]

    def test_repeated_spaces_preserved(self) -> None:
        """Test empty tokens between spaces are kept."""
        assert wrap_text("a  b", 10) == ["a  b"]

    def test_newlines_start_new_lines(self) -> None:
        """Test each paragraph is wrapped on its own."""
        assert wrap_text("first\n\nsecond", 10) == ["first", "", "second"]

    def test_zero_width_legacy(self) -> None:
        """Test non-positive budget gives a single empty line."""
        assert wrap_text("some text", 0) == [""]
        assert wrap_text("some text", -3) == [""]

    def test_zero_width_keep_unsplit(self) -> None:
        """Test non-positive budget can keep the text unsplit."""
        assert wrap_text("some text", 0, keep_unsplit=True) == ["some text"]

    @pytest.mark.parametrize("width", [1, 5, 9, 17, 40])
    def test_no_line_exceeds_budget(self, width: int) -> None:
        """Test wrapped lines never exceed the budget."""
        text = (
            "The visionary driving the team forward, supercalifragilistic "
            "中文字 \U0001F680 launch 42"
        )
        for line in wrap_text(text, width):
            assert display_width(line) <= max(width, 2)
