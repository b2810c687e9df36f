"""Unit tests for the analyzer module."""

import pytest

from aadc.analyzer import (
    analyze_line,
    char_width,
    classify_line,
    detect_suffix_border,
    expand_tabs,
    visual_width,
)
from aadc.models import LineKind


class TestVisualWidth:
    """Tests for visual_width."""

    def test_empty(self):
        assert visual_width("") == 0

    def test_ascii_counts_characters(self):
        """Test ASCII width equals character count."""
        assert visual_width("hello") == 5
        assert visual_width("| x |") == 5

    def test_box_chars_are_single_width(self):
        """Test box-drawing characters count as one column."""
        assert visual_width("│──│") == 4
        assert visual_width("┌─┐") == 3

    def test_wide_chars_count_double(self):
        """Test CJK characters count as two columns."""
        assert visual_width("日本") == 4
        assert visual_width("│ 日本 │") == 8

    def test_narrow_non_ascii(self):
        """Test characters below U+1100 count as one column."""
        assert visual_width("é") == 1
        assert char_width("Ω") == 1


class TestClassifyLine:
    """Tests for classify_line."""

    @pytest.mark.parametrize("line", ["", "   ", "\t", " \t "])
    def test_blank(self, line):
        """Test empty and whitespace-only lines are blank."""
        assert classify_line(line) == LineKind.BLANK

    @pytest.mark.parametrize("line", ["hello world", "fn main() {}", "日本語"])
    def test_none(self, line):
        """Test lines without box characters."""
        assert classify_line(line) == LineKind.NONE

    @pytest.mark.parametrize(
        "line", ["+---+", "| x |", "┌───┐", "│ y │", "  ----  ", "-- ab"]
    )
    def test_strong(self, line):
        """Test corners, enclosing borders and dense box characters."""
        assert classify_line(line) == LineKind.STRONG

    @pytest.mark.parametrize("line", ["a - b", "x | y", "| no border here"])
    def test_weak(self, line):
        """Test sparse box characters without a strong pattern."""
        assert classify_line(line) == LineKind.WEAK

    def test_is_boxy(self):
        """Test only weak and strong lines are boxy."""
        assert LineKind.STRONG.is_boxy
        assert LineKind.WEAK.is_boxy
        assert not LineKind.NONE.is_boxy
        assert not LineKind.BLANK.is_boxy


class TestDetectSuffixBorder:
    """Tests for detect_suffix_border."""

    def test_pipe_border(self):
        """Test a trailing pipe is detected as closing."""
        border = detect_suffix_border("| hello |")
        assert border is not None
        assert border.char == "|"
        assert border.column == 8
        assert border.is_closing

    def test_no_border(self):
        assert detect_suffix_border("hello world") is None
        assert detect_suffix_border("| hello") is None

    def test_empty(self):
        assert detect_suffix_border("") is None
        assert detect_suffix_border("    ") is None

    def test_trailing_whitespace_ignored(self):
        """Test the column is measured on the right-trimmed line."""
        border = detect_suffix_border("+---+   ")
        assert border.column == 4
        assert border.char == "+"

    def test_corner_is_closing(self):
        """Test corners close a line just like vertical borders."""
        border = detect_suffix_border("└───┘")
        assert border.char == "┘"
        assert border.is_closing

    def test_wide_chars_shift_column(self):
        """Test the column is a visual column, not a character index."""
        border = detect_suffix_border("│ 日本 │")
        assert border.column == 7


class TestAnalyzeLine:
    """Tests for analyze_line."""

    def test_boxy_line(self):
        """Test all fields of an indented box line."""
        analyzed = analyze_line("  | x |")
        assert analyzed.content == "  | x |"
        assert analyzed.kind == LineKind.STRONG
        assert analyzed.visual_width == 7
        assert analyzed.indent == 2
        assert analyzed.suffix_border.column == 6

    def test_weak_line_gets_border(self):
        """Test suffix detection also runs for weak lines."""
        analyzed = analyze_line("hello |")
        assert analyzed.kind == LineKind.WEAK
        assert analyzed.suffix_border.column == 6

    def test_plain_line_has_no_border(self):
        analyzed = analyze_line("plain text")
        assert analyzed.kind == LineKind.NONE
        assert analyzed.suffix_border is None

    def test_indent_counts_characters(self):
        """Test indentation is a raw character count."""
        assert analyze_line("    +--+").indent == 4
        assert analyze_line("+--+").indent == 0


class TestExpandTabs:
    """Tests for expand_tabs."""

    def test_leading_tab(self):
        assert expand_tabs("\thello", 4) == "    hello"

    def test_tab_stops_track_column(self):
        """Test tabs advance to the next multiple of the tab width."""
        assert expand_tabs("a\tb", 4) == "a   b"
        assert expand_tabs("ab\tc", 4) == "ab  c"
        assert expand_tabs("abcd\te", 4) == "abcd    e"

    def test_multiple_tabs(self):
        assert expand_tabs("\t\t", 2) == "    "

    def test_carriage_return_advances_column(self):
        """Test a stray carriage return counts as one column, not a reset."""
        assert expand_tabs("| ab\rc\tx|", 4) == "| ab\rc  x|"

    def test_no_tabs_unchanged(self):
        assert expand_tabs("| x |", 4) == "| x |"

    @pytest.mark.parametrize("width", [1, 2, 4, 8])
    def test_result_has_no_tabs(self, width):
        """Test expansion removes every tab and never shortens the line."""
        text = "a\tbc\t\td\t"
        result = expand_tabs(text, width)
        assert "\t" not in result
        assert len(result) >= len(text)
