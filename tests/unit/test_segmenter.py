"""Unit tests for the segmenter module."""

import pytest

from aadc.segmenter import MIN_BLOCK_CONFIDENCE, BlockSegmenter, find_diagram_blocks


class TestFindDiagramBlocks:
    """Tests for find_diagram_blocks."""

    def test_box_surrounded_by_prose(self, simple_box_lines):
        """Test a single box yields exactly one block spanning the box."""
        blocks = find_diagram_blocks(simple_box_lines)
        assert len(blocks) == 1
        assert blocks[0].start == 1
        assert blocks[0].end == 4
        assert blocks[0].confidence == pytest.approx(1.0)

    def test_no_boxy_lines(self):
        assert find_diagram_blocks(["hello", "", "world"]) == []

    def test_empty_input(self):
        assert find_diagram_blocks([]) == []

    def test_single_boxy_line(self):
        """Test a lone boxy line still forms a block of length 1."""
        blocks = find_diagram_blocks(["+---+"])
        assert len(blocks) == 1
        assert (blocks[0].start, blocks[0].end) == (0, 1)
        assert blocks[0].confidence == pytest.approx(0.9)

    def test_single_blank_gap_tolerated(self):
        """Test one blank line does not split a block."""
        blocks = find_diagram_blocks(["+--+", "", "+--+"])
        assert len(blocks) == 1
        assert (blocks[0].start, blocks[0].end) == (0, 3)

    def test_two_blank_lines_split_blocks(self):
        """Test two consecutive blank lines end a block."""
        blocks = find_diagram_blocks(["+--+", "", "", "+--+"])
        assert [(b.start, b.end) for b in blocks] == [(0, 1), (3, 4)]

    def test_trailing_blank_trimmed(self):
        """Test a trailing blank line is not part of the block."""
        blocks = find_diagram_blocks(["+--+", "| a|", ""])
        assert (blocks[0].start, blocks[0].end) == (0, 2)

    def test_plain_line_absorbed_between_boxy_lines(self):
        """Test a label line inside a diagram is absorbed."""
        blocks = find_diagram_blocks(["+----+", "label", "+----+"])
        assert len(blocks) == 1
        assert (blocks[0].start, blocks[0].end) == (0, 3)

    def test_lookahead_spans_three_lines(self):
        """Test plain lines are absorbed while a boxy line is within reach."""
        lines = ["+--+", "text", "a", "b", "+--+"]
        blocks = find_diagram_blocks(lines)
        assert [(b.start, b.end) for b in blocks] == [(0, 5)]

    def test_lookahead_exhausted(self):
        """Test a plain line ends the block when no boxy line follows soon."""
        lines = ["+--+", "text", "a", "b", "c", "+--+"]
        blocks = find_diagram_blocks(lines)
        assert [(b.start, b.end) for b in blocks] == [(0, 1), (5, 6)]

    def test_plain_line_after_blank_ends_block(self):
        """Test a plain line following a blank gap is not absorbed."""
        blocks = find_diagram_blocks(["+--+", "", "text", "+--+"])
        assert [(b.start, b.end) for b in blocks] == [(0, 1), (3, 4)]

    def test_weak_only_block_dropped(self):
        """Test a block of weak lines scores below the threshold."""
        lines = ["a - b", "c - d"]
        assert find_diagram_blocks(lines) == []

    def test_weak_only_block_kept_with_all_blocks(self):
        """Test all_blocks keeps low-confidence blocks."""
        blocks = find_diagram_blocks(["a - b", "c - d"], all_blocks=True)
        assert len(blocks) == 1
        assert blocks[0].confidence == pytest.approx(0.2)
        assert blocks[0].confidence < MIN_BLOCK_CONFIDENCE

    def test_mixed_confidence(self):
        """Test confidence combines strong ratio and size bonus."""
        blocks = find_diagram_blocks(["+--+", "a - b"])
        assert blocks[0].confidence == pytest.approx(0.6)

    def test_blocks_sorted_and_disjoint(self):
        """Test blocks come back in order and never overlap."""
        lines = ["+--+", "", "", "x", "+----+", "| y  |", "", "", "+-+"]
        blocks = find_diagram_blocks(lines)
        assert len(blocks) == 3
        for prev, nxt in zip(blocks, blocks[1:]):
            assert prev.end <= nxt.start


class TestBlockSegmenter:
    """Tests for the BlockSegmenter class."""

    def test_matches_function(self, simple_box_lines):
        """Test the class and the convenience function agree."""
        blocks = BlockSegmenter().find_blocks(simple_box_lines)
        assert blocks == find_diagram_blocks(simple_box_lines)

    def test_block_length_and_range(self, simple_box_lines):
        block = BlockSegmenter().find_blocks(simple_box_lines)[0]
        assert len(block) == 3
        assert list(block.line_range()) == [1, 2, 3]
