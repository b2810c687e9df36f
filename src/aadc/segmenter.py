"""
Diagram block segmentation.

Groups contiguous boxy lines into diagram blocks, tolerating a single blank
line and short runs of plain text inside a diagram (labels, captions).
"""

import logging
from typing import List, Sequence

from .analyzer import classify_line
from .models import DiagramBlock, LineKind

logger = logging.getLogger(__name__)

# Blocks below this confidence are skipped unless all blocks are requested
MIN_BLOCK_CONFIDENCE = 0.3

# Consecutive blank lines tolerated inside a block
MAX_BLANK_GAP = 1

# Lines checked after a plain-text line for a boxy continuation
LOOKAHEAD_LINES = 3


class BlockSegmenter:
    """
    Finds diagram blocks in a sequence of lines.

    Scanning is a single pass with a cursor: each block starts at a boxy
    line, is extended as far as the gap rules allow, and scanning resumes at
    the block's end.
    """

    def __init__(self, all_blocks: bool = False):
        self.all_blocks = all_blocks

    def find_blocks(self, lines: Sequence[str]) -> List[DiagramBlock]:
        """
        Return the blocks in lines, ordered by start index.

        Args:
            lines: Tab-expanded lines of text

        Returns:
            Non-overlapping DiagramBlock objects
        """
        kinds = [classify_line(line) for line in lines]
        blocks: List[DiagramBlock] = []

        i = 0
        while i < len(kinds):
            if not kinds[i].is_boxy:
                i += 1
                continue

            block = self._extend_block(kinds, i)
            if self.all_blocks or block.confidence >= MIN_BLOCK_CONFIDENCE:
                blocks.append(block)
            else:
                logger.debug(
                    "Skipping block at lines %d-%d (confidence %.2f)",
                    block.start + 1,
                    block.end,
                    block.confidence,
                )

            i = block.end

        return blocks

    def _extend_block(self, kinds: List[LineKind], start: int) -> DiagramBlock:
        """Grow a block from a boxy line at start and score it."""
        end = start + 1
        strong_count = 1 if kinds[start] == LineKind.STRONG else 0
        weak_count = 1 if kinds[start] == LineKind.WEAK else 0
        blank_gap = 0

        while end < len(kinds):
            kind = kinds[end]

            if kind == LineKind.STRONG:
                strong_count += 1
                blank_gap = 0
            elif kind == LineKind.WEAK:
                weak_count += 1
                blank_gap = 0
            elif kind == LineKind.BLANK:
                blank_gap += 1
                if blank_gap > MAX_BLANK_GAP:
                    break
            else:
                # Plain text survives only directly between boxy lines
                if blank_gap > 0 or not self._boxy_ahead(kinds, end):
                    break
            end += 1

        while end > start and kinds[end - 1] == LineKind.BLANK:
            end -= 1

        return DiagramBlock(
            start=start,
            end=end,
            confidence=self._confidence(strong_count, weak_count, end - start),
        )

    @staticmethod
    def _boxy_ahead(kinds: List[LineKind], index: int) -> bool:
        """Check whether any of the lines after index is boxy."""
        window = kinds[index + 1 : index + 1 + LOOKAHEAD_LINES]
        return any(kind.is_boxy for kind in window)

    @staticmethod
    def _confidence(strong_count: int, weak_count: int, length: int) -> float:
        total = strong_count + weak_count
        if total == 0:
            return 0.0
        strong_ratio = strong_count / total
        size_bonus = min(0.2, length / 10)
        return min(1.0, strong_ratio * 0.8 + size_bonus)


def find_diagram_blocks(
    lines: Sequence[str], all_blocks: bool = False
) -> List[DiagramBlock]:
    """
    Convenience function to find diagram blocks.

    Args:
        lines: Tab-expanded lines of text
        all_blocks: Keep blocks regardless of confidence

    Returns:
        List of DiagramBlock objects
    """
    return BlockSegmenter(all_blocks=all_blocks).find_blocks(lines)
