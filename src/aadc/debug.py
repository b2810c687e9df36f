"""
Debug utilities for aadc.

This module provides tools for understanding what a correction run did to a
text.

Key Components:
- visual_diff: Compare two texts line-by-line and character-by-character
- BlockInspector: Report the border layout of a diagram block

Usage:
    >>> from aadc.debug import visual_diff
    >>> corrected, _ = correct_lines(lines)
    >>> print(visual_diff("\\n".join(lines), "\\n".join(corrected)))
"""

from typing import Dict, List, Optional, Sequence

from .analyzer import analyze_line, visual_width
from .models import DiagramBlock


def _column_of(line: str, index: int) -> int:
    """Visual column of line[index]; indices past the end count one each."""
    return visual_width(line[:index]) + max(0, index - len(line))


def visual_diff(expected: str, actual: str, context_lines: int = 2) -> str:
    """
    Generate a visual character-by-character diff between two texts.

    Args:
        expected: The original (or expected) text
        actual: The corrected (or actual) text
        context_lines: Number of matching lines to show around differences

    Returns:
        A formatted string showing the differences

    Example:
        >>> print(visual_diff("| a|\\n+--+", "| a |\\n+--+"))
    """
    exp_lines = expected.split("\n")
    act_lines = actual.split("\n")
    max_lines = max(len(exp_lines), len(act_lines))

    output: List[str] = ["=" * 60, "VISUAL DIFF", "=" * 60]

    def line_at(lines: List[str], i: int) -> str:
        return lines[i] if i < len(lines) else ""

    diff_line_indices = [
        i for i in range(max_lines) if line_at(exp_lines, i) != line_at(act_lines, i)
    ]

    if not diff_line_indices:
        output.append("No differences found.")
        return "\n".join(output)

    output.append(f"Found {len(diff_line_indices)} differing line(s)")
    output.append("")

    shown_lines: set = set()
    for diff_idx in diff_line_indices:
        low = max(0, diff_idx - context_lines)
        high = min(max_lines, diff_idx + context_lines + 1)
        shown_lines.update(range(low, high))

    prev_shown = -2
    for i in sorted(shown_lines):
        if i > prev_shown + 1:
            output.append("...")

        exp_line = line_at(exp_lines, i)
        act_line = line_at(act_lines, i)

        if exp_line == act_line:
            output.append(f"{i + 1:3d}:   {act_line}")
        else:
            output.append(f"{i + 1:3d}: - |{exp_line}|")
            output.append(f"     + |{act_line}|")

            max_len = max(len(exp_line), len(act_line))
            diff_positions = [
                j for j in range(max_len) if exp_line[j : j + 1] != act_line[j : j + 1]
            ]
            if diff_positions:
                columns = sorted({_column_of(act_line, j) for j in diff_positions})
                # Marker offset matches the "     + |" prefix
                marker = [" "] * (columns[-1] + 9)
                for col in columns:
                    marker[col + 8] = "^"
                output.append("".join(marker).rstrip())
                output.append(
                    f"     Diff at col(s): {columns[:5]}"
                    f"{'...' if len(columns) > 5 else ''}"
                )

        prev_shown = i

    return "\n".join(output)


class BlockInspector:
    """
    Utilities for inspecting the border layout of a diagram block.

    Example:
        >>> inspector = BlockInspector(lines, block)
        >>> inspector.border_columns()
        {0: 7, 1: 4, 2: 7}
        >>> inspector.is_aligned()
        False
    """

    def __init__(self, lines: Sequence[str], block: DiagramBlock):
        """
        Initialize the inspector.

        Args:
            lines: The full line buffer
            block: Block to inspect
        """
        self._lines = lines
        self._block = block

    def border_columns(self) -> Dict[int, int]:
        """Map line index to suffix border column, for lines that have one."""
        columns = {}
        for i in self._block.line_range():
            border = analyze_line(self._lines[i]).suffix_border
            if border is not None:
                columns[i] = border.column
        return columns

    def missing_borders(self) -> List[int]:
        """Indices of boxy lines without a suffix border."""
        missing = []
        for i in self._block.line_range():
            analyzed = analyze_line(self._lines[i])
            if analyzed.kind.is_boxy and analyzed.suffix_border is None:
                missing.append(i)
        return missing

    def target_column(self) -> Optional[int]:
        columns = self.border_columns()
        return max(columns.values()) if columns else None

    def is_aligned(self) -> bool:
        """True if every suffix border in the block sits in the same column."""
        return len(set(self.border_columns().values())) <= 1

    def report(self) -> str:
        """Render the block with each line's border column."""
        columns = self.border_columns()
        lines = [f"Block lines {self._block.start + 1}-{self._block.end}:"]
        for i in self._block.line_range():
            col = columns.get(i)
            label = f"{col:3d}" if col is not None else "  -"
            lines.append(f"{i + 1:4d} [{label}] {self._lines[i]}")
        return "\n".join(lines)
