"""
Line analysis for diagram correction.

Classifies how "boxy" a line is and extracts the measurements the revision
engine aligns against: visual width, indentation and the trailing border.
"""

from typing import List, Optional

from .chars import is_border_or_corner, is_box_char, is_corner
from .models import AnalyzedLine, LineKind, SuffixBorder

# First code point treated as double width
WIDE_CHAR_START = "\u1100"


def char_width(char: str) -> int:
    """Column width of a single character."""
    if char.isascii() or is_box_char(char):
        return 1
    # Coarse heuristic: most CJK and emoji are double-width
    if char >= WIDE_CHAR_START:
        return 2
    return 1


def visual_width(text: str) -> int:
    """
    Calculate the visual width of a string.

    Box-drawing characters always count as one column. Anything else at or
    above U+1100 counts as two, which approximates East Asian wide text
    without a full width table.
    """
    return sum(char_width(c) for c in text)


def expand_tabs(line: str, tab_width: int) -> str:
    """
    Expand tabs to spaces, advancing to the next multiple of tab_width.

    Every other character, including a stray carriage return, advances the
    column by one.
    """
    parts: List[str] = []
    col = 0
    for char in line:
        if char == "\t":
            spaces = tab_width - col % tab_width
            parts.append(" " * spaces)
            col += spaces
        else:
            parts.append(char)
            col += 1
    return "".join(parts)


def classify_line(line: str) -> LineKind:
    """Classify a single line."""
    trimmed = line.strip()

    if not trimmed:
        return LineKind.BLANK

    box_chars = sum(1 for c in trimmed if is_box_char(c))
    if box_chars == 0:
        return LineKind.NONE

    has_corner = any(is_corner(c) for c in trimmed)
    encloses = is_border_or_corner(trimmed[0]) and is_border_or_corner(trimmed[-1])

    if has_corner or encloses or box_chars * 3 >= len(trimmed):
        return LineKind.STRONG
    return LineKind.WEAK


def detect_suffix_border(line: str) -> Optional[SuffixBorder]:
    """
    Detect a right-side border in a line.

    Args:
        line: Line to inspect

    Returns:
        SuffixBorder for a trailing vertical border or corner, otherwise None
    """
    trimmed = line.rstrip()
    if not trimmed:
        return None

    last_char = trimmed[-1]
    if not is_border_or_corner(last_char):
        return None

    return SuffixBorder(
        column=visual_width(trimmed) - 1,
        char=last_char,
        is_closing=is_border_or_corner(last_char),
    )


def analyze_line(line: str) -> AnalyzedLine:
    """Analyze a line for correction."""
    kind = classify_line(line)
    return AnalyzedLine(
        content=line,
        kind=kind,
        visual_width=visual_width(line),
        indent=len(line) - len(line.lstrip()),
        suffix_border=detect_suffix_border(line) if kind.is_boxy else None,
    )
