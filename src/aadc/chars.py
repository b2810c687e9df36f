"""
Box-drawing character classification.

Covers the ASCII characters used for hand-drawn boxes as well as the Unicode
light, heavy, double, dashed and rounded box-drawing sets.
"""

from collections import Counter
from typing import Iterable

# Corner pieces
CORNER_CHARS = frozenset("+┌┐└┘╔╗╚╝╭╮╯╰")

# Horizontal fills used for top and bottom borders
HORIZONTAL_CHARS = frozenset("-─━═╌╍┄┅┈┉~=")

# Vertical borders
VERTICAL_CHARS = frozenset("|│┃║╎╏┆┇┊┋")

# T-junctions and crosses
JUNCTION_CHARS = frozenset("┬┴├┤┼╦╩╠╣╬╤╧╟╢╫╪")

BOX_CHARS = CORNER_CHARS | HORIZONTAL_CHARS | VERTICAL_CHARS | JUNCTION_CHARS

DEFAULT_VERTICAL = "|"


def is_corner(char: str) -> bool:
    """Check if character is a corner piece (ASCII or Unicode)."""
    return char in CORNER_CHARS


def is_horizontal_fill(char: str) -> bool:
    """Check if character is a horizontal fill."""
    return char in HORIZONTAL_CHARS


def is_vertical_border(char: str) -> bool:
    """Check if character is a vertical border."""
    return char in VERTICAL_CHARS


def is_junction(char: str) -> bool:
    """Check if character is a T-junction or cross."""
    return char in JUNCTION_CHARS


def is_box_char(char: str) -> bool:
    """Check if character could be part of a box drawing."""
    return char in BOX_CHARS


def is_border_or_corner(char: str) -> bool:
    """Check if character can close a line on the right."""
    return char in VERTICAL_CHARS or char in CORNER_CHARS


def detect_vertical_border(lines: Iterable[str]) -> str:
    """
    Detect the most common vertical border character in a set of lines.

    Ties go to the character seen first while scanning the lines in order.

    Args:
        lines: Lines to scan

    Returns:
        The dominant vertical border, or "|" if none appears
    """
    counts: Counter = Counter()
    for line in lines:
        counts.update(c for c in line if c in VERTICAL_CHARS)

    if not counts:
        return DEFAULT_VERTICAL

    # most_common keeps first-encountered order among equal counts
    return counts.most_common(1)[0][0]
