"""
Revision proposals for a diagram block.

A revision is a small edit to a single line that moves its right border
toward the block's target column. Revisions are proposed from an immutable
snapshot of the block, scored, filtered, and only then applied to the line
buffer.

Scoring and application each dispatch over the revision type in one place,
so adding a revision type means extending score_revision and apply_revision.
"""

from dataclasses import dataclass
from typing import List, MutableSequence, Optional, Sequence, Tuple, Union

from .analyzer import analyze_line, visual_width
from .chars import is_border_or_corner
from .models import AnalyzedLine, LineKind


@dataclass(frozen=True)
class PadBeforeSuffixBorder:
    """Insert spaces before an existing trailing border to push it right."""

    line_idx: int
    spaces_to_add: int
    target_column: int


@dataclass(frozen=True)
class AddSuffixBorder:
    """Append a missing border character at the target column."""

    line_idx: int
    border_char: str
    target_column: int


Revision = Union[PadBeforeSuffixBorder, AddSuffixBorder]


def analyze_block(
    lines: Sequence[str], start: int, end: int
) -> Tuple[AnalyzedLine, ...]:
    """Analyze lines[start:end] into a fresh snapshot."""
    return tuple(analyze_line(line) for line in lines[start:end])


def find_target_column(analyzed: Sequence[AnalyzedLine]) -> Optional[int]:
    """Return the rightmost suffix border column, or None without borders."""
    columns = [a.suffix_border.column for a in analyzed if a.suffix_border]
    return max(columns) if columns else None


def propose_revisions(
    analyzed: Sequence[AnalyzedLine],
    block_start: int,
    target_column: int,
    border_char: str,
) -> List[Revision]:
    """
    Generate revision candidates for a block snapshot.

    Lines whose border sits left of the target are padded; boxy lines with
    no border at all get one added.

    Args:
        analyzed: Snapshot of the block's lines
        block_start: Index of the block's first line in the buffer
        target_column: Column every border should reach
        border_char: Character to use for added borders

    Returns:
        Revisions in line order
    """
    revisions: List[Revision] = []

    for offset, line in enumerate(analyzed):
        line_idx = block_start + offset
        border = line.suffix_border

        if border is not None:
            if border.column < target_column:
                revisions.append(
                    PadBeforeSuffixBorder(
                        line_idx=line_idx,
                        spaces_to_add=target_column - border.column,
                        target_column=target_column,
                    )
                )
        elif line.kind.is_boxy:
            revisions.append(
                AddSuffixBorder(
                    line_idx=line_idx,
                    border_char=border_char,
                    target_column=target_column,
                )
            )

    return revisions


def _is_strong(analyzed: Sequence[AnalyzedLine], offset: int) -> bool:
    return analyzed[offset].kind == LineKind.STRONG


def score_revision(
    revision: Revision, analyzed: Sequence[AnalyzedLine], block_start: int
) -> float:
    """
    Score a revision (higher = more confident it's correct).

    Padding prefers small adjustments on strong lines. Adding a border is
    always less confident than padding an existing one.
    """
    if isinstance(revision, PadBeforeSuffixBorder):
        strong = _is_strong(analyzed, revision.line_idx - block_start)
        adjustment_penalty = min(0.5, revision.spaces_to_add / 10)
        return 0.8 - adjustment_penalty + (0.2 if strong else 0.0)

    if isinstance(revision, AddSuffixBorder):
        strong = _is_strong(analyzed, revision.line_idx - block_start)
        return 0.5 + (0.2 if strong else 0.1)

    raise TypeError(f"Unknown revision type: {type(revision).__name__}")


def apply_revision(revision: Revision, lines: MutableSequence[str]) -> None:
    """Apply a revision to the line buffer in place."""
    if isinstance(revision, PadBeforeSuffixBorder):
        trimmed = lines[revision.line_idx].rstrip()
        if trimmed and is_border_or_corner(trimmed[-1]):
            padding = " " * revision.spaces_to_add
            lines[revision.line_idx] = trimmed[:-1] + padding + trimmed[-1]
        return

    if isinstance(revision, AddSuffixBorder):
        trimmed = lines[revision.line_idx].rstrip()
        padding = max(0, revision.target_column - visual_width(trimmed))
        lines[revision.line_idx] = trimmed + " " * padding + revision.border_char
        return

    raise TypeError(f"Unknown revision type: {type(revision).__name__}")
