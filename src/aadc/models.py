"""
Data models for diagram correction.

This module contains the enums and dataclasses passed between the analysis,
segmentation and revision stages. Analysis records are frozen: they describe
one snapshot of the line buffer and are rebuilt after every edit.

Classes:
    LineKind: How strongly a line looks like part of a box.
    SuffixBorder: The closing border character found at the end of a line.
    AnalyzedLine: Derived properties of a single line.
    DiagramBlock: A run of lines treated as one diagram.
    CorrectionConfig: Tunable settings for the correction loop.
    CorrectionStats: Summary of a correction run.
    BlockOutcome: Result of correcting a single block.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class LineKind(Enum):
    """Classification of a line's "boxiness"."""

    BLANK = "blank"  # Empty or whitespace-only
    NONE = "none"  # No box-drawing characters
    WEAK = "weak"  # Some box-drawing characters, weak pattern
    STRONG = "strong"  # Corners, enclosing borders, or dense box characters

    @property
    def is_boxy(self) -> bool:
        return self in (LineKind.WEAK, LineKind.STRONG)


@dataclass(frozen=True)
class SuffixBorder:
    """
    A right-side border detected at the end of a line.

    Attributes:
        column: Visual column of the border character.
        char: The border character itself.
        is_closing: Whether this closes the line rather than sitting mid-line.
            Both vertical borders and corners currently count as closing.
    """

    column: int
    char: str
    is_closing: bool = True


@dataclass(frozen=True)
class AnalyzedLine:
    """
    Snapshot of a single line's properties.

    Attributes:
        content: The line text at the time of analysis.
        kind: Classification of the line.
        visual_width: Width in columns (wide characters count double).
        indent: Number of leading whitespace characters.
        suffix_border: Trailing border, if the line is boxy and has one.
    """

    content: str
    kind: LineKind
    visual_width: int
    indent: int
    suffix_border: Optional[SuffixBorder] = None


@dataclass
class DiagramBlock:
    """
    A detected diagram block.

    Attributes:
        start: First line index (0-based, inclusive).
        end: Line index one past the last line (exclusive).
        confidence: How likely the block is a real diagram (0.0-1.0).
    """

    start: int
    end: int
    confidence: float = 0.0

    def __len__(self) -> int:
        return self.end - self.start

    def line_range(self) -> Iterator[int]:
        return iter(range(self.start, self.end))


@dataclass
class CorrectionConfig:
    """
    Runtime configuration for the correction loop.

    Attributes:
        max_iters: Maximum correction passes per block.
        min_score: Minimum score a revision needs to be applied (0.0-1.0).
        tab_width: Tab stop width used for tab expansion.
        all_blocks: Correct every block regardless of confidence.
        verbose: Report progress per block and per iteration.
    """

    max_iters: int = 10
    min_score: float = 0.5
    tab_width: int = 4
    all_blocks: bool = False
    verbose: bool = False

    def __post_init__(self):
        if self.max_iters < 1:
            raise ValueError("max_iters must be a positive integer")
        if not 0.0 <= self.min_score <= 1.0:
            raise ValueError("min_score must be between 0.0 and 1.0")
        if self.tab_width < 1:
            raise ValueError("tab_width must be a positive integer")

    @classmethod
    def from_args(cls, args) -> "CorrectionConfig":
        """Build a config from parsed command line arguments."""
        return cls(
            max_iters=args.max_iters,
            min_score=args.min_score,
            tab_width=args.tab_width,
            all_blocks=args.all,
            verbose=args.verbose,
        )


@dataclass
class CorrectionStats:
    """
    Statistics collected during correction.

    Attributes:
        blocks_found: Number of blocks returned by the segmenter.
        blocks_modified: Blocks that received at least one revision.
        total_revisions: Revisions applied across all blocks.
        iterations: Revision-applying passes across all blocks.
    """

    blocks_found: int = 0
    blocks_modified: int = 0
    total_revisions: int = 0
    iterations: int = 0


@dataclass
class BlockOutcome:
    """Revisions and revision-applying passes for one block."""

    revisions: int = 0
    iterations: int = 0
