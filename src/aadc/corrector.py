"""
Main correction module.

Combines tab expansion, block segmentation and the revision engine into the
iterative correction loop that aligns right-hand borders.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .analyzer import expand_tabs
from .chars import detect_vertical_border
from .console import NullReporter, ProgressReporter
from .files import join_lines, split_lines
from .models import BlockOutcome, CorrectionConfig, CorrectionStats, DiagramBlock
from .revisions import (
    Revision,
    analyze_block,
    apply_revision,
    find_target_column,
    propose_revisions,
    score_revision,
)
from .segmenter import find_diagram_blocks
from .tracer import CorrectionTrace, IterationRecord, RevisionRecord

logger = logging.getLogger(__name__)


class DiagramCorrector:
    """
    Fix misaligned right borders in ASCII diagrams.

    Example:
        >>> corrector = DiagramCorrector()
        >>> corrected, stats = corrector.correct_lines([
        ...     "+------+",
        ...     "| hi|",
        ...     "+------+",
        ... ])
        >>> corrected[1]
        '| hi   |'
    """

    def __init__(
        self,
        config: Optional[CorrectionConfig] = None,
        reporter: Optional[ProgressReporter] = None,
        trace: Optional[CorrectionTrace] = None,
    ):
        """
        Initialize the corrector.

        Args:
            config: Correction settings (defaults to CorrectionConfig())
            reporter: Receives progress messages when config.verbose is set
            trace: Optional trace that records every correction pass
        """
        self.config = config if config is not None else CorrectionConfig()
        self.reporter = reporter if reporter is not None else NullReporter()
        self.trace = trace

    def correct_lines(self, lines: Sequence[str]) -> Tuple[List[str], CorrectionStats]:
        """
        Correct every diagram block in a sequence of lines.

        The input is not modified; the corrector works on its own copy.

        Args:
            lines: Lines of text without trailing newlines

        Returns:
            Tuple of (corrected lines, statistics)
        """
        stats = CorrectionStats()
        buffer = [expand_tabs(line, self.config.tab_width) for line in lines]

        blocks = find_diagram_blocks(buffer, self.config.all_blocks)
        stats.blocks_found = len(blocks)
        logger.debug("Found %d diagram block(s) in %d lines", len(blocks), len(buffer))

        if self.trace is not None:
            self.trace.input_lines = list(buffer)
            self.trace.blocks = list(blocks)

        self._report(f"[bold cyan]Found {len(blocks)} diagram block(s)[/]")

        for i, block in enumerate(blocks):
            self._report(
                f"[yellow]  Block {i + 1}: lines {block.start + 1}-{block.end} "
                f"(confidence: {block.confidence * 100:.0f}%)[/]"
            )

            outcome = self.correct_block(buffer, block, i)
            if outcome.revisions > 0:
                stats.blocks_modified += 1
                stats.total_revisions += outcome.revisions
            stats.iterations += outcome.iterations

        return buffer, stats

    def correct_text(self, text: str) -> Tuple[str, CorrectionStats]:
        """Correct a whole text; lines are joined back with newlines."""
        corrected, stats = self.correct_lines(split_lines(text))
        return join_lines(corrected), stats

    def correct_block(
        self, lines: List[str], block: DiagramBlock, block_index: int = 0
    ) -> BlockOutcome:
        """
        Correct a single diagram block in place.

        Each pass analyzes the block afresh, aligns to the rightmost border
        seen in that snapshot, and applies every revision scoring at least
        config.min_score. The loop stops once no revision qualifies, when the
        block has no borders at all, or after config.max_iters passes.

        Args:
            lines: The full line buffer (modified in place)
            block: Block to correct
            block_index: Position of the block, used for tracing

        Returns:
            BlockOutcome with revision and pass counts
        """
        outcome = BlockOutcome()

        for iteration in range(self.config.max_iters):
            analyzed = analyze_block(lines, block.start, block.end)

            target = find_target_column(analyzed)
            if target is None:
                logger.debug("Block %d has no suffix borders", block_index + 1)
                self._record(block_index, iteration, lines, block)
                break

            border_char = detect_vertical_border(lines[block.start : block.end])
            proposals = propose_revisions(analyzed, block.start, target, border_char)
            scored = [
                (revision, score_revision(revision, analyzed, block.start))
                for revision in proposals
            ]
            valid = [rev for rev, score in scored if score >= self.config.min_score]

            if not valid:
                if iteration > 0:
                    self._report(
                        f"[dim]    Converged after {iteration} iteration(s)[/]"
                    )
                self._record(
                    block_index, iteration, lines, block, target, border_char, scored
                )
                break

            for revision in valid:
                apply_revision(revision, lines)

            outcome.revisions += len(valid)
            outcome.iterations += 1
            self._report(
                f"[dim]    Iteration {iteration + 1}: "
                f"applied {len(valid)} revision(s)[/]"
            )
            self._record(
                block_index, iteration, lines, block, target, border_char, scored
            )
        else:
            logger.debug(
                "Block %d stopped after %d iteration(s) without converging",
                block_index + 1,
                self.config.max_iters,
            )

        return outcome

    def _report(self, message: str) -> None:
        if self.config.verbose:
            self.reporter.print(message)

    def _record(
        self,
        block_index: int,
        iteration: int,
        lines: List[str],
        block: DiagramBlock,
        target: Optional[int] = None,
        border_char: str = "",
        scored: Sequence[Tuple[Revision, float]] = (),
    ) -> None:
        """Add a pass to the trace, if one is attached."""
        if self.trace is None:
            return
        min_score = self.config.min_score
        self.trace.add_iteration(
            IterationRecord(
                block_index=block_index,
                iteration=iteration,
                target_column=target,
                border_char=border_char,
                revisions=[
                    RevisionRecord(revision, score, score >= min_score)
                    for revision, score in scored
                ],
                snapshot=list(lines[block.start : block.end]),
            )
        )


def correct_lines(
    lines: Sequence[str],
    config: Optional[CorrectionConfig] = None,
    reporter: Optional[ProgressReporter] = None,
) -> Tuple[List[str], CorrectionStats]:
    """
    Convenience function to correct a sequence of lines.

    Args:
        lines: Lines of text without trailing newlines
        config: Correction settings
        reporter: Progress reporter used when config.verbose is set

    Returns:
        Tuple of (corrected lines, statistics)
    """
    return DiagramCorrector(config, reporter).correct_lines(lines)


def correct_block(
    lines: List[str],
    block: DiagramBlock,
    config: Optional[CorrectionConfig] = None,
    reporter: Optional[ProgressReporter] = None,
) -> int:
    """Correct one block of an already tab-expanded buffer; returns revisions."""
    return DiagramCorrector(config, reporter).correct_block(lines, block).revisions
