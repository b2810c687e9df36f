"""
Debug tracing infrastructure for aadc.

This module provides data structures for capturing detailed traces of the
correction loop. When a trace is handed to the corrector, it records every
pass over every block: the target column, the chosen border character, each
proposed revision with its score, and the block's lines after the pass.

This is primarily useful for:
1. Debugging corrections (understanding why a border moved where it did)
2. Tuning min_score (seeing which proposals were rejected and by how much)
3. Writing targeted tests (verifying specific revision decisions)

Usage:
    >>> trace = CorrectionTrace()
    >>> corrector = DiagramCorrector(trace=trace)
    >>> corrected, stats = corrector.correct_lines(lines)
    >>> print(trace.summary())
    >>> trace.dump_to_file("correction_trace.txt")
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .models import DiagramBlock
from .revisions import AddSuffixBorder, PadBeforeSuffixBorder, Revision


@dataclass
class RevisionRecord:
    """
    Record of a single scored revision proposal.

    Attributes:
        revision: The proposed revision
        score: Score it received
        applied: Whether it passed the score threshold and was applied
    """

    revision: Revision
    score: float
    applied: bool

    @property
    def kind(self) -> str:
        if isinstance(self.revision, PadBeforeSuffixBorder):
            return "pad"
        return "add"

    def __str__(self) -> str:
        rev = self.revision
        status = "applied" if self.applied else "rejected"
        if isinstance(rev, AddSuffixBorder):
            action = f"add '{rev.border_char}' at col {rev.target_column}"
        else:
            action = f"pad {rev.spaces_to_add} before border -> col {rev.target_column}"
        return f"line {rev.line_idx + 1}: {action} (score {self.score:.2f}, {status})"


@dataclass
class IterationRecord:
    """
    Snapshot of one correction pass over a block.

    Attributes:
        block_index: Index of the block in segmenter order
        iteration: Pass number within the block (0-based)
        target_column: Column borders were aligned to, None without borders
        border_char: Border character used for added borders
        revisions: Every proposal with its score and outcome
        snapshot: The block's lines after the pass
    """

    block_index: int
    iteration: int
    target_column: Optional[int]
    border_char: str = ""
    revisions: List[RevisionRecord] = field(default_factory=list)
    snapshot: List[str] = field(default_factory=list)

    @property
    def applied(self) -> List[RevisionRecord]:
        return [r for r in self.revisions if r.applied]

    def __str__(self) -> str:
        lines = [
            f"=== Block {self.block_index + 1}, iteration {self.iteration + 1} ==="
        ]
        if self.target_column is None:
            lines.append("  no suffix borders found")
        else:
            lines.append(f"  target column: {self.target_column}")
            lines.append(f"  border char: '{self.border_char}'")
        for record in self.revisions:
            lines.append(f"  {record}")
        if self.snapshot:
            lines.append("  Block after pass:")
            for row in self.snapshot:
                lines.append(f"    |{row}|")
        return "\n".join(lines)


@dataclass
class CorrectionTrace:
    """
    Complete trace of a correction run.

    Attributes:
        blocks: Blocks found by the segmenter
        iterations: Every recorded pass, in execution order
        input_lines: The tab-expanded input
    """

    blocks: List[DiagramBlock] = field(default_factory=list)
    iterations: List[IterationRecord] = field(default_factory=list)
    input_lines: List[str] = field(default_factory=list)

    def add_iteration(self, record: IterationRecord) -> None:
        self.iterations.append(record)

    def get_block_records(self, block_index: int) -> List[IterationRecord]:
        """Get all passes recorded for one block."""
        return [r for r in self.iterations if r.block_index == block_index]

    def get_applied(self) -> List[RevisionRecord]:
        return [rev for r in self.iterations for rev in r.revisions if rev.applied]

    def get_rejected(self) -> List[RevisionRecord]:
        """
        Get all proposals that scored below the threshold.

        Useful when tuning min_score: these are the edits that would have
        been made with a lower threshold.
        """
        return [
            rev for r in self.iterations for rev in r.revisions if not rev.applied
        ]

    def summary(self) -> str:
        """Generate a human-readable summary of the trace."""
        lines = [
            "=" * 60,
            "CORRECTION TRACE SUMMARY",
            "=" * 60,
            "",
            f"Input lines: {len(self.input_lines)}",
            f"Blocks found: {len(self.blocks)}",
        ]

        for i, block in enumerate(self.blocks):
            passes = self.get_block_records(i)
            lines.append(
                f"  [{i + 1}] lines {block.start + 1}-{block.end} "
                f"confidence {block.confidence:.2f}, {len(passes)} pass(es)"
            )

        lines.extend(
            [
                "",
                f"Revisions applied: {len(self.get_applied())}",
                f"Revisions rejected: {len(self.get_rejected())}",
                "",
            ]
        )

        kind_counts: Dict[str, int] = {}
        for record in self.get_applied():
            kind_counts[record.kind] = kind_counts.get(record.kind, 0) + 1

        lines.append("Applied by kind:")
        for kind, count in sorted(kind_counts.items(), key=lambda x: -x[1]):
            lines.append(f"  {kind}: {count}")

        return "\n".join(lines)

    def dump(self) -> str:
        """Generate a complete dump: the summary followed by every pass."""
        lines = [self.summary(), "", "=" * 60, "DETAILED TRACE", "=" * 60, ""]
        for record in self.iterations:
            lines.append(str(record))
            lines.append("")
        return "\n".join(lines)

    def dump_to_file(self, filename: str) -> None:
        """Write the complete trace dump to a file."""
        with open(filename, "w", encoding="utf-8") as f:
            f.write(self.dump())
