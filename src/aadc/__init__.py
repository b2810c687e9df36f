"""
aadc - ASCII Art Diagram Corrector

A Python library for fixing misaligned right-hand borders in ASCII and Unicode
box diagrams embedded in plain text.

Example:
    >>> from aadc import DiagramCorrector
    >>> corrector = DiagramCorrector()
    >>> corrected, stats = corrector.correct_lines([
    ...     "+--------+",
    ...     "| short|",
    ...     "+--------+",
    ... ])
    >>> print("\\n".join(corrected))
    +--------+
    | short  |
    +--------+

Debug Mode Example:
    >>> trace = CorrectionTrace()
    >>> corrector = DiagramCorrector(trace=trace)
    >>> corrected, stats = corrector.correct_lines(lines)
    >>> print(trace.summary())
"""

__version__ = "0.3.0"

from .analyzer import (
    analyze_line,
    classify_line,
    detect_suffix_border,
    expand_tabs,
    visual_width,
)
from .chars import (
    detect_vertical_border,
    is_box_char,
    is_corner,
    is_horizontal_fill,
    is_junction,
    is_vertical_border,
)
from .console import NullReporter, ProgressReporter, RecordingReporter, RichReporter
from .corrector import DiagramCorrector, correct_block, correct_lines
from .debug import BlockInspector, visual_diff
from .files import AadcError, InputReadError, OutputWriteError, UsageError
from .models import (
    AnalyzedLine,
    BlockOutcome,
    CorrectionConfig,
    CorrectionStats,
    DiagramBlock,
    LineKind,
    SuffixBorder,
)
from .revisions import AddSuffixBorder, PadBeforeSuffixBorder, Revision
from .segmenter import BlockSegmenter, find_diagram_blocks
from .tracer import CorrectionTrace, IterationRecord, RevisionRecord

__all__ = [
    # Main API
    "DiagramCorrector",
    "correct_lines",
    "correct_block",
    "CorrectionConfig",
    "CorrectionStats",
    "BlockOutcome",
    # Characters
    "is_corner",
    "is_horizontal_fill",
    "is_vertical_border",
    "is_junction",
    "is_box_char",
    "detect_vertical_border",
    # Analysis
    "LineKind",
    "AnalyzedLine",
    "SuffixBorder",
    "analyze_line",
    "classify_line",
    "detect_suffix_border",
    "expand_tabs",
    "visual_width",
    # Segmentation
    "BlockSegmenter",
    "DiagramBlock",
    "find_diagram_blocks",
    # Revisions
    "Revision",
    "PadBeforeSuffixBorder",
    "AddSuffixBorder",
    # Progress reporting
    "ProgressReporter",
    "RichReporter",
    "NullReporter",
    "RecordingReporter",
    # Errors
    "AadcError",
    "InputReadError",
    "OutputWriteError",
    "UsageError",
    # Debug/Tracing (for development and debugging)
    "CorrectionTrace",
    "IterationRecord",
    "RevisionRecord",
    "BlockInspector",
    "visual_diff",
]
