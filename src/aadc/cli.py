"""
Command line interface for aadc.

Reads a file (or stdin), corrects its diagrams and writes the result to
stdout or back to the file with --in-place.
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.markup import escape

from . import __version__
from .console import ProgressReporter, RichReporter
from .corrector import DiagramCorrector
from .debug import visual_diff
from .files import (
    AadcError,
    OutputWriteError,
    UsageError,
    join_lines,
    read_lines,
    write_lines,
    write_stream,
)
from .models import CorrectionConfig
from .tracer import CorrectionTrace

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aadc",
        description="ASCII Art Diagram Corrector: fixes misaligned right borders "
        "in ASCII diagrams",
        epilog="Example: %(prog)s --in-place notes.md",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "input",
        nargs="?",
        metavar="FILE",
        help="Input file (reads from stdin if not provided)",
    )
    parser.add_argument(
        "-i", "--in-place", action="store_true", help="Edit the file in place"
    )
    parser.add_argument(
        "-m",
        "--max-iters",
        type=int,
        default=10,
        help="Maximum iterations for correction loop (default: 10)",
    )
    parser.add_argument(
        "-s",
        "--min-score",
        type=float,
        default=0.5,
        help="Minimum score threshold for applying revisions, 0.0-1.0 "
        "(default: 0.5)",
    )
    parser.add_argument(
        "-t",
        "--tab-width",
        type=int,
        default=4,
        help="Tab width for expansion (default: 4)",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Process all diagram-like blocks, not just confident ones",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output showing correction progress",
    )
    parser.add_argument(
        "-d",
        "--diff",
        action="store_true",
        help="Show a visual diff of the changed lines on stderr",
    )
    parser.add_argument(
        "--trace",
        metavar="TRACE_FILE",
        help="Write a detailed correction trace to TRACE_FILE",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def run(
    args: argparse.Namespace, config: CorrectionConfig, reporter: ProgressReporter
) -> None:
    """
    Correct the input named by args and write the result.

    Raises:
        UsageError: If --in-place is given without an input file
        InputReadError: If the input file cannot be read
        OutputWriteError: If the file or trace cannot be written
    """
    if args.in_place and args.input is None:
        raise UsageError("--in-place requires an input file")

    lines = read_lines(args.input)

    if config.verbose:
        reporter.print(f"[bold]Processing {len(lines)} lines...[/]")

    trace = CorrectionTrace() if args.trace else None
    corrector = DiagramCorrector(config, reporter, trace)
    corrected, stats = corrector.correct_lines(lines)

    # Dump the trace before any output is written
    if trace is not None:
        try:
            trace.dump_to_file(args.trace)
        except OSError as exc:
            raise OutputWriteError(args.trace) from exc
        logger.info("Trace written to %s", args.trace)

    if args.diff:
        reporter.print(escape(visual_diff(join_lines(lines), join_lines(corrected))))

    if args.in_place:
        write_lines(args.input, corrected)
        logger.info("Fixed: %s", args.input)
        if config.verbose:
            reporter.print(
                f"[bold green]Modified {stats.blocks_modified} block(s), "
                f"{stats.total_revisions} revision(s) applied[/]"
            )
    else:
        write_stream(corrected)
        if config.verbose:
            reporter.print(
                f"[bold green]Processed {stats.blocks_found} block(s), "
                f"{stats.total_revisions} revision(s) applied[/]"
            )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code (0 for success, 1 for I/O errors, 2 for usage errors)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = CorrectionConfig.from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        run(args, config, RichReporter())
    except UsageError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except AadcError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
