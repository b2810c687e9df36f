"""
Reading and writing the text being corrected.

Input comes from a named file or from stdin; output goes back to the same
file or to stdout. Failures are raised as AadcError subclasses carrying the
offending path, and are only caught at the command line boundary.
"""

import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO, Union

PathLike = Union[str, Path]


class AadcError(Exception):
    """Base class for errors reported by aadc."""

    pass


class InputReadError(AadcError):
    """Raised when the input file cannot be read or decoded."""

    def __init__(self, path: PathLike):
        self.path = Path(path)
        super().__init__(f"Failed to read input file: {path}")


class OutputWriteError(AadcError):
    """Raised when the corrected text cannot be written back."""

    def __init__(self, path: PathLike):
        self.path = Path(path)
        super().__init__(f"Failed to write to file: {path}")


class UsageError(AadcError):
    """Raised for option combinations that cannot work together."""

    pass


def split_lines(text: str) -> List[str]:
    """
    Split text into lines without line terminators.

    Only "\\n" separates lines; a "\\r" before it is dropped. A final newline
    does not produce an extra empty line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def join_lines(lines: Sequence[str]) -> str:
    """Join lines with newlines, without a trailing newline."""
    return "\n".join(lines)


def read_lines(
    path: Optional[PathLike] = None, stream: Optional[TextIO] = None
) -> List[str]:
    """
    Read lines from a file, or from a stream when no path is given.

    Args:
        path: File to read (UTF-8)
        stream: Stream to read when path is None (defaults to stdin)

    Returns:
        List of lines without terminators

    Raises:
        InputReadError: If the file cannot be read or is not valid UTF-8
    """
    if path is None:
        source = stream if stream is not None else sys.stdin
        return split_lines(source.read())

    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(path) from exc

    return split_lines(text)


def write_lines(path: PathLike, lines: Sequence[str]) -> None:
    """
    Write lines back to a file, joined by newlines.

    Raises:
        OutputWriteError: If the file cannot be written
    """
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(join_lines(lines))
    except OSError as exc:
        raise OutputWriteError(path) from exc


def write_stream(lines: Sequence[str], stream: Optional[TextIO] = None) -> None:
    """Write each line followed by a newline (defaults to stdout)."""
    out = stream if stream is not None else sys.stdout
    for line in lines:
        out.write(line + "\n")
