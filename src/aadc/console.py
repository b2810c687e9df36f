"""
Progress reporting for the correction loop.

The corrector never prints directly. It is handed a reporter that accepts
messages written in rich console markup; the command line uses a rich
Console on stderr so corrected text on stdout stays clean.

Key Components:
- ProgressReporter: Protocol every reporter satisfies
- RichReporter: Renders messages through a rich Console
- NullReporter: Discards messages
- RecordingReporter: Keeps messages as plain text (useful in tests)
"""

from typing import List, Optional, Protocol

from rich.console import Console
from rich.text import Text


class ProgressReporter(Protocol):
    """Protocol for progress reporter objects."""

    def print(self, message: str) -> None:
        """Display a message written in rich markup."""
        ...


class RichReporter:
    """Reporter backed by a rich Console."""

    def __init__(self, console: Optional[Console] = None):
        """
        Initialize a RichReporter.

        Args:
            console: Console to print to (defaults to a stderr console)
        """
        self.console = console if console is not None else Console(stderr=True)

    def print(self, message: str) -> None:
        self.console.print(message, highlight=False)


class NullReporter:
    """Reporter that drops every message."""

    def print(self, message: str) -> None:
        pass


class RecordingReporter:
    """Reporter that records messages with markup stripped."""

    def __init__(self):
        self.messages: List[str] = []

    def print(self, message: str) -> None:
        self.messages.append(Text.from_markup(message).plain)
