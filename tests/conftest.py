"""Pytest configuration and shared fixtures for aadc tests."""

import pytest

from aadc import CorrectionConfig, DiagramCorrector, RecordingReporter


@pytest.fixture
def simple_box_lines():
    """A well-formed box surrounded by prose."""
    return [
        "Some text",
        "+---+",
        "| x |",
        "+---+",
        "More text",
    ]


@pytest.fixture
def misaligned_box_lines():
    """Box whose middle lines disagree about the right border."""
    return [
        "+------+",
        "| short|",
        "| longer |",
        "+------+",
    ]


@pytest.fixture
def unicode_box_lines():
    """Unicode box with one short line."""
    return [
        "┌──────────┐",
        "│ one   │",
        "│ two      │",
        "└──────────┘",
    ]


@pytest.fixture
def missing_border_lines():
    """Box with a line that lost its right border and runs long."""
    return [
        "+-----+",
        "| long tx",
        "| a |",
    ]


@pytest.fixture
def config():
    """Default CorrectionConfig instance."""
    return CorrectionConfig()


@pytest.fixture
def corrector():
    """Default DiagramCorrector instance."""
    return DiagramCorrector()


@pytest.fixture
def reporter():
    """Reporter that records progress messages."""
    return RecordingReporter()
