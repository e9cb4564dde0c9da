"""Pytest configuration and fixtures."""

from unittest.mock import patch

from fastapi.testclient import TestClient
import pytest

from subrip.main import create_app
from subrip.models.srt import Subtitle

# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def client():
    """Create test client without authentication."""
    with patch("subrip.core.security.settings") as mock_settings:
        mock_settings.api_key = None
        app = create_app()
        yield TestClient(app)


@pytest.fixture
def client_with_auth():
    """Client with API key configured (no default headers)."""
    with patch("subrip.core.security.settings") as mock_settings:
        mock_settings.api_key = "test_secret_key_12345"
        app = create_app()
        yield TestClient(app)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def sample_srt():
    """Sample SRT content for testing."""
    return """1
00:00:01,000 --> 00:00:04,000
Hello world

2
00:00:05,000 --> 00:00:08,000
How are you?"""


@pytest.fixture
def family_subtitles():
    """Three well-ordered entries with markup and multi-line text."""
    return [
        Subtitle(
            1,
            2002,
            5403,
            "<i>Now the story of a wealthy family</i>\n<i>who lost everything...</i>",
        ),
        Subtitle(2, 5505, 7496, "<i>and the one son</i>\n<i>who had no choice...</i>"),
        Subtitle(3, 7607, 9598, "<i>but to keep them all together.</i>"),
    ]


def build_srt(blocks, line_ending="\n", blank_after_timespan=False, final_separator=True):
    """Build SRT text from ``(index, timespan, lines)`` tuples.

    Args:
        blocks: Sequence of (index, raw timespan line, list of text lines)
        line_ending: "\\n" or "\\r\\n"
        blank_after_timespan: Insert an empty line between timespan and text
        final_separator: End the last block with a blank line

    Returns:
        SRT content string
    """
    parts = []
    for position, (index, timespan, lines) in enumerate(blocks):
        block = [str(index), timespan]
        if blank_after_timespan:
            block.append("")
        block.extend(lines)
        text = line_ending.join(block) + line_ending
        is_last = position == len(blocks) - 1
        if not is_last or final_separator:
            text += line_ending
        parts.append(text)
    return "".join(parts)


FAMILY_BLOCKS = [
    (
        1,
        "00:00:02,002 --> 00:00:05,403",
        ["<i>Now the story of a wealthy family</i>", "<i>who lost everything...</i>"],
    ),
    (2, "00:00:05,505 --> 00:00:07,496", ["<i>and the one son</i>", "<i>who had no choice...</i>"]),
    (3, "00:00:07,607 --> 00:00:09,598", ["<i>but to keep them all together.</i>"]),
]
