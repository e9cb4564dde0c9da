"""Render subtitles back to SRT text."""

from collections.abc import Iterable

from subrip.models.srt import Subtitle
from subrip.services.timestamps import format_timestamp


def format_subtitle(entry: Subtitle, line_ending: str = "\n") -> str:
    """Render one subtitle as an SRT block.

    The block is the index, the ``start --> end`` line, the caption text and
    a trailing blank line, with zero-padded timestamps so that the output
    parses back to the same entry.

    Args:
        entry: Subtitle to render
        line_ending: ``"\\n"`` or ``"\\r\\n"``

    Returns:
        SRT block text
    """
    if line_ending not in ("\n", "\r\n"):
        raise ValueError(f"Unsupported line ending: {line_ending!r}")

    timespan = f"{format_timestamp(entry.start)} --> {format_timestamp(entry.end)}"
    text = entry.text.replace("\n", line_ending)
    return line_ending.join([str(entry.index), timespan, text, "", ""])


def compose_srt(entries: Iterable[Subtitle], line_ending: str = "\n") -> str:
    """Reconstruct SRT file content from entries, in the order given."""
    return "".join(format_subtitle(entry, line_ending) for entry in entries)
