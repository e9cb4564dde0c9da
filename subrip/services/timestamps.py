"""Conversion between SRT timestamps (``HH:MM:SS,mmm``) and milliseconds."""

import re

U32_MAX = 2**32 - 1

# Fields are one or more digits; fixed width is only required on output.
TIMESTAMP_PATTERN = re.compile(r"([0-9]+):([0-9]+):([0-9]+),([0-9]+)")


class TimestampError(ValueError):
    """Raised for a timestamp token or duration that cannot be converted."""


def _to_millis(hours: int, minutes: int, seconds: int, millis: int) -> int:
    return ((hours * 60 + minutes) * 60 + seconds) * 1000 + millis


def match_timestamp(content: str, pos: int = 0) -> tuple[int, int] | None:
    """Match a timestamp token at ``pos``.

    Returns:
        ``(milliseconds, end_position)``, or None when no timestamp starts at
        ``pos`` or a field does not fit an unsigned 32-bit integer
    """
    match = TIMESTAMP_PATTERN.match(content, pos)
    if match is None:
        return None
    fields = [int(group) for group in match.groups()]
    if any(field > U32_MAX for field in fields):
        return None
    return _to_millis(*fields), match.end()


def parse_timestamp(value: str) -> int:
    """Convert an SRT timestamp to milliseconds.

    Args:
        value: Timestamp such as ``"01:02:03,004"`` or ``"1:2:3,4"``

    Returns:
        Total milliseconds

    Raises:
        TimestampError: If a field is missing or non-numeric, or a separator is absent
    """
    result = match_timestamp(value)
    if result is None or result[1] != len(value):
        raise TimestampError(f"Invalid SRT timestamp: {value!r}")
    return result[0]


def format_timestamp(ms: int) -> str:
    """Convert milliseconds to the zero-padded SRT timestamp format."""
    if ms < 0:
        raise TimestampError(f"Cannot format negative duration: {ms}ms")
    seconds, milliseconds = divmod(ms, 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{milliseconds:03d}"
