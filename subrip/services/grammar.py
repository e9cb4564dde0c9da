"""Grammar for SubRip files.

A file is zero or more byte-order marks, zero or more blank lines, then
zero or more blocks::

    <index>                          digits, line ending
    <start> --> <end>                one or more spaces around the arrow,
                                     trailing spaces or tabs allowed
    <blank lines>                    optional
    <caption text lines>             optional, up to a blank line or EOF
    <blank lines>                    separator, optional

Lines end in ``\\n`` or ``\\r\\n`` and the two may be mixed. The final line
of the input needs no line ending. Every matcher takes ``(content, pos)``
and returns the parsed value with the position after it, or None on no
match. Nothing here recovers from a failed match; the parse driver decides
what a short match means.
"""

import re

from subrip.models.srt import Subtitle
from subrip.services.timestamps import U32_MAX, match_timestamp

BYTE_ORDER_MARK = "\ufeff"

_LINE_ENDING = re.compile(r"\r?\n")
_BLANK_LINE = re.compile(r"[ \t]*\r?\n|[ \t]+\Z")
_INDEX_LINE = re.compile(r"([0-9]+)(?:\r?\n)")
_ARROW = re.compile(r" +--> +")
_TRAILING_SPACE = re.compile(r"[ \t]*")
_TEXT_LINE = re.compile(r"([^\r\n]+)(?:\r?\n|\Z)")


def _line_end(content: str, pos: int) -> int | None:
    """Match a line ending, or the end of input."""
    if pos == len(content):
        return pos
    match = _LINE_ENDING.match(content, pos)
    return match.end() if match else None


def _blank_line(content: str, pos: int) -> int | None:
    match = _BLANK_LINE.match(content, pos)
    return match.end() if match else None


def skip_blank_lines(content: str, pos: int) -> int:
    """Consume zero or more blank (empty or whitespace-only) lines."""
    while True:
        end = _blank_line(content, pos)
        if end is None:
            return pos
        pos = end


def match_index(content: str, pos: int) -> tuple[int, int] | None:
    """Match an index line."""
    match = _INDEX_LINE.match(content, pos)
    if match is None:
        return None
    index = int(match.group(1))
    if index > U32_MAX:
        return None
    return index, match.end()


def match_timespan(content: str, pos: int) -> tuple[tuple[int, int], int] | None:
    """Match ``<start> --> <end>``, trailing spaces, then a line ending or end of input."""
    start = match_timestamp(content, pos)
    if start is None:
        return None
    start_ms, pos = start
    arrow = _ARROW.match(content, pos)
    if arrow is None:
        return None
    end = match_timestamp(content, arrow.end())
    if end is None:
        return None
    end_ms, pos = end
    pos = _line_end(content, _TRAILING_SPACE.match(content, pos).end())
    if pos is None:
        return None
    return (start_ms, end_ms), pos


def _starts_block(content: str, pos: int) -> bool:
    """Two-line lookahead: an index line directly followed by a timespan line."""
    index = match_index(content, pos)
    return index is not None and match_timespan(content, index[1]) is not None


def match_text(content: str, pos: int) -> tuple[str, int]:
    """Collect caption lines up to a blank line, the next block, or end of input.

    A line holding only spaces or tabs is kept as caption text unless the
    blank lines starting there run into the next block or end of input.
    Always succeeds; a caption may be empty. Line endings are normalized to ``\\n``.
    """
    lines = []
    while pos < len(content) and not _starts_block(content, pos):
        if _LINE_ENDING.match(content, pos) is not None:
            break
        if _blank_line(content, pos) is not None:
            after = skip_blank_lines(content, pos)
            if after == len(content) or _starts_block(content, after):
                break
        match = _TEXT_LINE.match(content, pos)
        if match is None:
            break
        lines.append(match.group(1))
        pos = match.end()
    return "\n".join(lines), pos


def match_block(content: str, pos: int) -> tuple[Subtitle, int] | None:
    """Match one subtitle block, including its trailing blank lines."""
    index = match_index(content, pos)
    if index is None:
        return None
    idx, pos = index
    timespan = match_timespan(content, pos)
    if timespan is None:
        return None
    (start, end), pos = timespan
    pos = skip_blank_lines(content, pos)
    text, pos = match_text(content, pos)
    pos = skip_blank_lines(content, pos)
    return Subtitle(index=idx, start=start, end=end, text=text), pos


def match_file(content: str) -> tuple[list[Subtitle], int]:
    """Match as many blocks as possible from the start of ``content``.

    Returns:
        The parsed blocks in file order and the position of the first
        character that was not consumed (``len(content)`` on a full match)
    """
    pos = 0
    while content.startswith(BYTE_ORDER_MARK, pos):
        pos += len(BYTE_ORDER_MARK)
    pos = skip_blank_lines(content, pos)

    entries = []
    while pos < len(content):
        block = match_block(content, pos)
        if block is None:
            break
        entry, pos = block
        entries.append(entry)
    return entries, pos
