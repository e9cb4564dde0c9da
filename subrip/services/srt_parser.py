"""SRT parse driver.

Runs the grammar over a whole file and classifies the outcome:

- every character consumed: :class:`ParseSuccess`
- nothing parsed and junk left over: :class:`ParseFailure`
- some blocks parsed, then junk: :class:`ParsePartial`, which keeps the
  parsed blocks together with the position where the junk begins

Real-world files often end in credits, stray markers or encoding debris,
so a partial parse is something callers are expected to log and accept.
Parsed entries come back sorted by index, and timing problems are
reported as log warnings without failing the parse.
"""

from dataclasses import dataclass, field
import logging

from subrip.models.srt import Subtitle
from subrip.services.grammar import match_file

logger = logging.getLogger(__name__)


class SrtParseError(ValueError):
    """Raised when no subtitle block can be parsed from the input."""

    def __init__(self, message: str, offset: int = 0):
        super().__init__(message)
        self.offset = offset


class SrtParseIncomplete(SrtParseError):
    """Raised when parsing stopped before the end of the input.

    Carries everything parsed before the point of failure. Callers usually
    log ``leftover`` and carry on with ``entries``.
    """

    def __init__(self, entries: list[Subtitle], offset: int, leftover: str, byte_offset: int):
        super().__init__(f"Unparsed data at end of SRT content (offset {offset})", offset)
        self.entries = entries
        self.leftover = leftover
        self.byte_offset = byte_offset


@dataclass(frozen=True)
class ParseSuccess:
    """The whole input was parsed."""

    entries: list[Subtitle] = field(default_factory=list)


@dataclass(frozen=True)
class ParseFailure:
    """No block could be parsed; ``offset`` is where matching gave up."""

    offset: int
    message: str


@dataclass(frozen=True)
class ParsePartial:
    """A prefix of the input was parsed.

    ``offset`` indexes the original string (``content[offset:] == leftover``);
    ``byte_offset`` is the same position in the input's UTF-8 encoding.
    """

    entries: list[Subtitle]
    offset: int
    byte_offset: int
    leftover: str


ParseResult = ParseSuccess | ParseFailure | ParsePartial


def _warn_out_of_order(entries: list[Subtitle]) -> None:
    """Log entries whose timing runs backwards. Never raises."""
    previous_start = 0
    for entry in entries:
        if entry.start < previous_start or entry.end < entry.start:
            logger.warning(
                "Subtitle timestamps are not in order: previous_start=%dms index=%d "
                "start=%dms end=%dms",
                previous_start,
                entry.index,
                entry.start,
                entry.end,
            )
        previous_start = entry.start


def parse_srt_result(content: str) -> ParseResult:
    """Parse SRT content into a success, failure or partial outcome.

    Args:
        content: Decoded SRT file content

    Returns:
        ParseSuccess, ParseFailure or ParsePartial. Entries of successful and
        partial outcomes are stably sorted by index.
    """
    entries, offset = match_file(content)

    if offset < len(content) and not entries:
        logger.debug("No subtitle block found, stopped at offset %d", offset)
        return ParseFailure(
            offset=offset,
            message=f"Could not parse SRT content: no subtitle block at offset {offset}",
        )

    entries.sort(key=lambda entry: entry.index)
    _warn_out_of_order(entries)

    if offset < len(content):
        leftover = content[offset:]
        logger.warning("Unparsed data at end of SRT content: %r", leftover)
        return ParsePartial(
            entries=entries,
            offset=offset,
            byte_offset=len(content[:offset].encode("utf-8", "surrogatepass")),
            leftover=leftover,
        )

    return ParseSuccess(entries=entries)


def parse_srt(content: str) -> list[Subtitle]:
    """Parse SRT content into a list of subtitle entries.

    Args:
        content: Decoded SRT file content

    Returns:
        List of Subtitle objects sorted by index. Empty content gives an empty list.

    Raises:
        SrtParseIncomplete: If junk follows the parsed blocks; the exception
            carries the parsed entries and the offset of the junk
        SrtParseError: If no block could be parsed at all
    """
    result = parse_srt_result(content)
    if isinstance(result, ParseFailure):
        raise SrtParseError(result.message, result.offset)
    if isinstance(result, ParsePartial):
        raise SrtParseIncomplete(
            result.entries, result.offset, result.leftover, result.byte_offset
        )
    return result.entries
