"""Parse, validate and write SubRip (.srt) subtitle files."""

from subrip.models.srt import Subtitle
from subrip.services.srt_parser import (
    ParseFailure,
    ParsePartial,
    ParseResult,
    ParseSuccess,
    SrtParseError,
    SrtParseIncomplete,
    parse_srt,
    parse_srt_result,
)
from subrip.services.srt_utils import offset_subs, out_of_order_subs, sort_subtitles
from subrip.services.srt_writer import compose_srt, format_subtitle
from subrip.services.timestamps import TimestampError, format_timestamp, parse_timestamp

__all__ = [
    "Subtitle",
    "ParseSuccess",
    "ParseFailure",
    "ParsePartial",
    "ParseResult",
    "SrtParseError",
    "SrtParseIncomplete",
    "parse_srt",
    "parse_srt_result",
    "sort_subtitles",
    "out_of_order_subs",
    "offset_subs",
    "format_subtitle",
    "compose_srt",
    "TimestampError",
    "format_timestamp",
    "parse_timestamp",
]
