"""Command line entry point: parse an .srt file and report what was found."""

import argparse
import json
import logging
import sys

from subrip.core.logging import get_logger
from subrip.schemas import SubtitleSchema
from subrip.services.decoding import read_srt_file
from subrip.services.srt_parser import ParseFailure, ParsePartial, parse_srt_result
from subrip.services.srt_utils import offset_subs, out_of_order_subs, sort_subtitles
from subrip.services.srt_writer import compose_srt

logger = get_logger("subrip.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="subrip",
        description="Parse a SubRip (.srt) file, report problems and print the entries.",
    )
    parser.add_argument("path", help="Path to the .srt file")
    parser.add_argument(
        "--shift",
        action="store_true",
        help="Move entries so the first one starts at --delay-ms, renumbering from 0",
    )
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=0,
        help="Start time of the first entry when --shift is used (default: 0)",
    )
    parser.add_argument(
        "--keep-indices",
        action="store_true",
        help="With --shift, keep the original indices instead of renumbering",
    )
    parser.add_argument("--json", action="store_true", help="Print entries as JSON")
    parser.add_argument("--crlf", action="store_true", help="Write SRT with \\r\\n line endings")
    parser.add_argument(
        "--encoding",
        default=None,
        help="Fallback encoding for files that are not UTF-8 (default: cp1252)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        content = read_srt_file(args.path, fallback=args.encoding)
    except (OSError, LookupError) as e:
        print(f"error: could not read {args.path}: {e}", file=sys.stderr)
        return 1

    result = parse_srt_result(content)
    logger.debug("Parsed %s: %s", args.path, type(result).__name__)
    if isinstance(result, ParseFailure):
        print(f"error: failure to parse {args.path}: {result.message}", file=sys.stderr)
        return 1
    if isinstance(result, ParsePartial):
        print(f"found unexpected text at end of file: {result.leftover!r}", file=sys.stderr)

    entries = list(result.entries)
    sort_subtitles(entries)
    for entry in out_of_order_subs(entries):
        print(f"found subtitle in the wrong order: {entry!r}", file=sys.stderr)

    if args.shift:
        try:
            entries = offset_subs(entries, args.delay_ms, renumber=not args.keep_indices)
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1

    if args.json:
        payload = [SubtitleSchema.from_subtitle(entry).model_dump() for entry in entries]
        sys.stdout.write(json.dumps(payload, ensure_ascii=False, indent=2) + "\n")
    else:
        sys.stdout.write(compose_srt(entries, "\r\n" if args.crlf else "\n"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
