"""Helpers for working with an already parsed list of subtitles."""

from collections.abc import Iterable, Iterator

from subrip.models.srt import Subtitle


def sort_subtitles(entries: list[Subtitle]) -> None:
    """Sort entries by index in place. Entries with equal indices keep their order."""
    entries.sort(key=lambda entry: entry.index)


def out_of_order_subs(entries: Iterable[Subtitle]) -> Iterator[Subtitle]:
    """Yield entries that start before their predecessor or end before they start.

    Entries are checked in the order given, without re-sorting. Most callers
    do not need this; the format is routinely used with overlapping or
    shuffled timings, so these are reported rather than rejected.
    """
    previous_start = 0
    for entry in entries:
        if entry.start < previous_start or entry.end < entry.start:
            yield entry
        previous_start = entry.start


def offset_subs(
    entries: list[Subtitle], delay: int | None = None, *, renumber: bool = True
) -> list[Subtitle]:
    """Shift timestamps so the first entry starts at ``delay`` milliseconds.

    Useful when cutting a segment out of a video: the relevant subtitles can
    be moved to the beginning of the clip.

    Args:
        entries: Subtitles to shift; the first entry sets the shift amount
        delay: Where the first entry should start (default: 0)
        renumber: Replace each index with its zero-based position

    Returns:
        New list of shifted subtitles

    Raises:
        ValueError: If ``delay`` is negative or the shift would move any
            timestamp before zero
    """
    if not entries:
        return []

    delay = delay or 0
    if delay < 0:
        raise ValueError(f"Delay must not be negative, got {delay}ms")

    shift = entries[0].start - delay
    if shift < 0:
        raise ValueError(
            f"Delay of {delay}ms exceeds first subtitle start of {entries[0].start}ms"
        )

    shifted = []
    for position, entry in enumerate(entries):
        if min(entry.start, entry.end) < shift:
            raise ValueError(
                f"Subtitle {entry.index} ({entry.start}ms-{entry.end}ms) would start "
                f"before zero when shifted by {shift}ms"
            )
        shifted.append(
            entry.replace(
                index=position if renumber else entry.index,
                start=entry.start - shift,
                end=entry.end - shift,
            )
        )
    return shifted
