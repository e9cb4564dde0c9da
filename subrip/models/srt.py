"""SRT subtitle record model."""

import dataclasses
from dataclasses import dataclass


@dataclass(frozen=True)
class Subtitle:
    """A single subtitle record with timing and text.

    ``start`` and ``end`` are millisecond offsets from the beginning of the
    media. ``index`` is whatever number the file carried; it is expected to
    increase through a file but nothing enforces that, and neither
    ``start <= end`` nor increasing start times are checked here. Use
    :func:`subrip.services.srt_utils.out_of_order_subs` to find violations.

    ``text`` uses ``\\n`` line endings and may contain markup tags such as
    ``<i>...</i>``, which are kept verbatim.
    """

    index: int
    start: int
    end: int
    text: str

    def replace(self, **changes) -> "Subtitle":
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)
