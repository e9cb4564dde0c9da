"""Turn raw subtitle bytes into text.

SRT files carry no declared encoding. UTF-8 is tried first; anything that
is not valid UTF-8 is assumed to be a legacy single-byte Western European
file (Windows-1252 by default).
"""

import logging
from pathlib import Path

from subrip.core.config import settings

logger = logging.getLogger(__name__)


def decode_srt_bytes(data: bytes, fallback: str | None = None, source: str = "<bytes>") -> str:
    """Decode SRT bytes, falling back to a single-byte encoding.

    A UTF-8 byte-order mark is kept as U+FEFF; the parser skips it.

    Args:
        data: Raw file content
        fallback: Encoding used when UTF-8 fails (default: settings.fallback_encoding)
        source: Name used in log messages

    Returns:
        Decoded text
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        pass

    fallback = fallback or settings.fallback_encoding
    logger.info("%s is not valid UTF-8, decoding as %s", source, fallback)
    try:
        return data.decode(fallback)
    except UnicodeDecodeError:
        logger.warning(
            "Could not decode %s accurately with %s, undecodable bytes were replaced",
            source,
            fallback,
        )
        return data.decode(fallback, errors="replace")


def read_srt_file(path: str | Path, fallback: str | None = None) -> str:
    """Read and decode an SRT file."""
    path = Path(path)
    return decode_srt_bytes(path.read_bytes(), fallback=fallback, source=str(path))
