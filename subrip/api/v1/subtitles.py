"""Subtitle parsing, shifting and formatting endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from subrip.core.config import Settings, get_settings
from subrip.schemas import (
    FormatRequest,
    FormatResponse,
    ParseRequest,
    ParseResponse,
    ShiftRequest,
    ShiftResponse,
    SubtitleSchema,
)
from subrip.services.decoding import decode_srt_bytes
from subrip.services.srt_parser import ParseFailure, ParsePartial, parse_srt_result
from subrip.services.srt_utils import offset_subs, out_of_order_subs
from subrip.services.srt_writer import compose_srt

router = APIRouter()
logger = logging.getLogger(__name__)


def _build_parse_response(content: str) -> ParseResponse:
    """Parse content and describe the outcome.

    Raises:
        HTTPException: 400 if no subtitle block could be parsed
    """
    result = parse_srt_result(content)
    if isinstance(result, ParseFailure):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid SRT format: {result.message}",
        )

    partial = isinstance(result, ParsePartial)
    return ParseResponse(
        entries=[SubtitleSchema.from_subtitle(entry) for entry in result.entries],
        entry_count=len(result.entries),
        complete=not partial,
        leftover_offset=result.offset if partial else None,
        leftover=result.leftover if partial else None,
        out_of_order=[entry.index for entry in out_of_order_subs(result.entries)],
    )


@router.post(
    "/parse",
    response_model=ParseResponse,
    status_code=status.HTTP_200_OK,
    summary="Parse SRT content",
    description=(
        "Parses SRT content into entries sorted by index. Trailing junk does not fail "
        "the request: the parsed entries are returned with the leftover text and its offset."
    ),
)
async def parse_subtitles(request: ParseRequest):
    """Parse SRT content.

    Args:
        request: Parse request with SRT content

    Returns:
        Parsed entries, completeness and ordering diagnostics

    Raises:
        HTTPException: 400 if the content holds no parseable block
    """
    return _build_parse_response(request.srt_content)


@router.post(
    "/upload",
    response_model=ParseResponse,
    status_code=status.HTTP_200_OK,
    summary="Upload and parse an SRT file",
)
async def upload_subtitles(
    settings: Annotated[Settings, Depends(get_settings)],
    file: UploadFile = File(..., description="SRT file to parse"),
):
    """Decode an uploaded SRT file (UTF-8, then the legacy fallback) and parse it.

    Raises:
        HTTPException: 413 if the file exceeds max_upload_size, 400 if unparseable
    """
    data = await file.read(settings.max_upload_size + 1)
    if len(data) > settings.max_upload_size:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File too large. Maximum size: {settings.max_upload_size} bytes",
        )

    content = decode_srt_bytes(data, source=file.filename or "upload")
    logger.info("Parsing uploaded file %s (%d bytes)", file.filename, len(data))
    return _build_parse_response(content)


@router.post(
    "/shift",
    response_model=ShiftResponse,
    status_code=status.HTTP_200_OK,
    summary="Shift subtitle timestamps",
    description="Moves all entries so that the first one starts at delay_ms",
)
async def shift_subtitles(request: ShiftRequest):
    """Shift SRT content so the first entry starts at ``delay_ms``.

    Partially parsed content is shifted using the entries that were parsed.

    Raises:
        HTTPException: 400 if the content is unparseable or the shift would go below zero
    """
    result = parse_srt_result(request.srt_content)
    if isinstance(result, ParseFailure):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid SRT format: {result.message}",
        )

    try:
        shifted = offset_subs(result.entries, request.delay_ms, renumber=request.renumber)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid shift: {str(e)}",
        )

    shift_ms = result.entries[0].start - request.delay_ms if result.entries else 0
    return ShiftResponse(
        shifted_srt=compose_srt(shifted),
        entry_count=len(shifted),
        shift_ms=shift_ms,
    )


@router.post(
    "/format",
    response_model=FormatResponse,
    status_code=status.HTTP_200_OK,
    summary="Render entries as SRT",
)
async def format_subtitles(request: FormatRequest):
    """Render structured entries as canonical SRT text, in the order given."""
    entries = [schema.to_subtitle() for schema in request.entries]
    return FormatResponse(
        srt_content=compose_srt(entries, "\r\n" if request.crlf else "\n"),
        entry_count=len(entries),
    )
