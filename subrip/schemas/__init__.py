"""Pydantic schemas for API request/response validation and record interchange."""

from subrip.schemas.subtitle import (
    FormatRequest,
    FormatResponse,
    HealthResponse,
    ParseRequest,
    ParseResponse,
    ShiftRequest,
    ShiftResponse,
    SubtitleSchema,
)

__all__ = [
    "SubtitleSchema",
    "ParseRequest",
    "ParseResponse",
    "ShiftRequest",
    "ShiftResponse",
    "FormatRequest",
    "FormatResponse",
    "HealthResponse",
]
