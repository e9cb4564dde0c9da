"""Pydantic schemas for subtitle interchange and the subtitles API."""

from pydantic import BaseModel, ConfigDict, Field

from subrip.models.srt import Subtitle
from subrip.services.timestamps import U32_MAX


class SubtitleSchema(BaseModel):
    """Structured form of a subtitle record, independent of SRT text."""

    model_config = ConfigDict(from_attributes=True)

    index: int = Field(..., ge=0, le=U32_MAX, description="Index carried by the SRT block")
    start: int = Field(..., ge=0, description="Start time in milliseconds")
    end: int = Field(..., ge=0, description="End time in milliseconds")
    text: str = Field("", description="Caption text with \\n line endings")

    @classmethod
    def from_subtitle(cls, entry: Subtitle) -> "SubtitleSchema":
        return cls.model_validate(entry)

    def to_subtitle(self) -> Subtitle:
        return Subtitle(
            index=self.index,
            start=self.start,
            end=self.end,
            text=self.text.replace("\r\n", "\n"),
        )


class ParseRequest(BaseModel):
    """Request model for the parse endpoint."""

    srt_content: str = Field(..., description="SRT subtitle file content to parse")


class ParseResponse(BaseModel):
    """Response model for parse and upload endpoints."""

    entries: list[SubtitleSchema] = Field(..., description="Parsed entries sorted by index")
    entry_count: int = Field(..., description="Number of parsed entries")
    complete: bool = Field(..., description="False when unparsed data followed the entries")
    leftover_offset: int | None = Field(
        None, description="Character offset of the unparsed data, if any"
    )
    leftover: str | None = Field(None, description="Unparsed data at the end of the content")
    out_of_order: list[int] = Field(
        default_factory=list,
        description="Indices of entries starting before their predecessor or ending before they start",
    )


class ShiftRequest(BaseModel):
    """Request model for the shift endpoint."""

    srt_content: str = Field(..., description="SRT subtitle file content to shift")
    delay_ms: int = Field(0, ge=0, description="Start time of the first entry after shifting")
    renumber: bool = Field(True, description="Replace indices with zero-based positions")


class ShiftResponse(BaseModel):
    """Response model for the shift endpoint."""

    shifted_srt: str = Field(..., description="Shifted SRT content")
    entry_count: int = Field(..., description="Number of shifted entries")
    shift_ms: int = Field(..., description="Milliseconds subtracted from every timestamp")


class FormatRequest(BaseModel):
    """Request model for the format endpoint."""

    entries: list[SubtitleSchema] = Field(..., description="Entries to render, in output order")
    crlf: bool = Field(False, description="Use \\r\\n line endings")


class FormatResponse(BaseModel):
    """Response model for the format endpoint."""

    srt_content: str = Field(..., description="Canonical SRT content")
    entry_count: int = Field(..., description="Number of rendered entries")


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    service: str
    status: str
    version: str
    authentication: str
    endpoints: dict[str, list[str]] = Field(default_factory=dict)
