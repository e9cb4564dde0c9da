"""Health check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from subrip.core.config import Settings, get_settings
from subrip.schemas import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Annotated[Settings, Depends(get_settings)]):
    """Health check endpoint.

    The service has no external dependencies, so it reports ``running``
    whenever it can answer.

    Returns:
        HealthResponse: Service status and endpoint listing
    """
    endpoints = {
        "subtitles": [
            "POST /api/v1/subtitles/parse - Parse SRT content into structured entries",
            "POST /api/v1/subtitles/upload - Upload and parse an .srt file",
            "POST /api/v1/subtitles/shift - Shift timestamps so the first entry starts at a delay",
            "POST /api/v1/subtitles/format - Render structured entries as SRT",
        ],
        "health": [
            "GET /api/v1/health - Service health check",
        ],
    }

    return HealthResponse(
        service=settings.app_name,
        status="running",
        version=settings.app_version,
        authentication="enabled" if settings.api_key else "disabled",
        endpoints=endpoints,
    )
