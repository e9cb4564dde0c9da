"""Security and authentication middleware."""

import logging
import secrets

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from subrip.core.config import settings

logger = logging.getLogger(__name__)

# Paths reachable without an API key
PUBLIC_PATHS = frozenset({"/", "/health", "/docs", "/openapi.json", "/redoc"})


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Require a matching X-API-Key header when API_KEY is configured."""

    async def dispatch(self, request: Request, call_next):
        """Validate API key for protected endpoints."""
        if request.url.path in PUBLIC_PATHS or not settings.api_key:
            return await call_next(request)

        api_key = request.headers.get("X-API-Key")
        if not api_key:
            logger.info("Rejected %s %s: missing API key", request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={
                    "detail": "Missing X-API-Key header. Please provide API key for authentication."
                },
            )

        if not secrets.compare_digest(api_key, settings.api_key):
            logger.info("Rejected %s %s: invalid API key", request.method, request.url.path)
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Invalid API key. Please check your X-API-Key header."},
            )

        return await call_next(request)
