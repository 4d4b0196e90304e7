"""Shared FastAPI middleware."""

from __future__ import annotations

from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response, JSONResponse

from app.core.config import get_settings


class MaxBodySizeMiddleware(BaseHTTPMiddleware):
    """Reject requests whose body exceeds MAX_REQUEST_BODY_BYTES with a 413."""

    async def dispatch(self, request: Request, call_next: Callable[[Request], Response]) -> Response:
        limit = get_settings().MAX_REQUEST_BODY_BYTES

        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit() and int(content_length) > limit:
            return JSONResponse({"detail": "Payload too large."}, status_code=413)

        # Chunked uploads carry no content-length; starlette caches the body for handlers.
        body = await request.body()
        if len(body) > limit:
            return JSONResponse({"detail": "Payload too large."}, status_code=413)

        return await call_next(request)
