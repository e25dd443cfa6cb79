"""
Global exception handlers.

Domain errors raised by the store, the relation resolver or the
services carry their own HTTP status and are turned into JSON bodies
of the form ``{"detail": ..., "code": ...}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from event_hub_api.app.core.errors import EventHubError


logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register the domain error handler on ``app``."""

    @app.exception_handler(EventHubError)
    async def event_hub_error_handler(request: Request, exc: EventHubError) -> JSONResponse:
        logger.warning(
            "%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message,
            extra={"error_code": exc.code, "method": request.method, "path": request.url.path},
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())
