"""
Error handlers — map failures to the JSON response envelope.

- KnownError → its own status code and FailureDetail
- Exception (catch-all) → 500 with the exception type only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from facetforge.models.failure import ApiResponse, KnownError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(KnownError)
    async def known_error_handler(request: Request, exc: KnownError) -> JSONResponse:
        logger.error(
            "known_error",
            extra={"kind": exc.kind.value, "path": request.url.path, "detail": exc.detail},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_response().model_dump(mode="json"),
        )

    @app.exception_handler(Exception)
    async def unknown_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "unhandled_exception",
            extra={"path": request.url.path},
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ApiResponse.unknown_failure(detail=type(exc).__name__).model_dump(mode="json"),
        )
