"""Exception handlers shared by every listings endpoint."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


def _error_response(status_code: int, detail: str, headers: Mapping[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail},
        headers=dict(headers) if headers else None,
    )


def _flatten_detail(detail: Any) -> str:
    """Collapse nested ``detail`` payloads into a single message."""
    if detail is None:
        return "An error occurred"
    if isinstance(detail, str):
        return detail
    if isinstance(detail, Mapping):
        nested = detail.get("detail")
        if isinstance(nested, str):
            return nested
        return "; ".join(f"{key}: {value}" for key, value in detail.items())
    if isinstance(detail, Iterable) and not isinstance(detail, (bytes, bytearray)):
        return "; ".join(_flatten_detail(item) for item in detail)
    return str(detail)


def _format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    messages = []
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        message = error.get("msg", "Invalid input")
        messages.append(f"{'.'.join(location)}: {message}" if location else message)
    return "; ".join(messages) if messages else "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """Attach handlers that answer every failure with ``{"detail": <message>}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(
                "%s %s failed with HTTP %s: %s",
                request.method,
                request.url.path,
                exc.status_code,
                exc.detail,
            )
        return _error_response(exc.status_code, _flatten_detail(exc.detail), exc.headers)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return _error_response(422, _format_validation_errors(exc.errors()))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception while processing %s %s", request.method, request.url
        )
        return _error_response(500, "Internal server error")


__all__ = ["register_exception_handlers"]
