"""Uniform error envelope and exception handlers."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from skilifts.core.exceptions import ErrorKind, SkiLiftsError

logger = logging.getLogger(__name__)


def error_body(message: str, code: str, status_code: int,
               details: list[dict[str, Any]] | None = None) -> dict[str, Any]:
    error: dict[str, Any] = {"message": message, "code": code, "statusCode": status_code}
    if details is not None:
        error["details"] = details
    return {"error": error}


async def handle_skilifts_error(request: Request, exc: SkiLiftsError) -> JSONResponse:
    if exc.kind is ErrorKind.STORAGE:
        logger.error("%s %s: %s", request.method, request.url.path, exc.message, exc_info=exc.cause)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.code, exc.status_code),
    )


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"field": ".".join(str(part) for part in err.get("loc", ())), "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    status_code = ErrorKind.VALIDATION.status_code
    return JSONResponse(
        status_code=status_code,
        content=error_body("Validation failed", ErrorKind.VALIDATION.value, status_code, details),
    )


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = ErrorKind.NOT_FOUND.value if exc.status_code == 404 else "HTTP_ERROR"
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail), code, exc.status_code),
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content=error_body("Internal server error", "INTERNAL_ERROR", 500),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SkiLiftsError, handle_skilifts_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
