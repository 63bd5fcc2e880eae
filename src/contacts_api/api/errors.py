"""Translate domain errors into JSON responses."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, TypeVar

import pydantic
import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..exceptions import AppError, ValidationError

logger = structlog.get_logger(__name__)

ModelT = TypeVar("ModelT", bound=pydantic.BaseModel)


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> dict[str, list[str]]:
    """Group pydantic error entries by field name."""

    grouped: dict[str, list[str]] = {}
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(location) or "body"
        grouped.setdefault(field, []).append(str(error.get("msg", "Invalid value.")))
    return grouped


def parse_payload(model: type[ModelT], payload: Any) -> ModelT:
    """Validate a raw request body against ``model``.

    Raises :class:`ValidationError` with field keyed messages so that handlers
    can validate after their own authorisation checks.
    """

    try:
        return model.model_validate(payload if payload is not None else {})
    except pydantic.ValidationError as exc:
        raise ValidationError(format_validation_errors(exc.errors())) from None


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Convert :class:`AppError` exceptions into JSON payloads."""

    if isinstance(exc, ValidationError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.message, "errors": exc.errors},
        )
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("request.failed", path=request.url.path, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return await app_error_handler(request, ValidationError(format_validation_errors(exc.errors())))


async def http_error_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Give routing errors (404, 405) the same ``message`` body as domain errors."""

    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=dict(exc.headers or {}),
    )


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)


__all__ = [
    "app_error_handler",
    "format_validation_errors",
    "http_error_handler",
    "install_error_handlers",
    "parse_payload",
    "request_validation_error_handler",
]
