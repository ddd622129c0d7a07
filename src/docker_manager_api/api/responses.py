"""Единый конверт ответов и обработчики ошибок.

Любое JSON-тело имеет вид {"message": str, "data": ...}. Для ошибок
data = {"error": <ErrorKind>}, а message содержит исходный текст движка.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from docker_manager_api.docker_api.exceptions import DockerAPIError, ErrorKind

LOGGER = logging.getLogger(__name__)

STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.ENGINE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorKind.UNKNOWN: status.HTTP_500_INTERNAL_SERVER_ERROR,
}
KIND_BY_STATUS: Dict[int, ErrorKind] = {code: kind for kind, code in STATUS_BY_KIND.items()}


def envelope(message: str, data: Any = None) -> Dict[str, Any]:
    return {"message": message, "data": data}


def error_response(kind: ErrorKind, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=STATUS_BY_KIND[kind],
        content=envelope(message, {"error": kind.value}),
    )


async def docker_api_error_handler(request: Request, exc: DockerAPIError) -> JSONResponse:
    return error_response(exc.kind, exc.message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Ошибки формы запроса отдаются как 400 до обращения к движку."""

    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    message = "; ".join(problems) or "Invalid request"
    LOGGER.warning("Rejected %s %s: %s", request.method, request.url.path, message)
    return error_response(ErrorKind.VALIDATION, message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Ошибки маршрутизации (неизвестный путь, метод) в том же конверте."""

    kind = KIND_BY_STATUS.get(exc.status_code)
    if kind is None:
        kind = ErrorKind.UNKNOWN if exc.status_code >= 500 else ErrorKind.VALIDATION
    return JSONResponse(
        status_code=exc.status_code,
        content=envelope(str(exc.detail), {"error": kind.value}),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    LOGGER.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(ErrorKind.UNKNOWN, str(exc) or exc.__class__.__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DockerAPIError, docker_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
