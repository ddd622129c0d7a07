"""Типизированные ошибки обращения к Docker Engine."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Optional

from docker.errors import APIError, DockerException, NotFound
from requests.exceptions import ConnectionError as RequestsConnectionError
from requests.exceptions import RequestException

LOGGER = logging.getLogger(__name__)

# ENGINE_ERRORS: всё, что может выбросить docker SDK при обращении к демону
ENGINE_ERRORS = (DockerException, RequestException)


class ErrorKind(str, Enum):
    """Категории ошибок, видимые снаружи адаптера."""

    NOT_FOUND = "NotFound"
    CONFLICT = "Conflict"
    VALIDATION = "ValidationError"
    ENGINE_UNAVAILABLE = "EngineUnavailable"
    UNKNOWN = "Unknown"


class DockerAPIError(Exception):
    """Базовая ошибка адаптера с категорией и контекстом."""

    kind: ErrorKind = ErrorKind.UNKNOWN
    log_level: int = logging.ERROR

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        """Сохраняет исходное сообщение движка и логирует ошибку."""

        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.log(self.log_level, "%s: %s | context=%s", self.kind.value, message, self.context)


class NotFoundError(DockerAPIError):
    """Контейнер, образ, сеть или том не найдены."""

    kind = ErrorKind.NOT_FOUND
    log_level = logging.WARNING


class ConflictError(DockerAPIError):
    """Операция несовместима с текущим состоянием объекта."""

    kind = ErrorKind.CONFLICT
    log_level = logging.WARNING


class ValidationError(DockerAPIError):
    """Некорректный запрос (проверка формы или отказ движка с кодом 400)."""

    kind = ErrorKind.VALIDATION
    log_level = logging.WARNING


class EngineUnavailableError(DockerAPIError):
    """Демон Docker недоступен."""

    kind = ErrorKind.ENGINE_UNAVAILABLE


class UnknownEngineError(DockerAPIError):
    """Любая другая ошибка движка."""

    kind = ErrorKind.UNKNOWN


def from_docker_exception(
    exc: BaseException, *, context: Optional[Dict[str, Any]] = None
) -> DockerAPIError:
    """Преобразует исключение docker SDK в ошибку адаптера."""

    if isinstance(exc, DockerAPIError):
        return exc
    if isinstance(exc, NotFound):
        return NotFoundError(_explain(exc), context=context)
    if isinstance(exc, APIError):
        status = exc.status_code
        if status == 409:
            return ConflictError(_explain(exc), context=context)
        if status == 400:
            return ValidationError(_explain(exc), context=context)
        return UnknownEngineError(_explain(exc), context=context)
    if isinstance(exc, RequestsConnectionError):
        return EngineUnavailableError(str(exc), context=context)
    return UnknownEngineError(str(exc), context=context)


def _explain(exc: APIError) -> str:
    """Возвращает сообщение демона без обёртки docker SDK."""

    explanation = exc.explanation
    if isinstance(explanation, bytes):
        explanation = explanation.decode("utf-8", errors="replace")
    return str(explanation) if explanation else str(exc)
