"""Обёртка над docker-py с отложенной инициализацией."""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict

import docker

from docker_manager_api.connections.models import Connection
from docker_manager_api.docker_api.exceptions import (
    ENGINE_ERRORS,
    EngineUnavailableError,
    from_docker_exception,
)

LOGGER = logging.getLogger(__name__)


class DockerClientWrapper:
    """Единственный дескриптор демона, общий для всех запросов.

    Docker client создаётся при первом обращении: если демон недоступен,
    ошибка возвращается конкретному запросу, а следующий запрос попробует
    подключиться снова.
    """

    def __init__(self, connection: Connection, raw_client: Any | None = None) -> None:
        self.connection = connection
        self._client = raw_client
        self._lock = threading.Lock()

    def _create_client(self) -> Any:
        try:
            return docker.DockerClient(
                base_url=self.connection.base_url,
                version=self.connection.api_version,
                timeout=self.connection.timeout,
            )
        except ENGINE_ERRORS as exc:
            LOGGER.error(
                "Docker client init error via %s: %s",
                self.connection.base_url,
                exc,
            )
            raise EngineUnavailableError(
                str(exc), context={"base_url": self.connection.base_url}
            ) from exc

    def get_raw_client(self) -> Any:
        """Возвращает внутренний docker client, создавая его при необходимости."""

        if self._client is None:
            with self._lock:
                if self._client is None:
                    self._client = self._create_client()
                    LOGGER.info("Connected to Docker engine at %s", self.connection.base_url)
        return self._client

    def ping(self) -> bool:
        """Проверяет доступность Docker."""

        try:
            return bool(self.get_raw_client().ping())
        except EngineUnavailableError:
            return False
        except ENGINE_ERRORS as exc:
            LOGGER.error("Docker ping failed: %s", exc)
            return False

    def version(self) -> Dict[str, Any]:
        """Возвращает ответ docker version."""

        try:
            return self.get_raw_client().version()
        except ENGINE_ERRORS as exc:
            raise from_docker_exception(exc) from exc

    def close(self) -> None:
        """Закрывает HTTP-сессию docker client, если она была открыта."""

        with self._lock:
            if self._client is not None:
                self._client.close()
                self._client = None
