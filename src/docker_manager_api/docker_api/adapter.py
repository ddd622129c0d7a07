"""Адаптер Docker Engine для HTTP-слоя.

Файл описывает класс, который получает единственный `DockerClientWrapper`
через конструктор и проксирует вызовы в функции из `docker_manager_api.docker_api`.
Каждый метод делает ровно одно обращение к движку (create делает два, если нужен
pull) и либо возвращает результат, либо бросает `DockerAPIError`.
Повторных попыток адаптер не делает.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Union

from docker_manager_api.connections.models import ConnectionStatus
from docker_manager_api.docker_api import containers, images, networks, volumes
from docker_manager_api.docker_api.client import DockerClientWrapper
from docker_manager_api.docker_api.containers import LogStream
from docker_manager_api.docker_api.exceptions import DockerAPIError
from docker_manager_api.docker_api.models import (
    ContainerCreateRequest,
    ContainerSummary,
    ImageSummary,
    NetworkSummary,
    VolumeSummary,
)

LOGGER = logging.getLogger(__name__)


class DockerEngineAdapter:
    """Предоставляет высокоуровневый API для работы с Docker Engine."""

    def __init__(
        self,
        client: DockerClientWrapper,
        *,
        log_tail: Union[str, int] = "all",
        log_timestamps: bool = False,
    ) -> None:
        self._client = client
        self._log_tail = log_tail
        self._log_timestamps = log_timestamps

    @property
    def client(self) -> DockerClientWrapper:
        return self._client

    # ---------------------------------------------------------------- engine
    def engine_status(self) -> Dict[str, Any]:
        """Возвращает доступность демона и его версию."""

        if not self._client.ping():
            return {"engine": ConnectionStatus.OFFLINE.value, "version": None}
        try:
            version = str(self._client.version().get("Version", "unknown"))
        except DockerAPIError:
            version = "unknown"
        return {"engine": ConnectionStatus.ONLINE.value, "version": version}

    # ------------------------------------------------------------ containers
    def list_containers(self) -> List[ContainerSummary]:
        return containers.list_containers(self._client)

    def get_container(self, container_id: str) -> Dict[str, Any]:
        """Возвращает результат docker inspect."""

        return containers.inspect_container(self._client, container_id)

    def start_container(self, container_id: str) -> None:
        containers.start_container(self._client, container_id)
        LOGGER.info("Container %s started", container_id)

    def stop_container(self, container_id: str) -> None:
        containers.stop_container(self._client, container_id)
        LOGGER.info("Container %s stopped", container_id)

    def restart_container(self, container_id: str) -> None:
        containers.restart_container(self._client, container_id)
        LOGGER.info("Container %s restarted", container_id)

    def remove_container(self, container_id: str) -> None:
        containers.remove_container(self._client, container_id)
        LOGGER.info("Container %s removed", container_id)

    def create_container(self, request: ContainerCreateRequest) -> Dict[str, Any]:
        return containers.create_container(self._client, request)

    def stream_container_logs(self, container_id: str) -> LogStream:
        """Открывает follow-поток логов; вызывающий обязан закрыть его."""

        return containers.stream_logs(
            self._client,
            container_id,
            tail=self._log_tail,
            timestamps=self._log_timestamps,
        )

    # ---------------------------------------------------------------- images
    def list_images(self) -> List[ImageSummary]:
        return images.list_images(self._client)

    def pull_image(self, reference: str) -> Dict[str, Any]:
        return images.pull_image(self._client, reference)

    def remove_image(self, name: str) -> None:
        images.remove_image(self._client, name)
        LOGGER.info("Image %s removed", name)

    # -------------------------------------------------------------- networks
    def list_networks(self) -> List[NetworkSummary]:
        return networks.list_networks(self._client)

    def create_network(self, name: str) -> Dict[str, Any]:
        result = networks.create_network(self._client, name)
        LOGGER.info("Network %s created", name)
        return result

    # --------------------------------------------------------------- volumes
    def list_volumes(self) -> List[VolumeSummary]:
        return volumes.list_volumes(self._client)

    def create_volume(self, name: str) -> Dict[str, Any]:
        result = volumes.create_volume(self._client, name)
        LOGGER.info("Volume %s created", name)
        return result

    def remove_volume(self, name: str) -> None:
        volumes.remove_volume(self._client, name)
        LOGGER.info("Volume %s removed", name)
