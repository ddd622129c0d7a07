"""Функции для работы с контейнерами через Docker client."""

from __future__ import annotations

import codecs
import logging
import threading
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

from docker_manager_api.docker_api import images
from docker_manager_api.docker_api.client import DockerClientWrapper
from docker_manager_api.docker_api.exceptions import ENGINE_ERRORS, from_docker_exception
from docker_manager_api.docker_api.models import (
    ContainerCreateRequest,
    ContainerState,
    ContainerSummary,
)

LOGGER = logging.getLogger(__name__)

HostBinding = Union[str, Tuple[str, str]]


def list_containers(client: DockerClientWrapper) -> List[ContainerSummary]:
    """Возвращает все контейнеры, включая остановленные."""

    raw = client.get_raw_client()
    try:
        items = raw.containers.list(all=True, sparse=True)
    except ENGINE_ERRORS as exc:
        raise from_docker_exception(exc) from exc
    return [_summarize(container) for container in items]


def inspect_container(client: DockerClientWrapper, container_id: str) -> Dict[str, Any]:
    """Возвращает словарь атрибутов контейнера (docker inspect)."""

    return _get(client, container_id).attrs


def start_container(client: DockerClientWrapper, container_id: str) -> None:
    """Запускает контейнер."""

    container = _get(client, container_id)
    try:
        container.start()
    except ENGINE_ERRORS as exc:
        raise from_docker_exception(exc, context={"container": container_id}) from exc


def stop_container(client: DockerClientWrapper, container_id: str) -> None:
    """Останавливает контейнер."""

    container = _get(client, container_id)
    try:
        container.stop()
    except ENGINE_ERRORS as exc:
        raise from_docker_exception(exc, context={"container": container_id}) from exc


def restart_container(client: DockerClientWrapper, container_id: str) -> None:
    """Перезапускает контейнер."""

    container = _get(client, container_id)
    try:
        container.restart()
    except ENGINE_ERRORS as exc:
        raise from_docker_exception(exc, context={"container": container_id}) from exc


def remove_container(client: DockerClientWrapper, container_id: str) -> None:
    """Удаляет контейнер. Работающий контейнер движок не удалит (409)."""

    container = _get(client, container_id)
    try:
        container.remove(force=False)
    except ENGINE_ERRORS as exc:
        raise from_docker_exception(exc, context={"container": container_id}) from exc


def create_container(
    client: DockerClientWrapper, request: ContainerCreateRequest
) -> Dict[str, Any]:
    """Создаёт контейнер в две фазы: наличие образа, затем docker create.

    Если образа нет локально, сначала выполняется pull и ожидается его
    завершение. Ошибка pull прерывает операцию до вызова create. Ошибка
    create после успешного pull оставляет скачанный образ на месте.
    """

    if not images.image_exists(client, request.image):
        LOGGER.info("Image %s is missing locally, pulling before create", request.image)
        images.pull_image(client, request.image)

    options: Dict[str, Any] = {"name": request.name, "tty": False}
    if request.network_name:
        options["network"] = request.network_name
    binds = parse_volume_binds(request.volume_binds)
    if binds:
        options["volumes"] = binds
    ports = parse_port_bindings(request.port_bindings)
    if ports:
        options["ports"] = ports

    raw = client.get_raw_client()
    try:
        container = raw.containers.create(request.image, **options)
    except ENGINE_ERRORS as exc:
        raise from_docker_exception(
            exc, context={"image": request.image, "name": request.name}
        ) from exc
    LOGGER.info("Container %s created from %s (%s)", request.name, request.image, container.id)
    return {"id": container.id, "name": request.name}


def parse_port_bindings(specs: Optional[List[str]]) -> Dict[str, HostBinding]:
    """Разбирает записи вида [HOSTIP:]HOSTPORT:CONTAINERPORT[/PROTO].

    Результат: {"80/tcp": "8080"} или {"80/tcp": ("127.0.0.1", "8080")}.
    Некорректные записи пропускаются без прерывания запроса.
    """

    result: Dict[str, HostBinding] = {}
    for spec in specs or []:
        parts = [part.strip() for part in str(spec).split(":")]
        if len(parts) not in (2, 3) or not all(parts):
            LOGGER.warning("Skipping malformed port binding %r", spec)
            continue
        container_port = parts[-1]
        if "/" not in container_port:
            container_port = f"{container_port}/tcp"
        port, _, proto = container_port.partition("/")
        if not port or not proto:
            LOGGER.warning("Skipping malformed port binding %r", spec)
            continue
        host: HostBinding = parts[0] if len(parts) == 2 else (parts[0], parts[1])
        result[container_port] = host
    return result


def parse_volume_binds(specs: Optional[List[str]]) -> List[str]:
    """Оставляет только записи вида SOURCE:CONTAINERPATH[:MODE]."""

    binds: List[str] = []
    for spec in specs or []:
        parts = [part.strip() for part in str(spec).split(":")]
        if len(parts) not in (2, 3) or not all(parts):
            LOGGER.warning("Skipping malformed volume bind %r", spec)
            continue
        binds.append(":".join(parts))
    return binds


def stream_logs(
    client: DockerClientWrapper,
    container_id: str,
    *,
    tail: Union[str, int] = "all",
    timestamps: bool = False,
) -> "LogStream":
    """Открывает follow-поток stdout+stderr контейнера."""

    container = _get(client, container_id)
    try:
        raw_stream = container.logs(
            stream=True,
            follow=True,
            stdout=True,
            stderr=True,
            tail=tail,
            timestamps=timestamps,
        )
    except ENGINE_ERRORS as exc:
        raise from_docker_exception(exc, context={"container": container_id}) from exc
    return LogStream(raw_stream, container_id)


class LogStream:
    """Ленивый бесконечный итератор текстовых фрагментов лога.

    close() идемпотентен и может вызываться из другого потока: он закрывает
    соединение с движком, после чего блокирующее чтение завершается.
    """

    def __init__(self, raw_stream: Any, container_id: str) -> None:
        self.container_id = container_id
        self._raw = raw_stream
        self._source: Iterator[Any] = iter(raw_stream)
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._closed = False
        self._lock = threading.Lock()

    @property
    def closed(self) -> bool:
        return self._closed

    def __iter__(self) -> "LogStream":
        return self

    def __next__(self) -> str:
        while not self._closed:
            try:
                chunk = next(self._source)
            except StopIteration:
                self.close()
                tail = self._decoder.decode(b"", final=True)
                if tail:
                    return tail
                raise
            except (OSError, ValueError, *ENGINE_ERRORS) as exc:
                if self._closed:
                    break
                self.close()
                raise from_docker_exception(
                    exc, context={"container": self.container_id}
                ) from exc
            if isinstance(chunk, bytes):
                text = self._decoder.decode(chunk)
            else:
                text = str(chunk)
            if text:
                return text
        raise StopIteration

    def close(self) -> None:
        """Освобождает поток движка."""

        with self._lock:
            if self._closed:
                return
            self._closed = True
        close = getattr(self._raw, "close", None)
        if close is not None:
            close()
        LOGGER.debug("Log stream for %s closed", self.container_id)

    def __enter__(self) -> "LogStream":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def _get(client: DockerClientWrapper, container_id: str) -> Any:
    raw = client.get_raw_client()
    try:
        return raw.containers.get(container_id)
    except ENGINE_ERRORS as exc:
        raise from_docker_exception(exc, context={"container": container_id}) from exc


def _summarize(container: Any) -> ContainerSummary:
    attrs = getattr(container, "attrs", {}) or {}
    names = attrs.get("Names") or [getattr(container, "name", "") or ""]
    state_value = attrs.get("State")
    if isinstance(state_value, dict):
        state_value = state_value.get("Status")
    return ContainerSummary(
        id=attrs.get("Id") or container.id,
        name=names[0].lstrip("/"),
        image=attrs.get("Image", ""),
        status=attrs.get("Status") or state_value or "",
        state=_parse_state(state_value),
        created=_format_created(attrs.get("Created")),
    )


def _parse_state(value: Any) -> ContainerState:
    try:
        return ContainerState(str(value).lower())
    except ValueError:
        LOGGER.warning("Unexpected container state %r, reporting as dead", value)
        return ContainerState.DEAD


def _format_created(value: Any) -> Optional[str]:
    """Приводит время создания (unix time или ISO строка) к ISO 8601 UTC."""

    if value in (None, ""):
        return None
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc).isoformat()
    try:
        timestamp = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError:
        return str(value)
    return timestamp.astimezone(timezone.utc).isoformat()
