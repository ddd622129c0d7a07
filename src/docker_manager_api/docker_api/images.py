"""Функции для работы с образами Docker."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from docker.errors import NotFound
from docker.utils import parse_repository_tag

from docker_manager_api.docker_api.client import DockerClientWrapper
from docker_manager_api.docker_api.exceptions import (
    ENGINE_ERRORS,
    UnknownEngineError,
    from_docker_exception,
)
from docker_manager_api.docker_api.models import UNTAGGED, ImageSummary

LOGGER = logging.getLogger(__name__)


def list_images(client: DockerClientWrapper) -> List[ImageSummary]:
    """Возвращает список образов (id, основной тег, размер)."""

    raw = client.get_raw_client()
    try:
        items = raw.images.list()
    except ENGINE_ERRORS as exc:
        raise from_docker_exception(exc) from exc
    summaries = []
    for image in items:
        attrs = getattr(image, "attrs", {}) or {}
        tags = list(getattr(image, "tags", None) or [])
        summaries.append(
            ImageSummary(
                id=getattr(image, "short_id", None) or image.id,
                tag=tags[0] if tags else UNTAGGED,
                size_bytes=int(attrs.get("Size", 0) or 0),
                tags=tags,
            )
        )
    return summaries


def image_exists(client: DockerClientWrapper, reference: str) -> bool:
    """Проверяет, есть ли образ локально."""

    raw = client.get_raw_client()
    try:
        raw.images.get(reference)
    except NotFound:
        return False
    except ENGINE_ERRORS as exc:
        raise from_docker_exception(exc, context={"image": reference}) from exc
    return True


def pull_image(client: DockerClientWrapper, reference: str) -> Dict[str, Any]:
    """Скачивает образ и блокируется до завершения pull.

    Движок присылает поток событий прогресса; pull считается завершённым,
    когда поток закончился без события с полем error.
    """

    repository, tag = parse_repository_tag(reference)
    tag = tag or "latest"
    separator = "@" if tag.startswith("sha256:") else ":"
    pulled = f"{repository}{separator}{tag}"
    raw = client.get_raw_client()
    last_status = None
    try:
        events = raw.api.pull(repository, tag=tag, stream=True, decode=True)
        for event in events:
            if event.get("error"):
                detail = event.get("errorDetail") or {}
                raise UnknownEngineError(
                    detail.get("message") or event["error"],
                    context={"image": reference},
                )
            status = event.get("status")
            if status:
                last_status = status
                LOGGER.debug(
                    "Pull %s %s %s",
                    pulled,
                    status,
                    event.get("progress", ""),
                )
    except ENGINE_ERRORS as exc:
        raise from_docker_exception(exc, context={"image": reference}) from exc
    LOGGER.info("Image %s pulled (%s)", pulled, last_status)
    return {"reference": pulled, "status": last_status}


def remove_image(client: DockerClientWrapper, name: str) -> None:
    """Удаляет образ."""

    raw = client.get_raw_client()
    try:
        raw.images.remove(name)
    except ENGINE_ERRORS as exc:
        raise from_docker_exception(exc, context={"image": name}) from exc
