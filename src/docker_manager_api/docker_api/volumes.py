"""Функции для работы с томами Docker."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from docker_manager_api.docker_api.client import DockerClientWrapper
from docker_manager_api.docker_api.exceptions import ENGINE_ERRORS, from_docker_exception
from docker_manager_api.docker_api.models import VolumeSummary

LOGGER = logging.getLogger(__name__)


def list_volumes(client: DockerClientWrapper) -> List[VolumeSummary]:
    """Возвращает список томов с размером из docker system df."""

    raw = client.get_raw_client()
    try:
        items = raw.volumes.list()
    except ENGINE_ERRORS as exc:
        raise from_docker_exception(exc) from exc
    usage_map = _load_usage_data(raw)
    volumes = []
    for volume in items:
        attrs = getattr(volume, "attrs", {}) or {}
        volumes.append(
            VolumeSummary(
                name=volume.name,
                mountpoint=attrs.get("Mountpoint"),
                driver=attrs.get("Driver"),
                size=usage_map.get(volume.name),
            )
        )
    return volumes


def create_volume(client: DockerClientWrapper, name: str) -> Dict[str, Any]:
    raw = client.get_raw_client()
    try:
        volume = raw.volumes.create(name=name)
    except ENGINE_ERRORS as exc:
        raise from_docker_exception(exc, context={"volume": name}) from exc
    attrs = getattr(volume, "attrs", {}) or {}
    return {"name": volume.name, "mountpoint": attrs.get("Mountpoint")}


def remove_volume(client: DockerClientWrapper, name: str) -> None:
    """Удаляет том. Используемый том движок не удалит (409)."""

    raw = client.get_raw_client()
    try:
        raw.volumes.get(name).remove()
    except ENGINE_ERRORS as exc:
        raise from_docker_exception(exc, context={"volume": name}) from exc


def _load_usage_data(raw_client: Any) -> Dict[str, Optional[int]]:
    """Возвращает размеры томов; отсутствующие данные не попадают в словарь."""

    usage: Dict[str, Optional[int]] = {}
    try:
        df_data = raw_client.api.df()
    except ENGINE_ERRORS as exc:
        LOGGER.warning("Volume usage data unavailable: %s", exc)
        return usage
    for item in df_data.get("Volumes") or []:
        name = item.get("Name")
        size = (item.get("UsageData") or {}).get("Size")
        # -1 означает, что движок не вычислял размер
        if name and isinstance(size, int) and size >= 0:
            usage[name] = size
    return usage
