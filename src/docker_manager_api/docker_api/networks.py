"""Функции для работы с сетями Docker."""

from __future__ import annotations

from typing import Any, Dict, List

from docker_manager_api.docker_api.client import DockerClientWrapper
from docker_manager_api.docker_api.exceptions import ENGINE_ERRORS, from_docker_exception
from docker_manager_api.docker_api.models import NetworkSummary


def list_networks(client: DockerClientWrapper) -> List[NetworkSummary]:
    raw = client.get_raw_client()
    try:
        items = raw.networks.list()
    except ENGINE_ERRORS as exc:
        raise from_docker_exception(exc) from exc
    return [
        NetworkSummary(
            id=network.id,
            name=network.name,
            driver=(getattr(network, "attrs", {}) or {}).get("Driver"),
        )
        for network in items
    ]


def create_network(client: DockerClientWrapper, name: str) -> Dict[str, Any]:
    """Создаёт сеть с драйвером по умолчанию."""

    raw = client.get_raw_client()
    try:
        network = raw.networks.create(name)
    except ENGINE_ERRORS as exc:
        raise from_docker_exception(exc, context={"network": name}) from exc
    return {"id": network.id, "name": name}
