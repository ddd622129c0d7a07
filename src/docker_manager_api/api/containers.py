"""Маршруты /containers."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import StreamingResponse

from docker_manager_api.api.dependencies import get_adapter
from docker_manager_api.api.responses import envelope
from docker_manager_api.api.schemas import ContainerCreateBody
from docker_manager_api.api.streaming import relay_log_stream
from docker_manager_api.docker_api.adapter import DockerEngineAdapter

router = APIRouter(prefix="/containers", tags=["containers"])


@router.get("")
def list_containers(adapter: DockerEngineAdapter = Depends(get_adapter)) -> Dict[str, Any]:
    items = [summary.to_dict() for summary in adapter.list_containers()]
    return envelope(f"{len(items)} containers", items)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_container(
    body: ContainerCreateBody, adapter: DockerEngineAdapter = Depends(get_adapter)
) -> Dict[str, Any]:
    """Создаёт контейнер, при необходимости предварительно скачав образ."""

    result = adapter.create_container(body.to_request())
    return envelope(f"Container '{body.name}' created.", result)


@router.get("/{container_id}")
def get_container(
    container_id: str, adapter: DockerEngineAdapter = Depends(get_adapter)
) -> Dict[str, Any]:
    return envelope("Container details.", adapter.get_container(container_id))


@router.post("/{container_id}/start")
def start_container(
    container_id: str, adapter: DockerEngineAdapter = Depends(get_adapter)
) -> Dict[str, Any]:
    adapter.start_container(container_id)
    return envelope("Container started successfully.")


@router.post("/{container_id}/stop")
def stop_container(
    container_id: str, adapter: DockerEngineAdapter = Depends(get_adapter)
) -> Dict[str, Any]:
    adapter.stop_container(container_id)
    return envelope("Container stopped successfully.")


@router.post("/{container_id}/restart")
def restart_container(
    container_id: str, adapter: DockerEngineAdapter = Depends(get_adapter)
) -> Dict[str, Any]:
    adapter.restart_container(container_id)
    return envelope("Container restarted successfully.")


@router.delete("/{container_id}")
def delete_container(
    container_id: str, adapter: DockerEngineAdapter = Depends(get_adapter)
) -> Dict[str, Any]:
    """Удаляет контейнер; работающий контейнер нужно сначала остановить."""

    adapter.remove_container(container_id)
    return envelope("Container removed successfully.")


@router.get("/{container_id}/logs")
def container_logs(
    container_id: str,
    request: Request,
    adapter: DockerEngineAdapter = Depends(get_adapter),
) -> StreamingResponse:
    """Отдаёт логи в режиме follow, пока не закончится поток или клиент не уйдёт."""

    log_stream = adapter.stream_container_logs(container_id)
    return StreamingResponse(
        relay_log_stream(log_stream, request),
        media_type="text/plain; charset=utf-8",
    )
