"""Маршруты /images. Имя образа может содержать '/' и ':'."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from docker_manager_api.api.dependencies import get_adapter
from docker_manager_api.api.responses import envelope
from docker_manager_api.docker_api.adapter import DockerEngineAdapter

router = APIRouter(prefix="/images", tags=["images"])


@router.get("")
def list_images(adapter: DockerEngineAdapter = Depends(get_adapter)) -> Dict[str, Any]:
    items = [summary.to_dict() for summary in adapter.list_images()]
    return envelope(f"{len(items)} images", items)


@router.post("/{name:path}/pull")
def pull_image(name: str, adapter: DockerEngineAdapter = Depends(get_adapter)) -> Dict[str, Any]:
    """Отвечает только после завершения pull."""

    result = adapter.pull_image(name)
    return envelope(f"Image '{result['reference']}' pulled.", result)


@router.delete("/{name:path}")
def delete_image(name: str, adapter: DockerEngineAdapter = Depends(get_adapter)) -> Dict[str, Any]:
    adapter.remove_image(name)
    return envelope(f"Image '{name}' removed.")
