"""Маршруты /volumes."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from docker_manager_api.api.dependencies import get_adapter
from docker_manager_api.api.responses import envelope
from docker_manager_api.api.schemas import NameBody
from docker_manager_api.docker_api.adapter import DockerEngineAdapter

router = APIRouter(prefix="/volumes", tags=["volumes"])


@router.get("")
def list_volumes(adapter: DockerEngineAdapter = Depends(get_adapter)) -> Dict[str, Any]:
    """Размер тома без usage data отдаётся как "N/A", а не 0."""

    items = [summary.to_dict() for summary in adapter.list_volumes()]
    return envelope(f"{len(items)} volumes", items)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_volume(
    body: NameBody, adapter: DockerEngineAdapter = Depends(get_adapter)
) -> Dict[str, Any]:
    return envelope(f"Volume '{body.name}' created.", adapter.create_volume(body.name))


@router.delete("/{name}")
def delete_volume(name: str, adapter: DockerEngineAdapter = Depends(get_adapter)) -> Dict[str, Any]:
    adapter.remove_volume(name)
    return envelope(f"Volume '{name}' removed.")
