"""Маршруты /networks."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, status

from docker_manager_api.api.dependencies import get_adapter
from docker_manager_api.api.responses import envelope
from docker_manager_api.api.schemas import NameBody
from docker_manager_api.docker_api.adapter import DockerEngineAdapter

router = APIRouter(prefix="/networks", tags=["networks"])


@router.get("")
def list_networks(adapter: DockerEngineAdapter = Depends(get_adapter)) -> Dict[str, Any]:
    items = [summary.to_dict() for summary in adapter.list_networks()]
    return envelope(f"{len(items)} networks", items)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_network(
    body: NameBody, adapter: DockerEngineAdapter = Depends(get_adapter)
) -> Dict[str, Any]:
    return envelope(f"Network '{body.name}' created.", adapter.create_network(body.name))
