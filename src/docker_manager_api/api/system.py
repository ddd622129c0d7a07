"""Служебные маршруты."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from docker_manager_api.api.dependencies import get_adapter
from docker_manager_api.api.responses import envelope
from docker_manager_api.docker_api.adapter import DockerEngineAdapter

router = APIRouter(tags=["system"])


@router.get("/health")
def health(adapter: DockerEngineAdapter = Depends(get_adapter)) -> Dict[str, Any]:
    """Сообщает, доступен ли демон. Сам сервис отвечает 200 в любом случае."""

    return envelope("Service is running.", adapter.engine_status())
