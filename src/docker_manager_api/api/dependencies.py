"""Зависимости FastAPI."""

from __future__ import annotations

from fastapi import Request

from docker_manager_api.docker_api.adapter import DockerEngineAdapter


def get_adapter(request: Request) -> DockerEngineAdapter:
    """Возвращает адаптер, переданный в create_application."""

    return request.app.state.adapter
