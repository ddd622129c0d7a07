"""Фабрика FastAPI-приложения."""

from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable, List, Optional

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from docker_manager_api import __version__
from docker_manager_api.api import ROUTERS
from docker_manager_api.api.responses import register_error_handlers
from docker_manager_api.docker_api.adapter import DockerEngineAdapter

LOGGER = logging.getLogger(__name__)


def create_application(
    adapter: DockerEngineAdapter,
    *,
    cors_origins: Optional[List[str]] = None,
) -> FastAPI:
    """Собирает приложение вокруг готового адаптера.

    Адаптер (и единственный docker client внутри него) создаётся снаружи,
    поэтому в тестах его можно подменить заглушкой.
    """

    app = FastAPI(
        title="Docker Manager API",
        description="REST proxy for the Docker Engine API",
        version=__version__,
    )
    app.state.adapter = adapter

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins if cors_origins is not None else ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        LOGGER.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - start_time) * 1000,
        )
        return response

    register_error_handlers(app)
    for router in ROUTERS:
        app.include_router(router)
    return app
