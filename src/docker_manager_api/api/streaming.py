"""Ретрансляция потока логов контейнера клиенту.

Поток живёт не дольше соединения клиента: при разрыве генератор отменяется
или закрывается, а наблюдатель за разрывом закрывает поток движка, даже если
чтение в рабочем потоке заблокировано в ожидании новых строк.
"""

from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator, Optional, Protocol

import anyio

from docker_manager_api.docker_api.containers import LogStream
from docker_manager_api.docker_api.exceptions import DockerAPIError

LOGGER = logging.getLogger(__name__)


class DisconnectAware(Protocol):
    async def is_disconnected(self) -> bool: ...


def _next_chunk(log_stream: LogStream) -> Optional[str]:
    return next(log_stream, None)


async def _close_on_disconnect(
    request: DisconnectAware, log_stream: LogStream, poll_interval: float
) -> None:
    while not log_stream.closed:
        if await request.is_disconnected():
            LOGGER.info("Client disconnected from logs of %s", log_stream.container_id)
            log_stream.close()
            return
        await asyncio.sleep(poll_interval)


async def relay_log_stream(
    log_stream: LogStream,
    request: Optional[DisconnectAware] = None,
    *,
    poll_interval: float = 1.0,
) -> AsyncIterator[str]:
    """Отдаёт фрагменты лога, пока движок не закончит поток или клиент не уйдёт."""

    # ожидание строк не занимает токены общего пула синхронных маршрутов
    limiter = anyio.CapacityLimiter(1)
    watcher = None
    if request is not None:
        watcher = asyncio.ensure_future(_close_on_disconnect(request, log_stream, poll_interval))
    try:
        while True:
            chunk = await anyio.to_thread.run_sync(
                _next_chunk, log_stream, abandon_on_cancel=True, limiter=limiter
            )
            if chunk is None:
                break
            yield chunk
    except DockerAPIError:
        # ошибка уже залогирована при создании; поток просто завершается
        LOGGER.debug("Log stream for %s terminated by engine error", log_stream.container_id)
    finally:
        log_stream.close()
        if watcher is not None:
            watcher.cancel()
