"""Точка входа в сервис Docker Manager API."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import uvicorn

from docker_manager_api import __version__
from docker_manager_api.app import create_application
from docker_manager_api.connections.models import Connection, SSHConfig
from docker_manager_api.docker_api.adapter import DockerEngineAdapter
from docker_manager_api.docker_api.client import DockerClientWrapper
from docker_manager_api.settings.exceptions import SettingsError
from docker_manager_api.settings.registry import SettingsRegistry
from docker_manager_api.utils.helpers import normalize_socket_path
from docker_manager_api.utils.logger import configure_logging

LOGGER = logging.getLogger(__name__)


def resolve_base_dir() -> Path:
    """Рабочая директория: $DMA_HOME/.docker-manager-api (по умолчанию в ~)."""

    home_dir = Path(os.environ.get("DMA_HOME", Path.home()))
    return home_dir / ".docker-manager-api"


def initialize_settings(config_path: Path) -> SettingsRegistry:
    """Создаёт реестр настроек и загружает config.json."""

    registry = SettingsRegistry(config_path)
    registry.load_from_disk()
    return registry


def setup_logging_from_settings(base_dir: Path, settings: SettingsRegistry) -> None:
    """Настраивает логирование в соответствии с группой logging."""

    logging_settings = settings.get_group("logging")
    if not logging_settings.get("enabled"):
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    configure_logging(
        log_dir=base_dir / "logs",
        level_name=logging_settings.get("level"),
        max_bytes=logging_settings.get("max_file_size_mb") * 1024 * 1024,
        backup_count=logging_settings.get("max_archived_files"),
    )


def build_connection(settings: SettingsRegistry) -> Connection:
    """Собирает описание подключения к демону из группы engine."""

    engine = settings.get_group("engine")
    ssh = None
    if engine.get("type") == "remote" and engine.get("ssh_host"):
        ssh = SSHConfig(
            host=engine.get("ssh_host"),
            port=engine.get("ssh_port"),
            username=engine.get("ssh_username"),
        )
    return Connection(
        socket=normalize_socket_path(engine.get("socket")),
        type=engine.get("type"),
        ssh=ssh,
        timeout=engine.get("timeout_sec"),
        api_version=engine.get("api_version"),
    )


def build_adapter(settings: SettingsRegistry) -> DockerEngineAdapter:
    """Создаёт единственный docker client и адаптер поверх него."""

    connection = build_connection(settings)
    LOGGER.info("Docker engine connection: %s", connection.to_dict())
    return DockerEngineAdapter(
        DockerClientWrapper(connection),
        log_tail=settings.get_value("logs", "tail"),
        log_timestamps=settings.get_value("logs", "timestamps"),
    )


def main() -> int:
    """Основная точка входа: готовит окружение и запускает HTTP-сервер."""

    base_dir = resolve_base_dir()
    configure_logging(None)

    try:
        settings = initialize_settings(base_dir / "config.json")
    except SettingsError as exc:
        LOGGER.error("Cannot start: %s", exc.message)
        return 1
    setup_logging_from_settings(base_dir, settings)
    LOGGER.info("Settings loaded from %s", settings.config_path)

    adapter = build_adapter(settings)
    app = create_application(adapter, cors_origins=settings.get_value("server", "cors_origins"))

    host = settings.get_value("server", "host")
    port = settings.get_value("server", "port")
    LOGGER.info("Starting Docker Manager API %s on http://%s:%s", __version__, host, port)
    try:
        uvicorn.run(app, host=host, port=port, log_config=None)
    finally:
        adapter.client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
