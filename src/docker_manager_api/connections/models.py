"""Модели данных для описания подключения к Docker Engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ConnectionStatus(str, Enum):
    """Статусы доступности демона."""

    ONLINE = "online"
    OFFLINE = "offline"


@dataclass(slots=True)
class SSHConfig:
    """Параметры SSH подключения к удалённому демону."""

    host: str
    port: int = 22
    username: str = "root"

    def to_url(self) -> str:
        """Возвращает base_url вида ssh://user@host:port."""

        return f"ssh://{self.username}@{self.host}:{self.port}"


@dataclass(slots=True)
class Connection:
    """Описание единственного подключения, которым пользуется сервис."""

    socket: str
    type: str = "local"  # local или remote
    ssh: Optional[SSHConfig] = None
    timeout: int = 60
    api_version: str = "auto"

    @property
    def base_url(self) -> str:
        """Адрес демона для docker.DockerClient."""

        if self.type == "remote" and self.ssh:
            return self.ssh.to_url()
        return self.socket

    def to_dict(self) -> Dict[str, Any]:
        """Сериализует модель в dict (для логов)."""

        return {
            "type": self.type,
            "base_url": self.base_url,
            "timeout": self.timeout,
            "api_version": self.api_version,
        }
