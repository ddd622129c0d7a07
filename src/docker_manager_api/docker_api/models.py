"""Упрощённые структуры данных для описания объектов Docker."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

# UNTAGGED: метка образа без тегов
UNTAGGED = "<untagged>"
# NOT_AVAILABLE: метка отсутствующих данных (в отличие от нуля)
NOT_AVAILABLE = "N/A"


class ContainerState(str, Enum):
    """Состояния жизненного цикла контейнера по версии движка."""

    CREATED = "created"
    RUNNING = "running"
    PAUSED = "paused"
    RESTARTING = "restarting"
    EXITED = "exited"
    DEAD = "dead"
    REMOVING = "removing"  # кратковременное состояние во время docker rm


@dataclass(slots=True)
class ContainerSummary:
    """Минимальное представление контейнера."""

    id: str
    name: str
    image: str
    status: str
    state: ContainerState
    created: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["state"] = self.state.value
        return payload


@dataclass(slots=True)
class ImageSummary:
    """Образ: идентификатор, основной тег и размер."""

    id: str
    tag: str
    size_bytes: int
    tags: List[str] = field(default_factory=list)

    @property
    def size_mb(self) -> float:
        return round(self.size_bytes / (1024 * 1024), 2)

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["size_mb"] = self.size_mb
        return payload


@dataclass(slots=True)
class NetworkSummary:
    id: str
    name: str
    driver: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class VolumeSummary:
    """Том. Размер None означает, что движок не сообщил usage data."""

    name: str
    mountpoint: Optional[str]
    driver: Optional[str] = None
    size: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        size: Union[int, str] = self.size if self.size is not None else NOT_AVAILABLE
        return {
            "name": self.name,
            "mountpoint": self.mountpoint,
            "driver": self.driver,
            "size": size,
        }


@dataclass(slots=True)
class ContainerCreateRequest:
    """Параметры создания контейнера в терминах сервиса."""

    image: str
    name: str
    network_name: Optional[str] = None
    volume_binds: List[str] = field(default_factory=list)
    port_bindings: List[str] = field(default_factory=list)
