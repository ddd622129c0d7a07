"""Схемы тел запросов HTTP API."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from docker_manager_api.docker_api.models import ContainerCreateRequest


class ContainerCreateBody(BaseModel):
    """Тело POST /containers. Имена полей совпадают с тем, что шлёт клиент."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    image: str = Field(alias="Image", min_length=1, description="Image reference, e.g. nginx:latest")
    name: str = Field(min_length=1)
    network_name: Optional[str] = Field(default=None, alias="networkName")
    volume_binds: Optional[List[str]] = Field(default=None, alias="volumeBinds")
    port_bindings: Optional[List[str]] = Field(default=None, alias="portBindings")

    def to_request(self) -> ContainerCreateRequest:
        return ContainerCreateRequest(
            image=self.image,
            name=self.name,
            network_name=self.network_name or None,
            volume_binds=list(self.volume_binds or []),
            port_bindings=list(self.port_bindings or []),
        )


class NameBody(BaseModel):
    """Тело POST /networks и POST /volumes."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
