"""HTTP-слой сервиса."""

from docker_manager_api.api import containers, images, networks, system, volumes

ROUTERS = (
    system.router,
    containers.router,
    images.router,
    networks.router,
    volumes.router,
)
