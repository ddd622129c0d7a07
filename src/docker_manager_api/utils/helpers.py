"""Различные вспомогательные функции."""

from __future__ import annotations


_SOCKET_SCHEMES = ("unix://", "tcp://", "npipe://", "http://", "https://", "ssh://")


def normalize_socket_path(raw_value: str) -> str:
    """Возвращает адрес демона с корректным префиксом unix:// для путей."""

    value = raw_value.strip()
    if not value or value.lower().startswith(_SOCKET_SCHEMES):
        return value
    if value.startswith("/"):
        return f"unix://{value}"
    return value
