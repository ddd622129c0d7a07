"""Тесты SettingsRegistry."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from docker_manager_api.settings.exceptions import (
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
)
from docker_manager_api.settings.registry import CONFIG_VERSION, SettingsRegistry


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return tmp_path / "config.json"


@pytest.fixture
def registry(config_path: Path) -> SettingsRegistry:
    return SettingsRegistry(config_path)


def test_config_path(config_path: Path, registry: SettingsRegistry) -> None:
    assert registry.config_path == config_path


def test_instances_are_independent(config_path: Path, registry: SettingsRegistry) -> None:
    other = SettingsRegistry(config_path)
    registry.get_group("server").set("port", 9000)
    assert other.get_value("server", "port") == 1113


def test_group_set_is_visible_through_get_value(registry: SettingsRegistry) -> None:
    registry.get_group("engine").set("timeout_sec", 30)
    assert registry.get_value("engine", "timeout_sec") == 30


def test_get_value_with_default(registry: SettingsRegistry) -> None:
    assert registry.get_value("server", "unknown", default="fallback") == "fallback"
    assert registry.get_value("unknown", "key", default=5) == 5


def test_group_set_invalid_raises(registry: SettingsRegistry) -> None:
    with pytest.raises(SettingsValidationError):
        registry.get_group("logs").set("tail", -5)


def test_unknown_group_raises(registry: SettingsRegistry) -> None:
    with pytest.raises(SettingsNotFoundError):
        registry.get_value("unknown", "key")
    with pytest.raises(SettingsNotFoundError):
        registry.get_group("unknown")


def test_save_and_load_persists_data(config_path: Path, registry: SettingsRegistry) -> None:
    registry.get_group("logs").set("tail", 100)
    registry.save_to_disk()

    payload = json.loads(config_path.read_text(encoding="utf-8"))
    assert payload["version"] == CONFIG_VERSION
    assert set(payload) == {"version", "server", "engine", "logs", "logging"}

    loaded = SettingsRegistry(config_path)
    loaded.load_from_disk()
    assert loaded.get_value("logs", "tail") == 100


def test_load_creates_defaults_if_missing(tmp_path: Path) -> None:
    config_path = tmp_path / "nested" / "config.json"
    registry = SettingsRegistry(config_path)
    registry.load_from_disk()
    assert config_path.exists()
    assert registry.get_value("server", "port") == 1113


def test_load_partial_file_keeps_defaults(config_path: Path) -> None:
    config_path.write_text(json.dumps({"engine": {"type": "remote", "ssh_host": "docker.lan"}}))
    registry = SettingsRegistry(config_path)
    registry.load_from_disk()
    assert registry.get_value("engine", "type") == "remote"
    assert registry.get_value("engine", "ssh_port") == 22
    assert registry.get_value("logging", "level") == "INFO"


def test_load_rejects_invalid_value(config_path: Path) -> None:
    config_path.write_text(json.dumps({"server": {"port": "not-a-port"}}))
    with pytest.raises(SettingsValidationError):
        SettingsRegistry(config_path).load_from_disk()


@pytest.mark.parametrize("content", ["{broken", "[1, 2, 3]"])
def test_load_rejects_malformed_file(config_path: Path, content: str) -> None:
    config_path.write_text(content)
    with pytest.raises(SettingsIOError):
        SettingsRegistry(config_path).load_from_disk()


def test_reset_to_defaults(registry: SettingsRegistry) -> None:
    registry.get_group("logging").set("level", "DEBUG")
    registry.reset_to_defaults()
    assert registry.get_value("logging", "level") == "INFO"
    assert registry.validate() is True
