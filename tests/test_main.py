"""Тесты вспомогательных функций модуля main."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from docker_manager_api import main as main_module
from docker_manager_api.main import (
    build_adapter,
    build_connection,
    initialize_settings,
    resolve_base_dir,
    setup_logging_from_settings,
)
from docker_manager_api.settings.registry import SettingsRegistry


@pytest.fixture
def settings(tmp_path: Path) -> SettingsRegistry:
    return SettingsRegistry(tmp_path / "config.json")


def test_resolve_base_dir_uses_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DMA_HOME", str(tmp_path))
    assert resolve_base_dir() == tmp_path / ".docker-manager-api"


def test_initialize_settings_writes_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    registry = initialize_settings(config_path)
    assert config_path.exists()
    assert registry.get_value("server", "port") == 1113


def test_setup_logging_enabled_creates_log(tmp_path: Path, settings: SettingsRegistry) -> None:
    logging.disable(logging.NOTSET)
    setup_logging_from_settings(tmp_path, settings)
    logging.getLogger("test").info("log entry")
    for handler in logging.getLogger().handlers:
        handler.flush()
    log_file = tmp_path / "logs" / "api.log"
    assert log_file.exists()
    assert "log entry" in log_file.read_text(encoding="utf-8")


def test_setup_logging_disabled(tmp_path: Path, settings: SettingsRegistry) -> None:
    logging.disable(logging.NOTSET)
    settings.get_group("logging").set("enabled", False)
    setup_logging_from_settings(tmp_path, settings)
    assert logging.root.manager.disable >= logging.CRITICAL
    logging.disable(logging.NOTSET)


def test_build_connection_local_normalizes_socket(settings: SettingsRegistry) -> None:
    settings.get_group("engine").set("socket", "/run/user/1000/docker.sock")
    connection = build_connection(settings)
    assert connection.type == "local"
    assert connection.base_url == "unix:///run/user/1000/docker.sock"


def test_build_connection_remote(settings: SettingsRegistry) -> None:
    settings.get_group("engine").set("type", "remote")
    settings.get_group("engine").set("ssh_host", "docker.lan")
    settings.get_group("engine").set("ssh_username", "ops")
    settings.get_group("engine").set("timeout_sec", 15)
    connection = build_connection(settings)
    assert connection.base_url == "ssh://ops@docker.lan:22"
    assert connection.timeout == 15


def test_build_adapter_does_not_contact_engine(settings: SettingsRegistry) -> None:
    settings.get_group("logs").set("tail", 100)
    adapter = build_adapter(settings)
    assert adapter.client.connection.base_url == "unix:///var/run/docker.sock"


def test_main_fails_on_broken_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("DMA_HOME", str(tmp_path))
    config_dir = tmp_path / ".docker-manager-api"
    config_dir.mkdir()
    (config_dir / "config.json").write_text('{"server": {"port": 0}}', encoding="utf-8")

    def fail_run(*args: object, **kwargs: object) -> None:
        raise AssertionError("server must not start")

    monkeypatch.setattr(main_module.uvicorn, "run", fail_run)
    assert main_module.main() == 1


def test_main_starts_server_with_loaded_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("DMA_HOME", str(tmp_path))
    started = {}

    def fake_run(app: object, **kwargs: object) -> None:
        started.update(kwargs)

    monkeypatch.setattr(main_module.uvicorn, "run", fake_run)
    assert main_module.main() == 0
    assert started == {"host": "0.0.0.0", "port": 1113, "log_config": None}
    assert (tmp_path / ".docker-manager-api" / "config.json").exists()
    logging.disable(logging.NOTSET)
