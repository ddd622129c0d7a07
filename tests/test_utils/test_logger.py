"""Проверки подсистемы логирования."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from docker_manager_api.utils.logger import configure_logging, resolve_log_level


def test_configure_logging_creates_file(tmp_path: Path) -> None:
    """После конфигурации должны появиться файл лога и запись в нём."""

    log_dir = tmp_path / "logs"
    configure_logging(log_dir, level_name="INFO", max_bytes=1024, backup_count=1)

    logging.getLogger("dma.test").info("log entry")
    for handler in logging.getLogger().handlers:
        handler.flush()

    log_file = log_dir / "api.log"
    assert log_file.exists()
    assert "log entry" in log_file.read_text(encoding="utf-8")


def test_configure_logging_without_dir_uses_stdout_only() -> None:
    configure_logging(None, level_name="warning")
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)


def test_resolve_log_level() -> None:
    assert resolve_log_level("debug") == logging.DEBUG


def test_resolve_log_level_invalid() -> None:
    """Неизвестный уровень логирования приводит к ValueError."""

    with pytest.raises(ValueError):
        resolve_log_level("INVALID")
