"""Настройка логирования сервиса: ротация файлов и вывод в консоль."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, Optional

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_log_level(level_name: str) -> int:
    """Преобразует строковый уровень логирования в числовой."""

    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")
    return level


def configure_logging(
    log_dir: Optional[Path],
    *,
    log_file_name: str = "api.log",
    level_name: str = "INFO",
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> None:
    """Настраивает корневой логгер; без log_dir пишет только в stdout."""

    log_level = resolve_log_level(level_name)
    formatter = logging.Formatter(LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [stream_handler]

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / log_file_name,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.insert(0, file_handler)

    logging.basicConfig(level=log_level, handlers=handlers, force=True)
