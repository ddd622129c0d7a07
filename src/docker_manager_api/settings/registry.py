"""Реестр настроек сервиса, загружаемый из config.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from docker_manager_api.settings.exceptions import (
    SettingsIOError,
    SettingsNotFoundError,
    SettingsValidationError,
)
from docker_manager_api.settings.groups import (
    EngineSettings,
    LoggingSettings,
    LogsSettings,
    ServerSettings,
    SettingsGroup,
)

LOGGER = logging.getLogger(__name__)

CONFIG_VERSION = "1.0.0"


class SettingsRegistry:
    """Управляет группами настроек.

    Экземпляр создаётся один раз в main и передаётся явно туда, где нужен.
    """

    def __init__(self, config_path: Path) -> None:
        self._file_path = config_path
        self._settings: Dict[str, SettingsGroup] = {
            "server": ServerSettings(),
            "engine": EngineSettings(),
            "logs": LogsSettings(),
            "logging": LoggingSettings(),
        }

    @property
    def config_path(self) -> Path:
        return self._file_path

    # --------------------------------------------------------------------- API
    def get_value(self, group: str, key: str, default: Any = None) -> Any:
        settings_group = self._settings.get(group)
        if not settings_group:
            if default is not None:
                return default
            raise SettingsNotFoundError(group, key)
        try:
            return settings_group.get(key)
        except SettingsNotFoundError:
            if default is not None:
                return default
            raise

    def get_group(self, group: str) -> SettingsGroup:
        try:
            return self._settings[group]
        except KeyError:
            raise SettingsNotFoundError(group, None) from None

    def save_to_disk(self, path: Optional[Path] = None) -> None:
        target = path or self._file_path
        payload: Dict[str, Any] = {"version": CONFIG_VERSION}
        for name, group in self._settings.items():
            payload[name] = group.to_dict()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as exc:
            raise SettingsIOError(target, str(exc)) from exc

    def load_from_disk(self, path: Optional[Path] = None) -> None:
        """Читает config.json поверх значений по умолчанию.

        Отсутствующий файл создаётся с дефолтами. Любое невалидное значение
        прерывает загрузку с SettingsValidationError.
        """

        target = path or self._file_path
        if not target.exists():
            LOGGER.info("Config file %s not found, writing defaults.", target)
            self.save_to_disk(target)
            return
        try:
            content = json.loads(target.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise SettingsIOError(target, str(exc)) from exc
        if not isinstance(content, dict):
            raise SettingsIOError(target, "top-level JSON value must be an object")

        for name, group in self._settings.items():
            group.reset_to_defaults()
            group_data = content.get(name, {})
            if isinstance(group_data, dict):
                group.from_dict(group_data)
        self.validate()

    def validate(self) -> bool:
        for name, group in self._settings.items():
            for key in group.keys():
                value = group.get(key)
                is_valid, error = group.validate(key, value)
                if not is_valid:
                    raise SettingsValidationError(
                        key=f"{name}.{key}",
                        value=value,
                        reason=error,
                    )
        return True

    def reset_to_defaults(self) -> None:
        for group in self._settings.values():
            group.reset_to_defaults()
