"""Классы групп настроек с валидацией."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from docker_manager_api.settings.exceptions import (
    SettingsNotFoundError,
    SettingsValidationError,
)
from docker_manager_api.settings.validators import (
    CompositeValidator,
    EnumValidator,
    PredicateValidator,
    RangeValidator,
    RegexValidator,
    TypeValidator,
    Validator,
)

HOSTNAME_PATTERN = r"^[A-Za-z0-9\.\-:\[\]]+$"


class SettingsGroup(ABC):
    """Абстрактная база для конкретных групп настроек."""

    group_name: str = ""

    def __init__(self) -> None:
        self._defaults: Dict[str, Any] = {}
        self._validators: Dict[str, Validator] = {}
        self._values: Dict[str, Any] = {}
        self._initialize_defaults()
        self._setup_validators()
        self.reset_to_defaults()

    @abstractmethod
    def _initialize_defaults(self) -> None:
        """Задаёт значения по умолчанию для группы."""

    @abstractmethod
    def _setup_validators(self) -> None:
        """Привязывает валидаторы к ключам группы."""

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._defaults.keys())

    def get(self, key: str) -> Any:
        """Возвращает значение настройки."""

        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        return self._values.get(key)

    def validate(self, key: str, value: Any) -> Tuple[bool, str]:
        validator = self._validators.get(key)
        if not validator:
            return True, ""
        return validator.validate(value)

    def set(self, key: str, value: Any) -> None:
        """Сохраняет значение, выбрасывая ошибку при невалидных данных."""

        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)
        is_valid, error = self.validate(key, value)
        if not is_valid:
            raise SettingsValidationError(
                key=f"{self.group_name}.{key}",
                value=value,
                reason=error,
            )
        self._values[key] = value

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Заполняет значениями из словаря; неизвестные ключи игнорируются."""

        for key, value in data.items():
            if key in self._defaults:
                self.set(key, value)

    def reset_to_defaults(self) -> None:
        self._values = dict(self._defaults)


class ServerSettings(SettingsGroup):
    """Параметры HTTP-сервера."""

    group_name = "server"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "host": "0.0.0.0",
            "port": 1113,
            "cors_origins": ["*"],
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "host": RegexValidator(HOSTNAME_PATTERN),
            "port": CompositeValidator([TypeValidator(int), RangeValidator(1, 65535)]),
            "cors_origins": PredicateValidator(
                lambda value: isinstance(value, list)
                and all(isinstance(item, str) for item in value),
                "Expected a list of origin strings",
            ),
        }


class EngineSettings(SettingsGroup):
    """Подключение к Docker Engine."""

    group_name = "engine"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "type": "local",
            "socket": "unix:///var/run/docker.sock",
            "ssh_host": "",
            "ssh_username": "root",
            "ssh_port": 22,
            "timeout_sec": 60,
            "api_version": "auto",
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "type": EnumValidator(["local", "remote"]),
            "socket": TypeValidator(str),
            "ssh_host": TypeValidator(str),
            "ssh_username": TypeValidator(str),
            "ssh_port": CompositeValidator([TypeValidator(int), RangeValidator(1, 65535)]),
            "timeout_sec": CompositeValidator([TypeValidator(int), RangeValidator(1, 3600)]),
            "api_version": RegexValidator(r"^(auto|\d+\.\d+)$"),
        }


class LogsSettings(SettingsGroup):
    """Параметры потока логов контейнеров."""

    group_name = "logs"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "tail": "all",
            "timestamps": False,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "tail": PredicateValidator(
                lambda value: value == "all"
                or (isinstance(value, int) and not isinstance(value, bool) and value >= 0),
                "Expected 'all' or a non-negative integer",
            ),
            "timestamps": TypeValidator(bool),
        }


class LoggingSettings(SettingsGroup):
    """Настройки логирования приложения."""

    group_name = "logging"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "enabled": True,
            "level": "INFO",
            "max_file_size_mb": 10,
            "max_archived_files": 5,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "enabled": TypeValidator(bool),
            "level": EnumValidator(["DEBUG", "INFO", "WARNING", "ERROR"]),
            "max_file_size_mb": RangeValidator(1, 1000),
            "max_archived_files": RangeValidator(1, 50),
        }
