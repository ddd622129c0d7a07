"""Валидаторы значений конфигурации."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List, Optional, Pattern, Tuple


class Validator(ABC):
    """Абстрактный валидатор значения."""

    @abstractmethod
    def validate(self, value: Any) -> Tuple[bool, str]:
        """Возвращает (True, \"\") при успехе либо (False, описание ошибки)."""


class TypeValidator(Validator):
    """Проверяет, что значение принадлежит типу или набору типов."""

    def __init__(self, expected_type: type | Tuple[type, ...]) -> None:
        self.expected_type = expected_type

    def validate(self, value: Any) -> Tuple[bool, str]:
        # bool является подклассом int, но порт True не имеет смысла
        if isinstance(value, bool) and self.expected_type is int:
            return False, "Expected value of type int, got bool"
        if isinstance(value, self.expected_type):
            return True, ""
        if isinstance(self.expected_type, tuple):
            expected = ", ".join(t.__name__ for t in self.expected_type)
        else:
            expected = self.expected_type.__name__
        return False, f"Expected value of type {expected}, got {type(value).__name__}"


class RangeValidator(Validator):
    """Контролирует принадлежность числа диапазону."""

    def __init__(self, min_value: Optional[int] = None, max_value: Optional[int] = None) -> None:
        self.min_value = min_value
        self.max_value = max_value

    def validate(self, value: Any) -> Tuple[bool, str]:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False, f"Expected a number, got {type(value).__name__}"
        if (self.min_value is not None and value < self.min_value) or (
            self.max_value is not None and value > self.max_value
        ):
            return False, f"Value {value} is out of range [{self.min_value}, {self.max_value}]"
        return True, ""


class EnumValidator(Validator):
    """Проверяет, что значение принадлежит конечному набору."""

    def __init__(self, allowed_values: Iterable[Any]) -> None:
        self.allowed_values = list(allowed_values)

    def validate(self, value: Any) -> Tuple[bool, str]:
        if value in self.allowed_values:
            return True, ""
        return False, f"Value {value!r} not in allowed values: {self.allowed_values}"


class RegexValidator(Validator):
    """Проверяет строку по регулярному выражению."""

    def __init__(self, pattern: str | Pattern[str]) -> None:
        self.pattern: Pattern[str] = re.compile(pattern) if isinstance(pattern, str) else pattern

    def validate(self, value: Any) -> Tuple[bool, str]:
        if not isinstance(value, str):
            return False, "RegexValidator expects string values"
        if self.pattern.fullmatch(value):
            return True, ""
        return False, f"Value '{value}' does not match pattern {self.pattern.pattern!r}"


class PredicateValidator(Validator):
    """Оборачивает произвольную проверку с заданным текстом ошибки."""

    def __init__(self, predicate: Callable[[Any], bool], reason: str) -> None:
        self.predicate = predicate
        self.reason = reason

    def validate(self, value: Any) -> Tuple[bool, str]:
        if self.predicate(value):
            return True, ""
        return False, self.reason


class CompositeValidator(Validator):
    """Комбинирует несколько валидаторов и возвращает первую ошибку."""

    def __init__(self, validators: Iterable[Validator]) -> None:
        self.validators: List[Validator] = list(validators)

    def validate(self, value: Any) -> Tuple[bool, str]:
        for validator in self.validators:
            is_valid, error = validator.validate(value)
            if not is_valid:
                return False, error
        return True, ""
