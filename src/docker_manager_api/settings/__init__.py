"""Конфигурация сервиса (config.json)."""
