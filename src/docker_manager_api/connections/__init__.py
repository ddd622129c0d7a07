"""Описание подключения к Docker Engine."""
