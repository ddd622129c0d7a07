"""Адаптер Docker Engine: обращения к демону через docker SDK."""
