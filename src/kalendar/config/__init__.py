"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AppSettings, LoggingSettings, ServerSettings, get_settings

__all__ = ["AppSettings", "LoggingSettings", "ServerSettings", "get_settings"]
