from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from platformdirs import user_log_dir

load_dotenv()

APP_NAME = "Kalendar"
APP_AUTHOR = "EliteBallKalendar"


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    directory: Path


@dataclass(frozen=True)
class ServerSettings:
    host: str
    port: int
    mcp_port: int


@dataclass(frozen=True)
class AppSettings:
    logging: LoggingSettings
    server: ServerSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    logging_settings = LoggingSettings(
        level=os.getenv("KALENDAR_LOG_LEVEL", "INFO").upper(),
        directory=Path(os.getenv("KALENDAR_LOG_DIR") or user_log_dir(APP_NAME, APP_AUTHOR)),
    )

    server = ServerSettings(
        host=os.getenv("KALENDAR_API_HOST", "127.0.0.1"),
        port=_int_from_env("KALENDAR_API_PORT", 8000),
        mcp_port=_int_from_env("KALENDAR_MCP_PORT", 8765),
    )

    return AppSettings(logging=logging_settings, server=server)
