"""Public API surface for HTTP, MCP and agent tool calling."""

from __future__ import annotations

from .registry import ApiFunction, call_api, get_api_functions, register_api

# Import tool modules so decorators run at module import time.
from . import meta, normalize  # noqa: F401

__all__ = ["ApiFunction", "call_api", "get_api_functions", "register_api"]
