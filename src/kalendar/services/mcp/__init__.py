"""MCP server exposing the date tools."""

from .server import build_mcp_server, run_mcp_server, server

__all__ = ["build_mcp_server", "run_mcp_server", "server"]
