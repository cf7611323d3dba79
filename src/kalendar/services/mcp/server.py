from __future__ import annotations

import logging
from typing import Iterable, Optional

from fastmcp import FastMCP

from ...api import ApiFunction, get_api_functions

INSTRUCTIONS = (
    "Kalendar MCP server exposes deterministic date tools. Use normalize_date to turn "
    "phrases like 'next friday' or 'March 5' into future ISO-8601 UTC timestamps. "
    "Pass the conversation's current instant as `reference` so results are reproducible."
)

logger = logging.getLogger(__name__)


def build_mcp_server(functions: Optional[Iterable[ApiFunction]] = None) -> FastMCP:
    """Create a FastMCP server with one tool per registered API function."""

    mcp = FastMCP(name="kalendar", instructions=INSTRUCTIONS)
    for api_function in functions if functions is not None else get_api_functions():
        logger.debug("Registering MCP tool: %s (%s)", api_function.name, api_function.category)
        mcp.tool(
            api_function.func,
            name=api_function.name,
            description=api_function.description,
            tags={api_function.category, *api_function.tags},
        )
    return mcp


server = build_mcp_server()


def run_mcp_server(host: str = "127.0.0.1", port: int = 8765) -> None:
    import asyncio

    logger.info("Serving Kalendar MCP tools on %s:%s", host, port)
    asyncio.run(server.run_streamable_http_async(host=host, port=port))
