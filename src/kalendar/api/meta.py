from __future__ import annotations

from typing import Any, Dict, List

from .registry import get_api_functions, register_api


@register_api(
    "list_available_tools",
    description="List all deterministic API functions with descriptions, categories, and parameters.",
    category="meta",
    tags=("tools", "metadata"),
)
def list_available_tools() -> Dict[str, List[Dict[str, Any]]]:
    return {"tools": [func.summary() for func in get_api_functions()]}
