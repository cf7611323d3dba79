"""HTTP services for Kalendar."""

from .server import app, invoke_api_function, list_api_functions, run_local_server

__all__ = [
    "app",
    "list_api_functions",
    "invoke_api_function",
    "run_local_server",
]
