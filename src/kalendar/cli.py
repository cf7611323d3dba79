from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import orjson

from .api import call_api
from .bootstrap import configure_logging
from .config import get_settings
from .services.http import run_local_server
from .services.mcp import run_mcp_server


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings().server
    parser = argparse.ArgumentParser(description="Kalendar date normalization command line interface.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    normalize_parser = subparsers.add_parser("normalize", help="Normalize a date phrase to a future UTC timestamp.")
    normalize_parser.add_argument("text", help="Date phrase, e.g. 'next friday' or 'March 5'.")
    normalize_parser.add_argument("--reference", help="ISO-8601 instant treated as now.")
    normalize_parser.add_argument("--align-with", dest="align_with", help="ISO-8601 instant supplying the time of day.")

    api_parser = subparsers.add_parser("api", help="Start the FastAPI server exposing the date tools.")
    api_parser.add_argument("--host", default=settings.host)
    api_parser.add_argument("--port", type=int, default=settings.port)

    mcp_parser = subparsers.add_parser("mcp", help="Start the FastMCP server for agent clients.")
    mcp_parser.add_argument("--host", default=settings.host)
    mcp_parser.add_argument("--port", type=int, default=settings.mcp_port)

    return parser


def _normalize(args: argparse.Namespace) -> int:
    try:
        result = call_api(
            "normalize_date",
            text=args.text,
            reference=args.reference,
            align_with=args.align_with,
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    sys.stdout.write(orjson.dumps(result, option=orjson.OPT_INDENT_2).decode("utf-8") + "\n")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging()
    logging.getLogger(__name__).debug("Kalendar CLI running %s", args.command)

    if args.command == "normalize":
        return _normalize(args)
    if args.command == "api":
        run_local_server(host=args.host, port=args.port)
    elif args.command == "mcp":
        run_mcp_server(host=args.host, port=args.port)
    else:  # pragma: no cover - argparse enforces choices
        parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
