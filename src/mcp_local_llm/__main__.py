"""CLI entry point for mcp-local-llm.

This module provides the command-line interface for starting the server.
It can be invoked as `mcp-local-llm` (via the script entry point) or
`python -m mcp_local_llm`. By default it speaks MCP over stdio; --http
serves the FastAPI application instead.
"""

import argparse
import asyncio
import logging
import sys

import uvicorn

from mcp_local_llm import __version__, create_app
from mcp_local_llm.config import LocalLLMSettings
from mcp_local_llm.mcp_server import run_stdio


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcp-local-llm",
        description="Delegate text-processing tools to a local LLM",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"mcp-local-llm {__version__}",
    )

    parser.add_argument(
        "--http",
        action="store_true",
        help="Serve the HTTP API with uvicorn instead of MCP over stdio",
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind the HTTP server to (default: 127.0.0.1, can be set via LOCAL_LLM_HOST)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind the HTTP server to (default: 8000, can be set via LOCAL_LLM_PORT)",
    )

    parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="Backend URL (default: http://localhost:11434/v1, can be set via LOCAL_LLM_BASE_URL)",
    )

    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="Default model (default: qwen2.5-coder:7b, can be set via LOCAL_LLM_MODEL)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO, can be set via LOCAL_LLM_LOG_LEVEL)",
    )

    return parser


def build_settings(args: argparse.Namespace) -> LocalLLMSettings:
    """Build settings; CLI args override environment variables."""
    settings_kwargs = {}
    if args.host is not None:
        settings_kwargs["host"] = args.host
    if args.port is not None:
        settings_kwargs["port"] = args.port
    if args.base_url is not None:
        settings_kwargs["base_url"] = args.base_url
    if args.model is not None:
        settings_kwargs["model"] = args.model
    if args.log_level is not None:
        settings_kwargs["log_level"] = args.log_level

    return LocalLLMSettings(**settings_kwargs)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the mcp-local-llm CLI."""
    args = build_parser().parse_args(argv)
    settings = build_settings(args)

    # Stdout is the MCP transport
    logging.basicConfig(
        level=settings.log_level.upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.http:
        uvicorn.run(
            create_app(settings=settings),
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
    else:
        asyncio.run(run_stdio(settings))


if __name__ == "__main__":
    sys.exit(main())
