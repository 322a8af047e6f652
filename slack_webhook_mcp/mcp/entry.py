"""Command-line entry point to launch the Slack webhook MCP server."""

from __future__ import annotations

import logging
import os
import pathlib
from typing import Any, Dict, Final, List, Tuple

import uvicorn
from dotenv import load_dotenv

from slack_webhook_mcp.logging.config import setup_logging_from_args
from slack_webhook_mcp.mcp.cli.models import MCPTransportType
from slack_webhook_mcp.mcp.cli.options import _parse_args
from slack_webhook_mcp.mcp.server import mcp as _server_instance
from slack_webhook_mcp.settings import get_default_webhook_url, get_settings

_LOG: Final[logging.Logger] = logging.getLogger("slack_webhook_mcp.entry")


def main(argv: list[str] | None = None) -> None:  # noqa: D401 – CLI entry
    args = _parse_args(argv)

    # Logging is configured only after the settings are known, so startup
    # messages are held until then.
    pending: List[Tuple[int, str]] = []

    # Load environment variables from .env file if not disabled.
    # Variables already set in the process environment are kept.
    if not args.no_env_file:
        env_path = pathlib.Path(args.env_file)
        if env_path.exists():
            pending.append((logging.INFO, f"Loading environment variables from {env_path.resolve()}"))
            load_dotenv(dotenv_path=env_path)
        else:
            pending.append((logging.WARNING, f"Environment file not found: {env_path.resolve()}"))

    # The command line URL is only a fallback for the environment variable
    if args.webhook_url and not os.environ.get("SLACK_WEBHOOK_URL"):
        os.environ["SLACK_WEBHOOK_URL"] = args.webhook_url
        pending.append((logging.INFO, "Using default Slack webhook URL from command line argument"))

    overrides: Dict[str, Any] = {}
    if args.timeout is not None:
        overrides["slack_webhook_timeout"] = args.timeout
    try:
        settings = get_settings(env_file=args.env_file, no_env_file=args.no_env_file, force_reload=True, **overrides)
    except Exception as e:
        setup_logging_from_args(args)
        _LOG.error(f"Failed to load configuration: {e}")
        return

    setup_logging_from_args(args, settings)
    for level, message in pending:
        _LOG.log(level, message)

    if get_default_webhook_url() is None:
        _LOG.warning("No default Slack webhook URL configured; each call must provide webhook_url")

    _LOG.info("Starting Slack webhook MCP server: transport=%s", args.transport.value)

    if args.transport in (MCPTransportType.SSE, MCPTransportType.STREAMABLE_HTTP):
        _LOG.info(f"Running HTTP server on {args.host}:{args.port}")

        if args.transport is MCPTransportType.SSE:
            app = _server_instance.sse_app(mount_path=args.mount_path)
        else:
            # streamable_http_app doesn't accept mount_path parameter
            app = _server_instance.streamable_http_app()
            if args.mount_path:
                _LOG.warning("mount-path is not supported for streamable-http transport and will be ignored")

        uvicorn.run(app, host=args.host, port=args.port)
    else:
        _LOG.info("Running stdio transport")
        _server_instance.run(transport=args.transport.value)


if __name__ == "__main__":  # pragma: no cover
    main()
