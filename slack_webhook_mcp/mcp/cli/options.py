"""Command-line argument parsing for the Slack webhook MCP server.

Examples
--------
.. code-block:: python

    from slack_webhook_mcp.mcp.cli.options import _parse_args

    opts = _parse_args(["--transport", "sse", "--port", "8080"])  # MCPServerCliOptions
    print(opts.transport, opts.port)
"""

from __future__ import annotations

import argparse

from slack_webhook_mcp.logging.config import add_logging_arguments

from .models import MCPServerCliOptions, MCPTransportType


def _parse_args(argv: list[str] | None = None) -> MCPServerCliOptions:
    """Parse CLI args and build `MCPServerCliOptions`.

    Parameters
    ----------
    argv : list[str] | None, optional
        Argument list to parse. If None, uses sys.argv.

    Returns
    -------
    MCPServerCliOptions
        Validated immutable options for starting the MCP server.
    """
    parser = argparse.ArgumentParser(description="Run the Slack webhook MCP server")
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to when using HTTP transport (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind to when using HTTP transport (default: 8000)",
    )
    parser.add_argument(
        "--transport",
        type=str,
        default=MCPTransportType.STDIO.value,
        dest="transport",
        choices=[transport_type.value for transport_type in MCPTransportType],
        help="Transport protocol to use for MCP (stdio, sse or streamable-http; default: stdio)",
    )
    parser.add_argument(
        "--mount-path",
        default=None,
        help="Mount path for HTTP transports (unused for streamable-http transport)",
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to .env file (default: .env in current directory)",
    )
    parser.add_argument(
        "--no-env-file",
        action="store_true",
        help="Disable loading from .env file",
    )
    parser.add_argument(
        "--webhook-url",
        default=None,
        help="Default Slack webhook URL (fallback if not set in .env file or SLACK_WEBHOOK_URL environment variable)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for Slack on each request (default: SLACK_WEBHOOK_TIMEOUT or 30)",
    )

    # Add centralized logging arguments
    parser = add_logging_arguments(parser)

    return MCPServerCliOptions.deserialize(parser.parse_args(argv))
