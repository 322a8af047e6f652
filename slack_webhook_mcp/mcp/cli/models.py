"""Pydantic models and enums for MCP server CLI options.

Examples
--------
.. code-block:: python

    from slack_webhook_mcp.mcp.cli.options import _parse_args

    opts = _parse_args(["--transport", "sse", "--port", "8080"])  # MCPServerCliOptions
    assert opts.transport.value == "sse"
"""

from __future__ import annotations

import argparse
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MCPTransportType(str, Enum):
    """MCP transport type enumeration for type safety.

    Values
    ------
    - ``stdio``: Standard input/output transport
    - ``sse``: Server-Sent Events HTTP transport
    - ``streamable-http``: Streaming HTTP transport
    """

    STDIO = "stdio"
    SSE = "sse"
    STREAMABLE_HTTP = "streamable-http"


class MCPServerCliOptions(BaseModel):
    """Validated CLI options for the MCP server entrypoint.

    Fields
    ------
    host : str
        Host to bind when using HTTP transports (default: 127.0.0.1)
    port : int
        Port to bind when using HTTP transports (default: 8000)
    transport : MCPTransportType
        MCP transport type (``stdio``, ``sse``, or ``streamable-http``)
    mount_path : str | None
        Mount path for HTTP transports (applies to SSE)
    log_level : str | None
        Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL); LOG_LEVEL when unset
    log_file : str | None
        Path to the log file (optional)
    log_dir : str | None
        Directory for log files (optional)
    log_format : str | None
        Log message format (optional)
    env_file : str
        Path to .env file for environment variable loading
    no_env_file : bool
        Disable loading .env file when True
    webhook_url : str | None
        Default Slack webhook URL fallback (overridden by .env or environment)
    timeout : float | None
        Seconds to wait for Slack per request (overrides SLACK_WEBHOOK_TIMEOUT)
    """

    host: str = "127.0.0.1"
    port: int = Field(8000, ge=1, le=65535)
    transport: MCPTransportType = Field(
        default=MCPTransportType.STDIO, description="Type of server to run (stdio, sse or streamable-http)"
    )
    mount_path: str | None = None
    log_level: str | None = None
    log_file: str | None = None
    log_dir: str | None = None
    log_format: str | None = None
    env_file: str = ".env"
    no_env_file: bool = False
    webhook_url: str | None = None
    timeout: float | None = Field(None, gt=0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def deserialize(cls, ns: argparse.Namespace) -> "MCPServerCliOptions":
        """Build a validated options object from argparse namespace.

        Parameters
        ----------
        ns : argparse.Namespace
            Parsed arguments from `argparse.ArgumentParser.parse_args()`

        Returns
        -------
        MCPServerCliOptions
            Validated and immutable CLI options object
        """
        data = {name: getattr(ns, name) for name in cls.model_fields.keys() if hasattr(ns, name)}
        return cls(**data)
