"""Centralized logging configuration for the Slack webhook MCP server.

Console output goes to stderr because stdout carries the MCP stdio transport.
An optional file handler writes to ``<log_dir>/<log_file>``.

Examples
--------
.. code-block:: python

    import argparse

    from slack_webhook_mcp.logging.config import add_logging_arguments, setup_logging_from_args

    parser = add_logging_arguments(argparse.ArgumentParser())
    setup_logging_from_args(parser.parse_args(["--log-level", "DEBUG"]))
"""

from __future__ import annotations

import argparse
import logging
import logging.config
import pathlib
from typing import Any, Dict, Final, Optional

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)8s] %(name)s: %(message)s"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_LOG_DIR: Final[str] = "logs"

_LOG_LEVELS: Final[list[str]] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_logging_config(
    level: str = DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None,
    log_format: Optional[str] = None,
) -> Dict[str, Any]:
    """Build a :func:`logging.config.dictConfig` dictionary.

    Parameters
    ----------
    level : str
        Level of the package logger and the handlers.
    log_file : Optional[str]
        File name to log into as well; console only when None.
    log_dir : Optional[str]
        Directory holding ``log_file``. Defaults to ``logs``.
    log_format : Optional[str]
        Format string shared by all handlers.

    Returns
    -------
    Dict[str, Any]
        The logging configuration.
    """
    level = level.upper()
    handlers: Dict[str, Any] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "stream": "ext://sys.stderr",
            "level": level,
        }
    }
    if log_file:
        log_path = pathlib.Path(log_dir or DEFAULT_LOG_DIR) / log_file
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "standard",
            "filename": str(log_path),
            "encoding": "utf-8",
            "level": level,
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": log_format or DEFAULT_LOG_FORMAT},
        },
        "handlers": handlers,
        "loggers": {
            "slack_webhook_mcp": {
                "handlers": list(handlers),
                "level": level,
                "propagate": False,
            },
            # Reduce noise from external libraries
            "uvicorn": {"handlers": ["console"], "level": "WARNING", "propagate": False},
            "slack_sdk": {"handlers": ["console"], "level": "WARNING", "propagate": False},
            "mcp": {"handlers": ["console"], "level": "WARNING", "propagate": False},
        },
        "root": {"handlers": ["console"], "level": "WARNING"},
    }


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    log_dir: Optional[str] = None,
    log_format: Optional[str] = None,
) -> None:
    """Configure logging for the whole process.

    The log directory is created when a log file is requested.
    """
    if log_file:
        pathlib.Path(log_dir or DEFAULT_LOG_DIR).mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(level, log_file, log_dir, log_format))


def add_logging_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Add the shared ``--log-*`` options to ``parser`` and return it."""
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=_LOG_LEVELS,
        help=f"Python logging level (default: LOG_LEVEL or {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="File name to also write logs into (default: LOG_FILE or console only)",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help=f"Directory for the log file (default: LOG_DIR or {DEFAULT_LOG_DIR})",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        help="Log message format (default: LOG_FORMAT or the built-in format)",
    )
    return parser


def _pick(cli_value: Optional[str], settings: Any, name: str, default: Optional[str]) -> Optional[str]:
    if cli_value is not None:
        return cli_value
    configured = getattr(settings, name, None) if settings is not None else None
    if configured is not None:
        return getattr(configured, "value", configured)
    return default


def setup_logging_from_args(args: Any, settings: Any = None) -> None:
    """Configure logging from parsed CLI options carrying the ``log_*`` fields.

    Options left unset on the command line fall back to the ``log_*`` values of
    ``settings`` (the ``LOG_*`` environment variables), then to the built-in
    defaults.
    """
    setup_logging(
        level=_pick(args.log_level, settings, "log_level", DEFAULT_LOG_LEVEL),
        log_file=_pick(args.log_file, settings, "log_file", None),
        log_dir=_pick(args.log_dir, settings, "log_dir", DEFAULT_LOG_DIR),
        log_format=_pick(args.log_format, settings, "log_format", DEFAULT_LOG_FORMAT),
    )
