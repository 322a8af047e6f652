"""Slack incoming-webhook MCP server.

Exposes a single MCP tool, ``send_slack_message``, which posts a text message
to a Slack incoming webhook.
"""

__version__ = "1.0.0"
