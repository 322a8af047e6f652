"""MCP server exposing the ``send_slack_message`` tool."""
