"""Slack webhook MCP tool implementation using FastMCP.

This module registers the ``send_slack_message`` tool on the shared
:pydata:`FastMCP` instance. The tool validates its arguments, hands them to
:class:`~slack_webhook_mcp.client.webhook.SlackWebhookSender` and renders the
:class:`~slack_webhook_mcp.model.SendResult` into a single text line, flagging
the response as an error when the send failed.
"""

from __future__ import annotations

import logging
from typing import Annotated, Final, Literal, Optional

from mcp.types import CallToolResult, TextContent
from pydantic import Field, ValidationError

from slack_webhook_mcp.client.webhook import SlackWebhookSender
from slack_webhook_mcp.mcp.app import mcp_factory
from slack_webhook_mcp.mcp.model.input import SlackWebhookMessageInput
from slack_webhook_mcp.model import SendResult
from slack_webhook_mcp.settings import get_default_webhook_url, get_settings

__all__: list[str] = [
    "mcp",
    "send_slack_message",
    "render_send_result",
]

_LOG: Final[logging.Logger] = logging.getLogger(__name__)

mcp = mcp_factory.get()


def _text_result(text: str, is_error: bool) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


def _format_validation_error(error: ValidationError) -> str:
    details = "; ".join(
        f"{'.'.join(str(part) for part in detail['loc']) or 'input'}: {detail['msg']}" for detail in error.errors()
    )
    return f"Invalid arguments: {details}"


def render_send_result(result: SendResult) -> CallToolResult:
    """Render a send outcome as the tool response.

    Parameters
    ----------
    result : SendResult
        Outcome returned by the webhook sender.

    Returns
    -------
    CallToolResult
        One text line; ``isError`` is set exactly when the send failed.
    """
    if result.success:
        text = "Message sent successfully to Slack"
        if result.timestamp is not None:
            text += f" at {result.timestamp.isoformat(timespec='milliseconds').replace('+00:00', 'Z')}"
        return _text_result(text, is_error=False)
    return _text_result(f"Failed to send message: {result.error}", is_error=True)


def _build_sender() -> SlackWebhookSender:
    return SlackWebhookSender(timeout=get_settings().slack_webhook_timeout)


@mcp.tool("send_slack_message")
async def send_slack_message(
    message: Annotated[str, Field(description="The message text to send to Slack")],
    webhook_url: Annotated[Optional[str], Field(description="Override the default webhook URL")] = None,
    format: Annotated[
        Literal["text", "markdown"], Field(description='Message format - "text" or "markdown"')
    ] = "markdown",
) -> CallToolResult:
    """Send a message to Slack through an incoming webhook.

    Parameters
    ----------
    message
        The text to post. Slack ``mrkdwn`` syntax is rendered unless *format* is ``text``.
    webhook_url
        Incoming webhook URL overriding the ``SLACK_WEBHOOK_URL`` environment variable.
    format
        ``markdown`` (default) or ``text``.

    Returns
    -------
    CallToolResult
        A single human-readable line, flagged as an error if the message was not delivered.
    """
    try:
        input_params = SlackWebhookMessageInput(message=message, webhook_url=webhook_url, format=format)
    except ValidationError as e:
        _LOG.warning("Rejected send_slack_message call: %s", e)
        return _text_result(_format_validation_error(e), is_error=True)

    try:
        result = await _build_sender().send(input_params.to_request(), default_url=get_default_webhook_url())
    except Exception as e:
        _LOG.exception("Tool error while sending Slack message")
        return _text_result(f"Error: {e}", is_error=True)
    return render_send_result(result)


# ---------------------------------------------------------------------------
# Guidance prompt for LLMs
# ---------------------------------------------------------------------------


@mcp.prompt("send_slack_message_usage")
def _send_slack_message_usage() -> str:  # noqa: D401 – imperative style acceptable for prompt
    """Explain when and how to invoke the ``send_slack_message`` tool."""

    return (
        "Use `send_slack_message` whenever you need to post a notification to the Slack "
        "channel behind an incoming webhook. Typical scenarios include:\n"
        " • Reporting the outcome of a build, deployment or long-running task.\n"
        " • Sending a summary once an automated job has finished.\n\n"
        "Input guidelines:\n"
        " • **message**     — The text to post. Must not be empty.\n"
        " • **webhook_url** — *Optional.* A `https://hooks.slack.com/services/...` URL; "
        "defaults to the SLACK_WEBHOOK_URL environment variable.\n"
        " • **format**      — *Optional.* `markdown` (default) renders Slack mrkdwn such as "
        "`*bold*` and `_italic_`; `text` posts the message as-is.\n\n"
        "The tool answers with one line. If the response is flagged as an error, the message "
        "was not delivered; surface the reason to the user instead of retrying blindly."
    )
