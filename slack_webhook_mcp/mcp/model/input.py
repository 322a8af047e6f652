"""Data models for Slack webhook MCP tool input."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from slack_webhook_mcp.model import SendRequest

__all__: list[str] = ["SlackWebhookMessageInput"]


class SlackWebhookMessageInput(BaseModel):
    """
    Structured input for :pydata:`send_slack_message`.

    :param message: the text content of the message, must not be empty
    :param webhook_url: the incoming webhook URL to post to (optional, default to ``None``)
        If not provided, the ``SLACK_WEBHOOK_URL`` environment variable is used.
    :param format: ``text`` or ``markdown`` (optional, default to ``markdown``)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    message: str = Field(min_length=1)
    webhook_url: Optional[str] = None
    format: Literal["text", "markdown"] = "markdown"

    def to_request(self) -> SendRequest:
        return SendRequest.build(self.message, destination=self.webhook_url, format=self.format)
