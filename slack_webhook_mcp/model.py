"""Value types shared by the webhook sender and the MCP tool adapter."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator

__all__: list[str] = [
    "MessageFormat",
    "SendRequest",
    "SendResult",
]


class MessageFormat(str, Enum):
    """Formatting mode of the posted message."""

    TEXT = "text"
    MARKDOWN = "markdown"


@dataclass(frozen=True, slots=True, kw_only=True)
class SendRequest:
    """
    A single message to deliver through a Slack incoming webhook.

    :param message: the text content of the message
    :param destination: the webhook URL overriding the configured default (optional, default to ``None``)
    :param format: how Slack should render ``message`` (optional, default to ``markdown``)
    """

    message: str
    destination: str | None = None
    format: MessageFormat = MessageFormat.MARKDOWN

    def __post_init__(self) -> None:
        if not self.message:
            raise ValueError("The message to send must not be empty.")

    @classmethod
    def build(
        cls,
        message: str,
        destination: str | None = None,
        format: MessageFormat | str | None = None,
    ) -> "SendRequest":
        """Normalize raw tool arguments into a request.

        An empty ``destination`` counts as unset so that the configured default
        webhook URL applies, and a missing ``format`` falls back to markdown.
        """
        return cls(
            message=message,
            destination=destination or None,
            format=MessageFormat(format) if format is not None else MessageFormat.MARKDOWN,
        )


class SendResult(BaseModel):
    """Outcome of one webhook send.

    Exactly one of ``timestamp`` (on success) or ``error`` (on failure) is set.
    The timestamp is the instant the success was observed locally; Slack's
    webhook endpoint does not return one.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    success: bool
    timestamp: Optional[datetime] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def _check_outcome_fields(self) -> "SendResult":
        if self.success and (self.timestamp is None or self.error is not None):
            raise ValueError("A successful result carries a timestamp and no error.")
        if not self.success and (self.error is None or self.timestamp is not None):
            raise ValueError("A failed result carries an error and no timestamp.")
        return self

    @classmethod
    def ok(cls, timestamp: datetime) -> "SendResult":
        return cls(success=True, timestamp=timestamp)

    @classmethod
    def fail(cls, error: str) -> "SendResult":
        return cls(success=False, error=error)
