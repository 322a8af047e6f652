"""Failure kinds of a webhook send.

These exceptions never leave :class:`~slack_webhook_mcp.client.webhook.SlackWebhookSender`;
it converts them into a failed :class:`~slack_webhook_mcp.model.SendResult` whose
``error`` is the exception message.
"""

from __future__ import annotations

from typing import Final

__all__: list[str] = [
    "SlackWebhookError",
    "MissingDestinationError",
    "InvalidDestinationError",
    "SlackNetworkError",
    "SlackRemoteError",
    "UnexpectedSlackResponseError",
]

SLACK_WEBHOOK_URL_PREFIX: Final[str] = "https://hooks.slack.com/services/"


class SlackWebhookError(Exception):
    """Base class of every webhook send failure."""


class MissingDestinationError(SlackWebhookError):
    """Neither the request nor the configuration names a webhook URL."""

    def __init__(self) -> None:
        super().__init__(
            "No webhook URL provided. Please set SLACK_WEBHOOK_URL environment variable "
            "or provide webhook_url parameter."
        )


class InvalidDestinationError(SlackWebhookError):
    """The resolved webhook URL is not a Slack incoming webhook."""

    def __init__(self) -> None:
        super().__init__(f"Invalid webhook URL format. URL must start with {SLACK_WEBHOOK_URL_PREFIX}")


class SlackNetworkError(SlackWebhookError):
    """The HTTP exchange with Slack could not be completed."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Network error: {str(cause) or type(cause).__name__}")


class SlackRemoteError(SlackWebhookError):
    """Slack answered with a non-2xx HTTP status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Slack API error ({status_code}): {body}")


class UnexpectedSlackResponseError(SlackWebhookError):
    """Slack answered 2xx but the body was not the literal ``ok``."""

    def __init__(self, body: str) -> None:
        self.body = body
        super().__init__(f"Unexpected response from Slack: {body}")
