"""Client side of the server: posting payloads to Slack incoming webhooks."""

from .errors import (
    InvalidDestinationError,
    MissingDestinationError,
    SlackNetworkError,
    SlackRemoteError,
    SlackWebhookError,
    UnexpectedSlackResponseError,
)
from .webhook import SLACK_WEBHOOK_URL_PREFIX, SlackWebhookSender

__all__ = [
    "SLACK_WEBHOOK_URL_PREFIX",
    "SlackWebhookSender",
    "SlackWebhookError",
    "MissingDestinationError",
    "InvalidDestinationError",
    "SlackNetworkError",
    "SlackRemoteError",
    "UnexpectedSlackResponseError",
]
