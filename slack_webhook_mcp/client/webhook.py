"""Posting messages to Slack incoming webhooks.

The :class:`SlackWebhookSender` turns a :class:`~slack_webhook_mcp.model.SendRequest`
into exactly one HTTP POST and classifies Slack's answer into a
:class:`~slack_webhook_mcp.model.SendResult`. It never raises for a failed
send: every failure comes back as ``SendResult(success=False, error=...)``.

Usage Examples
==============

.. code-block:: python

    import asyncio

    from slack_webhook_mcp.client.webhook import SlackWebhookSender
    from slack_webhook_mcp.model import SendRequest

    async def main():
        sender = SlackWebhookSender(timeout=10)
        result = await sender.send(
            SendRequest.build("*Deploy finished*"),
            default_url="https://hooks.slack.com/services/T000/B000/XXXX",
        )
        print(result.success, result.timestamp or result.error)

    asyncio.run(main())
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Final, Optional

from slack_sdk.webhook import WebhookResponse
from slack_sdk.webhook.async_client import AsyncWebhookClient

from slack_webhook_mcp.model import MessageFormat, SendRequest, SendResult

from .errors import (
    SLACK_WEBHOOK_URL_PREFIX,
    InvalidDestinationError,
    MissingDestinationError,
    SlackNetworkError,
    SlackRemoteError,
    SlackWebhookError,
    UnexpectedSlackResponseError,
)

__all__: list[str] = [
    "SLACK_WEBHOOK_URL_PREFIX",
    "SlackWebhookSender",
    "build_payload",
    "mask_webhook_url",
]

_LOG: Final[logging.Logger] = logging.getLogger(__name__)

DEFAULT_TIMEOUT: Final[float] = 30.0


def build_payload(request: SendRequest) -> Dict[str, Any]:
    """Build the JSON body posted to the webhook.

    ``mrkdwn`` is only present for markdown messages; plain text messages omit
    the field rather than sending ``false``.
    """
    payload: Dict[str, Any] = {"text": request.message}
    if request.format is MessageFormat.MARKDOWN:
        payload["mrkdwn"] = True
    return payload


def mask_webhook_url(url: str) -> str:
    """Hide the secret path of a webhook URL for log output."""
    if url.startswith(SLACK_WEBHOOK_URL_PREFIX):
        return f"{SLACK_WEBHOOK_URL_PREFIX}***"
    return "<non-slack url>"


class SlackWebhookSender:
    """Send messages to Slack incoming webhooks, one HTTP attempt per call.

    The sender holds no mutable state, so one instance may serve concurrent
    tool invocations.

    Parameters
    ----------
    timeout : float
        Seconds to wait for Slack before the request counts as a network error.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT):
        self.timeout = timeout

    async def send(self, request: SendRequest, default_url: Optional[str] = None) -> SendResult:
        """Post ``request`` to its destination and classify the outcome.

        Parameters
        ----------
        request : SendRequest
            The message, its optional destination override and its format.
        default_url : Optional[str]
            Webhook URL used when the request names no destination.

        Returns
        -------
        SendResult
            ``success=True`` with a capture timestamp when Slack answered 2xx
            with body ``ok``; otherwise ``success=False`` with a description.
        """
        try:
            url = self._resolve_destination(request, default_url)
            await self._post(url, build_payload(request))
        except SlackWebhookError as e:
            _LOG.warning("Slack webhook send failed: %s", e)
            return SendResult.fail(str(e))
        return SendResult.ok(datetime.now(timezone.utc))

    @staticmethod
    def _resolve_destination(request: SendRequest, default_url: Optional[str]) -> str:
        url = request.destination or default_url
        if not url:
            raise MissingDestinationError()
        if not url.startswith(SLACK_WEBHOOK_URL_PREFIX):
            raise InvalidDestinationError()
        return url

    async def _post(self, url: str, payload: Dict[str, Any]) -> None:
        # Retry handlers are disabled: a send is exactly one attempt.
        # slack_sdk sends the body as JSON with its own Content-Type header.
        client = AsyncWebhookClient(url=url, timeout=self.timeout, retry_handlers=[])
        _LOG.debug("Posting message to Slack webhook %s", mask_webhook_url(url))
        try:
            response: WebhookResponse = await client.send_dict(payload)
        except Exception as e:
            raise SlackNetworkError(e) from e

        body = response.body if response.body is not None else ""
        if not 200 <= response.status_code < 300:
            raise SlackRemoteError(response.status_code, body)
        if body != "ok":
            raise UnexpectedSlackResponseError(body)
        _LOG.debug("Slack webhook accepted the message (status %s)", response.status_code)
