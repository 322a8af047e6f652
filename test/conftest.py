"""
Global pytest configuration.

Every test runs without a ``.env`` file, without a default webhook URL in the
environment and with fresh settings caches. The ``fake_slack`` fixture replaces
Slack's incoming webhook endpoint with an in-process stand-in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pytest
from slack_sdk.webhook import WebhookResponse

import slack_webhook_mcp.settings as settings_module


@dataclass
class RecordedRequest:
    url: str
    body: Dict[str, Any]
    headers: Optional[Dict[str, str]]
    timeout: Any
    retry_handlers: Any


@dataclass
class FakeSlackWebhook:
    """Answers every POST with the configured status and body, or raises ``error``."""

    status_code: int = 200
    body: str = "ok"
    error: Optional[BaseException] = None
    requests: List[RecordedRequest] = field(default_factory=list)

    def respond(self, body: str, status_code: int = 200) -> None:
        self.body = body
        self.status_code = status_code
        self.error = None

    def fail_with(self, error: BaseException) -> None:
        self.error = error

    def client_class(self) -> type:
        fake = self

        class _DummyAsyncWebhookClient:  # noqa: D101 – minimal stub
            """Minimal stub replacing :class:`slack_sdk.webhook.async_client.AsyncWebhookClient`."""

            def __init__(self, url: str, timeout: Any = 30, retry_handlers: Any = None, **_: Any):
                self.url = url
                self.timeout = timeout
                self.retry_handlers = retry_handlers

            async def send_dict(self, body: Dict[str, Any], headers: Optional[Dict[str, str]] = None):
                fake.requests.append(
                    RecordedRequest(
                        url=self.url,
                        body=dict(body),
                        headers=headers,
                        timeout=self.timeout,
                        retry_handlers=self.retry_handlers,
                    )
                )
                if fake.error is not None:
                    raise fake.error
                return WebhookResponse(url=self.url, status_code=fake.status_code, body=fake.body, headers={})

        return _DummyAsyncWebhookClient


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the real environment and cached settings out of the tests."""
    monkeypatch.setenv("MCP_NO_ENV_FILE", "true")
    monkeypatch.delenv("SLACK_WEBHOOK_URL", raising=False)
    monkeypatch.delenv("SLACK_WEBHOOK_TIMEOUT", raising=False)
    for name in ("LOG_LEVEL", "LOG_FILE", "LOG_DIR", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings_module, "_settings", None)
    monkeypatch.setattr(settings_module, "_test_env", None)


@pytest.fixture
def fake_slack(monkeypatch: pytest.MonkeyPatch) -> FakeSlackWebhook:
    """Patch :pyclass:`AsyncWebhookClient` so no request leaves the process."""
    fake = FakeSlackWebhook()
    monkeypatch.setattr("slack_webhook_mcp.client.webhook.AsyncWebhookClient", fake.client_class())
    return fake
