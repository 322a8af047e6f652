"""Unit tests for the MCP entry point."""

from __future__ import annotations

import logging
import os
from unittest.mock import MagicMock, patch

import pytest

from slack_webhook_mcp.mcp.entry import main as mcp_main
from slack_webhook_mcp.settings import get_default_webhook_url

WEBHOOK_URL = "https://hooks.slack.com/services/CLI/WEBHOOK/URL"


@pytest.fixture
def mock_server():
    with patch("slack_webhook_mcp.mcp.entry._server_instance") as server:
        yield server


@pytest.fixture
def mock_uvicorn():
    with patch("slack_webhook_mcp.mcp.entry.uvicorn.run") as run:
        yield run


@pytest.fixture(autouse=True)
def _no_logging_setup():
    with patch("slack_webhook_mcp.mcp.entry.setup_logging_from_args") as setup:
        yield setup


class TestEntryTransports:
    def test_stdio_is_default(self, mock_server: MagicMock, mock_uvicorn: MagicMock) -> None:
        mcp_main(["--no-env-file"])

        mock_server.run.assert_called_once_with(transport="stdio")
        mock_uvicorn.assert_not_called()

    def test_sse_runs_with_uvicorn(self, mock_server: MagicMock, mock_uvicorn: MagicMock) -> None:
        mcp_main(["--no-env-file", "--transport", "sse", "--host", "0.0.0.0", "--port", "9000", "--mount-path", "/m"])

        mock_server.sse_app.assert_called_once_with(mount_path="/m")
        mock_uvicorn.assert_called_once_with(mock_server.sse_app.return_value, host="0.0.0.0", port=9000)
        mock_server.run.assert_not_called()

    def test_streamable_http_ignores_mount_path(self, mock_server: MagicMock, mock_uvicorn: MagicMock) -> None:
        with patch("slack_webhook_mcp.mcp.entry._LOG") as mock_log:
            mcp_main(["--no-env-file", "--transport", "streamable-http", "--mount-path", "/m"])

        mock_server.streamable_http_app.assert_called_once_with()
        mock_uvicorn.assert_called_once_with(
            mock_server.streamable_http_app.return_value, host="127.0.0.1", port=8000
        )
        assert any("mount-path" in str(call.args[0]) for call in mock_log.warning.call_args_list)

    def test_logging_is_configured_from_args(
        self, _no_logging_setup: MagicMock, mock_server: MagicMock
    ) -> None:
        mcp_main(["--no-env-file", "--log-level", "DEBUG"])

        _no_logging_setup.assert_called_once()
        assert _no_logging_setup.call_args.args[0].log_level == "DEBUG"


class TestEntryConfiguration:
    def test_loads_env_file_when_present(self, tmp_path, mock_server: MagicMock) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("SLACK_WEBHOOK_TIMEOUT=12\n")

        with patch("slack_webhook_mcp.mcp.entry.load_dotenv") as mock_load_dotenv:
            mcp_main(["--env-file", str(env_file)])

        mock_load_dotenv.assert_called_once_with(dotenv_path=env_file)

    def test_warns_about_missing_env_file(self, tmp_path, mock_server: MagicMock) -> None:
        with patch("slack_webhook_mcp.mcp.entry.load_dotenv") as mock_load_dotenv:
            with patch("slack_webhook_mcp.mcp.entry._LOG") as mock_log:
                mcp_main(["--env-file", str(tmp_path / "missing.env")])

        mock_load_dotenv.assert_not_called()
        assert any(
            call.args[0] == logging.WARNING and "Environment file not found" in call.args[1]
            for call in mock_log.log.call_args_list
        )
        mock_server.run.assert_called_once()

    def test_webhook_url_argument_is_fallback(self, monkeypatch: pytest.MonkeyPatch, mock_server: MagicMock) -> None:
        monkeypatch.setenv("SLACK_WEBHOOK_URL", "")

        mcp_main(["--no-env-file", "--webhook-url", WEBHOOK_URL])

        assert os.environ["SLACK_WEBHOOK_URL"] == WEBHOOK_URL

    def test_webhook_url_argument_does_not_override_env(
        self, monkeypatch: pytest.MonkeyPatch, mock_server: MagicMock
    ) -> None:
        env_url = "https://hooks.slack.com/services/ENV/WEBHOOK/URL"
        monkeypatch.setenv("SLACK_WEBHOOK_URL", env_url)

        mcp_main(["--no-env-file", "--webhook-url", WEBHOOK_URL])

        assert os.environ["SLACK_WEBHOOK_URL"] == env_url

    def test_timeout_argument_overrides_settings(self, mock_server: MagicMock) -> None:
        with patch("slack_webhook_mcp.mcp.entry.get_settings") as mock_get_settings:
            mcp_main(["--no-env-file", "--timeout", "2.5"])

        assert mock_get_settings.call_args.kwargs["slack_webhook_timeout"] == 2.5
        assert mock_get_settings.call_args.kwargs["no_env_file"] is True

    def test_settings_load_failure_exits_early(self, mock_server: MagicMock, mock_uvicorn: MagicMock) -> None:
        with patch("slack_webhook_mcp.mcp.entry.get_settings", side_effect=Exception("Configuration load failed")):
            with patch("slack_webhook_mcp.mcp.entry._LOG") as mock_log:
                result = mcp_main(["--no-env-file"])

        assert result is None
        mock_log.error.assert_called_once()
        mock_server.run.assert_not_called()
        mock_uvicorn.assert_not_called()

    def test_warns_without_default_webhook_url(self, mock_server: MagicMock) -> None:
        with patch("slack_webhook_mcp.mcp.entry._LOG") as mock_log:
            mcp_main(["--no-env-file"])

        assert any("No default Slack webhook URL" in str(call.args[0]) for call in mock_log.warning.call_args_list)

    def test_no_warning_when_env_file_provides_webhook_url(
        self, tmp_path, monkeypatch: pytest.MonkeyPatch, mock_server: MagicMock
    ) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text(f"SLACK_WEBHOOK_URL={WEBHOOK_URL}\n")

        try:
            with patch("slack_webhook_mcp.mcp.entry._LOG") as mock_log:
                mcp_main(["--env-file", str(env_file)])
        finally:
            os.environ.pop("SLACK_WEBHOOK_URL", None)

        assert not any("No default Slack webhook URL" in str(call.args[0]) for call in mock_log.warning.call_args_list)

    def test_environment_url_wins_over_env_file(
        self, tmp_path, monkeypatch: pytest.MonkeyPatch, mock_server: MagicMock
    ) -> None:
        env_url = "https://hooks.slack.com/services/ENV/WEBHOOK/URL"
        monkeypatch.setenv("SLACK_WEBHOOK_URL", env_url)
        env_file = tmp_path / ".env"
        env_file.write_text(f"SLACK_WEBHOOK_URL={WEBHOOK_URL}\n")

        mcp_main(["--env-file", str(env_file)])

        assert os.environ["SLACK_WEBHOOK_URL"] == env_url
        assert get_default_webhook_url() == env_url


class TestEntryLogging:
    def test_logging_falls_back_to_settings(
        self, _no_logging_setup: MagicMock, monkeypatch: pytest.MonkeyPatch, mock_server: MagicMock
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        mcp_main(["--no-env-file"])

        args, settings = _no_logging_setup.call_args.args
        assert args.log_level is None
        assert settings.log_level.value == "WARNING"

    def test_logging_is_set_up_when_settings_fail(
        self, _no_logging_setup: MagicMock, mock_server: MagicMock
    ) -> None:
        with patch("slack_webhook_mcp.mcp.entry.get_settings", side_effect=Exception("bad")):
            mcp_main(["--no-env-file", "--log-level", "ERROR"])

        _no_logging_setup.assert_called_once()
        assert _no_logging_setup.call_args.args[0].log_level == "ERROR"
