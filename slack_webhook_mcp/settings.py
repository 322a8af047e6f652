from enum import Enum
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)


class LogLevel(str, Enum):
    """Supported logging levels."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"
    NOTSET = "NOTSET"


class TestEnvironment(BaseSettings):
    """
    Test-specific environment settings.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        populate_by_name=True,
    )

    # Test configuration
    mcp_no_env_file: bool = Field(default=False, alias="MCP_NO_ENV_FILE")


class WebhookEnvironment(BaseSettings):
    """
    Webhook destination read straight from the process environment.

    The entry point exports the .env file into the process environment, so this
    sees the same value as the rest of the configuration. It is never cached.
    """

    model_config = SettingsConfigDict(extra="ignore", case_sensitive=False)

    slack_webhook_url: Optional[SecretStr] = Field(default=None)


class SettingModel(BaseSettings):
    """
    Configuration model for the Slack webhook MCP server.
    Loads values from environment variables or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # Slack webhook settings
    slack_webhook_timeout: float = Field(default=30.0, gt=0)

    # Logging settings
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_file: Optional[str] = Field(default=None)
    log_dir: str = Field(default="logs")
    log_format: str = Field(default="%(asctime)s [%(levelname)8s] %(name)s: %(message)s")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """
        Let process environment variables take priority over the .env file.
        This matches the entry point's load_dotenv() call, which does not override
        variables that are already set.
        """
        return init_settings, env_settings, dotenv_settings, file_secret_settings


_settings: Optional[SettingModel] = None
_test_env: Optional[TestEnvironment] = None


def get_settings(
    env_file: Optional[str] = ".env", no_env_file: bool = False, force_reload: bool = False, **kwargs
) -> SettingModel:
    """
    Get the global settings instance.

    Parameters
    ----------
    env_file : Optional[str], optional
        Path to the .env file, by default ".env"
    no_env_file : bool, optional
        Whether to skip loading the .env file, by default False
    force_reload : bool, optional
        Whether to force a reload of the settings, by default False
    **kwargs
        Additional settings to override

    Returns
    -------
    SettingModel
        The settings instance
    """
    global _settings

    # Check if we should skip .env loading based on test environment settings
    test_env = get_test_environment()
    if test_env.mcp_no_env_file:
        no_env_file = True

    if _settings is None or force_reload:
        actual_env_file = None if no_env_file else env_file
        _settings = SettingModel(_env_file=actual_env_file, **kwargs)
    return _settings


def get_default_webhook_url() -> Optional[str]:
    """
    Read the default webhook URL from ``SLACK_WEBHOOK_URL``.

    The environment is read on every call, never cached, so a changed variable
    applies to the next tool invocation.

    Returns
    -------
    Optional[str]
        The webhook URL, or None when the variable is unset or empty
    """
    url = WebhookEnvironment().slack_webhook_url
    if url is None:
        return None
    return url.get_secret_value() or None


def get_test_environment(force_reload: bool = False) -> TestEnvironment:
    """
    Get the test environment settings instance.

    Parameters
    ----------
    force_reload : bool, optional
        Whether to force a reload of the test environment settings, by default False

    Returns
    -------
    TestEnvironment
        The test environment settings instance
    """
    global _test_env

    if _test_env is None or force_reload:
        _test_env = TestEnvironment()
    return _test_env

