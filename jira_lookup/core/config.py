"""
Client Configuration.

This module defines the Jira connection settings using Pydantic Settings.
It loads configuration variables from environment variables and/or a .env file,
and owns the status color cache shared by every client built from it.

Attributes:
    get_settings: Returns the process-wide Settings instance, built on first use.
"""

from functools import lru_cache
from typing import Optional

from pydantic import PrivateAttr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jira_lookup.core.status_colors import StatusColorCache

# Plugin-style setting keys and the fields they read
SETTING_KEYS = {
    "jiraHost": "JIRA_HOST",
    "apiBasePath": "API_BASE_PATH",
    "username": "JIRA_USERNAME",
    "password": "JIRA_PASSWORD",
}


class Settings(BaseSettings):
    """
    Jira Settings.

    Attributes:
        JIRA_HOST: Base URL of the Jira instance (e.g. "https://jira.example.com").
        API_BASE_PATH: REST API prefix appended to the host.
        JIRA_USERNAME: Username for basic auth. When unset, JIRA_PASSWORD is
            sent as a bearer token instead.
        JIRA_PASSWORD: Password or personal access token.
        REQUEST_TIMEOUT_MS: Per-request timeout in milliseconds.
    """

    # Connection
    JIRA_HOST: str
    API_BASE_PATH: str = "/rest/api/latest"

    # Credentials
    JIRA_USERNAME: Optional[str] = None
    JIRA_PASSWORD: Optional[str] = None

    # Behaviour
    REQUEST_TIMEOUT_MS: int = 5000

    model_config = SettingsConfigDict(
        env_file=".env", env_ignore_empty=True, extra="ignore"
    )

    _status_colors: StatusColorCache = PrivateAttr(default_factory=StatusColorCache)

    @field_validator("JIRA_HOST")
    @classmethod
    def _strip_host(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("JIRA_HOST must not be empty")
        return value

    @field_validator("REQUEST_TIMEOUT_MS")
    @classmethod
    def _positive_timeout(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("REQUEST_TIMEOUT_MS must be positive")
        return value

    def get(self, key: str) -> Optional[str]:
        """
        Look up a setting by key, returning None for unknown keys.

        Accepts field names ("JIRA_HOST") as well as the plugin-style keys
        ("jiraHost", "apiBasePath", "username", "password").
        """
        key = SETTING_KEYS.get(key, key)
        if key not in type(self).model_fields:
            return None
        return getattr(self, key)

    # Status color cache

    def is_status_color_cached(self, status: str) -> bool:
        return self._status_colors.contains(status)

    def add_status_color(self, status: str, color_name: str) -> None:
        self._status_colors.add(status, color_name)

    def get_status_color(self, status: str) -> Optional[str]:
        return self._status_colors.get(status)


@lru_cache
def get_settings() -> Settings:
    """Get the global settings instance."""
    return Settings()
