"""
Configuration, errors, logging and caching shared by the Jira client.
"""

from jira_lookup.core.errors import (
    JiraApiError,
    JiraClientError,
    JiraHttpStatusError,
    JiraNetworkError,
    JiraParseError,
    JiraTimeoutError,
)

__all__ = [
    "JiraClientError",
    "JiraTimeoutError",
    "JiraNetworkError",
    "JiraParseError",
    "JiraApiError",
    "JiraHttpStatusError",
]
