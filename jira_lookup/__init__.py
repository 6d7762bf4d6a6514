"""
Async client for the Jira REST API: issue lookup, JQL search and status colors.
"""

from jira_lookup.core.config import Settings, get_settings
from jira_lookup.services.jira import JiraClient

__all__ = [
    "Settings",
    "get_settings",
    "JiraClient",
]
