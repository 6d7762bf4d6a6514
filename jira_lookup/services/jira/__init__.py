"""
Jira integration package.
"""

from jira_lookup.services.jira.jira_client import JiraClient

__all__ = [
    "JiraClient",
]
