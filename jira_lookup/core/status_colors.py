"""
In-memory cache of Jira status colors.
Filled by the client on first lookup of a status, read by anything rendering statuses.
"""

from typing import Optional
import threading

from jira_lookup.core.logging import get_logger

logger = get_logger(__name__)


class StatusColorCache:
    """
    Thread-safe map of status name to status category color name.

    Entries are never refreshed or evicted. Concurrent inserts for the same
    status are allowed; the last write wins, and every writer derives the
    same value from the API.
    """

    def __init__(self):
        self._colors: dict[str, str] = {}
        self._lock = threading.Lock()

    def contains(self, status: str) -> bool:
        """Check whether a status already has a color (no lock needed for read)."""
        return status in self._colors

    def get(self, status: str) -> Optional[str]:
        return self._colors.get(status)

    def add(self, status: str, color_name: str) -> None:
        """Store the color for a status."""
        with self._lock:
            self._colors[status] = color_name
        logger.debug("Cached color %r for status %r", color_name, status)

    def __len__(self) -> int:
        return len(self._colors)
