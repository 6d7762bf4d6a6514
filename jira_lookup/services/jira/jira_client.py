"""A client for interacting with the JIRA API."""

import asyncio
import base64
from typing import Any, NoReturn, Optional
from urllib.parse import quote

import httpx

from jira_lookup.core.config import Settings
from jira_lookup.core.logging import get_logger
from jira_lookup.core.errors import (
    JiraApiError,
    JiraHttpStatusError,
    JiraNetworkError,
    JiraParseError,
    JiraTimeoutError,
)

logger = get_logger(__name__)


class JiraClient:
    """
    Thin async wrapper over the Jira REST API.

    Each call opens its own HTTP client, bounds the request with a timeout and
    turns the response into parsed JSON or a JiraClientError subclass.
    """

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout_ms: Optional[int] = None,
    ):
        """
        Initialize the client.

        Args:
            settings: Connection settings, also the owner of the status color cache.
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests.
            timeout_ms: Overrides settings.REQUEST_TIMEOUT_MS when given.
        """
        if timeout_ms is None:
            timeout_ms = settings.REQUEST_TIMEOUT_MS
        elif timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")

        self._settings = settings
        self._transport = transport
        self.timeout_ms = timeout_ms

    async def get_issue(self, issue_key: str) -> dict[str, Any]:
        """Fetch a JIRA issue by its key.

        Args:
            issue_key (str): The key of the JIRA issue to fetch, e.g. "PROJ-123".

        Returns:
            dict[str, Any]: The JIRA issue data, as returned by the API.
        """
        if not issue_key:
            raise ValueError("issue_key must not be empty")

        response = await self._get("get_issue", f"/issue/{quote(issue_key, safe='')}")
        return self._parse_json("get_issue", response)

    async def get_search_results(self, query: str, max_results: int) -> dict[str, Any]:
        """Run a JQL search and return the first page of results.

        Only the first page is requested (startAt=0); callers needing more
        results must raise max_results.

        Args:
            query (str): JQL expression.
            max_results (int): Maximum number of issues to return.

        Returns:
            dict[str, Any]: The search response (issues, total, ...).
        """
        if max_results < 0:
            raise ValueError("max_results must not be negative")

        params = {
            "jql": query,
            "startAt": "0",
            "maxResults": str(max_results),
        }
        response = await self._get("get_search_results", "/search", params=params)
        return self._parse_json("get_search_results", response)

    async def update_status_color_cache(self, status: str) -> None:
        """Resolve the category color of a status and store it in the settings cache.

        Does nothing if the status is already cached.

        Args:
            status (str): Workflow status name, e.g. "In Progress".
        """
        if self._settings.is_status_color_cached(status):
            return

        operation = "update_status_color_cache"
        response = await self._get(operation, f"/status/{quote(status, safe='')}")
        data = self._parse_json(operation, response)

        try:
            color_name = data["statusCategory"]["colorName"]
        except (KeyError, TypeError) as exc:
            logger.error("%s: no statusCategory.colorName in %r", operation, data)
            raise JiraParseError(
                f"The API response for status {status!r} has no status category color.",
                operation,
            ) from exc

        self._settings.add_status_color(status, color_name)

    def _build_url(self, path: str) -> str:
        return self._settings.JIRA_HOST + self._settings.API_BASE_PATH + path

    def _build_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        username = self._settings.JIRA_USERNAME
        password = self._settings.JIRA_PASSWORD

        if username:
            credentials = f"{username}:{password or ''}".encode("utf-8")
            headers["Authorization"] = "Basic " + base64.b64encode(credentials).decode("ascii")
        elif password:
            # A password without a username is a personal access token
            headers["Authorization"] = f"Bearer {password}"

        return headers

    async def _get(
        self,
        operation: str,
        path: str,
        params: Optional[dict[str, str]] = None,
    ) -> httpx.Response:
        """Issue a GET bounded by the client timeout and translate transport failures."""
        url = self._build_url(path)
        timeout = self.timeout_ms / 1000

        # The AsyncClient is closed on every exit path, including cancellation
        async with httpx.AsyncClient(transport=self._transport, timeout=timeout) as client:
            try:
                return await asyncio.wait_for(
                    client.get(url, headers=self._build_headers(), params=params),
                    timeout=timeout,
                )
            except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
                logger.error("%s: request to %s timed out", operation, url)
                raise JiraTimeoutError(operation, self.timeout_ms) from exc
            except httpx.HTTPError as exc:
                logger.error("%s: request to %s failed: %r", operation, url, exc)
                raise JiraNetworkError(operation=operation) from exc

    def _parse_json(self, operation: str, response: httpx.Response) -> Any:
        if response.status_code != 200:
            self._raise_for_error(operation, response)

        try:
            return response.json()
        except ValueError as exc:
            logger.error(
                "%s: response is not JSON (HTTP %s): %.200s",
                operation,
                response.status_code,
                response.text,
            )
            raise JiraParseError(operation=operation) from exc

    def _raise_for_error(self, operation: str, response: httpx.Response) -> NoReturn:
        logger.error(
            "%s: HTTP %s: %.500s", operation, response.status_code, response.text
        )
        try:
            body = response.json()
        except ValueError:
            raise JiraHttpStatusError(response.status_code, operation) from None

        messages = _error_messages(body)
        if not messages:
            raise JiraHttpStatusError(response.status_code, operation)
        raise JiraApiError(messages, response.status_code, operation)


def _error_messages(body: Any) -> list[str]:
    """Collect the human-readable messages of a Jira error body."""
    if not isinstance(body, dict):
        return []

    messages = []
    if isinstance(body.get("errorMessages"), list):
        messages = [str(m) for m in body["errorMessages"]]
    if not messages and isinstance(body.get("errors"), dict):
        messages = [str(m) for m in body["errors"].values()]
    return messages
