"""Jira client exception hierarchy."""

from typing import Optional, Sequence


class JiraClientError(Exception):
    """Base exception for every failure raised by JiraClient."""

    def __init__(self, message: str, operation: Optional[str] = None):
        self.message = message
        self.operation = operation
        super().__init__(message)


class JiraTimeoutError(JiraClientError):
    """Raised when a request is aborted for exceeding the timeout."""

    def __init__(self, operation: Optional[str] = None, timeout_ms: Optional[int] = None):
        self.timeout_ms = timeout_ms
        message = "Request timeout"
        if timeout_ms is not None:
            message = f"Request timeout after {timeout_ms} ms"
        super().__init__(message, operation)


class JiraNetworkError(JiraClientError):
    """Raised for transport failures other than timeouts."""

    def __init__(self, message: str = "Request error", operation: Optional[str] = None):
        super().__init__(message, operation)


class JiraParseError(JiraClientError):
    """Raised when a 200 response cannot be interpreted."""

    DEFAULT_MESSAGE = (
        "The API response is not a JSON. "
        "Please check the host configured in the settings."
    )

    def __init__(self, message: str = DEFAULT_MESSAGE, operation: Optional[str] = None):
        super().__init__(message, operation)


class JiraApiError(JiraClientError):
    """Raised when Jira rejects a request and explains why."""

    def __init__(
        self,
        messages: Sequence[str],
        status_code: int,
        operation: Optional[str] = None,
    ):
        self.messages = list(messages)
        self.status_code = status_code
        super().__init__("\n".join(self.messages), operation)


class JiraHttpStatusError(JiraClientError):
    """Raised for non-200 responses without a readable error body."""

    def __init__(self, status_code: int, operation: Optional[str] = None):
        self.status_code = status_code
        super().__init__(f"HTTP status {status_code}", operation)
