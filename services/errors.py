"""
Failure types raised by the upstream Clash of Clans client.
"""

from typing import Any, Optional


class UpstreamError(Exception):
    """Base class for every failed upstream call."""

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.message = message
        self.url = url

    @property
    def payload(self) -> Any:
        """What gets relayed to the local caller as the envelope error."""
        return self.message


class UpstreamNetworkError(UpstreamError):
    """The upstream could not be reached or returned an unreadable body."""


class UpstreamTimeoutError(UpstreamError):
    """The upstream did not answer within the configured timeout."""


class UpstreamStatusError(UpstreamError):
    """The upstream answered with a non-2xx status."""

    def __init__(self, status_code: int, body: Optional[Any], url: str):
        super().__init__(f"Request failed with status code {status_code}", url)
        self.status_code = status_code
        self.body = body

    @property
    def payload(self) -> Any:
        # Structured upstream error bodies win over the generic message
        if self.body is not None:
            return self.body
        return self.message
