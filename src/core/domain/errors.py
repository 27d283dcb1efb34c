"""Errors raised while querying DevStats.

All of them are terminal for the single query: no retry, no fallback.
"""

from __future__ import annotations


class DevStatsError(Exception):
    """Base class for query failures."""


class RequestFailed(DevStatsError):
    """Transport-level failure (DNS, connection, TLS, timeout)."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"HTTP request failed: {detail}")
        self.detail = detail


class ParseFailed(DevStatsError):
    """Body matched neither the success nor the error payload shape."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Failed to parse response: {detail}")
        self.detail = detail


class ApiError(DevStatsError):
    """The server reported an application-level error."""

    def __init__(self, message: str) -> None:
        super().__init__(f"API error: {message}")
        self.message = message
