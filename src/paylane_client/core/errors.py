"""
Exceptions raised by the PayLane REST client.
"""

from __future__ import annotations

__all__ = [
    "ConfigError",
    "HttpCallError",
    "PaylaneError",
    "ServerConnectionError",
    "UnknownOperationError",
]


class PaylaneError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(PaylaneError):
    """Raised when the supplied configuration is invalid."""


class ServerConnectionError(PaylaneError):
    """Raised when no HTTP response could be obtained from the API server."""

    def __init__(self, api_url: str) -> None:
        super().__init__(f"API server at: {api_url} seems to be away")
        self.api_url = api_url


class HttpCallError(PaylaneError):
    """Raised when the API answers with one of the error status codes."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"API responded with an error: [{status_code}] {reason}")
        self.status_code = status_code
        self.reason = reason


class UnknownOperationError(PaylaneError, KeyError):
    """Raised when an operation name is not part of the operation table."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown operation '{self.name}'"
