from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    NETWORK_ERROR = "NETWORK_ERROR"
    FETCH_FAILED = "FETCH_FAILED"
    PAGE_NOT_FOUND = "PAGE_NOT_FOUND"
    INVALID_INPUT = "INVALID_INPUT"


class FolkContextError(Exception):
    """Raised by tool handlers for all expected failure conditions.

    Caught by server.py and serialised into the MCP error response.
    Never catch this inside business logic; let it propagate to the
    MCP layer so the agent receives a structured error with a suggestion.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: str,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.recoverable = recoverable

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "suggestion": self.suggestion,
                "recoverable": self.recoverable,
            }
        }


class NetworkError(FolkContextError):
    """The site could not be reached (DNS failure, timeout, connection reset)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(
            code=ErrorCode.NETWORK_ERROR,
            message=f"Network error fetching {url}: {reason}",
            suggestion="Mainly Norfolk may be temporarily unreachable. Try again shortly.",
            recoverable=True,
        )
        self.url = url


class FetchError(FolkContextError):
    """The site answered with a non-success HTTP status."""

    def __init__(self, url: str, status_code: int) -> None:
        if status_code == 404:
            super().__init__(
                code=ErrorCode.PAGE_NOT_FOUND,
                message=f"HTTP 404 fetching {url}",
                suggestion="Check the path, or use search_folk to find the right page.",
                recoverable=False,
            )
        else:
            super().__init__(
                code=ErrorCode.FETCH_FAILED,
                message=f"HTTP {status_code} fetching {url}",
                suggestion="Mainly Norfolk may be temporarily unavailable.",
                recoverable=True,
            )
        self.url = url
        self.status_code = status_code
