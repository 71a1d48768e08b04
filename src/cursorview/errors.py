from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    NETWORK_ERROR = "NETWORK_ERROR"
    HTTP_STATUS_ERROR = "HTTP_STATUS_ERROR"
    DECODE_ERROR = "DECODE_ERROR"
    DETAIL_FETCH_FAILED = "DETAIL_FETCH_FAILED"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


class CursorViewError(Exception):
    """Raised for all expected failure conditions of a fetch.

    Caught by FetchCoordinator.load() and turned into view state. Never
    crosses the presentation boundary: listeners only ever see an
    ``Errored`` view carrying the code, message, suggestion and
    recoverable flag.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: str = "",
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.recoverable = recoverable


class NetworkError(CursorViewError):
    """The request failed in transit or the server answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode = ErrorCode.NETWORK_ERROR,
        status_code: int | None = None,
        recoverable: bool = True,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            suggestion="Pull to refresh to try again.",
            recoverable=recoverable,
        )
        self.status_code = status_code


class DecodeError(CursorViewError):
    """The response body is not JSON or does not have the expected shape."""

    def __init__(self, message: str) -> None:
        super().__init__(
            code=ErrorCode.DECODE_ERROR,
            message=message,
            suggestion="The server returned an unexpected response.",
            recoverable=False,
        )


class DetailFetchError(CursorViewError):
    """A single item's detail could not be resolved. Never fatal to a batch."""

    def __init__(self, url: str, cause: CursorViewError) -> None:
        super().__init__(
            code=ErrorCode.DETAIL_FETCH_FAILED,
            message=f"Could not load details from {url}: {cause.message}",
            suggestion="The item is shown without details.",
            recoverable=cause.recoverable,
        )
        self.url = url
        self.cause = cause
