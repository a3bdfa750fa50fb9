"""Fetch failures raised by QuoteClient.

Each exception carries the displayable ``FetchError`` as ``.error`` so the
presenter can collapse all three into ``Failed(error)`` without inspecting
the exception type.
"""

from __future__ import annotations

from quoteday.models.schemas import ErrorKind, FetchError

# No server-provided code exists when the request never got a response.
NETWORK_ERROR_CODE = 0
NETWORK_ERROR_MESSAGE = "Could not reach the quote service"


class QuoteFetchError(Exception):
    """Base class for every way fetching the quote of the day can fail."""

    kind: ErrorKind = ErrorKind.SERVER

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.error = FetchError(code=code, message=message, kind=self.kind)

    @property
    def code(self) -> int:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message


class NetworkError(QuoteFetchError):
    """No response was received (DNS, connect, timeout, reset, TLS)."""

    kind = ErrorKind.NETWORK

    def __init__(self, message: str = NETWORK_ERROR_MESSAGE) -> None:
        super().__init__(NETWORK_ERROR_CODE, message)


class ServerError(QuoteFetchError):
    """Non-success status with a well-formed error body."""

    kind = ErrorKind.SERVER


class DecodeError(QuoteFetchError):
    """A response arrived but did not match the expected JSON shape."""

    kind = ErrorKind.DECODE
