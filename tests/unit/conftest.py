"""Unit-test conftest — MockQuoteClient, payload builders, and HTTP fakes.

All fixtures here are available to every test under tests/unit/ without import.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from quoteday.models.schemas import Quote
from quoteday.tools.quote_client import QuoteClient


# ─────────────────────────────────────────────────────────────────────────────
# MockQuoteClient — drop-in replacement for QuoteClient
# ─────────────────────────────────────────────────────────────────────────────

class MockQuoteClient:
    """Configurable fake QuoteClient for presenter tests.

    Args:
        quote:   Quote returned by fetch_quote_of_day (default: a fixed sample).
        raises:  If set, fetch_quote_of_day raises this after any delay/gate.
        delay:   Seconds to sleep before resolving.
        gate:    If set, fetch_quote_of_day blocks until the event is set.
    """

    def __init__(
        self,
        *,
        quote: Quote | None = None,
        raises: BaseException | None = None,
        delay: float = 0.0,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.quote = quote or Quote(
            text="Mock quote",
            author="Mock Author",
            background_image_url="https://example.com/bg.jpg",
        )
        self.raises = raises
        self.delay = delay
        self.gate = gate
        # Call counter for assertion
        self.fetch_calls: int = 0

    async def fetch_quote_of_day(self) -> Quote:
        self.fetch_calls += 1
        if self.delay > 0:
            await asyncio.sleep(self.delay)
        if self.gate is not None:
            await self.gate.wait()
        if self.raises:
            raise self.raises
        return self.quote

    async def close(self) -> None:
        pass


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────

def quote_payload(*entries: dict[str, Any]) -> dict[str, Any]:
    """Build a quotes.rest success body from quote entries."""
    return {"contents": {"quotes": list(entries)}}


def error_payload(code: int, message: str) -> dict[str, Any]:
    return {"error": {"code": code, "message": message}}


def client_for(
    handler: Callable[[httpx.Request], httpx.Response],
    base_url: str = "https://quotes.rest",
) -> QuoteClient:
    """A real QuoteClient whose network layer is ``handler``."""
    return QuoteClient(base_url=base_url, transport=httpx.MockTransport(handler))


def respond(status: int, **kwargs: Any) -> Callable[[httpx.Request], httpx.Response]:
    """Handler that answers every request with the same response."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, **kwargs)

    return handler


# ─────────────────────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────────────────────

@pytest.fixture
def sample_entry() -> dict[str, Any]:
    """One quote as quotes.rest sends it, including keys we ignore."""
    return {
        "quote": "The best way to predict the future is to invent it.",
        "author": "Alan Kay",
        "background": "https://theysaidso.com/img/qod/qod-inspire.jpg",
        "length": 51,
        "tags": ["future", "inspire"],
        "id": "abc123",
    }


@pytest.fixture
def mock_client():
    """A MockQuoteClient with an instant successful response."""
    return MockQuoteClient()


@pytest.fixture
def mock_client_failing():
    """A MockQuoteClient whose fetch always raises a ServerError."""
    from quoteday.tools.errors import ServerError

    return MockQuoteClient(raises=ServerError(403, "Too many requests"))


@pytest.fixture
def make_mock_client() -> Callable[..., MockQuoteClient]:
    """Factory for MockQuoteClient with custom behaviour."""
    return MockQuoteClient


@pytest.fixture
def make_quote_client() -> Callable[..., QuoteClient]:
    """Factory: ``make_quote_client(handler)`` → QuoteClient over MockTransport."""
    return client_for


@pytest.fixture
def payloads():
    """Body builders: ``payloads.quotes(entry, ...)`` and ``payloads.error(code, msg)``."""

    class _Payloads:
        quotes = staticmethod(quote_payload)
        error = staticmethod(error_payload)
        respond = staticmethod(respond)

    return _Payloads
