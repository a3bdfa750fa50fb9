"""Async client for the quotes.rest quote-of-the-day endpoint.

    GET {base_url}/qod?language=en

Success bodies carry ``contents.quotes[0]``; failures carry ``error.{code,message}``.
Every call is an independent request: no retries, no caching.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import ValidationError

from quoteday.config import settings
from quoteday.models.schemas import ErrorResponse, Quote, QuoteOfDayResponse
from quoteday.tools.errors import DecodeError, NetworkError, ServerError
from quoteday.utils import get_logger

logger = get_logger("quote_client")

QOD_PATH = "/qod"

# How much of a response body ends up in debug logs
_BODY_PREVIEW = 500

# Status is unknown when the transport itself fails to decode the body
_NO_STATUS = 0

_UNREADABLE_BODY_MESSAGE = "The quote service sent a response we could not read"


async def _log_request(request: httpx.Request) -> None:
    logger.debug("quote_request", method=request.method, url=str(request.url))


async def _log_response(response: httpx.Response) -> None:
    logger.debug("quote_response", status=response.status_code, url=str(response.request.url))


class QuoteClient:
    """Async client for the quote of the day.

    One shared httpx client per instance, created lazily and closed by
    ``close()`` or by leaving ``async with``. Pass ``transport`` to swap the
    network layer (tests use ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str | None = None,
        language: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.quotes_api_url).rstrip("/")
        self.language = language or settings.quotes_language
        self.timeout = timeout if timeout is not None else settings.quotes_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                follow_redirects=True,
                transport=self._transport,
                event_hooks={"request": [_log_request], "response": [_log_response]},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> QuoteClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def fetch_quote_of_day(self) -> Quote:
        """Fetch today's quote.

        Returns:
            The first quote of ``contents.quotes``, fields copied verbatim

        Raises:
            NetworkError: no response received
            ServerError: non-success status with a readable error body
            DecodeError: any response that does not match the expected shape,
                including a body whose Content-Encoding does not decode
        """
        response = await self._get()

        if response.is_success:
            quote = self._decode_quote(response)
            logger.info("quote_fetched", author=quote.author)
            return quote

        error = self._decode_error(response)
        logger.warning(
            "quote_fetch_failed",
            kind="server",
            status=response.status_code,
            code=error.code,
            message=error.message,
        )
        raise error

    async def _get(self) -> httpx.Response:
        """Send the GET and read the body, sorting transport failures.

        The body is read separately from the send so a Content-Encoding
        failure can still report the status that came with it.
        """
        client = await self._get_client()
        request = client.build_request("GET", QOD_PATH, params={"language": self.language})
        try:
            response = await client.send(request, stream=True)
        except httpx.DecodingError as e:
            logger.warning("quote_fetch_failed", kind="decode", error=str(e))
            raise DecodeError(_NO_STATUS, _UNREADABLE_BODY_MESSAGE) from e
        except httpx.RequestError as e:
            logger.warning("quote_fetch_failed", kind="network", error=str(e))
            raise NetworkError() from e

        try:
            body = await response.aread()
        except httpx.DecodingError as e:
            logger.warning("quote_fetch_failed", kind="decode", status=response.status_code, error=str(e))
            raise DecodeError(response.status_code, _UNREADABLE_BODY_MESSAGE) from e
        except httpx.TransportError as e:
            logger.warning("quote_fetch_failed", kind="network", status=response.status_code, error=str(e))
            raise NetworkError() from e
        finally:
            await response.aclose()

        logger.debug(
            "quote_response_body",
            status=response.status_code,
            body=body[:_BODY_PREVIEW].decode("utf-8", errors="replace"),
        )
        return response

    # ---- Decoding ----

    @staticmethod
    def _decode_quote(response: httpx.Response) -> Quote:
        try:
            payload = QuoteOfDayResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning("quote_fetch_failed", kind="decode", status=response.status_code, error=str(e))
            raise DecodeError(response.status_code, _UNREADABLE_BODY_MESSAGE) from e

        if not payload.contents.quotes:
            logger.warning("quote_fetch_failed", kind="decode", status=response.status_code, error="empty quotes")
            raise DecodeError(response.status_code, "The quote service returned no quote for today")

        return payload.contents.quotes[0].to_quote()

    @staticmethod
    def _decode_error(response: httpx.Response) -> ServerError:
        try:
            body = ErrorResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning("quote_fetch_failed", kind="decode", status=response.status_code, error=str(e))
            raise DecodeError(
                response.status_code,
                f"The quote service failed with HTTP {response.status_code}",
            ) from e
        return ServerError(body.error.code, body.error.message)
