"""Core schemas — Quote, FetchError, and the quotes.rest wire shapes."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    """Where a failed fetch went wrong. The screen only shows the message."""

    NETWORK = "network"
    SERVER = "server"
    DECODE = "decode"
    # Anything the client raised outside its own taxonomy (a bug, a bad setting)
    INTERNAL = "internal"


class Quote(BaseModel):
    """The quote of the day, as shown on screen.

    Only ever built from a successfully decoded server response.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(min_length=1, description="The quote itself")
    author: str = Field(min_length=1, description="Who said it")
    background_image_url: str = Field(description="URL of the background photo")


class FetchError(BaseModel):
    """A failed fetch, ready to be displayed.

    ``code`` is the server's own error code for server errors, the HTTP status
    for decode errors, and 0 when no response was received at all (or the
    failure was internal to this program).
    """

    model_config = ConfigDict(frozen=True)

    code: int = Field(description="Server error code, HTTP status, or 0 for network failures")
    message: str = Field(min_length=1, description="Human-readable message shown on screen")
    kind: ErrorKind = Field(default=ErrorKind.SERVER, description="Failure class for diagnostics")


# ── Wire shapes (quotes.rest) ────────────────────────────────────────────────


class QuoteOfDayEntry(BaseModel):
    """One element of ``contents.quotes``. Extra keys (id, date, tags...) are ignored."""

    model_config = ConfigDict(strict=True, extra="ignore")

    quote: str = Field(min_length=1)
    author: str = Field(min_length=1)
    background: str = Field(min_length=1)

    def to_quote(self) -> Quote:
        return Quote(
            text=self.quote,
            author=self.author,
            background_image_url=self.background,
        )


class QuoteOfDayContents(BaseModel):
    model_config = ConfigDict(extra="ignore")

    quotes: list[QuoteOfDayEntry]


class QuoteOfDayResponse(BaseModel):
    """Success body: ``{"contents": {"quotes": [{...}, ...]}}``."""

    model_config = ConfigDict(extra="ignore")

    contents: QuoteOfDayContents


class ErrorBody(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    code: int
    message: str = Field(min_length=1)


class ErrorResponse(BaseModel):
    """Error body: ``{"error": {"code": 403, "message": "..."}}``."""

    model_config = ConfigDict(extra="ignore")

    error: ErrorBody
