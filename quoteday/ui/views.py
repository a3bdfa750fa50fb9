"""Rich views for the quote screen.

Pure functions from a PresentationState to a renderable. Fetching and
caching the background photo belongs to an ImageLoader; the default one just
renders a clickable link to it.
"""

from __future__ import annotations

from typing import Protocol

from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.spinner import Spinner
from rich.text import Text

from quoteday.models.schemas import FetchError, Quote
from quoteday.models.state import Failed, Idle, Loaded, Loading, PresentationState

CARD_STYLE = "on grey23"
CARD_WIDTH = 72
LOADING_TEXT = "Loading"


class ImageLoader(Protocol):
    """Turns an image URL into something the card can show."""

    def render(self, url: str) -> RenderableType: ...


class LinkImageLoader:
    """Shows the background image as a terminal hyperlink."""

    def render(self, url: str) -> RenderableType:
        return Text.assemble(("🖼  ", "dim"), (url, f"dim link {url}"))


def render_loading() -> RenderableType:
    return Spinner("dots", text=Text(LOADING_TEXT, style="dim"))


def render_error(error: FetchError) -> RenderableType:
    # Plain text: the message comes from the server and must not be parsed as markup
    return Text(error.message)


def render_quote(quote: Quote, image_loader: ImageLoader | None = None) -> RenderableType:
    loader = image_loader or LinkImageLoader()
    return Group(
        loader.render(quote.background_image_url),
        Text(),
        Text(quote.text, style="bold", justify="center"),
        Text(),
        Text(quote.author, style="italic", justify="center"),
    )


def render_state(state: PresentationState, image_loader: ImageLoader | None = None) -> RenderableType:
    """Render whatever the presenter currently holds."""
    if isinstance(state, Loaded):
        content = render_quote(state.quote, image_loader)
    elif isinstance(state, Failed):
        content = render_error(state.error)
    elif isinstance(state, (Idle, Loading)):
        content = render_loading()
    else:
        raise TypeError(f"Unknown presentation state: {state!r}")

    return Align.center(
        Panel(
            content,
            title="[bold]Quote of the Day[/]",
            border_style="grey50",
            style=CARD_STYLE,
            width=CARD_WIDTH,
            padding=(1, 2),
        )
    )
