"""Quoteday CLI — the screen host.

Commands:
    quoteday show     — Mount the quote screen and render it until it settles
    quoteday version  — Show Quoteday version
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.live import Live

from quoteday.utils import setup_logging

# Initialize logging on import
setup_logging()

app = typer.Typer(
    name="quoteday",
    help="💬 Quoteday — the quote of the day, in your terminal",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()


# ── quoteday show ─────────────────────────────────────────────


@app.command()
def show(
    base_url: str = typer.Option(None, "--base-url", help="Quote service base URL (default from settings)"),
    language: str = typer.Option(None, "--language", "-l", help="Quote language (default from settings)"),
    timeout: float = typer.Option(None, "--timeout", help="Request timeout in seconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests and state transitions"),
):
    """💬 Show the quote of the day."""
    if verbose:
        setup_logging("debug")

    state = asyncio.run(_show(base_url, language, timeout))
    if state.status != "loaded":
        raise typer.Exit(code=1)


async def _show(base_url: str | None, language: str | None, timeout: float | None):
    from quoteday.models.state import StateTransition
    from quoteday.presenter import QuotePresenter
    from quoteday.tools.quote_client import QuoteClient
    from quoteday.ui.views import render_state

    client = QuoteClient(base_url=base_url, language=language, timeout=timeout)
    presenter = QuotePresenter(client)

    try:
        with Live(render_state(presenter.state), console=console, refresh_per_second=12) as live:

            def redraw(transition: StateTransition) -> None:
                live.update(render_state(transition.state), refresh=True)

            presenter.subscribe(redraw)
            presenter.start()
            return await presenter.wait()
    finally:
        await presenter.close()
        await client.close()


# ── quoteday version ──────────────────────────────────────────


@app.command()
def version():
    """📦 Show Quoteday version."""
    from quoteday import __version__
    console.print(f"[bold cyan]💬 Quoteday[/] v{__version__}")


# ── Entry point ───────────────────────────────────────────────

if __name__ == "__main__":
    app()
