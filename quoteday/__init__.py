"""Quoteday — fetch the quote of the day and show it on one screen.

Architecture:
    QuoteClient     — one GET against quotes.rest, decoded into Quote or a QuoteFetchError
    QuotePresenter  — Idle → Loading → Loaded | Failed, one fetch per screen
    ui.views        — rich renderables for each presentation state

CLI surface (wired in quoteday.main):
    quoteday show [--base-url URL]
    quoteday version
"""

__version__ = "0.1.0"
