"""Root conftest — shared pytest markers.

Markers
-------
e2e         requires the live quotes.rest service (set QUOTEDAY_TEST_E2E=1)
"""

from __future__ import annotations


def pytest_configure(config):
    config.addinivalue_line("markers", "e2e: requires the live quote service")
