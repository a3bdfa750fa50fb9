"""QuotePresenter — the state machine behind one quote screen.

The presenter is handed its QuoteClient explicitly by whoever mounts the
screen. ``start()`` moves Idle → Loading synchronously and spawns the one
fetch task for the session, so a second trigger (even one fired before the
first fetch resolves) finds the presenter out of Idle and is ignored.

Only the fetch task writes Loaded/Failed. Nothing the client raises escapes
to the host: every failure ends in ``Failed(error)``.
"""

from __future__ import annotations

import asyncio
import time
import uuid
from collections.abc import Callable
from typing import Any

from quoteday.models.schemas import ErrorKind, FetchError
from quoteday.models.state import (
    Failed,
    Idle,
    Loaded,
    Loading,
    PresentationState,
    StateTransition,
)
from quoteday.tools.errors import QuoteFetchError
from quoteday.tools.quote_client import QuoteClient
from quoteday.utils import get_logger

logger = get_logger("presenter")

UNEXPECTED_ERROR_MESSAGE = "Something went wrong while loading the quote"

# status -> statuses it may move to
_ALLOWED: dict[str, frozenset[str]] = {
    "idle": frozenset({"loading"}),
    "loading": frozenset({"loaded", "failed"}),
    "loaded": frozenset(),
    "failed": frozenset(),
}

Listener = Callable[[StateTransition], Any]


class QuotePresenter:
    """Drives one screen session: Idle → Loading → Loaded | Failed.

    Usage:
        async with QuotePresenter(client) as presenter:
            state = await presenter.wait()
    """

    def __init__(self, client: QuoteClient, session_id: str | None = None) -> None:
        self.client = client
        self.session_id = session_id or str(uuid.uuid4())
        self.log = logger.bind(session_id=self.session_id)
        self._state: PresentationState = Idle()
        self._history: list[StateTransition] = []
        self._listeners: list[Listener] = []
        self._task: asyncio.Task[PresentationState] | None = None
        self._closed = False

    @property
    def state(self) -> PresentationState:
        return self._state

    @property
    def history(self) -> list[StateTransition]:
        return list(self._history)

    @property
    def closed(self) -> bool:
        return self._closed

    # ---- Subscriptions ----

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with every future StateTransition.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ---- Lifecycle ----

    def start(self) -> asyncio.Task[PresentationState] | None:
        """Mount trigger. Safe to call any number of times.

        Only the first call on an Idle presenter fetches; later calls return
        the task from that first call. Must run inside an event loop.
        """
        if self._closed:
            self.log.debug("presenter_start_ignored", reason="closed")
            return self._task
        if not isinstance(self._state, Idle):
            self.log.debug("presenter_start_ignored", status=self._state.status)
            return self._task

        self._transition(Loading())
        self._task = asyncio.get_running_loop().create_task(
            self._fetch(), name=f"quote-fetch-{self.session_id}"
        )
        return self._task

    async def wait(self) -> PresentationState:
        """Wait for the fetch to resolve and return the resulting state.

        Cancelling the caller does not cancel the fetch; only ``close()`` does.
        If the screen was closed mid-fetch, returns the state at close time.
        """
        if self._task is None:
            raise RuntimeError("QuotePresenter.wait() called before start()")
        try:
            return await asyncio.shield(self._task)
        except asyncio.CancelledError:
            if self._task.cancelled():
                return self._state
            raise

    async def close(self) -> None:
        """Tear the screen down, cancelling an in-flight fetch.

        A result that arrives after close is dropped.
        """
        if self._closed:
            return
        self._closed = True
        task = self._task
        if task is None or task.done():
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    async def __aenter__(self) -> QuotePresenter:
        self.start()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    # ---- Internals ----

    async def _fetch(self) -> PresentationState:
        start = time.perf_counter()
        try:
            quote = await self.client.fetch_quote_of_day()
        except asyncio.CancelledError:
            self.log.info("presenter_cancelled", status=self._state.status)
            raise
        except QuoteFetchError as e:
            next_state: PresentationState = Failed(error=e.error)
        except Exception as e:
            self.log.error(
                "presenter_unexpected_error", kind=ErrorKind.INTERNAL.value, error=str(e), exc_info=True
            )
            next_state = Failed(
                error=FetchError(code=0, message=UNEXPECTED_ERROR_MESSAGE, kind=ErrorKind.INTERNAL)
            )
        else:
            next_state = Loaded(quote=quote)

        duration_ms = round((time.perf_counter() - start) * 1000, 2)
        if self._closed:
            self.log.info("presenter_result_dropped", status=next_state.status, duration_ms=duration_ms)
            return self._state

        self._transition(next_state, duration_ms=duration_ms)
        return next_state

    def _transition(self, new_state: PresentationState, **log_fields: Any) -> None:
        old_state = self._state
        if new_state.status not in _ALLOWED[old_state.status]:
            raise RuntimeError(f"Illegal transition {old_state.status} -> {new_state.status}")

        self._state = new_state
        transition = StateTransition(
            session_id=self.session_id,
            from_status=old_state.status,
            to_status=new_state.status,
            state=new_state,
        )
        self._history.append(transition)
        self.log.info(
            "presenter_transition",
            from_status=old_state.status,
            to_status=new_state.status,
            **log_fields,
        )

        for listener in list(self._listeners):
            try:
                listener(transition)
            except Exception as e:
                # A broken view must not wedge the state machine
                self.log.error("presenter_listener_error", error=str(e))
