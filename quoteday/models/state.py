"""Presentation states for one quote screen.

    Idle ──start()──▶ Loading ──ok──▶ Loaded(quote)
                         └──fail──▶ Failed(error)

Loaded and Failed are terminal: nothing leaves them for the life of the screen.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from quoteday.models.schemas import FetchError, Quote

Status = Literal["idle", "loading", "loaded", "failed"]


class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"


class Loading(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["loading"] = "loading"


class Loaded(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["loaded"] = "loaded"
    quote: Quote


class Failed(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["failed"] = "failed"
    error: FetchError


PresentationState = Union[Idle, Loading, Loaded, Failed]

TERMINAL_STATUSES: frozenset[str] = frozenset({"loaded", "failed"})


def is_terminal(state: PresentationState) -> bool:
    return state.status in TERMINAL_STATUSES


class StateTransition(BaseModel):
    """A single state change, handed to presenter subscribers."""

    session_id: str = Field(description="Presenter session this transition belongs to")
    from_status: Status
    to_status: Status
    state: PresentationState = Field(discriminator="status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
