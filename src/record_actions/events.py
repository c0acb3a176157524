"""Typed events published by the record action bar.

// [LAW:one-source-of-truth] The class IS the type; no event_type string field.
// [LAW:single-enforcer] EventEmitter.emit is the sole publish path.

Listeners subscribe per event class. Any UI framework's event system can sit on
the other side: the Textual adapter forwards these into Textual messages.

This module is STABLE: safe for `from` imports everywhere.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from record_actions.bar_state import ActionBarState
from record_actions.commands import CommandKind
from record_actions.identity import RecordIdentity


class Direction(Enum):
    PREV = "prev"
    NEXT = "next"


# ─── Event Hierarchy ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class BarEvent:
    """Base class for all action bar events."""


@dataclass(frozen=True)
class NavigationRequested(BarEvent):
    """Parent should move to another row and call notify_identity_changed back."""

    direction: Direction
    source: RecordIdentity
    target_row: int


@dataclass(frozen=True)
class PrevRequested(NavigationRequested):
    pass


@dataclass(frozen=True)
class NextRequested(NavigationRequested):
    pass


@dataclass(frozen=True)
class ShowPreviewRequested(BarEvent):
    identity: RecordIdentity


@dataclass(frozen=True)
class ViewRecordRequested(BarEvent):
    identity: RecordIdentity


@dataclass(frozen=True)
class CloneRequested(BarEvent):
    """Start of the clone flow: collect a target id/type, then submit_clone()."""

    source: RecordIdentity


@dataclass(frozen=True)
class CommandFailed(BarEvent):
    """A dispatcher command was rejected. Bar state is unchanged."""

    kind: CommandKind
    record_id: str
    reason: str


@dataclass(frozen=True)
class StateChanged(BarEvent):
    """Bar state was recomputed and differs from what was last rendered."""

    identity: RecordIdentity
    state: ActionBarState


E = TypeVar("E", bound=BarEvent)
Listener = Callable[[BarEvent], None]


class EventEmitter:
    """Synchronous observer hub keyed by event class.

    Listeners registered for a base class (e.g. NavigationRequested or
    BarEvent) also receive its subclasses. Listener exceptions propagate
    to the emitter's caller.
    """

    def __init__(self):
        self._listeners: dict[type[BarEvent], list[Listener]] = {}

    def subscribe(self, event_type: type[E], listener: Callable[[E], None]) -> Callable[[], None]:
        """Register listener; returns a disposer that unsubscribes it."""
        bucket = self._listeners.setdefault(event_type, [])
        bucket.append(listener)

        def dispose() -> None:
            if listener in bucket:
                bucket.remove(listener)

        return dispose

    def emit(self, event: BarEvent) -> None:
        for event_type in type(event).__mro__:
            # Snapshot so listeners may unsubscribe while handling.
            for listener in list(self._listeners.get(event_type, ())):
                listener(event)

    def listener_count(self, event_type: type[BarEvent]) -> int:
        return len(self._listeners.get(event_type, ()))
