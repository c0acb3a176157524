"""Tests for the typed event hub."""

import pytest

from record_actions.bar_state import ActionBarState
from record_actions.events import (
    BarEvent,
    Direction,
    EventEmitter,
    NavigationRequested,
    NextRequested,
    PrevRequested,
    StateChanged,
)
from record_actions.identity import RecordIdentity

SRC = RecordIdentity("sword", "weapon")


def test_listener_receives_exact_type():
    emitter = EventEmitter()
    seen = []
    emitter.subscribe(NextRequested, seen.append)
    event = NextRequested(Direction.NEXT, SRC, 2)
    emitter.emit(event)
    assert seen == [event]


def test_base_class_listener_receives_subclasses():
    emitter = EventEmitter()
    nav, everything = [], []
    emitter.subscribe(NavigationRequested, nav.append)
    emitter.subscribe(BarEvent, everything.append)
    emitter.emit(PrevRequested(Direction.PREV, SRC, 0))
    emitter.emit(StateChanged(SRC, ActionBarState.disabled()))
    assert [type(e) for e in nav] == [PrevRequested]
    assert [type(e) for e in everything] == [PrevRequested, StateChanged]


def test_unrelated_listener_not_called():
    emitter = EventEmitter()
    seen = []
    emitter.subscribe(NextRequested, seen.append)
    emitter.emit(PrevRequested(Direction.PREV, SRC, 0))
    assert seen == []


def test_dispose_unsubscribes():
    emitter = EventEmitter()
    seen = []
    dispose = emitter.subscribe(StateChanged, seen.append)
    dispose()
    dispose()
    emitter.emit(StateChanged(SRC, ActionBarState.disabled()))
    assert seen == []
    assert emitter.listener_count(StateChanged) == 0


def test_listener_may_unsubscribe_while_handling():
    emitter = EventEmitter()
    calls = []
    disposers = []

    def once(event):
        calls.append(event)
        disposers[0]()

    disposers.append(emitter.subscribe(StateChanged, once))
    emitter.emit(StateChanged(SRC, ActionBarState.disabled()))
    emitter.emit(StateChanged(SRC, ActionBarState.disabled()))
    assert len(calls) == 1


def test_listener_errors_propagate():
    emitter = EventEmitter()

    def boom(event):
        raise RuntimeError("listener failed")

    emitter.subscribe(StateChanged, boom)
    with pytest.raises(RuntimeError, match="listener failed"):
        emitter.emit(StateChanged(SRC, ActionBarState.disabled()))


def test_events_are_immutable():
    event = NextRequested(Direction.NEXT, SRC, 2)
    with pytest.raises(AttributeError):
        event.target_row = 3
