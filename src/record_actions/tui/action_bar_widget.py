"""Textual adapter for RecordActionBar.

// [LAW:dataflow-not-control-flow] One data table (_BUTTONS) drives compose,
//   state application and click routing.
// [LAW:single-enforcer] apply_state() is the sole render entry.

The widget owns no availability logic. It renders ActionBarState, forwards
chip presses to the bar's click handlers, and re-posts bar events as Textual
messages so the parent screen can handle them with on_* methods.
"""

from dataclasses import dataclass

from textual.containers import Horizontal
from textual.message import Message

import record_actions.events
import record_actions.tui.clone_dialog
from record_actions.action_bar import RecordActionBar
from record_actions.bar_state import ActionBarState
from record_actions.tui.chip import Chip


@dataclass(frozen=True)
class _ButtonSpec:
    name: str
    label: str
    flag: str
    # Visibility flags hide the chip; availability flags only disable it.
    hides: bool = False


# [LAW:one-source-of-truth] Button order, labels and the state flag each one follows.
_BUTTONS: tuple[_ButtonSpec, ...] = (
    _ButtonSpec("prev", " ◀ prev ", "can_go_prev"),
    _ButtonSpec("next", " next ▶ ", "can_go_next"),
    _ButtonSpec("preview", " preview ", "show_preview", hides=True),
    _ButtonSpec("view", " view ", "show_view", hides=True),
    _ButtonSpec("clone", " clone ", "can_clone"),
    _ButtonSpec("add", " add ", "can_add"),
    _ButtonSpec("delete", " delete ", "can_delete"),
    _ButtonSpec("revert", " revert ", "can_revert"),
)


def chip_id(name: str) -> str:
    return f"bar-{name}"


class RecordButtonBar(Horizontal):
    """Row of chips bound to a RecordActionBar."""

    DEFAULT_CSS = """
    RecordButtonBar {
        height: 1;
        width: 100%;
        padding: 0 1;
    }
    """

    class BarEventPosted(Message):
        """Base for messages that carry a record_actions event."""

        def __init__(self, event: record_actions.events.BarEvent) -> None:
            super().__init__()
            self.event = event

    class NavigationRequested(BarEventPosted):
        pass

    class PreviewRequested(BarEventPosted):
        pass

    class ViewRequested(BarEventPosted):
        pass

    class CommandFailed(BarEventPosted):
        pass

    # Core event class -> Textual message class
    _FORWARDED = (
        (record_actions.events.NavigationRequested, NavigationRequested),
        (record_actions.events.ShowPreviewRequested, PreviewRequested),
        (record_actions.events.ViewRecordRequested, ViewRequested),
        (record_actions.events.CommandFailed, CommandFailed),
    )

    def __init__(self, bar: RecordActionBar, **kwargs):
        super().__init__(**kwargs)
        self.bar = bar
        self._disposers: list = []

    def compose(self):
        for spec in _BUTTONS:
            yield Chip(spec.label, id=chip_id(spec.name))

    def on_mount(self) -> None:
        events = self.bar.events
        self._disposers.append(
            events.subscribe(record_actions.events.StateChanged, lambda e: self.apply_state(e.state))
        )
        self._disposers.append(
            events.subscribe(record_actions.events.CloneRequested, self._open_clone_dialog)
        )
        for event_type, message_type in self._FORWARDED:
            self._disposers.append(
                events.subscribe(event_type, lambda e, m=message_type: self.post_message(m(e)))
            )
        self.apply_state(self.bar.state)

    def on_unmount(self) -> None:
        for dispose in self._disposers:
            dispose()
        self._disposers.clear()

    def apply_state(self, state: ActionBarState) -> None:
        for spec in _BUTTONS:
            chip = self.query_one(f"#{chip_id(spec.name)}", Chip)
            value = getattr(state, spec.flag)
            if spec.hides:
                chip.display = value
            chip.disabled = not value

    def on_chip_pressed(self, message: Chip.Pressed) -> None:
        message.stop()
        name = (message.chip.id or "").removeprefix("bar-")
        handler = getattr(self.bar, f"click_{name}", None)
        if handler is not None:
            handler()

    def _open_clone_dialog(self, event: record_actions.events.CloneRequested) -> None:
        dialog = record_actions.tui.clone_dialog.CloneDialog(event.source)
        self.app.push_screen(dialog, self._finish_clone)

    def _finish_clone(self, target) -> None:
        # None means the dialog was cancelled.
        if target is None:
            return
        new_id, new_type = target
        self.bar.submit_clone(new_id, new_type)
