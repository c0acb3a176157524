"""Demo record editor: a record panel with the action bar docked below.

Runs the bar end-to-end against the in-memory table/dispatcher. Also serves as
the reference wiring for a parent dialog: it resolves navigation requests to
identities and calls notify_identity_changed back.
"""

import logging

from rich.text import Text
from textual.app import App
from textual.containers import Vertical
from textual.widgets import Static

import record_actions.settings
from record_actions.action_bar import RecordActionBar
from record_actions.identity import RecordIdentity
from record_actions.protocols import NOT_FOUND, TableFeature
from record_actions.record_store import InMemoryDispatcher, InMemoryRecordTable, StoredRecord
from record_actions.tui.action_bar_widget import RecordButtonBar

logger = logging.getLogger(__name__)


def sample_table() -> InMemoryRecordTable:
    return InMemoryRecordTable(
        [
            StoredRecord("iron_sword", "weapon", base=True),
            StoredRecord("steel_axe", "weapon", base=True),
            StoredRecord("healing_potion", "potion"),
            StoredRecord("guard_captain", "npc", base=True),
            StoredRecord("tavern_sign", "static"),
        ],
        features=(TableFeature.PREVIEW, TableFeature.VIEW),
    )


class StatusLine(Static):
    """One-line status panel; the bar's navigation helper."""

    DEFAULT_CSS = """
    StatusLine {
        height: 1;
        color: $text-muted;
        padding: 0 1;
    }
    """

    def __init__(self, message: str = "", **kwargs):
        super().__init__(message, **kwargs)
        self.message = message

    def show_status(self, message: str) -> None:
        self.message = message
        self.update(message)


class RecordPanel(Static):
    DEFAULT_CSS = """
    RecordPanel {
        padding: 1 2;
    }
    """

    def show_record(self, record: StoredRecord | None, row: int, rows: int) -> None:
        if record is None:
            self.update(Text("(no record)", style="dim"))
            return
        text = Text()
        text.append(f"{record.id}\n", style="bold")
        text.append(f"type:     {record.record_type}\n")
        text.append(f"base:     {'yes' if record.base else 'no'}\n")
        text.append(f"modified: {'yes' if record.modified else 'no'}\n")
        text.append(f"row {row + 1} of {rows}", style="dim")
        self.update(text)


class RecordEditorApp(App):
    """Single-record dialog: record details, status line, action bar."""

    TITLE = "record-actions"

    CSS = """
    #bottom-panel {
        dock: bottom;
        height: auto;
    }
    """

    BINDINGS = [
        ("m", "mark_modified", "Modify"),
        ("l", "toggle_lock", "Lock"),
        ("w", "toggle_cycle", "Wrap"),
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        table: InMemoryRecordTable | None = None,
        *,
        start_id: str | None = None,
        cycle: bool | None = None,
        with_dispatcher: bool = True,
    ):
        super().__init__()
        self.table = table if table is not None else sample_table()
        self.dispatcher = InMemoryDispatcher(self.table) if with_dispatcher else None
        self.status = StatusLine("")
        first = self.table.get(start_id) if start_id else self.table.record_at(0)
        if first is None:
            first = self.table.record_at(0)
        self.bar = RecordActionBar(
            first.identity,
            self.table,
            navigation_helper=self.status,
            dispatcher=self.dispatcher,
            cycle=cycle,
        )
        self.panel = RecordPanel()
        self._last_row = 0
        self._dispose_table = self.table.on_rows_changed(self._table_changed)

    def compose(self):
        yield self.panel
        # Bar above the status line, both pinned to the bottom edge.
        with Vertical(id="bottom-panel"):
            yield RecordButtonBar(self.bar, id="record-bar")
            yield self.status

    def on_mount(self) -> None:
        self._show_current()

    def on_unmount(self) -> None:
        self._dispose_table()

    # ─── Bar messages ─────────────────────────────────────────────────────

    def on_record_button_bar_navigation_requested(self, message: RecordButtonBar.NavigationRequested) -> None:
        row = message.event.target_row
        if 0 <= row < self.table.row_count():
            self.go_to_identity(self.table.record_at(row).identity)

    def on_record_button_bar_preview_requested(self, message: RecordButtonBar.PreviewRequested) -> None:
        self.status.show_status(f"Preview: {message.event.identity}")

    def on_record_button_bar_view_requested(self, message: RecordButtonBar.ViewRequested) -> None:
        self.status.show_status(f"View: {message.event.identity}")

    def on_record_button_bar_command_failed(self, message: RecordButtonBar.CommandFailed) -> None:
        self.notify(message.event.reason, title=f"{message.event.kind.value} rejected", severity="error")

    # ─── Actions ──────────────────────────────────────────────────────────

    def action_mark_modified(self) -> None:
        record_id = self.bar.identity.id
        if self.table.exists(record_id):
            self.table.mark_modified(record_id)

    def action_toggle_lock(self) -> None:
        self.bar.set_edit_lock(not self.bar.edit_locked)
        self.status.show_status("Edit lock on" if self.bar.edit_locked else "Edit lock off")

    def action_toggle_cycle(self) -> None:
        cycle = not self.bar.cycle
        self.bar.set_cycle(cycle)
        record_actions.settings.save_cycle_navigation(cycle)
        self.status.show_status("Wrap-around navigation on" if cycle else "Wrap-around navigation off")

    # ─── Parent dialog wiring ─────────────────────────────────────────────

    def go_to_identity(self, identity: RecordIdentity) -> None:
        self.bar.notify_identity_changed(identity)
        self._show_current()

    def _table_changed(self) -> None:
        current = self.bar.identity
        if not self.table.exists(current.id) and self.table.row_count() > 0:
            # Current record was removed; stay at the same position.
            row = min(self._last_row, self.table.row_count() - 1)
            self.bar.notify_identity_changed(self.table.record_at(row).identity)
        self.bar.notify_rows_changed()
        self._show_current()

    def _show_current(self) -> None:
        record = self.table.get(self.bar.identity.id)
        row = self.table.row_index_of(self.bar.identity.id)
        if row is not NOT_FOUND:
            self._last_row = row
        self.panel.show_record(record, self._last_row, self.table.row_count())
