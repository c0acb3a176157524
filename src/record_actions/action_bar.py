"""Record action bar: button state logic and click routing.

// [LAW:locality-or-seam] All bar behaviour lives here; widgets only render
//   ActionBarState and forward clicks.
// [LAW:one-source-of-truth] Availability comes from bar_state.derive_state().
// [LAW:single-enforcer] _dispatch() is the sole path to the command dispatcher.

Toolkit-agnostic: collaborators are injected, outputs are typed events on an
EventEmitter. Nothing here blocks.
"""

import logging
from collections.abc import Callable

import record_actions.settings
from record_actions.bar_state import ActionBarState, BarCapabilities, derive_state
from record_actions.commands import CommandKind, CommandResult, CommandStatus
from record_actions.errors import CommandRejected, ConfigurationError, QueryUnavailable
from record_actions.events import (
    CloneRequested,
    CommandFailed,
    Direction,
    EventEmitter,
    NextRequested,
    PrevRequested,
    ShowPreviewRequested,
    StateChanged,
    ViewRecordRequested,
)
from record_actions.identity import RecordIdentity
from record_actions.protocols import (
    NOT_FOUND,
    CommandDispatcher,
    NavigationHelper,
    RecordTable,
)

logger = logging.getLogger(__name__)


class RecordActionBar:
    """Action bar bound to one record of a record table.

    Buttons: prev/next, clone, add, delete, revert, preview (optional),
    view (optional).

    Preview/view are hidden without a navigation helper. Clone/add/delete/
    revert are disabled without a dispatcher.
    """

    def __init__(
        self,
        identity: RecordIdentity,
        table: RecordTable,
        navigation_helper: NavigationHelper | None = None,
        dispatcher: CommandDispatcher | None = None,
        *,
        cycle: bool | None = None,
        emitter: EventEmitter | None = None,
    ):
        if not isinstance(identity, RecordIdentity):
            raise ConfigurationError(f"identity must be a RecordIdentity, got {type(identity).__name__}")
        if table is None:
            raise ConfigurationError("record table is required")
        try:
            exists = table.exists(identity.id)
        except QueryUnavailable as exc:
            raise ConfigurationError(f"record table unavailable at construction: {exc}") from exc
        if not exists:
            raise ConfigurationError(f"record {identity} is not in the table")

        self._identity = identity
        self._table = table
        self._navigation = navigation_helper
        self._dispatcher = dispatcher
        self._edit_locked = False
        self._cycle = record_actions.settings.load_cycle_navigation() if cycle is None else cycle
        self.events = emitter if emitter is not None else EventEmitter()
        self._state = self._compute()

    # ─── Read-only views ──────────────────────────────────────────────────

    @property
    def identity(self) -> RecordIdentity:
        return self._identity

    @property
    def state(self) -> ActionBarState:
        return self._state

    @property
    def cycle(self) -> bool:
        return self._cycle

    @property
    def edit_locked(self) -> bool:
        return self._edit_locked

    # ─── Inbound notifications ────────────────────────────────────────────

    def on_identity_changed(self, new_identity: RecordIdentity) -> None:
        """Replace the current identity and re-render. Same identity is a no-op."""
        if not isinstance(new_identity, RecordIdentity):
            raise ConfigurationError(f"identity must be a RecordIdentity, got {type(new_identity).__name__}")
        if new_identity == self._identity:
            return
        self._identity = new_identity
        self._state = self._compute()
        self._publish_state()

    notify_identity_changed = on_identity_changed

    def notify_rows_changed(self) -> None:
        """Table rows changed (inserted, removed or their flags updated).

        Re-derives state for the unchanged identity and re-renders only if it differs.
        """
        self._refresh()

    def set_edit_lock(self, locked: bool) -> None:
        """Lock or unlock modifications (navigation stays available)."""
        if locked == self._edit_locked:
            return
        self._edit_locked = locked
        self._refresh()

    def set_cycle(self, cycle: bool) -> None:
        if cycle == self._cycle:
            return
        self._cycle = cycle
        self._refresh()

    def report_command_failure(self, kind: CommandKind, record_id: str, reason: str) -> None:
        """Error callback for commands that were accepted as PENDING."""
        self._surface_failure(kind, record_id, reason)

    # ─── Click handlers ───────────────────────────────────────────────────

    def click_prev(self) -> None:
        if not self._guard("can_go_prev"):
            return
        row = self._target_row(-1)
        if row >= 0:
            self.events.emit(PrevRequested(Direction.PREV, self._identity, row))

    def click_next(self) -> None:
        if not self._guard("can_go_next"):
            return
        row = self._target_row(1)
        if row >= 0:
            self.events.emit(NextRequested(Direction.NEXT, self._identity, row))

    def click_preview(self) -> None:
        if not self._guard("show_preview"):
            return
        self.events.emit(ShowPreviewRequested(self._identity))

    def click_view(self) -> None:
        if not self._guard("show_view"):
            return
        self.events.emit(ViewRecordRequested(self._identity))

    def click_clone(self) -> None:
        """Open the clone flow; the UI answers with submit_clone()."""
        if not self._guard("can_clone"):
            return
        self.events.emit(CloneRequested(self._identity))

    def submit_clone(self, new_id: str, new_type: str | None = None) -> CommandResult | None:
        """Finish the clone flow by issuing Clone(source, new_id, new_type).

        new_type defaults to the source record's type.
        """
        if not self._guard("can_clone"):
            return None
        new_id = (new_id or "").strip()
        if not new_id:
            self._surface_failure(CommandKind.CLONE, self._identity.id, "clone target id is empty")
            return None
        source_id = self._identity.id
        record_type = new_type or self._identity.record_type
        return self._dispatch(
            CommandKind.CLONE,
            source_id,
            lambda d: d.clone(source_id, new_id, record_type),
        )

    def click_add(self) -> CommandResult | None:
        if not self._guard("can_add"):
            return None
        record_type = self._identity.record_type
        return self._dispatch(CommandKind.ADD, self._identity.id, lambda d: d.add(record_type))

    def click_delete(self) -> CommandResult | None:
        if not self._guard("can_delete"):
            return None
        record_id = self._identity.id
        return self._dispatch(CommandKind.DELETE, record_id, lambda d: d.delete(record_id))

    def click_revert(self) -> CommandResult | None:
        if not self._guard("can_revert"):
            return None
        record_id = self._identity.id
        return self._dispatch(CommandKind.REVERT, record_id, lambda d: d.revert(record_id))

    # ─── Internals ────────────────────────────────────────────────────────

    def _capabilities(self) -> BarCapabilities:
        return BarCapabilities(
            has_navigation=self._navigation is not None,
            has_dispatcher=self._dispatcher is not None,
            edit_locked=self._edit_locked,
            cycle=self._cycle,
        )

    def _compute(self) -> ActionBarState:
        return derive_state(self._identity, self._table, self._capabilities())

    def _refresh(self) -> None:
        new_state = self._compute()
        if new_state == self._state:
            return
        self._state = new_state
        self._publish_state()

    def _publish_state(self) -> None:
        self.events.emit(StateChanged(self._identity, self._state))

    def _guard(self, flag: str) -> bool:
        """Check a flag against the table as it is now, re-rendering if it moved."""
        self._refresh()
        allowed = getattr(self._state, flag)
        if not allowed:
            logger.debug("ignored click on disabled button (%s) for %s", flag, self._identity)
        return allowed

    def _target_row(self, step: int) -> int:
        """Row the parent should move to; wraps when cycling."""
        try:
            row = self._table.row_index_of(self._identity.id)
            rows = self._table.row_count()
        except QueryUnavailable as exc:
            logger.warning("record table unavailable while navigating: %s", exc)
            return -1
        if row is NOT_FOUND or rows <= 0:
            return -1
        return (row + step) % rows if self._cycle else row + step

    def _dispatch(
        self,
        kind: CommandKind,
        record_id: str,
        call: Callable[[CommandDispatcher], CommandResult],
    ) -> CommandResult:
        """Invoke the dispatcher; rejections are surfaced, never raised."""
        logger.info("dispatching %s for %s", kind.value, record_id)
        try:
            result = call(self._dispatcher)
        except CommandRejected as exc:
            result = CommandResult.reject(kind, record_id, exc.reason)
        if result is None:
            # Fire-and-forget dispatchers may not return a result at all.
            result = CommandResult.pending(kind, record_id)
        if result.status is CommandStatus.REJECTED:
            self._surface_failure(kind, record_id, result.message)
        return result

    def _surface_failure(self, kind: CommandKind, record_id: str, reason: str) -> None:
        logger.warning("%s of %s rejected: %s", kind.value, record_id, reason)
        if self._navigation is not None:
            self._navigation.show_status(f"{kind.value.capitalize()} failed: {reason}")
        self.events.emit(CommandFailed(kind, record_id, reason))
