"""Button availability derivation for the record action bar.

// [LAW:one-source-of-truth] ActionBarState is the sole source of button availability.
// [LAW:single-enforcer] derive_state() is the only place availability rules live.

Pure data + pure function. No live state, no caching.
"""

import logging
from dataclasses import dataclass, fields

from record_actions.errors import QueryUnavailable
from record_actions.identity import RecordIdentity
from record_actions.protocols import NOT_FOUND, RecordTable, TableFeature

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionBarState:
    """Enabled/visible flags for every bar button."""

    can_go_prev: bool = False
    can_go_next: bool = False
    can_clone: bool = False
    can_add: bool = False
    can_delete: bool = False
    can_revert: bool = False
    show_preview: bool = False
    show_view: bool = False

    @classmethod
    def disabled(cls) -> "ActionBarState":
        """Everything disabled, optional buttons hidden."""
        return cls()

    def as_dict(self) -> dict[str, bool]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class BarCapabilities:
    """Inputs to derivation that come from the bar rather than the table."""

    has_navigation: bool = False
    has_dispatcher: bool = False
    edit_locked: bool = False
    cycle: bool = False

    @property
    def can_modify(self) -> bool:
        return self.has_dispatcher and not self.edit_locked


def navigation_flags(row, row_count: int, *, cycle: bool) -> tuple[bool, bool]:
    """Return (can_go_prev, can_go_next) for a row position.

    With cycle enabled, both directions wrap and are available whenever there
    is another row to move to.
    """
    if row_count <= 0 or row is NOT_FOUND:
        return (False, False)
    if cycle:
        has_other = row_count > 1
        return (has_other, has_other)
    return (row > 0, row < row_count - 1)


def derive_state(
    identity: RecordIdentity,
    table: RecordTable,
    capabilities: BarCapabilities,
) -> ActionBarState:
    """Compute ActionBarState for identity against the table as it is right now.

    A detached table (QueryUnavailable from any query) yields the all-disabled
    state instead of propagating.
    """
    try:
        return _derive(identity, table, capabilities)
    except QueryUnavailable as exc:
        logger.warning("record table unavailable while deriving %s: %s", identity, exc)
        return ActionBarState.disabled()


def _derive(identity: RecordIdentity, table: RecordTable, caps: BarCapabilities) -> ActionBarState:
    record_id = identity.id
    exists = table.exists(record_id)
    modifiable = caps.can_modify and exists

    can_go_prev, can_go_next = navigation_flags(
        table.row_index_of(record_id),
        table.row_count(),
        cycle=caps.cycle,
    )

    features = table.features() if caps.has_navigation else frozenset()

    return ActionBarState(
        can_go_prev=can_go_prev,
        can_go_next=can_go_next,
        can_clone=modifiable,
        can_add=caps.can_modify,
        # Short-circuit: never ask about rows that don't exist.
        can_delete=modifiable and table.is_deletable(record_id),
        can_revert=modifiable and table.is_modified(record_id),
        show_preview=TableFeature.PREVIEW in features,
        show_view=TableFeature.VIEW in features,
    )
