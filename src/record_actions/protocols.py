"""Protocol definitions for the collaborators the action bar consumes.

The bar never owns these objects; it only queries the table and invokes the
dispatcher. Protocols use structural typing, so collaborators (including test
fakes) don't need to inherit from anything.

This module is STABLE and has no dependencies on other project modules except
the command result types.
"""

from enum import Enum
from typing import Final, Protocol

from record_actions.commands import CommandResult


class _NotFound:
    """Sentinel returned by row_index_of() for ids that have no row."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


NOT_FOUND: Final = _NotFound()


class TableFeature(Enum):
    """Optional per-table capabilities that gate preview/view buttons."""

    PREVIEW = "preview"
    VIEW = "view"


class RecordTable(Protocol):
    """Read-only queries against the record table.

    Query Contract:
    - Every query is side-effect free and authoritative at call time
    - Any query may raise QueryUnavailable when the table is detached
    - row_index_of() returns NOT_FOUND (not -1) for unknown ids
    """

    def exists(self, record_id: str) -> bool:
        ...

    def is_deletable(self, record_id: str) -> bool:
        """False for base/required records that cannot be removed."""
        ...

    def is_modified(self, record_id: str) -> bool:
        ...

    def row_count(self) -> int:
        ...

    def row_index_of(self, record_id: str) -> "int | _NotFound":
        ...

    def features(self) -> frozenset[TableFeature]:
        ...


class CommandDispatcher(Protocol):
    """Executes record-mutation commands (with undo support on its side).

    A dispatcher may report a refusal either by returning a REJECTED
    CommandResult or by raising CommandRejected. PENDING results complete
    later; failures then arrive via RecordActionBar.report_command_failure().
    """

    def clone(self, source_id: str, new_id: str, new_type: str) -> CommandResult:
        ...

    def add(self, record_type: str) -> CommandResult:
        ...

    def delete(self, record_id: str) -> CommandResult:
        ...

    def revert(self, record_id: str) -> CommandResult:
        ...


class NavigationHelper(Protocol):
    """Status panel attached to the parent dialog."""

    def show_status(self, message: str) -> None:
        """Show a one-line status message (used for surfaced failures)."""
        ...
