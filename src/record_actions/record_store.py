"""In-memory record table and command dispatcher.

Reference collaborators for the action bar: the demo app runs on them and
integration tests use them. Real editors plug in their own table/dispatcher
through the protocols in record_actions.protocols.

// [LAW:one-source-of-truth] _rows is the sole record storage; indices derive from it.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace

from record_actions.commands import CommandKind, CommandResult
from record_actions.errors import QueryUnavailable
from record_actions.identity import RecordIdentity
from record_actions.protocols import NOT_FOUND, TableFeature

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredRecord:
    id: str
    record_type: str
    base: bool = False
    modified: bool = False
    # Snapshot restored on revert; None for records created this session.
    original: "StoredRecord | None" = None

    @property
    def identity(self) -> RecordIdentity:
        return RecordIdentity(self.id, self.record_type)


class InMemoryRecordTable:
    """Ordered record rows with base/modified bookkeeping.

    Base records come from the game/content files and cannot be deleted.
    """

    def __init__(
        self,
        records: Iterable[StoredRecord] = (),
        *,
        features: Iterable[TableFeature] = (),
    ):
        self._rows: list[StoredRecord] = list(records)
        self._features = frozenset(features)
        self._attached = True
        self._row_listeners: list[Callable[[], None]] = []

    # ─── RecordTable protocol ─────────────────────────────────────────────

    def exists(self, record_id: str) -> bool:
        return self._find(record_id) is not NOT_FOUND

    def is_deletable(self, record_id: str) -> bool:
        row = self._find(record_id)
        return row is not NOT_FOUND and not self._rows[row].base

    def is_modified(self, record_id: str) -> bool:
        row = self._find(record_id)
        return row is not NOT_FOUND and self._rows[row].modified

    def row_count(self) -> int:
        self._check_attached()
        return len(self._rows)

    def row_index_of(self, record_id: str):
        return self._find(record_id)

    def features(self) -> frozenset[TableFeature]:
        self._check_attached()
        return self._features

    # ─── Storage access ───────────────────────────────────────────────────

    def record_at(self, row: int) -> StoredRecord:
        self._check_attached()
        return self._rows[row]

    def get(self, record_id: str) -> StoredRecord | None:
        row = self._find(record_id)
        return None if row is NOT_FOUND else self._rows[row]

    def identities(self) -> list[RecordIdentity]:
        self._check_attached()
        return [r.identity for r in self._rows]

    def insert(self, record: StoredRecord, row: int | None = None) -> None:
        self._check_attached()
        if row is None:
            self._rows.append(record)
        else:
            self._rows.insert(row, record)
        self._rows_changed()

    def remove(self, record_id: str) -> StoredRecord:
        row = self._find(record_id)
        if row is NOT_FOUND:
            raise KeyError(record_id)
        record = self._rows.pop(row)
        self._rows_changed()
        return record

    def replace_record(self, record: StoredRecord) -> None:
        row = self._find(record.id)
        if row is NOT_FOUND:
            raise KeyError(record.id)
        self._rows[row] = record
        self._rows_changed()

    def mark_modified(self, record_id: str) -> None:
        record = self.get(record_id)
        if record is None:
            raise KeyError(record_id)
        if not record.modified:
            self.replace_record(replace(record, modified=True, original=record))

    def on_rows_changed(self, listener: Callable[[], None]) -> Callable[[], None]:
        """Register a listener for inserted, removed or replaced rows; returns a disposer."""
        self._row_listeners.append(listener)

        def dispose() -> None:
            if listener in self._row_listeners:
                self._row_listeners.remove(listener)

        return dispose

    def detach(self) -> None:
        """Simulate a stale table reference: every query raises QueryUnavailable."""
        self._attached = False

    # ─── Internals ────────────────────────────────────────────────────────

    def _check_attached(self) -> None:
        if not self._attached:
            raise QueryUnavailable("record table is detached")

    def _find(self, record_id: str):
        self._check_attached()
        for idx, record in enumerate(self._rows):
            if record.id == record_id:
                return idx
        return NOT_FOUND

    def _rows_changed(self) -> None:
        for listener in list(self._row_listeners):
            listener()


class InMemoryDispatcher:
    """Synchronous dispatcher mutating an InMemoryRecordTable.

    Every command is accepted or rejected immediately; history records the
    accepted ones in order.
    """

    def __init__(self, table: InMemoryRecordTable):
        self._table = table
        self._next_new = 1
        self.history: list[tuple[CommandKind, str]] = []

    def clone(self, source_id: str, new_id: str, new_type: str) -> CommandResult:
        source = self._table.get(source_id)
        if source is None:
            return CommandResult.reject(CommandKind.CLONE, source_id, f"no record {source_id!r}")
        if self._table.exists(new_id):
            return CommandResult.reject(CommandKind.CLONE, source_id, f"record {new_id!r} already exists")
        row = self._table.row_index_of(source_id) + 1
        self._table.insert(StoredRecord(new_id, new_type, modified=True), row)
        return self._accept(CommandKind.CLONE, new_id)

    def add(self, record_type: str) -> CommandResult:
        new_id = self._fresh_id(record_type)
        self._table.insert(StoredRecord(new_id, record_type, modified=True))
        return self._accept(CommandKind.ADD, new_id)

    def delete(self, record_id: str) -> CommandResult:
        if not self._table.exists(record_id):
            return CommandResult.reject(CommandKind.DELETE, record_id, f"no record {record_id!r}")
        if not self._table.is_deletable(record_id):
            return CommandResult.reject(CommandKind.DELETE, record_id, "base records cannot be deleted")
        self._table.remove(record_id)
        return self._accept(CommandKind.DELETE, record_id)

    def revert(self, record_id: str) -> CommandResult:
        record = self._table.get(record_id)
        if record is None or not record.modified:
            return CommandResult.reject(CommandKind.REVERT, record_id, "record has no changes")
        if record.original is None:
            # Created this session: reverting removes it.
            self._table.remove(record_id)
        else:
            self._table.replace_record(record.original)
        return self._accept(CommandKind.REVERT, record_id)

    def _accept(self, kind: CommandKind, record_id: str) -> CommandResult:
        self.history.append((kind, record_id))
        logger.info("%s accepted for %s", kind.value, record_id)
        return CommandResult.accepted(kind, record_id)

    def _fresh_id(self, record_type: str) -> str:
        while True:
            candidate = f"new_{record_type}_{self._next_new}"
            self._next_new += 1
            if not self._table.exists(candidate):
                return candidate
