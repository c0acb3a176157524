"""Error kinds raised and surfaced by the action bar.

// [LAW:one-source-of-truth] Every record_actions exception derives from RecordActionsError.
"""


class RecordActionsError(Exception):
    """Base class for record_actions errors."""


class ConfigurationError(RecordActionsError):
    """Invalid construction arguments. Fatal at construction."""


class QueryUnavailable(RecordActionsError):
    """The record table reference is stale or detached."""


class CommandRejected(RecordActionsError):
    """The dispatcher declined an operation (e.g. clone target already exists)."""

    def __init__(self, kind, record_id: str, reason: str):
        super().__init__(f"{kind.value} {record_id!r} rejected: {reason}")
        self.kind = kind
        self.record_id = record_id
        self.reason = reason
