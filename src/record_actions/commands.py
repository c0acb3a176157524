"""Record-mutation command kinds and dispatcher results.

This module is STABLE: safe for `from` imports everywhere.
"""

from dataclasses import dataclass
from enum import Enum


class CommandKind(Enum):
    """Mutation commands the bar can issue."""

    CLONE = "clone"
    ADD = "add"
    DELETE = "delete"
    REVERT = "revert"


class CommandStatus(Enum):
    ACCEPTED = "accepted"
    # Accepted for asynchronous execution; failure arrives later via callback.
    PENDING = "pending"
    REJECTED = "rejected"


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single dispatcher call."""

    status: CommandStatus
    kind: CommandKind
    record_id: str
    message: str = ""

    @property
    def rejected(self) -> bool:
        return self.status is CommandStatus.REJECTED

    @classmethod
    def accepted(cls, kind: CommandKind, record_id: str) -> "CommandResult":
        return cls(CommandStatus.ACCEPTED, kind, record_id)

    @classmethod
    def pending(cls, kind: CommandKind, record_id: str) -> "CommandResult":
        return cls(CommandStatus.PENDING, kind, record_id)

    @classmethod
    def reject(cls, kind: CommandKind, record_id: str, message: str) -> "CommandResult":
        return cls(CommandStatus.REJECTED, kind, record_id, message)
