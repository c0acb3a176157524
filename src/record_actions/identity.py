"""Record identity value type.

This module is STABLE: safe for `from` imports everywhere.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RecordIdentity:
    """Identifies one record: its unique id plus its record-type tag.

    Replaced wholesale on change, never mutated.
    """

    id: str
    record_type: str

    def __str__(self) -> str:
        return f"{self.record_type}:{self.id}"
