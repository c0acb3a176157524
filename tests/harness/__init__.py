"""In-process test harness for record-actions.

Re-exports all public API for convenient imports:
    from tests.harness import run_app, FakeTable, RecordingDispatcher, ...
"""

from tests.harness.app_runner import run_app, run_bar
from tests.harness.fakes import (
    EventLog,
    FakeTable,
    RecordingDispatcher,
    RecordingHelper,
)

__all__ = [
    "run_app",
    "run_bar",
    "EventLog",
    "FakeTable",
    "RecordingDispatcher",
    "RecordingHelper",
]
