"""Pytest configuration and shared fixtures for record-actions tests."""

import pytest

from record_actions.action_bar import RecordActionBar
from record_actions.identity import RecordIdentity
from tests.harness import EventLog, FakeTable, RecordingDispatcher, RecordingHelper


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point settings and log files at a per-test directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("RECORD_ACTIONS_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("RECORD_ACTIONS_LOG_FILE", raising=False)
    monkeypatch.delenv("RECORD_ACTIONS_LOG_LEVEL", raising=False)
    return tmp_path / "config"


# ---------------------------------------------------------------------------
# Collaborator fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def table():
    """Three weapon rows; 'dagger' is a base record, 'sword' is modified."""
    return FakeTable(["dagger", "sword", "axe"], base={"dagger"}, modified={"sword"})


@pytest.fixture
def dispatcher():
    return RecordingDispatcher()


@pytest.fixture
def helper():
    return RecordingHelper()


@pytest.fixture
def make_bar(table, dispatcher, helper):
    """Factory building a RecordActionBar plus an EventLog on its emitter.

    Collaborators default to the fixtures; pass navigation_helper=None or
    dispatcher=None to drop a capability.
    """
    def _make(record_id="sword", **kwargs):
        kwargs.setdefault("navigation_helper", helper)
        kwargs.setdefault("dispatcher", dispatcher)
        kwargs.setdefault("cycle", False)
        tbl = kwargs.pop("table", table)
        bar = RecordActionBar(RecordIdentity(record_id, "weapon"), tbl, **kwargs)
        return bar, EventLog(bar.events)

    return _make
