"""Tests for the CLI entry point (app run is stubbed)."""

import pytest

import record_actions.cli
import record_actions.io.logging_setup
import record_actions.tui.app


@pytest.fixture
def launched(monkeypatch):
    record_actions.io.logging_setup.reset()
    apps = []
    monkeypatch.setattr(record_actions.tui.app.RecordEditorApp, "run", lambda self: apps.append(self))
    yield apps
    record_actions.io.logging_setup.reset()


def test_defaults(launched):
    record_actions.cli.main([])
    [app] = launched
    assert app.bar.identity.id == "iron_sword"
    assert app.dispatcher is not None
    assert app.bar.cycle is False


def test_start_and_cycle(launched):
    record_actions.cli.main(["--start", "healing_potion", "--cycle"])
    [app] = launched
    assert app.bar.identity.id == "healing_potion"
    assert app.bar.cycle is True


def test_read_only_disables_mutations(launched):
    record_actions.cli.main(["--read-only"])
    [app] = launched
    assert app.dispatcher is None
    assert not app.bar.state.can_add


def test_unknown_start_falls_back_to_first_row(launched):
    record_actions.cli.main(["--start", "ghost"])
    [app] = launched
    assert app.bar.identity.id == "iron_sword"


def test_logging_is_file_only(launched):
    record_actions.cli.main([])
    runtime = record_actions.io.logging_setup.get_runtime()
    assert runtime is not None
    assert runtime.file_path
