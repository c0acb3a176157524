"""End-to-end tests for the demo record editor."""

import pytest

import record_actions.settings
from record_actions.tui.action_bar_widget import chip_id
from tests.harness import run_app

pytestmark = pytest.mark.textual


async def test_starts_on_first_record():
    async with run_app() as (pilot, app):
        assert app.bar.identity.id == "iron_sword"
        assert app.bar.state.can_go_prev is False
        assert app.bar.state.can_delete is False


async def test_next_moves_to_following_record():
    async with run_app() as (pilot, app):
        await pilot.click(f"#{chip_id('next')}")
        await pilot.pause()
        assert app.bar.identity.id == "steel_axe"
        assert app.bar.state.can_go_prev is True


async def test_prev_from_middle():
    async with run_app(start_id="healing_potion") as (pilot, app):
        await pilot.click(f"#{chip_id('prev')}")
        await pilot.pause()
        assert app.bar.identity.id == "steel_axe"


async def test_cycle_wraps_from_last_to_first():
    async with run_app(start_id="tavern_sign", cycle=True) as (pilot, app):
        await pilot.click(f"#{chip_id('next')}")
        await pilot.pause()
        assert app.bar.identity.id == "iron_sword"


async def test_delete_moves_to_neighbour():
    async with run_app(start_id="healing_potion") as (pilot, app):
        await pilot.click(f"#{chip_id('delete')}")
        await pilot.pause()
        assert not app.table.exists("healing_potion")
        assert app.bar.identity.id == "guard_captain"


async def test_modify_then_revert():
    async with run_app(start_id="steel_axe") as (pilot, app):
        assert app.bar.state.can_revert is False
        await pilot.press("m")
        await pilot.pause()
        assert app.bar.state.can_revert is True
        await pilot.click(f"#{chip_id('revert')}")
        await pilot.pause()
        assert app.bar.state.can_revert is False
        assert app.bar.identity.id == "steel_axe"


async def test_add_appends_record_and_enables_next():
    async with run_app(start_id="tavern_sign") as (pilot, app):
        assert app.bar.state.can_go_next is False
        await pilot.click(f"#{chip_id('add')}")
        await pilot.pause()
        assert app.table.row_count() == 6
        assert app.bar.state.can_go_next is True


async def test_clone_collision_reported_on_status_line():
    async with run_app(start_id="healing_potion") as (pilot, app):
        await pilot.click(f"#{chip_id('clone')}")
        await pilot.pause()
        await pilot.press(*"tavern_sign")
        await pilot.press("enter")
        await pilot.pause()
        assert "already exists" in app.status.message
        assert app.bar.identity.id == "healing_potion"


async def test_lock_disables_mutations():
    async with run_app(start_id="healing_potion") as (pilot, app):
        await pilot.press("l")
        await pilot.pause()
        assert app.bar.edit_locked is True
        assert app.bar.state.can_delete is False
        assert app.bar.state.can_go_next is True


async def test_wrap_toggle_persists_setting():
    async with run_app() as (pilot, app):
        await pilot.press("w")
        await pilot.pause()
        assert app.bar.cycle is True
        assert record_actions.settings.load_cycle_navigation() is True


async def test_read_only_app_has_no_mutations():
    async with run_app(with_dispatcher=False) as (pilot, app):
        state = app.bar.state
        assert not any([state.can_clone, state.can_add, state.can_delete, state.can_revert])
        assert state.show_preview is True


async def test_bar_and_status_line_do_not_overlap():
    async with run_app() as (pilot, app):
        bar = app.query_one("#record-bar")
        assert bar.region.height == 1
        assert app.status.region.height == 1
        assert not bar.region.overlaps(app.status.region)
        assert bar.region.y < app.status.region.y


async def test_next_chip_is_topmost_at_its_position():
    async with run_app() as (pilot, app):
        chip = app.query_one(f"#{chip_id('next')}")
        widget, _ = app.screen.get_widget_at(*chip.region.offset)
        assert widget is chip
