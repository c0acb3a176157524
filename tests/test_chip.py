from textual.app import App

from record_actions.tui.chip import Chip


def test_chip_default_css_has_visible_disabled_state():
    css = Chip.DEFAULT_CSS
    assert "background: $panel-lighten-2;" in css
    assert "Chip:hover" in css
    assert "Chip:focus" in css
    assert "Chip:disabled" in css
    assert "opacity" not in css


class _ChipApp(App):
    def __init__(self):
        super().__init__()
        self.pressed: list[str] = []

    def compose(self):
        yield Chip(" go ", id="go")
        yield Chip(" off ", id="off", disabled=True)

    def on_chip_pressed(self, message: Chip.Pressed) -> None:
        self.pressed.append(message.chip.id)


async def test_click_posts_pressed():
    app = _ChipApp()
    async with app.run_test() as pilot:
        await pilot.click("#go")
        await pilot.pause()
        assert app.pressed == ["go"]


async def test_enter_on_focused_chip_posts_pressed():
    app = _ChipApp()
    async with app.run_test() as pilot:
        app.query_one("#go", Chip).focus()
        await pilot.press("enter")
        await pilot.pause()
        assert app.pressed == ["go"]


async def test_disabled_chip_press_is_ignored():
    app = _ChipApp()
    async with app.run_test() as pilot:
        app.query_one("#off", Chip).press()
        await pilot.pause()
        assert app.pressed == []
