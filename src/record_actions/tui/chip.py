"""Reusable chip widget: lightweight clickable text control.

Used for the action bar buttons: plain text, no borders or half-block chrome,
with real :hover / :disabled CSS support.
"""

from textual.message import Message
from textual.widgets import Static


class Chip(Static):
    """Clickable chip that posts Chip.Pressed on click, Enter or Space.

    Disabled chips receive no mouse events from Textual, so Pressed is never
    posted for them.
    """

    ALLOW_SELECT = False
    can_focus = True

    DEFAULT_CSS = """
    Chip {
        width: auto;
        height: 1;
        margin-right: 1;
        text-style: bold;
        background: $panel-lighten-2;
        color: $text;
    }

    Chip:hover {
        background: $panel-lighten-1;
        color: $text;
    }

    Chip:focus {
        text-style: bold underline;
        background: $panel-lighten-1;
        color: $text;
    }

    Chip:disabled {
        text-style: initial;
        background: $surface;
        color: $text-muted;
    }
    """

    class Pressed(Message):
        """Posted when an enabled chip is activated."""

        def __init__(self, chip: "Chip") -> None:
            super().__init__()
            self.chip = chip

        @property
        def control(self) -> "Chip":
            return self.chip

    def __init__(self, label: str, **kwargs):
        super().__init__(label, **kwargs)

    def press(self) -> None:
        if self.disabled:
            return
        self.post_message(self.Pressed(self))

    async def on_click(self, event) -> None:
        event.stop()
        self.press()

    def on_key(self, event) -> None:
        if event.key in ("enter", "space"):
            event.stop()
            event.prevent_default()
            self.press()
