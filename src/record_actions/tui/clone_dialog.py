"""Clone configuration dialog.

Collects the target id and record type for a clone. Dismisses with
(new_id, new_type) or None when cancelled.
"""

from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

from record_actions.identity import RecordIdentity


class CloneDialog(ModalScreen[tuple[str, str] | None]):
    DEFAULT_CSS = """
    CloneDialog {
        align: center middle;
    }

    CloneDialog > Vertical {
        width: 60;
        height: auto;
        padding: 1 2;
        background: $panel;
        border: solid $primary;
    }

    CloneDialog Horizontal {
        height: auto;
        margin-top: 1;
    }

    CloneDialog #clone-error {
        color: $error;
        height: auto;
    }
    """

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, source: RecordIdentity, **kwargs):
        super().__init__(**kwargs)
        self.source = source

    def compose(self):
        with Vertical():
            yield Label(f"Clone {self.source.id} ({self.source.record_type})")
            yield Input(placeholder="new record id", id="clone-id")
            yield Input(value=self.source.record_type, placeholder="record type", id="clone-type")
            yield Label("", id="clone-error")
            with Horizontal():
                yield Button("Clone", variant="primary", id="clone-ok")
                yield Button("Cancel", id="clone-cancel")

    def on_mount(self) -> None:
        self.query_one("#clone-id", Input).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "clone-ok":
            self._submit()
        else:
            self.dismiss(None)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._submit()

    def action_cancel(self) -> None:
        self.dismiss(None)

    def _submit(self) -> None:
        new_id = self.query_one("#clone-id", Input).value.strip()
        new_type = self.query_one("#clone-type", Input).value.strip() or self.source.record_type
        if not new_id:
            self.query_one("#clone-error", Label).update("Enter an id for the new record.")
            return
        self.dismiss((new_id, new_type))
