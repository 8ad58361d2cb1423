"""Name prompt for creating and renaming resources.

PUBLIC API:
  - NameInputScreen: Modal single-line input, dismisses with text or None
"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Static

from ...types import NameInput

__all__ = ["NameInputScreen"]


class NameInputScreen(ModalScreen[str | None]):
    """Ask for a name.

    Enter dismisses with the raw input (the dispatcher trims it), Esc with None.

    Args:
        mode: NameInput mode supplying the title and pre-filled text.
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def __init__(self, mode: NameInput):
        super().__init__()
        self.mode = mode

    def compose(self) -> ComposeResult:
        with Vertical(id="input-box") as box:
            box.border_title = f" {self.mode.title} "
            yield Input(value=self.mode.initial, id="name-input")
            yield Static("Enter: Confirm | Esc: Cancel", classes="hint")

    def on_mount(self) -> None:
        field = self.query_one("#name-input", Input)
        field.focus()
        field.cursor_position = len(self.mode.initial)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.dismiss(event.value)

    def action_cancel(self) -> None:
        self.dismiss(None)
