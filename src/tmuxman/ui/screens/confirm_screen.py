"""Delete confirmation.

PUBLIC API:
  - ConfirmScreen: Modal y/n prompt, dismisses with True or False
"""

from textual import events
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Static

from ...types import ConfirmDelete

__all__ = ["ConfirmScreen"]


class ConfirmScreen(ModalScreen[bool]):
    """Confirm deleting the resource carried by mode."""

    def __init__(self, mode: ConfirmDelete):
        super().__init__()
        self.mode = mode

    def compose(self) -> ComposeResult:
        with Vertical(id="confirm-box") as box:
            box.border_title = f" {self.mode.title} "
            yield Static(self.mode.label, classes="label", markup=False)
            yield Static("Are you sure? (y/n)", classes="hint")

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        if event.key in ("y", "enter"):
            self.dismiss(True)
        elif event.key in ("n", "escape"):
            self.dismiss(False)
