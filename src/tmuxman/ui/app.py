"""tmuxman Textual application.

PUBLIC API:
  - TmuxManagerApp: run() returns the AttachTarget chosen, or None on quit
"""

from typing import Optional

from textual.app import App

from ..dispatcher import Dispatcher
from ..hierarchy import Hierarchy
from ..types import AttachTarget
from .screens import BrowserScreen

__all__ = ["TmuxManagerApp"]


class TmuxManagerApp(App[Optional[AttachTarget]]):
    """Session/window/pane browser.

    Args:
        hierarchy: Synchronizer holding the lists. Refreshed when the
            browser screen mounts.
    """

    CSS_PATH = "tmuxman.tcss"
    TITLE = "TMUX MANAGER"

    def __init__(self, hierarchy: Hierarchy):
        super().__init__()
        self.hierarchy = hierarchy
        self.dispatcher = Dispatcher(hierarchy)

    def on_mount(self) -> None:
        self.push_screen(BrowserScreen(self.hierarchy, self.dispatcher))
