"""Browser screen - three cascading columns.

PUBLIC API:
  - BrowserScreen: Sessions, windows and panes side by side
  - help_text: Key help for a focus area
"""

import logging
from typing import Optional

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import OptionList, Static

from ...dispatcher import Dispatcher
from ...hierarchy import Hierarchy
from ...types import ConfirmDelete, FocusArea, Intent, Mode, NameInput, Normal
from ..widgets import ResourceColumn
from ..widgets.resource_column import pane_row, session_row, window_row
from .confirm_screen import ConfirmScreen
from .name_input_screen import NameInputScreen

logger = logging.getLogger(__name__)

__all__ = ["BrowserScreen", "help_text"]

_COMMON_HELP = "NAV: Arrows/Tab | q: Quit | r: Refresh"

_FOCUS_HELP = {
    FocusArea.SESSIONS: "Enter: Attach | n: New | d: Del | R: Rename",
    FocusArea.WINDOWS: "Enter: Attach | n: New Win | d: Del Win | R: Rename",
    FocusArea.PANES: "Enter: Attach | n: Split Pane | d: Kill Pane",
}


def help_text(focus: FocusArea) -> str:
    return f"{_COMMON_HELP} | {_FOCUS_HELP[focus]}"


class BrowserScreen(Screen):
    """Home screen rendering Hierarchy state.

    Keys are forwarded to the Hierarchy (navigation) or Dispatcher (actions)
    and the columns are redrawn afterwards. Nothing refreshes on a timer.

    Args:
        hierarchy: Lists and selections to show.
        dispatcher: Action handler bound to the same hierarchy.
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "refresh", "Refresh"),
        Binding("j,down", "navigate('next')", "Down", show=False),
        Binding("k,up", "navigate('prev')", "Up", show=False),
        Binding("tab,right", "cycle_focus", "Next column", show=False),
        Binding("shift+tab,left", "cycle_focus_back", "Previous column", show=False),
        Binding("n", "intent('create')", "New"),
        Binding("R", "intent('rename')", "Rename"),
        Binding("d", "intent('delete')", "Delete"),
        Binding("enter", "attach", "Attach"),
    ]

    def __init__(self, hierarchy: Hierarchy, dispatcher: Dispatcher):
        super().__init__()
        self.hierarchy = hierarchy
        self.dispatcher = dispatcher
        self.focus_area = FocusArea.SESSIONS

    def compose(self) -> ComposeResult:
        yield Static(f" {self.app.TITLE} ", id="app-title")
        with Horizontal(id="columns"):
            for area in FocusArea:
                yield ResourceColumn(area)
        yield Static(id="help")

    def on_mount(self) -> None:
        self.hierarchy.refresh_all()
        self.sync_view()

    def sync_view(self) -> None:
        """Redraw all columns from the hierarchy."""
        h = self.hierarchy
        rows = {
            FocusArea.SESSIONS: [session_row(s) for s in h.sessions],
            FocusArea.WINDOWS: [window_row(w) for w in h.windows],
            FocusArea.PANES: [pane_row(p) for p in h.panes],
        }
        for column in self.query(ResourceColumn):
            column.show(rows[column.area], h.selection_for(column.area).cursor, column.area is self.focus_area)
        self.query_one("#help", Static).update(help_text(self.focus_area))

    # --- actions ---

    def action_quit(self) -> None:
        self.app.exit()

    def action_refresh(self) -> None:
        self.dispatcher.refresh()
        self.sync_view()

    def action_navigate(self, direction: str) -> None:
        self.hierarchy.navigate("next" if direction == "next" else "prev", self.focus_area)
        self.sync_view()

    def action_cycle_focus(self) -> None:
        self.focus_area = self.focus_area.next()
        self.sync_view()

    def action_cycle_focus_back(self) -> None:
        self.focus_area = self.focus_area.prev()
        self.sync_view()

    def action_intent(self, name: str) -> None:
        mode = self.dispatcher.begin(Intent(name), self.focus_area)
        self._enter(mode)
        self.sync_view()

    def action_attach(self) -> None:
        target = self.dispatcher.attach(self.focus_area)
        if target is not None:
            self.app.exit(target)

    def _enter(self, mode: Mode) -> None:
        if isinstance(mode, NameInput):
            self.app.push_screen(NameInputScreen(mode), lambda text: self._on_name(mode, text))
        elif isinstance(mode, ConfirmDelete):
            self.app.push_screen(ConfirmScreen(mode), lambda ok: self._on_confirm(mode, ok))
        elif not isinstance(mode, Normal):
            logger.error(f"Unknown mode {mode!r}")

    def _on_name(self, mode: NameInput, text: Optional[str]) -> None:
        if text is None:
            return
        self.dispatcher.submit(mode, text)
        self.sync_view()

    def _on_confirm(self, mode: ConfirmDelete, confirmed: Optional[bool]) -> None:
        if not confirmed:
            return
        self.dispatcher.confirm(mode)
        self.sync_view()

    # --- mouse ---

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        """Clicking a row focuses its column and selects the row."""
        column = event.option_list
        if not isinstance(column, ResourceColumn):
            return
        self.focus_area = column.area
        self.hierarchy.select(event.option_index, column.area)
        self.sync_view()
