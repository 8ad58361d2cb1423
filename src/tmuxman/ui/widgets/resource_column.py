"""One column of the session/window/pane browser.

PUBLIC API:
  - ResourceColumn: Titled option list mirroring one level of the hierarchy
  - session_row: Render a SessionRecord row
  - window_row: Render a WindowRecord row
  - pane_row: Render a PaneRecord card
"""

from typing import Optional, Sequence

from rich.console import RenderableType
from rich.text import Text
from textual.widgets import OptionList

from ...tmux import PaneRecord, SessionRecord, WindowRecord
from ...types import FocusArea

__all__ = ["ResourceColumn", "session_row", "window_row", "pane_row"]


def session_row(session: SessionRecord) -> Text:
    row = Text()
    row.append(f":: {session.name}", style="bold")
    row.append(f" ({session.window_count}) ")
    row.append(f"[{session.created}]", style="dim")
    return row


def window_row(window: WindowRecord) -> Text:
    marker = "*" if window.active else " "
    return Text(f"{marker} {window.id}: {window.name} [{window.layout}]")


def pane_row(pane: PaneRecord) -> Text:
    """Multi-line card: id, command, path, size."""
    marker = "*" if pane.active else " "
    row = Text(f"{marker} ID: {pane.id}\n")
    row.append(f"   Cmd: {pane.current_command}\n", style="magenta")
    row.append(f"   Path: {pane.current_path}\n", style="dim")
    row.append(f"   Size: {pane.size}", style="dim")
    return row


class ResourceColumn(OptionList):
    """Read-only view of one hierarchy level.

    Keys are routed by the app, so the column never takes focus; the
    focused level is shown with the ``-focused`` class.

    Args:
        focus: Level this column displays.
    """

    BINDINGS = []
    can_focus = False

    def __init__(self, focus: FocusArea, **kwargs):
        super().__init__(id=f"{focus.value}-column", **kwargs)
        self.area = focus
        self.border_title = focus.value.capitalize()

    def show(self, rows: Sequence[RenderableType], cursor: Optional[int], focused: bool) -> None:
        """Replace rows and move the highlight to cursor."""
        self.clear_options()
        self.add_options(rows)
        self.highlighted = cursor
        self.set_class(focused, "-focused")
