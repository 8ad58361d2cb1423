"""Session → window → pane synchronization.

Owns the three record lists and their selections. A parent's selection decides
which children are listed, so every change at a parent level re-fetches the
levels below it.

PUBLIC API:
  - Hierarchy: Cascading lists with refresh and navigation
"""

import logging
from typing import Optional

from .selection import Selection
from .tmux import PaneRecord, ProcessFailure, SessionRecord, TmuxClient, WindowRecord
from .types import Direction, FocusArea

logger = logging.getLogger(__name__)

__all__ = ["Hierarchy"]


class Hierarchy:
    """Sessions, windows and panes kept consistent with tmux.

    Lists are replaced wholesale on refresh and committed in order sessions,
    windows, panes. A failed listing empties that level and everything below;
    refresh never raises.

    Args:
        client: tmux client used for every listing.
    """

    def __init__(self, client: TmuxClient):
        self.client = client
        self.sessions: tuple[SessionRecord, ...] = ()
        self.windows: tuple[WindowRecord, ...] = ()
        self.panes: tuple[PaneRecord, ...] = ()
        self.session_selection = Selection()
        self.window_selection = Selection()
        self.pane_selection = Selection()

    def selected_session(self) -> Optional[SessionRecord]:
        return self.session_selection.pick(self.sessions)

    def selected_window(self) -> Optional[WindowRecord]:
        return self.window_selection.pick(self.windows)

    def selected_pane(self) -> Optional[PaneRecord]:
        return self.pane_selection.pick(self.panes)

    def selection_for(self, focus: FocusArea) -> Selection:
        """Get the selection that receives input for focus."""
        if focus is FocusArea.SESSIONS:
            return self.session_selection
        if focus is FocusArea.WINDOWS:
            return self.window_selection
        return self.pane_selection

    def refresh_all(self) -> None:
        """Re-list every level from the sessions down."""
        try:
            self.sessions = tuple(self.client.list_sessions())
        except ProcessFailure as e:
            logger.warning(f"Listing sessions failed: {e}")
            self.sessions = ()
        self.session_selection.repair(len(self.sessions))
        self._refresh_windows()
        self.refresh_panes_only()

    def _refresh_windows(self) -> None:
        session = self.selected_session()
        if session is None:
            self.windows = ()
        else:
            try:
                self.windows = tuple(self.client.list_windows(session.id))
            except ProcessFailure as e:
                logger.warning(f"Listing windows of {session.id} failed: {e}")
                self.windows = ()
        self.window_selection.repair(len(self.windows))

    def refresh_panes_only(self) -> None:
        """Re-list panes of the selected window; sessions and windows are kept."""
        window = self.selected_window()
        if window is None:
            self.panes = ()
        else:
            try:
                self.panes = tuple(self.client.list_panes(window.id))
            except ProcessFailure as e:
                logger.warning(f"Listing panes of {window.id} failed: {e}")
                self.panes = ()
        self.pane_selection.repair(len(self.panes))

    def navigate(self, direction: Direction, focus: FocusArea) -> None:
        """Move the focused selection and re-list the levels it invalidates."""
        selection = self.selection_for(focus)
        if direction == "next":
            selection.next()
        else:
            selection.prev()
        self._after_move(focus)

    def select(self, index: int, focus: FocusArea) -> None:
        """Select an explicit row, re-listing like navigate when it changes."""
        selection = self.selection_for(focus)
        before = selection.cursor
        selection.select(index)
        if selection.cursor != before:
            self._after_move(focus)

    def _after_move(self, focus: FocusArea) -> None:
        if focus is FocusArea.SESSIONS:
            self.refresh_all()
        elif focus is FocusArea.WINDOWS:
            self.refresh_panes_only()
