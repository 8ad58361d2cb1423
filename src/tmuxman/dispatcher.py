"""Map focus + intent onto tmux writes.

PUBLIC API:
  - Dispatcher: Start, submit and confirm actions; resolve attach targets
"""

import logging
from typing import Optional

from .hierarchy import Hierarchy
from .tmux import TmuxClient
from .types import AttachTarget, ConfirmDelete, FocusArea, Intent, Mode, NameInput, Normal

logger = logging.getLogger(__name__)

__all__ = ["Dispatcher"]


class Dispatcher:
    """Turns user intents into tmux commands followed by a full refresh.

    Preconditions (something selected, a parent to create into) are checked
    before anything is sent; an action that cannot apply leaves the mode at
    Normal. Write results are not inspected: the refresh afterwards shows
    whatever tmux actually did.
    """

    def __init__(self, hierarchy: Hierarchy):
        self.hierarchy = hierarchy

    @property
    def client(self) -> TmuxClient:
        return self.hierarchy.client

    def begin(self, intent: Intent, focus: FocusArea) -> Mode:
        """Start an action and return the mode the UI should enter.

        Args:
            intent: CREATE, RENAME or DELETE.
            focus: Column the action applies to.

        Returns:
            NameInput, ConfirmDelete, or Normal when nothing more is needed.
        """
        if intent is Intent.CREATE:
            return self._begin_create(focus)
        if intent is Intent.RENAME:
            return self._begin_rename(focus)
        if intent is Intent.DELETE:
            return self._begin_delete(focus)
        return Normal()

    def _begin_create(self, focus: FocusArea) -> Mode:
        h = self.hierarchy
        if focus is FocusArea.SESSIONS:
            return NameInput("new_session", "New Session Name")
        if focus is FocusArea.WINDOWS:
            if h.selected_session() is None:
                return Normal()
            return NameInput("new_window", "New Window Name")

        # Panes are split without a prompt
        window = h.selected_window()
        if window is not None:
            self.client.create_pane(window.id)
            h.refresh_all()
        return Normal()

    def _begin_rename(self, focus: FocusArea) -> Mode:
        h = self.hierarchy
        if focus is FocusArea.SESSIONS:
            session = h.selected_session()
            if session is not None:
                return NameInput("rename_session", "Rename Session", session.name)
        elif focus is FocusArea.WINDOWS:
            window = h.selected_window()
            if window is not None:
                return NameInput("rename_window", "Rename Window", window.name)
        return Normal()

    def _begin_delete(self, focus: FocusArea) -> Mode:
        h = self.hierarchy
        if focus is FocusArea.SESSIONS:
            session = h.selected_session()
            if session is not None:
                return ConfirmDelete(focus, session.name, session.name)
        elif focus is FocusArea.WINDOWS:
            window = h.selected_window()
            if window is not None:
                return ConfirmDelete(focus, window.id, f"{window.id}: {window.name}")
        else:
            pane = h.selected_pane()
            if pane is not None:
                return ConfirmDelete(focus, pane.id, f"{pane.id} ({pane.current_command})")
        return Normal()

    def submit(self, mode: NameInput, text: str) -> None:
        """Apply a submitted name, then refresh everything.

        Blank input sends nothing. The current selection is re-read here so a
        rename applies to whatever is selected at submit time.
        """
        name = text.strip()
        if name:
            self._apply_name(mode, name)
        self.hierarchy.refresh_all()

    def _apply_name(self, mode: NameInput, name: str) -> None:
        h = self.hierarchy
        if mode.action == "new_session":
            self.client.create_session(name)
        elif mode.action == "rename_session":
            session = h.selected_session()
            if session is not None:
                self.client.rename_session(session.name, name)
        elif mode.action == "new_window":
            session = h.selected_session()
            if session is not None:
                self.client.create_window(session.id, name)
        elif mode.action == "rename_window":
            window = h.selected_window()
            if window is not None:
                self.client.rename_window(window.id, name)

    def confirm(self, mode: ConfirmDelete) -> None:
        """Delete the resource carried by mode, then refresh everything."""
        if mode.focus is FocusArea.SESSIONS:
            self.client.kill_session(mode.target)
        elif mode.focus is FocusArea.WINDOWS:
            self.client.kill_window(mode.target)
        else:
            self.client.kill_pane(mode.target)
        self.hierarchy.refresh_all()

    def refresh(self) -> None:
        self.hierarchy.refresh_all()

    def attach(self, focus: FocusArea) -> Optional[AttachTarget]:
        """Resolve where to attach for the focused column.

        Returns None when the focused level (or a parent it needs) has no
        selection. Nothing is sent to tmux here.
        """
        h = self.hierarchy
        session = h.selected_session()
        if session is None:
            return None
        if focus is FocusArea.SESSIONS:
            target = AttachTarget(session.name)
        elif focus is FocusArea.WINDOWS:
            window = h.selected_window()
            if window is None:
                return None
            target = AttachTarget(session.name, window_id=window.id)
        else:
            window = h.selected_window()
            pane = h.selected_pane()
            if window is None or pane is None:
                return None
            target = AttachTarget(session.name, window_id=window.id, pane_id=pane.id)
        logger.info(f"Attach target: {target.target}")
        return target
