"""Type definitions for tmuxman.

Focus areas, user intents and the interaction modes the UI moves through.
Modes are tagged variants: each carries only what its screen needs.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal, Optional


Direction = Literal["next", "prev"]

# What a NameInput submission does once the user confirms
NameAction = Literal["new_session", "rename_session", "new_window", "rename_window"]


class FocusArea(Enum):
    """Which column receives navigation and action keys."""

    SESSIONS = "sessions"
    WINDOWS = "windows"
    PANES = "panes"

    def next(self) -> "FocusArea":
        """Get the column to the right, wrapping to Sessions."""
        order = list(FocusArea)
        return order[(order.index(self) + 1) % len(order)]

    def prev(self) -> "FocusArea":
        """Get the column to the left, wrapping to Panes."""
        order = list(FocusArea)
        return order[(order.index(self) - 1) % len(order)]


class Intent(Enum):
    CREATE = "create"
    RENAME = "rename"
    DELETE = "delete"
    ATTACH = "attach"


@dataclass(frozen=True)
class Normal:
    """Browsing; keys navigate and start actions."""

    pass


@dataclass(frozen=True)
class NameInput:
    """Waiting for a name to create or rename a resource.

    Attributes:
        action: What the submitted name is used for.
        title: Prompt shown above the input.
        initial: Pre-filled text (current name when renaming).
    """

    action: NameAction
    title: str
    initial: str = ""


@dataclass(frozen=True)
class ConfirmDelete:
    """Waiting for y/n before deleting one resource.

    Attributes:
        focus: Level of the resource being deleted.
        target: Session name, window ID or pane ID passed to tmux.
        label: Human-readable description for the prompt.
    """

    focus: FocusArea
    target: str
    label: str

    @property
    def title(self) -> str:
        return f"Delete {self.focus.value[:-1].capitalize()}?"


Mode = Normal | NameInput | ConfirmDelete


@dataclass(frozen=True)
class AttachTarget:
    """Where to hand the terminal over once the UI exits.

    Attributes:
        session: Session name.
        window_id: Window to attach to or select first.
        pane_id: Pane to select before attaching.
    """

    session: str
    window_id: Optional[str] = None
    pane_id: Optional[str] = None

    @property
    def target(self) -> str:
        """Get the -t argument for attach/switch-client.

        Pane targets attach to the session; the window and pane are made
        current with select-window/select-pane beforehand.
        """
        if self.window_id and not self.pane_id:
            return f"{self.session}:{self.window_id}"
        return self.session
