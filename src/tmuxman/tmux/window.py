"""Window records and argument builders.

PUBLIC API:
  - WindowRecord: Window snapshot decoded from list-windows output
  - list_windows_args: Build list-windows argv scoped to a session
  - new_window_args: Build new-window argv
  - rename_window_args: Build rename-window argv
  - kill_window_args: Build kill-window argv
  - select_window_args: Build select-window argv
"""

from typing import List, NamedTuple

from .core import DELIMITER, parse_format_line

WINDOW_FORMAT = DELIMITER.join(["#{window_id}", "#{window_name}", "#{window_active}", "#{window_layout}"])


class WindowRecord(NamedTuple):
    """Window snapshot.

    Attributes:
        id: tmux window ID, e.g. "@7".
        name: Window name. Defaults to "".
        active: True only when tmux reports "1". Defaults to False.
        layout: Opaque layout string, e.g. "b25d,80x24,0,0,1". Defaults to "".
    """

    id: str
    name: str
    active: bool
    layout: str

    @classmethod
    def from_format_line(cls, line: str) -> "WindowRecord":
        """Parse from WINDOW_FORMAT output, defaulting missing trailing fields."""
        parts = parse_format_line(line)
        return cls(
            id=parts[0],
            name=parts[1] if len(parts) > 1 else "",
            active=len(parts) > 2 and parts[2] == "1",
            layout=parts[3] if len(parts) > 3 else "",
        )


def list_windows_args(session_id: str) -> List[str]:
    return ["list-windows", "-t", session_id, "-F", WINDOW_FORMAT]


def new_window_args(session_id: str, name: str) -> List[str]:
    return ["new-window", "-t", session_id, "-n", name]


def rename_window_args(window_id: str, new_name: str) -> List[str]:
    return ["rename-window", "-t", window_id, new_name]


def kill_window_args(window_id: str) -> List[str]:
    return ["kill-window", "-t", window_id]


def select_window_args(window_id: str) -> List[str]:
    """Make window_id the session's current window, so attach lands on it."""
    return ["select-window", "-t", window_id]
