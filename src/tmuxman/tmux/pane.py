"""Pane records and argument builders.

PUBLIC API:
  - PaneRecord: Pane snapshot decoded from list-panes output
  - list_panes_args: Build list-panes argv scoped to a window
  - split_window_args: Build split-window argv (default split)
  - kill_pane_args: Build kill-pane argv
  - select_pane_args: Build select-pane argv
"""

from typing import List, NamedTuple

from .core import DELIMITER, parse_format_line

PANE_FORMAT = DELIMITER.join(
    [
        "#{pane_id}",
        "#{pane_width}",
        "#{pane_height}",
        "#{pane_current_path}",
        "#{pane_current_command}",
        "#{pane_active}",
    ]
)


class PaneRecord(NamedTuple):
    """Pane snapshot.

    All fields except ``active`` default to "" when missing from the line.
    ``active`` is True only when tmux reports "1".
    """

    id: str  # %42
    width: str
    height: str
    current_path: str
    current_command: str
    active: bool

    @classmethod
    def from_format_line(cls, line: str) -> "PaneRecord":
        """Parse from PANE_FORMAT output."""
        parts = parse_format_line(line)

        def field(i: int) -> str:
            return parts[i] if len(parts) > i else ""

        return cls(
            id=field(0),
            width=field(1),
            height=field(2),
            current_path=field(3),
            current_command=field(4),
            active=field(5) == "1",
        )

    @property
    def size(self) -> str:
        """Get WIDTHxHEIGHT display format."""
        return f"{self.width}x{self.height}"


def list_panes_args(window_id: str) -> List[str]:
    return ["list-panes", "-t", window_id, "-F", PANE_FORMAT]


def split_window_args(window_id: str) -> List[str]:
    return ["split-window", "-t", window_id]


def kill_pane_args(pane_id: str) -> List[str]:
    return ["kill-pane", "-t", pane_id]


def select_pane_args(pane_id: str) -> List[str]:
    """Make pane_id the window's active pane, so attach puts the cursor there."""
    return ["select-pane", "-t", pane_id]
