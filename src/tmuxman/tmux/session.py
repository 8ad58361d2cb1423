"""Session records and argument builders.

PUBLIC API:
  - SessionRecord: Session snapshot decoded from list-sessions output
  - list_sessions_args: Build list-sessions argv
  - new_session_args: Build new-session argv
  - rename_session_args: Build rename-session argv
  - kill_session_args: Build kill-session argv
  - switch_client_args: Build switch-client argv
  - attach_args: Build attach argv
"""

from typing import List, NamedTuple

from .core import DELIMITER, parse_format_line

SESSION_FORMAT = DELIMITER.join(
    ["#{session_id}", "#{session_name}", "#{session_windows}", "#{session_created_string}"]
)


class SessionRecord(NamedTuple):
    """Session snapshot.

    Attributes:
        id: tmux session ID, e.g. "$3". Stable for the life of the session.
        name: User-visible session name.
        window_count: Number of windows as tmux prints it. Defaults to "0".
        created: Creation time as a display string. Defaults to "".
    """

    id: str
    name: str
    window_count: str
    created: str

    @classmethod
    def from_format_line(cls, line: str) -> "SessionRecord":
        """Parse from SESSION_FORMAT output, defaulting missing trailing fields."""
        parts = parse_format_line(line)
        return cls(
            id=parts[0],
            name=parts[1] if len(parts) > 1 else "",
            window_count=parts[2] if len(parts) > 2 else "0",
            created=parts[3] if len(parts) > 3 else "",
        )


def list_sessions_args() -> List[str]:
    return ["list-sessions", "-F", SESSION_FORMAT]


def new_session_args(name: str) -> List[str]:
    """Create a detached session so the manager keeps the terminal."""
    return ["new-session", "-d", "-s", name]


def rename_session_args(old_name: str, new_name: str) -> List[str]:
    return ["rename-session", "-t", old_name, new_name]


def kill_session_args(name: str) -> List[str]:
    return ["kill-session", "-t", name]


def switch_client_args(target: str) -> List[str]:
    """Move the calling tmux client to target."""
    return ["switch-client", "-t", target]


def attach_args(target: str) -> List[str]:
    return ["attach", "-t", target]
