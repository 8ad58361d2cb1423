"""Tmux client - protocol codec bound to a process gateway.

PUBLIC API:
  - TmuxClient: Read and write tmux sessions, windows and panes
  - decode_lines: Decode multi-line format output into records
"""

import logging
from typing import Callable, List, Optional, TypeVar

from .core import run_tmux
from .exceptions import ProcessFailure
from .pane import PaneRecord, kill_pane_args, list_panes_args, select_pane_args, split_window_args
from .session import (
    SessionRecord,
    kill_session_args,
    list_sessions_args,
    new_session_args,
    rename_session_args,
    switch_client_args,
)
from .window import (
    WindowRecord,
    kill_window_args,
    list_windows_args,
    new_window_args,
    rename_window_args,
    select_window_args,
)

logger = logging.getLogger(__name__)

Runner = Callable[[List[str]], str]

R = TypeVar("R", SessionRecord, WindowRecord, PaneRecord)


def decode_lines(raw: str, record: type[R]) -> list[R]:
    """Decode format output line by line, skipping blank lines.

    Listing order is preserved.
    """
    return [record.from_format_line(line) for line in raw.splitlines() if line.strip()]


class TmuxClient:
    """tmux read/write operations.

    Reads raise ProcessFailure so callers decide how to degrade. Writes are
    fire-and-forget: failures are logged and reported as False.

    Args:
        binary: tmux executable name. Ignored when runner is given.
        runner: Callable taking an argv (without binary) and returning stdout.
    """

    def __init__(self, binary: str = "tmux", runner: Optional[Runner] = None):
        self.binary = binary
        self._runner = runner

    def run(self, args: List[str]) -> str:
        """Run one tmux command through the configured gateway."""
        if self._runner is not None:
            return self._runner(args)
        return run_tmux(args, binary=self.binary)

    def _fire(self, args: List[str]) -> bool:
        try:
            self.run(args)
        except ProcessFailure as e:
            logger.warning(f"Command failed: {e}")
            return False
        logger.info(f"tmux {' '.join(args)}")
        return True

    # --- reads ---

    def list_sessions(self) -> list[SessionRecord]:
        return decode_lines(self.run(list_sessions_args()), SessionRecord)

    def list_windows(self, session_id: str) -> list[WindowRecord]:
        return decode_lines(self.run(list_windows_args(session_id)), WindowRecord)

    def list_panes(self, window_id: str) -> list[PaneRecord]:
        return decode_lines(self.run(list_panes_args(window_id)), PaneRecord)

    # --- writes ---

    def create_session(self, name: str) -> bool:
        return self._fire(new_session_args(name))

    def rename_session(self, old_name: str, new_name: str) -> bool:
        return self._fire(rename_session_args(old_name, new_name))

    def kill_session(self, name: str) -> bool:
        return self._fire(kill_session_args(name))

    def create_window(self, session_id: str, name: str) -> bool:
        return self._fire(new_window_args(session_id, name))

    def rename_window(self, window_id: str, new_name: str) -> bool:
        return self._fire(rename_window_args(window_id, new_name))

    def kill_window(self, window_id: str) -> bool:
        return self._fire(kill_window_args(window_id))

    def create_pane(self, window_id: str) -> bool:
        return self._fire(split_window_args(window_id))

    def kill_pane(self, pane_id: str) -> bool:
        return self._fire(kill_pane_args(pane_id))

    def select_window(self, window_id: str) -> bool:
        return self._fire(select_window_args(window_id))

    def select_pane(self, pane_id: str) -> bool:
        return self._fire(select_pane_args(pane_id))

    def switch_client(self, target: str) -> bool:
        return self._fire(switch_client_args(target))
