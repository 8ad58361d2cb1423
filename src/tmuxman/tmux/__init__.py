"""Pure tmux operations - gateway, records and the client that binds them.

PUBLIC API:
  - run_tmux: Run tmux command and return trimmed stdout
  - inside_tmux: Check if running inside a tmux client
  - check_tmux_available: Check if the tmux binary can be run
  - TmuxClient: Read and write sessions, windows and panes
  - SessionRecord: Session snapshot
  - WindowRecord: Window snapshot
  - PaneRecord: Pane snapshot
  - TmuxError: Base exception for tmux operations
  - ProcessFailure: tmux launch failure or non-zero exit
"""

# Core tmux operations
from .core import run_tmux, inside_tmux, check_tmux_available

from .client import TmuxClient

from .session import SessionRecord
from .window import WindowRecord
from .pane import PaneRecord

from .exceptions import TmuxError, ProcessFailure

__all__ = [
    "run_tmux",
    "inside_tmux",
    "check_tmux_available",
    "TmuxClient",
    "SessionRecord",
    "WindowRecord",
    "PaneRecord",
    "TmuxError",
    "ProcessFailure",
]
