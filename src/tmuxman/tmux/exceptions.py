"""Tmux-specific exceptions.

PUBLIC API:
  - TmuxError: Base exception for all tmux operations
  - ProcessFailure: tmux could not be launched or exited non-zero
"""

from typing import List, Optional


class TmuxError(Exception):
    """Base exception for all tmux operations."""

    pass


class ProcessFailure(TmuxError):
    """Raised when a tmux invocation fails.

    Attributes:
        args_: Argument vector passed to tmux (without the binary).
        returncode: Exit status, or None when the binary could not be launched.
        stderr: Captured standard error, kept for diagnostics only.
    """

    def __init__(self, args: List[str], returncode: Optional[int] = None, stderr: str = ""):
        self.args_ = list(args)
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            message = f"Failed to launch tmux for {' '.join(self.args_)}"
        else:
            message = f"tmux {' '.join(self.args_)} exited with status {returncode}"
        super().__init__(message)
