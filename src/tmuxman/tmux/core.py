"""Core tmux operations - shared utilities for all tmux modules.

PUBLIC API:
  - DELIMITER: Field separator used in every -F format string
  - run_tmux: Execute tmux command and return trimmed stdout
  - parse_format_line: Split one line of format output into fields
  - inside_tmux: Check if running inside a tmux client
  - check_tmux_available: Check if the tmux binary can be run
"""

import logging
import os
import subprocess
from typing import List

from .exceptions import ProcessFailure

logger = logging.getLogger(__name__)

DELIMITER = "|"


def run_tmux(args: List[str], binary: str = "tmux") -> str:
    """Run tmux command and return its trimmed stdout.

    Args:
        args: Arguments after the binary name, e.g. ["list-sessions"].
        binary: tmux executable looked up on PATH.

    Returns:
        Standard output with surrounding whitespace removed.

    Raises:
        ProcessFailure: If tmux cannot be launched or exits non-zero.
    """
    cmd = [binary] + list(args)
    logger.debug(f"Running {cmd}")
    try:
        result = subprocess.run(
            cmd, capture_output=True, encoding="utf-8", errors="replace", stdin=subprocess.DEVNULL
        )
    except OSError as e:
        logger.debug(f"Could not launch {binary}: {e}")
        raise ProcessFailure(args, None, str(e)) from e

    if result.returncode != 0:
        logger.debug(f"{cmd} failed ({result.returncode}): {result.stderr.strip()}")
        raise ProcessFailure(args, result.returncode, result.stderr)

    return result.stdout.strip()


def parse_format_line(line: str, delimiter: str = DELIMITER) -> list[str]:
    """Split tmux format output into positional fields."""
    return line.rstrip("\r\n").split(delimiter)


def inside_tmux() -> bool:
    """Check if the current process runs inside a tmux client."""
    return bool(os.environ.get("TMUX"))


def check_tmux_available(binary: str = "tmux") -> bool:
    """Check if the tmux binary can be launched."""
    try:
        run_tmux(["-V"], binary=binary)
    except ProcessFailure:
        return False
    return True
