"""Runtime settings for tmuxman.

Settings come from command-line flags, then TMUXMAN_* environment variables,
then defaults. Nothing is read from or written to disk.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

ENV_PREFIX = "TMUXMAN_"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Config:
    """Resolved settings.

    Attributes:
        tmux_bin: tmux executable name or path.
        log_level: Logging level name.
        log_file: File to log to. None sends records to the Textual console.
    """

    tmux_bin: str = "tmux"
    log_level: str = "WARNING"
    log_file: Optional[str] = None


def load_config(
    overrides: Optional[Mapping[str, Optional[str]]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Config:
    """Build Config from overrides (flags), environment, and defaults.

    Args:
        overrides: Values from the command line; None entries are ignored.
        environ: Environment mapping. Defaults to os.environ.

    Raises:
        ValueError: If the log level is not a known level name.
    """
    overrides = overrides or {}
    environ = os.environ if environ is None else environ
    defaults = Config()

    def pick(key: str, default: Optional[str]) -> Optional[str]:
        value = overrides.get(key)
        if value is None:
            value = environ.get(ENV_PREFIX + key.upper()) or None
        return default if value is None else value

    log_level = (pick("log_level", defaults.log_level) or defaults.log_level).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {log_level}")

    return Config(
        tmux_bin=pick("tmux_bin", defaults.tmux_bin) or defaults.tmux_bin,
        log_level=log_level,
        log_file=pick("log_file", defaults.log_file),
    )
