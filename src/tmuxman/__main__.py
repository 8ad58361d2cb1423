"""tmuxman entry point.

Runs the interactive browser, then hands the terminal over to the chosen
session, window or pane.
"""

import argparse
import logging
import sys

from textual.logging import TextualHandler

from . import __version__
from .config import LOG_LEVELS, Config, load_config
from .handoff import handoff
from .hierarchy import Hierarchy
from .tmux import TmuxClient, check_tmux_available

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tmuxman", description="Browse and attach to tmux sessions.")
    parser.add_argument("--tmux-bin", help="tmux executable (env: TMUXMAN_TMUX_BIN)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper, help="env: TMUXMAN_LOG_LEVEL")
    parser.add_argument("--log-file", help="write logs here instead of the Textual console (env: TMUXMAN_LOG_FILE)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def _setup_logging(config: Config) -> None:
    """Route logs to a file, or to the Textual devtools console while the UI owns the terminal."""
    kwargs = {"filename": config.log_file} if config.log_file else {"handlers": [TextualHandler()]}
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
        **kwargs,
    )


def main(argv: list[str] | None = None) -> int:
    """Run tmuxman.

    Returns:
        Process exit code. Does not return when attaching from outside tmux.
    """
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    try:
        config = load_config(vars(args))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    _setup_logging(config)

    if not check_tmux_available(config.tmux_bin):
        print(f"Error: cannot run '{config.tmux_bin}'. Is tmux installed and on PATH?", file=sys.stderr)
        return 1

    from .ui import TmuxManagerApp

    client = TmuxClient(binary=config.tmux_bin)
    target = TmuxManagerApp(Hierarchy(client)).run()

    if target is None:
        return 0
    return 0 if handoff(target, client) else 1


if __name__ == "__main__":
    sys.exit(main())
