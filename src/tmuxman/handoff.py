"""Hand the terminal over to tmux after the UI exits.

PUBLIC API:
  - handoff: Switch the current client, or exec tmux attach
"""

import logging
import os
from typing import Callable, Optional

from .tmux import TmuxClient, inside_tmux
from .tmux.session import attach_args
from .types import AttachTarget

logger = logging.getLogger(__name__)

__all__ = ["handoff"]


def handoff(
    target: AttachTarget,
    client: TmuxClient,
    exec_fn: Optional[Callable[[str, list[str]], None]] = None,
) -> bool:
    """Attach the terminal to target.

    Inside tmux the current client is switched and control returns. Outside
    tmux this process is replaced by ``tmux attach`` and does not return
    unless exec fails.

    Args:
        target: Resolved attach target.
        client: Client used for the pre-attach selects and switch-client.
        exec_fn: Replacement for os.execvp.

    Returns:
        True if switch-client succeeded.
    """
    if target.pane_id and target.window_id:
        client.select_window(target.window_id)
        client.select_pane(target.pane_id)

    if inside_tmux():
        return client.switch_client(target.target)

    exec_fn = exec_fn or os.execvp
    argv = [client.binary] + attach_args(target.target)
    logger.info(f"Replacing process with {argv}")
    exec_fn(client.binary, argv)
    return False
