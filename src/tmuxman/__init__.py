"""Interactive tmux session, window and pane manager.

Browse the tmux resource tree in three cascading columns, create, rename and
delete sessions, windows and panes, and attach the terminal to any of them.

PUBLIC API:
  - Hierarchy: Session/window/pane lists kept consistent with tmux
  - Dispatcher: User intents mapped onto tmux commands
  - Selection: Per-column cursor
  - TmuxClient: tmux read/write operations
"""

from .dispatcher import Dispatcher
from .hierarchy import Hierarchy
from .selection import Selection
from .tmux import TmuxClient

__version__ = "0.1.0"
__all__ = ["Hierarchy", "Dispatcher", "Selection", "TmuxClient"]
