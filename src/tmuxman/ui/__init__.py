"""Textual front-end for tmuxman.

PUBLIC API:
  - TmuxManagerApp: Three-column session/window/pane browser
"""

from .app import TmuxManagerApp

__all__ = ["TmuxManagerApp"]
