"""Textual screens for tmuxman.

PUBLIC API:
  - BrowserScreen: Home screen with the three columns
  - NameInputScreen: Prompt for a new or changed name
  - ConfirmScreen: Confirm a delete
"""

from .browser_screen import BrowserScreen
from .name_input_screen import NameInputScreen
from .confirm_screen import ConfirmScreen

__all__ = [
    "BrowserScreen",
    "NameInputScreen",
    "ConfirmScreen",
]
