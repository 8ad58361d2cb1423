"""Textual widgets for tmuxman.

PUBLIC API:
  - ResourceColumn: Titled option list mirroring one hierarchy level
"""

from .resource_column import ResourceColumn

__all__ = ["ResourceColumn"]
