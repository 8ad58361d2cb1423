"""Cursor over one level's list.

PUBLIC API:
  - Selection: Selected index (or none) with wrap-around movement and repair
"""

from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

__all__ = ["Selection"]


class Selection:
    """Selected index over a list of known length.

    Invariant after any operation: ``cursor`` is None iff ``length`` is 0,
    otherwise ``0 <= cursor < length``.
    """

    def __init__(self, length: int = 0):
        self.length = 0
        self.cursor: Optional[int] = None
        self.repair(length)

    def __repr__(self) -> str:
        return f"Selection(cursor={self.cursor}, length={self.length})"

    def next(self) -> None:
        """Move down, wrapping from the last item to the first."""
        if self.length == 0:
            return
        self.cursor = 0 if self.cursor is None else (self.cursor + 1) % self.length

    def prev(self) -> None:
        """Move up, wrapping from the first item to the last."""
        if self.length == 0:
            return
        self.cursor = 0 if self.cursor is None else (self.cursor - 1) % self.length

    def repair(self, new_length: int) -> None:
        """Fit the cursor to a replaced list.

        A cursor that still fits is kept; one past the end clamps to the new
        last item instead of jumping back to the top.
        """
        self.length = new_length
        if new_length == 0:
            self.cursor = None
        elif self.cursor is None:
            self.cursor = 0
        elif self.cursor >= new_length:
            self.cursor = new_length - 1

    def select(self, index: int) -> None:
        """Select an explicit index, clamped to the list."""
        if self.length == 0:
            return
        self.cursor = max(0, index)
        self.repair(self.length)

    def pick(self, items: Sequence[T]) -> Optional[T]:
        """Get the selected item from items, or None."""
        if self.cursor is None or self.cursor >= len(items):
            return None
        return items[self.cursor]
