"""A selectable list of items shown in a view."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Optional, TypeVar

from dockpanels.panels.filtered_list import FilteredList

T = TypeVar("T")


def _clamp(value: int, low: int, high: int) -> int:
    if value < low:
        return low
    if value > high:
        return high
    return value


class ListPanel(Generic[T]):
    """A filtered list with a selected line."""

    def __init__(self, items: Optional[Iterable[T]] = None, view: Any = None) -> None:
        self.selected_idx = 0
        self.list: FilteredList[T] = FilteredList(items)
        self.view = view

    def set_selected_line_idx(self, value: int) -> None:
        """Select ``value``, clamped to the visible items (0 if there are none)."""
        count = len(self.list)
        self.selected_idx = _clamp(value, 0, count - 1) if count > 0 else 0

    def clamp_selected_line_idx(self) -> None:
        """Pull the selection back within the visible items.

        With no visible items the selection ends up at -1, so that nothing
        counts as selected.
        """
        self.selected_idx = _clamp(self.selected_idx, 0, len(self.list) - 1)

    def _move_selected_line(self, delta: int) -> None:
        self.set_selected_line_idx(self.selected_idx + delta)

    def select_next_line(self) -> None:
        """Move the selection one line down."""
        self._move_selected_line(1)

    def select_prev_line(self) -> None:
        """Move the selection one line up."""
        self._move_selected_line(-1)