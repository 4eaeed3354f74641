"""A list of items together with a filtered and ordered view of them."""

from __future__ import annotations

import functools
import threading
from typing import Callable, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


class FilteredList(Generic[T]):
    """Holds every item and the positions of those that pass the current filter.

    The positions are kept in display order, so sorting reorders the view
    without touching the underlying items.
    """

    def __init__(
        self,
        items: Optional[Iterable[T]] = None,
        indices: Optional[Iterable[int]] = None,
    ) -> None:
        self._lock = threading.RLock()
        self._all_items: list[T] = list(items) if items is not None else []
        if indices is None:
            self._indices = list(range(len(self._all_items)))
        else:
            self._indices = list(indices)
            for index in self._indices:
                if not 0 <= index < len(self._all_items):
                    raise IndexError(f"index {index} is outside the item list")

    def set_items(self, items: Iterable[T]) -> None:
        """Replace every item; all of them become visible in their given order."""
        with self._lock:
            self._all_items = list(items)
            self._indices = list(range(len(self._all_items)))

    def filter(self, predicate: Callable[[T, int], bool]) -> None:
        """Keep only the items for which ``predicate(item, index)`` is true."""
        with self._lock:
            self._indices = [
                index
                for index, item in enumerate(self._all_items)
                if predicate(item, index)
            ]

    def sort(self, less: Optional[Callable[[T, T], bool]]) -> None:
        """Order the visible items by a ``less(a, b)`` function; ``None`` leaves them."""
        if less is None:
            return

        def compare(a: T, b: T) -> int:
            if less(a, b):
                return -1
            if less(b, a):
                return 1
            return 0

        with self._lock:
            items = self._all_items
            key = functools.cmp_to_key(compare)
            self._indices.sort(key=lambda index: key(items[index]))

    def get(self, index: int) -> T:
        """Return the visible item at ``index``; raise IndexError if there is none."""
        with self._lock:
            if not 0 <= index < len(self._indices):
                raise IndexError(f"no visible item at position {index}")
            return self._all_items[self._indices[index]]

    def try_get(self, index: int) -> Optional[T]:
        """Return the visible item at ``index``, or None if there is none."""
        with self._lock:
            if not 0 <= index < len(self._indices):
                return None
            return self._all_items[self._indices[index]]

    def __len__(self) -> int:
        with self._lock:
            return len(self._indices)

    def index_of(self, item: T) -> int:
        """Return the visible position of ``item``, or -1 like ``str.find``."""
        with self._lock:
            for position, index in enumerate(self._indices):
                if self._all_items[index] == item:
                    return position
            return -1

    def items(self) -> list[T]:
        """Return the visible items in display order."""
        with self._lock:
            return [self._all_items[index] for index in self._indices]

    def all_items(self) -> list[T]:
        """Return every item, visible or not, in the order they were set."""
        with self._lock:
            return list(self._all_items)

    def indices(self) -> list[int]:
        """Return the positions in the full list of the visible items."""
        with self._lock:
            return list(self._indices)