"""The stack of focused views, most recently focused last."""

from __future__ import annotations

import threading
from typing import Iterable, Iterator, Optional


class ViewStack:
    """Keeps the order in which views were focused.

    Side views reset the stack, popups are dropped whenever another view is
    pushed (except the filter prompt, which may be filtering a popup), and a
    view appears at most once.
    """

    def __init__(
        self,
        side_view_names: Iterable[str],
        popup_view_names: Iterable[str],
        initial_view_name: str,
    ) -> None:
        self._side_view_names = frozenset(side_view_names)
        self._popup_view_names = frozenset(popup_view_names)
        self._initial_view_name = initial_view_name
        self._names: list[str] = []
        self._lock = threading.Lock()

    def push(self, name: str) -> None:
        """Put ``name`` on top of the stack."""
        with self._lock:
            names = self._names
            if name != "filter":
                names = [n for n in names if n not in self._popup_view_names]
            if name in self._side_view_names:
                names = []
            names = [n for n in names if n != name]
            names.append(name)
            self._names = names

    def remove(self, name: str) -> None:
        """Drop ``name`` from the stack wherever it is."""
        with self._lock:
            self._names = [n for n in self._names if n != name]

    def previous(self) -> Optional[str]:
        """Return the view below the top, or None if there is only one view."""
        with self._lock:
            if len(self._names) <= 1:
                return None
            return self._names[-2]

    def current(self) -> Optional[str]:
        """Return the focused view, or None if the stack is empty."""
        with self._lock:
            return self._names[-1] if self._names else None

    def current_static_view_name(self) -> str:
        """Return the topmost view that is not a popup."""
        with self._lock:
            for name in reversed(self._names):
                if name not in self._popup_view_names:
                    return name
            return self._initial_view_name

    def current_side_view_name(self) -> str:
        """Return the topmost side view."""
        with self._lock:
            for name in reversed(self._names):
                if name in self._side_view_names:
                    return name
            return self._initial_view_name

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._names

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(list(self._names))