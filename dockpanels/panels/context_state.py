"""Tabs shown in the main view for the item selected in a side panel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass
class MainTab(Generic[T]):
    """A tab of the main view: a key for caching, a title and a renderer."""

    key: str
    title: str
    render: Callable[[T], Any]


class ContextState(Generic[T]):
    """Tracks which main-view tab is selected and what context that amounts to.

    A context is an item together with the tab showing it; when the context
    key changes, the main view has to be rendered afresh.
    """

    def __init__(
        self,
        get_main_tabs: Callable[[], Sequence[MainTab[T]]],
        get_item_context_cache_key: Callable[[T], str],
    ) -> None:
        self.get_main_tabs = get_main_tabs
        self.get_item_context_cache_key = get_item_context_cache_key
        self.main_tab_index = 0

    def main_tab_titles(self) -> list[str]:
        """Return the titles of the available tabs."""
        return [tab.title for tab in self.get_main_tabs()]

    def current_context_key(self, item: T) -> str:
        """Return the key identifying ``item`` shown in the current tab."""
        return f"{self.get_item_context_cache_key(item)}-{self.current_main_tab().key}"

    def current_main_tab(self) -> MainTab[T]:
        """Return the selected tab; raise IndexError if the index is out of range."""
        tabs = self.get_main_tabs()
        if not 0 <= self.main_tab_index < len(tabs):
            raise IndexError(f"no main tab at position {self.main_tab_index}")
        return tabs[self.main_tab_index]

    def next_main_tab(self) -> None:
        """Select the following tab, wrapping round at the end."""
        tabs = self.get_main_tabs()
        if not tabs:
            return
        self.main_tab_index = (self.main_tab_index + 1) % len(tabs)

    def prev_main_tab(self) -> None:
        """Select the preceding tab, wrapping round at the start."""
        tabs = self.get_main_tabs()
        if not tabs:
            return
        self.main_tab_index = (self.main_tab_index - 1 + len(tabs)) % len(tabs)

    def set_main_tab_index(self, index: int) -> None:
        """Select the tab at ``index``."""
        self.main_tab_index = index