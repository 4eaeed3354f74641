"""State of the typed filter that narrows down the items of a list panel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class FilterState:
    """The needle typed into the filter prompt and the panel it applies to.

    ``active`` is true while the prompt is open and after the filter has been
    committed back to the list. The panel is any object with ``view``,
    ``is_filter_disabled()`` and ``rerender_list()``.
    """

    active: bool = False
    panel: Optional[Any] = None
    needle: str = ""

    def open(self, panel: Any) -> bool:
        """Start filtering ``panel``; return False if it does not allow filtering."""
        if panel.is_filter_disabled():
            return False
        self.active = True
        self.panel = panel
        return True

    def set_needle(self, value: str) -> None:
        """Filter on ``value`` and redraw the filtered panel."""
        self.needle = value
        if self.panel is not None:
            self.panel.rerender_list()

    def clear(self) -> Optional[Any]:
        """Drop the filter, redraw the panel it applied to and return that panel."""
        panel = self.panel
        self.needle = ""
        self.active = False
        self.panel = None
        if panel is not None:
            panel.rerender_list()
        return panel

    def commit(self) -> bool:
        """Leave the prompt, keeping the filter unless it is empty.

        Returns whether a filter is still applied.
        """
        if self.needle == "":
            self.clear()
        return self.active

    def filter_string(self, view: Any) -> str:
        """Return the needle that applies to ``view``; other panels' views get ""."""
        if self.panel is not None and self.panel.view is not view:
            return ""
        return self.needle