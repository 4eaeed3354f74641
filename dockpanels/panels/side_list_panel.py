"""A list panel at the side of the screen that renders into the main view."""

from __future__ import annotations

import re
import unicodedata
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Optional,
    Protocol,
    Sequence,
    TypeVar,
)

from dockpanels.panels.context_state import ContextState
from dockpanels.panels.list_panel import ListPanel

T = TypeVar("T")

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


class NoItemsError(LookupError):
    """Raised when a panel has no item at its selected line."""


class GuiHost(Protocol):
    """What a side panel needs from the interface that hosts it.

    Views are objects with ``clear()``, ``write(text)`` and the attributes
    ``tabs`` and ``tab_index``.
    """

    def handle_click(
        self,
        view: Any,
        item_count: int,
        on_line_selected: Callable[[int], None],
    ) -> None: ...

    def new_simple_render_string_task(self, get_content: Callable[[], str]) -> Any: ...

    def focus_y(self, selected_line: int, item_count: int, view: Any) -> None: ...

    def should_refresh(self, context_key: str) -> bool: ...

    def get_main_view(self) -> Any: ...

    def is_current_view(self, view: Any) -> bool: ...

    def filter_string(self, view: Any) -> str: ...

    def ignore_strings(self) -> Sequence[str]: ...

    def update(self, func: Callable[[], None]) -> None: ...

    def queue_task(self, task: Any) -> None: ...


def _display_width(text: str) -> int:
    plain = _ANSI_ESCAPE.sub("", text)
    width = 0
    for char in plain:
        if unicodedata.combining(char):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


def _with_padding(text: str, padding: int) -> str:
    width = _display_width(text)
    if padding < width:
        return text
    return text + " " * (padding - width)


def render_table(rows: Iterable[Sequence[str]]) -> str:
    """Lay out rows of cells as aligned columns, one line per row.

    Colour codes do not count towards a cell's width. Every row must have
    the same number of cells, otherwise ValueError is raised.
    """
    table = [list(row) for row in rows]
    if not table:
        return ""
    if len({len(row) for row in table}) > 1:
        raise ValueError("Each item must return the same number of strings to display")
    column_count = len(table[0])
    if column_count == 0:
        return "\n".join("" for _ in table)

    widths = [
        max(_display_width(row[column]) for row in table)
        for column in range(column_count - 1)
    ]
    lines = []
    for row in table:
        padded = "".join(_with_padding(cell, width) + " " for cell, width in zip(row, widths))
        lines.append(padded + row[-1])
    return "\n".join(lines)


class SideListPanel(ListPanel[T], Generic[T]):
    """A filterable, sortable list whose selected item drives the main view."""

    def __init__(
        self,
        gui: GuiHost,
        view: Any,
        get_table_cells: Callable[[T], Sequence[str]],
        context_state: Optional[ContextState[T]] = None,
        no_items_message: str = "",
        filter: Optional[Callable[[T], bool]] = None,
        sort: Optional[Callable[[T, T], bool]] = None,
        on_click: Optional[Callable[[T], None]] = None,
        on_rerender: Optional[Callable[[], None]] = None,
        disable_filter: bool = False,
        hide: Optional[Callable[[], bool]] = None,
    ) -> None:
        super().__init__(view=view)
        self.gui = gui
        self.get_table_cells = get_table_cells
        self.context_state = context_state
        self.no_items_message = no_items_message
        self.filter = filter
        self.sort = sort
        self.on_click = on_click
        self.on_rerender = on_rerender
        self.disable_filter = disable_filter
        self.hide = hide

    def _select_clicked_line(self, index: int) -> None:
        self.selected_idx = index
        self.handle_select()

    def handle_click(self) -> None:
        """Let the host pick the clicked line, then run the click callback."""
        self.gui.handle_click(self.view, len(self.list), self._select_clicked_line)

        if self.on_click is not None:
            try:
                item = self.get_selected_item()
            except NoItemsError:
                return
            self.on_click(item)

    def handle_select(self) -> None:
        """Render the selected item's context into the main view if it changed."""
        try:
            item = self.get_selected_item()
        except NoItemsError:
            if self.no_items_message:
                message = self.no_items_message
                self.gui.new_simple_render_string_task(lambda: message)
            return

        self.refocus()
        self._render_context(item)

    def _render_context(self, item: T) -> None:
        if self.context_state is None:
            return

        key = self.context_state.current_context_key(item)
        if not self.gui.should_refresh(key):
            return

        main_view = self.gui.get_main_view()
        main_view.tabs = self.context_state.main_tab_titles()
        main_view.tab_index = self.context_state.main_tab_index

        task = self.context_state.current_main_tab().render(item)
        self.gui.queue_task(task)

    def get_selected_item(self) -> T:
        """Return the selected item; raise NoItemsError if there is none."""
        try:
            return self.list.get(self.selected_idx)
        except IndexError:
            raise NoItemsError(self.no_items_message) from None

    def handle_next_line(self) -> None:
        """Select the next line and render it."""
        self.select_next_line()
        self.handle_select()

    def handle_prev_line(self) -> None:
        """Select the previous line and render it."""
        self.select_prev_line()
        self.handle_select()

    def handle_next_main_tab(self) -> None:
        """Switch the main view to the next tab."""
        if self.context_state is None:
            return
        self.context_state.next_main_tab()
        self.handle_select()

    def handle_prev_main_tab(self) -> None:
        """Switch the main view to the previous tab."""
        if self.context_state is None:
            return
        self.context_state.prev_main_tab()
        self.handle_select()

    def refocus(self) -> None:
        """Ask the host to scroll the view so the selected line is visible."""
        self.gui.focus_y(self.selected_idx, len(self.list), self.view)

    def set_items(self, items: Iterable[T]) -> None:
        """Replace the items, then filter and sort them."""
        self.list.set_items(items)
        self.filter_and_sort()

    def filter_and_sort(self) -> None:
        """Apply the panel filter, ignore strings and typed filter, then sort."""
        filter_string = self.gui.filter_string(self.view)

        def keep(item: T, _index: int) -> bool:
            if self.filter is not None and not self.filter(item):
                return False

            cells = self.get_table_cells(item)
            if any(ignore in cell for ignore in self.gui.ignore_strings() for cell in cells):
                return False

            if filter_string:
                return any(filter_string in cell for cell in cells)

            return True

        self.list.filter(keep)
        self.list.sort(self.sort)
        self.clamp_selected_line_idx()

    def rerender_list(self) -> None:
        """Refilter the items and schedule the view to be redrawn."""
        self.filter_and_sort()

        def redraw() -> None:
            self.view.clear()
            table = render_table(self.get_table_cells(item) for item in self.list.items())
            self.view.write(table)

            if self.on_rerender is not None:
                self.on_rerender()

            if self.gui.is_current_view(self.view):
                self.handle_select()

        self.gui.update(redraw)

    def set_main_tab_index(self, index: int) -> None:
        """Select a main-view tab by position."""
        if self.context_state is None:
            return
        self.context_state.set_main_tab_index(index)

    def is_filter_disabled(self) -> bool:
        """Return whether typed filtering is switched off for this panel."""
        return self.disable_filter

    def is_hidden(self) -> bool:
        """Return whether the panel should currently be hidden."""
        if self.hide is None:
            return False
        return self.hide()