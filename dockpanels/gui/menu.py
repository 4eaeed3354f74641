"""Items of the popup menu and their preparation for display."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

from dockpanels.presentation.containers import Color, colored


@dataclass
class MenuItem:
    """An entry of the popup menu.

    ``label_columns`` overrides ``label`` when set; ``opens_menu`` marks an
    entry that leads on to another menu.
    """

    label: str = ""
    label_columns: Optional[list[str]] = None
    on_press: Optional[Callable[[], None]] = None
    opens_menu: bool = False


def _opens_menu_style(text: str) -> str:
    return colored(f"{text}...", Color.MAGENTA)


def prepare_menu_items(
    items: Iterable[MenuItem], cancel_label: str, hide_cancel: bool = False
) -> list[MenuItem]:
    """Return the items ready for display, with a cancel entry unless hidden.

    Every returned item has its columns filled in and padded with blank
    strings so that all items have the same number of columns. The given
    items are left untouched.
    """
    prepared = [dataclasses.replace(item) for item in items]
    if not hide_cancel:
        prepared.append(MenuItem(label_columns=[cancel_label], on_press=lambda: None))

    for item in prepared:
        columns = list(item.label_columns) if item.label_columns is not None else [item.label]
        if item.opens_menu and columns:
            columns[0] = _opens_menu_style(columns[0])
        item.label_columns = columns

    width = max([1, *(len(item.label_columns) for item in prepared)])
    for item in prepared:
        item.label_columns = item.label_columns + [""] * (width - len(item.label_columns))

    return prepared