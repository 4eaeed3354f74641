"""Table cells for images, menu items, networks, projects and volumes."""

from __future__ import annotations

from typing import Any

_DECIMAL_UNITS = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def format_decimal_bytes(size: float) -> str:
    """Format a byte count with decimal (power of 1000) units and two decimals."""
    value = float(size)
    for unit in _DECIMAL_UNITS:
        if value > 1000:
            value /= 1000
            continue
        text = f"{value:.2f}"
        if text == "1000.00":
            value /= 1000
            continue
        return text + unit
    return "a lot"


def image_display_strings(image: Any) -> list[str]:
    """Return the name, tag and size of an image."""
    return [image.name, image.tag, format_decimal_bytes(image.size)]


def menu_item_display_strings(menu_item: Any) -> list[str]:
    """Return the columns of a menu item's label."""
    return menu_item.label_columns


def network_display_strings(network: Any) -> list[str]:
    """Return the driver and name of a network."""
    return [network.driver, network.name]


def project_display_strings(project: Any) -> list[str]:
    """Return the name of a project."""
    return [project.name]


def volume_display_strings(volume: Any) -> list[str]:
    """Return the driver and name of a volume."""
    return [volume.driver, volume.name]