"""Table cells describing a container in the containers panel.

A container is any object with these attributes:

* ``name``: the container's name
* ``state``: the engine's state word, e.g. ``"running"`` or ``"exited"``
* ``image``: the image reference the container was made from
* ``ports``: port objects with ``ip``, ``private_port``, ``public_port`` and ``type``
* ``details``: ``None`` until inspected, then an object whose ``state`` has
  ``exit_code`` and ``health`` (``None`` or an object with ``status``)
* ``last_stats``: ``None`` or an object with ``cpu_percentage``

The gui configuration is any object with ``container_status_health_style``,
one of ``"short"``, ``"icon"`` or ``"long"``.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any


class Color(IntEnum):
    """ANSI foreground colours."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37


def colored(text: str, color: Color) -> str:
    """Wrap ``text`` in the escape codes for ``color``."""
    return f"\x1b[{int(color)}m{text}\x1b[0m"


_SHORT_STATUS = {
    "paused": "P",
    "exited": "X",
    "created": "C",
    "removing": "RM",
    "restarting": "RS",
    "running": "R",
    "dead": "D",
}

_ICON_STATUS = {
    "paused": "◫",
    "exited": "⨯",
    "created": "+",
    "removing": "−",
    "restarting": "⟳",
    "running": "▶",
    "dead": "!",
}

_HEALTH_COLORS = {
    "healthy": Color.GREEN,
    "unhealthy": Color.RED,
    "starting": Color.YELLOW,
}

_SHORT_HEALTH = {
    "healthy": "H",
    "unhealthy": "U",
    "starting": "S",
}

_ICON_HEALTH = {
    "healthy": "✔",
    "unhealthy": "?",
    "starting": "…",
}

# An unknown state shown as an icon comes out as the zero character.
_NO_ICON = "\x00"


def container_display_strings(gui_config: Any, container: Any) -> list[str]:
    """Return the table cells for ``container``."""
    return [
        container_display_status(gui_config, container),
        container_display_substatus(gui_config, container),
        container.name,
        display_cpu_percentage(container),
        colored(display_ports(container), Color.YELLOW),
        colored(display_container_image(container), Color.MAGENTA),
    ]


def display_container_image(container: Any) -> str:
    """Return the image reference without a leading ``sha256:``."""
    return container.image.removeprefix("sha256:")


def _port_string(port: Any) -> str:
    if port.public_port == 0:
        return f"{port.private_port}/{port.type}"
    # Published on every interface: leave the address out to save space.
    ip_prefix = "" if port.ip == "0.0.0.0" else f"{port.ip}:"
    return f"{ip_prefix}{port.public_port}->{port.private_port}/{port.type}"


def display_ports(container: Any) -> str:
    """Return the container's ports, sorted so their order is stable."""
    return ", ".join(sorted(_port_string(port) for port in container.ports))


def container_display_status(gui_config: Any, container: Any) -> str:
    """Return the coloured state in the configured style."""
    style = gui_config.container_status_health_style
    state = container.state
    if style == "short":
        text = _SHORT_STATUS.get(state, "")
    elif style == "icon":
        text = _ICON_STATUS.get(state, _NO_ICON)
    else:
        text = state
    return colored(text, container_color(container))


def container_display_substatus(gui_config: Any, container: Any) -> str:
    """Return the exit code of an exited container or the health of a running one."""
    if container.details is None:
        return ""
    if container.state == "exited":
        return colored(f"({container.details.state.exit_code})", container_color(container))
    if container.state == "running":
        return health_status(gui_config, container)
    return ""


def health_status(gui_config: Any, container: Any) -> str:
    """Return the coloured health check status, or "" if there is none."""
    if container.details is None:
        return ""
    health = container.details.state.health
    if health is None:
        return ""

    status = health.status
    style = gui_config.container_status_health_style
    if style == "short":
        text = _SHORT_HEALTH.get(status, "")
    elif style == "icon":
        text = _ICON_HEALTH.get(status, _NO_ICON)
    else:
        text = status

    color = _HEALTH_COLORS.get(status)
    if color is None:
        return ""
    return colored(f"({text})", color)


def display_cpu_percentage(container: Any) -> str:
    """Return the CPU percentage, coloured by how high it is."""
    stats = container.last_stats
    if stats is None:
        return ""

    percentage = stats.cpu_percentage
    if percentage > 90:
        color = Color.RED
    elif percentage > 50:
        color = Color.YELLOW
    else:
        color = Color.WHITE
    return colored(f"{percentage:.2f}%", color)


def container_color(container: Any) -> Color:
    """Return the colour that stands for the container's state."""
    state = container.state
    if state == "exited":
        # Until details arrive a failed container briefly shows as a clean exit.
        if container.details is None or container.details.state.exit_code == 0:
            return Color.YELLOW
        return Color.RED
    return {
        "created": Color.CYAN,
        "running": Color.GREEN,
        "paused": Color.YELLOW,
        "dead": Color.RED,
        "restarting": Color.BLUE,
        "removing": Color.MAGENTA,
    }.get(state, Color.WHITE)