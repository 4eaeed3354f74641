"""Text shown in the main view about a container's environment and config.

A mount is any object with ``type``, ``name``, ``source`` and
``destination`` attributes. Published ports are given as a mapping from a
port key such as ``"80/tcp"`` to the host bindings for it, each an object
with a ``host_port`` attribute.
"""

from __future__ import annotations

import unicodedata
from typing import Any, Iterable, Mapping, Sequence

from dockpanels.presentation.containers import Color, colored


def _display_width(text: str) -> int:
    width = 0
    for char in text:
        if unicodedata.combining(char):
            continue
        width += 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1
    return width


def with_padding(text: str, padding: int) -> str:
    """Pad ``text`` with spaces to ``padding`` columns; longer text is left as is."""
    width = _display_width(text)
    if padding < width:
        return text
    return text + " " * (padding - width)


def _map_item(padding: int, key: str, value: Any) -> str:
    return f"{' ' * padding}{colored(key + ':', Color.YELLOW)} {colored(str(value), Color.MAGENTA)}\n"


def format_map(padding: int, mapping: Mapping[str, Any]) -> str:
    """Format a mapping as indented ``key: value`` lines sorted by key.

    An empty mapping comes out as ``"none\\n"``; otherwise the text starts
    with a newline so that it can follow a label on the same line.
    """
    if not mapping:
        return "none\n"
    return "\n" + "".join(_map_item(padding, key, mapping[key]) for key in sorted(mapping))


def container_env_rows(env: Iterable[str]) -> list[list[str]]:
    """Split ``KEY=value`` entries into coloured ``[key:, value]`` table rows.

    Only the first ``=`` separates the key; an entry without one has an
    empty value.
    """
    rows = []
    for entry in env:
        key, _, value = entry.partition("=")
        rows.append([colored(key + ":", Color.GREEN), colored(value, Color.YELLOW)])
    return rows


def container_mount_lines(mounts: Sequence[Any], padding: int) -> list[str]:
    """Return one indented line per mount.

    Volumes are shown by name, every other kind by ``source:destination``.
    """
    indent = " " * padding
    lines = []
    for mount in mounts:
        label = colored(f"{mount.type}:", Color.YELLOW)
        if mount.type == "volume":
            lines.append(f"{indent}{label} {mount.name}")
        else:
            lines.append(f"{indent}{label} {mount.source}:{mount.destination}")
    return lines


def container_port_lines(ports: Mapping[str, Sequence[Any]], padding: int) -> list[str]:
    """Return one indented ``host_port: port`` line per host binding, by port key."""
    indent = " " * padding
    return [
        f"{indent}{colored(binding.host_port + ':', Color.YELLOW)} {port}"
        for port in sorted(ports)
        for binding in ports[port]
    ]