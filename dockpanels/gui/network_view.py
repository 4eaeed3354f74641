"""Ordering and the configuration text of the networks panel.

A network is any object with ``id``, ``name``, ``driver``, ``scope``,
``enable_ipv6``, ``internal``, ``attachable``, ``ingress``, ``containers``
(a mapping whose values have ``name`` and ``endpoint_id``), ``labels`` and
``options`` attributes.
"""

from __future__ import annotations

from typing import Any

from dockpanels.gui.container_details import format_map, with_padding
from dockpanels.presentation.containers import Color, colored

_PADDING = 15


def network_less(a: Any, b: Any) -> bool:
    """Return whether ``a`` sorts before ``b``: networks are ordered by name."""
    return a.name < b.name


def network_context_key(network: Any) -> str:
    """Return the cache key for what the main view shows about ``network``."""
    return f"networks-{network.name}"


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def network_config_text(network: Any) -> str:
    """Return the description of a network shown in its config tab."""
    padding = _PADDING
    fields = [
        ("ID: ", network.id),
        ("Name: ", network.name),
        ("Driver: ", network.driver),
        ("Scope: ", network.scope),
        ("EnabledIPV6: ", _bool_text(network.enable_ipv6)),
        ("Internal: ", _bool_text(network.internal)),
        ("Attachable: ", _bool_text(network.attachable)),
        ("Ingress: ", _bool_text(network.ingress)),
    ]
    output = "".join(f"{with_padding(label, padding)}{value}\n" for label, value in fields)

    output += with_padding("Containers: ", padding)
    if network.containers:
        output += "\n"
        for container in network.containers.values():
            key = colored(container.name + ":", Color.YELLOW)
            value = colored(str(container.endpoint_id), Color.MAGENTA)
            output += f"{' ' * padding}{key} {value}\n"
    else:
        output += "none\n"

    output += "\n"
    output += with_padding("Labels: ", padding) + format_map(padding, network.labels) + "\n"
    output += with_padding("Options: ", padding) + format_map(padding, network.options)
    return output