"""Table cells describing a compose service in the services panel."""

from __future__ import annotations

from typing import Any

from dockpanels.presentation.containers import (
    Color,
    colored,
    container_display_status,
    container_display_substatus,
    display_container_image,
    display_cpu_percentage,
    display_ports,
)

_NO_CONTAINER = {"short": "n", "icon": "."}


def service_display_strings(gui_config: Any, service: Any) -> list[str]:
    """Return the table cells for ``service``.

    A service has a ``name`` and a ``container`` that is ``None`` while the
    service has no container; otherwise the cells describe that container.
    """
    container = service.container
    if container is None:
        state = _NO_CONTAINER.get(gui_config.container_status_health_style, "none")
        return [colored(state, Color.BLUE), "", service.name, "", "", ""]

    return [
        container_display_status(gui_config, container),
        container_display_substatus(gui_config, container),
        service.name,
        display_cpu_percentage(container),
        colored(display_ports(container), Color.YELLOW),
        colored(display_container_image(container), Color.MAGENTA),
    ]