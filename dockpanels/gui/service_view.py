"""Ordering, context keys and commands for the services panel.

A service is any object with ``id``, ``name`` and ``container`` attributes,
where ``container`` is ``None`` while the service has no container and
otherwise an object with ``id`` and ``state``.

A custom command is any object with a ``service_names`` attribute: the
services it is meant for, empty when it is meant for all of them.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence


def service_less(a: Any, b: Any) -> bool:
    """Return whether ``a`` sorts before ``b``.

    Services with a container come first; within each group they are
    ordered by name.
    """
    a_has = a.container is not None
    b_has = b.container is not None
    if a_has and not b_has:
        return True
    if not a_has and b_has:
        return False
    return a.name < b.name


def service_context_key(service: Any) -> str:
    """Return the cache key for what the main view shows about ``service``.

    The container's id and state are part of the key, so that a new or
    restarted container gets rendered afresh.
    """
    container = service.container
    if container is None:
        return f"services-{service.id}"
    return f"services-{service.id}-{container.id}-{container.state}"


def select_service_commands(
    custom_commands: Iterable[Any],
    service_name: str,
    container_commands: Sequence[Any],
    has_container: bool,
) -> list[Any]:
    """Return the custom commands to offer for the service ``service_name``.

    Commands meant for every service keep their order; commands naming this
    service are put in front, the later ones first, as they are the likelier
    choice. Commands naming only other services are left out. The container
    commands follow when the service has a container.
    """
    selected: list[Any] = []
    for command in custom_commands:
        names = command.service_names
        if not names:
            selected.append(command)
        elif service_name in names:
            selected.insert(0, command)

    if has_container:
        selected.extend(container_commands)
    return selected


def service_remove_commands(compose_command: str, service_name: str) -> list[tuple[str, bool]]:
    """Return the removal choices as ``(command, remove_volumes)`` pairs."""
    return [
        (f"{compose_command} rm --stop --force {service_name}", False),
        (f"{compose_command} rm --stop --force -v {service_name}", True),
    ]