"""Ordering, filtering and commands for the containers panel.

A container is any object with these attributes:

* ``id``: the engine's container id
* ``name``: the container's name
* ``state``: the engine's state word, e.g. ``"running"`` or ``"exited"``
* ``one_off``: whether it was started as a one-off compose run
* ``service_name``: the compose service it belongs to, or ``""``
* ``ports``: port objects with ``ip`` and ``public_port``

A service is any object with a ``name``.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

# States missing from this table rank as 0 and so sort before running ones.
_STATE_RANK = {
    "running": 1,
    "exited": 2,
    "created": 3,
}


def container_less(a: Any, b: Any, legacy_sort: bool) -> bool:
    """Return whether ``a`` sorts before ``b``.

    With ``legacy_sort`` containers are ordered by name alone; otherwise they
    are ordered running, exited, created, and by name within a state.
    """
    if legacy_sort:
        return a.name < b.name

    rank_a = _STATE_RANK.get(a.state, 0)
    rank_b = _STATE_RANK.get(b.state, 0)
    if rank_a == rank_b:
        return a.name < b.name
    return rank_a < rank_b


def is_standalone_container(container: Any, services: Iterable[Any]) -> bool:
    """Return whether the container stands apart from the given services.

    One-off containers, containers with no service, and containers whose
    service is not among ``services`` are standalone.
    """
    if container.one_off or container.service_name == "":
        return True
    return not any(service.name == container.service_name for service in services)


def container_browser_link(container: Any) -> Optional[str]:
    """Return the address of the container's first published port.

    Returns None if the container has no ports or the first one is not
    published on any address.
    """
    if not container.ports:
        return None
    port = container.ports[0]
    if port.ip == "":
        return None
    ip = "localhost" if port.ip == "0.0.0.0" else port.ip
    return f"http://{ip}:{port.public_port}/"


def container_context_key(container: Any) -> str:
    """Return the cache key for what the main view shows about ``container``.

    The state is part of the key so that a restarted container gets its
    logs read afresh.
    """
    return f"containers-{container.id}-{container.state}"


def container_remove_commands(container_id: str) -> list[tuple[str, bool]]:
    """Return the removal choices as ``(command, remove_volumes)`` pairs.

    The command shows a short form of the id; ids shorter than ten
    characters raise ValueError.
    """
    if len(container_id) < 10:
        raise ValueError(f"container id too short: {container_id!r}")
    short_id = container_id[1:10]
    return [
        (f"docker rm {short_id}", False),
        (f"docker rm --volumes {short_id}", True),
    ]