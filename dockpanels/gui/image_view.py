"""Ordering and commands for the images panel.

An image is any object with ``id``, ``name`` and ``tag`` attributes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_NONE_LABEL = "<none>"


@dataclass(frozen=True)
class RemoveImageOption:
    """A way of removing an image: the command shown and the flags it uses."""

    command: str
    prune_children: bool
    force: bool


def image_less(a: Any, b: Any) -> bool:
    """Return whether ``a`` sorts before ``b``.

    Unnamed images go last; the rest are ordered by name, tag and id.
    """
    a_unnamed = a.name == _NONE_LABEL
    b_unnamed = b.name == _NONE_LABEL
    if a_unnamed and not b_unnamed:
        return False
    if not a_unnamed and b_unnamed:
        return True
    if a.name != b.name:
        return a.name < b.name
    if a.tag != b.tag:
        return a.tag < b.tag
    return a.id < b.id


def image_context_key(image: Any) -> str:
    """Return the cache key for what the main view shows about ``image``."""
    return f"images-{image.id}"


def image_remove_options(image_id: str) -> list[RemoveImageOption]:
    """Return every combination of pruning and forcing for removing an image.

    The commands show the ten characters of the id after its ``sha256:``
    prefix; ids shorter than seventeen characters raise ValueError.
    """
    if len(image_id) < 17:
        raise ValueError(f"image id too short: {image_id!r}")
    short_sha = image_id[7:17]
    return [
        RemoveImageOption(f"docker image rm {short_sha}", prune_children=True, force=False),
        RemoveImageOption(
            f"docker image rm --no-prune {short_sha}", prune_children=False, force=False
        ),
        RemoveImageOption(
            f"docker image rm --force {short_sha}", prune_children=True, force=True
        ),
        RemoveImageOption(
            f"docker image rm --no-prune --force {short_sha}",
            prune_children=False,
            force=True,
        ),
    ]