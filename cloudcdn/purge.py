"""Capability check for CDN purge targets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from cloudcdn.exceptions import UnsupportedPurgeTarget
from cloudcdn.storage import Container

__all__ = ["PurgeTarget", "purge_target_for"]


@dataclass(frozen=True)
class PurgeTarget:
    """Identity of a purgeable object."""

    container_key: str
    object_key: str


def purge_target_for(obj: object) -> Optional[PurgeTarget]:
    """Decide whether `obj` can be purged from the CDN.

    Returns `None` when `obj` is `None`. Callers treat that as a no-op.

    Raises
    ------
    cloudcdn.exceptions.UnsupportedPurgeTarget
        Raised if `obj` is not an object stored in a container.
    """
    if obj is None:
        return None
    if isinstance(obj, PurgeTarget):
        return obj
    key = getattr(obj, "key", None)
    directory = getattr(obj, "directory", None)
    if not isinstance(key, str) or not isinstance(directory, Container):
        raise UnsupportedPurgeTarget(obj)
    return PurgeTarget(container_key=directory.key, object_key=key)
