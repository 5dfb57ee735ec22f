"""Storage container and object references.

cloudcdn does not own containers or objects; it only reads their keys.
Any object with a ``key`` attribute is a container reference, and any
object with a ``key`` and a ``directory`` container reference is an object
reference. `Directory` and `File` are minimal implementations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

__all__ = ["Container", "StoredObject", "Directory", "File"]


@runtime_checkable
class Container(Protocol):
    key: str


@runtime_checkable
class StoredObject(Protocol):
    key: str
    directory: Container


@dataclass(frozen=True)
class Directory:
    """A storage container."""

    key: str


@dataclass(frozen=True)
class File:
    """An object stored in a `Directory`."""

    key: str
    directory: Directory
