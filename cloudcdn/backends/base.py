"""Operation set shared by the CDN backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping, MutableMapping

if TYPE_CHECKING:
    from cloudcdn.purge import PurgeTarget

__all__ = ["CDNResponse", "CDNBackend"]


@dataclass
class CDNResponse:
    """Status, headers and (possibly decoded) body of a CDN API response."""

    status: int
    headers: MutableMapping[str, str] = field(default_factory=dict)
    body: Any = ""


class CDNBackend(ABC):
    """Interface implemented by `RealBackend` and `MockBackend`.

    Backends hold no shared state. The derived operations in
    `cloudcdn.operations` are written against this interface.
    """

    @abstractmethod
    def get_containers(self) -> CDNResponse:
        """List CDN-enabled containers."""

    @abstractmethod
    def head_container(self, key: str) -> CDNResponse:
        """Get the CDN headers of a container."""

    @abstractmethod
    def post_container(
        self, key: str, headers: Mapping[str, str]
    ) -> CDNResponse:
        """Update the CDN metadata headers of a container."""

    @abstractmethod
    def put_container(
        self, key: str, headers: Mapping[str, str]
    ) -> CDNResponse:
        """CDN-enable a container, setting its CDN headers."""

    @abstractmethod
    def delete_object(self, container_key: str, object_key: str) -> CDNResponse:
        """Purge one object from the CDN cache."""

    @property
    def enabled(self) -> bool:
        return True

    def purge_object(self, target: PurgeTarget) -> None:
        self.delete_object(target.container_key, target.object_key)

    def reload(self) -> None:
        """Drop cached connection state."""
