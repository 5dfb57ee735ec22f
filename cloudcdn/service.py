"""The CDN service facade."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Mapping, Optional

from cloudcdn import operations
from cloudcdn.backends.mock import MockBackend
from cloudcdn.backends.real import RealBackend
from cloudcdn.exceptions import ConfigurationError

if TYPE_CHECKING:
    from cloudcdn.auth import Authenticator
    from cloudcdn.backends.base import CDNBackend, CDNResponse
    from cloudcdn.backends.mock import MockStore
    from cloudcdn.config import ServiceConfig
    from cloudcdn.headers import URLSet
    from cloudcdn.storage import Container

__all__ = ["CDNService"]


class CDNService:
    """Client for the CDN control plane of one account.

    ``config.mock`` selects the in-memory backend; otherwise requests go to
    the network.

    Parameters
    ----------
    config : `cloudcdn.config.ServiceConfig`
        Service configuration.
    authenticator : `cloudcdn.auth.Authenticator`, optional
        Required by the network backend.
    store : `cloudcdn.backends.mock.MockStore`, optional
        Store for the in-memory backend. Defaults to the process-wide store.

    Examples
    --------
    >>> from cloudcdn import CDNService, Directory, ServiceConfig
    >>> cdn = CDNService(ServiceConfig(api_key="k", username="u", mock=True))
    >>> cdn.urls(Directory("unknown"))
    URLSet(ios_uri=None, uri=None, streaming_uri=None, ssl_uri=None)
    """

    def __init__(
        self,
        config: ServiceConfig,
        authenticator: Optional[Authenticator] = None,
        store: Optional[MockStore] = None,
    ) -> None:
        self.config = config
        self.backend: CDNBackend
        if config.mock:
            self.backend = MockBackend(config, store=store)
        else:
            if authenticator is None:
                raise ConfigurationError(
                    "An authenticator is required unless mock is enabled"
                )
            self.backend = RealBackend(config, authenticator)

    @property
    def mocking(self) -> bool:
        return isinstance(self.backend, MockBackend)

    @property
    def enabled(self) -> bool:
        return self.backend.enabled

    def get_containers(self) -> CDNResponse:
        return self.backend.get_containers()

    def head_container(self, key: str) -> CDNResponse:
        return self.backend.head_container(key)

    def post_container(
        self, key: str, headers: Mapping[str, str]
    ) -> CDNResponse:
        return self.backend.post_container(key, headers)

    def put_container(
        self, key: str, headers: Mapping[str, str]
    ) -> CDNResponse:
        return self.backend.put_container(key, headers)

    def delete_object(self, container_key: str, object_key: str) -> CDNResponse:
        return self.backend.delete_object(container_key, object_key)

    def publish_container(
        self, container: Container, publish: bool = True
    ) -> URLSet:
        return operations.publish_container(self.backend, container, publish)

    def urls(self, container: Container) -> URLSet:
        return operations.urls(self.backend, container)

    def purge(self, target: object) -> bool:
        return operations.purge(self.backend, target)

    def list_containers(self) -> List[str]:
        return operations.list_containers(self.backend)

    def reload(self) -> None:
        self.backend.reload()
