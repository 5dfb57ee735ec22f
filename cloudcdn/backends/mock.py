"""In-memory CDN backend for tests and offline development."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

from requests.structures import CaseInsensitiveDict
from structlog import get_logger

from cloudcdn.backends.base import CDNBackend, CDNResponse
from cloudcdn.exceptions import NotFoundError
from cloudcdn.headers import CDN_ENABLED_HEADER

if TYPE_CHECKING:
    from cloudcdn.config import ServiceConfig
    from cloudcdn.purge import PurgeTarget

__all__ = ["MockStore", "MockBackend", "default_store"]

ContainerHeaders = Dict[str, CaseInsensitiveDict]


class MockStore:
    """Registry of simulated CDN state, keyed by account.

    Each account maps container keys to the CDN headers the server would
    report for that container. Header names are case-insensitive. Account
    entries are created lazily and live until they are reset.
    """

    def __init__(self) -> None:
        self._data: Dict[str, ContainerHeaders] = {}
        self._lock = threading.Lock()

    def get_or_create(self, account: str) -> ContainerHeaders:
        with self._lock:
            return self._data.setdefault(account, {})

    def reset(self, account: str) -> None:
        """Discard the state of one account."""
        with self._lock:
            self._data.pop(account, None)

    def reset_all(self) -> None:
        with self._lock:
            self._data.clear()

    def __contains__(self, account: object) -> bool:
        return account in self._data


default_store = MockStore()
"""Process-wide store used by backends that are not given one."""


class MockBackend(CDNBackend):
    """CDN backend that simulates the server's container headers in a
    `MockStore`.

    Parameters
    ----------
    config : `cloudcdn.config.ServiceConfig`
        Service configuration. ``username`` selects the account.
    store : `MockStore`, optional
        The store. Defaults to `default_store`.
    """

    def __init__(
        self, config: ServiceConfig, store: Optional[MockStore] = None
    ) -> None:
        self.config = config
        self.account = config.username
        self.store = default_store if store is None else store
        self._logger = get_logger(__name__).bind(account=self.account)

    @property
    def data(self) -> ContainerHeaders:
        return self.store.get_or_create(self.account)

    def reset_data(self) -> None:
        self.store.reset(self.account)

    def _not_found(self, key: str) -> NotFoundError:
        return NotFoundError(
            CDNResponse(status=404),
            message="Container {0!r} not found".format(key),
        )

    def get_containers(self) -> CDNResponse:
        body: List[Dict[str, Any]] = [
            {"name": key, "cdn_enabled": True}
            for key, headers in sorted(self.data.items())
            if headers.get(CDN_ENABLED_HEADER) == "True"
        ]
        return CDNResponse(
            status=200,
            headers={"Content-Type": "application/json"},
            body=body,
        )

    def head_container(self, key: str) -> CDNResponse:
        try:
            headers = self.data[key]
        except KeyError:
            raise self._not_found(key)
        return CDNResponse(status=204, headers=CaseInsensitiveDict(headers))

    def post_container(
        self, key: str, headers: Mapping[str, str]
    ) -> CDNResponse:
        try:
            stored = self.data[key]
        except KeyError:
            raise self._not_found(key)
        stored.update(headers)
        self._logger.debug("Updated mock container", container=key)
        return CDNResponse(status=202, headers=CaseInsensitiveDict(stored))

    def put_container(
        self, key: str, headers: Mapping[str, str]
    ) -> CDNResponse:
        data = self.data
        status = 202 if key in data else 201
        stored = data.setdefault(key, CaseInsensitiveDict())
        stored.update(headers)
        self._logger.debug("Stored mock container", container=key)
        return CDNResponse(status=status, headers=CaseInsensitiveDict(stored))

    def delete_object(self, container_key: str, object_key: str) -> CDNResponse:
        return CDNResponse(status=204)

    def purge_object(self, target: PurgeTarget) -> None:
        self._logger.debug(
            "Mock purge",
            container=target.container_key,
            object=target.object_key,
        )
