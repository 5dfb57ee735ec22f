"""Operations built on the backend operation set.

These are written once against `cloudcdn.backends.base.CDNBackend` and so
behave identically for the network and in-memory backends.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from structlog import get_logger

from cloudcdn.exceptions import NotFoundError
from cloudcdn.headers import CDN_ENABLED_HEADER, URLSet, urls_from_headers
from cloudcdn.purge import purge_target_for

if TYPE_CHECKING:
    from cloudcdn.backends.base import CDNBackend
    from cloudcdn.storage import Container

__all__ = ["publish_container", "urls", "purge", "list_containers"]


def publish_container(
    backend: CDNBackend, container: Container, publish: bool = True
) -> URLSet:
    """Enable or disable CDN distribution of a container.

    Parameters
    ----------
    backend : `cloudcdn.backends.base.CDNBackend`
        The backend.
    container
        Container reference (anything with a ``key``).
    publish : bool
        `True` to enable, `False` to disable.

    Returns
    -------
    urls : `cloudcdn.headers.URLSet`
        The container's CDN URLs. Always empty when disabling.
    """
    enabled = "True" if publish else "False"
    response = backend.put_container(
        container.key, {CDN_ENABLED_HEADER: enabled}
    )
    get_logger(__name__).info(
        "Published container", container=container.key, enabled=enabled
    )
    if not publish:
        return URLSet()
    return urls_from_headers(response.headers)


def urls(backend: CDNBackend, container: Container) -> URLSet:
    """Get the CDN URLs of a container.

    An empty `URLSet` is returned if the container is unknown to the CDN
    or is not CDN-enabled.
    """
    try:
        response = backend.head_container(container.key)
    except NotFoundError:
        return URLSet()
    if response.headers.get(CDN_ENABLED_HEADER) != "True":
        return URLSet()
    return urls_from_headers(response.headers)


def purge(backend: CDNBackend, target: object) -> bool:
    """Purge an object from the CDN edge caches.

    Parameters
    ----------
    backend : `cloudcdn.backends.base.CDNBackend`
        The backend.
    target
        An object stored in a container (has ``key`` and ``directory``).
        `None` is accepted and ignored.

    Returns
    -------
    purged : bool
        Always `True`.

    Raises
    ------
    cloudcdn.exceptions.UnsupportedPurgeTarget
        Raised if `target` is not a stored object.
    """
    purge_target = purge_target_for(target)
    if purge_target is None:
        # Permissive no-op kept for optional-object call sites. Likely
        # unintended upstream; do not rely on it.
        return True
    backend.purge_object(purge_target)
    get_logger(__name__).info(
        "Purged object",
        container=purge_target.container_key,
        object=purge_target.object_key,
    )
    return True


def list_containers(backend: CDNBackend) -> List[str]:
    """Names of the account's CDN-enabled containers."""
    body = backend.get_containers().body
    if not isinstance(body, list):
        return [line for line in str(body).splitlines() if line]
    return [c["name"] if isinstance(c, dict) else str(c) for c in body]
