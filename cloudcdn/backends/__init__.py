"""CDN backends: the network client and the in-memory simulation."""

from cloudcdn.backends.base import CDNBackend, CDNResponse
from cloudcdn.backends.mock import MockBackend, MockStore, default_store
from cloudcdn.backends.real import RealBackend

__all__ = [
    "CDNBackend",
    "CDNResponse",
    "MockBackend",
    "MockStore",
    "RealBackend",
    "default_store",
]
