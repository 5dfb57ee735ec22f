"""Client for a cloud CDN control plane."""

from cloudcdn.auth import (
    AuthProtocol,
    AuthResult,
    Authenticator,
    ServiceCatalog,
    StaticAuthenticator,
)
from cloudcdn.config import ServiceConfig
from cloudcdn.headers import URLSet, urls_from_headers
from cloudcdn.service import CDNService
from cloudcdn.storage import Directory, File
from cloudcdn.version import get_version

__all__ = [
    "__version__",
    "AuthProtocol",
    "AuthResult",
    "Authenticator",
    "CDNService",
    "Directory",
    "File",
    "ServiceCatalog",
    "ServiceConfig",
    "StaticAuthenticator",
    "URLSet",
    "urls_from_headers",
]

__version__: str = get_version()
