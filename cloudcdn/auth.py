"""Authentication collaborator interface and protocol dispatch.

cloudcdn does not exchange credentials itself. An `Authenticator` supplied
by the caller does that and returns an `AuthResult`. The protocol of that
result decides where the CDN management endpoint comes from:

- `AuthProtocol.V1` (legacy) returns the management URL directly in the
  credential response and has no service catalog.
- `AuthProtocol.V2` returns a `ServiceCatalog` that is queried for the
  ``cloudFilesCDN`` service of the configured region.
"""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Union,
)

from cloudcdn.exceptions import ConfigurationError, EndpointNotFound

if TYPE_CHECKING:
    from cloudcdn.config import ServiceConfig

__all__ = [
    "CDN_SERVICE_NAME",
    "AuthProtocol",
    "ServiceCatalog",
    "AuthResult",
    "Authenticator",
    "StaticAuthenticator",
    "EndpointStrategyBase",
    "LegacyEndpointStrategy",
    "CatalogEndpointStrategy",
    "EndpointStrategies",
    "endpoint_strategies",
]

CDN_SERVICE_NAME = "cloudFilesCDN"
"""Name of the CDN management service in the service catalog."""


class AuthProtocol(enum.Enum):
    """Authentication protocol versions."""

    V1 = "v1"
    """Legacy single-region protocol without a service catalog."""

    V2 = "v2"
    """Identity protocol with a per-region service catalog."""


class ServiceCatalog:
    """Directory of per-region, per-service endpoint URLs.

    Parameters
    ----------
    endpoints : `dict`
        Mapping of service name to a mapping of region to public URL.
        Region names are matched case-insensitively.
    """

    def __init__(self, endpoints: Mapping[str, Mapping[str, str]]) -> None:
        self._endpoints: Dict[str, Dict[str, str]] = {
            service: {region.lower(): url for region, url in regions.items()}
            for service, regions in endpoints.items()
        }

    @classmethod
    def from_json(cls, catalog: Iterable[Mapping[str, Any]]) -> ServiceCatalog:
        """Parse the ``serviceCatalog`` list of an identity v2 token
        response.

        Each entry has a ``name`` and a list of ``endpoints`` with
        ``region`` and ``publicURL`` keys. Endpoints without a region are
        skipped.
        """
        endpoints: Dict[str, Dict[str, str]] = {}
        for service in catalog:
            regions = endpoints.setdefault(service["name"], {})
            for entry in service.get("endpoints", []):
                if "region" in entry and "publicURL" in entry:
                    regions[entry["region"]] = entry["publicURL"]
        return cls(endpoints)

    @property
    def services(self) -> List[str]:
        return sorted(self._endpoints.keys())

    def get_endpoint(self, service: str, region: str) -> str:
        """Get the public URL of `service` in `region`.

        Raises
        ------
        cloudcdn.exceptions.EndpointNotFound
            Raised if the catalog has no such service or region.
        """
        try:
            return self._endpoints[service][str(region).lower()]
        except KeyError:
            raise EndpointNotFound(
                "No {0!r} endpoint for region {1!r}".format(service, region)
            )


@dataclass(frozen=True)
class AuthResult:
    """Outcome of an authentication exchange."""

    token: str
    protocol: AuthProtocol
    management_url: Optional[str] = None
    """CDN management URL (legacy protocol only)."""

    catalog: Optional[ServiceCatalog] = None
    """Service catalog (catalog protocol only)."""


class Authenticator(ABC):
    """Exchanges credentials for a token. Implemented outside cloudcdn.

    Errors raised by `authenticate` are propagated to the caller
    unchanged.
    """

    @property
    @abstractmethod
    def protocol(self) -> AuthProtocol:
        pass

    @abstractmethod
    def authenticate(self, config: ServiceConfig) -> AuthResult:
        pass


class StaticAuthenticator(Authenticator):
    """Authenticator for a token that was already issued elsewhere.

    Parameters
    ----------
    token : str
        The auth token.
    protocol : `AuthProtocol` or str
        Protocol the token was issued with.
    management_url : str, optional
        CDN management URL from a legacy credential response.
    catalog : `ServiceCatalog`, optional
        Service catalog from an identity v2 response.
    """

    def __init__(
        self,
        token: str,
        protocol: Union[AuthProtocol, str] = AuthProtocol.V2,
        management_url: Optional[str] = None,
        catalog: Optional[ServiceCatalog] = None,
    ) -> None:
        self._result = AuthResult(
            token=token,
            protocol=AuthProtocol(protocol),
            management_url=management_url,
            catalog=catalog,
        )

    @property
    def protocol(self) -> AuthProtocol:
        return self._result.protocol

    def authenticate(self, config: ServiceConfig) -> AuthResult:
        return self._result


class EndpointStrategyBase(ABC):
    """Decides where the CDN endpoint comes from when ``cdn_url`` is not
    configured.
    """

    @property
    @abstractmethod
    def protocol(self) -> AuthProtocol:
        pass

    @abstractmethod
    def endpoint_url(self, config: ServiceConfig, auth: AuthResult) -> str:
        pass


class LegacyEndpointStrategy(EndpointStrategyBase):
    """Use the management URL of the credential response. The legacy
    protocol carries no service catalog to fall back on.
    """

    @property
    def protocol(self) -> AuthProtocol:
        return AuthProtocol.V1

    def endpoint_url(self, config: ServiceConfig, auth: AuthResult) -> str:
        if auth.management_url:
            return auth.management_url
        raise ConfigurationError(
            "Service Endpoint must be specified via the cdn_url parameter"
        )


class CatalogEndpointStrategy(EndpointStrategyBase):
    """Look up the CDN service of the configured region in the catalog."""

    @property
    def protocol(self) -> AuthProtocol:
        return AuthProtocol.V2

    def endpoint_url(self, config: ServiceConfig, auth: AuthResult) -> str:
        if auth.catalog is None:
            raise EndpointNotFound(
                "Authentication returned no service catalog"
            )
        return auth.catalog.get_endpoint(CDN_SERVICE_NAME, config.region)


class EndpointStrategies:
    """Endpoint strategy for each authentication protocol."""

    _strategies: Dict[AuthProtocol, EndpointStrategyBase] = {
        s.protocol: s
        for s in (LegacyEndpointStrategy(), CatalogEndpointStrategy())
    }

    def __getitem__(
        self, key: Union[AuthProtocol, str]
    ) -> EndpointStrategyBase:
        try:
            return self._strategies[AuthProtocol(key)]
        except (KeyError, ValueError):
            raise ConfigurationError(
                "Authentication protocol {0!r} unknown. Valid values are "
                "{1!r}".format(key, [p.value for p in self._strategies])
            )

    def __contains__(self, key: object) -> bool:
        try:
            return AuthProtocol(key) in self._strategies
        except ValueError:
            return False


endpoint_strategies = EndpointStrategies()
