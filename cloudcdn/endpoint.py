"""Resolution of the CDN management endpoint."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional
from urllib.parse import urlsplit

from structlog import get_logger

from cloudcdn.auth import endpoint_strategies
from cloudcdn.exceptions import ConfigurationError

if TYPE_CHECKING:
    from cloudcdn.auth import AuthResult
    from cloudcdn.config import ServiceConfig

__all__ = ["Endpoint", "EndpointResolver"]


@dataclass(frozen=True)
class Endpoint:
    """A parsed CDN management base URL."""

    scheme: str
    host: str
    path: str
    region: str
    port: Optional[int] = None

    @classmethod
    def parse(cls, url: str, region: str) -> Endpoint:
        parts = urlsplit(url)
        if not parts.scheme or not parts.hostname:
            raise ConfigurationError(
                "Invalid CDN endpoint URL: {0!r}".format(url)
            )
        return cls(
            scheme=parts.scheme,
            host=parts.hostname,
            port=parts.port,
            path=parts.path.rstrip("/"),
            region=region,
        )

    @property
    def netloc(self) -> str:
        if self.port is None:
            return self.host
        return "{0}:{1}".format(self.host, self.port)

    @property
    def url(self) -> str:
        return "{0}://{1}{2}".format(self.scheme, self.netloc, self.path)

    def url_for(self, path: str) -> str:
        """URL of `path`, relative to the endpoint's base path."""
        return "{0}/{1}".format(self.url, path.lstrip("/"))


class EndpointResolver:
    """Determine, and remember, the CDN management endpoint of a session.

    Parameters
    ----------
    config : `cloudcdn.config.ServiceConfig`
        Service configuration. ``cdn_url`` always takes precedence.
    auth : `cloudcdn.auth.AuthResult`
        Result of the authentication exchange. Its protocol decides where
        the endpoint comes from when ``cdn_url`` is not configured.
    """

    def __init__(self, config: ServiceConfig, auth: AuthResult) -> None:
        self.config = config
        self.auth = auth
        self._endpoint: Optional[Endpoint] = None
        self._logger = get_logger(__name__)

    def resolve(self, service_endpoint_url: Optional[str] = None) -> Endpoint:
        """Resolve the endpoint. The first result is cached until `clear`.

        Parameters
        ----------
        service_endpoint_url : str, optional
            Management URL returned by the authentication exchange itself.

        Raises
        ------
        cloudcdn.exceptions.ConfigurationError
            No endpoint can be determined under the legacy protocol.
        cloudcdn.exceptions.EndpointNotFound
            The service catalog has no CDN entry for the region.
        """
        if self._endpoint is not None:
            return self._endpoint

        url = self.config.cdn_url or service_endpoint_url
        if not url:
            strategy = endpoint_strategies[self.auth.protocol]
            url = strategy.endpoint_url(self.config, self.auth)

        endpoint = Endpoint.parse(url, self.config.region)
        if self.config.use_ssl and endpoint.scheme != "https":
            # Drop the default port of the old scheme.
            port = None if endpoint.port == 80 else endpoint.port
            endpoint = replace(endpoint, scheme="https", port=port)
        self._logger.info(
            "Resolved CDN endpoint",
            url=endpoint.url,
            region=endpoint.region,
            protocol=self.auth.protocol.value,
        )
        self._endpoint = endpoint
        return endpoint

    def clear(self) -> None:
        self._endpoint = None
