"""cloudcdn service configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from cloudcdn.exceptions import ConfigurationError

__all__ = ["DEFAULT_REGION", "ServiceConfig"]

DEFAULT_REGION = "dfw"
"""Region used when none is configured."""


@dataclass(frozen=True)
class ServiceConfig:
    """Configuration for a `cloudcdn.service.CDNService`.

    Parameters
    ----------
    api_key : str
        API key of the account.
    username : str
        Account username. Also identifies the account in the mock store.
    auth_url : str, optional
        URL of the identity service. Passed through to the authenticator.
    persistent : bool
        Reuse one HTTP connection for all requests of a backend.
    use_ssl : bool
        Force the ``https`` scheme on the resolved CDN endpoint.
    region : str
        Region whose CDN endpoint is looked up in the service catalog.
    cdn_url : str, optional
        Explicit CDN management URL. Bypasses the service catalog.
    mock : bool
        Use the in-memory backend instead of the network.
    timeout : float, optional
        Request timeout in seconds. `None` keeps the transport default.
    """

    api_key: str
    username: str
    auth_url: Optional[str] = None
    persistent: bool = False
    use_ssl: bool = False
    region: str = DEFAULT_REGION
    cdn_url: Optional[str] = None
    mock: bool = False
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        if not self.api_key:
            raise ConfigurationError("api_key is required")
        if not self.username:
            raise ConfigurationError("username is required")
        object.__setattr__(self, "region", str(self.region).lower())

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> ServiceConfig:
        """Create a configuration from ``CLOUDCDN_*`` environment variables.

        Boolean flags are integers (``CLOUDCDN_PERSISTENT=1``).
        """
        env = os.environ if environ is None else environ
        timeout = env.get("CLOUDCDN_TIMEOUT")
        return cls(
            api_key=env.get("CLOUDCDN_API_KEY", ""),
            username=env.get("CLOUDCDN_USERNAME", ""),
            auth_url=env.get("CLOUDCDN_AUTH_URL"),
            persistent=bool(int(env.get("CLOUDCDN_PERSISTENT", "0"))),
            use_ssl=bool(int(env.get("CLOUDCDN_USE_SSL", "0"))),
            region=env.get("CLOUDCDN_REGION", DEFAULT_REGION),
            cdn_url=env.get("CLOUDCDN_URL"),
            mock=bool(int(env.get("CLOUDCDN_MOCK", "0"))),
            timeout=float(timeout) if timeout else None,
        )
