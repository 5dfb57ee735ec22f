"""Mapping of CDN response headers to the URLs a container is served from.

The CDN management API reports the public URLs of a CDN-enabled container
as response headers on ``HEAD`` and ``PUT`` requests. :func:`urls_from_headers`
collects them into a :class:`URLSet`.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Mapping, Optional

__all__ = ["URI_HEADERS", "CDN_ENABLED_HEADER", "URLSet", "urls_from_headers"]

URI_HEADERS: Mapping[str, str] = {
    "X-Cdn-Ios-Uri": "ios_uri",
    "X-Cdn-Uri": "uri",
    "X-Cdn-Streaming-Uri": "streaming_uri",
    "X-Cdn-Ssl-Uri": "ssl_uri",
}
"""Response header names mapped to `URLSet` field names."""

CDN_ENABLED_HEADER = "X-Cdn-Enabled"
"""Header carrying a container's CDN enablement flag (``"True"`` or
``"False"``).
"""


@dataclass(frozen=True)
class URLSet:
    """The CDN URLs of a container.

    An empty `URLSet` (all fields `None`) is falsy.
    """

    ios_uri: Optional[str] = None
    uri: Optional[str] = None
    streaming_uri: Optional[str] = None
    ssl_uri: Optional[str] = None

    def __bool__(self) -> bool:
        return any(v is not None for v in asdict(self).values())

    def as_dict(self) -> Dict[str, str]:
        """Populated fields only."""
        return {k: v for k, v in asdict(self).items() if v is not None}


def urls_from_headers(headers: Mapping[str, str]) -> URLSet:
    """Build a `URLSet` from response headers.

    Headers that are absent leave the corresponding field unset.
    """
    fields = {}
    for header, field_name in URI_HEADERS.items():
        value = headers.get(header)
        if value is not None:
            fields[field_name] = value
    return URLSet(**fields)
