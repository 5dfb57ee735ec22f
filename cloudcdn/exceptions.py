"""Custom exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from cloudcdn.backends.base import CDNResponse

__all__ = [
    "CDNError",
    "ConfigurationError",
    "EndpointNotFound",
    "RequestError",
    "NotFoundError",
    "UnsupportedPurgeTarget",
]


class CDNError(Exception):
    """Base class for errors raised by cloudcdn."""


class ConfigurationError(CDNError, ValueError):
    """Raised when the service is missing configuration it needs, such as
    a CDN endpoint under the legacy authentication protocol.
    """


class EndpointNotFound(CDNError):
    """The service catalog has no CDN endpoint for the requested region."""


class RequestError(CDNError):
    """Errors related to a non-successful response from the CDN management
    API.

    Parameters
    ----------
    response : `cloudcdn.backends.base.CDNResponse`, optional
        The response that triggered the error.
    message : str, optional
        Error message. Defaults to one built from the response status.
    """

    def __init__(
        self,
        response: Optional[CDNResponse] = None,
        message: Optional[str] = None,
    ) -> None:
        self.response = response
        if message is None:
            if response is not None:
                message = "CDN request failed (status {0})".format(
                    response.status
                )
            else:
                message = "CDN request failed"
        super().__init__(message)

    @property
    def status(self) -> Optional[int]:
        if self.response is None:
            return None
        return self.response.status


class NotFoundError(RequestError):
    """The CDN management API responded with 404 Not Found."""


class UnsupportedPurgeTarget(CDNError, NotImplementedError):
    """Raised when purging an object that does not identify a stored file."""

    def __init__(self, target: object) -> None:
        self.target_type = type(target).__name__
        super().__init__(
            "{0} does not support CDN purging".format(self.target_type)
        )
