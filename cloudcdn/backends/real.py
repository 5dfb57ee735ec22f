"""CDN backend that talks to the CDN management API over HTTP.

See https://docs.rackspace.com/docs/cloud-files/v1/ for the CDN
management API.
"""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional
from urllib.parse import quote

import requests
from structlog import get_logger

from cloudcdn.backends.base import CDNBackend, CDNResponse
from cloudcdn.endpoint import Endpoint, EndpointResolver
from cloudcdn.exceptions import NotFoundError, RequestError

if TYPE_CHECKING:
    from cloudcdn.auth import AuthResult, Authenticator
    from cloudcdn.config import ServiceConfig

__all__ = ["RealBackend"]

JSON_CONTENT_TYPE = re.compile(r"application/json")


class RealBackend(CDNBackend):
    """API client for the CDN management service of one account.

    The backend authenticates and resolves its endpoint on construction.

    Parameters
    ----------
    config : `cloudcdn.config.ServiceConfig`
        Service configuration.
    authenticator : `cloudcdn.auth.Authenticator`
        Exchanges the configured credentials for a token. Authentication
        errors propagate unchanged.
    """

    def __init__(
        self, config: ServiceConfig, authenticator: Authenticator
    ) -> None:
        self.config = config
        self.authenticator = authenticator
        self.persistent = config.persistent
        self._session: Optional[requests.Session] = None
        self._logger = get_logger(__name__)
        self._enabled = False

        self.auth = self.authenticate()
        self._enabled = True

    def authenticate(self) -> AuthResult:
        """Authenticate and resolve the CDN endpoint for the new session."""
        auth = self.authenticator.authenticate(self.config)
        self.auth_token = auth.token
        self.resolver = EndpointResolver(self.config, auth)
        self.resolver.resolve()
        return auth

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def endpoint(self) -> Endpoint:
        return self.resolver.resolve()

    def reload(self) -> None:
        """Close the persistent connection and forget the endpoint."""
        if self._session is not None:
            self._session.close()
            self._session = None
        self.resolver.clear()

    def request(
        self,
        path: str,
        method: str = "GET",
        headers: Optional[Mapping[str, str]] = None,
        body: Any = None,
        params: Optional[Mapping[str, str]] = None,
        parse_json: bool = True,
    ) -> CDNResponse:
        """Send a request to the CDN management API.

        Parameters
        ----------
        path : str
            Path relative to the endpoint. It is URL-quoted.
        method : str
            HTTP method.
        headers : dict, optional
            Headers that are added to (and override) the ``Content-Type``
            and ``X-Auth-Token`` headers.
        body : optional
            Request body. Anything other than `str` or `bytes` is
            JSON-encoded.
        params : dict, optional
            Query parameters.
        parse_json : bool
            Decode a non-empty body when the response content type is JSON.

        Returns
        -------
        response : `cloudcdn.backends.base.CDNResponse`

        Raises
        ------
        cloudcdn.exceptions.NotFoundError
            The API responded with 404.
        cloudcdn.exceptions.RequestError
            The API responded with any other non-2xx status.
        """
        request_headers: Dict[str, str] = {
            "Content-Type": "application/json",
            "X-Auth-Token": self.auth_token,
        }
        request_headers.update(headers or {})
        if body is not None and not isinstance(body, (str, bytes)):
            body = json.dumps(body)
        url = self.endpoint.url_for(quote(path))

        r = self._send(
            method,
            url,
            headers=request_headers,
            data=body,
            params=params,
            timeout=self.config.timeout,
        )
        self._logger.info(
            "CDN request", method=method, path=path, status=r.status_code
        )

        response = CDNResponse(status=r.status_code, headers=r.headers)
        if r.status_code == 404:
            response.body = r.text
            raise NotFoundError(response)
        if not 200 <= r.status_code < 300:
            response.body = r.text
            raise RequestError(response)

        content_type = r.headers.get("Content-Type", "")
        if r.content and parse_json and JSON_CONTENT_TYPE.search(content_type):
            response.body = r.json()
        else:
            response.body = r.text
        return response

    def _send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        if self.persistent:
            if self._session is None:
                self._session = requests.Session()
            return self._session.request(method, url, **kwargs)
        with requests.Session() as session:
            return session.request(method, url, **kwargs)

    def get_containers(self) -> CDNResponse:
        return self.request("", "GET", params={"format": "json"})

    def head_container(self, key: str) -> CDNResponse:
        return self.request(key, "HEAD")

    def post_container(
        self, key: str, headers: Mapping[str, str]
    ) -> CDNResponse:
        return self.request(key, "POST", headers=headers)

    def put_container(
        self, key: str, headers: Mapping[str, str]
    ) -> CDNResponse:
        return self.request(key, "PUT", headers=headers)

    def delete_object(self, container_key: str, object_key: str) -> CDNResponse:
        path = "{0}/{1}".format(container_key, object_key)
        return self.request(path, "DELETE")
