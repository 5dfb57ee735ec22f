"""Tests for the CDN service facade."""

from __future__ import annotations

import pytest
import responses

from cloudcdn.auth import StaticAuthenticator
from cloudcdn.backends.mock import MockBackend, MockStore
from cloudcdn.backends.real import RealBackend
from cloudcdn.config import ServiceConfig
from cloudcdn.exceptions import ConfigurationError, UnsupportedPurgeTarget
from cloudcdn.headers import URLSet
from cloudcdn.service import CDNService
from cloudcdn.storage import Directory, File

from .conftest import CDN_URL, TOKEN


def test_mock_selection(mock_cdn: CDNService) -> None:
    assert isinstance(mock_cdn.backend, MockBackend)
    assert mock_cdn.mocking
    assert mock_cdn.enabled


def test_real_selection(real_cdn: CDNService) -> None:
    assert isinstance(real_cdn.backend, RealBackend)
    assert not real_cdn.mocking
    assert real_cdn.enabled


def test_real_requires_authenticator(real_config: ServiceConfig) -> None:
    with pytest.raises(ConfigurationError):
        CDNService(real_config)


def test_mock_scenario(mock_cdn: CDNService) -> None:
    container = Directory("mycontainer")

    mock_cdn.put_container("mycontainer", {"X-Cdn-Enabled": "True"})
    response = mock_cdn.head_container("mycontainer")
    assert response.headers["X-Cdn-Enabled"] == "True"

    # Enabled, but no URI headers stored.
    assert mock_cdn.urls(container) == URLSet()

    mock_cdn.post_container(
        "mycontainer", {"X-Cdn-Ssl-Uri": "https://ssl.example"}
    )
    assert mock_cdn.urls(container) == URLSet(ssl_uri="https://ssl.example")


def test_mock_publish_and_unpublish(mock_cdn: CDNService) -> None:
    container = Directory("mycontainer")
    mock_cdn.put_container("mycontainer", {"X-Cdn-Uri": "http://cdn.example"})

    assert mock_cdn.publish_container(container) == URLSet(
        uri="http://cdn.example"
    )
    assert mock_cdn.list_containers() == ["mycontainer"]

    assert mock_cdn.publish_container(container, publish=False) == URLSet()
    assert mock_cdn.urls(container) == URLSet()
    assert mock_cdn.list_containers() == []


def test_mock_urls_missing_container(mock_cdn: CDNService) -> None:
    assert mock_cdn.urls(Directory("missing")) == URLSet()


def test_mock_purge(mock_cdn: CDNService) -> None:
    assert mock_cdn.purge(File("b.png", Directory("images")))
    assert mock_cdn.purge(None)
    with pytest.raises(UnsupportedPurgeTarget):
        mock_cdn.purge(Directory("images"))


def test_mock_store_isolation(mock_store: MockStore) -> None:
    alice = CDNService(
        ServiceConfig(api_key="k", username="alice", mock=True),
        store=mock_store,
    )
    bob = CDNService(
        ServiceConfig(api_key="k", username="bob", mock=True),
        store=mock_store,
    )
    alice.publish_container(Directory("a"))
    bob.publish_container(Directory("b"))

    mock_store.reset("alice")

    assert alice.list_containers() == []
    assert bob.list_containers() == ["b"]


@responses.activate
def test_real_publish(real_cdn: CDNService) -> None:
    url = CDN_URL + "/images"
    responses.add(
        responses.PUT,
        url,
        status=201,
        headers={
            "X-Cdn-Uri": "http://c1.r1.cf1.rackcdn.com",
            "X-Cdn-Ssl-Uri": "https://c1.ssl.cf1.rackcdn.com",
        },
    )

    urls = real_cdn.publish_container(Directory("images"))

    assert urls == URLSet(
        uri="http://c1.r1.cf1.rackcdn.com",
        ssl_uri="https://c1.ssl.cf1.rackcdn.com",
    )
    request = responses.calls[0].request
    assert request.headers["X-Cdn-Enabled"] == "True"
    assert request.headers["X-Auth-Token"] == TOKEN


@responses.activate
def test_real_urls(real_cdn: CDNService) -> None:
    responses.add(
        responses.HEAD,
        CDN_URL + "/images",
        status=204,
        headers={
            "X-Cdn-Enabled": "True",
            "X-Cdn-Streaming-Uri": "http://c1.r1.stream.cf1.rackcdn.com",
        },
    )
    responses.add(responses.HEAD, CDN_URL + "/missing", status=404)

    assert real_cdn.urls(Directory("images")) == URLSet(
        streaming_uri="http://c1.r1.stream.cf1.rackcdn.com"
    )
    assert real_cdn.urls(Directory("missing")) == URLSet()


@responses.activate
def test_real_purge(real_cdn: CDNService) -> None:
    url = CDN_URL + "/images/a/b.png"
    responses.add(responses.DELETE, url, status=204)

    assert real_cdn.purge(File("a/b.png", Directory("images")))

    assert len(responses.calls) == 1
    assert responses.calls[0].request.url == url
    assert responses.calls[0].request.method == "DELETE"


@responses.activate
def test_real_purge_none(real_cdn: CDNService) -> None:
    assert real_cdn.purge(None)
    assert len(responses.calls) == 0


def test_real_reload(real_cdn: CDNService) -> None:
    endpoint = real_cdn.backend.endpoint  # type: ignore[attr-defined]
    real_cdn.reload()
    assert real_cdn.backend.endpoint == endpoint  # type: ignore[attr-defined]


def test_service_with_static_token() -> None:
    config = ServiceConfig(
        api_key="k", username="u", cdn_url="https://cdn.example/v1"
    )
    cdn = CDNService(config, authenticator=StaticAuthenticator("t"))
    assert cdn.backend.endpoint.url == "https://cdn.example/v1"  # type: ignore[attr-defined]


def test_mock_disable_with_other_header_case(mock_cdn: CDNService) -> None:
    container = Directory("c")
    mock_cdn.put_container(
        "c", {"X-Cdn-Enabled": "True", "X-Cdn-Uri": "http://c1.example"}
    )
    assert mock_cdn.urls(container) == URLSet(uri="http://c1.example")

    mock_cdn.post_container("c", {"X-CDN-Enabled": "False"})

    assert mock_cdn.urls(container) == URLSet()
    assert mock_cdn.list_containers() == []
