"""py.test fixtures available to all test modules without explicit import."""

from __future__ import annotations

import pytest

from cloudcdn.auth import ServiceCatalog, StaticAuthenticator
from cloudcdn.backends.mock import MockStore
from cloudcdn.config import ServiceConfig
from cloudcdn.service import CDNService

API_KEY = "d3cafb4dde4dbeef"
USERNAME = "hipster"
TOKEN = "a8b1f4c3e4d6"
CDN_URL = "https://cdn.example/v1"
DFW_URL = "https://cdn1.clouddrive.com/v1/MossoCloudFS_1234"
ORD_URL = "https://cdn2.clouddrive.com/v1/MossoCloudFS_1234"


@pytest.fixture
def mock_store() -> MockStore:
    """A mock store owned by a single test."""
    return MockStore()


@pytest.fixture
def mock_config() -> ServiceConfig:
    return ServiceConfig(
        api_key=API_KEY, username=USERNAME, cdn_url=CDN_URL, mock=True
    )


@pytest.fixture
def mock_cdn(mock_config: ServiceConfig, mock_store: MockStore) -> CDNService:
    return CDNService(mock_config, store=mock_store)


@pytest.fixture
def catalog() -> ServiceCatalog:
    return ServiceCatalog.from_json(
        [
            {
                "name": "cloudFilesCDN",
                "type": "rax:object-cdn",
                "endpoints": [
                    {"region": "DFW", "publicURL": DFW_URL},
                    {"region": "ORD", "publicURL": ORD_URL},
                ],
            },
            {
                "name": "cloudFiles",
                "type": "object-store",
                "endpoints": [
                    {
                        "region": "DFW",
                        "publicURL": "https://storage101.dfw1.clouddrive.com",
                    }
                ],
            },
        ]
    )


@pytest.fixture
def real_config() -> ServiceConfig:
    return ServiceConfig(api_key=API_KEY, username=USERNAME, cdn_url=CDN_URL)


@pytest.fixture
def real_cdn(real_config: ServiceConfig) -> CDNService:
    return CDNService(real_config, authenticator=StaticAuthenticator(TOKEN))
