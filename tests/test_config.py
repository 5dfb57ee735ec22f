"""Tests for the config module."""

import pytest

from cloudcdn.config import DEFAULT_REGION, ServiceConfig
from cloudcdn.exceptions import ConfigurationError


def test_defaults() -> None:
    config = ServiceConfig(api_key="k", username="u")
    assert config.region == DEFAULT_REGION
    assert config.persistent is False
    assert config.use_ssl is False
    assert config.cdn_url is None
    assert config.mock is False
    assert config.timeout is None


def test_region_is_lowercased() -> None:
    config = ServiceConfig(api_key="k", username="u", region="ORD")
    assert config.region == "ord"


@pytest.mark.parametrize(
    "kwargs", [{"api_key": "", "username": "u"}, {"api_key": "k", "username": ""}]
)
def test_required_options(kwargs: dict) -> None:
    with pytest.raises(ConfigurationError):
        ServiceConfig(**kwargs)


def test_immutable() -> None:
    config = ServiceConfig(api_key="k", username="u")
    with pytest.raises(AttributeError):
        config.region = "ord"  # type: ignore[misc]


def test_from_env() -> None:
    env = {
        "CLOUDCDN_API_KEY": "k",
        "CLOUDCDN_USERNAME": "u",
        "CLOUDCDN_AUTH_URL": "https://identity.example/v2.0",
        "CLOUDCDN_PERSISTENT": "1",
        "CLOUDCDN_USE_SSL": "1",
        "CLOUDCDN_REGION": "LON",
        "CLOUDCDN_URL": "https://cdn.example/v1",
        "CLOUDCDN_MOCK": "0",
        "CLOUDCDN_TIMEOUT": "2.5",
    }
    config = ServiceConfig.from_env(env)
    assert config == ServiceConfig(
        api_key="k",
        username="u",
        auth_url="https://identity.example/v2.0",
        persistent=True,
        use_ssl=True,
        region="lon",
        cdn_url="https://cdn.example/v1",
        mock=False,
        timeout=2.5,
    )


def test_from_env_missing_credentials() -> None:
    with pytest.raises(ConfigurationError):
        ServiceConfig.from_env({"CLOUDCDN_USERNAME": "u"})
