"""Settings resolution from arguments and environment."""

from __future__ import annotations

import pytest

from netaccess.config import Settings, get_settings


def test_graphql_url_is_derived_from_network_and_base_url() -> None:
    settings = Settings(api_token="token", network="acme", url="netaccess.io", endpoint="")

    assert settings.graphql_server_url == "https://acme.netaccess.io/api/graphql/"


def test_explicit_endpoint_wins_over_network() -> None:
    settings = Settings(network="acme", endpoint="http://localhost:8080/graphql")

    assert settings.graphql_server_url == "http://localhost:8080/graphql"


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NETACCESS_API_TOKEN", "env-token")
    monkeypatch.setenv("NETACCESS_NETWORK", "envnet")
    monkeypatch.setenv("NETACCESS_URL", "example.test")
    monkeypatch.delenv("NETACCESS_ENDPOINT", raising=False)

    settings = Settings()

    assert settings.api_token == "env-token"
    assert settings.graphql_server_url == "https://envnet.example.test/api/graphql/"


def test_get_settings_is_cached(monkeypatch: pytest.MonkeyPatch) -> None:
    get_settings.cache_clear()
    monkeypatch.setenv("NETACCESS_NETWORK", "cached")
    try:
        first = get_settings()
        monkeypatch.setenv("NETACCESS_NETWORK", "changed")
        assert get_settings() is first
        assert first.network == "cached"
    finally:
        get_settings.cache_clear()
