from __future__ import annotations

import asyncio

import pytest
from conftest import FakeTransport
from opensearchpy import AsyncOpenSearch

from opensearch_service.client import check_connection, create_opensearch_client
from opensearch_service.config import OpenSearchConfig
from opensearch_service.decoding import DecodePolicy
from opensearch_service.errors import SearchConnectionError
from opensearch_service.factory import connect
from opensearch_service.service import OpenSearchService


def test_config_reads_environment(monkeypatch):
    monkeypatch.setenv("OPENSEARCH_URL", "https://search.internal:9200")
    monkeypatch.setenv("OPENSEARCH_USERNAME", "reader")
    monkeypatch.setenv("OPENSEARCH_PASSWORD", "secret")
    monkeypatch.setenv("OPENSEARCH_VERIFY_CERTS", "false")
    monkeypatch.setenv("OPENSEARCH_REQUEST_TIMEOUT_S", "5")
    monkeypatch.setenv("OPENSEARCH_INDEX", "flights_v2")

    cfg = OpenSearchConfig()

    assert cfg.url == "https://search.internal:9200"
    assert cfg.has_basic_auth
    assert cfg.verify_certs is False
    assert cfg.request_timeout_s == 5
    assert cfg.default_index == "flights_v2"


def test_config_defaults(monkeypatch):
    for name in ("OPENSEARCH_URL", "OPENSEARCH_USERNAME", "OPENSEARCH_PASSWORD", "OPENSEARCH_VERIFY_CERTS"):
        monkeypatch.delenv(name, raising=False)

    cfg = OpenSearchConfig()

    assert cfg.url == "https://localhost:9200"
    assert not cfg.has_basic_auth
    assert cfg.verify_certs is True


def test_local_config_matches_dev_cluster():
    cfg = OpenSearchConfig.local()

    assert cfg.url == "https://localhost:9200"
    assert (cfg.username, cfg.password) == ("admin", "admin")
    assert cfg.verify_certs is False


def test_empty_url_is_connection_error():
    with pytest.raises(SearchConnectionError):
        create_opensearch_client(OpenSearchConfig(url=""))


def test_connect_builds_async_client():
    service = connect(OpenSearchConfig.local(), decode_policy=DecodePolicy.SKIP)

    assert isinstance(service, OpenSearchService)
    assert isinstance(service.client, AsyncOpenSearch)
    assert service.decode_policy is DecodePolicy.SKIP


@pytest.mark.parametrize("ping_ok", [True, False])
def test_check_connection(ping_ok):
    assert asyncio.run(check_connection(FakeTransport(ping_ok=ping_ok))) is ping_ok


@pytest.mark.parametrize("url", ["https://localhost:notaport", "http://[::1"])
def test_malformed_url_is_connection_error(url):
    with pytest.raises(SearchConnectionError):
        create_opensearch_client(OpenSearchConfig(url=url))


@pytest.mark.parametrize(
    "env",
    [
        {"OPENSEARCH_REQUEST_TIMEOUT_S": "soon"},
        {"OPENSEARCH_URL": "https://localhost:notaport"},
    ],
)
def test_connect_wraps_bad_environment(monkeypatch, env):
    for name, value in env.items():
        monkeypatch.setenv(name, value)

    with pytest.raises(SearchConnectionError):
        connect()
