from __future__ import annotations

import pytest

import search_index.client as client_module
from search_index.connection_settings import ConnectionConfig


class DummyOpenSearch:
    def __init__(self, **kwargs):
        self.kwargs = kwargs


def test_create_client_passes_expected_kwargs(monkeypatch):
    monkeypatch.setattr(client_module, "OpenSearch", DummyOpenSearch)

    cfg = ConnectionConfig(
        host="os.local",
        port=9201,
        user="admin",
        password="admin",
        ca_certs="/tmp/ca.pem",
        timeout=10,
        max_retries=7,
    )

    result = client_module.create_client(config=cfg)

    assert isinstance(result, DummyOpenSearch)
    assert result.kwargs["hosts"] == [{"host": "os.local", "port": 9201, "scheme": "https"}]
    assert result.kwargs["http_auth"] == ("admin", "admin")
    assert result.kwargs["ca_certs"] == "/tmp/ca.pem"
    assert result.kwargs["timeout"] == 10
    assert result.kwargs["max_retries"] == 7


def test_create_client_uses_overrides_when_no_config(monkeypatch):
    monkeypatch.setattr(client_module, "OpenSearch", DummyOpenSearch)

    client = client_module.create_client(host="127.0.0.1", port=9200, use_ssl=False, password="")

    assert client.kwargs["hosts"][0]["scheme"] == "http"
    assert "http_auth" not in client.kwargs


def test_falls_back_to_elasticsearch(monkeypatch):
    monkeypatch.setattr(client_module, "OpenSearch", None)
    monkeypatch.setattr(client_module, "Elasticsearch", DummyOpenSearch)

    assert isinstance(client_module.create_client(), DummyOpenSearch)


def test_explicit_client_class_wins(monkeypatch):
    class Other(DummyOpenSearch):
        pass

    monkeypatch.setattr(client_module, "OpenSearch", DummyOpenSearch)

    assert isinstance(client_module.create_client(client_class=Other), Other)


def test_no_client_installed_raises(monkeypatch):
    monkeypatch.setattr(client_module, "OpenSearch", None)
    monkeypatch.setattr(client_module, "Elasticsearch", None)

    assert client_module.installed_client_classes() == []
    with pytest.raises(ModuleNotFoundError):
        client_module.create_client()
