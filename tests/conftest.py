from __future__ import annotations

import os

import pytest


class DummyIndices:
    def __init__(self, client: "DummyClient"):
        self._client = client

    def exists(self, **kwargs):
        self._client.calls.append(("exists", kwargs))
        return self._client.index_exists

    def create(self, **kwargs):
        self._client.calls.append(("create", kwargs))
        self._client.index_exists = True
        return {"acknowledged": True, "index": kwargs["index"]}

    def delete(self, **kwargs):
        self._client.calls.append(("delete", kwargs))
        self._client.index_exists = False
        return {"acknowledged": True}

    def refresh(self, **kwargs):
        self._client.calls.append(("refresh", kwargs))
        return kwargs


class DummyTransport:
    def __init__(self, client: "DummyClient"):
        self._client = client

    def perform_request(self, method, url, headers=None, params=None, body=None):
        request = {"method": method, "url": url}
        if params is not None:
            request["params"] = params
        if body is not None:
            request["body"] = body
        return self._client._record(method, request)


# query-string options opensearch-py 2.x accepts as keywords on search()
SEARCH_OPTIONS = {"size", "from_", "sort", "routing", "timeout", "track_total_hits", "_source"}


class DummyClient:
    """Records every request, in order, on ``calls``.

    Method signatures follow opensearch-py 2.x, so arguments the real
    client rejects (``doc_type`` among them) raise ``TypeError`` here too.
    """

    def __init__(self, index_exists: bool = False):
        self.index_exists = index_exists
        self.calls: list[tuple[str, dict]] = []
        self.fail_on: set[str] = set()
        self.indices = DummyIndices(self)
        self.transport = DummyTransport(self)

    def _record(self, name: str, kwargs: dict):
        self.calls.append((name, kwargs))
        if name in self.fail_on:
            raise RuntimeError(f"{name} failed")
        return kwargs

    def index(self, index, body, id=None, params=None, headers=None):
        return self._record("index", {"index": index, "id": id, "body": body})

    def delete(self, index, id, params=None, headers=None):
        return self._record("delete_doc", {"index": index, "id": id})

    def search(self, body=None, index=None, params=None, headers=None, **options):
        unknown = set(options) - SEARCH_OPTIONS
        if unknown:
            raise TypeError(f"search() got unexpected keyword arguments {sorted(unknown)}")
        return self._record("search", {"index": index, "body": body, **options})

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]


@pytest.fixture
def client() -> DummyClient:
    return DummyClient()


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: tests that require a running OpenSearch/Elasticsearch cluster",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if os.getenv("OPENSEARCH_RUN_INTEGRATION") == "1":
        return

    skip_integration = pytest.mark.skip(
        reason="Set OPENSEARCH_RUN_INTEGRATION=1 to run integration tests"
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)
