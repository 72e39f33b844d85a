"""A named index on the cluster, with its document types and operations.

The index does not own the client and keeps no copy of cluster state: every
lifecycle, document and search call is a synchronous round trip, and client
errors propagate unchanged.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union
from urllib.parse import quote

from pydantic import ValidationError

from .document_type import DocumentType
from .exceptions import ConfigurationError, TypeNotFoundError
from .models import Document, IndexDefinition, TypeDefinition
from .query import RawQuery, StructuredQuery

logger = logging.getLogger(__name__)

TypeRecord = Union[Mapping[str, Any], TypeDefinition, None]


class Index:
    """An index, its settings and the document types declared on it.

    Args:
        name: Index name on the cluster.
        client: An opensearch-py (or elasticsearch-py 7.x) client, shared.
        settings: Sent verbatim as ``body.settings`` on :meth:`create`.
        types: Type name -> record optionally carrying ``mappings``.
    """

    def __init__(
        self,
        name: str,
        client: Any,
        settings: Optional[Mapping[str, Any]] = None,
        types: Optional[Mapping[str, TypeRecord]] = None,
    ) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError(f"Index name must be a non-empty string, got {name!r}")
        if settings is not None and not isinstance(settings, Mapping):
            raise ConfigurationError(f"Settings for index {name!r} must be a mapping")
        if types is not None and not isinstance(types, Mapping):
            raise ConfigurationError(f"Types for index {name!r} must be a mapping")

        self._name = name
        self._client = client
        self._settings: dict[str, Any] = copy.deepcopy(dict(settings or {}))
        self._types: dict[str, DocumentType] = {}

        self._build_types(types or {})

    @classmethod
    def from_definition(
        cls,
        client: Any,
        definition: Union[IndexDefinition, Mapping[str, Any]],
    ) -> Index:
        """Build an index from ``{"name", "settings", "types"}`` configuration."""
        if not isinstance(definition, IndexDefinition):
            try:
                definition = IndexDefinition.model_validate(definition)
            except ValidationError as exc:
                raise ConfigurationError(f"Invalid index definition: {exc}") from exc

        return cls(definition.name, client, definition.settings, definition.types)

    def _build_types(self, types: Mapping[str, TypeRecord]) -> None:
        for type_name, record in types.items():
            if record is None:
                mappings = None
            elif isinstance(record, TypeDefinition):
                mappings = record.mappings
            elif isinstance(record, Mapping):
                mappings = record.get("mappings")
            else:
                raise ConfigurationError(
                    f"Definition of type {type_name!r} in index {self._name!r} must be a mapping"
                )

            self._types[type_name] = DocumentType(type_name, self._name, mappings)

    @property
    def name(self) -> str:
        return self._name

    @property
    def settings(self) -> dict[str, Any]:
        """A copy of the settings sent on create."""
        return copy.deepcopy(self._settings)

    @property
    def type_names(self) -> tuple[str, ...]:
        return tuple(self._types)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def exists(self) -> bool:
        """Ask the cluster whether the index exists right now."""
        return bool(self._client.indices.exists(index=self._name))

    def delete(self) -> Any:
        """Delete the index. A missing index is reported by the client."""
        response = self._client.indices.delete(index=self._name)
        logger.info("Deleted index: %s", self._name)
        return response

    def reset(self) -> Any:
        """Delete the index if it exists, then create it again.

        Not atomic: another process can change the index between the
        existence check, the delete and the create.  A failing step stops the
        reset and leaves the index as that step left it.
        """
        if self.exists():
            self.delete()

        return self.create()

    def create(self) -> Any:
        """Create the index with the aggregated type mappings and settings."""
        params: dict[str, Any] = {"index": self._name}
        body: dict[str, Any] = {}

        mappings = self.get_mappings()
        if mappings:
            body["mappings"] = mappings

        if self._settings:
            body["settings"] = copy.deepcopy(self._settings)

        if body:
            params["body"] = body

        response = self._client.indices.create(**params)
        logger.info("Created index: %s (types with mappings: %d)", self._name, len(mappings))
        return response

    def ensure(self) -> bool:
        """Create the index unless it already exists. Returns True if created."""
        if self.exists():
            logger.info("Index already exists: %s", self._name)
            return False

        self.create()
        return True

    def refresh(self) -> Any:
        return self._client.indices.refresh(index=self._name)

    def get_mappings(self) -> dict[str, Any]:
        """Mappings of every type that declares some, keyed by type name.

        Returns ``{type_name: {"properties": {...}}}`` in declaration order.
        Types without mappings are left out.
        """
        mappings: dict[str, Any] = {}

        for doc_type in self._types.values():
            if doc_type.has_mappings():
                mappings[doc_type.name] = {"properties": doc_type.mappings}

        return mappings

    # ------------------------------------------------------------------
    # Types
    # ------------------------------------------------------------------

    def has_type(self, name: str) -> bool:
        return name in self._types

    def get_type(self, name: str) -> DocumentType:
        if not self.has_type(name):
            raise TypeNotFoundError(name, self._name)

        return self._types[name]

    # ------------------------------------------------------------------
    # Documents
    # ------------------------------------------------------------------
    # ``doc_type`` is forwarded as-is; it is not checked against the
    # registered types, which only feed the mappings sent on create.
    # opensearch-py 2.x dropped the ``doc_type`` argument, so typed requests
    # go to the transport under ``/{index}/{type}/...``.

    def put_document(self, doc_type: Optional[str], document: Document) -> Any:
        """Index (insert or replace) one document under its own id."""
        logger.debug("Indexing document %s/%s/%s", self._name, doc_type, document.id)

        if doc_type is None:
            return self._client.index(index=self._name, id=document.id, body=document.data)

        return self._client.transport.perform_request(
            method="PUT",
            url=_make_path(self._name, doc_type, document.id),
            body=document.data,
        )

    def delete_document(self, doc_type: Optional[str], doc_id: Union[str, int]) -> Any:
        logger.debug("Deleting document %s/%s/%s", self._name, doc_type, doc_id)

        if doc_type is None:
            return self._client.delete(index=self._name, id=doc_id)

        return self._client.transport.perform_request(
            method="DELETE",
            url=_make_path(self._name, doc_type, doc_id),
        )

    def put_documents(self, doc_type: Optional[str], documents: Iterable[Document]) -> list[Any]:
        """Index documents one request at a time, in order.

        Fail-fast: the first client error propagates and the remaining
        documents are not sent.
        """
        return [self.put_document(doc_type, document) for document in documents]

    def delete_documents(
        self,
        doc_type: Optional[str],
        ids: Iterable[Union[str, int]],
    ) -> list[Any]:
        """Delete documents one request at a time, in order. Fail-fast."""
        return [self.delete_document(doc_type, doc_id) for doc_id in ids]

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(
        self,
        query: Union[StructuredQuery, RawQuery],
        options: Optional[Mapping[str, Any]] = None,
        doc_type: Optional[str] = None,
    ) -> Any:
        """Run a search and return the raw client response.

        Args:
            query: Structured payload or pre-serialized query text.
            options: Extra search parameters. They override ``index`` and
                ``body`` on collision.
            doc_type: Restrict the search to one document type.
        """
        if not isinstance(query, (StructuredQuery, RawQuery)):
            raise TypeError(
                f"query must be a StructuredQuery or RawQuery, got {type(query).__name__}"
            )

        params: dict[str, Any] = {"index": self._name, "body": query.body()}
        params.update(options or {})

        logger.debug("Searching %s (type=%s)", params["index"], doc_type)

        if doc_type is None:
            return self._client.search(**params)

        index = params.pop("index")
        body = params.pop("body", None)
        return self._client.transport.perform_request(
            method="POST",
            url=_make_path(index, doc_type, "_search"),
            params=_query_string(params) or None,
            body=body,
        )

    def __repr__(self) -> str:
        return f"Index(name={self._name!r}, types={list(self._types)!r})"


def _make_path(*parts: Any) -> str:
    segments = []
    for part in parts:
        if isinstance(part, (list, tuple)):
            part = ",".join(str(p) for p in part)
        segments.append(quote(str(part), safe=",*"))
    return "/" + "/".join(segments)


def _query_string(params: Mapping[str, Any]) -> dict[str, str]:
    """Search options as URL parameters, spelled the way the REST API expects."""
    query: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            value = ",".join(str(v) for v in value)
        query[key.rstrip("_")] = str(value)
    return query
