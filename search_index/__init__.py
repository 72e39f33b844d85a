"""Index and document-type abstraction over an OpenSearch / Elasticsearch cluster."""

from .client import create_client
from .connection_settings import ConnectionConfig, load_config
from .document_type import DocumentType
from .exceptions import (
    ConfigurationError,
    IndexNotFoundError,
    SearchIndexError,
    TypeNotFoundError,
)
from .index import Index
from .manager import IndexManager
from .models import Document, IndexDefinition, TypeDefinition
from .query import Query, RawQuery, StructuredQuery

__all__ = [
    # client
    "create_client",
    # config
    "ConnectionConfig",
    "load_config",
    # models
    "Document",
    "IndexDefinition",
    "TypeDefinition",
    # query
    "Query",
    "RawQuery",
    "StructuredQuery",
    # index
    "DocumentType",
    "Index",
    "IndexManager",
    # errors
    "SearchIndexError",
    "ConfigurationError",
    "TypeNotFoundError",
    "IndexNotFoundError",
]
