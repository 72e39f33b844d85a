"""Errors raised by the index layer.

Client and transport errors from opensearch-py are not wrapped here; they
reach the caller unchanged.
"""


class SearchIndexError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(SearchIndexError, ValueError):
    """Raised when an index or type definition is malformed."""


class TypeNotFoundError(SearchIndexError, KeyError):
    """Raised when a type name is not registered on an index."""

    def __init__(self, type_name: str, index_name: str) -> None:
        self.type_name = type_name
        self.index_name = index_name
        super().__init__(type_name, index_name)

    def __str__(self) -> str:
        return f"Type {self.type_name!r} not found in index {self.index_name!r}"


class IndexNotFoundError(SearchIndexError, KeyError):
    """Raised when an index name is not registered on a manager."""

    def __init__(self, index_name: str) -> None:
        self.index_name = index_name
        super().__init__(index_name)

    def __str__(self) -> str:
        return f"Index {self.index_name!r} is not configured"
