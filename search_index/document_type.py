"""Document types (schemas) registered on an index."""

from __future__ import annotations

import copy
from typing import Any, Optional

from .exceptions import ConfigurationError


class DocumentType:
    """A named schema inside an index, carrying its field mappings.

    The owning index is referenced by name only.
    """

    def __init__(
        self,
        name: str,
        index_name: str,
        mappings: Optional[dict[str, Any]] = None,
    ) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError(f"Type name must be a non-empty string, got {name!r}")
        if mappings is not None and not isinstance(mappings, dict):
            raise ConfigurationError(
                f"Mappings for type {name!r} must be a mapping, got {type(mappings).__name__}"
            )

        self._name = name
        self._index_name = index_name
        self._mappings = copy.deepcopy(mappings) if mappings else {}

    @property
    def name(self) -> str:
        return self._name

    @property
    def index_name(self) -> str:
        return self._index_name

    @property
    def mappings(self) -> dict[str, Any]:
        """A copy of the declared field mappings; empty when none were supplied."""
        return copy.deepcopy(self._mappings)

    def has_mappings(self) -> bool:
        return bool(self._mappings)

    def __repr__(self) -> str:
        return f"DocumentType(name={self._name!r}, index_name={self._index_name!r})"
