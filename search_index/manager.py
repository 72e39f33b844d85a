"""Several indexes configured together and sharing one client."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Union

from .exceptions import ConfigurationError, IndexNotFoundError
from .index import Index
from .models import IndexDefinition

logger = logging.getLogger(__name__)

Definitions = Union[
    Mapping[str, Mapping[str, Any]],
    Iterable[Union[IndexDefinition, Mapping[str, Any]]],
]


class IndexManager:
    """Registry of :class:`Index` objects built from configuration.

    *definitions* is either a list of index definitions or a mapping keyed by
    index name whose values hold ``settings`` and ``types``.
    """

    def __init__(self, client: Any, definitions: Definitions) -> None:
        self._client = client
        self._indexes: dict[str, Index] = {}

        if isinstance(definitions, Mapping):
            definitions = [self._keyed_definition(name, body) for name, body in definitions.items()]

        for definition in definitions:
            index = Index.from_definition(client, definition)
            if index.name in self._indexes:
                raise ConfigurationError(f"Index {index.name!r} is defined more than once")
            self._indexes[index.name] = index

    @staticmethod
    def _keyed_definition(name: str, body: Any) -> dict[str, Any]:
        body = dict(body or {})
        if body.get("name", name) != name:
            raise ConfigurationError(
                f"Index defined under {name!r} names itself {body['name']!r}"
            )
        body["name"] = name
        return body

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._indexes)

    def has_index(self, name: str) -> bool:
        return name in self._indexes

    def get_index(self, name: str) -> Index:
        if not self.has_index(name):
            raise IndexNotFoundError(name)

        return self._indexes[name]

    def reset_all(self) -> None:
        """Reset every index in declaration order; stops at the first failure."""
        for index in self._indexes.values():
            logger.info("Resetting index: %s", index.name)
            index.reset()

    def __iter__(self) -> Iterator[Index]:
        return iter(self._indexes.values())

    def __len__(self) -> int:
        return len(self._indexes)
