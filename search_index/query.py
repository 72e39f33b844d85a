"""Search request bodies.

A query is either a structured payload that the client serializes, or text
that has already been serialized and is sent as-is.  Neither is inspected or
validated here.
"""

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class StructuredQuery:
    payload: dict[str, Any] = field(default_factory=dict)

    def body(self) -> dict[str, Any]:
        return self.payload


@dataclass(frozen=True)
class RawQuery:
    """Pre-serialized JSON query text."""

    text: str

    def body(self) -> str:
        return self.text


Query = Union[StructuredQuery, RawQuery]
