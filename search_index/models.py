"""Pydantic models for documents and index definitions."""

from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator


class Document(BaseModel):
    """One record to index: an id plus an opaque body."""

    id: Union[str, int]
    data: dict[str, Any] = Field(default_factory=dict)


class TypeDefinition(BaseModel):
    """Raw definition of one document type inside an index."""

    mappings: Optional[dict[str, Any]] = None


class IndexDefinition(BaseModel):
    """Configuration snapshot an :class:`Index` is built from.

    Shape: ``{"name": str, "settings": {...}, "types": {name: {"mappings": {...}}}}``
    """

    name: str
    settings: dict[str, Any] = Field(default_factory=dict)
    types: dict[str, TypeDefinition] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("index name must not be empty")
        return value

    @field_validator("types", mode="before")
    @classmethod
    def _none_type_records(cls, value: Any) -> Any:
        # ``post: ~`` in a config file means "a type with no mappings"
        if isinstance(value, dict):
            return {k: ({} if v is None else v) for k, v in value.items()}
        return value
