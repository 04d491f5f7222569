"""Hyper-schema document Pydantic v2 data models."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.schematic.pointers import HRef, Reference


class Schema(BaseModel):
    """One node of a JSON hyper-schema document.

    ``$ref`` is kept as a raw pointer string and is never resolved eagerly;
    ``anyOf`` and ``patternProperties`` keep their input order since the first
    entry of each is the one honored.
    """
    id: str | None = None
    title: str | None = None
    description: str | None = None
    version: str | None = None
    type: str | list[str] | None = None
    format: str | None = None
    items: Schema | None = None
    properties: dict[str, Schema] | None = None
    pattern_properties: dict[str, Schema] | None = Field(
        default=None, alias="patternProperties"
    )
    additional_properties: Any = Field(default=None, alias="additionalProperties")
    required: list[str] = Field(default_factory=list)
    ref: str | None = Field(default=None, alias="$ref")
    any_of: list[Schema] = Field(default_factory=list, alias="anyOf")
    definitions: dict[str, Schema] | None = None
    links: list[Link] | None = None
    read_only: bool | None = Field(default=None, alias="readOnly")
    example: Any = None

    model_config = {"populate_by_name": True, "extra": "ignore", "frozen": True}

    @property
    def types(self) -> list[str]:
        """Type tags in declaration order; empty when ``type`` is absent."""
        if self.type is None:
            return []
        if isinstance(self.type, str):
            return [self.type]
        return list(self.type)

    @property
    def reference(self) -> Reference | None:
        return Reference(self.ref) if self.ref is not None else None


class Link(BaseModel):
    """One action available on a resource."""
    title: str = ""
    description: str = ""
    href: HRef | None = None
    rel: str = ""
    method: str = ""
    body_schema: Schema | None = Field(default=None, alias="schema")
    target_schema: Schema | None = Field(default=None, alias="targetSchema")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
        "frozen": True,
        "arbitrary_types_allowed": True,
    }

    @field_validator("href", mode="before")
    @classmethod
    def build_href(cls, value: Any) -> Any:
        if isinstance(value, str):
            return HRef(value)
        return value


Schema.model_rebuild()
Link.model_rebuild()
