from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RequirementLevel(StrEnum):
    REQUIRED = "Required"
    RECOMMENDED = "Recommended"
    OTHER = "Other"

    @classmethod
    def parse(cls, raw: object) -> RequirementLevel:
        text = str(raw or "").strip().lower()
        for level in (cls.REQUIRED, cls.RECOMMENDED):
            if text == level.value.lower():
                return level
        return cls.OTHER


class SchemaField(BaseModel):
    """A named column definition of a data structure.

    Field names follow the data dictionary's camelCase keys through aliases so
    that raw NDA element records validate directly.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = Field(min_length=1)
    aliases: tuple[str, ...] = ()
    requirement_level: RequirementLevel = Field(
        default=RequirementLevel.OTHER, alias="required"
    )
    value_range: str | None = Field(default=None, alias="valueRange")
    type: str | None = None
    description: str | None = None
    notes: str | None = None
    size: str | None = None
    position: int | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value

    @field_validator("aliases", mode="before")
    @classmethod
    def _split_aliases(cls, value: object) -> object:
        if value is None:
            return ()
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        return value

    @field_validator("requirement_level", mode="before")
    @classmethod
    def _parse_level(cls, value: object) -> RequirementLevel:
        if isinstance(value, RequirementLevel):
            return value
        return RequirementLevel.parse(value)

    @field_validator("value_range", "type", "description", "notes", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator("size", mode="before")
    @classmethod
    def _size_to_text(cls, value: object) -> object:
        if value is None:
            return None
        text = str(value).strip()
        return text or None


class Schema:
    """Ordered, name-unique collection of schema fields."""

    def __init__(self, fields: Iterable[SchemaField]) -> None:
        super().__init__()
        self._fields: tuple[SchemaField, ...] = tuple(fields)
        self._by_name: dict[str, SchemaField] = {}
        for schema_field in self._fields:
            if schema_field.name in self._by_name:
                raise ValueError(f"Duplicate schema field name: {schema_field.name}")
            self._by_name[schema_field.name] = schema_field

    @classmethod
    def coerce(cls, fields: Schema | Iterable[SchemaField]) -> Schema:
        if isinstance(fields, Schema):
            return fields
        return cls(fields)

    @property
    def fields(self) -> tuple[SchemaField, ...]:
        return self._fields

    def __iter__(self) -> Iterator[SchemaField]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> SchemaField | None:
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return [f.name for f in self._fields]

    def names_with_level(self, level: RequirementLevel) -> list[str]:
        return [f.name for f in self._fields if f.requirement_level == level]


class DataStructure(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    short_name: str = Field(default="", alias="shortName")
    title: str = ""
    elements: list[SchemaField] = Field(default_factory=list, alias="dataElements")

    def to_schema(self) -> Schema:
        return Schema(self.elements)

    def field_names(self) -> Sequence[str]:
        return [f.name for f in self.elements]
