"""Immutable query description for a record search."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SearchFilter(BaseModel):
    """A single (field, operator, value) predicate."""

    model_config = ConfigDict(frozen=True)

    field: str
    operator: str
    value: Any = None

    @classmethod
    def from_triple(cls, triple: "SearchFilter | tuple | list") -> "SearchFilter":
        """Accept an existing filter or a (field, operator, value) sequence."""
        if isinstance(triple, SearchFilter):
            return triple
        if len(triple) != 3:
            raise ValueError(f"Filter must be (field, operator, value), got: {triple!r}")
        field, operator, value = triple
        return cls(field=field, operator=operator, value=value)

    def as_triple(self) -> tuple[str, str, Any]:
        return (self.field, self.operator, self.value)


class QuerySpec(BaseModel):
    """Record type, ordered filters and ordered column list for one search."""

    model_config = ConfigDict(frozen=True)

    record_type: str = Field(..., description="Host record type, e.g. 'vendor'")
    filters: tuple[SearchFilter, ...] = ()
    columns: tuple[str, ...] = ()
