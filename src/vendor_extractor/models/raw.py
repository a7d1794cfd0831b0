"""Raw search row representation before mapping."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RawRecord(BaseModel):
    """
    One row as the record search returns it.
    `data` holds raw column values; `text` holds display text for
    reference columns (e.g. subsidiary name for a subsidiary id).
    """

    model_config = ConfigDict(extra="allow")

    data: dict[str, Any] = Field(default_factory=dict)
    text: dict[str, Any] = Field(default_factory=dict)

    def get_value(self, column: str) -> Any:
        """Raw value for a column, or None."""
        return self.data.get(column)

    def get_text(self, column: str) -> Any:
        """Display text for a column, or None."""
        return self.text.get(column)
