"""Page request and extraction result envelope."""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from vendor_extractor.constants import MAX_PAGE_SIZE
from vendor_extractor.models.vendor import VendorRecord


def clamp_page_size(value: Any) -> int:
    """
    Page size clamped to 1..MAX_PAGE_SIZE.
    Missing, zero, negative or non-numeric values fall back to MAX_PAGE_SIZE.
    """
    try:
        size = int(value)
    except (TypeError, ValueError):
        return MAX_PAGE_SIZE
    if size < 1:
        return MAX_PAGE_SIZE
    return min(size, MAX_PAGE_SIZE)


def _start_index(value: Any) -> int:
    try:
        start = int(value)
    except (TypeError, ValueError):
        return 0
    return max(start, 0)


class PageRequest(BaseModel):
    """One page window: [start_index, start_index + page_size)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    start_index: int = Field(0, ge=0, alias="startIndex")
    page_size: int = Field(MAX_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize")

    @classmethod
    def from_body(cls, body: Optional[dict]) -> "PageRequest":
        """Build from a request body, applying defaults and the page size cap."""
        body = body or {}
        return cls(
            start_index=_start_index(body.get("startIndex")),
            page_size=clamp_page_size(body.get("pageSize")),
        )

    @property
    def end_index(self) -> int:
        return self.start_index + self.page_size


class ExtractionResult(BaseModel):
    """
    Response envelope for one extraction call.
    On failure only success, error and message are set.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool
    extracted_at: Optional[datetime] = Field(None, alias="extractedAt")
    total_vendors: Optional[int] = Field(None, alias="totalVendors")
    start_index: Optional[int] = Field(None, alias="startIndex")
    page_size: Optional[int] = Field(None, alias="pageSize")
    returned_count: Optional[int] = Field(None, alias="returnedCount")
    has_more: Optional[bool] = Field(None, alias="hasMore")
    records: Optional[list[VendorRecord]] = Field(None, alias="vendors")
    error: Optional[str] = None
    message: str = ""

    @field_serializer("extracted_at")
    def _serialize_extracted_at(self, value: Optional[datetime]) -> Optional[str]:
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc)
        return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    @classmethod
    def failure(cls, error: BaseException | str, message: str) -> "ExtractionResult":
        return cls(success=False, error=str(error), message=message)

    def to_payload(self) -> dict:
        """JSON-compatible dict keyed by wire names; unset top-level fields are omitted."""
        payload = self.model_dump(mode="json", by_alias=True)
        return {key: value for key, value in payload.items() if value is not None}
