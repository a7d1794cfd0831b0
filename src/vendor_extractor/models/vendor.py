"""Vendor output record."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class VendorRecord(BaseModel):
    """
    Vendor as returned to consumers of the vendor list.
    Aliases are the wire keys existing consumers depend on.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    entity_code: str = Field("", alias="entityid")
    company_name: str = Field("", alias="companyname")
    display_label: str = Field(..., alias="displayName")
    is_inactive: bool = Field(False, alias="isinactive")
    subsidiary_label: Optional[str] = Field(None, alias="subsidiary")
    subsidiary_id: Optional[str] = Field(None, alias="subsidiaryId")
    category_label: Optional[str] = Field(None, alias="category")
    category_id: Optional[str] = Field(None, alias="categoryId")

    def to_payload(self) -> dict:
        """JSON-compatible dict keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True)
