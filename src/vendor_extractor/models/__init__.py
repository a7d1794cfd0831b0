"""Data models for queries, raw rows, vendors and extraction results."""

from vendor_extractor.models.query import QuerySpec, SearchFilter
from vendor_extractor.models.raw import RawRecord
from vendor_extractor.models.result import ExtractionResult, PageRequest, clamp_page_size
from vendor_extractor.models.vendor import VendorRecord

__all__ = [
    "ExtractionResult",
    "PageRequest",
    "QuerySpec",
    "RawRecord",
    "SearchFilter",
    "VendorRecord",
    "clamp_page_size",
]
