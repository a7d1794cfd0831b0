"""Paged vendor record extraction over a host record search."""

from vendor_extractor.endpoints import VendorListEndpoint
from vendor_extractor.extractor import PagedRecordExtractor

__all__ = ["PagedRecordExtractor", "VendorListEndpoint"]
