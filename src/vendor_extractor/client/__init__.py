"""Client for a deployed vendor list endpoint."""

from vendor_extractor.client.restlet import VendorListClient, VendorListError

__all__ = ["VendorListClient", "VendorListError"]
