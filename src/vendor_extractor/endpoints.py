"""GET/POST entry points for the vendor list."""

import json
import logging
from typing import Optional

from vendor_extractor.extractor import PagedRecordExtractor
from vendor_extractor.models.result import PageRequest
from vendor_extractor.search.base import RecordSearch

logger = logging.getLogger(__name__)


class VendorListEndpoint:
    """
    Thin adapter exposing the extractor through a GET/POST contract.
    Both handlers return JSON-serializable dicts and never raise.
    """

    def __init__(self, extractor: PagedRecordExtractor):
        self._extractor = extractor

    @classmethod
    def for_search(cls, search: RecordSearch, log: Optional[logging.Logger] = None) -> "VendorListEndpoint":
        return cls(PagedRecordExtractor(search, log=log))

    def get(self) -> dict:
        """All active vendors, up to the 1000 row cap."""
        return self._extractor.fetch_all().to_payload()

    def post(self, body: Optional[dict] = None) -> dict:
        """One page of active vendors; body may carry startIndex and pageSize."""
        logger.debug("Request: %s", json.dumps(body, default=str))
        request = PageRequest.from_body(body if isinstance(body, dict) else None)
        return self._extractor.fetch_page(request).to_payload()
