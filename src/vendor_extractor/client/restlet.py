"""HTTP client for a deployed vendor list endpoint.

Walks the endpoint page by page the same way the endpoint's POST contract
describes: send {startIndex, pageSize}, keep going while hasMore is true.
Authentication is left to the caller through a preconfigured httpx client.
"""

import logging
import time
from typing import Callable, Optional

import httpx

from vendor_extractor.constants import MAX_PAGE_SIZE
from vendor_extractor.models.result import clamp_page_size
from vendor_extractor.models.vendor import VendorRecord

logger = logging.getLogger(__name__)


class VendorListError(RuntimeError):
    """The endpoint answered with success=false."""


class VendorListClient:
    """
    Client for the vendor list endpoint.
    Pages are fetched sequentially with a fixed delay between them.
    """

    DEFAULT_HEADERS = {
        "User-Agent": "vendor-extractor/0.1",
        "Content-Type": "application/json",
        "Accept": "application/json",
    }

    def __init__(
        self,
        url: str,
        client: Optional[httpx.Client] = None,
        page_size: int = MAX_PAGE_SIZE,
        page_delay: float = 1.0,
        timeout: float = 30.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            url: Endpoint URL accepting POST {startIndex, pageSize}
            client: Optional httpx client (carry auth headers or auth flow here)
            page_size: Rows per page, clamped to 1..1000
            page_delay: Seconds to wait between pages
            timeout: Request timeout when no client is given
            sleep: Delay function, replaceable in tests
        """
        self.url = url
        self.page_size = clamp_page_size(page_size)
        self.page_delay = page_delay
        self._sleep = sleep
        self._client = client or httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            headers=self.DEFAULT_HEADERS,
        )

    def fetch_page(self, start_index: int, page_size: int) -> dict:
        """POST one page request and return the decoded payload."""
        resp = self._client.post(
            self.url,
            json={"startIndex": start_index, "pageSize": page_size},
            headers={"Content-Type": "application/json", "Accept": "application/json"},
        )
        resp.raise_for_status()
        payload = resp.json()
        if not isinstance(payload, dict):
            raise VendorListError(f"Unexpected response payload: {payload!r}")
        return payload

    def test_connection(self) -> bool:
        """Fetch a single-row page; True when the endpoint reports success."""
        try:
            payload = self.fetch_page(0, 1)
        except (httpx.HTTPError, ValueError, VendorListError) as e:
            logger.warning("Connection test failed for %s: %s", self.url, e)
            return False
        if not payload.get("success"):
            logger.warning("Connection test returned success=false: %s", payload.get("error", "Unknown error"))
            return False
        return True

    def fetch_all_vendors(self, category: Optional[str] = None) -> list[VendorRecord]:
        """
        Fetch every page until hasMore is false.
        category: optional exact category label to keep (applied client-side)
        """
        vendors: list[VendorRecord] = []
        start = 0

        while True:
            logger.info("Extracting vendors %d to %d", start + 1, start + self.page_size)
            payload = self.fetch_page(start, self.page_size)
            if not payload.get("success"):
                raise VendorListError(
                    f"Vendor page failed (start={start}): {payload.get('error', 'Unknown error')}"
                )

            page = [VendorRecord.model_validate(v) for v in payload.get("vendors") or []]
            if not page:
                break
            vendors.extend(page)
            logger.info("Extracted %d vendors (total: %d)", len(page), len(vendors))

            if not payload.get("hasMore"):
                break
            start += self.page_size
            if self.page_delay > 0:
                self._sleep(self.page_delay)

        if category is not None:
            total = len(vendors)
            vendors = [v for v in vendors if v.category_label == category]
            logger.info("Filtered to %d vendors in category %r (excluded %d)", len(vendors), category, total - len(vendors))
        return vendors

    def close(self) -> None:
        self._client.close()
