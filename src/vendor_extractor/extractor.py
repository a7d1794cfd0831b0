"""Paged extraction of active vendor records from a record search.

Each call is a stateless transform:
QuerySpec -> result set -> mapped vendors -> response envelope.
Errors raised by the search are caught at the call boundary and turned into a
failure result; the existence probe for the next page is best-effort.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Optional

from vendor_extractor.constants import (
    ACTIVE_ONLY_FILTER,
    CATEGORY,
    COMPANY_NAME,
    ENTITY_ID,
    INTERNAL_ID,
    IS_INACTIVE,
    LIST_FAILURE_MESSAGE,
    LIST_SUCCESS_MESSAGE,
    MAX_PAGE_SIZE,
    PAGE_FAILURE_MESSAGE,
    PAGE_SUCCESS_MESSAGE,
    SUBSIDIARY,
    VENDOR_COLUMNS,
    VENDOR_RECORD_TYPE,
)
from vendor_extractor.models.query import QuerySpec, SearchFilter
from vendor_extractor.models.raw import RawRecord
from vendor_extractor.models.result import ExtractionResult, PageRequest, clamp_page_size
from vendor_extractor.models.vendor import VendorRecord
from vendor_extractor.search.base import RecordSearch, SearchResultSet

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"t", "true", "y", "yes", "1"}


def _text(value: Any) -> str:
    """Stripped string form; None becomes empty."""
    if value is None:
        return ""
    return str(value).strip()


def _optional_text(value: Any) -> Optional[str]:
    return _text(value) or None


def _as_bool(value: Any) -> bool:
    """Host checkbox value (T/F, true/false, bool) as bool."""
    if isinstance(value, bool):
        return value
    return _text(value).lower() in _TRUE_VALUES


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PagedRecordExtractor:
    """
    Extracts active vendors from a RecordSearch, all at once or by page.
    The logger and clock are injectable so the core runs without the host.
    """

    def __init__(
        self,
        search: RecordSearch,
        log: Optional[logging.Logger] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._search = search
        self._log = log or logger
        self._clock = clock or _utc_now

    def build_query(
        self,
        filter_overrides: Optional[Iterable[SearchFilter | tuple | list]] = None,
    ) -> QuerySpec:
        """
        Vendor query with the fixed column list.
        Filters default to active vendors only; overrides replace them.
        """
        raw_filters = [ACTIVE_ONLY_FILTER] if filter_overrides is None else list(filter_overrides)
        return QuerySpec(
            record_type=VENDOR_RECORD_TYPE,
            filters=tuple(SearchFilter.from_triple(f) for f in raw_filters),
            columns=VENDOR_COLUMNS,
        )

    def map_record(self, raw: RawRecord) -> VendorRecord:
        """Project a search row into a VendorRecord."""
        record_id = _text(raw.get_value(INTERNAL_ID))
        entity_code = _text(raw.get_value(ENTITY_ID))
        company_name = _text(raw.get_value(COMPANY_NAME))
        display_label = company_name or entity_code or f"Vendor {record_id}"

        return VendorRecord(
            id=record_id,
            entity_code=entity_code,
            company_name=company_name,
            display_label=display_label,
            is_inactive=_as_bool(raw.get_value(IS_INACTIVE)),
            subsidiary_label=_optional_text(raw.get_text(SUBSIDIARY)),
            subsidiary_id=_optional_text(raw.get_value(SUBSIDIARY)),
            category_label=_optional_text(raw.get_text(CATEGORY)),
            category_id=_optional_text(raw.get_value(CATEGORY)),
        )

    def try_probe_exists(self, result_set: SearchResultSet, start: int, end: int) -> bool:
        """True if [start, end) holds at least one row; False on any fault."""
        try:
            return len(result_set.get_range(start, end)) > 0
        except Exception as e:
            self._log.debug("Range probe [%d, %d) failed, treating as no more rows: %s", start, end, e)
            return False

    def _extract_window(self, start: int, size: int) -> tuple[list[VendorRecord], bool]:
        """Run the default query, map rows [start, start+size) and probe the next row."""
        result_set = self._search.run(self.build_query())
        rows = result_set.get_range(start, start + size)
        self._log.debug("Retrieved %d active vendors (start: %d)", len(rows), start)
        vendors = [self.map_record(r) for r in rows]
        has_more = self.try_probe_exists(result_set, start + size, start + size + 1)
        return vendors, has_more

    def fetch_all(self, cap: int = MAX_PAGE_SIZE) -> ExtractionResult:
        """Extract up to `cap` active vendors (at most 1000)."""
        cap = clamp_page_size(cap)
        self._log.debug("Extracting active vendors (cap: %d)", cap)
        try:
            vendors, has_more = self._extract_window(0, cap)
        except Exception as e:
            self._log.error("Error extracting vendors: %s", e)
            return ExtractionResult.failure(e, LIST_FAILURE_MESSAGE)

        self._log.info("Successfully extracted %d active vendors", len(vendors))
        return ExtractionResult(
            success=True,
            extracted_at=self._clock(),
            total_vendors=len(vendors),
            has_more=has_more,
            records=vendors,
            message=LIST_SUCCESS_MESSAGE,
        )

    def fetch_page(self, request: Optional[PageRequest] = None) -> ExtractionResult:
        """Extract one page of active vendors."""
        request = request or PageRequest()
        self._log.debug(
            "Extracting active vendors with pagination (start: %d, size: %d)",
            request.start_index,
            request.page_size,
        )
        try:
            vendors, has_more = self._extract_window(request.start_index, request.page_size)
        except Exception as e:
            self._log.error("Error extracting vendor page: %s", e)
            return ExtractionResult.failure(e, PAGE_FAILURE_MESSAGE)

        self._log.info("Successfully extracted %d active vendors (page)", len(vendors))
        return ExtractionResult(
            success=True,
            extracted_at=self._clock(),
            start_index=request.start_index,
            page_size=request.page_size,
            returned_count=len(vendors),
            has_more=has_more,
            records=vendors,
            message=PAGE_SUCCESS_MESSAGE,
        )
