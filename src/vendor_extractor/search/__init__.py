"""Record search backends."""

from vendor_extractor.search.base import RecordSearch, SearchResultSet
from vendor_extractor.search.memory import InMemoryRecordSearch, InMemoryResultSet

__all__ = ["InMemoryRecordSearch", "InMemoryResultSet", "RecordSearch", "SearchResultSet"]
