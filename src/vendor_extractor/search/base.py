"""Record search port: the host's query mechanism as seen by the extractor."""

from abc import ABC, abstractmethod

from vendor_extractor.models.query import QuerySpec
from vendor_extractor.models.raw import RawRecord


class SearchResultSet(ABC):
    """An executed search whose rows are retrieved by index range."""

    @abstractmethod
    def get_range(self, start: int, end: int) -> list[RawRecord]:
        """
        Return rows [start, end). Fewer rows (or none) past the end of the
        result set. Implementations may raise for invalid windows.
        """
        pass


class RecordSearch(ABC):
    """
    Standard interface for record search backends.
    Backends build and run a search from a QuerySpec.
    """

    @abstractmethod
    def run(self, query: QuerySpec) -> SearchResultSet:
        """Execute the query; raise if it cannot be constructed or run."""
        pass
