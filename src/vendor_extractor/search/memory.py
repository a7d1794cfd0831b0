"""In-memory record search over a list of raw rows."""

import json
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from vendor_extractor.constants import MAX_PAGE_SIZE, VENDOR_RECORD_TYPE
from vendor_extractor.models.query import QuerySpec, SearchFilter
from vendor_extractor.models.raw import RawRecord
from vendor_extractor.search.base import RecordSearch, SearchResultSet


def _coerce(value: Any) -> str:
    """Comparable text form; checkbox booleans become T/F like the host."""
    if isinstance(value, bool):
        return "T" if value else "F"
    if value is None:
        return ""
    return str(value)


def _as_list(value: Any) -> list[str]:
    if isinstance(value, (list, tuple, set)):
        return [_coerce(v) for v in value]
    return [_coerce(value)]


OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    "is": lambda actual, expected: _coerce(actual) == _coerce(expected),
    "isnot": lambda actual, expected: _coerce(actual) != _coerce(expected),
    "anyof": lambda actual, expected: _coerce(actual) in _as_list(expected),
    "noneof": lambda actual, expected: _coerce(actual) not in _as_list(expected),
    "contains": lambda actual, expected: _coerce(expected).lower() in _coerce(actual).lower(),
    "startswith": lambda actual, expected: _coerce(actual).lower().startswith(_coerce(expected).lower()),
}


class InMemoryResultSet(SearchResultSet):
    """Filtered, column-projected rows held in memory."""

    def __init__(self, rows: list[RawRecord]):
        self._rows = rows

    def __len__(self) -> int:
        return len(self._rows)

    def get_range(self, start: int, end: int) -> list[RawRecord]:
        if start < 0:
            raise ValueError(f"Range start must be non-negative, got {start}")
        if end < start:
            raise ValueError(f"Range end {end} is before start {start}")
        if end - start > MAX_PAGE_SIZE:
            raise ValueError(f"Range size {end - start} exceeds maximum of {MAX_PAGE_SIZE}")
        return self._rows[start:end]


class InMemoryRecordSearch(RecordSearch):
    """
    Reference search backend.
    Holds rows per record type and evaluates filters the way the host does
    for the supported operators.
    """

    def __init__(self, records: Optional[dict[str, list[RawRecord]]] = None):
        self._records: dict[str, list[RawRecord]] = {
            record_type: list(rows) for record_type, rows in (records or {}).items()
        }

    @classmethod
    def from_records(
        cls,
        rows: Iterable[RawRecord | dict],
        record_type: str = VENDOR_RECORD_TYPE,
    ) -> "InMemoryRecordSearch":
        """Build from RawRecords or dicts ({data, text} or flat column values)."""
        return cls({record_type: [cls._to_raw(r) for r in rows]})

    @classmethod
    def from_json(cls, path: str | Path, record_type: str = VENDOR_RECORD_TYPE) -> "InMemoryRecordSearch":
        """Load rows from a JSON file holding a list or {"records": [...]}."""
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        if isinstance(payload, dict):
            payload = payload.get("records") or []
        return cls.from_records(payload, record_type=record_type)

    @staticmethod
    def _to_raw(row: RawRecord | dict) -> RawRecord:
        if isinstance(row, RawRecord):
            return row
        if "data" in row or "text" in row:
            return RawRecord.model_validate(row)
        return RawRecord(data=dict(row))

    def run(self, query: QuerySpec) -> InMemoryResultSet:
        rows = self._records.get(query.record_type)
        if rows is None:
            raise ValueError(
                f"Unknown record type: {query.record_type}. Available: {list(self._records.keys())}"
            )
        known_fields = {column for r in rows for column in r.data}
        for f in query.filters:
            if f.operator not in OPERATORS:
                raise ValueError(f"Unsupported filter operator: {f.operator}")
            if rows and f.field not in known_fields:
                raise ValueError(f"Unknown filter field: {f.field}")

        matched = [r for r in rows if self._matches(r, query.filters)]
        return InMemoryResultSet([self._project(r, query.columns) for r in matched])

    def _matches(self, row: RawRecord, filters: tuple[SearchFilter, ...]) -> bool:
        for f in filters:
            if not OPERATORS[f.operator](row.data.get(f.field), f.value):
                return False
        return True

    def _project(self, row: RawRecord, columns: tuple[str, ...]) -> RawRecord:
        if not columns:
            return row
        return RawRecord(
            data={c: row.data.get(c) for c in columns},
            text={c: row.text[c] for c in columns if c in row.text},
        )
