"""Pytest fixtures for vendor-extractor tests."""

from datetime import datetime, timezone

import pytest

from vendor_extractor.extractor import PagedRecordExtractor
from vendor_extractor.models.raw import RawRecord
from vendor_extractor.search import InMemoryRecordSearch

FIXED_NOW = datetime(2026, 3, 9, 14, 0, 0, 123000, tzinfo=timezone.utc)


def make_vendor_row(
    internal_id: int | str,
    *,
    entity_id: str | None = None,
    company_name: str | None = None,
    inactive: bool = False,
    subsidiary: tuple[str, str] | None = None,
    category: tuple[str, str] | None = None,
) -> RawRecord:
    """Build a raw vendor row. subsidiary/category are (id, label) pairs."""
    data = {
        "internalid": str(internal_id),
        "entityid": entity_id if entity_id is not None else f"V{internal_id}",
        "companyname": company_name if company_name is not None else f"Vendor Co {internal_id}",
        "isinactive": inactive,
        "subsidiary": subsidiary[0] if subsidiary else "",
        "category": category[0] if category else "",
    }
    text = {}
    if subsidiary:
        text["subsidiary"] = subsidiary[1]
    if category:
        text["category"] = category[1]
    return RawRecord(data=data, text=text)


@pytest.fixture
def sample_vendor_row() -> RawRecord:
    """Fully populated raw vendor row."""
    return make_vendor_row(
        "1042",
        entity_id="ACME-01",
        company_name="Acme Textiles Ltd",
        subsidiary=("3", "Opuzen US"),
        category=("7", "Fabric Supplier"),
    )


@pytest.fixture
def active_rows_1500() -> list[RawRecord]:
    """1500 active vendors."""
    return [make_vendor_row(i) for i in range(1, 1501)]


@pytest.fixture
def mixed_rows() -> list[RawRecord]:
    """Three active and two inactive vendors, interleaved."""
    return [
        make_vendor_row(1),
        make_vendor_row(2, inactive=True),
        make_vendor_row(3),
        make_vendor_row(4, inactive=True),
        make_vendor_row(5),
    ]


@pytest.fixture
def make_extractor():
    """Factory: extractor over in-memory rows with a fixed clock."""

    def _make(rows: list[RawRecord]) -> PagedRecordExtractor:
        return PagedRecordExtractor(
            InMemoryRecordSearch.from_records(rows),
            clock=lambda: FIXED_NOW,
        )

    return _make
