"""Vendor export documents (JSON) and flat CSV files."""

import csv
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from vendor_extractor.models.vendor import VendorRecord

CSV_COLUMNS = [
    "id",
    "entityid",
    "companyname",
    "displayName",
    "isinactive",
    "subsidiary",
    "subsidiaryId",
    "category",
    "categoryId",
]


def build_export_document(
    vendors: list[VendorRecord],
    source: str,
    extracted_at: Optional[datetime] = None,
) -> dict:
    """Wrap vendors with extraction metadata and a field-coverage summary."""
    extracted_at = extracted_at or datetime.now(timezone.utc)
    inactive = sum(1 for v in vendors if v.is_inactive)
    return {
        "metadata": {
            "extractedAt": extracted_at.isoformat(),
            "source": source,
            "totalVendors": len(vendors),
            "fieldsIncluded": list(CSV_COLUMNS),
        },
        "summary": {
            "totalVendors": len(vendors),
            "activeVendors": len(vendors) - inactive,
            "inactiveVendors": inactive,
            "vendorsWithCompanyName": sum(1 for v in vendors if v.company_name),
            "vendorsWithEntityId": sum(1 for v in vendors if v.entity_code),
        },
        "vendors": [v.to_payload() for v in vendors],
    }


def write_json(path: Path, document: dict) -> Path:
    """Write a document as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document, indent=2, default=str), encoding="utf-8")
    return path


def _csv_cell(value) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def write_csv(path: Path, vendors: list[VendorRecord]) -> Path:
    """Write one row per vendor using the wire field names as header."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as fh:
        writer = csv.DictWriter(fh, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        for v in vendors:
            payload = v.to_payload()
            writer.writerow({c: _csv_cell(payload.get(c)) for c in CSV_COLUMNS})
    return path


def load_vendors(path: Path) -> list[VendorRecord]:
    """
    Read vendors from an export document, an endpoint payload
    ({"vendors": [...]}) or a bare list.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("vendors") or []
    return [VendorRecord.model_validate(v) for v in data]
