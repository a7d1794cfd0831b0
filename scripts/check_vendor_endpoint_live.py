#!/usr/bin/env python3
"""Quick live check of a deployed vendor list endpoint.

Run:
  poetry run python scripts/check_vendor_endpoint_live.py                 # URL from VENDOR_EXTRACTOR_URL
  poetry run python scripts/check_vendor_endpoint_live.py https://...     # explicit URL
"""

import sys

from vendor_extractor.client import VendorListClient
from vendor_extractor.config import ExtractorSettings


def main() -> None:
    settings = ExtractorSettings.from_env()
    url = sys.argv[1] if len(sys.argv) > 1 else settings.url
    if not url:
        print("Pass an endpoint URL or set VENDOR_EXTRACTOR_URL.")
        sys.exit(2)

    client = VendorListClient(url, page_size=5, timeout=settings.timeout)
    print(f"Checking {url}...")
    if not client.test_connection():
        print("\n⚠️ Connection test failed. Check logs for HTTP status or error payload.")
        sys.exit(1)

    payload = client.fetch_page(0, 5)
    vendors = payload.get("vendors") or []
    print(f"Got {len(vendors)} vendors (hasMore={payload.get('hasMore')})")
    for i, v in enumerate(vendors, 1):
        print(f"  {i}. {v.get('displayName', 'N/A')} (id={v.get('id', 'N/A')}, subsidiary={v.get('subsidiary')})")
    print("\n✅ Endpoint responded with the paged contract.")
    client.close()


if __name__ == "__main__":
    main()
