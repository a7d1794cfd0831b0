"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(prog="vendor-extractor", description="Paged vendor list extraction")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # extract
    extract_parser = subparsers.add_parser("extract", help="Run the vendor list endpoint over a record dump")
    extract_parser.add_argument(
        "--records",
        type=Path,
        required=True,
        help="JSON file of raw vendor rows (list or {\"records\": [...]})",
    )
    extract_parser.add_argument(
        "--start-index",
        type=int,
        default=None,
        help="Page start (switches to the paged POST contract)",
    )
    extract_parser.add_argument(
        "--page-size",
        type=int,
        default=None,
        help="Page size, max 1000 (switches to the paged POST contract)",
    )
    extract_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write response JSON to file (default: stdout)",
    )

    # pull
    pull_parser = subparsers.add_parser("pull", help="Page through a deployed vendor list endpoint")
    pull_parser.add_argument(
        "--url",
        type=str,
        default=None,
        help="Endpoint URL (default: VENDOR_EXTRACTOR_URL)",
    )
    pull_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings YAML (default: environment variables)",
    )
    pull_parser.add_argument(
        "--category",
        type=str,
        default=None,
        help="Keep only vendors with this category label",
    )
    pull_parser.add_argument(
        "--output",
        type=Path,
        default=Path("vendors.json"),
        help="Export document path (default: vendors.json)",
    )
    pull_parser.add_argument(
        "--csv",
        type=Path,
        default=None,
        help="Also write vendors as CSV",
    )

    # convert
    convert_parser = subparsers.add_parser("convert", help="Convert a vendor JSON export to CSV")
    convert_parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Export document or endpoint response JSON",
    )
    convert_parser.add_argument(
        "--output",
        type=Path,
        required=True,
        help="CSV output path",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "extract":
        _run_extract(args)
    elif args.command == "pull":
        _run_pull(args)
    elif args.command == "convert":
        _run_convert(args)
    else:
        parser.print_help()


def _run_extract(args: argparse.Namespace) -> None:
    """Run extract command."""
    from vendor_extractor.endpoints import VendorListEndpoint
    from vendor_extractor.search import InMemoryRecordSearch

    try:
        search = InMemoryRecordSearch.from_json(args.records)
    except (OSError, ValueError) as e:
        raise SystemExit(f"Could not load records from {args.records}: {e}")

    endpoint = VendorListEndpoint.for_search(search)
    if args.start_index is None and args.page_size is None:
        payload = endpoint.get()
    else:
        body = {}
        if args.start_index is not None:
            body["startIndex"] = args.start_index
        if args.page_size is not None:
            body["pageSize"] = args.page_size
        payload = endpoint.post(body)

    output = json.dumps(payload, indent=2)
    if args.output:
        args.output.write_text(output, encoding="utf-8")
        count = payload.get("totalVendors", payload.get("returnedCount", 0))
        print(f"Wrote {count} vendors to {args.output}")
    else:
        print(output)

    if not payload.get("success"):
        raise SystemExit(1)


def _run_pull(args: argparse.Namespace) -> None:
    """Run pull command."""
    import httpx

    from vendor_extractor.client import VendorListClient, VendorListError
    from vendor_extractor.config import ExtractorSettings
    from vendor_extractor.export import build_export_document, write_csv, write_json

    settings = ExtractorSettings.from_yaml(args.config) if args.config else ExtractorSettings.from_env()
    settings = settings.merged(url=args.url, category=args.category)
    if not settings.url:
        raise SystemExit("No endpoint URL. Pass --url or set VENDOR_EXTRACTOR_URL.")

    client = VendorListClient(
        settings.url,
        page_size=settings.page_size,
        page_delay=settings.page_delay,
        timeout=settings.timeout,
    )
    try:
        if not client.test_connection():
            raise SystemExit(f"Connection test failed for {settings.url}")
        vendors = client.fetch_all_vendors(category=settings.category)
    except (httpx.HTTPError, VendorListError) as e:
        raise SystemExit(f"Vendor extraction failed: {e}")
    finally:
        client.close()

    document = build_export_document(vendors, source=settings.url)
    write_json(args.output, document)
    print(f"Wrote {len(vendors)} vendors to {args.output}")
    if args.csv:
        write_csv(args.csv, vendors)
        print(f"Wrote CSV to {args.csv}")


def _run_convert(args: argparse.Namespace) -> None:
    """Run convert command."""
    from vendor_extractor.export import load_vendors, write_csv

    vendors = load_vendors(args.input)
    if not vendors:
        print(f"No vendors found in {args.input}", file=sys.stderr)
    write_csv(args.output, vendors)
    print(f"Wrote {len(vendors)} vendors to {args.output}")


if __name__ == "__main__":
    main()
