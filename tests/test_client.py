"""Tests for VendorListClient with a mocked transport."""

import json

import httpx
import pytest

from vendor_extractor.client import VendorListClient, VendorListError
from vendor_extractor.endpoints import VendorListEndpoint
from vendor_extractor.search import InMemoryRecordSearch

from conftest import make_vendor_row

URL = "https://example.test/app/site/hosting/restlet.nl?script=1762&deploy=2"


def _endpoint_transport(endpoint: VendorListEndpoint, calls: list) -> httpx.MockTransport:
    """Transport that answers POSTs with the in-process endpoint."""

    def handler(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        calls.append(body)
        return httpx.Response(200, json=endpoint.post(body))

    return httpx.MockTransport(handler)


def _client(transport: httpx.MockTransport, **kwargs) -> VendorListClient:
    sleeps: list[float] = []
    client = VendorListClient(
        URL,
        client=httpx.Client(transport=transport),
        sleep=sleeps.append,
        **kwargs,
    )
    client.sleeps = sleeps
    return client


@pytest.fixture
def rows_with_categories():
    return [
        make_vendor_row(i, category=("7", "Fabric Supplier") if i % 2 else ("9", "Freight"))
        for i in range(1, 6)
    ]


class TestFetchAllVendors:
    """Tests for fetch_all_vendors paging."""

    def test_walks_all_pages(self, rows_with_categories) -> None:
        """Pages are concatenated until hasMore is false."""
        endpoint = VendorListEndpoint.for_search(InMemoryRecordSearch.from_records(rows_with_categories))
        calls: list = []
        client = _client(_endpoint_transport(endpoint, calls), page_size=2, page_delay=0.5)

        vendors = client.fetch_all_vendors()

        assert [v.id for v in vendors] == ["1", "2", "3", "4", "5"]
        assert calls == [
            {"startIndex": 0, "pageSize": 2},
            {"startIndex": 2, "pageSize": 2},
            {"startIndex": 4, "pageSize": 2},
        ]
        assert client.sleeps == [0.5, 0.5]

    def test_category_filter(self, rows_with_categories) -> None:
        """Category is applied client-side on the label."""
        endpoint = VendorListEndpoint.for_search(InMemoryRecordSearch.from_records(rows_with_categories))
        client = _client(_endpoint_transport(endpoint, []), page_size=1000)
        vendors = client.fetch_all_vendors(category="Fabric Supplier")
        assert [v.id for v in vendors] == ["1", "3", "5"]
        assert client.sleeps == []

    def test_empty_first_page(self) -> None:
        endpoint = VendorListEndpoint.for_search(InMemoryRecordSearch.from_records([]))
        client = _client(_endpoint_transport(endpoint, []))
        assert client.fetch_all_vendors() == []

    def test_failure_payload_raises(self) -> None:
        """success=false from the endpoint is an error."""
        transport = httpx.MockTransport(
            lambda request: httpx.Response(
                200, json={"success": False, "error": "SSS_USAGE_LIMIT_EXCEEDED", "message": "Failed to extract vendor page"}
            )
        )
        with pytest.raises(VendorListError, match="SSS_USAGE_LIMIT_EXCEEDED"):
            _client(transport).fetch_all_vendors()

    def test_http_error_raises(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(500, text="boom"))
        with pytest.raises(httpx.HTTPStatusError):
            _client(transport).fetch_all_vendors()

    def test_page_size_clamped(self) -> None:
        client = _client(httpx.MockTransport(lambda request: httpx.Response(200, json={})), page_size=5000)
        assert client.page_size == 1000


class TestTestConnection:
    """Tests for the connection preflight."""

    def test_success(self, rows_with_categories) -> None:
        endpoint = VendorListEndpoint.for_search(InMemoryRecordSearch.from_records(rows_with_categories))
        calls: list = []
        assert _client(_endpoint_transport(endpoint, calls)).test_connection() is True
        assert calls == [{"startIndex": 0, "pageSize": 1}]

    def test_http_failure(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(403, json={"error": "INVALID_LOGIN"}))
        assert _client(transport).test_connection() is False

    def test_non_json_response(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>login</html>"))
        assert _client(transport).test_connection() is False

    def test_reported_failure(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"success": False, "error": "x"}))
        assert _client(transport).test_connection() is False
