"""Shared fixtures: LegiScan/Webflow payload factories and fake HTTP backends."""

import json
from urllib.parse import parse_qs, urlparse

import httpx
import pytest


@pytest.fixture
def bill_payload():
    """Factory for LegiScan getBill `bill` objects."""

    def _make(**overrides):
        bill = {
            "bill_id": 1001,
            "bill_number": "HF1099",
            "title": "Education; school finance provisions modified",
            "description": "A bill for an act relating to education.",
            "status": 1,
            "status_text": "Introduced",
            "status_date": "2024-02-12",
            "state_link": "https://www.revisor.mn.gov/bills/bill.php?b=House&f=HF1099",
            "url": "https://legiscan.com/MN/bill/HF1099/2023",
            "session": {"session_id": 2020, "year_start": 2023, "year_end": 2024, "session_name": "93rd Legislature"},
            "history": [
                {"date": "2024-02-12", "action": "Introduction and first reading", "chamber": "H"},
                {"date": "2024-02-12", "action": "Referred to Education Finance", "chamber": "H"},
            ],
            "texts": [
                {
                    "doc_id": 1,
                    "date": "2024-02-12",
                    "type": "Introduced",
                    "mime": "application/pdf",
                    "url": "https://legiscan.com/MN/text/HF1099/id/1",
                    "state_link": "https://www.revisor.mn.gov/bills/text.php?number=HF1099&format=pdf",
                },
            ],
            "sponsors": [
                {"people_id": 1, "name": "Jane Doe", "party": "D", "role_id": 1, "role": "Rep", "sponsor_type_id": 1, "district": "HD-012A"},
            ],
            "subjects": [{"subject_id": 1, "subject_name": "Education"}],
            "votes": [],
            "completed": 0,
        }
        bill.update(overrides)
        return bill

    return _make


@pytest.fixture
def webflow_item():
    """Factory for Webflow v2 collection items."""

    def _make(item_id="item-1", **field_data):
        return {
            "id": item_id,
            "isArchived": False,
            "isDraft": False,
            "fieldData": field_data,
        }

    return _make


class FakeLegiScan:
    """In-memory LegiScan backend keyed by (state, bill number)."""

    def __init__(self, bills=None):
        self.bills = dict(bills or {})
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        params = {k: v[0] for k, v in parse_qs(urlparse(str(request.url)).query).items()}
        self.requests.append(params)
        bill = self.bills.get((params.get("state"), params.get("bill")))
        if params.get("op") == "getBill" and bill is not None:
            return httpx.Response(200, json={"status": "OK", "bill": bill})
        return httpx.Response(200, json={"status": "ERROR", "alert": {"message": "Unknown bill id"}})


class FakeWebflow:
    """In-memory Webflow v2 backend for one collection."""

    def __init__(self, items=None, schema=None, fail_patch_for=(), fail_slug_for=(), fail_publish=False):
        self.items = list(items or [])
        self.schema = schema if schema is not None else {"fields": []}
        self.fail_patch_for = set(fail_patch_for)
        self.fail_slug_for = set(fail_slug_for)
        self.fail_publish = fail_publish
        self.patches = []
        self.published = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if request.method == "GET" and path.endswith("/items"):
            offset = int(request.url.params.get("offset", 0))
            limit = int(request.url.params.get("limit", 100))
            page = self.items[offset:offset + limit]
            return httpx.Response(200, json={
                "items": page,
                "pagination": {"limit": limit, "offset": offset, "total": len(self.items)},
            })
        if request.method == "GET" and "/collections/" in path:
            return httpx.Response(200, json=self.schema)
        if request.method == "PATCH":
            item_id = path.rsplit("/", 1)[-1]
            body = json.loads(request.content)
            field_data = body["fieldData"]
            if item_id in self.fail_patch_for and "slug" not in field_data:
                return httpx.Response(400, json={"message": "Validation Error"})
            if item_id in self.fail_slug_for and "slug" in field_data:
                return httpx.Response(409, json={"message": "Slug already in use"})
            self.patches.append((item_id, field_data))
            return httpx.Response(200, json={"id": item_id, "fieldData": field_data})
        if request.method == "POST" and path.endswith("/items/publish"):
            if self.fail_publish:
                return httpx.Response(429, json={"message": "Too many requests"})
            item_ids = json.loads(request.content)["itemIds"]
            self.published.append(item_ids)
            return httpx.Response(202, json={"publishedItemIds": item_ids})
        return httpx.Response(404, json={"message": "Not found"})


@pytest.fixture
def make_legiscan():
    return FakeLegiScan


@pytest.fixture
def make_webflow():
    return FakeWebflow


@pytest.fixture
def mock_client():
    """Build an httpx.AsyncClient that routes to a fake backend's handler."""

    def _make(backend):
        return httpx.AsyncClient(transport=httpx.MockTransport(backend.handler))

    return _make
