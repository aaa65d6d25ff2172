"""Tests for billsync.ingestion.diagnostics."""

import asyncio
from urllib.parse import parse_qs, urlparse

import httpx

from billsync.ingestion.diagnostics import check_legiscan, check_webflow
from billsync.ingestion.legiscan import LegiScanClient
from billsync.ingestion.webflow import WebflowClient


class LegiScanService:
    """Answers getMasterList, getBill and getSearch."""

    def __init__(self, bill, fail_search=False):
        self.bill = bill
        self.fail_search = fail_search
        self.ops = []

    def handler(self, request):
        params = {k: v[0] for k, v in parse_qs(urlparse(str(request.url)).query).items()}
        op = params["op"]
        self.ops.append(op)
        if op == "getMasterList":
            return httpx.Response(200, json={"status": "OK", "masterlist": {
                "session": {"session_id": 1},
                "0": {"bill_id": 1, "number": "HF1099", "status": 1, "last_action": "Referred"},
            }})
        if op == "getBill":
            return httpx.Response(200, json={"status": "OK", "bill": self.bill})
        if self.fail_search:
            return httpx.Response(500)
        return httpx.Response(200, json={"status": "OK", "searchresult": {
            "summary": {"count": 1},
            "0": {"bill_number": "HF1099", "title": "Education"},
        }})


class WebflowService:
    def __init__(self, site_status=200):
        self.site_status = site_status

    def handler(self, request):
        if "/sites/" in request.url.path:
            if self.site_status != 200:
                return httpx.Response(self.site_status, json={"message": "Not authorized"})
            return httpx.Response(200, json={"displayName": "Bill Tracker"})
        return httpx.Response(200, json={"displayName": "Bills", "fields": [{"slug": "name"}, {"slug": "slug"}]})


class TestCheckLegiScan:
    def test_all_checks_pass(self, mock_client, bill_payload):
        service = LegiScanService(bill_payload())
        client = LegiScanClient(api_key="k", client=mock_client(service), request_delay=0)

        report = asyncio.run(check_legiscan(client, "MN"))

        assert service.ops == ["getMasterList", "getBill", "getSearch"]
        assert report.success
        assert report.tests[0].message == "Found 1 bills"
        assert report.tests[1].data["number"] == "HF1099"

    def test_failed_check_is_recorded(self, mock_client, bill_payload):
        service = LegiScanService(bill_payload(), fail_search=True)
        client = LegiScanClient(api_key="k", client=mock_client(service), request_delay=0)

        report = asyncio.run(check_legiscan(client, "MN"))

        assert report.passed == 2
        assert report.failed == 1
        assert not report.success
        assert report.tests[-1].test == "getSearch (education)"


class TestCheckWebflow:
    def test_site_and_collection(self, mock_client):
        client = WebflowClient(api_token="t", collection_id="col-1", client=mock_client(WebflowService()))

        report = asyncio.run(check_webflow(client, "site-1"))

        assert report.success
        assert report.tests[0].message == "Connected to Bill Tracker"
        assert report.tests[1].data == ["name", "slug"]

    def test_missing_site_id_fails_that_check_only(self, mock_client):
        client = WebflowClient(api_token="t", collection_id="col-1", client=mock_client(WebflowService()))

        report = asyncio.run(check_webflow(client, None))

        assert [t.success for t in report.tests] == [False, True]

    def test_rejected_token(self, mock_client):
        client = WebflowClient(api_token="t", collection_id="col-1", client=mock_client(WebflowService(site_status=401)))

        report = asyncio.run(check_webflow(client, "site-1"))

        assert "Not authorized" in report.tests[0].message
