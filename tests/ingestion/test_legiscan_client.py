"""Tests for billsync.ingestion.legiscan."""

import asyncio
from unittest.mock import patch

import httpx
import pytest

from billsync.ingestion.legiscan import LegiScanClient, LegiScanError


def _client(backend, mock_client):
    return LegiScanClient(api_key="test-key", client=mock_client(backend), request_delay=0)


class TestLegiScanClient:
    def test_requires_api_key(self):
        with patch("billsync.ingestion.legiscan.settings") as mock_settings:
            mock_settings.LEGISCAN_API_KEY = None
            with pytest.raises(ValueError, match="LEGISCAN_API_KEY"):
                LegiScanClient()

    def test_get_bill(self, make_legiscan, mock_client, bill_payload):
        backend = make_legiscan({("MN", "HF1099"): bill_payload()})

        async def run():
            async with _client(backend, mock_client) as client:
                return await client.get_bill("MN", "HF1099", year="2024")

        bill = asyncio.run(run())

        assert bill.bill_number == "HF1099"
        assert backend.requests[0] == {
            "key": "test-key",
            "op": "getBill",
            "state": "MN",
            "bill": "HF1099",
            "year": "2024",
        }

    def test_get_bill_omits_missing_year(self, make_legiscan, mock_client, bill_payload):
        backend = make_legiscan({("MN", "HF1099"): bill_payload()})

        async def run():
            async with _client(backend, mock_client) as client:
                return await client.get_bill("MN", "HF1099")

        asyncio.run(run())

        assert "year" not in backend.requests[0]

    def test_error_status_raises_with_alert_message(self, make_legiscan, mock_client):
        backend = make_legiscan()

        async def run():
            async with _client(backend, mock_client) as client:
                return await client.get_bill("MN", "HF1")

        with pytest.raises(LegiScanError, match="Unknown bill id"):
            asyncio.run(run())

    def test_ok_without_bill_raises(self, mock_client):
        class EmptyOk:
            def handler(self, request):
                return httpx.Response(200, json={"status": "OK"})

        async def run():
            async with _client(EmptyOk(), mock_client) as client:
                return await client.get_bill("MN", "HF1")

        with pytest.raises(LegiScanError, match="HF1 not found"):
            asyncio.run(run())

    def test_http_error_propagates(self, mock_client):
        class Down:
            def handler(self, request):
                return httpx.Response(503)

        async def run():
            async with _client(Down(), mock_client) as client:
                return await client.get_bill("MN", "HF1")

        with pytest.raises(httpx.HTTPStatusError):
            asyncio.run(run())


class TestFindBill:
    def test_federal_number_falls_back_to_alternate_prefix(self, make_legiscan, mock_client, bill_payload):
        backend = make_legiscan({("US", "HR12"): bill_payload(bill_number="HR12")})

        async def run():
            async with _client(backend, mock_client) as client:
                return await client.find_bill("US", "HF12")

        bill = asyncio.run(run())

        assert bill.bill_number == "HR12"
        assert [r["bill"] for r in backend.requests] == ["HF12", "HR12"]

    def test_stops_at_first_match(self, make_legiscan, mock_client, bill_payload):
        backend = make_legiscan({
            ("US", "HF12"): bill_payload(bill_number="HF12"),
            ("US", "HR12"): bill_payload(bill_number="HR12"),
        })

        async def run():
            async with _client(backend, mock_client) as client:
                return await client.find_bill("US", "HF12")

        assert asyncio.run(run()).bill_number == "HF12"
        assert len(backend.requests) == 1

    def test_raises_when_no_candidate_matches(self, make_legiscan, mock_client):
        backend = make_legiscan()

        async def run():
            async with _client(backend, mock_client) as client:
                return await client.find_bill("US", "SF3")

        with pytest.raises(LegiScanError, match="SF3"):
            asyncio.run(run())
        assert [r["bill"] for r in backend.requests] == ["SF3", "S3", "SB3"]


class TestListOperations:
    def test_master_list_drops_session_entry(self, mock_client):
        class Master:
            def handler(self, request):
                return httpx.Response(200, json={"status": "OK", "masterlist": {
                    "session": {"session_id": 1},
                    "0": {"bill_id": 1, "number": "HF1"},
                    "1": {"bill_id": 2, "number": "HF2"},
                }})

        async def run():
            async with _client(Master(), mock_client) as client:
                return await client.get_master_list("MN")

        masterlist = asyncio.run(run())

        assert set(masterlist) == {"0", "1"}

    def test_search_handles_object_results(self, mock_client):
        class Search:
            def handler(self, request):
                return httpx.Response(200, json={"status": "OK", "searchresult": {
                    "summary": {"count": 2},
                    "0": {"bill_number": "HF1"},
                    "1": {"bill_number": "SF2"},
                }})

        async def run():
            async with _client(Search(), mock_client) as client:
                return await client.search("MN", "education")

        assert [r["bill_number"] for r in asyncio.run(run())] == ["HF1", "SF2"]
