"""Tests for billsync.ingestion.bill_lookup."""

import asyncio
from datetime import date

import httpx
import pytest

from billsync.ingestion.bill_lookup import lookup_bills, parse_bill_numbers, to_details
from billsync.ingestion.legiscan import LegiScanClient
from billsync.models.legislation import SourceBill


class TestParseBillNumbers:
    def test_single_number(self):
        assert parse_bill_numbers(number="hf 12") == ["HF12"]

    def test_comma_separated(self):
        assert parse_bill_numbers(numbers="HF12, sf916,, ") == ["HF12", "SF916"]

    def test_single_wins_over_list(self):
        assert parse_bill_numbers(number="HF1", numbers="SF2,SF3") == ["HF1"]

    def test_requires_input(self):
        with pytest.raises(ValueError, match="number"):
            parse_bill_numbers()


class TestToDetails:
    def test_condenses_bill(self, bill_payload):
        history = [{"date": f"2024-01-{day:02d}", "action": f"Step {day}", "chamber": "H"} for day in range(1, 13)]
        bill = SourceBill.model_validate(bill_payload(
            history=history,
            votes=[{"roll_call_id": 7, "date": "2024-01-05", "desc": "Third reading", "yea": 70, "nay": 60, "nv": 4, "absent": 0, "url": "x"}],
        ))

        details = to_details(bill, "MN", "2024", today=date(2024, 3, 1))

        assert details.bill_number == "HF1099"
        assert details.status_label == "Active"
        assert details.best_link == "https://legiscan.com/MN/text/HF1099/id/1"
        assert len(details.history) == 10
        assert details.votes == [{"roll_call_id": 7, "date": "2024-01-05", "desc": "Third reading", "yea": 70, "nay": 60, "nv": 4, "absent": 0}]
        assert details.session["year_end"] == 2024
        assert details.sponsors[0]["name"] == "Jane Doe"


class TestLookupBills:
    def test_collects_bills_and_errors(self, make_legiscan, mock_client, bill_payload):
        backend = make_legiscan({("MN", "HF12"): bill_payload(bill_number="HF12")})
        client = LegiScanClient(api_key="k", client=mock_client(backend), request_delay=0)

        report = asyncio.run(lookup_bills(["hf 12", "SF9", " "], state="MN", legiscan=client, request_delay=0))

        assert report.requested == ["HF12", "SF9"]
        assert [b.bill_number for b in report.bills] == ["HF12"]
        assert report.errors[0].bill_number == "SF9"
        assert "Unknown bill id" in report.errors[0].error
        assert report.success

    def test_http_errors_are_reported_per_number(self, mock_client):
        class Down:
            def handler(self, request):
                return httpx.Response(502)

        client = LegiScanClient(api_key="k", client=mock_client(Down()), request_delay=0)

        report = asyncio.run(lookup_bills(["HF1", "HF2"], state="MN", legiscan=client, request_delay=0))

        assert report.bills == []
        assert [e.bill_number for e in report.errors] == ["HF1", "HF2"]
        assert not report.success

    def test_passes_year_filter(self, make_legiscan, mock_client, bill_payload):
        backend = make_legiscan({("MN", "HF1099"): bill_payload()})
        client = LegiScanClient(api_key="k", client=mock_client(backend), request_delay=0)

        asyncio.run(lookup_bills(["HF1099"], state="MN", year="2024", legiscan=client, request_delay=0))

        assert backend.requests[0]["year"] == "2024"
