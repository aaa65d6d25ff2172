"""
Connectivity checks for LegiScan and Webflow.

Each check records a pass/fail entry instead of raising, so one report
shows everything that is wrong with the configuration.
"""
import logging
from typing import Optional

import httpx

from billsync.ingestion.legiscan import LegiScanClient, LegiScanError
from billsync.ingestion.webflow import WebflowClient, WebflowError
from billsync.models.lookup import DiagnosticsReport

logger = logging.getLogger(__name__)

CHECK_ERRORS = (LegiScanError, WebflowError, httpx.HTTPError)


async def check_legiscan(
    client: LegiScanClient,
    state: str,
    report: Optional[DiagnosticsReport] = None,
    search_query: str = "education",
) -> DiagnosticsReport:
    """
    Exercise getMasterList, getBill, and getSearch.

    The getBill check only runs if the master list came back.
    """
    report = report or DiagnosticsReport()

    first_bill_number = None
    try:
        masterlist = await client.get_master_list(state)
        sample = [
            {
                "id": b.get("bill_id"),
                "number": b.get("number"),
                "status": b.get("status"),
                "last_action": b.get("last_action"),
            }
            for b in list(masterlist.values())[:3]
        ]
        report.add(f"getMasterList ({state})", True, f"Found {len(masterlist)} bills", sample)
        if sample:
            first_bill_number = sample[0]["number"]
    except CHECK_ERRORS as e:
        report.add(f"getMasterList ({state})", False, f"Request failed: {e}")

    if first_bill_number:
        try:
            bill = await client.get_bill(state, first_bill_number)
            report.add("getBill", True, "Retrieved bill details", {
                "number": bill.bill_number,
                "title": bill.title[:100],
                "status": bill.status_text,
                "sponsors": len(bill.sponsors),
                "history": len(bill.history),
            })
        except CHECK_ERRORS as e:
            report.add("getBill", False, f"Request failed: {e}")

    try:
        results = await client.search(state, search_query)
        report.add(
            f"getSearch ({search_query})",
            True,
            f'Found {len(results)} bills matching "{search_query}"',
            [{"bill_number": r.get("bill_number"), "title": (r.get("title") or "")[:80]} for r in results[:3]],
        )
    except CHECK_ERRORS as e:
        report.add(f"getSearch ({search_query})", False, f"Request failed: {e}")

    return report


async def check_webflow(
    client: WebflowClient,
    site_id: Optional[str],
    report: Optional[DiagnosticsReport] = None,
) -> DiagnosticsReport:
    """Fetch the site (if configured) and the bills collection schema."""
    report = report or DiagnosticsReport()

    if site_id:
        try:
            site = await client.get_site(site_id)
            report.add("Webflow site", True, f"Connected to {site.get('displayName') or site_id}")
        except CHECK_ERRORS as e:
            report.add("Webflow site", False, f"Request failed: {e}")
    else:
        report.add("Webflow site", False, "WEBFLOW_SITE_ID not set")

    try:
        collection = await client.get_collection()
        fields = [f.get("slug") for f in collection.get("fields", [])]
        report.add("Webflow collection", True, f"{collection.get('displayName', client.collection_id)}: {len(fields)} fields", fields)
    except CHECK_ERRORS as e:
        report.add("Webflow collection", False, f"Request failed: {e}")

    return report
