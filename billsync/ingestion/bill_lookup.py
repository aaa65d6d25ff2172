"""
Ad-hoc bill lookup.

Fetches one or more bills by number and returns a condensed report, with
a per-number error list instead of failing the whole lookup.

Usage:
    report = await lookup_bills(["HF12", "SF916"])
"""
import asyncio
import logging
from datetime import date
from typing import Iterable, List, Optional

import httpx

from billsync.config.constants import LEGISCAN_REQUEST_DELAY, LOOKUP_HISTORY_LIMIT
from billsync.config.settings import settings
from billsync.ingestion.legiscan import LegiScanClient, LegiScanError
from billsync.models.legislation import SourceBill
from billsync.models.lookup import BillDetails, LookupFailure, LookupReport
from billsync.reconcile.identifiers import clean_number
from billsync.reconcile.links import pick_best_text_url
from billsync.reconcile.status import classify_status

logger = logging.getLogger(__name__)


def parse_bill_numbers(number: Optional[str] = None, numbers: Optional[str] = None) -> List[str]:
    """
    Turn a single number or a comma-separated list into a clean list.

    Raises:
        ValueError: if neither is given
    """
    if number:
        raw = [number]
    elif numbers:
        raw = numbers.split(",")
    else:
        raise ValueError('Provide either "number" (single bill) or "numbers" (comma-separated list)')
    return [clean_number(n) for n in raw if clean_number(n)]


def to_details(
    bill: SourceBill,
    state: str,
    legislative_year: Optional[str] = None,
    today: Optional[date] = None,
) -> BillDetails:
    """Condense a SourceBill into the lookup report shape."""
    session = None
    if bill.session:
        session = {
            "session_id": bill.session.session_id,
            "year_start": bill.session.year_start,
            "year_end": bill.session.year_end,
            "name": bill.session.session_name,
        }

    label = classify_status(bill.status, bill.latest_action, state, legislative_year, today=today)

    return BillDetails(
        bill_id=bill.bill_id,
        bill_number=bill.bill_number,
        title=bill.title,
        description=bill.description,
        status=bill.status,
        status_text=bill.status_text,
        status_date=bill.status_date,
        status_label=label.value,
        session=session,
        sponsors=[
            {
                "people_id": s.people_id,
                "name": s.name,
                "party": s.party,
                "role": s.sponsor_type or s.role,
            }
            for s in bill.sponsors
        ],
        history=[
            {"date": e.date, "action": e.action, "chamber": e.chamber_text or e.chamber}
            for e in bill.history[:LOOKUP_HISTORY_LIMIT]
        ],
        subjects=bill.subjects,
        texts=[
            {"doc_id": t.doc_id, "type": t.type, "date": t.date, "mime": t.mime}
            for t in bill.texts
        ],
        votes=[
            {k: v.get(k) for k in ("roll_call_id", "date", "desc", "yea", "nay", "nv", "absent")}
            for v in bill.votes
        ],
        best_link=pick_best_text_url(bill),
        state_link=bill.state_link,
        completed=bill.completed,
    )


async def lookup_bills(
    bill_numbers: Iterable[str],
    state: Optional[str] = None,
    year: Optional[str] = None,
    legiscan: Optional[LegiScanClient] = None,
    request_delay: float = LEGISCAN_REQUEST_DELAY,
) -> LookupReport:
    """
    Look up each bill number in turn.

    Args:
        bill_numbers: Numbers like "HF12"
        state: LegiScan state code (default: configured state)
        year: Optional session year filter
        legiscan: Client to use; one is created from settings if omitted

    Returns:
        LookupReport with found bills and per-number errors
    """
    state = state or settings.STATE_JURISDICTION
    numbers = [n for n in (clean_number(n) for n in bill_numbers) if n]
    report = LookupReport(requested=numbers)

    client = legiscan or LegiScanClient()
    try:
        for i, number in enumerate(numbers):
            if i:
                await asyncio.sleep(request_delay)
            try:
                bill = await client.find_bill(state, number, year)
            except (LegiScanError, httpx.HTTPError) as e:
                logger.warning(f"Lookup failed for {number}: {e}")
                report.errors.append(LookupFailure(bill_number=number, error=str(e)))
                continue
            report.bills.append(to_details(bill, state, year))
    finally:
        if legiscan is None:
            await client.aclose()

    return report
