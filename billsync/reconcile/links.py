"""
Document link selection.

Picks the one URL we show for a bill: the newest PDF text if there is one,
otherwise the newest text of any kind, otherwise the bill page itself.
"""
import re
from typing import List, Optional

from billsync.models.legislation import BillText, SourceBill
from billsync.reconcile.dates import sort_key

_PDF_URL_RE = re.compile(r"\.pdf($|\?)", re.IGNORECASE)


def is_pdf(text: BillText) -> bool:
    """True when the mime type or either URL points at a PDF."""
    if text.mime and "pdf" in text.mime.lower():
        return True
    return any(_PDF_URL_RE.search(u) for u in (text.url, text.state_link) if u)


def text_url(text: BillText) -> Optional[str]:
    return text.url or text.state_link or None


def sort_texts(texts: List[BillText]) -> List[BillText]:
    """Newest first; undated texts last; ties keep their original order."""
    return sorted(texts, key=lambda t: sort_key(t.date), reverse=True)


def pick_best_text_url(bill: Optional[SourceBill]) -> Optional[str]:
    """
    Choose the best document URL for a bill.

    Args:
        bill: LegiScan bill, or None when the lookup was skipped

    Returns:
        A URL, or None when the bill has no usable link
    """
    if bill is None:
        return None

    texts = sort_texts(bill.texts)
    if texts:
        pdf = next((t for t in texts if is_pdf(t)), None)
        if pdf is not None and text_url(pdf):
            return text_url(pdf)
        if text_url(texts[0]):
            return text_url(texts[0])

    return bill.state_link or bill.url or None
