"""
Timeline rendering.

Turns a bill's action history into the rich-text block shown on the bill
page: newest date first, one block per date, bullets when several actions
happened the same day.
"""
import html
from itertools import groupby
from typing import List, Optional

from billsync.models.legislation import HistoryEvent, SourceBill
from billsync.reconcile.dates import format_display_date, sort_key

LINE_BREAK = "<br>"
BLOCK_BREAK = "<br><br>"
BULLET = "&bull; "


def _date_key(event: HistoryEvent) -> str:
    return (event.date or "").strip()


def render_block(date_str: str, actions: List[str]) -> str:
    """
    Render one date block.

    Examples:
        >>> render_block("2024-03-05", ["Introduced"])
        "<strong>Mar 5, 2024</strong><br>Introduced"
    """
    lines = []
    heading = format_display_date(date_str)
    if heading:
        lines.append(f"<strong>{html.escape(heading)}</strong>")

    if len(actions) == 1:
        lines.append(html.escape(actions[0]))
    else:
        lines.extend(BULLET + html.escape(action) for action in actions)

    return LINE_BREAK.join(lines)


def render_history(history: List[HistoryEvent]) -> str:
    """Render a history list; empty list gives an empty string."""
    events = [e for e in history if e.action.strip()]
    events = sorted(events, key=lambda e: sort_key(e.date), reverse=True)

    blocks = []
    for date_str, group in groupby(events, key=_date_key):
        actions = [e.action.strip() for e in group]
        blocks.append(render_block(date_str, actions))

    return BLOCK_BREAK.join(blocks)


def render_timeline(bill: Optional[SourceBill]) -> str:
    """
    Build the timeline text for a bill.

    Falls back to the single most recent action when the bill has no
    history. Returns "" when there is nothing to show.
    """
    if bill is None:
        return ""

    if bill.history:
        rendered = render_history(bill.history)
        if rendered:
            return rendered

    action = (bill.latest_action or "").strip()
    if not action:
        return ""
    return render_block(bill.latest_action_date or "", [action])
