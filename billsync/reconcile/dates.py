"""Date helpers for LegiScan's YYYY-MM-DD strings."""
from datetime import date
from typing import Optional

# Sort key for undated entries: older than anything real
EPOCH = date(1970, 1, 1)

MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def parse_date(date_str: Optional[str]) -> Optional[date]:
    """Parse date string to date object."""
    if not date_str:
        return None
    try:
        return date.fromisoformat(str(date_str).strip()[:10])
    except ValueError:
        # LegiScan uses "0000-00-00" for unknown dates
        return None


def sort_key(date_str: Optional[str]) -> date:
    return parse_date(date_str) or EPOCH


def format_display_date(date_str: Optional[str]) -> str:
    """
    Format a date as "Mar 5, 2024".

    Unparseable values are returned stripped but otherwise unchanged.
    """
    parsed = parse_date(date_str)
    if parsed is None:
        return (date_str or "").strip()
    return f"{MONTH_ABBR[parsed.month - 1]} {parsed.day}, {parsed.year}"
