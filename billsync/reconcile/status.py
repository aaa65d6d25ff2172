"""
Bill status classification.

LegiScan reports a numeric status (introduced, engrossed, enrolled, passed,
vetoed, failed) but never says a bill was tabled. We infer that from the last
action text and, for state bills, from the calendar: anything still in
progress after the session cutoff is effectively dead.
"""
import re
from datetime import date
from typing import Optional, Union

from billsync.config.constants import (
    FAILED_STATUSES,
    FEDERAL_JURISDICTION,
    IN_PROGRESS_STATUSES,
    SESSION_END_MONTH_DAY,
    STATUS_PASSED,
)
from billsync.models.legislation import StatusLabel

TABLED_ACTION_RE = re.compile(
    r"\b(?:tabled|laid\s+on\s+(?:the\s+)?table|postponed|indefinitely|sine\s+die|died|withdrawn|stricken)\b",
    re.IGNORECASE,
)
_YEAR_RE = re.compile(r"(?<!\d)(\d{4})(?!\d)")


def parse_status_code(status: Union[int, str, None]) -> Optional[int]:
    """Coerce a LegiScan status code to int, or None."""
    if status is None or isinstance(status, bool):
        return None
    try:
        return int(str(status).strip())
    except ValueError:
        return None


def parse_legislative_year(year: Union[int, str, None]) -> Optional[int]:
    """
    First four-digit year in the CMS legislative-year field.

    Examples:
        >>> parse_legislative_year("2024")
        2024
        >>> parse_legislative_year("2023-2024")
        2023
        >>> parse_legislative_year("FY2024")
        2024
        >>> parse_legislative_year("n/a")
        None
    """
    if year is None:
        return None
    match = _YEAR_RE.search(str(year))
    if not match:
        return None
    value = int(match.group(1))
    return value if value >= 1 else None


def is_tabled_action(last_action: Optional[str]) -> bool:
    return bool(last_action) and bool(TABLED_ACTION_RE.search(last_action))


def classify_status(
    status: Union[int, str, None],
    last_action: Optional[str],
    jurisdiction: str,
    legislative_year: Union[int, str, None],
    today: Optional[date] = None,
) -> StatusLabel:
    """
    Map a LegiScan bill to one of the site's status labels.

    Rules, first match wins:
        1. status 4                                     -> Passed
        2. status 5 or 6                                -> Failed
        3. last action reads as tabled/withdrawn/etc.   -> Tabled
        4. state bill, in progress, on/after June 1 of
           its legislative year                         -> Tabled
        5. anything else                                -> Active

    Args:
        status: LegiScan status code
        last_action: Text of the most recent action
        jurisdiction: LegiScan state code ("MN", "US", ...)
        legislative_year: Year from the CMS record; unparseable disables rule 4
        today: Override the current date (tests)

    Returns:
        StatusLabel
    """
    code = parse_status_code(status)

    if code == STATUS_PASSED:
        return StatusLabel.PASSED

    if code in FAILED_STATUSES:
        return StatusLabel.FAILED

    if is_tabled_action(last_action):
        return StatusLabel.TABLED

    year = parse_legislative_year(legislative_year)
    is_state = bool(jurisdiction) and jurisdiction.upper() != FEDERAL_JURISDICTION
    if is_state and year is not None and code in IN_PROGRESS_STATUSES:
        today = today or date.today()
        month, day = SESSION_END_MONTH_DAY
        if today >= date(year, month, day):
            return StatusLabel.TABLED

    return StatusLabel.ACTIVE
