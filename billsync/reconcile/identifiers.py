"""
House/Senate file number normalization.

Editors type bill numbers by hand ("hf 1099", "SF-12") and sometimes put a
House file in the Senate field or the other way round. These helpers clean
the numbers up and work out which corrections to write back to the CMS.
"""
import re
from typing import List, Optional

from billsync.config.constants import (
    FEDERAL_JURISDICTION,
    FIELD_HOUSE_NUMBER,
    FIELD_SENATE_NUMBER,
)
from billsync.models.cms import NormalizedNumbers

HOUSE_NUMBER_RE = re.compile(r"^HF\d+$")
SENATE_NUMBER_RE = re.compile(r"^SF\d+$")
_SEPARATORS_RE = re.compile(r"[\s-]+")


def clean_number(value: Optional[str]) -> str:
    """
    Uppercase a bill number and strip whitespace and hyphens.

    Examples:
        >>> clean_number(" hf 1099 ")
        "HF1099"
        >>> clean_number("SF-12")
        "SF12"
    """
    if not value:
        return ""
    return _SEPARATORS_RE.sub("", str(value).upper())


def normalize_numbers(raw_house: Optional[str], raw_senate: Optional[str]) -> NormalizedNumbers:
    """
    Clean both numbers and move a misfiled one into the right field.

    If the House field is empty and the Senate field holds an HF number, the
    number moves to the House field (and vice versa for an SF number in the
    House field). Both fields are then recorded as corrections so the CMS
    gets fixed too.

    Args:
        raw_house: Value of the house-file-number field
        raw_senate: Value of the senate-file-number field

    Returns:
        NormalizedNumbers with the cleaned values and any corrections
    """
    house = clean_number(raw_house)
    senate = clean_number(raw_senate)
    corrections = {}

    if not house and HOUSE_NUMBER_RE.match(senate):
        house, senate = senate, ""
        corrections[FIELD_HOUSE_NUMBER] = house
        corrections[FIELD_SENATE_NUMBER] = ""

    if not senate and SENATE_NUMBER_RE.match(house):
        senate, house = house, ""
        corrections[FIELD_SENATE_NUMBER] = senate
        corrections[FIELD_HOUSE_NUMBER] = ""

    return NormalizedNumbers(house=house, senate=senate, corrections=corrections)


# ============================================================================
# LegiScan lookup candidates
# ============================================================================

# Federal bills are entered with the state-style HF/SF prefix but LegiScan
# files them as HR/S (or HB/SB on some older sessions).
FEDERAL_PREFIX_ALTERNATES = {
    "HF": ("HR", "HB"),
    "SF": ("S", "SB"),
}


def candidate_bill_numbers(number: str, state: str) -> List[str]:
    """
    Ordered list of LegiScan bill numbers to try for one CMS number.

    Examples:
        >>> candidate_bill_numbers("HF12", "MN")
        ["HF12"]
        >>> candidate_bill_numbers("HF12", "US")
        ["HF12", "HR12", "HB12"]
    """
    number = clean_number(number)
    if not number:
        return []

    candidates = [number]
    if state.upper() != FEDERAL_JURISDICTION:
        return candidates

    match = re.match(r"^([A-Z]+)(\d+)$", number)
    if not match:
        return candidates

    prefix, digits = match.groups()
    for alternate in FEDERAL_PREFIX_ALTERNATES.get(prefix, ()):
        candidate = f"{alternate}{digits}"
        if candidate not in candidates:
            candidates.append(candidate)
    return candidates


def jurisdiction_to_state(jurisdiction: str, state_jurisdiction: str) -> str:
    """Map the CMS jurisdiction field to a LegiScan state code."""
    if jurisdiction.strip().lower() == "federal":
        return FEDERAL_JURISDICTION
    return state_jurisdiction.upper()
