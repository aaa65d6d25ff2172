"""
Per-record reconciliation.

Combines the normalizers and renderers into the update for one CMS bill
item. Everything here is pure: the caller fetches the LegiScan bills and
sends the result to Webflow.

Usage:
    numbers, reason = precheck_record(record)
    if reason is None:
        primary = await legiscan.get_bill(state, numbers.primary, year)
        result = reconcile_bill(record, numbers, primary, house=primary, state=state)
"""
import re
from datetime import date
from typing import Any, Dict, Mapping, Optional, Tuple

from billsync.config.constants import (
    FIELD_HOUSE_LINK,
    FIELD_HOUSE_NUMBER,
    FIELD_NAME,
    FIELD_SENATE_LINK,
    FIELD_SENATE_NUMBER,
    FIELD_SLUG,
    FIELD_SPONSORS,
    FIELD_STATUS,
    FIELD_TIMELINE,
    PLACEHOLDER_NAMES,
)
from billsync.models.cms import CmsBillRecord, NormalizedNumbers, ReconciliationResult
from billsync.models.legislation import SourceBill, StatusLabel
from billsync.reconcile.identifiers import normalize_numbers
from billsync.reconcile.links import pick_best_text_url
from billsync.reconcile.slug import build_item_slug
from billsync.reconcile.sponsors import render_sponsors
from billsync.reconcile.status import classify_status
from billsync.reconcile.timeline import render_timeline

SKIP_ARCHIVED = "Archived"
SKIP_MANUAL_OVERRIDE = "Manual override"
SKIP_NO_NUMBER = "No HF/SF number"
SKIP_NO_CHANGES = "No changes to apply"

_BARE_NUMBER_RE = re.compile(r"^[HS]F[-\s]?\d+$", re.IGNORECASE)
_PLACEHOLDER_RE = re.compile(rf"^(?:{'|'.join(PLACEHOLDER_NAMES)})$", re.IGNORECASE)


# ============================================================================
# Placeholder Names
# ============================================================================

def is_placeholder_name(name: Optional[str], *bill_numbers: str) -> bool:
    """
    True when a CMS name carries no real information.

    Examples:
        >>> is_placeholder_name("", "HF12")
        True
        >>> is_placeholder_name("hf12", "HF12")
        True
        >>> is_placeholder_name("SF 99")
        True
        >>> is_placeholder_name("TBD")
        True
        >>> is_placeholder_name("Paid leave expansion", "HF12")
        False
    """
    value = (name or "").strip()
    if not value:
        return True
    if any(n and value.upper() == n.upper() for n in bill_numbers):
        return True
    return bool(_BARE_NUMBER_RE.match(value) or _PLACEHOLDER_RE.match(value))


# ============================================================================
# Status Options
# ============================================================================

def status_options_from_schema(schema: Mapping[str, Any], field_slug: str = FIELD_STATUS) -> Dict[str, str]:
    """
    Read the label -> option id map for the status field from a collection schema.

    Args:
        schema: Response of GET /v2/collections/{collection_id}
        field_slug: Slug of the Option field

    Returns:
        Dict like {"Active": "a1b2...", "Passed": "c3d4..."}; empty if the
        field is missing or is not an Option field
    """
    for field in schema.get("fields", []) or []:
        if field.get("slug") != field_slug:
            continue
        validations = field.get("validations") or {}
        options = validations.get("options") or []
        return {
            opt["name"]: opt["id"]
            for opt in options
            if opt.get("name") and opt.get("id")
        }
    return {}


def resolve_status_option(label: StatusLabel, status_options: Optional[Mapping[str, str]] = None) -> str:
    """
    Value to write into the status field for a label.

    Uses the option id when the schema knows the label (matched
    case-insensitively), otherwise the label text itself.
    """
    if status_options:
        if label.value in status_options:
            return status_options[label.value]
        for name, option_id in status_options.items():
            if name.strip().lower() == label.value.lower():
                return option_id
    return label.value


# ============================================================================
# Reconciliation
# ============================================================================

def precheck_record(record: CmsBillRecord) -> Tuple[NormalizedNumbers, Optional[str]]:
    """
    Normalize a record's numbers and decide whether it should be skipped
    before any lookup is made.

    Returns:
        (numbers, skip_reason); skip_reason is None when the record should
        be processed
    """
    numbers = normalize_numbers(record.raw_house_number, record.raw_senate_number)
    if record.is_archived:
        return numbers, SKIP_ARCHIVED
    if record.manual_override:
        return numbers, SKIP_MANUAL_OVERRIDE
    if numbers.is_empty:
        return numbers, SKIP_NO_NUMBER
    return numbers, None


def _same_value(current: Any, new: Any) -> bool:
    if current is None:
        current = ""
    if new is None:
        new = ""
    return str(current).strip() == str(new).strip()


def _link_field(
    number: str,
    bill: Optional[SourceBill],
    number_field: str,
    corrections: Mapping[str, str],
) -> Optional[str]:
    """New link value for one chamber, or None to leave the field alone."""
    if number:
        return pick_best_text_url(bill)
    if corrections.get(number_field) == "":
        # The number was moved to the other chamber; drop its stale link
        return ""
    return None


def reconcile_bill(
    record: CmsBillRecord,
    numbers: NormalizedNumbers,
    primary: SourceBill,
    house: Optional[SourceBill] = None,
    senate: Optional[SourceBill] = None,
    state: str = "MN",
    status_options: Optional[Mapping[str, str]] = None,
    include_joint: bool = True,
    today: Optional[date] = None,
) -> ReconciliationResult:
    """
    Compute the partial update for one CMS record.

    Args:
        record: The CMS item as listed
        numbers: Output of precheck_record()
        primary: LegiScan bill for numbers.primary
        house: LegiScan bill for the House number (may be the primary)
        senate: LegiScan bill for the Senate number (may be the primary)
        state: LegiScan state code for the record ("MN", "US")
        status_options: Label -> option id map for the status field
        include_joint: Show joint authors in the sponsor list
        today: Override the current date (tests)

    Returns:
        ReconciliationResult; skip_reason is set when nothing would change
    """
    fields: Dict[str, Any] = {}

    # Identifier corrections always go back to the CMS
    fields.update(numbers.corrections)

    # Name: only replace placeholders
    current_name = record.name
    name_is_placeholder = is_placeholder_name(current_name, numbers.house, numbers.senate)
    if name_is_placeholder:
        fields[FIELD_NAME] = primary.title or numbers.primary

    # Status
    label = classify_status(
        primary.status,
        primary.latest_action,
        state,
        record.legislative_year,
        today=today,
    )
    fields[FIELD_STATUS] = resolve_status_option(label, status_options)

    # Timeline and sponsors; an empty render clears stale CMS text
    fields[FIELD_TIMELINE] = render_timeline(primary)
    fields[FIELD_SPONSORS] = render_sponsors(primary.sponsors, state, include_joint=include_joint)

    # Links: each chamber's own bill
    for number, bill, number_field, link_field in (
        (numbers.house, house, FIELD_HOUSE_NUMBER, FIELD_HOUSE_LINK),
        (numbers.senate, senate, FIELD_SENATE_NUMBER, FIELD_SENATE_LINK),
    ):
        link = _link_field(number, bill, number_field, numbers.corrections)
        if link is not None:
            fields[link_field] = link

    # Leave out anything the record already holds (corrections excepted)
    fields = {
        slug: value
        for slug, value in fields.items()
        if slug in numbers.corrections or not _same_value(record.field(slug), value)
    }

    # Slug
    title = primary.title or ("" if name_is_placeholder else current_name)
    slug = build_item_slug(record.legislative_year, numbers, title)
    if slug is not None and _same_value(record.field(FIELD_SLUG), slug):
        slug = None

    result = ReconciliationResult(
        item_id=record.id,
        house_number=numbers.house,
        senate_number=numbers.senate,
        field_data=fields,
        corrections=dict(numbers.corrections),
        slug=slug,
        headline=fields.get(FIELD_NAME, current_name),
        status_label=label,
    )
    if not result.has_changes:
        result.skip_reason = SKIP_NO_CHANGES
    return result
