"""Reconcile module - pure field derivation for CMS bill items."""

from billsync.reconcile.identifiers import (
    candidate_bill_numbers,
    clean_number,
    jurisdiction_to_state,
    normalize_numbers,
)
from billsync.reconcile.links import pick_best_text_url
from billsync.reconcile.reconciler import (
    is_placeholder_name,
    precheck_record,
    reconcile_bill,
    resolve_status_option,
    status_options_from_schema,
)
from billsync.reconcile.slug import build_item_slug, slugify
from billsync.reconcile.sponsors import render_sponsors
from billsync.reconcile.status import classify_status
from billsync.reconcile.timeline import render_timeline

__all__ = [
    "build_item_slug",
    "candidate_bill_numbers",
    "classify_status",
    "clean_number",
    "is_placeholder_name",
    "jurisdiction_to_state",
    "normalize_numbers",
    "pick_best_text_url",
    "precheck_record",
    "reconcile_bill",
    "render_sponsors",
    "render_timeline",
    "resolve_status_option",
    "slugify",
    "status_options_from_schema",
]
