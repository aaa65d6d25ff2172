"""Data models module."""

from billsync.models.legislation import (
    BillSession,
    BillText,
    HistoryEvent,
    SourceBill,
    Sponsor,
    SponsorRank,
    StatusLabel,
)

from billsync.models.cms import (
    CmsBillRecord,
    NormalizedNumbers,
    ReconciliationResult,
)

from billsync.models.sync import (
    SkipReason,
    SyncError,
    SyncSummary,
    UpdatedBill,
)

__all__ = [
    # Legislation
    "BillSession",
    "BillText",
    "HistoryEvent",
    "SourceBill",
    "Sponsor",
    "SponsorRank",
    "StatusLabel",
    # CMS
    "CmsBillRecord",
    "NormalizedNumbers",
    "ReconciliationResult",
    # Sync
    "SkipReason",
    "SyncError",
    "SyncSummary",
    "UpdatedBill",
]
