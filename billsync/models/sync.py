"""
Run summary models.

One SyncSummary is created per run and passed through the per-record loop.
"""
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field


class SyncError(BaseModel):
    """A failure tied to one record or one publish chunk."""
    item_id: Optional[str] = None
    stage: str  # "lookup", "patch", "slug", "publish"
    message: str


class SkipReason(BaseModel):
    item_id: str
    reason: str


class UpdatedBill(BaseModel):
    item_id: str
    house_number: str = ""
    senate_number: str = ""
    headline: str = ""
    status: Optional[str] = None


class SyncSummary(BaseModel):
    """Counts and details for one sync run."""
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    total_records: int = 0
    processed: int = 0
    updated: int = 0
    skipped: int = 0
    published: int = 0
    updated_bills: List[UpdatedBill] = Field(default_factory=list)
    skip_reasons: List[SkipReason] = Field(default_factory=list)
    errors: List[SyncError] = Field(default_factory=list)
    completed_at: Optional[datetime] = None

    @property
    def errored(self) -> int:
        """Number of records that failed (publish chunk errors excluded)."""
        return len({e.item_id for e in self.errors if e.stage in ("lookup", "patch")})

    def record_skip(self, item_id: str, reason: str) -> None:
        self.skipped += 1
        self.skip_reasons.append(SkipReason(item_id=item_id, reason=reason))

    def record_error(self, item_id: Optional[str], stage: str, message: str) -> None:
        self.errors.append(SyncError(item_id=item_id, stage=stage, message=message))

    def record_update(self, bill: UpdatedBill) -> None:
        self.updated += 1
        self.updated_bills.append(bill)
