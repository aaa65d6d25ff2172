"""
Bill lookup and diagnostics report models.
"""
from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, Field


class BillDetails(BaseModel):
    """Condensed view of one LegiScan bill for ad-hoc lookups."""
    bill_id: Optional[int] = None
    bill_number: str
    title: str = ""
    description: Optional[str] = None

    status: Optional[int] = None
    status_text: Optional[str] = None
    status_date: Optional[str] = None
    status_label: Optional[str] = None

    session: Optional[dict] = None
    sponsors: List[dict] = Field(default_factory=list)
    history: List[dict] = Field(default_factory=list)
    subjects: List[dict] = Field(default_factory=list)
    texts: List[dict] = Field(default_factory=list)
    votes: List[dict] = Field(default_factory=list)

    best_link: Optional[str] = None
    state_link: Optional[str] = None
    completed: Optional[int] = None


class LookupFailure(BaseModel):
    bill_number: str
    error: str


class LookupReport(BaseModel):
    """Result of looking up one or more bill numbers."""
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    requested: List[str] = Field(default_factory=list)
    bills: List[BillDetails] = Field(default_factory=list)
    errors: List[LookupFailure] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return len(self.bills) > 0


class CheckResult(BaseModel):
    """One connectivity test."""
    test: str
    success: bool
    message: str
    data: Any = None


class DiagnosticsReport(BaseModel):
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    tests: List[CheckResult] = Field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for t in self.tests if t.success)

    @property
    def failed(self) -> int:
        return len(self.tests) - self.passed

    @property
    def success(self) -> bool:
        return self.failed == 0

    def add(self, test: str, success: bool, message: str, data: Any = None) -> None:
        self.tests.append(CheckResult(test=test, success=success, message=message, data=data))
