"""
Legislation data models.

Defines structures for LegiScan bills and the labels we derive from them.
"""
from enum import Enum, IntEnum
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class StatusLabel(str, Enum):
    """Bill lifecycle label shown on the site."""
    ACTIVE = "Active"
    TABLED = "Tabled"
    FAILED = "Failed"
    PASSED = "Passed"


class SponsorRank(IntEnum):
    """Display rank of a sponsor type. Lower sorts first."""
    PRIMARY = 0
    JOINT = 1
    EXCLUDED = 99


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


class _LegiScanModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)


class HistoryEvent(_LegiScanModel):
    """One entry of a bill's action history."""
    date: Optional[str] = None
    action: str = ""
    chamber: Optional[str] = None  # "H" / "S"
    chamber_text: Optional[str] = None

    @field_validator("action", mode="before")
    @classmethod
    def _action_text(cls, v):
        return v or ""


class BillText(_LegiScanModel):
    """A document version attached to a bill."""
    doc_id: Optional[int] = None
    date: Optional[str] = None
    type: Optional[str] = Field(None, validation_alias=AliasChoices("type", "type_text"))
    mime: Optional[str] = None
    url: Optional[str] = None
    state_link: Optional[str] = None

    @field_validator("doc_id", mode="before")
    @classmethod
    def _blank_id(cls, v):
        return _blank_to_none(v)


class Sponsor(_LegiScanModel):
    """A sponsor (author) entry on a bill."""
    people_id: Optional[int] = None
    name: str = ""
    party: Optional[str] = None

    # 1 = primary, 2 = co-sponsor, 3 = joint
    sponsor_type_id: Optional[int] = None
    sponsor_type: Optional[str] = Field(
        None, validation_alias=AliasChoices("sponsor_type", "sponsor_type_text")
    )

    # 1 = Rep, 2 = Sen
    role_id: Optional[int] = None
    role: Optional[str] = None
    chamber: Optional[str] = None
    district: Optional[str] = None

    @field_validator("people_id", "sponsor_type_id", "role_id", mode="before")
    @classmethod
    def _blank_ids(cls, v):
        return _blank_to_none(v)

    @field_validator("name", mode="before")
    @classmethod
    def _name_text(cls, v):
        return (v or "").strip()


class BillSession(_LegiScanModel):
    """Legislative session a bill belongs to."""
    session_id: Optional[int] = None
    year_start: Optional[int] = None
    year_end: Optional[int] = None
    session_name: Optional[str] = None


class SourceBill(_LegiScanModel):
    """
    A snapshot of one bill from LegiScan's getBill operation.

    Only the fields the sync and lookup use are modelled; the rest of the
    payload is ignored.
    """

    bill_id: Optional[int] = None
    bill_number: str = ""

    # Content
    title: str = ""
    description: Optional[str] = None

    # Status
    status: Optional[int] = None
    status_text: Optional[str] = None
    status_date: Optional[str] = None
    last_action: Optional[str] = None
    last_action_date: Optional[str] = None

    # Collections
    history: List[HistoryEvent] = Field(default_factory=list)
    texts: List[BillText] = Field(default_factory=list)
    sponsors: List[Sponsor] = Field(default_factory=list)
    subjects: List[dict] = Field(default_factory=list)
    votes: List[dict] = Field(default_factory=list)
    session: Optional[BillSession] = None

    # Links
    state_link: Optional[str] = None
    url: Optional[str] = None
    completed: Optional[int] = None

    @field_validator("status", "bill_id", "completed", mode="before")
    @classmethod
    def _blank_codes(cls, v):
        return _blank_to_none(v)

    @field_validator("title", "bill_number", mode="before")
    @classmethod
    def _text(cls, v):
        return (v or "").strip()

    @field_validator("history", "texts", "sponsors", "subjects", "votes", mode="before")
    @classmethod
    def _list_or_empty(cls, v):
        # LegiScan sends {} or null for empty collections on some bills
        if not v:
            return []
        if isinstance(v, dict):
            return list(v.values())
        return v

    @property
    def latest_action(self) -> str:
        """Most recent action text, from last_action or the history log."""
        if self.last_action:
            return self.last_action
        latest = self._latest_event()
        return latest.action if latest else ""

    @property
    def latest_action_date(self) -> str:
        """Date of the most recent action."""
        if self.last_action_date:
            return self.last_action_date
        latest = self._latest_event()
        return (latest.date or "") if latest else ""

    def _latest_event(self) -> Optional[HistoryEvent]:
        dated = [e for e in self.history if e.date]
        if not dated:
            return None
        # Stable: the last-listed event wins on equal dates
        return max(reversed(dated), key=lambda e: e.date)

    def __str__(self) -> str:
        """Human-readable representation."""
        return f"{self.bill_number}: {self.title[:60]}"
