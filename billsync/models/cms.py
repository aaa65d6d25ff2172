"""
Webflow CMS data models.

A bill item as stored in the Webflow collection, and the partial update
we compute for it.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from billsync.config.constants import (
    FIELD_HOUSE_NUMBER,
    FIELD_JURISDICTION,
    FIELD_LEGISLATIVE_YEAR,
    FIELD_MANUAL_OVERRIDE,
    FIELD_NAME,
    FIELD_SENATE_NUMBER,
)
from billsync.models.legislation import StatusLabel


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


class CmsBillRecord(BaseModel):
    """
    A bill item in the Webflow collection.

    Field values are kept as Webflow sends them in `fieldData` (keyed by
    field slug); the properties below give typed access to the ones the
    sync reads.
    """
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    is_archived: bool = Field(False, alias="isArchived")
    field_data: Dict[str, Any] = Field(default_factory=dict, alias="fieldData")

    def field(self, slug: str) -> Any:
        return self.field_data.get(slug)

    @property
    def raw_house_number(self) -> str:
        return _text(self.field(FIELD_HOUSE_NUMBER))

    @property
    def raw_senate_number(self) -> str:
        return _text(self.field(FIELD_SENATE_NUMBER))

    @property
    def name(self) -> str:
        return _text(self.field(FIELD_NAME))

    @property
    def jurisdiction(self) -> str:
        return _text(self.field(FIELD_JURISDICTION))

    @property
    def legislative_year(self) -> str:
        return _text(self.field(FIELD_LEGISLATIVE_YEAR))

    @property
    def manual_override(self) -> bool:
        value = self.field(FIELD_MANUAL_OVERRIDE)
        if isinstance(value, str):
            return value.strip().lower() in ("true", "yes", "1")
        return bool(value)


class NormalizedNumbers(BaseModel):
    """Cleaned HF/SF numbers plus any corrections to write back."""
    house: str = ""
    senate: str = ""
    corrections: Dict[str, str] = Field(default_factory=dict)

    @property
    def primary(self) -> str:
        """The number we look up first: house if present, else senate."""
        return self.house or self.senate

    @property
    def is_empty(self) -> bool:
        return not self.house and not self.senate


class ReconciliationResult(BaseModel):
    """
    The partial update computed for one CMS record.

    `field_data` holds every field to PATCH except the slug, which Webflow
    validates separately and is sent on its own.
    """
    item_id: str
    house_number: str = ""
    senate_number: str = ""
    field_data: Dict[str, Any] = Field(default_factory=dict)
    corrections: Dict[str, str] = Field(default_factory=dict)
    slug: Optional[str] = None
    headline: str = ""
    status_label: Optional[StatusLabel] = None
    skip_reason: Optional[str] = None

    @property
    def has_changes(self) -> bool:
        return bool(self.field_data) or self.slug is not None
