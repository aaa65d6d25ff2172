"""Config module - settings and constants."""

from billsync.config.settings import settings
from billsync.config.constants import (
    LEGISCAN_BASE_URL,
    WEBFLOW_BASE_URL,
    FEDERAL_JURISDICTION,
)

__all__ = [
    "settings",
    "LEGISCAN_BASE_URL",
    "WEBFLOW_BASE_URL",
    "FEDERAL_JURISDICTION",
]
