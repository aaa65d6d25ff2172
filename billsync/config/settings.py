"""
Application settings using Pydantic Settings.

Environment variables are loaded from .env file.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional

from billsync.config.constants import DEFAULT_STATE_JURISDICTION


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Create a .env file in the project root with these values.
    Credentials are optional here so the package imports cleanly; the
    API clients refuse to start without the ones they need.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # ========================================================================
    # External APIs
    # ========================================================================

    # LegiScan (get key at: https://legiscan.com/legiscan)
    LEGISCAN_API_KEY: Optional[str] = None

    # Webflow CMS (site token with CMS read/write scope)
    WEBFLOW_API_TOKEN: Optional[str] = None
    WEBFLOW_COLLECTION_ID: str = "68b8b074ed73a91391908240"

    # Only needed for the connectivity check
    WEBFLOW_SITE_ID: Optional[str] = None

    # ========================================================================
    # Sync Behaviour
    # ========================================================================

    # LegiScan state code used for non-federal records
    STATE_JURISDICTION: str = DEFAULT_STATE_JURISDICTION

    # Show joint authors alongside chief authors in the sponsor list
    SPONSOR_INCLUDE_JOINT: bool = True

    # Publish updated items to the live site after patching
    PUBLISH_AFTER_SYNC: bool = True

    # ========================================================================
    # Logging
    # ========================================================================
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # ========================================================================
    # Application
    # ========================================================================
    APP_NAME: str = "Bill Sync"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False


# Singleton instance
settings = Settings()
