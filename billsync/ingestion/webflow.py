"""
Webflow CMS API client (Data API v2).

Lists, patches, and publishes items in the bills collection.
API Docs: https://developers.webflow.com/data/reference
"""
import logging
from typing import Any, AsyncGenerator, Dict, List, Optional

import httpx

from billsync.config.constants import HTTP_TIMEOUT, WEBFLOW_BASE_URL, WEBFLOW_PAGE_SIZE
from billsync.config.settings import settings
from billsync.models.cms import CmsBillRecord

logger = logging.getLogger(__name__)


class WebflowError(Exception):
    """Webflow rejected a request."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class WebflowClient:
    """
    Async client for one Webflow CMS collection.

    Usage:
        async with WebflowClient() as webflow:
            async for record in webflow.iter_items():
                ...
    """

    def __init__(
        self,
        api_token: Optional[str] = None,
        collection_id: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = WEBFLOW_BASE_URL
        self.api_token = api_token or settings.WEBFLOW_API_TOKEN
        if not self.api_token:
            raise ValueError("WEBFLOW_API_TOKEN not found in settings")
        self.collection_id = collection_id or settings.WEBFLOW_COLLECTION_ID
        self._client = client or httpx.AsyncClient(timeout=HTTP_TIMEOUT)

    async def __aenter__(self) -> "WebflowClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    @property
    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_token}",
            "accept": "application/json",
        }

    async def _make_request(
        self,
        method: str,
        endpoint: str,
        params: Optional[dict] = None,
        json: Optional[dict] = None,
    ) -> dict:
        """
        Make a request to the Webflow API.

        Raises:
            WebflowError: on any non-2xx response, with Webflow's message
        """
        url = f"{self.base_url}{endpoint}"
        response = await self._client.request(
            method, url, params=params, json=json, headers=self._headers
        )

        if response.is_error:
            try:
                detail = response.json().get("message")
            except ValueError:
                detail = None
            message = detail or response.reason_phrase or f"HTTP {response.status_code}"
            raise WebflowError(f"{method} {endpoint} failed: {message}", response.status_code)

        if not response.content:
            return {}
        return response.json()

    # ========================================================================
    # Collection
    # ========================================================================

    async def get_collection(self) -> dict:
        """Collection details, including the field schema."""
        return await self._make_request("GET", f"/collections/{self.collection_id}")

    async def list_items(self, offset: int = 0, limit: int = WEBFLOW_PAGE_SIZE) -> dict:
        """One page of staged items (raw response)."""
        return await self._make_request(
            "GET",
            f"/collections/{self.collection_id}/items",
            params={"offset": offset, "limit": limit},
        )

    async def iter_items(self, limit: int = WEBFLOW_PAGE_SIZE) -> AsyncGenerator[CmsBillRecord, None]:
        """
        Yield every item in the collection, following offset pagination.
        """
        offset = 0
        while True:
            data = await self.list_items(offset=offset, limit=limit)
            items = data.get("items") or []
            for item in items:
                yield CmsBillRecord.model_validate(item)

            pagination = data.get("pagination") or {}
            total = pagination.get("total")
            offset += len(items)
            if not items or total is None or offset >= total:
                break

    async def list_all_items(self) -> List[CmsBillRecord]:
        return [record async for record in self.iter_items()]

    # ========================================================================
    # Items
    # ========================================================================

    async def patch_item(self, item_id: str, field_data: Dict[str, Any]) -> dict:
        """Update the staged version of an item."""
        return await self._make_request(
            "PATCH",
            f"/collections/{self.collection_id}/items/{item_id}",
            json={"fieldData": field_data},
        )

    async def publish_items(self, item_ids: List[str]) -> dict:
        """Publish staged items to the live site."""
        return await self._make_request(
            "POST",
            f"/collections/{self.collection_id}/items/publish",
            json={"itemIds": list(item_ids)},
        )

    # ========================================================================
    # Site
    # ========================================================================

    async def get_site(self, site_id: str) -> dict:
        return await self._make_request("GET", f"/sites/{site_id}")
