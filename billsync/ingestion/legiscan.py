"""
LegiScan API client.

Handles fetching bill data from the LegiScan API.
API Docs: https://legiscan.com/gaits/documentation/legiscan
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx

from billsync.config.constants import HTTP_TIMEOUT, LEGISCAN_BASE_URL, LEGISCAN_REQUEST_DELAY
from billsync.config.settings import settings
from billsync.models.legislation import SourceBill
from billsync.reconcile.identifiers import candidate_bill_numbers

logger = logging.getLogger(__name__)


class LegiScanError(Exception):
    """LegiScan answered, but not with the data we asked for."""


class LegiScanClient:
    """
    Async client for the LegiScan API.

    Usage:
        async with LegiScanClient() as legiscan:
            bill = await legiscan.get_bill("MN", "HF1099", year="2024")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        request_delay: float = LEGISCAN_REQUEST_DELAY,
    ):
        self.base_url = LEGISCAN_BASE_URL
        self.api_key = api_key or settings.LEGISCAN_API_KEY
        if not self.api_key:
            raise ValueError("LEGISCAN_API_KEY not found in settings")
        self.request_delay = request_delay
        self._client = client or httpx.AsyncClient(timeout=HTTP_TIMEOUT)

    async def __aenter__(self) -> "LegiScanClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _make_request(self, op: str, **params: Any) -> dict:
        """
        Make a request to the LegiScan API.

        Args:
            op: LegiScan operation (e.g., "getBill")
            **params: Query parameters; None values are dropped

        Returns:
            JSON response as dict

        Raises:
            LegiScanError: if the response status is not "OK"
        """
        request_params = {"key": self.api_key, "op": op}
        request_params.update({k: v for k, v in params.items() if v not in (None, "")})

        response = await self._client.get(self.base_url, params=request_params)
        response.raise_for_status()
        data = response.json()

        if data.get("status") != "OK":
            alert = data.get("alert") or {}
            raise LegiScanError(alert.get("message") or f"LegiScan {op} failed")
        return data

    async def get_bill(self, state: str, bill_number: str, year: Optional[str] = None) -> SourceBill:
        """
        Get one bill by state and number.

        Args:
            state: LegiScan state code ("MN", "US")
            bill_number: Bill number as LegiScan writes it ("HF1099")
            year: Optional session year filter

        Returns:
            SourceBill

        Raises:
            LegiScanError: if the bill is not found
        """
        logger.debug(f"getBill state={state} bill={bill_number} year={year}")
        data = await self._make_request("getBill", state=state, bill=bill_number, year=year)
        bill = data.get("bill")
        if not bill:
            raise LegiScanError(f"Bill {bill_number} not found")
        return SourceBill.model_validate(bill)

    async def find_bill(self, state: str, number: str, year: Optional[str] = None) -> SourceBill:
        """
        Look up a CMS number, trying each LegiScan spelling in turn.

        Stops at the first candidate that resolves. If none do, the error
        from the last candidate is raised.
        """
        candidates = candidate_bill_numbers(number, state)
        if not candidates:
            raise LegiScanError("No bill number to look up")

        last_error: Optional[Exception] = None
        for i, candidate in enumerate(candidates):
            if i:
                await asyncio.sleep(self.request_delay)
            try:
                return await self.get_bill(state, candidate, year)
            except LegiScanError as e:
                logger.debug(f"{candidate} not found in {state}: {e}")
                last_error = e

        raise LegiScanError(f"{number}: {last_error}")

    async def get_master_list(self, state: str) -> Dict[str, dict]:
        """
        Get the current session's bill list for a state.

        Returns:
            Master list entries keyed by LegiScan's index ("session" removed)
        """
        data = await self._make_request("getMasterList", state=state)
        masterlist = dict(data.get("masterlist") or {})
        masterlist.pop("session", None)
        return masterlist

    async def search(self, state: str, query: str) -> List[dict]:
        """Full-text search; returns the result entries only."""
        data = await self._make_request("getSearch", state=state, query=query)
        results = data.get("searchresult") or {}
        if isinstance(results, list):
            return results
        # Object with numeric keys plus a "summary" entry
        return [v for k, v in results.items() if k != "summary" and isinstance(v, dict)]
