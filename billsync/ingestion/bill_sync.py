"""
Sync Webflow bill items with LegiScan.

For each CMS item: clean up the HF/SF numbers, look the bill(s) up on
LegiScan, compute status/timeline/sponsors/links/slug, patch the staged
item, and queue it for publishing. Queued items are published in chunks at
the end of the run.

Usage:
    syncer = BillSyncer()
    summary = await syncer.run()
"""
import asyncio
import logging
from datetime import date
from typing import AsyncGenerator, Dict, List, Optional

from billsync.config.constants import (
    FIELD_SLUG,
    LEGISCAN_REQUEST_DELAY,
    PUBLISH_CHUNK_SIZE,
    PUBLISH_DELAY,
    RECORD_DELAY,
)
from billsync.config.settings import settings
from billsync.ingestion.base import BaseSync
from billsync.ingestion.legiscan import LegiScanClient
from billsync.ingestion.webflow import WebflowClient, WebflowError
from billsync.models.cms import CmsBillRecord, ReconciliationResult
from billsync.models.legislation import SourceBill
from billsync.models.sync import SyncSummary, UpdatedBill
from billsync.reconcile.identifiers import jurisdiction_to_state
from billsync.reconcile.reconciler import (
    precheck_record,
    reconcile_bill,
    status_options_from_schema,
)

logger = logging.getLogger(__name__)


def chunked(items: List[str], size: int) -> List[List[str]]:
    return [items[i:i + size] for i in range(0, len(items), size)]


class BillSyncer(BaseSync[ReconciliationResult]):
    """
    Reconcile every bill item in the Webflow collection against LegiScan.
    """

    def __init__(
        self,
        legiscan: Optional[LegiScanClient] = None,
        webflow: Optional[WebflowClient] = None,
        state_jurisdiction: Optional[str] = None,
        include_joint: Optional[bool] = None,
        publish: Optional[bool] = None,
        today: Optional[date] = None,
        request_delay: float = LEGISCAN_REQUEST_DELAY,
        record_delay: float = RECORD_DELAY,
        publish_delay: float = PUBLISH_DELAY,
        publish_chunk_size: int = PUBLISH_CHUNK_SIZE,
    ):
        super().__init__()
        # Missing credentials fail here, before any HTTP client is opened
        if legiscan is None and not settings.LEGISCAN_API_KEY:
            raise ValueError("LEGISCAN_API_KEY not found in settings")
        if webflow is None and not settings.WEBFLOW_API_TOKEN:
            raise ValueError("WEBFLOW_API_TOKEN not found in settings")

        self._owns_legiscan = legiscan is None
        self._owns_webflow = webflow is None
        self.legiscan = legiscan or LegiScanClient(request_delay=request_delay)
        self.webflow = webflow or WebflowClient()

        self.state_jurisdiction = state_jurisdiction or settings.STATE_JURISDICTION
        self.include_joint = settings.SPONSOR_INCLUDE_JOINT if include_joint is None else include_joint
        self.publish = settings.PUBLISH_AFTER_SYNC if publish is None else publish
        self.today = today

        self.request_delay = request_delay
        self.record_delay = record_delay
        self.publish_delay = publish_delay
        self.publish_chunk_size = publish_chunk_size

        self.status_options: Dict[str, str] = {}
        self.publish_queue: List[str] = []

    async def setup(self):
        """Load the status field's option ids from the collection schema."""
        self.publish_queue = []
        try:
            schema = await self.webflow.get_collection()
        except WebflowError as e:
            self.logger.warning(f"Could not read collection schema, writing status labels as text: {e}")
            return
        self.status_options = status_options_from_schema(schema)
        self.logger.info(f"Loaded {len(self.status_options)} status options")

    async def teardown(self):
        if self._owns_legiscan:
            await self.legiscan.aclose()
        if self._owns_webflow:
            await self.webflow.aclose()

    async def fetch_data(self, **kwargs) -> AsyncGenerator[CmsBillRecord, None]:
        """
        Yield every item in the bills collection.

        Yields:
            CmsBillRecord in collection order
        """
        async for record in self.webflow.iter_items():
            yield record

    async def _fetch_bills(self, record: CmsBillRecord, state: str, house: str, senate: str):
        """Primary bill first, then the other chamber's bill if it differs."""
        year = record.legislative_year or None
        primary_number = house or senate

        primary = await self.legiscan.find_bill(state, primary_number, year)
        house_bill: Optional[SourceBill] = primary if house == primary_number else None
        senate_bill: Optional[SourceBill] = primary if senate == primary_number else None

        if house and house_bill is None:
            await asyncio.sleep(self.request_delay)
            house_bill = await self.legiscan.find_bill(state, house, year)
        if senate and senate_bill is None:
            await asyncio.sleep(self.request_delay)
            senate_bill = await self.legiscan.find_bill(state, senate, year)

        return primary, house_bill, senate_bill

    async def transform(self, record: CmsBillRecord) -> Optional[ReconciliationResult]:
        numbers, reason = precheck_record(record)
        if reason:
            self.logger.debug(f"Skipping {record.id}: {reason}")
            self.summary.record_skip(record.id, reason)
            return None

        state = jurisdiction_to_state(record.jurisdiction, self.state_jurisdiction)
        primary, house_bill, senate_bill = await self._fetch_bills(
            record, state, numbers.house, numbers.senate
        )

        result = reconcile_bill(
            record,
            numbers,
            primary,
            house=house_bill,
            senate=senate_bill,
            state=state,
            status_options=self.status_options,
            include_joint=self.include_joint,
            today=self.today,
        )
        if result.skip_reason:
            self.summary.record_skip(record.id, result.skip_reason)
            return None
        return result

    async def load(self, item: ReconciliationResult) -> None:
        """
        Patch the staged item, then its slug, and queue it for publishing.

        A rejected slug (usually a duplicate) is recorded but does not undo
        the field update.
        """
        if item.field_data:
            await self.webflow.patch_item(item.item_id, item.field_data)

        if item.slug:
            if item.field_data:
                try:
                    await self.webflow.patch_item(item.item_id, {FIELD_SLUG: item.slug})
                except WebflowError as e:
                    self.summary.record_error(item.item_id, "slug", str(e))
                    self.logger.warning(f"Slug update failed for {item.item_id}: {e}")
            else:
                await self.webflow.patch_item(item.item_id, {FIELD_SLUG: item.slug})

        self.publish_queue.append(item.item_id)
        self.summary.record_update(UpdatedBill(
            item_id=item.item_id,
            house_number=item.house_number,
            senate_number=item.senate_number,
            headline=item.headline,
            status=item.status_label.value if item.status_label else None,
        ))
        self.logger.info(
            f"Updated {item.item_id} ({item.house_number or item.senate_number}): "
            f"{', '.join(sorted(item.field_data)) or 'slug'}"
        )
        await asyncio.sleep(self.record_delay)

    async def finalize(self):
        """Publish queued items in fixed-size chunks."""
        if not self.publish or not self.publish_queue:
            return

        chunks = chunked(self.publish_queue, self.publish_chunk_size)
        self.logger.info(f"Publishing {len(self.publish_queue)} items in {len(chunks)} chunk(s)")

        for i, chunk in enumerate(chunks):
            if i:
                await asyncio.sleep(self.publish_delay)
            try:
                await self.webflow.publish_items(chunk)
                self.summary.published += len(chunk)
            except Exception as e:
                message = f"Publish chunk {i + 1}/{len(chunks)} ({len(chunk)} items) failed: {e}"
                self.summary.record_error(None, "publish", message)
                self.logger.error(message)


async def sync_bills(**kwargs) -> SyncSummary:
    """Run one full sync with clients built from settings."""
    syncer = BillSyncer(**kwargs)
    return await syncer.run()
