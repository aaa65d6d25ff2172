"""
Base sync class.

Runs fetch -> transform -> load for each CMS record, one at a time, and
keeps one record's failure from stopping the run.
"""
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import AsyncGenerator, Generic, Optional, TypeVar
import logging

from billsync.models.cms import CmsBillRecord
from billsync.models.sync import SyncSummary

T = TypeVar('T')


class BaseSync(ABC, Generic[T]):
    """
    Base class for record-by-record syncs.

    Subclasses yield records from fetch_data(), turn each into an update in
    transform() (returning None to skip it), and write it in load().
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.summary = SyncSummary()
        self._stage = "lookup"

    async def setup(self):
        """Prepare clients or reference data before the first record."""

    async def teardown(self):
        """Release resources. Always called, even after a fatal error."""

    async def finalize(self):
        """Run once after every record has been processed."""

    @abstractmethod
    async def fetch_data(self, **kwargs) -> AsyncGenerator[CmsBillRecord, None]:
        """
        Fetch the records to sync.

        Yields:
            CMS records in source order
        """
        pass

    @abstractmethod
    async def transform(self, record: CmsBillRecord) -> Optional[T]:
        """
        Build the update for a record.

        Returns:
            The update, or None if the record was skipped
        """
        pass

    @abstractmethod
    async def load(self, item: T) -> None:
        """Write one update to the destination."""
        pass

    async def process_item(self, record: CmsBillRecord):
        """
        Process a single record. Errors are logged and recorded, not raised.

        Args:
            record: CMS record to sync
        """
        self.summary.processed += 1
        try:
            self._stage = "lookup"
            item = await self.transform(record)
            if item is None:
                return

            self._stage = "patch"
            await self.load(item)

        except Exception as e:
            self.summary.record_error(record.id, self._stage, str(e))
            self.logger.error(f"Error processing {record.id} ({self._stage}): {e}", exc_info=True)

    async def run(self, **kwargs) -> SyncSummary:
        """
        Execute the full sync.

        Args:
            **kwargs: Passed to fetch_data()

        Returns:
            SyncSummary with counts and per-record details
        """
        self.logger.info(f"Starting {self.__class__.__name__}...")
        self.summary = SyncSummary()

        try:
            await self.setup()

            async for record in self.fetch_data(**kwargs):
                self.summary.total_records += 1
                await self.process_item(record)

            await self.finalize()

        except KeyboardInterrupt:
            self.logger.warning("Sync interrupted by user")
            raise

        except Exception as e:
            self.logger.error(f"Fatal error during sync: {e}")
            raise

        finally:
            self.summary.completed_at = datetime.now(timezone.utc)

            duration = self.summary.completed_at - self.summary.timestamp
            self.logger.info(
                f"Sync complete. "
                f"Processed: {self.summary.processed}, "
                f"Updated: {self.summary.updated}, "
                f"Skipped: {self.summary.skipped}, "
                f"Errors: {len(self.summary.errors)}, "
                f"Published: {self.summary.published}, "
                f"Duration: {duration}"
            )

            await self.teardown()

        return self.summary
