"""
Script to sync Webflow bill items with LegiScan.

Run this to refresh status, timeline, sponsors, links, and slugs for every
bill in the CMS collection, then publish the changes.

Usage:
    uv run python scripts/sync_bills.py                  # Sync and publish
    uv run python scripts/sync_bills.py --no-publish     # Leave changes staged
    uv run python scripts/sync_bills.py --primary-only   # Hide joint authors
    uv run python scripts/sync_bills.py --json           # Print the summary as JSON
"""
import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from billsync.config.settings import settings
from billsync.ingestion.bill_sync import BillSyncer


async def sync_bills(publish: bool = True, include_joint: bool = True, as_json: bool = False):
    """
    Run one sync and print the summary.

    Args:
        publish: Publish updated items after patching
        include_joint: Show joint authors in the sponsor list
        as_json: Print the full summary as JSON instead of text
    """
    print(f"📜 {settings.APP_NAME} v{settings.APP_VERSION}: syncing Webflow bills with LegiScan...")
    print("=" * 60)

    syncer = BillSyncer(publish=publish, include_joint=include_joint)
    summary = await syncer.run()

    if as_json:
        print(summary.model_dump_json(indent=2))
        return summary

    print("\n✅ Sync Complete!")
    print("=" * 60)
    print(f"📊 Statistics:")
    print(f"   • Records:   {summary.total_records}")
    print(f"   • Processed: {summary.processed}")
    print(f"   • Updated:   {summary.updated}")
    print(f"   • Skipped:   {summary.skipped}")
    print(f"   • Errors:    {len(summary.errors)}")
    print(f"   • Published: {summary.published}")

    if summary.skip_reasons:
        print("\n⏭️  Skipped:")
        for skip in summary.skip_reasons:
            print(f"   • {skip.item_id}: {skip.reason}")

    if summary.errors:
        print("\n⚠️  Errors:")
        for error in summary.errors:
            print(f"   • [{error.stage}] {error.item_id or '-'}: {error.message}")

    return summary


async def main():
    """CLI entry point"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Sync Webflow bill items with LegiScan"
    )
    parser.add_argument(
        "--no-publish",
        action="store_true",
        help="Patch staged items only; skip the publish step"
    )
    parser.add_argument(
        "--primary-only",
        action="store_true",
        help="List chief authors only (default follows SPONSOR_INCLUDE_JOINT)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the run summary as JSON"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose or settings.DEBUG else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=settings.LOG_FORMAT)

    try:
        summary = await sync_bills(
            publish=settings.PUBLISH_AFTER_SYNC and not args.no_publish,
            include_joint=settings.SPONSOR_INCLUDE_JOINT and not args.primary_only,
            as_json=args.json,
        )

        # Exit with error code if there were errors
        sys.exit(1 if summary.errors else 0)

    except ValueError as e:
        # Missing credentials
        print(f"\n❌ Configuration error: {e}")
        sys.exit(2)
    except KeyboardInterrupt:
        print("\n\n⚠️  Sync interrupted by user")
        sys.exit(1)
    except Exception as e:
        print(f"\n\n❌ Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
