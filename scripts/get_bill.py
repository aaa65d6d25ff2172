"""
Look up bills on LegiScan by number.

Usage:
    uv run python scripts/get_bill.py HF12
    uv run python scripts/get_bill.py HF12,SF916
    uv run python scripts/get_bill.py HR1234 --state US --json
"""
import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from billsync.config.settings import settings
from billsync.ingestion.bill_lookup import lookup_bills, parse_bill_numbers


async def main():
    """CLI entry point"""
    import argparse

    parser = argparse.ArgumentParser(description="Look up bills on LegiScan")
    parser.add_argument("numbers", help="Bill number or comma-separated list (e.g. HF12,SF916)")
    parser.add_argument("--state", default=settings.STATE_JURISDICTION, help="LegiScan state code")
    parser.add_argument("--year", default=None, help="Session year filter")
    parser.add_argument("--json", action="store_true", help="Print the full report as JSON")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or settings.DEBUG else logging.INFO,
        format=settings.LOG_FORMAT
    )

    try:
        numbers = parse_bill_numbers(numbers=args.numbers)
        report = await lookup_bills(numbers, state=args.state, year=args.year)
    except ValueError as e:
        print(f"❌ {e}")
        sys.exit(2)

    if args.json:
        print(report.model_dump_json(indent=2))
    else:
        print(f"🔍 Requested: {', '.join(report.requested)}")
        print("=" * 60)
        for bill in report.bills:
            print(f"\n📜 {bill.bill_number}: {bill.title[:80]}")
            print(f"   Status: {bill.status_text} ({bill.status_label})")
            print(f"   Sponsors: {len(bill.sponsors)}")
            print(f"   Link: {bill.best_link or 'N/A'}")
        for error in report.errors:
            print(f"\n❌ {error.bill_number}: {error.error}")

    sys.exit(0 if report.success else 1)


if __name__ == "__main__":
    asyncio.run(main())
