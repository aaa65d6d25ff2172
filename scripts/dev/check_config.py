"""
Test script to verify configuration and API access.

Run with: uv run python scripts/dev/check_config.py
"""
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from billsync.config import settings
from billsync.ingestion.diagnostics import check_legiscan, check_webflow
from billsync.ingestion.legiscan import LegiScanClient
from billsync.ingestion.webflow import WebflowClient
from billsync.models.lookup import DiagnosticsReport


def _preview(value):
    return value[:8] + "..." if value else None


async def main():
    print("=" * 50)
    print(f"Configuration Test: {settings.APP_NAME} v{settings.APP_VERSION}")
    print("=" * 50)

    for name in ("LEGISCAN_API_KEY", "WEBFLOW_API_TOKEN", "WEBFLOW_SITE_ID"):
        value = getattr(settings, name)
        if value:
            print(f"✅ {name} loaded: {_preview(value)}")
        else:
            print(f"❌ {name} not found!")

    print(f"✅ Collection: {settings.WEBFLOW_COLLECTION_ID}")
    print(f"✅ State jurisdiction: {settings.STATE_JURISDICTION}")

    report = DiagnosticsReport()

    if settings.LEGISCAN_API_KEY:
        async with LegiScanClient() as legiscan:
            await check_legiscan(legiscan, settings.STATE_JURISDICTION, report)

    if settings.WEBFLOW_API_TOKEN:
        async with WebflowClient() as webflow:
            await check_webflow(webflow, settings.WEBFLOW_SITE_ID, report)

    print()
    for test in report.tests:
        icon = "✅" if test.success else "❌"
        print(f"{icon} {test.test}: {test.message}")

    print("\n" + "=" * 50)
    print(f"Passed: {report.passed}, Failed: {report.failed}")
    print("=" * 50)
    sys.exit(0 if report.success and report.tests else 1)


if __name__ == "__main__":
    asyncio.run(main())
