#!/usr/bin/env python3
"""Open the uigen app in a visible Chromium window for manual poking.

Usage:
    python scripts/open_browser.py [--url http://localhost:3000] [--slow-mo 100]

The browser stays open until you press Ctrl+C.
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from uigen.util.config import resolve_app_url  # noqa: E402


class PlaywrightUnavailable(RuntimeError):
    """Raised when Playwright or Chromium are missing."""


def ensure_playwright():
    """Import Playwright, raising a clear error if unavailable."""
    try:
        from playwright.async_api import async_playwright  # type: ignore
        return async_playwright
    except ImportError as exc:  # pragma: no cover - environment dependent
        raise PlaywrightUnavailable(
            "Playwright is not installed. Install with `pip install playwright` and run `playwright install chromium`."
        ) from exc


async def open_browser(url: str, slow_mo: int = 100, headless: bool = False) -> None:
    async_playwright = ensure_playwright()
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=headless, slow_mo=slow_mo)
        page = await browser.new_page()

        print(f"Opening browser at {url}...")
        await page.goto(url, wait_until="networkidle")
        print("Browser opened successfully")
        print("Page title:", await page.title())

        try:
            await asyncio.Event().wait()
        finally:
            await browser.close()


def main():
    parser = argparse.ArgumentParser(description="Open the uigen app in Chromium")
    parser.add_argument("--url", type=str, default=None, help="App URL (default: UIGEN_APP_URL)")
    parser.add_argument("--slow-mo", type=int, default=100, help="Delay between actions in ms")
    parser.add_argument("--headless", action="store_true", help="Run without a window")
    args = parser.parse_args()

    try:
        asyncio.run(open_browser(resolve_app_url(args.url), slow_mo=args.slow_mo, headless=args.headless))
    except PlaywrightUnavailable as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
