"""Command line runner: extract one Google Travel hotel page to JSON."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .browser import BrowserManager, open_hotel_page
from .detail import extract_hotel_detail
from .dom import SoupDocument
from .exceptions import ScraperError
from .models import HotelRecord, HotelRequest, ScraperConfig

# stdout carries the JSON record, so logs go to stderr
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr),
    ]
)
logger = logging.getLogger(__name__)


async def run_extractor(request: HotelRequest, config: ScraperConfig) -> HotelRecord:
    """
    Open the request URL in a browser and extract its hotel record.

    Args:
        request: Request carrying the hotel detail page URL
        config: Scraper configuration

    Returns:
        The extracted HotelRecord
    """
    browser_manager = BrowserManager(config)

    try:
        page = await browser_manager.start()
        logger.info("Browser started successfully")

        document = await open_hotel_page(page, request)
        return await extract_hotel_detail(document, request, config)

    finally:
        await browser_manager.close()
        logger.info("Browser closed")


async def run_from_snapshot(
    html_path: str,
    request: HotelRequest,
    config: ScraperConfig,
) -> HotelRecord:
    """Extract a hotel record from a saved HTML snapshot of its page."""
    logger.info(f"Reading snapshot: {html_path}")
    document = SoupDocument.from_file(html_path, request.url)
    return await extract_hotel_detail(document, request, config)


def load_config(config_path: Optional[str] = None) -> ScraperConfig:
    """
    Load configuration from file or use defaults.

    Args:
        config_path: Path to config JSON file

    Returns:
        ScraperConfig object
    """
    if config_path:
        logger.info(f"Loading config from: {config_path}")
        return ScraperConfig.from_json_file(config_path)

    default_paths = ["config.json", "google_hotels/config.json"]
    for path in default_paths:
        if Path(path).exists():
            logger.info(f"Loading config from: {path}")
            return ScraperConfig.from_json_file(path)

    logger.info("Using default configuration")
    return ScraperConfig()


def parse_args(argv: Optional[list[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Google Hotels Scraper - Extract one hotel detail page from Google Travel"
    )

    parser.add_argument(
        "url",
        type=str,
        help="Hotel detail page URL",
    )

    parser.add_argument(
        "--html",
        type=str,
        help="Read a saved HTML snapshot of the page instead of opening a browser",
        default=None,
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration JSON file",
        default=None,
    )

    parser.add_argument(
        "--no-headless",
        action="store_true",
        help="Run browser in visible mode (for debugging)",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None):
    """Main entry point."""
    args = parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    config = load_config(args.config)
    if args.no_headless:
        config.headless = False

    request = HotelRequest(url=args.url)

    try:
        if args.html:
            record = asyncio.run(run_from_snapshot(args.html, request, config))
        else:
            record = asyncio.run(run_extractor(request, config))
    except KeyboardInterrupt:
        logger.info("Extraction interrupted by user")
        sys.exit(130)
    except ScraperError as e:
        logger.error(f"Extraction failed: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected failure: {e}")
        sys.exit(1)

    print(json.dumps(record.to_dict(), indent=2, ensure_ascii=False))
    sys.exit(0)


if __name__ == "__main__":
    main()
