"""Hotel detail page extractor for Google Travel."""

import asyncio
import logging
from typing import Optional

from . import page_selectors as sel
from .dom import (
    Document,
    Node,
    ancestor,
    first_attribute,
    first_text,
    query_first,
    wait_for_last,
)
from .models import HotelRecord, HotelRequest, PriceEntry, ScraperConfig
from .page_selectors import PRICE_ROW, PriceRowShape
from .parsing import (
    build_provider_link,
    dedupe_by_provider,
    normalize_photo_url,
    parse_price,
    parse_review_label,
)

logger = logging.getLogger(__name__)


async def extract_hotel_detail(
    document: Document,
    request: Optional[HotelRequest] = None,
    config: Optional[ScraperConfig] = None,
    log: Optional[logging.Logger] = None,
) -> HotelRecord:
    """
    Scrape one hotel detail page into a HotelRecord.

    The page must already be loaded. Each tab (prices, reviews, about,
    photos) is opened in turn and read; fields a listing does not render are
    left empty.

    Args:
        document: The loaded hotel page
        request: Request that produced the page
        config: Scraper configuration
        log: Logger for the diagnostic summary line

    Returns:
        The extracted HotelRecord

    Raises:
        ElementNotFoundError: The page has no hotel title heading
        SectionTimeoutError: One of the four tab sections never appeared
    """
    config = config or ScraperConfig()
    log = log or logger

    title_node = await wait_for_last(document, sel.TITLE, config.default_timeout_ms)
    title = await title_node.inner_text()
    google_id = await first_attribute(document, sel.PLACE_ID, sel.PLACE_ID_ATTRIBUTE)
    url = document.url

    prices_tab, reviews_tab, about_tab, photos_tab = await wait_for_tabs(document, config)

    await prices_tab.click()
    prices = await scrape_prices(document, config.travel_origin)

    await reviews_tab.click()
    rating, reviews = await scrape_reviews(document)

    await about_tab.click()
    address, website, phone = await scrape_about(document)

    await photos_tab.click()
    await settle_photos(document, config)
    photos = await scrape_photos(document)

    record = HotelRecord(
        url=url,
        title=title,
        google_id=google_id,
        website=website,
        address=address,
        phone=phone,
        photos=tuple(photos),
        rating=rating,
        reviews=reviews,
        prices=tuple(prices),
    )

    log.info(
        f"Parsed detail ({title}) [{google_id}]",
        extra={"url": url, "request_url": request.url if request else url},
    )
    return record


async def wait_for_tabs(document: Document, config: ScraperConfig) -> list[Node]:
    """
    Wait for the prices, reviews, about and photos sections together.

    Every wait runs to completion; the first failure in tab order is raised.
    """
    results = await asyncio.gather(
        document.wait_for_selector(sel.PRICES_TAB, config.tab_timeout_ms),
        document.wait_for_selector(sel.REVIEWS_TAB, config.tab_timeout_ms),
        document.wait_for_selector(sel.ABOUT_TAB, config.tab_timeout_ms),
        document.wait_for_selector(sel.PHOTOS_TAB, config.tab_timeout_ms),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return list(results)


async def scrape_prices(
    document: Document,
    travel_origin: str,
    shape: PriceRowShape = PRICE_ROW,
) -> list[PriceEntry]:
    """Read every provider offer on the prices tab, one per provider."""
    buttons = await document.query_all(shape.button)
    rows = await asyncio.gather(
        *(_scrape_price_row(button, travel_origin, shape) for button in buttons)
    )
    entries = [entry for entry in rows if entry is not None]
    logger.debug(f"Found {len(entries)} priced rows out of {len(buttons)} buttons")
    return dedupe_by_provider(entries)


async def _scrape_price_row(
    button: Node,
    travel_origin: str,
    shape: PriceRowShape,
) -> Optional[PriceEntry]:
    # Providers listing several rates use a different row layout; those rows
    # are skipped rather than mis-read
    try:
        row = await ancestor(button, shape.row_depth)
        if row is None:
            return None
        wrapper = await ancestor(row, shape.link_depth)
        if wrapper is None:
            return None
        href = await wrapper.get_attribute(shape.link_attribute)
        if href is None:
            return None

        label = await query_first(row, shape.provider_label)
        price_node = await query_first(row, shape.price_text)
        if label is None or price_node is None:
            return None

        provider = await label.inner_text()
        price = parse_price(await price_node.inner_text())
        if price is None:
            return None
    except Exception as e:
        logger.debug(f"Skipping unreadable price row: {e}")
        return None

    return PriceEntry(
        provider=provider,
        price=price,
        link=build_provider_link(href, travel_origin),
    )


async def scrape_reviews(document: Document) -> tuple[float, int]:
    """Read the rating and review count from the reviews tab summary."""
    label = await first_attribute(document, sel.REVIEW_SUMMARY, "aria-label")
    if label is None:
        logger.debug("No review summary on page")
    return parse_review_label(label)


async def scrape_about(
    document: Document,
) -> tuple[Optional[str], Optional[str], Optional[str]]:
    """
    Read address, website and phone from the about tab.

    Returns:
        (address, website, phone), each None when not rendered
    """
    # The address span carries its value in href, not in its text
    address = await first_attribute(document, sel.ADDRESS, "href")
    website = await first_attribute(document, sel.WEBSITE, "href")
    phone = await first_text(document, sel.PHONE)
    return address, website, phone


async def settle_photos(document: Document, config: ScraperConfig) -> None:
    """Give lazy-loaded gallery images time to receive their src."""
    if config.photo_settle_strategy == "network_idle":
        if not await document.wait_for_idle(config.photo_settle_ms):
            logger.debug(f"Network not idle after {config.photo_settle_ms}ms, reading photos anyway")
        return
    await document.wait_for_timeout(config.photo_settle_ms)


async def scrape_photos(document: Document) -> list[str]:
    """Collect absolute photo URLs from the photos tab, in page order."""
    photos = []
    for image in await document.query_all(sel.PHOTO_IMAGES):
        url = normalize_photo_url(await image.get_attribute("src"))
        if url:
            photos.append(url)
    return photos
