"""Browser automation utilities using Playwright."""

import logging
import random
from typing import Optional

from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    ElementHandle,
    Error as PlaywrightError,
    Page,
    Playwright,
    TimeoutError as PlaywrightTimeoutError,
)

from .exceptions import SectionTimeoutError
from .models import HotelRequest, ScraperConfig

logger = logging.getLogger(__name__)


# Realistic user agents for Chrome on different platforms
USER_AGENTS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/119.0.0.0 Safari/537.36",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
]

# Common viewport sizes
VIEWPORTS = [
    {"width": 1920, "height": 1080},
    {"width": 1366, "height": 768},
    {"width": 1536, "height": 864},
    {"width": 1440, "height": 900},
]

CONSENT_BUTTON = "button:has-text('Accept all')"


class BrowserManager:
    """Manages the Playwright browser that loads hotel detail pages."""

    def __init__(self, config: Optional[ScraperConfig] = None):
        self.config = config or ScraperConfig()
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self.page: Optional[Page] = None
        self._user_agent = random.choice(USER_AGENTS)
        self._viewport = random.choice(VIEWPORTS)

    async def start(self) -> Page:
        """Initialize browser and return page instance."""
        self.playwright = await async_playwright().start()

        self.browser = await self.playwright.chromium.launch(
            headless=self.config.headless,
            args=[
                "--disable-blink-features=AutomationControlled",
                "--disable-dev-shm-usage",
                "--no-sandbox",
                "--disable-setuid-sandbox",
                "--disable-infobars",
            ]
        )

        # Review and address labels are matched on English wording
        self.context = await self.browser.new_context(
            user_agent=self._user_agent,
            viewport=self._viewport,
            locale=self.config.locale,
        )

        await self.context.add_init_script("""
            Object.defineProperty(navigator, 'webdriver', {
                get: () => undefined
            });
        """)

        self.page = await self.context.new_page()
        self.page.set_default_timeout(self.config.default_timeout_ms)
        self.page.set_default_navigation_timeout(self.config.navigation_timeout_ms)

        return self.page

    async def close(self):
        """Clean up browser resources."""
        if self.context:
            await self.context.close()
        if self.browser:
            await self.browser.close()
        if self.playwright:
            await self.playwright.stop()

    async def __aenter__(self) -> Page:
        return await self.start()

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()


async def accept_consent(page: Page) -> bool:
    """Click through Google's cookie consent dialog if it is showing."""
    try:
        button = page.locator(CONSENT_BUTTON)
        if await button.count() > 0:
            await button.first.click()
            return True
    except PlaywrightError as e:
        logger.debug(f"Consent dialog not dismissed: {e}")
    return False


async def open_hotel_page(page: Page, request: HotelRequest) -> "PlaywrightDocument":
    """
    Navigate to a hotel detail page and wrap it for extraction.

    Args:
        page: Playwright page instance
        request: Request carrying the detail page URL

    Returns:
        The loaded page as a Document
    """
    logger.info(f"Navigating to hotel page: {request.url}")
    await page.goto(request.url, wait_until="domcontentloaded")
    if await accept_consent(page):
        logger.info("Accepted consent dialog")
        await page.wait_for_load_state("domcontentloaded")
    return PlaywrightDocument(page)


class PlaywrightNode:
    """A ``Node`` backed by a Playwright element handle."""

    def __init__(self, handle: ElementHandle):
        self.handle = handle

    async def query_all(self, selector: str) -> list["PlaywrightNode"]:
        handles = await self.handle.query_selector_all(selector)
        return [PlaywrightNode(h) for h in handles]

    async def parent(self) -> Optional["PlaywrightNode"]:
        js_handle = await self.handle.evaluate_handle("el => el.parentElement")
        element = js_handle.as_element()
        if element is None:
            return None
        return PlaywrightNode(element)

    async def click(self) -> None:
        await self.handle.click()

    async def inner_text(self) -> str:
        return await self.handle.inner_text()

    async def get_attribute(self, name: str) -> Optional[str]:
        return await self.handle.get_attribute(name)


class PlaywrightDocument:
    """A ``Document`` backed by a live Playwright page."""

    def __init__(self, page: Page):
        self.page = page

    @property
    def url(self) -> str:
        return self.page.url

    async def query_all(self, selector: str) -> list[PlaywrightNode]:
        handles = await self.page.query_selector_all(selector)
        return [PlaywrightNode(h) for h in handles]

    async def wait_for_selector(self, selector: str, timeout_ms: int) -> PlaywrightNode:
        try:
            handle = await self.page.wait_for_selector(selector, timeout=timeout_ms)
        except PlaywrightTimeoutError as e:
            raise SectionTimeoutError(selector, timeout_ms) from e
        if handle is None:
            raise SectionTimeoutError(selector, timeout_ms)
        return PlaywrightNode(handle)

    async def wait_for_timeout(self, timeout_ms: int) -> None:
        await self.page.wait_for_timeout(timeout_ms)

    async def wait_for_idle(self, timeout_ms: int) -> bool:
        """Wait for the network to go idle; False if it does not in time."""
        try:
            await self.page.wait_for_load_state("networkidle", timeout=timeout_ms)
            return True
        except PlaywrightTimeoutError:
            return False
