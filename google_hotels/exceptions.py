"""Error types raised by the hotel detail extractor."""

from typing import Optional


class ScraperError(Exception):
    """Base class for extraction failures."""


class ElementNotFoundError(ScraperError):
    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(f"No element matches selector: {selector}")


class SectionTimeoutError(ScraperError):
    def __init__(self, selector: str, timeout_ms: Optional[int] = None):
        self.selector = selector
        self.timeout_ms = timeout_ms
        if timeout_ms is None:
            message = f"Section never appeared: {selector}"
        else:
            message = f"Section did not appear within {timeout_ms}ms: {selector}"
        super().__init__(message)
