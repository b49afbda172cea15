"""Text parsing helpers for values scraped off the hotel detail page."""

import logging
import re
from typing import Iterable, Optional, TypeVar, Union

logger = logging.getLogger(__name__)

_NON_PRICE_CHARS = re.compile(r"[^0-9.]")
_LEADING_INT = re.compile(r"^\d+")

T = TypeVar("T")


def parse_price(text: str) -> Optional[float]:
    """
    Parse a displayed price into a number.

    Every character that is not a digit or a dot is dropped first, so
    "$1,234.50/night" becomes 1234.5.

    Returns:
        The price, or None if nothing numeric is left
    """
    cleaned = _NON_PRICE_CHARS.sub("", text or "")
    try:
        return float(cleaned)
    except ValueError:
        return None


def parse_review_label(label: Optional[str]) -> tuple[float, int]:
    """
    Parse a review summary aria-label such as "4.5 out of 5, from 1,234 reviews".

    Returns:
        (rating, review_count), each 0 when the label is missing or unreadable
    """
    if not label:
        return 0, 0

    rating = 0.0
    out_at = label.find("out")
    if out_at != -1:
        try:
            rating = float(label[:out_at].strip())
        except ValueError:
            logger.debug(f"Unreadable rating in review label: {label!r}")

    reviews = 0
    from_at = label.find("from")
    if from_at != -1:
        count_text = (
            label[from_at:]
            .replace("from", "", 1)
            .replace("reviews", "")
            .replace(",", "")
            .strip()
        )
        match = _LEADING_INT.match(count_text)
        if match:
            reviews = int(match.group(0))

    return rating, reviews


def normalize_photo_url(src: Optional[str]) -> Optional[str]:
    """Make protocol-relative image URLs absolute; None stays None."""
    if src is None:
        return None
    if src.startswith("//"):
        return f"https:{src}"
    return src


def build_provider_link(href: str, origin: str) -> str:
    """Prefix a relative provider href with the travel site origin."""
    return f"{origin}{href}"


def js_number(value: float) -> Union[int, float]:
    """Integral floats become ints, as JavaScript prints them (5000, 1234.5)."""
    if float(value).is_integer():
        return int(value)
    return float(value)


def format_number(value: float) -> str:
    """Render a number the way the page's JavaScript would."""
    return str(js_number(value))


def derive_price_range(prices: list[float]) -> Optional[str]:
    """
    Summarise prices as a display range.

    No prices gives None, a single price gives its value, several give
    "min - max".
    """
    if not prices:
        return None
    if len(prices) == 1:
        return format_number(prices[0])
    return f"{format_number(min(prices))} - {format_number(max(prices))}"


def dedupe_by_provider(entries: Iterable[T]) -> list[T]:
    """Keep the first entry for each provider, preserving order."""
    kept: dict[str, T] = {}
    for entry in entries:
        provider = entry.provider
        if provider not in kept:
            kept[provider] = entry
        elif entry.price < kept[provider].price:
            # Offers are expected cheapest-first; the first one still wins
            logger.debug(
                f"Later offer from {provider} is cheaper "
                f"({entry.price} < {kept[provider].price}), keeping the first"
            )
    return list(kept.values())
