"""Data models for the Google Hotels detail scraper."""

import json
from dataclasses import dataclass
from typing import Literal, Optional

from pydantic import BaseModel, Field

from .parsing import derive_price_range, js_number


@dataclass(frozen=True)
class HotelRequest:
    """The page request a crawler hands to the extractor."""
    url: str


@dataclass(frozen=True)
class PriceEntry:
    """One provider offer from the prices tab."""
    provider: str
    price: float
    link: str

    def to_dict(self) -> dict:
        return {
            "provider": self.provider,
            "price": js_number(self.price),
            "link": self.link,
        }


@dataclass(frozen=True)
class HotelRecord:
    """Structured data scraped from one hotel detail page.

    ``thumbnail`` and ``price_range`` are derived from ``photos`` and
    ``prices`` so they can never disagree with them.
    """
    url: str
    title: str
    google_id: Optional[str] = None
    website: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    photos: tuple[str, ...] = ()
    rating: float = 0
    reviews: int = 0
    prices: tuple[PriceEntry, ...] = ()

    @property
    def thumbnail(self) -> Optional[str]:
        return self.photos[0] if self.photos else None

    @property
    def price_range(self) -> Optional[str]:
        return derive_price_range([entry.price for entry in self.prices])

    def to_dict(self) -> dict:
        """Convert to the camelCase JSON shape, dropping absent optionals."""
        data = {
            "url": self.url,
            "googleId": self.google_id,
            "title": self.title,
            "website": self.website,
            "address": self.address,
            "phone": self.phone,
            "photos": list(self.photos),
            "thumbnail": self.thumbnail,
            "rating": self.rating,
            "reviews": self.reviews,
            "prices": [entry.to_dict() for entry in self.prices],
            "priceRange": self.price_range,
        }
        return {key: value for key, value in data.items() if value is not None}


class ScraperConfig(BaseModel):
    """Extractor and browser configuration."""
    headless: bool = True
    locale: str = "en-US"
    default_timeout_ms: int = 30000
    navigation_timeout_ms: int = 60000
    tab_timeout_ms: int = 30000
    # Lazy-loaded gallery images have no completion signal of their own
    photo_settle_ms: int = 2000
    photo_settle_strategy: Literal["delay", "network_idle"] = "delay"
    travel_origin: str = Field(default="https://www.google.co.in/travel")

    @classmethod
    def from_json_file(cls, filepath: str) -> "ScraperConfig":
        """Load configuration from JSON file."""
        with open(filepath, "r") as f:
            data = json.load(f)
        return cls(**data)
