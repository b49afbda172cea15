"""Google Hotels Detail Scraper Package"""

__version__ = "1.0.0"

from .detail import extract_hotel_detail
from .dom import SoupDocument
from .exceptions import ElementNotFoundError, ScraperError, SectionTimeoutError
from .models import HotelRecord, HotelRequest, PriceEntry, ScraperConfig
