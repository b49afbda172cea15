"""Selectors for the Google Travel hotel detail page."""

from dataclasses import dataclass

# Pages may render several heading-role h1s; the last one is the hotel name
TITLE = 'h1[role="heading"]'
PLACE_ID = "span[data-place-id]"
PLACE_ID_ATTRIBUTE = "data-place-id"

PRICES_TAB = 'div[id="prices"]'
REVIEWS_TAB = 'div[id="reviews"]'
ABOUT_TAB = 'div[id="details"]'
PHOTOS_TAB = 'div[id="photos"]'

REVIEW_SUMMARY = 'div[aria-label*="out of"][role="text"]'

ADDRESS = 'span[aria-label*="hotel address is"]'
WEBSITE = 'a[aria-label="Website"]'
PHONE = 'span[aria-label*="call this hotel"]'

PHOTO_IMAGES = 'span[id="photos"] img[alt*="Photo"]'


@dataclass(frozen=True)
class PriceRowShape:
    """
    Markup contract for one provider row on the prices tab.

    Each row is found through its "Visit site" button. The row container sits
    ``row_depth`` ancestors above the button and is wrapped by the provider
    link ``link_depth`` ancestors above the row. The label and price paths are
    resolved inside the row.
    """
    button: str = 'button[aria-label^="Visit site for"]'
    row_depth: int = 2
    link_depth: int = 1
    link_attribute: str = "href"
    provider_label: str = "div:nth-of-type(1) > div > span > span"
    price_text: str = "div:nth-of-type(2) > span > span > span > span"


PRICE_ROW = PriceRowShape()
