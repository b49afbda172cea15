"""
Shared fixtures for extractor tests.

Hotel pages are served from saved HTML through SoupDocument, so no browser
is needed.
"""

import os

import pytest

from google_hotels.dom import SoupDocument

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")

HOTEL_URL = "https://www.google.com/travel/hotels/entity/ChIJ9bLalitJaipur"

TABS = """
<div id="prices" role="tab">Prices</div>
<div id="reviews" role="tab">Reviews</div>
<div id="details" role="tab">About</div>
<div id="photos" role="tab">Photos</div>
"""


def fixture_path(filename: str) -> str:
    return os.path.join(FIXTURES_DIR, filename)


def price_row(provider: str, price: str, href: str = "/clk?pc=x") -> str:
    """Markup for one well-formed provider row on the prices tab."""
    return f"""
<a href="{href}">
  <div class="row">
    <div><div><span><span>{provider}</span></span></div></div>
    <div><span><span><span><span>{price}</span></span></span></span></div>
    <span><button aria-label="Visit site for {provider}">Visit site</button></span>
  </div>
</a>
"""


def hotel_page(body: str = "", title: str = "Test Hotel", tabs: str = TABS) -> str:
    """A minimal hotel page: title heading, tab sections, plus body."""
    return f"""
<html><body>
<h1 role="heading">{title}</h1>
{tabs}
{body}
</body></html>
"""


@pytest.fixture
def detail_html():
    with open(fixture_path("hotel_detail.html"), encoding="utf-8") as f:
        return f.read()


@pytest.fixture
def detail_document(detail_html):
    return SoupDocument(detail_html, HOTEL_URL)
