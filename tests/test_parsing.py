"""
Tests for google_hotels.parsing — pure text parsing (no page needed).
"""

from google_hotels.models import PriceEntry
from google_hotels.parsing import (
    build_provider_link,
    dedupe_by_provider,
    derive_price_range,
    format_number,
    js_number,
    normalize_photo_url,
    parse_price,
    parse_review_label,
)


class TestParsePrice:
    def test_strips_currency_and_separators(self):
        assert parse_price("$1,234.50/night") == 1234.50

    def test_rupee_price(self):
        assert parse_price("₹5,200") == 5200

    def test_plain_number(self):
        assert parse_price("89") == 89

    def test_no_digits(self):
        assert parse_price("Sold out") is None

    def test_empty(self):
        assert parse_price("") is None

    def test_several_dots_unreadable(self):
        assert parse_price("1.2.3") is None


class TestParseReviewLabel:
    def test_full_label(self):
        assert parse_review_label("4.5 out of 5, from 1,234 reviews") == (4.5, 1234)

    def test_large_count_with_several_commas(self):
        rating, reviews = parse_review_label("3.9 out of 5, from 1,234,567 reviews")
        assert rating == 3.9
        assert reviews == 1234567

    def test_missing_label(self):
        assert parse_review_label(None) == (0, 0)
        assert parse_review_label("") == (0, 0)

    def test_no_review_count(self):
        rating, reviews = parse_review_label("4.2 out of 5")
        assert rating == 4.2
        assert reviews == 0

    def test_unreadable_rating(self):
        rating, reviews = parse_review_label("Rated out of 5, from 12 reviews")
        assert rating == 0
        assert reviews == 12


class TestNormalizePhotoUrl:
    def test_protocol_relative(self):
        assert normalize_photo_url("//lh3.example.com/img.jpg") == "https://lh3.example.com/img.jpg"

    def test_absolute_unchanged(self):
        assert normalize_photo_url("https://lh3.example.com/img.jpg") == "https://lh3.example.com/img.jpg"
        assert normalize_photo_url("http://cdn.example.com/a.png") == "http://cdn.example.com/a.png"

    def test_missing_src(self):
        assert normalize_photo_url(None) is None


class TestPriceRange:
    def test_no_prices(self):
        assert derive_price_range([]) is None

    def test_single_price(self):
        assert derive_price_range([5200.0]) == "5200"

    def test_single_fractional_price(self):
        assert derive_price_range([1234.5]) == "1234.5"

    def test_several_prices_min_max(self):
        assert derive_price_range([5450.0, 5200.0, 7100.0]) == "5200 - 7100"

    def test_format_number(self):
        assert format_number(5000.0) == "5000"
        assert format_number(99.99) == "99.99"

    def test_js_number_types(self):
        assert js_number(5200.0) == 5200
        assert isinstance(js_number(5200.0), int)
        assert isinstance(js_number(1234.5), float)


class TestDedupeByProvider:
    def test_first_occurrence_wins(self):
        entries = [
            PriceEntry("Booking.com", 5200, "a"),
            PriceEntry("Agoda", 5450, "b"),
            PriceEntry("Booking.com", 6000, "c"),
        ]
        result = dedupe_by_provider(entries)
        assert [e.provider for e in result] == ["Booking.com", "Agoda"]
        assert result[0].link == "a"

    def test_cheaper_later_duplicate_still_dropped(self):
        entries = [
            PriceEntry("Agoda", 5450, "first"),
            PriceEntry("Agoda", 4000, "second"),
        ]
        result = dedupe_by_provider(entries)
        assert len(result) == 1
        assert result[0].link == "first"

    def test_empty(self):
        assert dedupe_by_provider([]) == []


def test_build_provider_link():
    link = build_provider_link("/clk?pc=booking-1", "https://www.google.co.in/travel")
    assert link == "https://www.google.co.in/travel/clk?pc=booking-1"
