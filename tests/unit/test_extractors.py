"""Unit tests for extractor selector chains against a fake page."""

import pytest

from supplier_scraper.scrapers.amazon_scraper import AmazonExtractor
from supplier_scraper.scrapers.base_scraper import (
    first_image_url,
    first_outer_html,
    first_text,
    joined_text,
)
from supplier_scraper.scrapers.generic_scraper import GenericExtractor
from supplier_scraper.scrapers.homedepot_scraper import HomeDepotExtractor
from supplier_scraper.scrapers.lowes_scraper import LowesExtractor
from supplier_scraper.scrapers.richelieu_scraper import RichelieuExtractor

ALL_EXTRACTORS = [
    RichelieuExtractor,
    HomeDepotExtractor,
    LowesExtractor,
    AmazonExtractor,
    GenericExtractor,
]

OPTIONAL_FIELDS = [
    "name",
    "sku",
    "price",
    "msrp",
    "description",
    "brand",
    "image_url",
    "category_path",
]


class TestFirstText:
    """Tests for ordered selector fallback."""

    @pytest.mark.unit
    def test_returns_first_candidate_in_priority_order(self, fake_page):
        """Should honor list order, not page order."""
        page = fake_page({".b": "second", ".a": "first"})

        assert first_text(page, (".a", ".b")) == "first"

    @pytest.mark.unit
    def test_skips_blank_matches(self, fake_page):
        """Should move on when a matched element has only whitespace."""
        page = fake_page({".a": "   \n ", ".b": "value"})

        assert first_text(page, (".a", ".b")) == "value"

    @pytest.mark.unit
    def test_trims_whitespace(self, fake_page):
        page = fake_page({".a": "\n  Hinge 35mm  \t"})

        assert first_text(page, (".a",)) == "Hinge 35mm"

    @pytest.mark.unit
    def test_returns_none_when_nothing_matches(self, fake_page):
        assert first_text(fake_page(), (".a", ".b")) is None

    @pytest.mark.unit
    def test_page_faults_propagate(self, fake_page):
        """Should not hide faults from the page itself."""
        page = fake_page()
        page.failures["query_selector"] = RuntimeError("Target page has been closed")

        with pytest.raises(RuntimeError, match="closed"):
            first_text(page, (".a",))


class TestOtherLookups:
    """Tests for image, outerHTML and breadcrumb helpers."""

    @pytest.mark.unit
    def test_image_url_resolved_against_page_url(self, fake_page, fake_element):
        page = fake_page(
            {"img.main": fake_element(attrs={"src": "/media/p/123.jpg"})},
            url="https://www.example.com/product/123",
        )

        assert first_image_url(page, ("img.main",)) == "https://www.example.com/media/p/123.jpg"

    @pytest.mark.unit
    def test_absolute_image_url_kept(self, fake_page, fake_element):
        page = fake_page({"img": fake_element(attrs={"src": "https://cdn.example.com/a.png"})})

        assert first_image_url(page, ("img",)) == "https://cdn.example.com/a.png"

    @pytest.mark.unit
    def test_image_without_src_skipped(self, fake_page, fake_element):
        page = fake_page(
            {
                "img.a": fake_element(attrs={}),
                "img.b": fake_element(attrs={"src": "https://cdn.example.com/b.png"}),
            }
        )

        assert first_image_url(page, ("img.a", "img.b")) == "https://cdn.example.com/b.png"

    @pytest.mark.unit
    def test_outer_html_truncated_to_limit(self, fake_page, fake_element):
        page = fake_page({".price": fake_element(html="<span>" + "x" * 1000 + "</span>")})

        html = first_outer_html(page, (".price",))

        assert len(html) == 500
        assert html.startswith("<span>")

    @pytest.mark.unit
    def test_joined_text_builds_breadcrumb(self, fake_page, fake_element):
        page = fake_page(
            {
                ".breadcrumb a": [
                    fake_element(text=" Home "),
                    fake_element(text=""),
                    fake_element(text="Hardware"),
                    fake_element(text="Hinges"),
                ]
            }
        )

        assert joined_text(page, ".breadcrumb a") == "Home > Hardware > Hinges"

    @pytest.mark.unit
    def test_joined_text_none_without_matches(self, fake_page):
        assert joined_text(fake_page(), ".breadcrumb a") is None


class TestEmptyPages:
    """Every extractor must tolerate a page with none of its elements."""

    @pytest.mark.unit
    @pytest.mark.parametrize("extractor_class", ALL_EXTRACTORS)
    def test_empty_page_yields_empty_record(self, extractor_class, fake_page):
        """Should return a record with every optional field empty, not raise."""
        page = fake_page(url="https://shop.example.com/item/1")

        record = extractor_class().extract(page)

        for field_name in OPTIONAL_FIELDS:
            assert getattr(record, field_name) is None, field_name
        assert record.source_url == "https://shop.example.com/item/1"


class TestHomeDepotExtractor:
    @pytest.mark.unit
    def test_extracts_all_fields(self, fake_page, fake_element):
        page = fake_page(
            {
                'h1[data-testid="product-title"]': "Cordless Drill",
                '[data-testid="product-sku"]': "Store SKU #1000123",
                ".price__dollars": "129",
                ".product-details__brand": "DEWALT",
                '[data-testid="product-image"] img': fake_element(
                    attrs={"src": "https://images.thdstatic.com/drill.jpg"}
                ),
            },
            url="https://www.homedepot.com/p/drill/1000123",
        )

        record = HomeDepotExtractor().extract(page)

        assert record.name == "Cordless Drill"
        assert record.sku == "Store SKU #1000123"
        assert record.price == "129"
        assert record.brand == "DEWALT"
        assert record.image_url == "https://images.thdstatic.com/drill.jpg"
        assert record.msrp is None
        assert record.category_path is None


class TestLowesExtractor:
    @pytest.mark.unit
    def test_extracts_all_fields(self, fake_page, fake_element):
        page = fake_page(
            {
                "h1.pdp-header": "Wood Screws 100-Pack",
                '[itemprop="productID"]': "Item #5001",
                ".item-price": "$9.98",
                ".pdp-brand": "Hillman",
                ".pdp-image img": fake_element(attrs={"src": "https://mobileimages.lowes.com/s.jpg"}),
            },
            url="https://www.lowes.com/pd/screws/5001",
        )

        record = LowesExtractor().extract(page)

        assert record.name == "Wood Screws 100-Pack"
        assert record.sku == "Item #5001"
        assert record.price == "$9.98"
        assert record.brand == "Hillman"
        assert record.image_url == "https://mobileimages.lowes.com/s.jpg"


class TestAmazonExtractor:
    @pytest.mark.unit
    def test_extracts_fields_without_sku(self, fake_page, fake_element):
        page = fake_page(
            {
                "#productTitle": "  Soft-Close Drawer Slides  ",
                ".a-price-whole": "34.",
                "#bylineInfo": "Visit the Blum Store",
                "#landingImage": fake_element(attrs={"src": "https://m.media-amazon.com/i.jpg"}),
                # SKU-like markup must still be ignored
                '[itemprop="sku"]': "ABC-123",
                ".sku": "ABC-123",
            },
            url="https://www.amazon.com/dp/B000000001",
        )

        record = AmazonExtractor().extract(page)

        assert record.name == "Soft-Close Drawer Slides"
        assert record.price == "34."
        assert record.brand == "Visit the Blum Store"
        assert record.image_url == "https://m.media-amazon.com/i.jpg"
        assert record.sku is None


class TestGenericExtractor:
    @pytest.mark.unit
    def test_uses_microdata_fallbacks(self, fake_page, fake_element):
        page = fake_page(
            {
                '[itemprop="name"]': "Cabinet Pull",
                '[itemprop="sku"]': "CP-128",
                '[itemprop="price"]': "4.50",
                '[itemprop="description"]': "Brushed nickel, 128mm centers",
                '[itemprop="image"]': fake_element(attrs={"src": "/img/cp-128.jpg"}),
            },
            url="https://shop.example.com/pulls/cp-128",
        )

        record = GenericExtractor().extract(page)

        assert record.name == "Cabinet Pull"
        assert record.sku == "CP-128"
        assert record.price == "4.50"
        assert record.description == "Brushed nickel, 128mm centers"
        assert record.image_url == "https://shop.example.com/img/cp-128.jpg"
        assert record.brand is None

    @pytest.mark.unit
    def test_prefers_h1_for_name(self, fake_page):
        page = fake_page({"h1": "Heading Name", '[itemprop="name"]': "Microdata Name"})

        assert GenericExtractor().extract(page).name == "Heading Name"

    @pytest.mark.unit
    def test_same_page_yields_same_record(self, fake_page):
        """Should be idempotent against a static page."""
        page = fake_page({"h1": "Shelf Pin", ".price": "$0.25", ".sku": "SP-5"})

        first = GenericExtractor().extract(page)
        second = GenericExtractor().extract(page)

        assert first == second
