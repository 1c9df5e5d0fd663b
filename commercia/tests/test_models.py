"""Tests for the Product aggregate and its JSON output."""

import json
import math

import pytest

from commercia.models import (
    SKU,
    InvalidReviewScoreError,
    NoReviewsError,
    Product,
    ProductRecord,
    Property,
    Review,
)


@pytest.fixture
def product():
    return Product("https://example.com/p.html")


class TestBuilders:
    """Builders append in call order and return the product."""

    def test_new_product_is_empty(self, product):
        assert product.url == "https://example.com/p.html"
        assert product.title == ""
        assert product.brand == ""
        assert product.description == ""
        assert product.skus == []
        assert product.reviews == []
        assert product.categories == []
        assert product.properties == []

    def test_url_is_read_only(self, product):
        with pytest.raises(AttributeError):
            product.url = "https://other.example.com/"

    def test_builders_chain(self, product):
        result = (
            product
            .set_header(title="Widget")
            .add_category("Home")
            .add_sku(name="A")
            .add_property(label="Color", value="Red")
            .add_review(name="Ana", score=4)
        )
        assert result is product
        assert product.title == "Widget"

    def test_set_header_leaves_unset_fields(self, product):
        product.set_header(title="Widget", brand="Acme")
        product.set_header(description="Nice")
        assert (product.title, product.brand, product.description) == ("Widget", "Acme", "Nice")

    def test_add_category_preserves_order(self, product):
        for name in ["Home", "Kitchen", "", "Mixers"]:
            product.add_category(name)
        assert product.categories == ["Home", "Kitchen", "", "Mixers"]

    def test_add_sku(self, product):
        product.add_sku(name="A", current_price=10.5, old_price=None, available=True)
        product.add_sku(name="B")
        assert product.skus == [
            SKU(name="A", current_price=10.5, old_price=None, available=True),
            SKU(name="B", current_price=None, old_price=None, available=False),
        ]

    def test_add_property_keeps_duplicates(self, product):
        product.add_property(label="Color", value="Red")
        product.add_property(label="Color", value="Black")
        assert product.properties == [
            Property(label="Color", value="Red"),
            Property(label="Color", value="Black"),
        ]

    def test_add_review_preserves_order(self, product):
        for i in range(5):
            product.add_review(name=f"user{i}", score=i)
        assert [r.name for r in product.reviews] == [f"user{i}" for i in range(5)]
        assert [r.score for r in product.reviews] == [0, 1, 2, 3, 4]


class TestSKUPrices:
    """Prices are numbers or None, never strings or NaN."""

    def test_int_price_becomes_float(self):
        sku = SKU(name="A", current_price=10)
        assert sku.current_price == 10.0
        assert isinstance(sku.current_price, float)

    def test_string_price_rejected(self):
        with pytest.raises(TypeError):
            SKU(name="A", current_price="R$ 10,00")

    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite_price_rejected(self, value):
        with pytest.raises(ValueError):
            SKU(name="A", old_price=value)


class TestReviewScore:
    """Scores are integers; bad text is a data-integrity error."""

    def test_integer_text_parsed_base_10(self, product):
        product.add_review(score="08")
        assert product.reviews[0].score == 8

    @pytest.mark.parametrize("score", ["", "four", "3.5", "★★★"])
    def test_non_numeric_text_rejected(self, product, score):
        with pytest.raises(InvalidReviewScoreError):
            product.add_review(name="Ana", score=score)
        assert product.reviews == []

    @pytest.mark.parametrize("score", [3.5, None, True])
    def test_non_integer_types_rejected(self, product, score):
        with pytest.raises(InvalidReviewScoreError):
            product.add_review(score=score)

    def test_error_is_a_value_error(self):
        assert issubclass(InvalidReviewScoreError, ValueError)


class TestAverageScore:
    """The average is derived from the current reviews on every read."""

    def test_average(self, product):
        product.add_review(score=4).add_review(score=3)
        assert product.reviews_average_score == pytest.approx(3.5)

    def test_average_follows_new_reviews(self, product):
        product.add_review(score=5)
        assert product.reviews_average_score == 5
        product.add_review(score=0)
        assert product.reviews_average_score == pytest.approx(2.5)

    def test_no_reviews_raises(self, product):
        with pytest.raises(NoReviewsError):
            product.reviews_average_score


class TestRecordAndSerialization:
    """to_record() freezes the product and attaches the average."""

    def test_record_is_frozen_snapshot(self, product):
        product.add_category("Home").add_review(score=4)
        record = product.to_record()

        assert isinstance(record, ProductRecord)
        assert record.categories == ("Home",)
        assert record.reviews == (Review(score=4),)
        assert record.reviews_average_score == 4

        product.add_category("Kitchen")
        assert record.categories == ("Home",)

        with pytest.raises(AttributeError):
            record.title = "changed"

    def test_record_without_reviews_has_null_average(self, product):
        record = product.to_record()
        assert record.reviews_average_score is None
        assert json.loads(product.serialize())["reviews_average_score"] is None

    def test_serialize_key_order_and_indent(self, product):
        product.set_header(title="Widget", brand="Acme", description="Nice")
        product.add_sku(name="A", current_price=99.9, available=True)
        product.add_review(name="Ana", date="01/01/2020", score=4, text="Good")
        product.add_category("Home")
        product.add_property(label="Color", value="Red")

        text = product.serialize()
        data = json.loads(text)

        assert list(data.keys()) == [
            "url", "title", "brand", "description", "skus",
            "reviews", "categories", "properties", "reviews_average_score",
        ]
        assert text.startswith('{\n\t"url": "https://example.com/p.html"')
        assert list(data["skus"][0].keys()) == ["name", "available", "current_price", "old_price"]
        assert data["skus"][0]["old_price"] is None
        assert data["reviews"][0] == {"name": "Ana", "date": "01/01/2020", "score": 4, "text": "Good"}
        assert data["properties"] == [{"label": "Color", "value": "Red"}]
        assert data["reviews_average_score"] == 4

    def test_sku_json_puts_available_after_name(self, product):
        product.add_sku(name="A", current_price=1.0, available=True)
        product.add_review(score=3)

        text = product.serialize()

        assert (
            '\t\t{\n'
            '\t\t\t"name": "A",\n'
            '\t\t\t"available": true,\n'
            '\t\t\t"current_price": 1.0,\n'
            '\t\t\t"old_price": null\n'
            '\t\t}'
        ) in text

    def test_serialize_keeps_unicode(self, product):
        product.set_header(title="Liquidificador Potência")
        product.add_review(score=1)
        assert "Potência" in product.serialize()
