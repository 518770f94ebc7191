from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from productdb.schema import (
    COLLECTIONS,
    INDEXES,
    SAMPLE_CATEGORIES,
    SAMPLE_PRODUCTS,
    CategorySeed,
    ProductSeed,
    index_name,
)

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_indexed_collections_are_declared():
    assert set(INDEXES) <= set(COLLECTIONS)
    assert "categories" not in INDEXES


def test_index_name_matches_server_default():
    assert index_name([("name", 1)]) == "name_1"
    assert index_name([("createdAt", -1)]) == "createdAt_-1"


def test_every_product_category_is_a_sample_category():
    names = {c.name for c in SAMPLE_CATEGORIES}
    assert {p.category for p in SAMPLE_PRODUCTS} <= names


def test_category_document_shape():
    doc = CategorySeed(name="Books", description="Books and publications").to_document(NOW)
    assert doc == {
        "name": "Books",
        "description": "Books and publications",
        "createdAt": NOW,
        "updatedAt": NOW,
    }
    assert "_id" not in doc


def test_product_document_stores_price_as_double():
    doc = SAMPLE_PRODUCTS[0].to_document(NOW)
    assert doc["price"] == 999.99
    assert isinstance(doc["price"], float)
    assert doc["stock"] == 50
    assert doc["createdAt"] == doc["updatedAt"] == NOW


def test_product_rejects_negative_stock():
    with pytest.raises(ValidationError):
        ProductSeed(name="Broken", price="1.00", category="Books", stock=-1)


def test_product_rejects_non_positive_price():
    with pytest.raises(ValidationError):
        ProductSeed(name="Free", price="0", category="Books")


def test_category_requires_name():
    with pytest.raises(ValidationError):
        CategorySeed(name="")
