# schema.py
from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field
from pymongo import ASCENDING, DESCENDING

DB_NAME = "productdb"

COLLECTIONS = ["products", "users", "orders", "categories", "audit_logs"]

# collection -> [(keys, create_index options)]
INDEXES = {
    "products": [
        ([("name", ASCENDING)], {}),
        ([("category", ASCENDING)], {}),
        ([("price", ASCENDING)], {}),
        ([("createdAt", DESCENDING)], {}),
    ],
    "users": [
        ([("email", ASCENDING)], {"unique": True}),
        ([("username", ASCENDING)], {"unique": True}),
    ],
    "orders": [
        ([("userId", ASCENDING)], {}),
        ([("status", ASCENDING)], {}),
        ([("createdAt", DESCENDING)], {}),
    ],
    "audit_logs": [
        ([("timestamp", DESCENDING)], {}),
        ([("userId", ASCENDING)], {}),
        ([("action", ASCENDING)], {}),
    ],
}


def index_name(keys):
    """Server default name for an index over ``keys``, e.g. ``createdAt_-1``."""
    return "_".join(f"{field}_{direction}" for field, direction in keys)


# ======== Sample data ========
class CategorySeed(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str = ""

    def to_document(self, now: datetime) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "createdAt": now,
            "updatedAt": now,
        }


class ProductSeed(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    description: str = ""
    price: Decimal = Field(gt=0, decimal_places=2)
    # free-text label, matches a CategorySeed.name but is not enforced
    category: str = Field(min_length=1, max_length=64)
    stock: int = Field(default=0, ge=0)

    def to_document(self, now: datetime) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            # BSON has no native Decimal; stored as a double
            "price": float(self.price),
            "category": self.category,
            "stock": self.stock,
            "createdAt": now,
            "updatedAt": now,
        }


SAMPLE_CATEGORIES = [
    CategorySeed(name="Electronics", description="Electronic devices and gadgets"),
    CategorySeed(name="Clothing", description="Fashion and apparel"),
    CategorySeed(name="Books", description="Books and publications"),
]

SAMPLE_PRODUCTS = [
    ProductSeed(
        name="iPhone 15 Pro",
        description="Latest iPhone with advanced features",
        price="999.99",
        category="Electronics",
        stock=50,
    ),
    ProductSeed(
        name="MacBook Pro M3",
        description="Powerful laptop for professionals",
        price="1999.99",
        category="Electronics",
        stock=25,
    ),
    ProductSeed(
        name="Nike Air Max",
        description="Comfortable running shoes",
        price="129.99",
        category="Clothing",
        stock=100,
    ),
]
