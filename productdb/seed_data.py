# seed_data.py
import logging
from datetime import datetime, timezone

from productdb.connect_db import get_database
from productdb.schema import SAMPLE_CATEGORIES, SAMPLE_PRODUCTS

logger = logging.getLogger(__name__)


def seed_sample_data(db, now=None):
    """Insert the sample categories and products.

    Plain inserts: every call adds another copy of the six documents.
    Returns the inserted ids per collection.
    """
    now = now or datetime.now(timezone.utc)

    categories = db.categories.insert_many([c.to_document(now) for c in SAMPLE_CATEGORIES])
    logger.info("Inserted %d categories", len(categories.inserted_ids))

    products = db.products.insert_many([p.to_document(now) for p in SAMPLE_PRODUCTS])
    logger.info("Inserted %d products", len(products.inserted_ids))

    return {
        "categories": categories.inserted_ids,
        "products": products.inserted_ids,
    }


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed_sample_data(get_database())
