"""productdb/init_db.py

One-shot setup of the ``productdb`` database: creates the collections and
their indexes, then inserts the sample categories and products.

Usage:
    MONGO_URI=mongodb://localhost:27017 python -m productdb.init_db

Any failure aborts the run; steps that already finished stay applied and the
completion message is not printed. Running it twice is safe for collections
and indexes but inserts the sample documents a second time.
"""
import logging

from productdb.connect_db import get_database
from productdb.create_collections import create_indexes, ensure_collections
from productdb.seed_data import seed_sample_data

logger = logging.getLogger(__name__)

COMPLETION_MESSAGE = "MongoDB initialization completed successfully!"


def init_db(db=None):
    db = db if db is not None else get_database()

    created = ensure_collections(db)
    logger.info("Created %d new collection(s)", len(created))

    create_indexes(db)
    seed_sample_data(db)

    print(COMPLETION_MESSAGE)
    return db


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    db = get_database()
    try:
        init_db(db)
    finally:
        db.client.close()


if __name__ == "__main__":
    main()
