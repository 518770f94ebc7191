import logging

from productdb.connect_db import get_database
from productdb.schema import COLLECTIONS, INDEXES

logger = logging.getLogger(__name__)


def ensure_collections(db):
    """Create whichever target collections don't exist yet; return their names."""
    existing = set(db.list_collection_names())
    created = []

    for name in COLLECTIONS:
        if name in existing:
            logger.info("Collection '%s' already exists", name)
            continue
        db.create_collection(name)
        created.append(name)
        logger.info("Created collection '%s'", name)

    return created


def create_indexes(db):
    """Create the secondary indexes and return ``{collection: [index names]}``.

    Re-running with the same specs is a no-op on the server. A unique index
    over existing duplicate values fails with ``OperationFailure``.
    """
    created = {}

    for name, specs in INDEXES.items():
        collection = db[name]
        created[name] = []
        for keys, options in specs:
            index = collection.create_index(keys, **options)
            created[name].append(index)
        logger.info("Indexes on '%s': %s", name, ", ".join(created[name]))

    return created


def create_collections(db=None):
    db = db if db is not None else get_database()
    ensure_collections(db)
    return create_indexes(db)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_collections()
