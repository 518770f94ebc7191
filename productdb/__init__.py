"""productdb package initializer

Setup scripts for the ``productdb`` MongoDB database. Run
``python -m productdb.init_db`` to create the collections, indexes and sample
data, and ``python -m productdb.check_db`` to inspect the result.
"""

__all__ = [
    "check_db",
    "connect_db",
    "create_collections",
    "init_db",
    "schema",
    "seed_data",
]
