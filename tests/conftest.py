"""Shared pytest fixtures.

``db`` is an in-memory mongomock database named like the real target, so the
setup functions run against pymongo-compatible state without a server.
"""

import mongomock
import pytest

from productdb.schema import DB_NAME


@pytest.fixture
def client():
    return mongomock.MongoClient()


@pytest.fixture
def db(client):
    return client[DB_NAME]
