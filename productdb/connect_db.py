# connect_db.py - MongoDB client and database handle
import os

from dotenv import load_dotenv
from pymongo import MongoClient

from productdb.schema import DB_NAME

load_dotenv()
MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))


def get_client(uri=None):
    """Build a client for ``uri`` (defaults to MONGO_URI).

    TLS and credentials come from the connection string itself.
    """
    return MongoClient(
        uri or MONGO_URI,
        serverSelectionTimeoutMS=MONGO_TIMEOUT_MS,
        retryWrites=True,
        retryReads=True,
    )


def get_database(client=None):
    try:
        client = client or get_client()

        # Test the connection
        client.admin.command("ping")

        db = client[DB_NAME]
        print(f"✅ Connected to MongoDB database: {DB_NAME}")
        return db
    except Exception as e:
        print(f"❌ Failed to connect to MongoDB: {e}")
        raise


if __name__ == "__main__":
    get_database()
