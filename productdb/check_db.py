"""productdb/check_db.py

Read-only report on the state left by ``init_db``: connectivity, collections,
indexes and document counts. Nothing here writes to the database.

Usage:
    python -m productdb.check_db
"""
from typing import Any, Dict, List

from productdb.connect_db import get_database
from productdb.schema import COLLECTIONS, INDEXES, index_name


def health(db) -> Dict[str, Any]:
    # Simple ping
    try:
        db.client.admin.command("ping")
        return {"status": "up", "database": db.name}
    except Exception as e:
        return {"status": "down", "database": db.name, "error": str(e)}


def describe_indexes(db) -> Dict[str, Dict[str, Any]]:
    """Secondary indexes of the target collections, without ``_id_``."""
    existing = set(db.list_collection_names())
    out = {}
    for name in COLLECTIONS:
        if name not in existing:
            continue
        info = db[name].index_information()
        out[name] = {
            idx: {
                # "text", "hashed", "2dsphere" etc. are kept as strings
                "key": [
                    (field, direction if isinstance(direction, str) else int(direction))
                    for field, direction in spec["key"]
                ],
                "unique": bool(spec.get("unique", False)),
            }
            for idx, spec in info.items()
            if idx != "_id_"
        }
    return out


def document_counts(db) -> Dict[str, int]:
    return {name: db[name].count_documents({}) for name in COLLECTIONS}


def missing_layout(db) -> List[str]:
    """List what differs from the expected layout; empty when it all matches."""
    problems = []
    existing = set(db.list_collection_names())
    for name in COLLECTIONS:
        if name not in existing:
            problems.append(f"missing collection '{name}'")

    indexes = describe_indexes(db)
    for name in COLLECTIONS:
        if name not in existing:
            continue
        specs = INDEXES.get(name, [])
        for keys, options in specs:
            idx = index_name(keys)
            found = indexes[name].get(idx)
            if found is None or found["key"] != list(keys):
                problems.append(f"missing index '{idx}' on '{name}'")
            elif found["unique"] != options.get("unique", False):
                problems.append(f"index '{idx}' on '{name}' has wrong unique flag")

        expected = {index_name(keys) for keys, _ in specs}
        for idx in indexes[name]:
            if idx not in expected:
                problems.append(f"unexpected index '{idx}' on '{name}'")
    return problems


def main():
    db = get_database()
    try:
        status = health(db)
        print(f"\n Health: {status['status']}")
        if "error" in status:
            print(f"   {status['error']}")

        print("\n Indexes:")
        for name, indexes in describe_indexes(db).items():
            for idx, spec in indexes.items():
                flag = " (unique)" if spec["unique"] else ""
                print(f"   {name}.{idx}{flag}")

        print("\n Document counts:")
        for name, count in document_counts(db).items():
            print(f"   {name}: {count}")

        problems = missing_layout(db)
        if problems:
            print("\n⚠️ Layout differs from expected:")
            for p in problems:
                print(f"   {p}")
        else:
            print("\n✅ Layout matches")
    finally:
        db.client.close()


if __name__ == "__main__":
    main()
