#!/usr/bin/env python3
"""
Connection Test Script

Run this to verify the MongoDB connection and indexes are working.
Usage: python scripts/test_connections.py
"""
import sys
sys.path.insert(0, '.')

from app.core.config import get_settings
from app.db.mongodb import create_mongo_client, init_mongo_indexes, test_mongo_connection


def main():
    settings = get_settings()
    print("=" * 50)
    print("STUDENT MANAGEMENT API - CONNECTION TEST")
    print("=" * 50)

    client = create_mongo_client(settings)
    db = client[settings.mongodb_db]

    print("\n[1] Testing MongoDB...")
    print(f"    URI: {settings.mongodb_uri}")
    print(f"    Database: {settings.mongodb_db}")
    if not test_mongo_connection(db):
        print("    ❌ MongoDB: FAILED")
        return 1
    print("    ✅ MongoDB: CONNECTED")

    print("\n[2] Creating indexes...")
    init_mongo_indexes(db)
    for name in sorted(db.list_collection_names()):
        indexes = ", ".join(sorted(db[name].index_information()))
        print(f"    {name}: {indexes}")

    client.close()

    print("\n" + "=" * 50)
    print("Connection test complete!")
    print("=" * 50)
    return 0


if __name__ == "__main__":
    sys.exit(main())
