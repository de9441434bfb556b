#!/usr/bin/env python3
"""
Create the tables and load the JSON fixtures (companies, users, products).

Usage:
    python scripts/migrate.py --data-dir ./data
"""
import argparse
import os
import sys

# allow running from repo/scripts
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from deposit_api.config import settings
from deposit_api.db import SessionLocal, init_db
from deposit_api.db.seed import seed_from_directory


def migrate(data_dir: str, reset: bool = False):
    init_db(reset=reset)
    db = SessionLocal()
    try:
        counts = seed_from_directory(db, data_dir)
    finally:
        db.close()
    print("Migration completed:", counts)
    return counts


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--data-dir", "-d", default=settings.SEED_DATA_DIR, help="Directory holding companies.json, users.json and products.json")
    parser.add_argument("--reset", action="store_true", help="Drop existing tables before loading")
    args = parser.parse_args()
    if not os.path.isdir(args.data_dir):
        print("Directory not found:", args.data_dir)
        sys.exit(1)
    try:
        migrate(args.data_dir, reset=args.reset)
    except Exception as e:
        print("Migration failed:", e)
        sys.exit(1)
