#!/usr/bin/env python3
"""
Print the markers table schema and row count.

Usage:
  python -m site_pins.inspect_db --db markers.db
"""
import argparse
import json
try:
    from . import config
    from .database_client import get_db_connection
except ImportError:
    import config
    from database_client import get_db_connection


def inspect_db(db_path):
    """Returns (columns, row_count); columns is empty when the table is missing."""
    conn = get_db_connection(db_path)
    try:
        columns = [tuple(r) for r in conn.execute("PRAGMA table_info(markers)")]
        if not columns:
            return [], 0
        count = conn.execute("SELECT COUNT(*) FROM markers").fetchone()[0]
    finally:
        conn.close()
    return columns, count


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Inspect the markers database")
    parser.add_argument("--db", type=str, default=config.DB_PATH, help="SQLite database path")
    args = parser.parse_args()

    print('DB_PATH:', args.db)
    columns, count = inspect_db(args.db)
    if not columns:
        print('markers table not found')
    else:
        print('markers schema:')
        print(json.dumps(columns, indent=2))
        print('rows:', count)
