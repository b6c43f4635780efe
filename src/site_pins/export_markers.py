#!/usr/bin/env python3
"""
Export every stored marker to CSV.
"""
import argparse
import os
import sys
import pandas as pd
try:
    from . import config
    from .database_client import MarkerStore
    from .models import MARKER_FIELDS
except ImportError:
    import config
    from database_client import MarkerStore
    from models import MARKER_FIELDS


def export_markers(output_file, store: MarkerStore) -> int:
    markers = store.list_all()
    if not markers:
        print("No markers found.")
        return 0

    df = pd.DataFrame(markers, columns=list(MARKER_FIELDS))
    out_dir = os.path.dirname(os.path.abspath(output_file))
    os.makedirs(out_dir, exist_ok=True)
    df.to_csv(output_file, index=False, encoding="utf-8")

    print(f"Exported {len(df)} markers to {output_file}")
    return len(df)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Export markers to CSV")
    parser.add_argument("--out", type=str, default="markers.csv", help="Output CSV file path")
    parser.add_argument("--db", type=str, default=config.DB_PATH, help="SQLite database path")
    args = parser.parse_args()

    store = MarkerStore(args.db)
    store.initialize()
    try:
        count = export_markers(args.out, store)
    finally:
        store.close()
    sys.exit(0 if count > 0 else 1)
