#!/usr/bin/env python3
"""
Bulk-load markers from a CSV file.

Columns use the API field names (latitude, longitude, website, siteName, ...).
Each row goes through the same validation as POST /markers; rows that fail
are reported and skipped.

Usage:
  python -m site_pins.import_markers --csv data/markers.csv
"""
import argparse
import sys
import pandas as pd
try:
    from . import config
    from .database_client import MarkerStore
    from .marker_validation import MarkerValidationError, validate_marker_payload
except ImportError:
    import config
    from database_client import MarkerStore
    from marker_validation import MarkerValidationError, validate_marker_payload


def _row_to_payload(row: pd.Series) -> dict:
    payload = {}
    for key, value in row.items():
        if pd.isna(value):
            continue
        # pandas hands back numpy scalars
        payload[key] = value.item() if hasattr(value, "item") else value
    return payload


def import_markers(csv_path, store: MarkerStore) -> int:
    df = pd.read_csv(csv_path)
    imported = 0
    for idx, row in df.iterrows():
        try:
            marker = validate_marker_payload(_row_to_payload(row))
        except MarkerValidationError as e:
            print(f"  Skipping row {idx + 2}: {e}")
            continue
        store.insert(marker)
        imported += 1
    print(f"Imported {imported} of {len(df)} markers into {store.db_path}")
    return imported


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Import markers from a CSV file")
    parser.add_argument("--csv", type=str, required=True, help="Input CSV file path")
    parser.add_argument("--db", type=str, default=config.DB_PATH, help="SQLite database path")
    args = parser.parse_args()

    store = MarkerStore(args.db)
    store.initialize()
    try:
        count = import_markers(args.csv, store)
    finally:
        store.close()
    sys.exit(0 if count > 0 else 1)
