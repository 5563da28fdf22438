#!/usr/bin/env python3
"""Update ingredient dietary tags from a two-column CSV file."""

import argparse
import logging

from cravii_utils.database import DEFAULT_DB_PATH, create_schema, get_connection
from cravii_utils.ingredients import apply_dietary_tags, load_dietary_tags_csv

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)


def main():
    parser = argparse.ArgumentParser(
        description="Load ingredient dietary tags from CSV into the database"
    )
    parser.add_argument("csv_file", help="CSV with ingredient name and tags columns")
    parser.add_argument(
        "--db-path",
        type=str,
        default=DEFAULT_DB_PATH,
        help="Path to the database file",
    )
    args = parser.parse_args()

    tags_by_name = load_dietary_tags_csv(args.csv_file)
    conn = get_connection(args.db_path)
    try:
        create_schema(conn)
        updated, not_found = apply_dietary_tags(conn, tags_by_name)
    finally:
        conn.close()

    print(f"Dietary tags loaded: {updated} updated, {not_found} not found")


if __name__ == "__main__":
    main()
