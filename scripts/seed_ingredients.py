#!/usr/bin/env python3
"""Seed the ingredient catalog table."""

import argparse

from cravii_utils.database import DEFAULT_DB_PATH, create_schema, get_connection
from cravii_utils.ingredients import load_catalog, seed_catalog


def main():
    parser = argparse.ArgumentParser(description="Seed the ingredient catalog")
    parser.add_argument(
        "--db-path",
        type=str,
        default=DEFAULT_DB_PATH,
        help="Path to the database file",
    )
    parser.add_argument(
        "--catalog-file",
        type=str,
        default=None,
        help="JSON catalog to load instead of the bundled pantry catalog",
    )
    args = parser.parse_args()

    ingredients = load_catalog(args.catalog_file)
    conn = get_connection(args.db_path)
    try:
        create_schema(conn)
        count = seed_catalog(conn, ingredients)
    finally:
        conn.close()

    main_count = sum(1 for i in ingredients if i.is_main)
    print(f"Seeded {count} ingredients ({main_count} main, {count - main_count} complementary)")


if __name__ == "__main__":
    main()
