#!/usr/bin/env python3
"""Replace the recipe combination table with rows from a CSV export."""

import argparse
import logging
import sys

from cravii_utils.database import (
    DEFAULT_DB_PATH,
    RecipeCombinationStore,
    create_schema,
    get_connection,
)
from cravii_utils.recipes import DEFAULT_BATCH_SIZE, import_recipe_combinations_file

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    parser = argparse.ArgumentParser(
        description="Import recipe combinations from a six-column CSV file"
    )
    parser.add_argument("csv_file", help="CSV file with a header row")
    parser.add_argument(
        "--db-path",
        type=str,
        default=DEFAULT_DB_PATH,
        help="Path to the database file",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=DEFAULT_BATCH_SIZE,
        help="Number of rows inserted per transaction",
    )
    args = parser.parse_args()

    conn = get_connection(args.db_path)
    try:
        create_schema(conn)
        report = import_recipe_combinations_file(
            conn, args.csv_file, batch_size=args.batch_size, show_progress=True
        )
    except Exception as e:
        logger.error(f"Import failed: {e}")
        sys.exit(1)
    finally:
        conn.close()

    print("Import completed:")
    print(f"  - Inserted: {report.inserted}")
    print(f"  - Skipped: {report.skipped}")
    print(f"  - Batches: {report.batches}")
    print(f"  - Rows in database: {RecipeCombinationStore(args.db_path).count()}")


if __name__ == "__main__":
    main()
