"""Database utility functions for the recipe combination database."""

import contextlib
import logging
import pathlib
import sqlite3
from typing import Generator, Union

import pandas as pd

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "data/recipes.db"


def get_connection(db_path: Union[str, pathlib.Path]) -> sqlite3.Connection:
    """Get a SQLite database connection with foreign keys enabled.

    Args:
        db_path: Path to the SQLite database file

    Returns:
        SQLite connection with foreign keys enabled
    """
    conn = sqlite3.connect(db_path)
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextlib.contextmanager
def transaction(conn: sqlite3.Connection) -> Generator[sqlite3.Cursor, None, None]:
    """Context manager for database transactions.

    Args:
        conn: SQLite database connection

    Yields:
        Database cursor for executing queries

    Example:
        with transaction(conn) as cur:
            cur.execute("DELETE FROM recipe_combination")
    """
    cur = conn.cursor()
    try:
        yield cur
        conn.commit()
    except Exception:
        conn.rollback()
        raise


def get_recipe_combination_data(db_path: Union[str, pathlib.Path]) -> pd.DataFrame:
    """Get all recipe combinations as a DataFrame, one row per ingredient.

    Args:
        db_path: Path to the SQLite database

    Returns:
        DataFrame with columns: combination_id, meal_type, taste_profile,
        cook_time, appliance, ingredient_name, is_main
    """
    from cravii_utils.ingredients.normalization import split_ingredient_list

    conn = get_connection(db_path)
    query = """
    SELECT
        id AS combination_id,
        meal_type,
        taste_profile,
        cook_time,
        appliance,
        main_ingredient,
        supporting_ingredients
    FROM recipe_combination
    ORDER BY id
    """

    try:
        df = pd.read_sql_query(query, conn)
    finally:
        conn.close()

    logger.info(f"Found {len(df)} recipe combinations")

    columns = [
        "combination_id",
        "meal_type",
        "taste_profile",
        "cook_time",
        "appliance",
        "ingredient_name",
        "is_main",
    ]
    if df.empty:
        return pd.DataFrame(columns=columns)

    # One row per ingredient, main ingredient first
    df["ingredient_name"] = df.apply(
        lambda row: [row["main_ingredient"]]
        + split_ingredient_list(row["supporting_ingredients"]),
        axis=1,
    )
    df = df.explode("ingredient_name", ignore_index=True)
    df["is_main"] = df["ingredient_name"] == df["main_ingredient"]

    return df[columns]
