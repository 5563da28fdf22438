"""Database schema definitions for the ingredient and recipe combination tables."""

import sqlite3

DDL = """
CREATE TABLE IF NOT EXISTS ingredient(
    id           INTEGER PRIMARY KEY,
    name         TEXT UNIQUE NOT NULL,
    description  TEXT NOT NULL DEFAULT '',
    category     TEXT NOT NULL DEFAULT '',
    tags         TEXT NOT NULL DEFAULT '',
    dietary_tags TEXT NOT NULL DEFAULT '',
    is_common    INTEGER NOT NULL DEFAULT 1,
    search_terms TEXT NOT NULL DEFAULT '',
    priority     TEXT NOT NULL DEFAULT 'complementary'
        CHECK (priority IN ('main', 'complementary'))
);

CREATE TABLE IF NOT EXISTS recipe_combination(
    id                     INTEGER PRIMARY KEY,
    meal_type              TEXT NOT NULL,
    main_ingredient        TEXT NOT NULL,
    supporting_ingredients TEXT NOT NULL,
    taste_profile          TEXT NOT NULL,
    dietary_tags           TEXT NOT NULL DEFAULT '',
    cook_time              INTEGER NOT NULL CHECK (cook_time >= 0),
    appliance              TEXT NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_recipe_combination_main
    ON recipe_combination(main_ingredient);

"""


def create_schema(conn: sqlite3.Connection) -> None:
    """Create the database schema for ingredients and recipe combinations.

    Args:
        conn: SQLite database connection
    """
    conn.executescript(DDL)
    conn.execute("PRAGMA foreign_keys = ON")
