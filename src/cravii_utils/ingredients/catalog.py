"""Seeded ingredient catalog: loading, storing and row conversion."""

import json
import logging
import os
import sqlite3
from typing import Iterable, List, Optional, Sequence

from cravii_utils.database.utils import transaction
from cravii_utils.ingredients.models import Ingredient, Priority
from cravii_utils.ingredients.normalization import (
    join_ingredient_list,
    split_ingredient_list,
)

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_FILE = os.path.join(
    os.path.dirname(__file__), "data", "pantry_ingredients.json"
)


def ingredient_from_dict(data: dict) -> Ingredient:
    """Build an Ingredient from a catalog JSON entry."""
    return Ingredient(
        name=data["name"].strip(),
        description=data.get("description", ""),
        category=data.get("category", ""),
        tags=frozenset(data.get("tags", [])),
        dietary_tags=frozenset(data.get("dietary_tags", [])),
        is_common=bool(data.get("is_common", True)),
        search_terms=frozenset(data.get("search_terms", [])),
        priority=Priority(data.get("priority", Priority.COMPLEMENTARY.value)),
    )


def ingredient_from_row(row: Sequence) -> Ingredient:
    """Build an Ingredient from an `ingredient` table row (SELECT * order)."""
    (
        id_,
        name,
        description,
        category,
        tags,
        dietary_tags,
        is_common,
        search_terms,
        priority,
    ) = row
    return Ingredient(
        id=id_,
        name=name,
        description=description,
        category=category,
        tags=frozenset(split_ingredient_list(tags)),
        dietary_tags=frozenset(split_ingredient_list(dietary_tags)),
        is_common=bool(is_common),
        search_terms=frozenset(split_ingredient_list(search_terms)),
        priority=Priority(priority),
    )


def load_catalog(catalog_file: Optional[str] = None) -> List[Ingredient]:
    """Load the ingredient catalog from a JSON file.

    Args:
        catalog_file: Path to a JSON list of ingredient entries. Defaults to
            the bundled pantry catalog.

    Returns:
        List of Ingredient objects in file order.
    """
    catalog_file = catalog_file or DEFAULT_CATALOG_FILE
    with open(catalog_file, "r", encoding="utf-8") as f:
        entries = json.load(f)
    return [ingredient_from_dict(entry) for entry in entries]


def upsert_ingredient(cur: sqlite3.Cursor, ingredient: Ingredient) -> int:
    """Insert an ingredient or update the existing row with the same name.

    Args:
        cur: Database cursor
        ingredient: Ingredient to store

    Returns:
        Integer ID of the ingredient
    """
    cur.execute(
        """INSERT INTO ingredient
               (name, description, category, tags, dietary_tags,
                is_common, search_terms, priority)
           VALUES (?, ?, ?, ?, ?, ?, ?, ?)
           ON CONFLICT(name) DO UPDATE SET
               description = excluded.description,
               category = excluded.category,
               tags = excluded.tags,
               dietary_tags = excluded.dietary_tags,
               is_common = excluded.is_common,
               search_terms = excluded.search_terms,
               priority = excluded.priority""",
        (
            ingredient.name,
            ingredient.description,
            ingredient.category,
            join_ingredient_list(sorted(ingredient.tags)),
            join_ingredient_list(sorted(ingredient.dietary_tags)),
            int(ingredient.is_common),
            join_ingredient_list(sorted(ingredient.search_terms)),
            ingredient.priority.value,
        ),
    )
    cur.execute("SELECT id FROM ingredient WHERE name = ?", (ingredient.name,))
    return cur.fetchone()[0]


def seed_catalog(conn: sqlite3.Connection, ingredients: Iterable[Ingredient]) -> int:
    """Store catalog ingredients in a single transaction.

    Returns:
        Number of ingredients written.
    """
    count = 0
    with transaction(conn) as cur:
        for ingredient in ingredients:
            upsert_ingredient(cur, ingredient)
            count += 1
    logger.info(f"Seeded {count} ingredients")
    return count
