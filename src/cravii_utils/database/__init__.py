"""Database utilities for the ingredient and recipe combination database."""

from .schema import DDL, create_schema
from .utils import (
    DEFAULT_DB_PATH,
    get_connection,
    get_recipe_combination_data,
    transaction,
)
from .stores import IngredientStore, RecipeCombinationStore, combination_from_row

__all__ = [
    "DDL",
    "create_schema",
    "DEFAULT_DB_PATH",
    "get_connection",
    "transaction",
    "get_recipe_combination_data",
    "IngredientStore",
    "RecipeCombinationStore",
    "combination_from_row",
]
