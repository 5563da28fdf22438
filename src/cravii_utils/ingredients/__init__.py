"""Ingredient catalog, name matching and dietary filtering utilities."""

from .models import Ingredient, Priority
from .normalization import (
    dedupe_names,
    ingredient_names_match,
    join_ingredient_list,
    normalize_name,
    split_ingredient_list,
)
from .catalog import load_catalog, seed_catalog, upsert_ingredient
from .dietary import (
    DIETARY_RESTRICTIONS,
    apply_dietary_tags,
    filter_ingredients_by_diet,
    get_excluded_tags,
    is_ingredient_allowed,
    is_recipe_allowed,
    load_dietary_tags_csv,
    restriction_categories,
)

__all__ = [
    "Ingredient",
    "Priority",
    "normalize_name",
    "ingredient_names_match",
    "split_ingredient_list",
    "join_ingredient_list",
    "dedupe_names",
    "load_catalog",
    "seed_catalog",
    "upsert_ingredient",
    "DIETARY_RESTRICTIONS",
    "get_excluded_tags",
    "is_ingredient_allowed",
    "filter_ingredients_by_diet",
    "is_recipe_allowed",
    "restriction_categories",
    "load_dietary_tags_csv",
    "apply_dietary_tags",
]
