"""Dietary restriction filtering for ingredients and recipes."""

import logging
import pathlib
import sqlite3
from typing import Dict, Iterable, List, Set, Tuple, Union

import pandas as pd

from cravii_utils.database.utils import transaction
from cravii_utils.ingredients.models import Ingredient
from cravii_utils.ingredients.normalization import (
    join_ingredient_list,
    normalize_name,
    split_ingredient_list,
)

logger = logging.getLogger(__name__)

# Restriction name -> ingredient dietary tags it excludes
DIETARY_RESTRICTIONS: Dict[str, Dict[str, List[str]]] = {
    "religious": {
        "Judaism (Kosher)": ["Not Kosher"],
        "Islam (Halal)": ["Not Halal"],
        "Hindu (Vegetarian)": ["Not Hindu-Friendly", "Meat"],
        "Buddhism (Vegetarian)": ["Meat"],
        "Jainism (Vegan)": ["Meat", "Contains Dairy", "Contains Eggs"],
        "Seventh-day Adventist": ["Meat", "Not Kosher"],
        "Mormon (Word of Wisdom)": ["Not Kosher"],
        "Orthodox Christian (Fasting)": ["Meat", "Contains Dairy"],
    },
    "allergies": {
        "Gluten/Wheat": ["Contains Gluten"],
        "Dairy/Lactose": ["Contains Dairy"],
        "Eggs": ["Contains Eggs"],
        "Tree Nuts": ["Tree Nuts"],
        "Peanuts": ["Peanuts"],
        "Shellfish": ["Shellfish"],
        "Fish": ["Fish"],
        "Soy": ["Contains Soy"],
        "Sesame": ["Contains Sesame"],
        "Corn": ["Corn"],
    },
}

RESTRICTION_TITLES = {
    "religious": "Religious Dietary Laws",
    "allergies": "Food Allergies & Intolerances",
}


def get_excluded_tags(restrictions: Iterable[str]) -> Set[str]:
    """Collect the dietary tags excluded by the given restrictions.

    Unknown restriction names are ignored.
    """
    excluded = set()
    for restriction in restrictions:
        for group in DIETARY_RESTRICTIONS.values():
            excluded.update(group.get(restriction, []))
    return excluded


def _tags_overlap(excluded_tag: str, ingredient_tag: str) -> bool:
    excluded = excluded_tag.lower()
    tag = ingredient_tag.lower()
    return excluded in tag or tag in excluded


def is_ingredient_allowed(ingredient: Ingredient, restrictions: Iterable[str]) -> bool:
    """Check whether an ingredient is compatible with dietary restrictions.

    An ingredient without dietary tags is allowed, since there is nothing to
    exclude it on. Tags are compared case-insensitively, and a tag counts as
    excluded when either string contains the other.

    Args:
        ingredient: Catalog ingredient to check.
        restrictions: Restriction names, e.g. ["Islam (Halal)", "Peanuts"].

    Returns:
        True if the ingredient may be shown to the user.
    """
    restrictions = list(restrictions)
    if not restrictions:
        return True

    if not ingredient.dietary_tags:
        logger.debug(f"No dietary tags for {ingredient.name}, allowing by default")
        return True

    excluded_tags = get_excluded_tags(restrictions)
    return not any(
        _tags_overlap(excluded, tag)
        for excluded in excluded_tags
        for tag in ingredient.dietary_tags
    )


def filter_ingredients_by_diet(
    ingredients: Iterable[Ingredient], restrictions: Iterable[str]
) -> List[Ingredient]:
    """Keep only the ingredients allowed under the given restrictions."""
    restrictions = list(restrictions)
    return [i for i in ingredients if is_ingredient_allowed(i, restrictions)]


def is_recipe_allowed(
    recipe_ingredients: Iterable[str],
    catalog: Iterable[Ingredient],
    restrictions: Iterable[str],
) -> bool:
    """Check a recipe against dietary restrictions using catalog tags.

    Recipe ingredients that are not in the catalog carry no tags and so
    never disqualify the recipe.
    """
    restrictions = list(restrictions)
    if not restrictions:
        return True

    wanted = {normalize_name(name) for name in recipe_ingredients}
    used = [i for i in catalog if normalize_name(i.name) in wanted]
    return all(is_ingredient_allowed(i, restrictions) for i in used)


def restriction_categories() -> Dict[str, Dict[str, object]]:
    """Return restriction groups with display titles and option names."""
    return {
        key: {"title": RESTRICTION_TITLES[key], "options": list(group)}
        for key, group in DIETARY_RESTRICTIONS.items()
    }


def load_dietary_tags_csv(csv_file: Union[str, pathlib.Path]) -> Dict[str, List[str]]:
    """Load ingredient dietary tags from a two-column CSV.

    The first column is the ingredient name and the second a comma-separated
    list of tags. Extra columns are ignored.

    Args:
        csv_file: Path to the CSV file, header row included.

    Returns:
        Mapping of ingredient name to its list of tags.
    """
    df = pd.read_csv(csv_file, dtype=str, keep_default_na=False)
    if len(df.columns) < 2:
        raise ValueError(f"Expected at least two columns in {csv_file}")

    tags_by_name = {}
    for name, tags in zip(df.iloc[:, 0], df.iloc[:, 1]):
        name = name.replace('"', "").strip()
        if not name or not tags.strip():
            continue
        tags_by_name[name] = split_ingredient_list(tags)

    logger.info(f"Loaded dietary tags for {len(tags_by_name)} ingredients")
    return tags_by_name


def apply_dietary_tags(
    conn: sqlite3.Connection, tags_by_name: Dict[str, List[str]]
) -> Tuple[int, int]:
    """Overwrite the dietary tags of stored ingredients.

    Returns:
        Tuple of (updated, not_found) counts.
    """
    updated = 0
    not_found = 0
    with transaction(conn) as cur:
        for name, tags in tags_by_name.items():
            cur.execute(
                "UPDATE ingredient SET dietary_tags = ? WHERE name = ?",
                (join_ingredient_list(tags), name),
            )
            if cur.rowcount:
                updated += 1
            else:
                not_found += 1
                logger.info(f"Ingredient not found in database: {name}")

    logger.info(
        f"Dietary tags update complete: {updated} updated, {not_found} not found"
    )
    return updated, not_found
