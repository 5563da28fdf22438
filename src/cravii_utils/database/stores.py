"""Read access to the ingredient catalog and recipe combination tables."""

import logging
import pathlib
from typing import List, Optional, Sequence, Union

from cravii_utils.database.utils import get_connection
from cravii_utils.ingredients.catalog import ingredient_from_row
from cravii_utils.ingredients.models import Ingredient, Priority
from cravii_utils.ingredients.normalization import (
    normalize_name,
    split_ingredient_list,
)
from cravii_utils.recipes.models import (
    FilterCriteria,
    MealType,
    RecipeCombination,
    TasteProfile,
)

logger = logging.getLogger(__name__)


def combination_from_row(row: Sequence) -> RecipeCombination:
    """Build a RecipeCombination from a `recipe_combination` table row."""
    (
        id_,
        meal_type,
        main_ingredient,
        supporting_ingredients,
        taste_profile,
        dietary_tags,
        cook_time,
        appliance,
    ) = row
    return RecipeCombination(
        id=id_,
        meal_type=MealType(meal_type),
        main_ingredient=main_ingredient,
        supporting_ingredients=tuple(split_ingredient_list(supporting_ingredients)),
        taste_profile=TasteProfile(taste_profile),
        dietary_tags=frozenset(split_ingredient_list(dietary_tags)),
        cook_time=cook_time,
        appliance=appliance,
    )


class RecipeCombinationStore:
    """Queries over the recipe combination table.

    Each call opens and closes its own connection, so one store can be
    shared freely between readers. Database errors propagate to the caller.

    Attributes:
        db_path: Path to the SQLite database.
    """

    COLUMNS = (
        "id, meal_type, main_ingredient, supporting_ingredients, "
        "taste_profile, dietary_tags, cook_time, appliance"
    )

    def __init__(self, db_path: Union[str, pathlib.Path]):
        self.db_path = db_path

    def find(
        self,
        criteria: Optional[FilterCriteria] = None,
        main_ingredient: Optional[str] = None,
    ) -> List[RecipeCombination]:
        """Return combinations matching every criteria field that is set.

        Args:
            criteria: Meal type, taste profile and cook time are compared for
                equality; the appliance must be one of the given appliances.
                Unset fields are ignored.
            main_ingredient: If given, only rows with this main ingredient
                (compared case-insensitively) are returned.

        Returns:
            Matching combinations in table order.
        """
        criteria = criteria or FilterCriteria()
        conditions = []
        params = []

        if criteria.meal_type is not None:
            conditions.append("meal_type = ?")
            params.append(MealType(criteria.meal_type).value)

        if criteria.taste_profile is not None:
            conditions.append("taste_profile = ?")
            params.append(TasteProfile(criteria.taste_profile).value)

        if criteria.cook_time is not None:
            conditions.append("cook_time = ?")
            params.append(criteria.cook_time)

        if criteria.appliances:
            appliances = sorted({normalize_name(a) for a in criteria.appliances})
            placeholders = ", ".join("?" for _ in appliances)
            conditions.append(f"LOWER(appliance) IN ({placeholders})")
            params.extend(appliances)

        if main_ingredient is not None:
            conditions.append("main_ingredient = ? COLLATE NOCASE")
            params.append(main_ingredient.strip())

        query = f"SELECT {self.COLUMNS} FROM recipe_combination"
        if conditions:
            query += " WHERE " + " AND ".join(conditions)
        query += " ORDER BY id"

        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(query, params).fetchall()
        finally:
            conn.close()

        return [combination_from_row(row) for row in rows]

    def count(self) -> int:
        conn = get_connection(self.db_path)
        try:
            return conn.execute("SELECT COUNT(*) FROM recipe_combination").fetchone()[0]
        finally:
            conn.close()


class IngredientStore:
    """Queries over the seeded ingredient catalog.

    Attributes:
        db_path: Path to the SQLite database.
    """

    def __init__(self, db_path: Union[str, pathlib.Path]):
        self.db_path = db_path

    def _select(self, where: str = "", params: Sequence = ()) -> List[Ingredient]:
        query = "SELECT * FROM ingredient"
        if where:
            query += f" WHERE {where}"
        query += " ORDER BY id"

        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(query, tuple(params)).fetchall()
        finally:
            conn.close()
        return [ingredient_from_row(row) for row in rows]

    def all(self) -> List[Ingredient]:
        return self._select()

    def get(self, name: str) -> Optional[Ingredient]:
        found = self._select("name = ? COLLATE NOCASE", (name.strip(),))
        return found[0] if found else None

    def by_category(self, category: str) -> List[Ingredient]:
        return self._select("category = ?", (category,))

    def by_priority(self, priority: Union[Priority, str]) -> List[Ingredient]:
        return self._select("priority = ?", (Priority(priority).value,))

    def search(self, query: str) -> List[Ingredient]:
        """Find ingredients whose name contains the query or with a matching search term."""
        needle = normalize_name(query)
        if not needle:
            return []
        return [
            ingredient
            for ingredient in self.all()
            if needle in ingredient.name.lower()
            or needle in {normalize_name(term) for term in ingredient.search_terms}
        ]
