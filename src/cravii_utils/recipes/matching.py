"""Ingredient validity checks and recipe completion scoring.

`RecipeFilteringService` answers "which ingredients make sense for these
preferences" by querying the recipe combination table. `completion_score`
and `rank_recipes` answer "how close is the user to cooking each recipe"
from the ingredients they have selected. None of these raise for an empty
result: no match is an empty set, a False, or a zero score.
"""

import logging
from typing import Iterable, List, Optional, Protocol, Sequence, Set, Union

from cravii_utils.ingredients.models import Ingredient
from cravii_utils.ingredients.normalization import (
    dedupe_names,
    ingredient_names_match,
    normalize_name,
)
from cravii_utils.recipes.models import (
    FilterCriteria,
    MatchTier,
    RecipeCombination,
    RecipeMatch,
    RecipeVariant,
)

logger = logging.getLogger(__name__)

TIER_ORDER = (MatchTier.COMPLETE, MatchTier.NEAR_COMPLETE, MatchTier.PARTIAL)


class CombinationSource(Protocol):
    """Read access to recipe combinations with equality filters."""

    def find(
        self,
        criteria: Optional[FilterCriteria] = None,
        main_ingredient: Optional[str] = None,
    ) -> List[RecipeCombination]: ...


class RecipeFilteringService:
    """Decides which ingredients are valid for a set of meal preferences.

    Construct one per process with the combination store and hand it to
    whatever needs it. The service holds no mutable state, so concurrent
    calls are safe as long as the store is.

    Attributes:
        store: Source of recipe combination rows.
    """

    def __init__(self, store: CombinationSource):
        self.store = store

    def valid_main_ingredients(
        self, criteria: Optional[FilterCriteria] = None
    ) -> Set[str]:
        """Distinct main ingredients of the combinations matching the criteria."""
        rows = self.store.find(criteria or FilterCriteria())
        return {row.main_ingredient for row in rows}

    def valid_supporting_ingredients(
        self, main_ingredient: str, criteria: Optional[FilterCriteria] = None
    ) -> Set[str]:
        """Supporting ingredients paired with a main ingredient under the criteria.

        Args:
            main_ingredient: Main ingredient as stored in the combination table.
            criteria: Meal preferences; unset fields match anything.

        Returns:
            The union of supporting ingredients across all matching rows.
        """
        rows = self.store.find(
            criteria or FilterCriteria(), main_ingredient=main_ingredient
        )
        return {name for row in rows for name in row.supporting_ingredients}

    def _all_supporting_ingredients(self, criteria: FilterCriteria) -> Set[str]:
        rows = self.store.find(criteria)
        return {name for row in rows for name in row.supporting_ingredients}

    def is_ingredient_valid(
        self,
        name: str,
        criteria: Optional[FilterCriteria] = None,
        is_main: bool = False,
        main_ingredient: Optional[str] = None,
    ) -> bool:
        """Check whether an ingredient fits the meal preferences.

        Main ingredients are compared with the valid main ingredients.
        Supporting ingredients are compared with the supporting ingredients
        of `main_ingredient` when given, otherwise with the supporting
        ingredients of every combination matching the criteria. Names are
        compared with `ingredient_names_match`.
        """
        criteria = criteria or FilterCriteria()
        if is_main:
            candidates = self.valid_main_ingredients(criteria)
        elif main_ingredient is not None:
            candidates = self.valid_supporting_ingredients(main_ingredient, criteria)
        else:
            candidates = self._all_supporting_ingredients(criteria)

        return any(ingredient_names_match(candidate, name) for candidate in candidates)

    def filter_ingredients(
        self,
        ingredients: Iterable[Ingredient],
        criteria: Optional[FilterCriteria] = None,
    ) -> List[Ingredient]:
        """Keep catalog ingredients that are valid for the criteria.

        An ingredient's priority decides whether it is checked as a main or
        a supporting ingredient.
        """
        criteria = criteria or FilterCriteria()
        valid = []
        for ingredient in ingredients:
            if self.is_ingredient_valid(
                ingredient.name, criteria, is_main=ingredient.is_main
            ):
                valid.append(ingredient)
        return valid

    def match_combinations(
        self,
        selected_ingredients: Iterable[str],
        criteria: Optional[FilterCriteria] = None,
    ) -> List[RecipeMatch]:
        """Rank every combination matching the criteria against a selection."""
        rows = self.store.find(criteria or FilterCriteria())
        logger.debug(f"Ranking {len(rows)} combinations")
        return rank_recipes(rows, selected_ingredients)


def completion_score(
    recipe: Union[RecipeVariant, RecipeCombination],
    selected_ingredients: Iterable[str],
) -> RecipeMatch:
    """Score how much of a recipe the selected ingredients cover.

    Ingredients are compared case-insensitively and duplicate recipe
    ingredients count once. Available and missing ingredients keep the
    recipe's spelling and order.

    Args:
        recipe: A listed or scored recipe, or a recipe combination.
        selected_ingredients: Ingredient names the user has.

    Returns:
        RecipeMatch with a completion percentage in [0, 1]. A recipe with no
        ingredients scores 0.

    Examples:
        >>> from cravii_utils.recipes.models import ListedRecipe
        >>> recipe = ListedRecipe("Omelette", ("egg", "spinach", "feta", "onion"))
        >>> match = completion_score(recipe, ["egg", "spinach", "feta"])
        >>> match.completion_percentage, match.missing_ingredients
        (0.75, ('onion',))
    """
    selected = {normalize_name(name) for name in selected_ingredients}
    ingredients = dedupe_names(recipe.ingredients)

    available = tuple(i for i in ingredients if normalize_name(i) in selected)
    missing = tuple(i for i in ingredients if normalize_name(i) not in selected)
    percentage = len(available) / len(ingredients) if ingredients else 0.0

    return RecipeMatch(
        recipe=recipe,
        completion_percentage=percentage,
        available_ingredients=available,
        missing_ingredients=missing,
    )


def rank_recipes(
    candidates: Iterable[Union[RecipeVariant, RecipeCombination]],
    selected_ingredients: Iterable[str],
) -> List[RecipeMatch]:
    """Score candidates and order them complete, near-complete, then partial.

    Within a tier the candidates keep their input order; they are not
    re-sorted by score.
    """
    selected = list(selected_ingredients)
    matches = [completion_score(recipe, selected) for recipe in candidates]
    return [match for tier in TIER_ORDER for match in matches if match.tier is tier]


def group_by_tier(matches: Sequence[RecipeMatch]) -> dict:
    """Split ranked matches into a {MatchTier: [RecipeMatch, ...]} mapping."""
    groups = {tier: [] for tier in TIER_ORDER}
    for match in matches:
        groups[match.tier].append(match)
    return groups
