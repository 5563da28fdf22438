"""Pick the next ingredient to offer the user while they build a selection."""

import dataclasses
import random
from typing import Iterable, List, Optional, Sequence

from cravii_utils.ingredients.normalization import normalize_name
from cravii_utils.recipes.matching import rank_recipes
from cravii_utils.recipes.models import MatchTier, RecipeMatch

SHARED_INGREDIENT_POINTS = 15
COMPLETION_POINTS = 25
COMPLETES_RECIPE_BONUS = 75
HIGH_COMPLETION_BONUS = 40
MEDIUM_COMPLETION_BONUS = 20
RECIPE_PRESENCE_POINTS = 2
TOP_CANDIDATES = 3


@dataclasses.dataclass
class IngredientScore:
    ingredient: str
    score: float
    recipe_matches: int
    completion_bonus: float


class IngredientSuggester:
    """Suggests ingredients that move the user toward complete recipes.

    Ingredients are scored by how many recipes they appear in alongside
    already-selected ingredients, with bonuses for recipes they would bring
    close to (or to) completion.

    Attributes:
        recipes: Candidate recipes, each with an `ingredients` sequence.
        selected: Normalized names of accepted ingredients.
        rejected: Normalized names of rejected ingredients.
        rng: Random source used to break ties among top candidates.
    """

    def __init__(self, recipes: Sequence, rng: Optional[random.Random] = None):
        self.recipes = list(recipes)
        self.selected = set()
        self.rejected = set()
        self.rng = rng or random.Random()
        self._recipe_ingredients = [
            {normalize_name(name) for name in recipe.ingredients}
            for recipe in self.recipes
        ]
        self.all_ingredients = sorted(set().union(*self._recipe_ingredients))

    def select(self, ingredient: str) -> None:
        self.selected.add(normalize_name(ingredient))

    def reject(self, ingredient: str) -> None:
        self.rejected.add(normalize_name(ingredient))

    def reset(self) -> None:
        self.selected.clear()
        self.rejected.clear()

    def remaining(self) -> List[str]:
        return [
            i
            for i in self.all_ingredients
            if i not in self.selected and i not in self.rejected
        ]

    def score_ingredient(self, ingredient: str) -> IngredientScore:
        ingredient = normalize_name(ingredient)
        score = 0.0
        recipe_matches = 0
        completion_bonus = 0.0

        for names in self._recipe_ingredients:
            if ingredient not in names:
                continue
            recipe_matches += 1

            shared = len(self.selected & names)
            if not shared:
                continue

            score += shared * SHARED_INGREDIENT_POINTS
            completion = (shared + 1) / len(names)
            bonus = completion * COMPLETION_POINTS
            if shared + 1 == len(names):
                bonus += COMPLETES_RECIPE_BONUS
            elif completion >= 0.8:
                bonus += HIGH_COMPLETION_BONUS
            elif completion >= 0.6:
                bonus += MEDIUM_COMPLETION_BONUS
            score += bonus
            completion_bonus += bonus

        score += recipe_matches * RECIPE_PRESENCE_POINTS
        return IngredientScore(ingredient, score, recipe_matches, completion_bonus)

    def next_ingredient(self) -> Optional[str]:
        """Return the next ingredient to show, or None when all have been seen.

        With nothing selected yet any remaining ingredient may be offered;
        otherwise one of the three best-scoring ingredients is chosen.
        """
        remaining = self.remaining()
        if not remaining:
            return None
        if not self.selected:
            return self.rng.choice(remaining)

        scores = sorted(
            (self.score_ingredient(i) for i in remaining),
            key=lambda s: s.score,
            reverse=True,
        )
        return self.rng.choice(scores[:TOP_CANDIDATES]).ingredient

    def matches(self, tiers: Iterable[MatchTier] = tuple(MatchTier)) -> List[RecipeMatch]:
        """Ranked recipe matches for the current selection, limited to `tiers`.

        Recipes without any selected ingredient are left out.
        """
        tiers = set(tiers)
        return [
            match
            for match in rank_recipes(self.recipes, self.selected)
            if match.available_ingredients and match.tier in tiers
        ]
