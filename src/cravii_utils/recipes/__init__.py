"""Recipe models, matching, import and generation utilities."""

from .models import (
    FilterCriteria,
    IngredientAmount,
    ListedRecipe,
    MatchTier,
    MealType,
    RecipeCombination,
    RecipeMatch,
    RecipeVariant,
    ScoredRecipe,
    TasteProfile,
    recipe_from_dict,
)
from .matching import (
    RecipeFilteringService,
    completion_score,
    group_by_tier,
    rank_recipes,
)
from .importing import (
    DEFAULT_BATCH_SIZE,
    ImportReport,
    InvalidCombinationRow,
    import_recipe_combinations,
    import_recipe_combinations_file,
    parse_combination_line,
)
from .generator import generate_recipes
from .suggestions import IngredientScore, IngredientSuggester

__all__ = [
    "FilterCriteria",
    "IngredientAmount",
    "ListedRecipe",
    "MatchTier",
    "MealType",
    "RecipeCombination",
    "RecipeMatch",
    "RecipeVariant",
    "ScoredRecipe",
    "TasteProfile",
    "recipe_from_dict",
    "RecipeFilteringService",
    "completion_score",
    "rank_recipes",
    "group_by_tier",
    "DEFAULT_BATCH_SIZE",
    "ImportReport",
    "InvalidCombinationRow",
    "import_recipe_combinations",
    "import_recipe_combinations_file",
    "parse_combination_line",
    "generate_recipes",
    "IngredientScore",
    "IngredientSuggester",
]
