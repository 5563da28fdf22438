import pytest

from cravii_utils.ingredients import Ingredient, Priority
from cravii_utils.recipes import (
    ListedRecipe,
    MatchTier,
    MealType,
    RecipeCombination,
    RecipeMatch,
    ScoredRecipe,
    TasteProfile,
    recipe_from_dict,
)


def make_combination(**overrides):
    fields = dict(
        meal_type=MealType.BREAKFAST,
        main_ingredient="Eggs",
        supporting_ingredients=("Spinach", "Feta Cheese"),
        taste_profile=TasteProfile.SAVORY,
        cook_time=15,
        appliance="Stovetop",
    )
    fields.update(overrides)
    return RecipeCombination(**fields)


def test_recipe_combination_ingredients():
    combination = make_combination()
    assert combination.ingredients == ["Eggs", "Spinach", "Feta Cheese"]
    assert combination.title == "Eggs breakfast"


@pytest.mark.parametrize(
    "overrides",
    [
        {"main_ingredient": ""},
        {"main_ingredient": "  "},
        {"supporting_ingredients": ("Spinach", "")},
        {"cook_time": -1},
        {"cook_time": True},
        {"cook_time": "15"},
    ],
)
def test_recipe_combination_invariants(overrides):
    with pytest.raises(ValueError):
        make_combination(**overrides)


def test_recipe_combination_allows_zero_cook_time():
    assert make_combination(cook_time=0).cook_time == 0


def test_ingredient_is_main():
    assert Ingredient("Tofu", priority=Priority.MAIN).is_main
    assert not Ingredient("Garlic").is_main


@pytest.mark.parametrize(
    "percentage, available, missing, expected",
    [
        (1.0, ("a",), (), MatchTier.COMPLETE),
        (0.8, ("a", "b", "c", "d"), ("e",), MatchTier.NEAR_COMPLETE),
        (0.79, ("a",), ("b",), MatchTier.PARTIAL),
        (0.75, ("a", "b", "c"), ("d",), MatchTier.PARTIAL),
        (0.5, ("a",), ("b",), MatchTier.PARTIAL),
        (2 / 3, ("a", "b"), ("c",), MatchTier.PARTIAL),
        (0.6, ("a", "b", "c"), ("d", "e"), MatchTier.PARTIAL),
        (0.0, (), ("a",), MatchTier.PARTIAL),
        (0.0, (), (), MatchTier.PARTIAL),
    ],
)
def test_match_tier(percentage, available, missing, expected):
    match = RecipeMatch(None, percentage, available, missing)
    assert match.tier is expected


def test_recipe_from_dict_scored():
    recipe = recipe_from_dict(
        {
            "id": 42,
            "title": "Shakshuka",
            "usedIngredients": [{"name": "egg", "amount": 4, "unit": "large"}],
            "missedIngredients": ["cumin"],
            "readyInMinutes": 30,
            "sourceUrl": "https://example.org/shakshuka",
        }
    )
    assert isinstance(recipe, ScoredRecipe)
    assert recipe.id == "42"
    assert recipe.ingredients == ["egg", "cumin"]
    assert recipe.used_ingredients[0].amount == 4
    assert recipe.cook_time == 30
    assert recipe.source_url == "https://example.org/shakshuka"


def test_recipe_from_dict_listed():
    recipe = recipe_from_dict(
        {"name": "Salad", "ingredients": ["lettuce", {"name": "tomato"}], "tags": "quick"}
    )
    assert recipe == ListedRecipe("Salad", ("lettuce", "tomato"), tags=("quick",))


def test_recipe_from_dict_unknown_shape():
    with pytest.raises(ValueError):
        recipe_from_dict({"title": "Mystery"})
