import pytest

from cravii_utils.recipes import MatchTier, completion_score, generate_recipes
from cravii_utils.recipes.generator import PANTRY_STAPLES


@pytest.fixture
def recipes():
    return generate_recipes(["chicken breast", "brown rice", "broccoli", "garlic", "onion"])


def test_generates_three_recipes(recipes):
    assert [r.title for r in recipes] == [
        "Classic chicken Skillet",
        "Slow-Cooked chicken Stew",
        "Grilled chicken with Herbs",
    ]
    assert [r.cook_time for r in recipes] == [30, 90, 25]
    assert [r.id for r in recipes] == [
        "generated_chicken_0",
        "generated_chicken_1",
        "generated_chicken_2",
    ]


def test_used_and_missed_ingredients(recipes):
    for recipe in recipes:
        assert [i.name for i in recipe.used_ingredients] == [
            "chicken breast",
            "brown rice",
            "broccoli",
            "garlic",
        ]
        assert [i.name for i in recipe.missed_ingredients] == PANTRY_STAPLES[:3]
        assert recipe.servings == 4
        assert recipe.source_url.startswith("https://cooking-example.com/")


def test_instructions_mention_main_ingredient(recipes):
    skillet = recipes[0]
    assert "Season the chicken with salt and pepper on both sides." in skillet.instructions
    assert not any("{ingredient}" in step for r in recipes for step in r.instructions)


@pytest.mark.parametrize(
    "preferences, expected_course",
    [(None, "dinner"), ({}, "dinner"), ({"course": "lunch"}, "lunch")],
)
def test_course_tag(preferences, expected_course):
    (recipe, *_) = generate_recipes(["salmon"], preferences)
    assert recipe.tags == ("homemade", "traditional", expected_course)


@pytest.mark.parametrize(
    "ingredients, expected_main",
    [
        (["Dinner salmon"], "salmon"),
        (["recipe", "lunch"], "protein"),
        ([], "protein"),
        (["a", "b", "c", "tofu"], "a"),
    ],
)
def test_main_ingredient_selection(ingredients, expected_main):
    (recipe, *_) = generate_recipes(ingredients)
    assert recipe.title == f"Classic {expected_main} Skillet"


def test_generation_is_deterministic():
    assert generate_recipes(["tofu", "soy sauce"]) == generate_recipes(["tofu", "soy sauce"])


def test_generated_recipes_can_be_scored(recipes):
    match = completion_score(recipes[0], ["chicken breast", "brown rice", "broccoli", "garlic"])
    assert match.completion_percentage == pytest.approx(4 / 7)
    assert match.tier is MatchTier.PARTIAL
