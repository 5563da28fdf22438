"""Templated recipe generation.

Expands a fixed set of recipe templates around the user's main ingredient.
Output depends only on the inputs: no network access, no randomness.
"""

import re
from typing import List, Mapping, Optional, Sequence

from cravii_utils.recipes.models import IngredientAmount, ScoredRecipe

RECIPE_TEMPLATES = [
    {
        "title": "Classic {ingredient} Skillet",
        "instructions": [
            "Heat olive oil in a large skillet over medium-high heat.",
            "Season the {ingredient} with salt and pepper on both sides.",
            "Cook {ingredient} for 4-5 minutes per side until golden brown.",
            "Add onions and garlic to the skillet and sauté for 2 minutes.",
            "Pour in broth and bring to a simmer.",
            "Cover and cook for 15-20 minutes until {ingredient} is tender.",
            "Taste and adjust seasoning with salt and pepper.",
            "Garnish with fresh herbs and serve immediately.",
        ],
        "cook_time": 30,
        "difficulty": "easy",
    },
    {
        "title": "Slow-Cooked {ingredient} Stew",
        "instructions": [
            "Cut {ingredient} into 2-inch pieces and season with salt and pepper.",
            "Heat oil in a large pot over medium-high heat.",
            "Brown {ingredient} pieces on all sides, about 8 minutes total.",
            "Add chopped onions, carrots, and celery to the pot.",
            "Cook vegetables until softened, about 5 minutes.",
            "Add tomato paste and cook for 1 minute.",
            "Pour in stock and add bay leaves and thyme.",
            "Bring to a boil, then reduce heat and simmer covered for 1 hour.",
            "Add potatoes and continue cooking for 30 minutes.",
            "Remove bay leaves, taste and adjust seasoning before serving.",
        ],
        "cook_time": 90,
        "difficulty": "medium",
    },
    {
        "title": "Grilled {ingredient} with Herbs",
        "instructions": [
            "Preheat grill to medium-high heat.",
            "Pat {ingredient} dry and brush with olive oil.",
            "Season generously with salt, pepper, and your favorite herbs.",
            "Grill {ingredient} for 6-8 minutes per side.",
            "Check internal temperature reaches proper doneness.",
            "Let rest for 5 minutes before slicing.",
            "Drizzle with lemon juice and serve with grilled vegetables.",
        ],
        "cook_time": 25,
        "difficulty": "easy",
    },
    {
        "title": "{ingredient} Fried Rice",
        "instructions": [
            "Heat oil in a large wok or skillet over high heat.",
            "Add {ingredient} and cook until heated through.",
            "Push {ingredient} to one side of the pan.",
            "Add beaten eggs to empty side and scramble.",
            "Add cold cooked rice and break up any clumps.",
            "Stir in soy sauce, sesame oil, and green onions.",
            "Cook for 3-4 minutes, stirring frequently.",
            "Taste and adjust seasoning before serving.",
        ],
        "cook_time": 20,
        "difficulty": "easy",
    },
]

PANTRY_STAPLES = ["salt", "black pepper", "olive oil", "garlic", "onion"]
COURSE_WORDS = {"recipe", "dinner", "lunch", "breakfast", "snack"}

DEFAULT_COURSE = "dinner"
DEFAULT_MAIN_INGREDIENT = "protein"
MAX_RECIPES = 3
MAX_USED_INGREDIENTS = 4
MAX_MISSED_INGREDIENTS = 3
SERVINGS = 4


def _slug(text: str) -> str:
    return re.sub(r"[^a-zA-Z0-9]", "-", text).lower()


def generate_recipes(
    ingredients: Sequence[str], preferences: Optional[Mapping] = None
) -> List[ScoredRecipe]:
    """Expand recipe templates for the user's ingredients.

    The main ingredient is the first word of the first three selected
    ingredients that is not a course word, falling back to "protein". The
    first selected ingredients are reported as used and a few pantry staples
    as missed.

    Args:
        ingredients: Selected ingredient names, most important first.
        preferences: Mapping with an optional "course" key.

    Returns:
        Up to three ScoredRecipe records, in template order.
    """
    preferences = preferences or {}
    course = preferences.get("course") or DEFAULT_COURSE

    query_words = " ".join(ingredients[:3]).split()
    words = [w for w in query_words if w.lower() not in COURSE_WORDS]
    main_ingredient = words[0] if words else DEFAULT_MAIN_INGREDIENT

    used = tuple(IngredientAmount(name=name) for name in ingredients[:MAX_USED_INGREDIENTS])
    missed = tuple(
        IngredientAmount(name=name) for name in PANTRY_STAPLES[:MAX_MISSED_INGREDIENTS]
    )

    recipes = []
    for index, template in enumerate(RECIPE_TEMPLATES[:MAX_RECIPES]):
        title = template["title"].replace("{ingredient}", main_ingredient)
        recipes.append(
            ScoredRecipe(
                id=f"generated_{_slug(main_ingredient)}_{index}",
                title=title,
                description=(
                    f"A delicious {main_ingredient} recipe with step-by-step "
                    "cooking instructions."
                ),
                used_ingredients=used,
                missed_ingredients=missed,
                instructions=tuple(
                    step.replace("{ingredient}", main_ingredient)
                    for step in template["instructions"]
                ),
                cook_time=template["cook_time"],
                servings=SERVINGS,
                difficulty=template["difficulty"],
                tags=("homemade", "traditional", course),
                source_url=f"https://cooking-example.com/{_slug(template['title'])}",
            )
        )
    return recipes
