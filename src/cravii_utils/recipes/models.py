"""Recipe data models."""

import dataclasses
import enum
from typing import FrozenSet, List, Mapping, Optional, Tuple, Union


class MealType(str, enum.Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"


class TasteProfile(str, enum.Enum):
    SWEET = "sweet"
    SAVORY = "savory"


class MatchTier(str, enum.Enum):
    COMPLETE = "complete"
    NEAR_COMPLETE = "near-complete"
    PARTIAL = "partial"


NEAR_COMPLETE_THRESHOLD = 0.8


@dataclasses.dataclass(frozen=True)
class RecipeCombination:
    """One row of the recipe combination table.

    The full ingredient list of the combination is the main ingredient
    followed by the supporting ingredients.
    """

    meal_type: MealType
    main_ingredient: str
    supporting_ingredients: Tuple[str, ...]
    taste_profile: TasteProfile
    cook_time: int
    appliance: str
    dietary_tags: FrozenSet[str] = frozenset()
    id: Optional[int] = None

    def __post_init__(self):
        if not self.main_ingredient or not self.main_ingredient.strip():
            raise ValueError("main_ingredient must be a non-empty string")
        if any(not name or not name.strip() for name in self.supporting_ingredients):
            raise ValueError("supporting ingredients must be non-empty strings")
        if isinstance(self.cook_time, bool) or not isinstance(self.cook_time, int):
            raise ValueError(f"cook_time must be an integer, got {self.cook_time!r}")
        if self.cook_time < 0:
            raise ValueError(f"cook_time must be non-negative, got {self.cook_time}")

    @property
    def ingredients(self) -> List[str]:
        return [self.main_ingredient, *self.supporting_ingredients]

    @property
    def title(self) -> str:
        return f"{self.main_ingredient} {self.meal_type.value}"


@dataclasses.dataclass(frozen=True)
class FilterCriteria:
    """User preferences used to narrow recipe combinations.

    Fields left as None (or an empty appliance set) do not constrain results.
    A combination matches the appliance filter when its appliance is any of
    the given appliances.
    """

    meal_type: Optional[MealType] = None
    taste_profile: Optional[TasteProfile] = None
    cook_time: Optional[int] = None
    appliances: FrozenSet[str] = frozenset()


@dataclasses.dataclass(frozen=True)
class IngredientAmount:
    name: str
    amount: Optional[float] = None
    unit: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class ListedRecipe:
    """A recipe described by a flat ingredient list."""

    title: str
    ingredients: Tuple[str, ...]
    instructions: Tuple[str, ...] = ()
    cook_time: Optional[int] = None
    tags: Tuple[str, ...] = ()
    id: Optional[str] = None


@dataclasses.dataclass(frozen=True)
class ScoredRecipe:
    """A recipe whose ingredients are already split into used and missed."""

    title: str
    used_ingredients: Tuple[IngredientAmount, ...]
    missed_ingredients: Tuple[IngredientAmount, ...]
    instructions: Tuple[str, ...] = ()
    cook_time: Optional[int] = None
    tags: Tuple[str, ...] = ()
    id: Optional[str] = None
    description: str = ""
    servings: Optional[int] = None
    difficulty: Optional[str] = None
    source_url: Optional[str] = None

    @property
    def ingredients(self) -> List[str]:
        return [i.name for i in self.used_ingredients + self.missed_ingredients]


RecipeVariant = Union[ListedRecipe, ScoredRecipe]


@dataclasses.dataclass(frozen=True)
class RecipeMatch:
    recipe: Union[RecipeVariant, RecipeCombination]
    completion_percentage: float
    available_ingredients: Tuple[str, ...]
    missing_ingredients: Tuple[str, ...]

    @property
    def tier(self) -> MatchTier:
        """Classify the match.

        Complete at 100%, near-complete from 80% up to 100%, partial below 80%.
        """
        if self.completion_percentage >= 1.0:
            return MatchTier.COMPLETE
        if self.completion_percentage >= NEAR_COMPLETE_THRESHOLD:
            return MatchTier.NEAR_COMPLETE
        return MatchTier.PARTIAL


def _ingredient_amount(entry) -> IngredientAmount:
    if isinstance(entry, str):
        return IngredientAmount(name=entry)
    return IngredientAmount(
        name=entry["name"], amount=entry.get("amount"), unit=entry.get("unit")
    )


def _as_tuple(value) -> Tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def recipe_from_dict(data: Mapping) -> RecipeVariant:
    """Resolve a raw recipe mapping into one of the two recipe shapes.

    Mappings with "usedIngredients"/"missedIngredients" (or their snake_case
    forms) become ScoredRecipe; mappings with a plain "ingredients" list
    become ListedRecipe.

    Raises:
        ValueError: If the mapping has neither shape.
    """
    title = data.get("title") or data.get("name") or ""
    cook_time = data.get("cook_time", data.get("readyInMinutes"))
    instructions = _as_tuple(data.get("instructions"))
    tags = _as_tuple(data.get("tags"))
    recipe_id = data.get("id")
    recipe_id = str(recipe_id) if recipe_id is not None else None

    used = data.get("used_ingredients", data.get("usedIngredients"))
    missed = data.get("missed_ingredients", data.get("missedIngredients"))
    if used is not None or missed is not None:
        return ScoredRecipe(
            title=title,
            used_ingredients=tuple(_ingredient_amount(e) for e in used or []),
            missed_ingredients=tuple(_ingredient_amount(e) for e in missed or []),
            instructions=instructions,
            cook_time=cook_time,
            tags=tags,
            id=recipe_id,
            description=data.get("description", ""),
            servings=data.get("servings"),
            difficulty=data.get("difficulty"),
            source_url=data.get("source_url", data.get("sourceUrl")),
        )

    if "ingredients" in data:
        ingredients = tuple(
            e if isinstance(e, str) else e["name"] for e in data["ingredients"]
        )
        return ListedRecipe(
            title=title,
            ingredients=ingredients,
            instructions=instructions,
            cook_time=cook_time,
            tags=tags,
            id=recipe_id,
        )

    raise ValueError(f"Unrecognized recipe shape for {title!r}")
