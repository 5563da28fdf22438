#!/usr/bin/env python3
"""Rank recipe combinations against a set of selected ingredients."""

import argparse
import datetime

from cravii_utils.database import (
    DEFAULT_DB_PATH,
    IngredientStore,
    RecipeCombinationStore,
    get_recipe_combination_data,
)
from cravii_utils.ingredients import filter_ingredients_by_diet, is_recipe_allowed
from cravii_utils.recipes import (
    FilterCriteria,
    MealType,
    RecipeFilteringService,
    TasteProfile,
    group_by_tier,
)


def parse_criteria(args: argparse.Namespace) -> FilterCriteria:
    return FilterCriteria(
        meal_type=MealType(args.meal_type) if args.meal_type else None,
        taste_profile=TasteProfile(args.taste) if args.taste else None,
        cook_time=args.cook_time,
        appliances=frozenset(args.appliance or []),
    )


def main():
    parser = argparse.ArgumentParser(
        description="Suggest recipe combinations for the ingredients you have"
    )
    parser.add_argument(
        "ingredients", nargs="+", help="Selected ingredient names"
    )
    parser.add_argument(
        "--db-path",
        type=str,
        default=DEFAULT_DB_PATH,
        help="Path to the database file",
    )
    parser.add_argument(
        "--meal-type", choices=[m.value for m in MealType], help="Meal type filter"
    )
    parser.add_argument(
        "--taste", choices=[t.value for t in TasteProfile], help="Taste profile filter"
    )
    parser.add_argument("--cook-time", type=int, help="Cook time in minutes")
    parser.add_argument(
        "--appliance",
        action="append",
        help="Available appliance (repeatable)",
    )
    parser.add_argument(
        "--restriction",
        action="append",
        default=[],
        help='Dietary restriction, e.g. "Islam (Halal)" (repeatable)',
    )
    parser.add_argument(
        "--limit", type=int, default=5, help="Matches to show per tier"
    )
    parser.add_argument(
        "--export",
        action="store_true",
        help="Also export the combination table to parquet in the data directory",
    )
    args = parser.parse_args()

    criteria = parse_criteria(args)
    service = RecipeFilteringService(RecipeCombinationStore(args.db_path))

    catalog = IngredientStore(args.db_path).all()
    allowed = filter_ingredients_by_diet(catalog, args.restriction)
    valid = service.filter_ingredients(allowed, criteria)
    print(f"{len(valid)} of {len(catalog)} catalog ingredients fit these preferences")

    matches = [
        m
        for m in service.match_combinations(args.ingredients, criteria)
        if is_recipe_allowed(m.recipe.ingredients, catalog, args.restriction)
    ]
    for tier, tier_matches in group_by_tier(matches).items():
        print(f"\n{tier.value} ({len(tier_matches)})")
        for match in tier_matches[: args.limit]:
            recipe = match.recipe
            print(
                f"  - {recipe.title}: {match.completion_percentage:.0%}"
                f" ({recipe.cook_time} min, {recipe.appliance})"
            )
            if match.missing_ingredients:
                print(f"    missing: {', '.join(match.missing_ingredients)}")

    if args.export:
        df = get_recipe_combination_data(args.db_path)
        timestamp = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        output_file = f"data/recipe_combinations_{timestamp}.parquet"
        df.to_parquet(output_file, index=False)
        print(f"\nExported {len(df)} ingredient rows to {output_file}")


if __name__ == "__main__":
    main()
