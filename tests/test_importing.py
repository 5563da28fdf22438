import logging
import sqlite3

import pytest

import cravii_utils.recipes.importing as importing
from cravii_utils.database import RecipeCombinationStore
from cravii_utils.recipes import (
    InvalidCombinationRow,
    MealType,
    TasteProfile,
    import_recipe_combinations,
    import_recipe_combinations_file,
    parse_combination_line,
)
from cravii_utils.recipes.importing import parse_cook_time, split_fields

HEADER = "mealType,mainIngredient,supportingIngredients,tasteProfile,cookTime,appliance"


def make_lines(count):
    return [HEADER] + [
        f'dinner, Main {i}, "Side A, Side B", savory, {10 + i}, Oven'
        for i in range(count)
    ]


def test_split_fields_honours_quotes():
    assert split_fields('breakfast, Eggs, "Spinach, Feta Cheese", savory, 15, Stovetop') == [
        "breakfast",
        "Eggs",
        "Spinach, Feta Cheese",
        "savory",
        "15",
        "Stovetop",
    ]


@pytest.mark.parametrize(
    "value, expected",
    [("25", 25), (" 0", 0), ("25 minutes", 25), ("90min", 90)],
)
def test_parse_cook_time(value, expected):
    assert parse_cook_time(value) == expected


@pytest.mark.parametrize("value", ["abc", "", "-5", "about 20"])
def test_parse_cook_time_invalid(value):
    with pytest.raises(InvalidCombinationRow):
        parse_cook_time(value)


def test_parse_combination_line():
    combination = parse_combination_line(
        'Breakfast, Eggs, "Spinach, Feta Cheese, Tomatoes", Savory, 15, Stovetop'
    )
    assert combination.meal_type is MealType.BREAKFAST
    assert combination.taste_profile is TasteProfile.SAVORY
    assert combination.main_ingredient == "Eggs"
    assert combination.supporting_ingredients == ("Spinach", "Feta Cheese", "Tomatoes")
    assert combination.cook_time == 15
    assert combination.appliance == "Stovetop"


@pytest.mark.parametrize(
    "line",
    [
        "breakfast, Eggs, Spinach, savory, 15",
        'breakfast, , "Spinach", savory, 15, Stovetop',
        'breakfast, Eggs, "Spinach", savory, 15, ',
        'brunch, Eggs, "Spinach", savory, 15, Stovetop',
        'breakfast, Eggs, "Spinach", umami, 15, Stovetop',
        'breakfast, Eggs, "Spinach", savory, abc, Stovetop',
    ],
)
def test_parse_combination_line_invalid(line):
    with pytest.raises(InvalidCombinationRow):
        parse_combination_line(line)


def test_import_skips_header_and_blank_lines(temp_db, db_path):
    lines = make_lines(2)
    lines.insert(2, "")
    lines.append("   ")
    report = import_recipe_combinations(temp_db, lines)
    assert report.inserted == 2
    assert report.skipped == 0
    assert RecipeCombinationStore(db_path).count() == 2


def test_import_skips_invalid_cook_time(temp_db, db_path, caplog):
    lines = make_lines(3)
    lines[2] = 'dinner, Steak, "Potatoes", savory, abc, Grill'

    with caplog.at_level(logging.WARNING):
        report = import_recipe_combinations(temp_db, lines)

    assert report.inserted == 2
    assert report.skipped == 1
    assert "Skipping line 3" in caplog.text
    mains = {c.main_ingredient for c in RecipeCombinationStore(db_path).find()}
    assert mains == {"Main 0", "Main 2"}


def test_import_stores_supporting_list(temp_db, db_path):
    import_recipe_combinations(
        temp_db,
        [HEADER, 'lunch, Tuna, "Lettuce, Tomatoes, Cucumber", savory, 10, None'],
    )
    (combination,) = RecipeCombinationStore(db_path).find()
    assert combination.supporting_ingredients == ("Lettuce", "Tomatoes", "Cucumber")
    assert combination.id is not None


@pytest.mark.parametrize(
    "rows, batch_size, expected_batches",
    [(5, 2, 3), (4, 2, 2), (1, 100, 1), (0, 100, 0)],
)
def test_import_batches(temp_db, db_path, rows, batch_size, expected_batches):
    report = import_recipe_combinations(temp_db, make_lines(rows), batch_size=batch_size)
    assert report.inserted == rows
    assert report.batches == expected_batches
    assert RecipeCombinationStore(db_path).count() == rows


def test_import_replaces_existing_rows(temp_db, db_path):
    import_recipe_combinations(temp_db, make_lines(5))
    import_recipe_combinations(temp_db, make_lines(2))
    assert RecipeCombinationStore(db_path).count() == 2


def test_import_rejects_bad_batch_size(temp_db):
    with pytest.raises(ValueError):
        import_recipe_combinations(temp_db, make_lines(1), batch_size=0)


def test_import_keeps_committed_batches_on_failure(temp_db, db_path, mocker):
    insert_batch = importing._insert_batch
    inserted = []

    def fail_after_first_batch(conn, batch):
        if inserted:
            raise sqlite3.OperationalError("disk I/O error")
        insert_batch(conn, batch)
        inserted.append(batch)

    mocker.patch.object(importing, "_insert_batch", side_effect=fail_after_first_batch)

    with pytest.raises(sqlite3.OperationalError):
        import_recipe_combinations(temp_db, make_lines(5), batch_size=2)

    assert RecipeCombinationStore(db_path).count() == 2


def test_import_file(temp_db, db_path, tmp_path):
    csv_file = tmp_path / "combinations.csv"
    csv_file.write_text("\n".join(make_lines(3)) + "\n", encoding="utf-8")
    report = import_recipe_combinations_file(temp_db, csv_file, batch_size=2)
    assert report.inserted == 3
    assert report.batches == 2
    assert RecipeCombinationStore(db_path).count() == 3
