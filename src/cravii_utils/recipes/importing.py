"""Bulk import of recipe combinations from delimited text.

The expected file has a header row followed by six columns per row:

    meal type, main ingredient, supporting ingredients, taste profile,
    cook time, appliance

Fields may be double-quoted so that the supporting ingredient list can hold
commas. Rows that fail validation are logged and skipped. The import deletes
the existing table contents first and then inserts in batches, each batch in
its own transaction, so an interrupted run leaves a partially filled table.
"""

import csv
import dataclasses
import logging
import pathlib
import re
import sqlite3
from typing import Iterable, Iterator, List, Tuple, Union

from tqdm import tqdm

from cravii_utils.database.utils import transaction
from cravii_utils.ingredients.normalization import (
    join_ingredient_list,
    split_ingredient_list,
)
from cravii_utils.recipes.models import MealType, RecipeCombination, TasteProfile

logger = logging.getLogger(__name__)

DEFAULT_BATCH_SIZE = 100
EXPECTED_FIELDS = 6

# Leading integer, so "25 minutes" reads as 25
COOK_TIME_PATTERN = re.compile(r"^\s*(\d+)")


class InvalidCombinationRow(ValueError):
    """A row of combination data that cannot be imported."""


@dataclasses.dataclass
class ImportReport:
    inserted: int = 0
    skipped: int = 0
    batches: int = 0


def split_fields(line: str) -> List[str]:
    """Split one line of comma-separated text, honouring double quotes."""
    fields = next(csv.reader([line], skipinitialspace=True), [])
    return [field.strip() for field in fields]


def parse_cook_time(value: str) -> int:
    match = COOK_TIME_PATTERN.match(value)
    if not match:
        raise InvalidCombinationRow(f'Invalid cook time "{value}"')
    return int(match.group(1))


def parse_combination_fields(fields: List[str]) -> RecipeCombination:
    """Validate six raw fields and build a RecipeCombination.

    Raises:
        InvalidCombinationRow: If fields are missing, the cook time is not a
            number, or the meal type or taste profile is unknown.
    """
    if len(fields) < EXPECTED_FIELDS:
        raise InvalidCombinationRow(
            f"Expected {EXPECTED_FIELDS} fields, got {len(fields)}"
        )

    meal_type, main, supporting, taste, cook_time, appliance = fields[:EXPECTED_FIELDS]

    if not main:
        raise InvalidCombinationRow("Missing main ingredient")
    if not appliance:
        raise InvalidCombinationRow("Missing appliance")

    try:
        meal = MealType(meal_type.lower())
    except ValueError:
        raise InvalidCombinationRow(f'Unknown meal type "{meal_type}"') from None

    try:
        profile = TasteProfile(taste.lower())
    except ValueError:
        raise InvalidCombinationRow(f'Unknown taste profile "{taste}"') from None

    return RecipeCombination(
        meal_type=meal,
        main_ingredient=main.replace('"', "").strip(),
        supporting_ingredients=tuple(split_ingredient_list(supporting)),
        taste_profile=profile,
        cook_time=parse_cook_time(cook_time),
        appliance=appliance,
    )


def parse_combination_line(line: str) -> RecipeCombination:
    return parse_combination_fields(split_fields(line))


def read_combinations(
    lines: Iterable[str],
) -> Iterator[Tuple[int, Union[RecipeCombination, InvalidCombinationRow]]]:
    """Parse data lines, skipping the header and blank lines.

    Yields:
        (line_number, combination) for valid rows and
        (line_number, InvalidCombinationRow) for rows that failed validation.
        Line numbers are 1-based and count the header.
    """
    for line_number, line in enumerate(lines, start=1):
        if line_number == 1 or not line.strip():
            continue
        try:
            yield line_number, parse_combination_line(line.rstrip("\r\n"))
        except InvalidCombinationRow as e:
            yield line_number, e


def _insert_batch(conn: sqlite3.Connection, batch: List[RecipeCombination]) -> None:
    with transaction(conn) as cur:
        cur.executemany(
            """INSERT INTO recipe_combination
                   (meal_type, main_ingredient, supporting_ingredients,
                    taste_profile, dietary_tags, cook_time, appliance)
               VALUES (?, ?, ?, ?, ?, ?, ?)""",
            [
                (
                    c.meal_type.value,
                    c.main_ingredient,
                    join_ingredient_list(c.supporting_ingredients),
                    c.taste_profile.value,
                    join_ingredient_list(sorted(c.dietary_tags)),
                    c.cook_time,
                    c.appliance,
                )
                for c in batch
            ],
        )


def import_recipe_combinations(
    conn: sqlite3.Connection,
    lines: Iterable[str],
    batch_size: int = DEFAULT_BATCH_SIZE,
    show_progress: bool = False,
) -> ImportReport:
    """Replace the recipe combination table with rows parsed from text.

    Args:
        conn: SQLite connection with the schema already created.
        lines: Lines of the delimited file, header first.
        batch_size: Number of rows inserted per transaction.
        show_progress: Show a tqdm progress bar over batches.

    Returns:
        ImportReport with the inserted and skipped row counts.

    Raises:
        sqlite3.Error: If a delete or insert fails. Batches committed before
            the failure stay in the table.
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be positive, got {batch_size}")

    report = ImportReport()
    combinations = []
    for line_number, result in read_combinations(lines):
        if isinstance(result, InvalidCombinationRow):
            logger.warning(f"Skipping line {line_number}: {result}")
            report.skipped += 1
        else:
            combinations.append(result)

    logger.info(f"Processing {len(combinations)} combinations")

    with transaction(conn) as cur:
        cur.execute("DELETE FROM recipe_combination")
    logger.info("Cleared existing recipe combinations")

    total_batches = (len(combinations) + batch_size - 1) // batch_size
    starts = range(0, len(combinations), batch_size)
    for batch_number, start in enumerate(
        tqdm(starts, desc="Importing combinations", disable=not show_progress),
        start=1,
    ):
        batch = combinations[start : start + batch_size]
        _insert_batch(conn, batch)
        report.inserted += len(batch)
        report.batches += 1
        logger.info(f"Inserted batch {batch_number}/{total_batches}")

    logger.info(
        f"Imported {report.inserted} recipe combinations, skipped {report.skipped}"
    )
    return report


def import_recipe_combinations_file(
    conn: sqlite3.Connection,
    csv_file: Union[str, pathlib.Path],
    batch_size: int = DEFAULT_BATCH_SIZE,
    show_progress: bool = False,
) -> ImportReport:
    """Import recipe combinations from a CSV file on disk."""
    with open(csv_file, "r", encoding="utf-8") as f:
        return import_recipe_combinations(
            conn, f.readlines(), batch_size=batch_size, show_progress=show_progress
        )
