"""Ingredient name normalization and fuzzy matching utilities."""

from typing import Iterable, List

# Shared tokens shorter than this never make two names match ("a", "of", ...)
MIN_SHARED_TOKEN_LENGTH = 3


def normalize_name(name: str) -> str:
    """Normalize an ingredient name for comparison.

    Lower-cases the name and collapses runs of whitespace.

    Examples:
        >>> normalize_name("  Chicken   Breast ")
        'chicken breast'
    """
    return " ".join(name.lower().split())


def ingredient_names_match(stored_name: str, user_name: str) -> bool:
    """Check whether two ingredient names refer to the same ingredient.

    Two names match when, after normalization, they are equal, one contains
    the other, or they share a whitespace-delimited word longer than two
    characters. The shared-word rule is deliberately permissive so that
    "ground beef" and "beef strips" match, at the cost of occasional false
    positives on common words like "red" or "oil".

    Args:
        stored_name: Ingredient name as stored in the recipe combination table.
        user_name: Ingredient name as selected by the user.

    Returns:
        True if the names match. Blank names never match.

    Examples:
        >>> ingredient_names_match("chicken", "Chicken Breast")
        True
        >>> ingredient_names_match("ground beef", "beef strips")
        True
        >>> ingredient_names_match("egg", "eggplant")
        True
        >>> ingredient_names_match("bok choy", "soy sauce")
        False
    """
    stored = normalize_name(stored_name)
    user = normalize_name(user_name)
    if not stored or not user:
        return False

    if stored == user:
        return True

    if stored in user or user in stored:
        return True

    shared = set(stored.split()) & set(user.split())
    return any(len(word) >= MIN_SHARED_TOKEN_LENGTH for word in shared)


def split_ingredient_list(text: str) -> List[str]:
    """Split a comma-delimited ingredient list into clean names.

    Quotes are stripped before splitting and empty entries are dropped.

    Examples:
        >>> split_ingredient_list('"Spinach, Feta Cheese,  Tomatoes"')
        ['Spinach', 'Feta Cheese', 'Tomatoes']
    """
    text = text.replace('"', "")
    return [part.strip() for part in text.split(",") if part.strip()]


def join_ingredient_list(names: Iterable[str]) -> str:
    """Join ingredient names into the stored comma-delimited form."""
    return ", ".join(name.strip() for name in names if name.strip())


def dedupe_names(names: Iterable[str]) -> List[str]:
    """Drop case-insensitive duplicates, keeping the first spelling seen."""
    seen = set()
    unique = []
    for name in names:
        key = normalize_name(name)
        if key and key not in seen:
            seen.add(key)
            unique.append(name.strip())
    return unique
