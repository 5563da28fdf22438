"""Cravii Utils - Utilities for ingredient-based recipe discovery."""

__version__ = "0.1.0"

from . import database, ingredients, recipes

__all__ = ["database", "ingredients", "recipes"]
