import pytest

from cravii_utils.database import create_schema, get_connection
from cravii_utils.ingredients import load_catalog, seed_catalog
from cravii_utils.recipes import import_recipe_combinations

COMBINATION_LINES = [
    "mealType,mainIngredient,supportingIngredients,tasteProfile,cookTime,appliance",
    'breakfast, Eggs, "Spinach, Feta Cheese, Tomatoes", savory, 15, Stovetop',
    'breakfast, Oats, "Banana, Honey, Almonds", sweet, 10, Microwave',
    'dinner, Chicken Breast, "Broccoli, Garlic, Brown Rice", savory, 30, Oven',
    'dinner, Chicken Breast, "Bell Peppers, Onions", savory, 25, Stovetop',
    'lunch, Tuna, "Lettuce, Tomatoes", savory, 0, None',
]


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "test_recipes.db"


@pytest.fixture
def temp_db(db_path):
    conn = get_connection(db_path)
    create_schema(conn)
    yield conn
    conn.close()


@pytest.fixture
def combinations_db(temp_db, db_path):
    import_recipe_combinations(temp_db, COMBINATION_LINES)
    return db_path


@pytest.fixture
def catalog_db(temp_db, db_path):
    seed_catalog(temp_db, load_catalog())
    return db_path
