import pytest

from cravii_utils.database import IngredientStore, RecipeCombinationStore
from cravii_utils.ingredients import Priority
from cravii_utils.recipes import FilterCriteria, MealType


def test_find_returns_all_rows_in_table_order(combinations_db):
    rows = RecipeCombinationStore(combinations_db).find()
    assert [r.main_ingredient for r in rows] == [
        "Eggs",
        "Oats",
        "Chicken Breast",
        "Chicken Breast",
        "Tuna",
    ]
    assert [r.id for r in rows] == sorted(r.id for r in rows)


def test_find_by_main_ingredient_ignores_case(combinations_db):
    rows = RecipeCombinationStore(combinations_db).find(main_ingredient=" chicken BREAST ")
    assert [r.cook_time for r in rows] == [30, 25]


def test_find_appliance_is_case_insensitive(combinations_db):
    store = RecipeCombinationStore(combinations_db)
    rows = store.find(FilterCriteria(appliances=frozenset({"MICROWAVE"})))
    assert [r.main_ingredient for r in rows] == ["Oats"]


def test_find_combines_filters(combinations_db):
    store = RecipeCombinationStore(combinations_db)
    criteria = FilterCriteria(meal_type=MealType.DINNER, appliances=frozenset({"stovetop"}))
    (row,) = store.find(criteria)
    assert row.supporting_ingredients == ("Bell Peppers", "Onions")
    assert row.dietary_tags == frozenset()


def test_count(combinations_db):
    assert RecipeCombinationStore(combinations_db).count() == 5


def test_ingredient_store_get(catalog_db):
    store = IngredientStore(catalog_db)
    eggs = store.get("eggs")
    assert eggs.name == "Eggs"
    assert eggs.is_main
    assert "Contains Eggs" in eggs.dietary_tags
    assert store.get("Dragonfruit") is None


def test_ingredient_store_by_priority(catalog_db):
    store = IngredientStore(catalog_db)
    mains = store.by_priority("main")
    complementary = store.by_priority(Priority.COMPLEMENTARY)
    assert mains and all(i.is_main for i in mains)
    assert complementary and not any(i.is_main for i in complementary)
    assert len(mains) + len(complementary) == len(store.all())


def test_ingredient_store_by_category(catalog_db):
    names = {i.name for i in IngredientStore(catalog_db).by_category("dairy")}
    assert {"Greek Yogurt", "Feta Cheese", "Cheddar Cheese"} <= names


@pytest.mark.parametrize(
    "query, expected",
    [
        ("yogurt", "Greek Yogurt"),
        ("oatmeal", "Oats"),
        ("CHICKEN BREAST", "Chicken Breast"),
    ],
)
def test_ingredient_store_search(catalog_db, query, expected):
    names = [i.name for i in IngredientStore(catalog_db).search(query)]
    assert expected in names


def test_ingredient_store_search_blank(catalog_db):
    assert IngredientStore(catalog_db).search("  ") == []
