"""
Tests for meal normalization.

This module tests transform_meal_data and its helpers, which turn a TheMealDB
record into the application's Meal format:
- ingredient/measure slot pairing and trimming
- instruction splitting on line breaks
- description truncation and fixed display values
"""

import pytest

from mealdb.models import MealDBMeal
from mealdb.transform import (
    DEFAULT_DESCRIPTION,
    extract_ingredients,
    split_instructions,
    transform_meal_data,
    transform_meals,
)


@pytest.fixture
def arrabiata():
    """A full TheMealDB record in wire shape."""
    meal = {
        "idMeal": "52771",
        "strMeal": "Spicy Arrabiata Penne",
        "strDrinkAlternate": None,
        "strCategory": "Vegetarian",
        "strArea": "Italian",
        "strInstructions": "Bring a large pot of water to a boil.\r\nAdd kosher salt.\r\n\r\nDrain and serve.",
        "strMealThumb": "https://www.themealdb.com/images/media/meals/ustsqw1468250014.jpg",
        "strTags": "Pasta,Curry",
        "strYoutube": "https://www.youtube.com/watch?v=1IszT_guI08",
        "strSource": None,
        "strImageSource": None,
        "strCreativeCommonsConfirmed": None,
        "dateModified": None,
    }
    for i in range(1, 21):
        meal[f"strIngredient{i}"] = ""
        meal[f"strMeasure{i}"] = ""
    meal.update({
        "strIngredient1": "penne rigate",
        "strMeasure1": "1 pound",
        "strIngredient2": "olive oil",
        "strMeasure2": "1/4 cup",
        "strIngredient3": "garlic",
        "strMeasure3": "3 cloves",
    })
    return meal


class TestTransformMealData:
    """Test cases for transform_meal_data."""

    def test_none_returns_none(self):
        """Test that a missing record transforms to None."""
        assert transform_meal_data(None) is None

    def test_copies_identity_fields(self, arrabiata):
        """Test that id, title, image, category and area are copied through."""
        meal = transform_meal_data(arrabiata)

        assert meal.id == "52771"
        assert meal.title == "Spicy Arrabiata Penne"
        assert meal.image == "https://www.themealdb.com/images/media/meals/ustsqw1468250014.jpg"
        assert meal.category == "Vegetarian"
        assert meal.area == "Italian"

    def test_accepts_parsed_model(self, arrabiata):
        """Test that a MealDBMeal and its raw dict transform identically."""
        from_model = transform_meal_data(MealDBMeal.model_validate(arrabiata))
        from_dict = transform_meal_data(arrabiata)
        assert from_model.model_dump() == from_dict.model_dump()

    def test_ingredients_in_slot_order(self, arrabiata):
        """Test that ingredients are '<measure> <ingredient>' in slot order."""
        meal = transform_meal_data(arrabiata)
        assert meal.ingredients == ["1 pound penne rigate", "1/4 cup olive oil", "3 cloves garlic"]

    def test_instructions_split_and_blank_lines_dropped(self, arrabiata):
        """Test that instructions split on CRLF and blank lines are dropped."""
        meal = transform_meal_data(arrabiata)
        assert meal.instructions == [
            "Bring a large pot of water to a boil.",
            "Add kosher salt.",
            "Drain and serve.",
        ]

    def test_fixed_cook_time_and_servings(self, arrabiata):
        """Test that cook time and servings are fixed regardless of input."""
        arrabiata["cookTime"] = "2 hours"
        arrabiata["servings"] = 12
        meal = transform_meal_data(arrabiata)
        assert meal.cook_time == "30 minutes"
        assert meal.servings == 4

    def test_category_defaults_to_main_course(self, arrabiata):
        """Test that a missing or empty category defaults to 'Main Course'."""
        del arrabiata["strCategory"]
        assert transform_meal_data(arrabiata).category == "Main Course"

        arrabiata["strCategory"] = ""
        assert transform_meal_data(arrabiata).category == "Main Course"

    def test_description_truncates_to_120_characters(self):
        """Test that a long instruction text is cut at 120 characters plus '...'."""
        text = "".join(str(i % 10) for i in range(200))
        meal = transform_meal_data({"idMeal": "1", "strInstructions": text})
        assert meal.description == text[:120] + "..."
        assert len(meal.description) == 123

    def test_description_of_short_text_still_gets_suffix(self):
        """Test that the suffix is appended even when nothing was cut."""
        meal = transform_meal_data({"idMeal": "1", "strInstructions": "Boil."})
        assert meal.description == "Boil...."

    def test_description_uses_raw_text(self):
        """Test that the description is taken from the untrimmed, unsplit text."""
        meal = transform_meal_data({"idMeal": "1", "strInstructions": "  Step one.\r\nStep two."})
        assert meal.description == "  Step one.\r\nStep two...."

    def test_missing_instructions_use_placeholder(self):
        """Test that missing instructions give the placeholder and no steps."""
        meal = transform_meal_data({"idMeal": "1", "strMeal": "Mystery"})
        assert meal.description == DEFAULT_DESCRIPTION
        assert meal.instructions == []

    def test_empty_instructions_use_placeholder(self):
        """Test that an empty instruction string is treated as missing."""
        meal = transform_meal_data({"idMeal": "1", "strInstructions": ""})
        assert meal.description == DEFAULT_DESCRIPTION
        assert meal.instructions == []

    def test_original_data_is_lossless(self, arrabiata):
        """Test that the original record can be recovered in wire shape."""
        meal = transform_meal_data(arrabiata)
        assert meal.original_data.to_api_dict() == arrabiata

    def test_serializes_with_camel_case_aliases(self, arrabiata):
        """Test that the JSON shape uses cookTime and originalData."""
        data = transform_meal_data(arrabiata).model_dump(by_alias=True)
        assert data["cookTime"] == "30 minutes"
        assert data["originalData"]["idMeal"] == "52771"
        assert "cook_time" not in data

    def test_transform_meals_preserves_order(self, arrabiata):
        """Test that transform_meals keeps input order."""
        second = {"idMeal": "2", "strMeal": "Second"}
        meals = transform_meals([MealDBMeal.model_validate(arrabiata), MealDBMeal.model_validate(second)])
        assert [m.id for m in meals] == ["52771", "2"]


class TestExtractIngredients:
    """Test cases for ingredient slot pairing."""

    def test_blank_ingredient_skipped_even_with_measure(self):
        """Test that a measure alone never produces an entry."""
        meal = MealDBMeal.model_validate({
            "idMeal": "1",
            "strIngredient1": "   ",
            "strMeasure1": "2 cups",
            "strIngredient2": None,
            "strMeasure2": "1 tsp",
            "strMeasure3": "pinch",
        })
        assert extract_ingredients(meal) == []

    def test_ingredient_without_measure_has_no_leading_space(self):
        """Test that a missing or blank measure yields just the trimmed ingredient."""
        meal = MealDBMeal.model_validate({
            "idMeal": "1",
            "strIngredient1": " Salt ",
            "strMeasure1": "  ",
            "strIngredient2": "Pepper",
        })
        assert extract_ingredients(meal) == ["Salt", "Pepper"]

    def test_measure_and_ingredient_are_trimmed(self):
        """Test the exact '<trimmed measure> <trimmed ingredient>' format."""
        meal = MealDBMeal.model_validate({
            "idMeal": "1",
            "strIngredient1": "  Chicken Breast\t",
            "strMeasure1": " 2 ",
        })
        assert extract_ingredients(meal) == ["2 Chicken Breast"]

    def test_gaps_between_slots(self):
        """Test that empty slots in the middle are skipped and order is kept."""
        meal = MealDBMeal.model_validate({
            "idMeal": "1",
            "strIngredient1": "Eggs",
            "strMeasure1": "3",
            "strIngredient7": "Milk",
            "strMeasure7": "1 cup",
            "strIngredient20": "Butter",
        })
        assert extract_ingredients(meal) == ["3 Eggs", "1 cup Milk", "Butter"]

    def test_fields_beyond_slot_twenty_are_ignored(self):
        """Test that only slots 1..20 are read."""
        meal = MealDBMeal.model_validate({
            "idMeal": "1",
            "strIngredient21": "Saffron",
            "strMeasure21": "1 pinch",
        })
        assert extract_ingredients(meal) == []


class TestSplitInstructions:
    """Test cases for instruction splitting."""

    def test_crlf_with_blank_line(self):
        """Test that CRLF line endings and blank lines give exactly two steps."""
        assert split_instructions("Step one.\r\n\r\nStep two.") == ["Step one.", "Step two."]

    def test_bare_newlines(self):
        """Test that bare LF line endings are accepted."""
        assert split_instructions("Mix.\nBake.\n") == ["Mix.", "Bake."]

    def test_whitespace_only_segments_dropped(self):
        """Test that segments containing only whitespace are dropped."""
        assert split_instructions("Mix.\n   \n\t\nBake.") == ["Mix.", "Bake."]

    def test_kept_segments_are_not_trimmed(self):
        """Test that surviving steps keep their original text."""
        assert split_instructions("  Mix well. \nBake.") == ["  Mix well. ", "Bake."]

    def test_none_and_empty(self):
        """Test that missing text gives no steps."""
        assert split_instructions(None) == []
        assert split_instructions("") == []
