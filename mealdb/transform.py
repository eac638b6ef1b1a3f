"""
Normalization of TheMealDB records into the application's Meal format.

transform_meal_data() is a pure function:
- Ingredients: each non-blank slot becomes "<measure> <ingredient>" (or just the
  ingredient when no measure is given), in slot order
- Instructions: the free-text blob is split on line breaks and blank lines dropped
- Description: the first 120 characters of the instructions followed by "..."
- Cook time and servings are fixed display values, not derived from the record
"""

import re
from typing import Any, Dict, List, Optional, Union

from mealdb.models import Meal, MealDBMeal

DESCRIPTION_LENGTH = 120
DESCRIPTION_SUFFIX = "..."
DEFAULT_DESCRIPTION = "Delicious meal from TheMealDB"
DEFAULT_CATEGORY = "Main Course"
DEFAULT_COOK_TIME = "30 minutes"
DEFAULT_SERVINGS = 4

_LINE_BREAK = re.compile(r"\r?\n")


def extract_ingredients(meal: MealDBMeal) -> List[str]:
    """
    Build the ingredient list from a meal's 20 ingredient slots.

    A slot with a blank ingredient is skipped even if it has a measure.

    Examples:
        >>> meal = MealDBMeal.model_validate({"idMeal": "1", "strIngredient1": " Eggs ", "strMeasure1": "2"})
        >>> extract_ingredients(meal)
        ['2 Eggs']
    """
    ingredients = []
    for slot in meal.ingredient_slots:
        if slot.is_empty():
            continue
        measure = slot.measure.strip() if slot.measure else ""
        measure_text = f"{measure} " if measure else ""
        ingredients.append(f"{measure_text}{slot.ingredient.strip()}")
    return ingredients


def split_instructions(text: Optional[str]) -> List[str]:
    """
    Split an instructions blob into steps.

    Splits on "\\n" and "\\r\\n", drops segments that are blank after trimming and
    returns the rest untrimmed, in their original order.

    Examples:
        >>> split_instructions("Step one.\\r\\n\\r\\nStep two.")
        ['Step one.', 'Step two.']
    """
    if not text:
        return []
    return [step for step in _LINE_BREAK.split(text) if step.strip()]


def make_description(text: Optional[str]) -> str:
    """First DESCRIPTION_LENGTH characters of the raw instructions plus '...', or the placeholder."""
    if not text:
        return DEFAULT_DESCRIPTION
    return text[:DESCRIPTION_LENGTH] + DESCRIPTION_SUFFIX


def transform_meal_data(meal: Union[MealDBMeal, Dict[str, Any], None]) -> Optional[Meal]:
    """
    Transform a TheMealDB record into the application's Meal format.

    Args:
        meal: A MealDBMeal, a raw dict in TheMealDB's shape, or None

    Returns:
        Meal, or None if meal is None
    """
    if meal is None:
        return None
    if isinstance(meal, dict):
        meal = MealDBMeal.model_validate(meal)

    return Meal(
        id=meal.idMeal,
        title=meal.strMeal,
        description=make_description(meal.strInstructions),
        image=meal.strMealThumb,
        cook_time=DEFAULT_COOK_TIME,
        servings=DEFAULT_SERVINGS,
        category=meal.strCategory or DEFAULT_CATEGORY,
        area=meal.strArea,
        ingredients=extract_ingredients(meal),
        instructions=split_instructions(meal.strInstructions),
        original_data=meal,
    )


def transform_meals(meals: List[MealDBMeal]) -> List[Meal]:
    """Transform a list of records, preserving order."""
    return [transform_meal_data(meal) for meal in meals]
