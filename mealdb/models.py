"""
Recipe and favorites models for the MealDB client.

This module defines the schemas used throughout the project:

- MealDBMeal: a meal record exactly as TheMealDB returns it (ExternalRecord)
- MealCategory: an entry from TheMealDB's categories listing
- Meal: the application's normalized recipe (CanonicalRecord)
- FavoriteRecipe: a saved-recipe reference from the favorites backend

# NOTE: TheMealDB spreads ingredients over twenty numbered field pairs
    (strIngredient1..strIngredient20 / strMeasure1..strMeasure20). MealDBMeal
    collapses them into a fixed list of 20 IngredientSlot objects while the
    record is parsed, so nothing downstream has to build field names at runtime.
    Serialization flattens them back, so model_dump() and the backend's JSON
    carry TheMealDB's own field names, limited to the fields that were received.
"""

from typing import Any, Dict, List, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
    model_validator,
)
from pydantic.alias_generators import to_camel

# TheMealDB exposes exactly twenty ingredient/measure pairs per meal
INGREDIENT_SLOT_COUNT = 20

# Wire field names, indexed by slot position (slot 0 holds strIngredient1)
INGREDIENT_FIELDS = tuple(f"strIngredient{i}" for i in range(1, INGREDIENT_SLOT_COUNT + 1))
MEASURE_FIELDS = tuple(f"strMeasure{i}" for i in range(1, INGREDIENT_SLOT_COUNT + 1))


class IngredientSlot(BaseModel):
    """One positional ingredient/measure pair. Either side may be missing or blank."""
    ingredient: Optional[str] = None
    measure: Optional[str] = None

    def is_empty(self) -> bool:
        """True when the slot carries no usable ingredient."""
        return not (self.ingredient and self.ingredient.strip())


class MealDBMeal(BaseModel):
    """
    Meal record as returned by TheMealDB (search.php, lookup.php, random.php, filter.php).

    Only idMeal is required: filter.php returns abbreviated records carrying just
    idMeal, strMeal and strMealThumb. Unknown keys are kept as extra fields so no
    data is lost between fetch and transform.
    """
    idMeal: str = Field(..., description="TheMealDB meal identifier")
    strMeal: Optional[str] = Field(None, description="Meal name")
    strDrinkAlternate: Optional[str] = None
    strCategory: Optional[str] = Field(None, description="Category name (e.g., 'Seafood')")
    strArea: Optional[str] = Field(None, description="Cuisine/area (e.g., 'Italian')")
    strInstructions: Optional[str] = Field(None, description="Free-text cooking instructions")
    strMealThumb: Optional[str] = Field(None, description="Thumbnail image URL")
    strTags: Optional[str] = Field(None, description="Comma-separated tags")
    strYoutube: Optional[str] = Field(None, description="YouTube video URL")
    strSource: Optional[str] = Field(None, description="Original recipe source URL")
    strImageSource: Optional[str] = None
    strCreativeCommonsConfirmed: Optional[str] = None
    dateModified: Optional[str] = None

    ingredient_slots: List[IngredientSlot] = Field(
        default_factory=lambda: [IngredientSlot() for _ in range(INGREDIENT_SLOT_COUNT)],
        description="Exactly 20 ingredient/measure pairs; position i-1 holds strIngredient{i}/strMeasure{i}",
    )

    model_config = ConfigDict(extra="allow")

    @field_validator("idMeal", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value

    @model_validator(mode="before")
    @classmethod
    def _collect_ingredient_slots(cls, data: Any) -> Any:
        """Fold the numbered strIngredientN/strMeasureN fields into ingredient_slots."""
        if not isinstance(data, dict) or "ingredient_slots" in data:
            return data

        data = dict(data)
        slots = []
        for ingredient_field, measure_field in zip(INGREDIENT_FIELDS, MEASURE_FIELDS):
            # Only keys actually present are set, so serialization can tell absent from null
            slot = {}
            if ingredient_field in data:
                slot["ingredient"] = data.pop(ingredient_field)
            if measure_field in data:
                slot["measure"] = data.pop(measure_field)
            slots.append(slot)
        data["ingredient_slots"] = slots
        return data

    @field_validator("ingredient_slots")
    @classmethod
    def _check_slot_count(cls, slots: List[IngredientSlot]) -> List[IngredientSlot]:
        if len(slots) != INGREDIENT_SLOT_COUNT:
            raise ValueError(f"ingredient_slots must hold exactly {INGREDIENT_SLOT_COUNT} entries, got {len(slots)}")
        return slots

    @model_serializer(mode="wrap")
    def _serialize_wire_shape(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        """Write the record in TheMealDB's shape: numbered fields instead of ingredient_slots."""
        data = handler(self)
        data.pop("ingredient_slots", None)
        # Fields TheMealDB did not send (e.g. on abbreviated filter.php records) stay absent
        for name in type(self).model_fields:
            if name not in self.model_fields_set:
                data.pop(name, None)
        for ingredient_field, measure_field, slot in zip(INGREDIENT_FIELDS, MEASURE_FIELDS, self.ingredient_slots):
            if "ingredient" in slot.model_fields_set:
                data[ingredient_field] = slot.ingredient
            if "measure" in slot.model_fields_set:
                data[measure_field] = slot.measure
        return data

    def to_api_dict(self) -> Dict[str, Any]:
        """
        Flatten the record back into TheMealDB's wire shape.

        Returns:
            Dictionary with the fields (numbered ingredient/measure fields and unknown
            extras included) exactly as originally received.
        """
        return self.model_dump()


class MealCategory(BaseModel):
    """Category entry from TheMealDB's categories.php listing."""
    idCategory: str
    strCategory: str
    strCategoryThumb: Optional[str] = None
    strCategoryDescription: Optional[str] = None

    model_config = ConfigDict(extra="allow")


class Meal(BaseModel):
    """
    Normalized recipe used by the UI and returned by the backend API.

    Built from a MealDBMeal by mealdb.transform.transform_meal_data. Serialized with
    camelCase aliases (cookTime, originalData) so the recipe card can render a Meal
    and a FavoriteRecipe from the same keys.
    """
    id: str = Field(..., description="TheMealDB meal identifier")
    title: Optional[str] = Field(None, description="Meal name")
    description: str = Field(..., description="First 120 characters of the instructions, or a placeholder")
    image: Optional[str] = Field(None, description="Thumbnail image URL")
    cook_time: str = Field(..., description="Display cook time")
    servings: int = Field(..., ge=1, description="Display serving count")
    category: str = Field(..., description="Category name")
    area: Optional[str] = Field(None, description="Cuisine/area")
    ingredients: List[str] = Field(default_factory=list, description="'<measure> <ingredient>' strings in slot order")
    instructions: List[str] = Field(default_factory=list, description="Non-blank instruction lines in original order")
    original_data: MealDBMeal = Field(..., description="The TheMealDB record this meal was built from")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "52772",
                "title": "Teriyaki Chicken Casserole",
                "description": "Preheat oven to 350° F. Spray a 9x13-inch baking pan with non-stick spray...",
                "image": "https://www.themealdb.com/images/media/meals/wvpsxx1468256321.jpg",
                "cookTime": "30 minutes",
                "servings": 4,
                "category": "Chicken",
                "area": "Japanese",
                "ingredients": ["3/4 cup soy sauce", "1/2 cup water"],
                "instructions": ["Preheat oven to 350° F.", "Combine soy sauce, water and brown sugar."],
            }
        },
    )


class FavoriteRecipe(BaseModel):
    """
    Saved-recipe reference returned by the favorites backend.

    After reshaping, id equals recipeId so the recipe card can key every item on id.
    Only id is coerced to a string; recipeId, cookTime, servings and any additional
    fields the backend sends are passed through untouched.
    """
    id: str = Field(..., description="Display identifier (equals recipeId after reshaping)")
    recipeId: Any = Field(..., description="TheMealDB meal identifier of the saved recipe")
    title: str = Field(..., description="Recipe title")
    description: Optional[str] = None
    image: Optional[str] = None
    cookTime: Optional[Any] = None
    servings: Optional[Any] = None

    model_config = ConfigDict(extra="allow")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_identifier(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value
