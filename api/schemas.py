"""
Pydantic schemas for FastAPI response models.

This module defines the envelopes the backend wraps around mealdb models:
- MealListResponse: normalized meals for search and random picks
- FilterResponse: abbreviated TheMealDB records from filter.php
- CategoryListResponse: TheMealDB categories

# NOTE: Meal serializes with camelCase aliases (cookTime, originalData). The
    Streamlit recipe card reads those keys for both meals and favorites.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict

from mealdb.models import Meal, MealCategory, MealDBMeal


class MealListResponse(BaseModel):
    """Normalized meals returned by /meals/search and /meals/random."""
    query: Optional[str] = Field(None, description="Search query (search only)")
    requested: Optional[int] = Field(None, ge=0, description="Number of meals requested (random only)")
    count: int = Field(..., ge=0, description="Number of meals returned")
    results: List[Meal] = Field(default_factory=list, description="Normalized meals")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "query": "teriyaki",
                "count": 1,
                "results": [Meal.model_config["json_schema_extra"]["example"]],
            }
        }
    )


class FilterResponse(BaseModel):
    """Abbreviated meals returned by /meals/filter."""
    ingredient: Optional[str] = Field(None, description="Ingredient filter, if used")
    category: Optional[str] = Field(None, description="Category filter, if used")
    count: int = Field(..., ge=0, description="Number of meals returned")
    results: List[MealDBMeal] = Field(default_factory=list, description="Records with idMeal, strMeal, strMealThumb")


class CategoryListResponse(BaseModel):
    """Categories returned by /categories."""
    count: int = Field(..., ge=0, description="Number of categories")
    categories: List[MealCategory] = Field(default_factory=list)
