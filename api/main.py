"""
FastAPI application for the MealDB Favorites API.

This module exposes the TheMealDB client and the meal normalizer over HTTP:
- GET /meals/search: Search meals by name (normalized)
- GET /meals/random: Several random meals (normalized)
- GET /meals/filter: Abbreviated meals by ingredient or category
- GET /meals/{meal_id}: One meal by id (normalized)
- GET /categories: All meal categories
- GET /health: Health check

Failures talking to TheMealDB never surface as errors here: the client collapses
them into empty results, so these endpoints return 200 with an empty list.

Run the API with:
    uvicorn api.main:app --reload

Access API documentation at:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)
"""

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import logging
import time
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query, status

from mealdb.client import DEFAULT_RANDOM_COUNT, MealAPI
from mealdb.models import Meal
from mealdb.transform import transform_meal_data, transform_meals
from api.schemas import CategoryListResponse, FilterResponse, MealListResponse

logger = logging.getLogger(__name__)

API_NAME = "MealDB Favorites API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "Backend API for browsing TheMealDB recipes in a normalized format"

MAX_RANDOM_COUNT = 20

# Track app start time for uptime calculation
_APP_START_TIME = time.time()

app = FastAPI(
    title=API_NAME,
    description=API_DESCRIPTION,
    version=API_VERSION,
    tags_metadata=[
        {
            "name": "meals",
            "description": "Search, look up and pick random meals from TheMealDB, normalized.",
        },
        {
            "name": "categories",
            "description": "TheMealDB meal categories.",
        },
        {
            "name": "health",
            "description": "Health check and monitoring endpoints.",
        },
    ],
)

_meal_api: Optional[MealAPI] = None


def get_meal_api() -> MealAPI:
    """
    Shared MealAPI instance, created on first use from MealDBConfig.

    Declared as a dependency so tests can swap it via app.dependency_overrides.
    """
    global _meal_api
    if _meal_api is None:
        _meal_api = MealAPI()
    return _meal_api


@app.get(
    "/meals/search",
    response_model=MealListResponse,
    tags=["meals"],
    summary="Search meals by name",
)
def search_meals(
    q: str = Query(..., min_length=1, description="Meal name to search for (e.g., 'Arrabiata')"),
    meal_api: MealAPI = Depends(get_meal_api),
) -> MealListResponse:
    """
    Search TheMealDB by meal name and return normalized meals.

    Example:
        GET /meals/search?q=chicken
    """
    meals = transform_meals(meal_api.search_meals_by_name(q))
    return MealListResponse(query=q, count=len(meals), results=meals)


@app.get(
    "/meals/random",
    response_model=MealListResponse,
    tags=["meals"],
    summary="Get several random meals",
)
def random_meals(
    count: int = Query(DEFAULT_RANDOM_COUNT, ge=1, le=MAX_RANDOM_COUNT, description="Number of random meals to request"),
    meal_api: MealAPI = Depends(get_meal_api),
) -> MealListResponse:
    """
    Request `count` random meals concurrently.

    Failed picks are dropped, so `count` in the response may be lower than `requested`.
    """
    meals = transform_meals(meal_api.get_random_meals(count))
    return MealListResponse(requested=count, count=len(meals), results=meals)


@app.get(
    "/meals/filter",
    response_model=FilterResponse,
    tags=["meals"],
    summary="Filter meals by main ingredient or category",
)
def filter_meals(
    ingredient: Optional[str] = Query(None, description="Main ingredient (e.g., 'chicken_breast')"),
    category: Optional[str] = Query(None, description="Category (e.g., 'Seafood')"),
    meal_api: MealAPI = Depends(get_meal_api),
) -> FilterResponse:
    """
    Filter meals by exactly one of ingredient or category.

    Raises:
        HTTPException 400: If neither or both filters are given
    """
    if bool(ingredient) == bool(category):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Provide exactly one of 'ingredient' or 'category'.",
        )

    if ingredient:
        meals = meal_api.filter_by_ingredient(ingredient)
    else:
        meals = meal_api.filter_by_category(category)
    return FilterResponse(ingredient=ingredient, category=category, count=len(meals), results=meals)


@app.get(
    "/meals/{meal_id}",
    response_model=Meal,
    tags=["meals"],
    summary="Look up one meal by id",
)
def get_meal(meal_id: str, meal_api: MealAPI = Depends(get_meal_api)) -> Meal:
    """
    Look up a meal by TheMealDB id and return it normalized.

    Raises:
        HTTPException 404: If TheMealDB has no such meal (or the lookup failed)
    """
    meal = transform_meal_data(meal_api.get_meal_by_id(meal_id))
    if meal is None:
        logger.info("Meal lookup for id=%r returned nothing", meal_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Meal '{meal_id}' not found",
        )
    return meal


@app.get("/categories", response_model=CategoryListResponse, tags=["categories"])
def list_categories(meal_api: MealAPI = Depends(get_meal_api)) -> CategoryListResponse:
    """List all TheMealDB categories."""
    categories = meal_api.get_categories()
    return CategoryListResponse(count=len(categories), categories=categories)


@app.get("/health", tags=["health"])
def health():
    """
    Health check endpoint for monitoring and status checks.

    Returns:
        Dictionary with status, API metadata, uptime and the configured TheMealDB URL.
        Always returns 200 OK if the endpoint is reachable.
    """
    uptime_seconds = int(time.time() - _APP_START_TIME)

    return {
        "status": "ok",
        "name": API_NAME,
        "version": API_VERSION,
        "description": API_DESCRIPTION,
        "uptime_seconds": uptime_seconds,
        "mealdb_base_url": api.config.MealDBConfig.get_base_url(),
    }


@app.get("/")
def root():
    """
    Root endpoint providing API information.

    Returns:
        Dictionary with API name and version
    """
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "description": API_DESCRIPTION,
        "docs": "/docs",
    }
