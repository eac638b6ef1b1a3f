"""
TheMealDB client.

This module wraps TheMealDB's public JSON API (https://www.themealdb.com/api.php):
- search.php?s=<name>        search meals by name
- lookup.php?i=<id>          full meal details by id
- random.php                 a single random meal
- categories.php             all meal categories
- filter.php?i=<ingredient>  abbreviated meals by main ingredient
- filter.php?c=<category>    abbreviated meals by category

Every call degrades to an empty list (or None for single-record lookups) on any
failure: connection errors, non-2xx responses, malformed JSON and records that
fail validation are logged and swallowed. Callers therefore cannot tell
"no results" apart from "request failed".

The base URL is injected at construction and falls back to MealDBConfig.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from api.config import MealDBConfig
from mealdb.models import MealCategory, MealDBMeal

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone besides the RFC 3986 unreserved set
_URI_COMPONENT_SAFE = "!*'()"

# Failures collapsed into an empty result
_FETCH_ERRORS = (requests.exceptions.RequestException, ValueError, ValidationError)

DEFAULT_RANDOM_COUNT = 6


def encode_uri_component(value: str) -> str:
    """
    Percent-encode user text for use as a single query parameter value.

    Matches JavaScript's encodeURIComponent: spaces become %20 (not '+') and
    '&', '=', '/', '?' are all escaped.

    Examples:
        >>> encode_uri_component("chicken breast")
        'chicken%20breast'
        >>> encode_uri_component("mac & cheese")
        'mac%20%26%20cheese'
    """
    return quote(value, safe=_URI_COMPONENT_SAFE)


class MealAPI:
    """
    Client for TheMealDB REST API.

    Attributes:
        base_url: API base URL without trailing slash
        timeout: Per-request timeout in seconds, or None for no timeout
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None) -> None:
        """
        Args:
            base_url: TheMealDB base URL (optional, defaults to MealDBConfig.get_base_url())
            timeout: Request timeout in seconds (optional, defaults to MealDBConfig.get_timeout())
        """
        self.base_url = (base_url or MealDBConfig.get_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else MealDBConfig.get_timeout()

    def _get_json(self, path: str) -> Dict[str, Any]:
        """GET {base_url}/{path} and return the decoded JSON body. Raises on any failure."""
        url = f"{self.base_url}/{path}"
        logger.debug("GET %s", url)
        response = requests.get(url, timeout=self.timeout)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object from {path}, got {type(data).__name__}")
        return data

    def _get_list(self, path: str, field: str) -> List[Any]:
        """Return the list under `field` of a JSON body; null or missing counts as empty. Raises on any failure."""
        items = self._get_json(path).get(field) or []
        if not isinstance(items, list):
            raise ValueError(f"Expected '{field}' from {path} to be a list, got {type(items).__name__}")
        return items

    def _get_meals(self, path: str) -> List[MealDBMeal]:
        """Fetch a path whose body is {"meals": [...] | null}. Raises on any failure."""
        meals = self._get_list(path, "meals")
        return [MealDBMeal.model_validate(meal) for meal in meals]

    def search_meals_by_name(self, query: str) -> List[MealDBMeal]:
        """
        Search meals by name.

        Args:
            query: Free-text meal name (e.g., "Arrabiata")

        Returns:
            List of matching MealDBMeal records; empty on no match or failure
        """
        try:
            meals = self._get_meals(f"search.php?s={encode_uri_component(query)}")
            logger.info("Search for %r returned %d meals", query, len(meals))
            return meals
        except _FETCH_ERRORS as e:
            logger.error("Error searching meals by name: %s", e)
            return []

    def get_meal_by_id(self, meal_id: str) -> Optional[MealDBMeal]:
        """
        Look up full meal details by id.

        The id is sent as-is (not percent-encoded).

        Returns:
            The first matching MealDBMeal, or None on no match or failure
        """
        try:
            meals = self._get_meals(f"lookup.php?i={meal_id}")
            return meals[0] if meals else None
        except _FETCH_ERRORS as e:
            logger.error("Error getting meal by id: %s", e)
            return None

    def get_random_meal(self) -> Optional[MealDBMeal]:
        """
        Fetch one random meal.

        Returns:
            A MealDBMeal, or None on failure
        """
        try:
            meals = self._get_meals("random.php")
            return meals[0] if meals else None
        except _FETCH_ERRORS as e:
            logger.error("Error getting random meal: %s", e)
            return None

    def get_random_meals(self, count: int = DEFAULT_RANDOM_COUNT) -> List[MealDBMeal]:
        """
        Fetch several random meals concurrently.

        Issues `count` independent random.php requests at once and waits for all of
        them. Failed or empty fetches are dropped, so the result may be shorter than
        `count` (and may contain the same meal twice, since each pick is independent).
        Surviving meals keep the order of the requests that produced them.

        Args:
            count: Number of random meals to request (default: 6)

        Returns:
            List of up to `count` MealDBMeal records
        """
        if count <= 0:
            return []

        try:
            with ThreadPoolExecutor(max_workers=count) as executor:
                results = list(executor.map(lambda _: self.get_random_meal(), range(count)))
        except Exception as e:
            logger.error("Error getting random meals: %s", e)
            return []

        meals = [meal for meal in results if meal is not None]
        if len(meals) < count:
            logger.warning("Random meals: %d of %d requests returned no meal", count - len(meals), count)
        return meals

    def get_categories(self) -> List[MealCategory]:
        """
        List all meal categories.

        Returns:
            List of MealCategory records; empty on failure
        """
        try:
            categories = self._get_list("categories.php", "categories")
            return [MealCategory.model_validate(category) for category in categories]
        except _FETCH_ERRORS as e:
            logger.error("Error getting categories: %s", e)
            return []

    def filter_by_ingredient(self, ingredient: str) -> List[MealDBMeal]:
        """
        Filter meals by main ingredient.

        Returns:
            Abbreviated MealDBMeal records (idMeal, strMeal, strMealThumb); empty on failure
        """
        try:
            return self._get_meals(f"filter.php?i={encode_uri_component(ingredient)}")
        except _FETCH_ERRORS as e:
            logger.error("Error filtering by ingredient: %s", e)
            return []

    def filter_by_category(self, category: str) -> List[MealDBMeal]:
        """
        Filter meals by category.

        Returns:
            Abbreviated MealDBMeal records (idMeal, strMeal, strMealThumb); empty on failure
        """
        try:
            return self._get_meals(f"filter.php?c={encode_uri_component(category)}")
        except _FETCH_ERRORS as e:
            logger.error("Error filtering by category: %s", e)
            return []
