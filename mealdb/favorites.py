"""
Favorites backend client.

Fetches the recipes a user saved from the favorites backend
(GET {FAVORITES_API_URL}/favorites/{user_id}) and reshapes them for display:
each entry's id is replaced by its recipeId so the recipe card can key
favorites and TheMealDB meals on the same field.

Unlike the TheMealDB client, failures are not collapsed into an empty result.
fetch_favorites() raises FavoritesError so the UI can tell the user loading failed.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

import requests
from pydantic import ValidationError

from api.config import FavoritesConfig
from mealdb.models import FavoriteRecipe

logger = logging.getLogger(__name__)


class FavoritesError(Exception):
    """
    Exception raised when a user's favorites cannot be loaded.

    Raised for connection errors, non-2xx responses, malformed JSON and
    entries that do not match FavoriteRecipe.
    """
    pass


def reshape_favorites(favorites: Iterable[Dict[str, Any]]) -> List[FavoriteRecipe]:
    """
    Promote each favorite's recipeId to its id.

    No other field is altered; extra fields are passed through and order is kept.

    Examples:
        >>> [f.id for f in reshape_favorites([{"id": "f1", "recipeId": "r9", "title": "X"}])]
        ['r9']
    """
    return [
        FavoriteRecipe.model_validate({**favorite, "id": favorite.get("recipeId")})
        for favorite in favorites
    ]


def fetch_favorites(
    user_id: Optional[str],
    api_url: Optional[str] = None,
    timeout: Optional[float] = 10,
) -> List[FavoriteRecipe]:
    """
    Load and reshape a user's favorites.

    Args:
        user_id: Identifier of the signed-in user. Empty/None returns [] without a request.
        api_url: Favorites backend base URL (optional, defaults to FavoritesConfig.get_api_url())
        timeout: Request timeout in seconds

    Returns:
        List of FavoriteRecipe with id == recipeId, in backend order

    Raises:
        FavoritesError: If the favorites could not be fetched or parsed
    """
    if not user_id:
        return []

    base_url = (api_url or FavoritesConfig.get_api_url()).rstrip("/")
    url = f"{base_url}/favorites/{user_id}"

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        favorites = response.json()
        if not isinstance(favorites, list):
            raise ValueError(f"Expected a JSON array of favorites, got {type(favorites).__name__}")
        reshaped = reshape_favorites(favorites)
    except (requests.exceptions.RequestException, ValueError, ValidationError, TypeError) as e:
        logger.error("Error loading favorites for user %s: %s", user_id, e)
        raise FavoritesError("Failed to fetch favorites") from e

    logger.info("Loaded %d favorites for user %s", len(reshaped), user_id)
    return reshaped
