"""
Backend API Client Module.

This module is the single source of truth for HTTP calls made by the Streamlit
frontend: meal data goes through the FastAPI backend, favorites come straight
from the favorites backend via mealdb.favorites.

Key principles:
- Centralized error handling for network issues
- Graceful degradation when a backend is unavailable
- Return parsed JSON (dict/list) or None on error; never let exceptions crash a page
"""

import logging
from typing import Any, Dict, List, Optional

import requests
import streamlit as st

from api.config import get_backend_url
from mealdb.favorites import FavoritesError, fetch_favorites

logger = logging.getLogger(__name__)


@st.cache_data(ttl=60)  # Cache for 60 seconds to avoid hitting backend too frequently
def get_health_status() -> Optional[Dict[str, Any]]:
    """
    Check backend health status by calling /health endpoint.

    Returns:
        The /health response dictionary if status is "ok", otherwise None.
    """
    try:
        response = requests.get(f"{get_backend_url()}/health", timeout=5)
        response.raise_for_status()
        data = response.json()
        return data if data.get("status") == "ok" else None
    except requests.exceptions.RequestException:
        # Backend offline, slow or unhealthy
        return None


def _get_backend(path: str, params: Optional[Dict[str, Any]] = None, timeout: int = 30) -> Optional[Any]:
    """GET a backend path, showing a user-visible error and returning None on failure."""
    try:
        response = requests.get(f"{get_backend_url()}{path}", params=params, timeout=timeout)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.Timeout:
        st.error("Request timed out. The backend may be slow or unreachable.")
        return None
    except requests.exceptions.ConnectionError:
        st.error("Could not connect to backend. Please check your connection and that the backend is running.")
        return None
    except requests.exceptions.HTTPError as e:
        st.error(f"Backend returned an error: {e.response.status_code} - {e.response.text}")
        return None
    except requests.exceptions.RequestException as e:
        st.error(f"An error occurred while contacting the backend: {str(e)}")
        return None


@st.cache_data(ttl=300, show_spinner=False)
def search_meals(query: str) -> Optional[List[Dict[str, Any]]]:
    """
    Search meals by name via GET /meals/search.

    Returns:
        List of normalized meal dicts (camelCase keys), or None on error.
    """
    data = _get_backend("/meals/search", params={"q": query})
    return data.get("results", []) if data else None


def get_random_meals(count: int = 6) -> Optional[List[Dict[str, Any]]]:
    """
    Fetch random meals via GET /meals/random.

    Returns:
        List of normalized meal dicts (possibly fewer than count), or None on error.
    """
    data = _get_backend("/meals/random", params={"count": count})
    return data.get("results", []) if data else None


@st.cache_data(ttl=300, show_spinner=False)
def get_meal(meal_id: str) -> Optional[Dict[str, Any]]:
    """
    Fetch one normalized meal via GET /meals/{meal_id}.

    Returns:
        Meal dict, or None if not found or on error.
    """
    try:
        response = requests.get(f"{get_backend_url()}/meals/{meal_id}", timeout=30)
        if response.status_code == 404:
            return None
        response.raise_for_status()
        return response.json()
    except requests.exceptions.RequestException as e:
        st.warning(f"Could not load recipe {meal_id}: {str(e)}")
        return None


def load_favorites(user_id: str) -> Optional[List[Dict[str, Any]]]:
    """
    Load a user's favorites from the favorites backend.

    Returns:
        List of favorite dicts with id == recipeId, or None if loading failed.
        The caller is responsible for telling the user about a failure.
    """
    try:
        favorites = fetch_favorites(user_id)
    except FavoritesError as e:
        logger.warning("Error loading favorites: %s", e)
        return None
    return [favorite.model_dump() for favorite in favorites]
