"""
Configuration management for MealDB Favorites.

This module centralizes environment variable loading from .env file at project root.
It should be imported early in both backend (api/main.py) and frontend (streamlit_app/app.py)
to ensure .env is loaded before any other code accesses environment variables.

In production, .env will not exist; load_dotenv() is safe to call and will no-op.
Platform environment variables will be used instead.

Environment Variables:
- MEALDB_BASE_URL: Optional, defaults to "https://www.themealdb.com/api/json/v1/1"
- MEALDB_TIMEOUT: Optional request timeout in seconds for TheMealDB calls (unset = no timeout)
- FAVORITES_API_URL: Optional, favorites backend base URL (defaults to http://localhost:5001/api)
- BACKEND_URL: Optional, backend URL (defaults to http://localhost:8000 for local dev)
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MEALDB_BASE_URL = "https://www.themealdb.com/api/json/v1/1"
DEFAULT_FAVORITES_API_URL = "http://localhost:5001/api"
DEFAULT_BACKEND_URL = "http://localhost:8000"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Locates the project root by going up from this file's location
    (api/config.py -> project root) and loads .env if it exists.
    Safe to call multiple times; existing environment variables take precedence.
    """
    project_root = Path(__file__).resolve().parent.parent
    env_path = project_root / ".env"
    load_dotenv(env_path, override=False)


# Load .env file on module import
load_env_file()


class MealDBConfig:
    """Configuration for the TheMealDB client."""

    @staticmethod
    def get_base_url() -> str:
        """
        Get TheMealDB API base URL.

        Returns:
            Base URL string with trailing slash removed
            (default: "https://www.themealdb.com/api/json/v1/1")
        """
        return os.getenv("MEALDB_BASE_URL", DEFAULT_MEALDB_BASE_URL).rstrip("/")

    @staticmethod
    def get_timeout() -> Optional[float]:
        """
        Get the request timeout for TheMealDB calls.

        Returns:
            Timeout in seconds, or None when MEALDB_TIMEOUT is unset or not a positive number
        """
        raw = os.getenv("MEALDB_TIMEOUT")
        if not raw:
            return None
        try:
            timeout = float(raw)
        except ValueError:
            logger.warning("Ignoring invalid MEALDB_TIMEOUT=%r (expected seconds as a number)", raw)
            return None
        return timeout if timeout > 0 else None


class FavoritesConfig:
    """Configuration for the favorites backend."""

    @staticmethod
    def get_api_url() -> str:
        """
        Get the favorites backend base URL.

        Returns:
            URL string with trailing slash removed (default: "http://localhost:5001/api")
        """
        return os.getenv("FAVORITES_API_URL", DEFAULT_FAVORITES_API_URL).rstrip("/")


def get_backend_url() -> str:
    """
    Get the FastAPI backend base URL used by the Streamlit frontend.

    Returns:
        Backend URL string with trailing slash removed. Defaults to http://localhost:8000.
    """
    return os.getenv("BACKEND_URL", DEFAULT_BACKEND_URL).rstrip("/")


def get_config_summary() -> Dict[str, Any]:
    """
    Summarize the effective configuration (no secrets are involved).

    Returns:
        Dictionary with the resolved MealDB base URL, timeout, favorites URL and backend URL
    """
    return {
        "mealdb_base_url": MealDBConfig.get_base_url(),
        "mealdb_timeout": MealDBConfig.get_timeout(),
        "favorites_api_url": FavoritesConfig.get_api_url(),
        "backend_url": get_backend_url(),
    }
