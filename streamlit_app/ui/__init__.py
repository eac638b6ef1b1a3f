"""
UI Components Module.

This module provides reusable UI components for the MealDB Favorites Streamlit app.
"""

from ui.cards import render_recipe_card, render_recipe_grid, render_recipe_detail
from ui.feedback import show_error, show_alert, confirm_action, show_empty_state, working_spinner

__all__ = [
    "render_recipe_card",
    "render_recipe_grid",
    "render_recipe_detail",
    "show_error",
    "show_alert",
    "confirm_action",
    "show_empty_state",
    "working_spinner",
]
