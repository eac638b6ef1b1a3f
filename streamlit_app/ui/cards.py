"""
Recipe card components.

A recipe card renders either a normalized meal from the backend or a favorite
from the favorites backend; both expose id, title, description, image, cookTime
and servings. Grids key every card on its id.
"""

from typing import Any, Callable, Dict, List, Optional

import streamlit as st

SELECTED_MEAL_KEY = "selected_meal_id"
DISCOVER_PAGE = "pages/02_🔍_Discover.py"


def render_recipe_card(recipe: Dict[str, Any], key: str) -> None:
    """
    Render one recipe card with a "View recipe" button.

    Args:
        recipe: Meal or favorite dict with at least id and title
        key: Unique widget key for this card
    """
    with st.container(border=True):
        if recipe.get("image"):
            st.image(recipe["image"], use_container_width=True)
        st.markdown(f"**{recipe.get('title') or 'Untitled recipe'}**")
        if recipe.get("description"):
            st.caption(recipe["description"])

        meta = []
        if recipe.get("cookTime"):
            meta.append(f"⏱ {recipe['cookTime']}")
        servings = recipe.get("servings")
        if servings:
            # Favorites may store servings as free text such as "4 people"
            meta.append(f"🍽 {servings} servings" if isinstance(servings, int) else f"🍽 {servings}")
        if meta:
            st.caption(" · ".join(meta))

        if st.button("View recipe", key=f"view-{key}", use_container_width=True):
            st.session_state[SELECTED_MEAL_KEY] = str(recipe["id"])
            st.switch_page(DISCOVER_PAGE)


def render_recipe_grid(
    recipes: List[Dict[str, Any]],
    columns: int = 2,
    key_prefix: str = "recipe",
    on_empty: Optional[Callable[[], None]] = None,
) -> None:
    """
    Render recipes as a grid of cards, keyed on each recipe's id.

    Args:
        recipes: Meal or favorite dicts
        columns: Number of cards per row (default: 2)
        key_prefix: Prefix for widget keys so several grids can share a page
        on_empty: Called instead of rendering when recipes is empty
    """
    if not recipes:
        if on_empty:
            on_empty()
        return

    for row_start in range(0, len(recipes), columns):
        cols = st.columns(columns)
        for offset, (col, recipe) in enumerate(zip(cols, recipes[row_start:row_start + columns])):
            # Random picks may repeat a meal, so the position is part of the key
            with col:
                render_recipe_card(recipe, key=f"{key_prefix}-{row_start + offset}-{recipe['id']}")


def render_recipe_detail(meal: Dict[str, Any]) -> None:
    """
    Render a normalized meal in full: header, ingredients, numbered steps and links.

    Args:
        meal: Normalized meal dict as returned by GET /meals/{meal_id}
    """
    st.markdown(f"## {meal.get('title') or 'Untitled recipe'}")
    tags = [t for t in (meal.get("category"), meal.get("area")) if t]
    if tags:
        st.caption(" · ".join(tags))

    col_image, col_ingredients = st.columns([1, 1])
    with col_image:
        if meal.get("image"):
            st.image(meal["image"], use_container_width=True)
        st.caption(f"⏱ {meal.get('cookTime')} · 🍽 {meal.get('servings')} servings")
    with col_ingredients:
        st.markdown("#### Ingredients")
        for ingredient in meal.get("ingredients", []):
            st.markdown(f"- {ingredient}")

    st.markdown("#### Instructions")
    for number, step in enumerate(meal.get("instructions", []), start=1):
        st.markdown(f"**{number}.** {step.strip()}")

    original = meal.get("originalData") or {}
    if original.get("strYoutube"):
        st.video(original["strYoutube"])
    if original.get("strSource"):
        st.markdown(f"[Original recipe]({original['strSource']})")
