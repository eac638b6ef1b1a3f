"""
MealDB Favorites - Streamlit Frontend Main Entry Point.

This is the main Streamlit application entry point. It sets up the page configuration
and the sidebar with sign-in and backend status.

Note: Multi-page routing is handled automatically by Streamlit via the `pages/` folder.
Files in `pages/` starting with numbered prefixes (e.g., `01_⭐_Favorites.py`) will appear
as pages in the sidebar navigation.

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import api.config and mealdb
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import streamlit as st

from utils.api_client import get_health_status
from utils.session import get_current_user_id, sign_in

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="MealDB Favorites",
    page_icon="🍳",
    layout="wide",
    initial_sidebar_state="expanded"
)

with st.sidebar:
    st.markdown("### 🍳 **MealDB Favorites**")
    st.divider()

    user_id = get_current_user_id()
    if user_id:
        st.caption(f"Signed in as **{user_id}**")
    else:
        with st.form("sign-in"):
            entered = st.text_input("User id", placeholder="user_123")
            if st.form_submit_button("Sign in", use_container_width=True, type="primary"):
                sign_in(entered)
                st.rerun()

    st.divider()

    health = get_health_status()
    if health:
        st.caption(f"🟢 Backend online · v{health.get('version', '?')}")
    else:
        st.caption("🔴 Backend offline")

st.title("🍳 MealDB Favorites")
st.write("Browse recipes from TheMealDB and keep track of the ones you love.")

col_favorites, col_discover = st.columns(2)
with col_favorites:
    if st.button("⭐ My favorites", use_container_width=True, type="primary"):
        st.switch_page("pages/01_⭐_Favorites.py")
with col_discover:
    if st.button("🔍 Discover recipes", use_container_width=True):
        st.switch_page("pages/02_🔍_Discover.py")
