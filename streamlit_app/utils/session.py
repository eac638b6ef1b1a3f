"""
Session management utilities for Streamlit pages.

This module stands in for the identity provider: it exposes the current user id
and sign-in/sign-out over st.session_state, which persists across page
navigations within the same browser session.
"""

from typing import Optional

import streamlit as st

USER_ID_KEY = "user_id"

# Per-user state dropped on sign-out
USER_SCOPED_KEYS = ("favorites", "favorites_user_id")


def get_current_user_id() -> Optional[str]:
    """
    Get the signed-in user's id.

    Returns:
        User id string, or None if nobody is signed in
    """
    return st.session_state.get(USER_ID_KEY)


def sign_in(user_id: str) -> None:
    """
    Sign a user in for this browser session.

    Blank ids are ignored. Switching user clears the previous user's cached state.
    """
    user_id = (user_id or "").strip()
    if not user_id:
        return
    if st.session_state.get(USER_ID_KEY) != user_id:
        _clear_user_state()
    st.session_state[USER_ID_KEY] = user_id


def sign_out() -> None:
    """Sign the current user out and drop their cached state."""
    st.session_state.pop(USER_ID_KEY, None)
    _clear_user_state()


def _clear_user_state() -> None:
    for key in USER_SCOPED_KEYS:
        st.session_state.pop(key, None)
