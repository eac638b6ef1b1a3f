"""
Standardized feedback utilities for consistent error, empty, and loading states.

Provides reusable components for displaying errors, empty states, blocking
alerts, and loading indicators across all pages in a consistent manner.
"""

from contextlib import contextmanager
from typing import Callable, Optional

import streamlit as st


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display an inline error message with optional hint.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_alert(title: str, message: str) -> None:
    """
    Open a blocking alert dialog with a single OK button.

    Args:
        title: Dialog title (e.g., "Error")
        message: Dialog body text
    """
    @st.dialog(title)
    def _alert() -> None:
        st.write(message)
        if st.button("OK", type="primary", use_container_width=True):
            st.rerun()

    _alert()


def confirm_action(
    title: str,
    message: str,
    confirm_label: str,
    on_confirm: Callable[[], None],
    cancel_label: str = "Cancel",
) -> None:
    """
    Open a confirmation dialog with Cancel and a destructive confirm button.

    Args:
        title: Dialog title
        message: Question shown to the user
        confirm_label: Label of the confirm button
        on_confirm: Called when the user confirms; the app reruns afterwards
        cancel_label: Label of the cancel button (default: "Cancel")
    """
    @st.dialog(title)
    def _confirm() -> None:
        st.write(message)
        col_cancel, col_confirm = st.columns(2)
        if col_cancel.button(cancel_label, use_container_width=True):
            st.rerun()
        if col_confirm.button(confirm_label, type="primary", use_container_width=True):
            on_confirm()
            st.rerun()

    _confirm()


def show_empty_state(
    title: str,
    subtitle: Optional[str] = None,
    action_label: str = "Get started",
    action_page_path: Optional[str] = None
) -> None:
    """
    Display a standardized empty state with optional action button.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
        action_label: Label for the action button
        action_page_path: Optional page path to navigate to when button is clicked
    """
    st.info(f"📭 **{title}**")
    if subtitle:
        st.caption(subtitle)

    if action_page_path:
        if st.button(action_label, use_container_width=True, type="primary"):
            st.switch_page(action_page_path)


@contextmanager
def working_spinner(label: str = "Working…"):
    """
    Context manager wrapper for standardized loading spinners.

    Usage:
        with working_spinner("Loading your favorites..."):
            favorites = load_favorites(user_id)
    """
    with st.spinner(label):
        yield
