"""
Utility modules for the Streamlit frontend.

This package contains:
- api_client: Backend and favorites API communication
- session: Signed-in user handling (identity provider stand-in)
"""
