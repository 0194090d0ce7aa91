"""Frontend framework layer for the Streamlit UI.

This package centralizes:
- page initialization (set_page_config)
- session-state helpers (per-browser-session controller)
"""
