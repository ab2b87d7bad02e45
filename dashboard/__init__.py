"""Dashboard package namespace.

This package contains the Streamlit page and its components. Components keep
their display logic in small pure functions (e.g. `build_panel_view`) and
expose a `render_*` function that draws with Streamlit and returns a status
dict the page can echo in the sidebar.
"""
