"""
Backend Data Panel - Streamlit Application

Displays the greeting served by the configured backend, with manual refresh.
"""

import streamlit as st
import sys
from pathlib import Path

# Add src and the repository root to the Python path so `config.*`,
# `data_panel.*` and `dashboard.*` imports work under `streamlit run`
repo_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(repo_root / "src"))
sys.path.insert(0, str(repo_root))

from dashboard.components import data_panel
from utils.logging import setup_logging


def main():
    """Main dashboard application."""
    setup_logging()

    # Page configuration
    st.set_page_config(
        page_title="Backend Data Panel",
        page_icon="🛰️",
        layout="centered",
    )

    render_data_panel()


def render_data_panel():
    """Render the backend data panel and mirror its status in the sidebar."""
    try:
        panel_result = data_panel.render_panel()

        st.sidebar.subheader("🛰️ Backend Status")
        status = panel_result.get("status", "unknown")
        view = panel_result.get("view", {})

        if status == "success":
            st.sidebar.success("✅ Connected")
        elif status == "error":
            st.sidebar.error("❌ Request failed")
        elif status == "empty":
            st.sidebar.warning("⚠️ No data yet")
        else:
            st.sidebar.info(f"ℹ️ Status: {status}")

        if view.get("version"):
            st.sidebar.metric("Backend Version", view["version"])

    except Exception as e:
        st.error(f"❌ Error rendering data panel: {e}")
        st.sidebar.error("❌ Panel Error")


if __name__ == "__main__":
    main()
