"""
Choice Tree Navigator - Streamlit Application
Loads a choice declaration, builds the tree once and lets the user click through it.
"""

import streamlit as st

import utils.state as USTATE
from io_utils.declaration import declaration_from_mapping
from utils import APP_VERSION, SAMPLE_DECLARATION, TAB_ICONS
from ui.tabs import source, browse, validation, parents, build_log
from ui.tabs.source import load_into_session
from ui.utils.debug import dump_state, render_guard


def main():
    """Main application entry point."""
    st.set_page_config(
        page_title=f"Choice Tree Navigator {APP_VERSION}",
        page_icon="🌳",
        layout="wide",
        initial_sidebar_state="collapsed"
    )

    _initialize_session_state()

    with st.sidebar:
        st.markdown(f"### 🌳 Choice Tree Navigator `{APP_VERSION}`")
        if st.button("🧹 Reset session state"):
            st.session_state.clear()
            st.rerun()
        report = USTATE.verify_active_tree()
        for problem in report["problems"]:
            st.warning(problem)
    dump_state("Session")

    tabs = st.tabs([
        f"{TAB_ICONS['browse']} Browse",
        f"{TAB_ICONS['source']} Source",
        f"{TAB_ICONS['validation']} Validation",
        f"{TAB_ICONS['parents']} Lookup",
        f"{TAB_ICONS['build_log']} Build Log",
    ])
    with tabs[0]:
        render_guard("Browse", browse.render)
    with tabs[1]:
        render_guard("Source", source.render)
    with tabs[2]:
        render_guard("Validation", validation.render)
    with tabs[3]:
        render_guard("Lookup", parents.render)
    with tabs[4]:
        render_guard("Build Log", build_log.render)


def _initialize_session_state():
    """Load the sample tree on first run so Browse is never empty."""
    if not USTATE.has_active_tree() and not st.session_state.get("_sample_attempted"):
        st.session_state["_sample_attempted"] = True
        load_into_session(declaration_from_mapping(SAMPLE_DECLARATION, source="sample"))


if __name__ == "__main__":
    main()
