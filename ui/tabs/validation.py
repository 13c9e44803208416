# ui/tabs/validation.py
import pandas as pd
import streamlit as st

import utils.state as USTATE
from logic.validate import compute_validation_report
from ui.utils.guards import ensure_active_tree


@st.cache_data(ttl=600, show_spinner=False)
def _cached_report(_tree, nonce: str):
    return compute_validation_report(_tree)


def render():
    """Render the Validation tab with advisory structural checks."""
    ok, tree = ensure_active_tree("Validation")
    if not ok:
        return

    st.header("🔎 Validation")
    report = _cached_report(tree, USTATE.get_tree_nonce())
    counts = report["counts"]

    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Choices", counts["choices"])
    col2.metric("Roots", counts["roots"])
    col3.metric("Leaves", counts["leaves"])
    col4.metric("Max depth", counts["max_depth"])

    if report["ok"]:
        st.success("No structural issues found.")
        return

    _render_issues("Unresolved ids", report["unresolved"])
    _render_issues("Orphan choices", report["orphans"])
    if report["loops"]:
        st.subheader(f"Parent cycles ({len(report['loops'])})")
        for loop in report["loops"]:
            st.write(" → ".join(loop["path"]))


def _render_issues(title: str, issues):
    if not issues:
        return
    st.subheader(f"{title} ({len(issues)})")
    st.dataframe(pd.DataFrame(issues), use_container_width=True)
