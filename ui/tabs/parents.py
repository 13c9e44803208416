# ui/tabs/parents.py
import streamlit as st

import utils.state as USTATE
from io_utils.declaration import (
    export_dataframe_to_csv_bytes, export_tree_json, make_build_log_entry, parents_as_json,
    tree_to_dataframe
)
from ui.utils.guards import ensure_active_tree, has_sheets_secrets


def render():
    """Render the Lookup tab: ancestors of an id, plus table/JSON export."""
    ok, tree = ensure_active_tree("Lookup")
    if not ok:
        return

    st.header("🪜 Lookup & Export")

    cid = st.text_input("Show parents for id")
    if cid:
        result = parents_as_json(tree, cid.strip())
        if result is None:
            st.warning(f"'{cid}' is not a choice id.")
        else:
            st.code(result, language="json")

    st.markdown("---")
    df = tree_to_dataframe(tree)
    st.dataframe(df, use_container_width=True)
    col1, col2 = st.columns(2)
    with col1:
        st.download_button("Download CSV", export_dataframe_to_csv_bytes(df), "choices.csv", "text/csv")
    with col2:
        st.download_button("Download JSON", export_tree_json(tree), "choices.json", "application/json")

    if has_sheets_secrets():
        st.markdown("---")
        _render_push_section(tree)


def _render_push_section(tree):
    st.subheader("📤 Push to Google Sheets")
    from io_utils.sheets import push_tree_to_google_sheets

    sheet_id = st.text_input("Spreadsheet ID", value=st.session_state.get("sheet_id", ""), key="push_sheet_id")
    sheet_name = st.text_input("Target worksheet", value="Export", key="push_sheet_name")
    if not st.button("Push tree"):
        return
    try:
        with st.spinner("Writing sheet..."):
            rows = push_tree_to_google_sheets(sheet_id, sheet_name, tree, st.secrets["gcp_service_account"])
    except Exception as e:
        USTATE.append_build_log(make_build_log_entry(
            source=f"push:{sheet_name}", status="failed", choices=len(tree), error=e,
        ))
        st.error(f"Google Sheets error: {type(e).__name__}: {e}")
        return
    USTATE.append_build_log(make_build_log_entry(
        source=f"push:{sheet_name}", status="ok", roots=len(tree.roots), choices=rows,
    ))
    st.success(f"Wrote {rows} row(s) to '{sheet_name}'.")
