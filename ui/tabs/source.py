# ui/tabs/source.py
import streamlit as st

import utils.state as USTATE
from io_utils.declaration import (
    Declaration, declaration_from_mapping, load_declaration_csv, load_declaration_json,
    make_build_log_entry
)
from logic.errors import DecisionTreeError
from ui.utils.guards import has_sheets_secrets
from utils import SAMPLE_DECLARATION, SAMPLE_NAME


def render():
    """Render the Source tab for loading a choice declaration."""
    st.header("📂 Source")
    st.markdown("Load a choice declaration (JSON mapping or ID / Name / Children / Root table).")

    has_tree, count, source = USTATE.get_tree_status()
    if has_tree:
        st.caption(f"Tree: ✅ {count} choice(s) • Source: **{source}**")
    else:
        st.caption("Tree: ❌ not loaded")

    strict = st.checkbox(
        "Strict build (reject unknown child ids)",
        value=False,
        help="By default unknown ids only show up as gaps when browsing.",
    )

    if has_tree:
        _render_active_tree_actions(strict)
        st.markdown("---")
    _render_sample_section(strict)
    st.markdown("---")
    _render_upload_section(strict)
    st.markdown("---")
    _render_google_sheets_section(strict)


def load_into_session(declaration: Declaration, strict: bool = False) -> bool:
    """
    Build the declaration and make it the active tree.

    Structural errors are shown to the user and recorded in the build log;
    the previously active tree (if any) stays in place.
    """
    try:
        tree = declaration.build(strict=strict)
    except DecisionTreeError as e:
        USTATE.append_build_log(make_build_log_entry(
            source=declaration.source, status="failed",
            roots=len(declaration.roots), choices=len(declaration.choices), error=e,
        ))
        st.error(f"Could not build tree from {declaration.source}: {e}")
        return False

    USTATE.set_active_tree(tree, declaration=declaration, source=declaration.source)
    USTATE.append_build_log(make_build_log_entry(
        source=declaration.source, status="ok",
        roots=len(tree.roots), choices=len(tree), extra={"strict": strict},
    ))
    return True


def _render_active_tree_actions(strict: bool):
    col1, col2 = st.columns(2)
    with col1:
        declaration = USTATE.get_active_declaration()
        if declaration is not None and st.button("🔁 Rebuild", help="Build the loaded declaration again with the current strict setting."):
            if load_into_session(declaration, strict):
                st.success(f"Rebuilt {declaration.source}.")
    with col2:
        if st.button("🗑️ Unload tree"):
            USTATE.clear_tree_state()
            st.rerun()


def _render_sample_section(strict: bool):
    st.subheader("🧪 Sample")
    if st.button(f"Load '{SAMPLE_NAME}'"):
        if load_into_session(declaration_from_mapping(SAMPLE_DECLARATION, source="sample"), strict):
            st.success("Sample tree loaded.")


def _render_upload_section(strict: bool):
    st.subheader("📤 Upload Declaration")
    file = st.file_uploader("Upload JSON or CSV", type=["json", "csv"])
    if file is None:
        return
    if not st.button("Build from upload"):
        return
    try:
        if file.name.lower().endswith(".json"):
            declaration = load_declaration_json(file.getvalue(), source=file.name)
        else:
            declaration = load_declaration_csv(file.getvalue(), source=file.name)
    except DecisionTreeError as e:
        USTATE.append_build_log(make_build_log_entry(source=file.name, status="failed", error=e))
        st.error(f"Could not read {file.name}: {e}")
        return
    if load_into_session(declaration, strict):
        st.success(f"Loaded {len(declaration.choices)} choice(s) from {file.name}.")


def _render_google_sheets_section(strict: bool):
    st.subheader("🔄 Google Sheets")
    if not has_sheets_secrets():
        st.info("Google Sheets not configured. Add your service account JSON under [gcp_service_account].")
        return

    from io_utils.sheets import read_google_sheet_declaration

    sheet_id = st.text_input("Spreadsheet ID", value=st.session_state.get("sheet_id", ""))
    sheet_name = st.text_input("Worksheet name", value=st.session_state.get("sheet_name", "Choices"))
    if not st.button("Load from Google Sheets"):
        return
    st.session_state["sheet_id"] = sheet_id
    st.session_state["sheet_name"] = sheet_name
    try:
        with st.spinner("Reading sheet..."):
            declaration = read_google_sheet_declaration(sheet_id, sheet_name, st.secrets["gcp_service_account"])
    except DecisionTreeError as e:
        USTATE.append_build_log(make_build_log_entry(source=f"sheets:{sheet_name}", status="failed", error=e))
        st.error(f"Could not read '{sheet_name}': {e}")
        return
    except Exception as e:
        st.error(f"Google Sheets error: {type(e).__name__}: {e}")
        return
    if load_into_session(declaration, strict):
        st.success(f"Loaded {len(declaration.choices)} choice(s) from '{sheet_name}'.")
