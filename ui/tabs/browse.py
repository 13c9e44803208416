# ui/tabs/browse.py
import streamlit as st

import utils.state as USTATE
from ui.navigator import Navigator
from ui.utils.guards import ensure_active_tree


def render():
    """Render the Browse tab: click through the choices, go back up."""
    ok, tree = ensure_active_tree("Browse")
    if not ok:
        return

    nav = Navigator(tree, USTATE.get_current_id())
    items = nav.items()

    st.header(nav.heading(items))

    crumbs = nav.breadcrumb()
    if crumbs:
        st.caption(" › ".join(c.name or c.id for c in crumbs))

    for item in items:
        label = item.name or item.id
        if tree.is_leaf(item.id):
            st.button(f"✔ {label}", key=f"choice_{item.id}", disabled=True)
        elif st.button(label, key=f"choice_{item.id}"):
            if nav.select(item.id):
                USTATE.set_current_id(nav.current_id)
                st.rerun()

    st.markdown("---")
    col1, col2 = st.columns(2)
    with col1:
        if st.button("⬅ Back", disabled=nav.current_id is None):
            nav.back()
            USTATE.set_current_id(nav.current_id)
            st.rerun()
    with col2:
        if st.button("⟲ Start over", disabled=nav.current_id is None):
            nav.reset()
            USTATE.set_current_id(None)
            st.rerun()
