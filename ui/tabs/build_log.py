# ui/tabs/build_log.py
import pandas as pd
import streamlit as st

import utils.state as USTATE


def render():
    """Render the Build Log tab (one row per load attempt in this session)."""
    st.header("📜 Build Log")
    log = USTATE.get_build_log()
    if not log:
        st.info("No builds recorded yet.")
        return

    failed = [row for row in log if row.get("status") != "ok"]
    col1, col2 = st.columns(2)
    col1.metric("Builds", len(log))
    col2.metric("Failed", len(failed))

    df = pd.DataFrame(sorted(log, key=lambda r: r.get("ts", ""), reverse=True))
    st.dataframe(df, use_container_width=True)
