# ui/utils/guards.py
"""
Guard utilities for tab rendering to prevent blank tabs and provide clear error messages.
"""

from typing import Optional, Tuple

import streamlit as st

import utils.state as USTATE
from logic.tree import DecisionTree


def ensure_active_tree(tab_name: str) -> Tuple[bool, Optional[DecisionTree]]:
    """
    Ensure a built tree is available for tab rendering.

    Args:
        tab_name: Name of the tab, shown in the warning

    Returns:
        Tuple of (success, DecisionTree)
    """
    tree = USTATE.get_active_tree()
    if tree is None:
        st.warning(f"[{tab_name}] No decision tree loaded. Load one in 📂 Source.")
        return False, None
    return True, tree


def has_sheets_secrets() -> bool:
    """True when a Google service account is configured in Streamlit secrets."""
    try:
        return "gcp_service_account" in st.secrets
    except FileNotFoundError:
        return False
