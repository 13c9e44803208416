# utils/state.py
"""
Unified state management for the active decision tree and navigation position.
All tabs should use these helpers to access the active tree state.
"""

from typing import Any, Dict, List, Optional

import streamlit as st

TREE_KEY = "tree"                    # logic.tree.DecisionTree
TREE_SOURCE_KEY = "tree_source"      # str
DECLARATION_KEY = "declaration"      # io_utils.declaration.Declaration
CURRENT_ID_KEY = "nav_current_id"    # Optional[str]
BUILD_LOG_KEY = "build_log"          # List[Dict[str, str]]
TREE_NONCE_KEY = "tree_nonce"        # str, bumped on every tree change


def set_active_tree(tree, declaration=None, source: str = "unspecified") -> None:
    """Set the active tree and reset navigation to the initial choices."""
    st.session_state[TREE_KEY] = tree
    st.session_state[TREE_SOURCE_KEY] = source
    st.session_state[DECLARATION_KEY] = declaration
    st.session_state[CURRENT_ID_KEY] = None
    # bump nonce to invalidate caches keyed on it
    st.session_state[TREE_NONCE_KEY] = (st.session_state.get(TREE_NONCE_KEY) or "") + "•"


def get_active_tree():
    return st.session_state.get(TREE_KEY)


def get_active_declaration():
    return st.session_state.get(DECLARATION_KEY)


def has_active_tree() -> bool:
    return get_active_tree() is not None


def get_tree_status():
    """Get tree status for UI display: (has_tree, choice_count, source)."""
    tree = get_active_tree()
    if tree is None:
        return (False, 0, None)
    return (True, len(tree), st.session_state.get(TREE_SOURCE_KEY))


def get_tree_nonce() -> str:
    """Get the current tree nonce for cache keys."""
    return st.session_state.get(TREE_NONCE_KEY, "")


def get_current_id() -> Optional[str]:
    return st.session_state.get(CURRENT_ID_KEY)


def set_current_id(choice_id: Optional[str]) -> None:
    st.session_state[CURRENT_ID_KEY] = choice_id


def append_build_log(entry: Dict[str, str]) -> None:
    log: List[Dict[str, str]] = st.session_state.get(BUILD_LOG_KEY) or []
    log.append(entry)
    st.session_state[BUILD_LOG_KEY] = log


def get_build_log() -> List[Dict[str, str]]:
    return list(st.session_state.get(BUILD_LOG_KEY) or [])


def clear_tree_state() -> None:
    """Clear all tree-related state (the build log is kept)."""
    for key in [TREE_KEY, TREE_SOURCE_KEY, DECLARATION_KEY, CURRENT_ID_KEY, TREE_NONCE_KEY]:
        if key in st.session_state:
            del st.session_state[key]


def verify_active_tree() -> Dict[str, Any]:
    """Return a report about the session's tree state (shown in the debug sidebar)."""
    tree = get_active_tree()
    current = get_current_id()
    report: Dict[str, Any] = {
        "has_tree": tree is not None,
        "tree_type": type(tree).__name__,
        "source": st.session_state.get(TREE_SOURCE_KEY),
        "current_id": current,
    }
    problems: List[str] = []
    if tree is not None and current is not None and current not in tree:
        problems.append(f"current id '{current}' is not a choice of the active tree")
    report["problems"] = problems
    return report
