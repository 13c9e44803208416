# ui/utils/debug.py
from __future__ import annotations
import json, traceback
import streamlit as st

from logic.errors import DecisionTreeError


def _summ(v):
    try:
        t = type(v).__name__
        if hasattr(v, "shape"):
            return f"<{t} shape={getattr(v, 'shape', None)}>"
        if hasattr(v, "roots") and hasattr(v, "nodes"):
            return repr(v)
        if isinstance(v, dict):
            return "dict"
        if isinstance(v, list):
            return f"list(len={len(v)})"
        if isinstance(v, (str, int, float, bool)) or v is None:
            s = repr(v)
            return s if len(s) <= 120 else s[:117] + "..."
        return f"<{t}>"
    except Exception:
        return "<unrepr>"


def dump_state(where: str, keys: list[str] | None = None, expanded: bool = False):
    """Side-bar dump of session state (types, shapes, or short reprs)."""
    snap = {}
    for k in sorted(st.session_state.keys()):
        if keys and k not in keys:
            continue
        snap[k] = _summ(st.session_state[k])
    with st.sidebar.expander(f"🛠 Debug: {where}", expanded=expanded):
        st.code(json.dumps(snap, indent=2), language="json")


def render_guard(label: str, fn):
    """Run a tab render function with visible error reporting (no blank tabs)."""
    try:
        return fn()
    except DecisionTreeError as e:
        st.error(f"{label}: {e}")
        return None
    except Exception as e:
        st.error(f"Exception in {label}.render(): {type(e).__name__}: {e}")
        st.code(traceback.format_exc())
        return None
