# logic/validate.py
"""
Non-fatal structural diagnostics for decision trees.
No Streamlit dependencies - can be imported by both logic and UI modules.

build_tree() only rejects what makes a tree unusable (no roots, parent
conflicts). Everything here is advisory and is shown in the Validation tab.
"""

from typing import Any, Dict, List, Set, Tuple

import pandas as pd

from logic.tree import DecisionTree
from utils import ID_COL, normalize_text
from utils.helpers import dedupe_preserving_order


def detect_unresolved_ids(tree: DecisionTree) -> List[Dict[str, Any]]:
    """
    Detect ids referenced as roots or children that have no matching choice.

    Args:
        tree: Built decision tree

    Returns:
        List of issue dictionaries, one per (referrer, missing id) pair
    """
    issues = []
    for root_id in dedupe_preserving_order(tree.roots):
        if root_id not in tree:
            issues.append({
                "node": root_id,
                "referenced_by": None,
                "type": "unresolved_root",
                "description": f"Root '{root_id}' is not declared as a choice",
            })
    for node in tree.nodes.values():
        for child_id in dedupe_preserving_order(node.children or ()):
            if child_id not in tree:
                issues.append({
                    "node": child_id,
                    "referenced_by": node.id,
                    "type": "unresolved_child",
                    "description": f"Child '{child_id}' of '{node.id}' is not declared as a choice",
                })
    return issues


def detect_orphan_nodes(tree: DecisionTree) -> List[Dict[str, Any]]:
    """Choices that are neither roots nor anybody's child (unreachable)."""
    roots = set(tree.roots)
    orphans = []
    for node in tree.nodes.values():
        if node.parent is None and node.id not in roots:
            orphans.append({
                "node": node.id,
                "name": node.name,
                "type": "orphan",
                "description": f"Choice '{node.id}' is not a root and has no parent",
            })
    return orphans


def detect_loops(tree: DecisionTree) -> List[Dict[str, Any]]:
    """
    Detect cycles in the parent links.

    A conflict-free build can still contain cycles among choices that are not
    reachable from any root (e.g. a lists b and b lists a).

    Returns:
        List of loop information dictionaries
    """
    nodes = tree.nodes
    loops = []
    seen_cycles: Set[Tuple[str, ...]] = set()
    cleared: Set[str] = set()

    for start in nodes:
        path: List[str] = []
        on_path: Set[str] = set()
        current = start
        while current in nodes and current not in cleared:
            if current in on_path:
                cycle = path[path.index(current):] + [current]
                key = tuple(sorted(set(cycle)))
                if key not in seen_cycles:
                    seen_cycles.add(key)
                    loops.append({
                        "path": cycle,
                        "length": len(cycle) - 1,
                        "start_node": current,
                        "cycle_type": "parent_cycle",
                    })
                break
            path.append(current)
            on_path.add(current)
            current = nodes[current].parent
        cleared.update(path)

    return loops


def detect_duplicate_ids(df: pd.DataFrame) -> List[Tuple[str, int]]:
    """
    Return [(id, count), ...] for ids declared on more than one row of a table.
    """
    if not isinstance(df, pd.DataFrame) or df.empty or ID_COL not in df.columns:
        return []
    ids = df[ID_COL].map(normalize_text)
    ids = ids[ids != ""]
    counts = ids.value_counts()
    return [(i, int(n)) for i, n in counts.items() if n > 1]


def compute_validation_report(tree: DecisionTree) -> Dict[str, Any]:
    """
    UI-ready summary of a built tree:
      - unresolved references
      - orphan choices
      - parent cycles
      - counts
    """
    unresolved = detect_unresolved_ids(tree)
    orphans = detect_orphan_nodes(tree)
    loops = detect_loops(tree)
    leaves = sum(1 for n in tree.nodes.values() if n.is_leaf)
    max_depth = max((depth for _node, depth in tree.walk()), default=0)
    return {
        "unresolved": unresolved,
        "orphans": orphans,
        "loops": loops,
        "counts": {
            "choices": len(tree),
            "roots": len(tree.roots),
            "leaves": leaves,
            "max_depth": max_depth,
            "unresolved": len(unresolved),
            "orphans": len(orphans),
            "loops": len(loops),
        },
        "ok": not (unresolved or orphans or loops),
    }
