# ui/navigator.py
"""
Click/back navigation over a built DecisionTree.

The Navigator only calls the tree's query methods and keeps one piece of state,
the id whose children are on screen (None = the initial choices). It has no
Streamlit dependency so it can be unit tested; ui/tabs/browse.py renders it.
"""

from typing import List, Optional

from logic.tree import NOT_FOUND, Choice, DecisionTree
from utils import DEFAULT_TITLE


class Navigator:
    def __init__(self, tree: DecisionTree, current_id: Optional[str] = None):
        self.tree = tree
        self.current_id = current_id if current_id in tree else None

    def items(self) -> List[Choice]:
        """Choices to render for the current position; unresolved ids are skipped."""
        if self.current_id is None:
            found = self.tree.get_initial()
        else:
            found = self.tree.get_children(self.current_id)
            if found is NOT_FOUND:
                found = []
        return [c for c in found if c is not NOT_FOUND]

    def heading(self, items: Optional[List[Choice]] = None) -> str:
        """Name of the parent of the first listed choice, or the default title."""
        items = self.items() if items is None else items
        if not items:
            return DEFAULT_TITLE
        name = self.tree.get_parent_name(items[0].id)
        return name if name else DEFAULT_TITLE

    def select(self, choice_id: str) -> bool:
        """
        Descend into choice_id. Leaves and unknown ids are ignored.

        Returns:
            True if the position changed
        """
        if self.tree.get_children(choice_id) is NOT_FOUND:
            return False
        self.current_id = choice_id
        return True

    def back(self) -> bool:
        """Go up one level. Returns False when already at the initial choices."""
        if self.current_id is None:
            return False
        parents = self.tree.get_parents(self.current_id)
        self.current_id = parents[-1].id if parents else None
        return True

    def reset(self) -> None:
        self.current_id = None

    def breadcrumb(self) -> List[Choice]:
        """Ancestors of the current position plus the current choice itself."""
        if self.current_id is None:
            return []
        current = self.tree.get_node(self.current_id)
        return self.tree.get_parents(self.current_id) + [current]
