# logic/tree.py
"""
Pure logic for building and navigating a choice tree.
No Streamlit dependencies - can be imported by both logic and UI modules.

PARENT LINK POLICY:
Authors only declare children. The parent of every node is derived in a single
construction pass, and a node may be declared as a child by at most one parent.
Roots never get a parent. Once built, Choice records are frozen; queries never
write back into the tree, so a built tree can be shared between sessions.

LOOKUP MISSES:
Unknown ids are reported with the NOT_FOUND sentinel, never with an exception.
Exceptions (see logic.errors) are reserved for structurally invalid declarations.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from logic.errors import ConfigError, DuplicateIdError, ParentConflictError, UnresolvedReferenceError
from utils.constants import CHILDREN_KEY, NAME_KEY, ROOT_PARENT_LABEL
from utils.helpers import dedupe_preserving_order, normalize_text


class _NotFound:
    """Falsy singleton returned when a lookup misses."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __reduce__(self):
        return (_NotFound, ())


NOT_FOUND = _NotFound()


@dataclass(frozen=True)
class Choice:
    id: str
    name: str = ""
    children: Optional[Tuple[str, ...]] = None
    parent: Optional[str] = None

    @property
    def is_leaf(self) -> bool:
        return self.children is None

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict view; `children`/`parent` are omitted when absent."""
        out: Dict[str, Any] = {"id": self.id, "name": self.name}
        if self.children is not None:
            out["children"] = list(self.children)
        if self.parent is not None:
            out["parent"] = self.parent
        return out


ChoiceOrMissing = Union[Choice, _NotFound]


class DecisionTree:
    """
    A built, read-only choice tree.

    Use build_tree() to create one from a declaration; constructing a
    DecisionTree directly skips parent derivation and conflict checks.
    """

    def __init__(self, roots: Optional[Sequence[str]], nodes: Mapping[str, Choice]):
        self._roots: Tuple[str, ...] = tuple(roots) if roots else ()
        self._nodes: Dict[str, Choice] = dict(nodes)

    @property
    def roots(self) -> Tuple[str, ...]:
        return self._roots

    @property
    def nodes(self) -> Dict[str, Choice]:
        return dict(self._nodes)

    def __contains__(self, node_id) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"DecisionTree(roots={list(self._roots)!r}, nodes={len(self._nodes)})"

    # ----- lookups -----

    def get_initial(self) -> List[ChoiceOrMissing]:
        """
        Return the root choices in declared order.

        Raises:
            ConfigError: If the tree has no root list
        """
        if not self._roots:
            raise ConfigError("DecisionTree: no initial choice(s) specified")
        return self.get_nodes(self._roots)

    def get_node(self, node_id: str) -> ChoiceOrMissing:
        if node_id in self._nodes:
            return self._nodes[node_id]
        return NOT_FOUND

    def get_nodes(self, ids: Optional[Sequence[str]]) -> List[ChoiceOrMissing]:
        """Map ids through get_node; unknown ids stay in place as NOT_FOUND."""
        if not ids:
            return []
        return [self.get_node(i) for i in ids]

    def get_children(self, parent_id: str) -> Union[List[ChoiceOrMissing], _NotFound]:
        """
        Return the declared children of parent_id, in order.

        Args:
            parent_id: Id of the node to expand

        Returns:
            List of children (NOT_FOUND holes for unresolved ids), or NOT_FOUND
            when parent_id is unknown or the node declares no children.
            Use is_leaf() to tell those two cases apart.
        """
        node = self.get_node(parent_id)
        if node is NOT_FOUND or node.children is None:
            return NOT_FOUND
        return self.get_nodes(node.children)

    def is_leaf(self, node_id: str) -> bool:
        node = self.get_node(node_id)
        return node is not NOT_FOUND and node.is_leaf

    # ----- upward walk -----

    def get_parents(self, node_id: str) -> List[Choice]:
        """
        Return the ancestors of node_id, root first, excluding the node itself.

        Roots and unknown ids yield []. The walk stops at the first id it has
        already visited, so a malformed parent cycle cannot loop forever.
        """
        node = self.get_node(node_id)
        if node is NOT_FOUND:
            return []

        parents: List[Choice] = []
        seen = {node.id}
        while node.parent is not None and node.parent not in seen:
            parent = self.get_node(node.parent)
            if parent is NOT_FOUND:
                break
            seen.add(parent.id)
            parents.insert(0, parent)
            node = parent
        return parents

    def get_parent_ids(self, node_id: str) -> List[str]:
        return [p.id for p in self.get_parents(node_id)]

    def get_parent_name(self, node_id: str) -> Union[str, _NotFound]:
        """Name of the immediate parent of node_id, or NOT_FOUND for roots."""
        parents = self.get_parents(node_id)
        if not parents:
            return NOT_FOUND
        return parents[-1].name

    # ----- downward walk -----

    def walk(self) -> Iterator[Tuple[Choice, int]]:
        """Depth-first (choice, depth) pairs from the roots, in declared order."""
        seen = set()
        stack: List[Tuple[str, int]] = [(r, 0) for r in reversed(self._roots)]
        while stack:
            node_id, depth = stack.pop()
            node = self.get_node(node_id)
            if node is NOT_FOUND or node.id in seen:
                continue
            seen.add(node.id)
            yield node, depth
            for child_id in reversed(node.children or ()):
                stack.append((child_id, depth + 1))


def _coerce_raw_node(node_id: str, raw: Any) -> Tuple[str, Optional[Tuple[str, ...]]]:
    """Extract (name, children) from a raw declaration entry."""
    if isinstance(raw, Choice):
        return raw.name, raw.children
    if not isinstance(raw, Mapping):
        raise ConfigError(
            f'DecisionTree: choice "{node_id}" must be a mapping with a name, got {type(raw).__name__}'
        )
    name = raw.get(NAME_KEY)
    if name is None:
        name = ""
    elif not isinstance(name, str):
        name = str(name)
    children = raw.get(CHILDREN_KEY)
    if children is None:
        return name, None
    if isinstance(children, str) or not isinstance(children, Sequence):
        raise ConfigError(f'DecisionTree: children of "{node_id}" must be a list of ids')
    return name, tuple(normalize_text(c) for c in children)


def build_tree(roots: Sequence[str], nodes: Mapping[str, Any], *, strict: bool = False) -> DecisionTree:
    """
    Build and validate a decision tree from a declaration.

    Args:
        roots: Ordered ids of the initial choices (must be non-empty)
        nodes: Mapping id -> {"name": ..., "children": [...]} (or Choice records)
        strict: Also reject ids referenced in roots/children that have no node

    Returns:
        DecisionTree: Fully linked, read-only tree

    Raises:
        ConfigError: If roots is empty or the declaration is malformed
        DuplicateIdError: If two keys are the same id once whitespace is trimmed
        ParentConflictError: If a child id is claimed by two different parents
            (or a root is declared as someone's child)
        UnresolvedReferenceError: strict mode only, for unknown ids
    """
    if not roots or isinstance(roots, str):
        raise ConfigError("DecisionTree: no initial choice(s) specified")
    if not isinstance(nodes, Mapping):
        raise ConfigError("DecisionTree: choices must be a mapping of id -> choice")

    root_ids = tuple(normalize_text(r) for r in roots)
    root_set = set(root_ids)

    declared: Dict[str, Tuple[str, Optional[Tuple[str, ...]]]] = {}
    collided: List[str] = []
    for key, raw in nodes.items():
        node_id = normalize_text(key)
        if node_id in declared:
            collided.append(node_id)
            continue
        declared[node_id] = _coerce_raw_node(node_id, raw)
    if collided:
        raise DuplicateIdError(collided)

    parents: Dict[str, str] = {}
    for node_id, (_name, children) in declared.items():
        for child_id in children or ():
            if child_id in root_set:
                raise ParentConflictError(child_id, ROOT_PARENT_LABEL, node_id)
            existing = parents.get(child_id)
            if existing is not None and existing != node_id:
                raise ParentConflictError(child_id, existing, node_id)
            parents[child_id] = node_id

    if strict:
        referenced = list(root_ids) + [c for _n, children in declared.values() for c in (children or ())]
        missing = [i for i in dedupe_preserving_order(referenced) if i not in declared]
        if missing:
            raise UnresolvedReferenceError(missing)

    records = {
        node_id: Choice(id=node_id, name=name, children=children, parent=parents.get(node_id))
        for node_id, (name, children) in declared.items()
    }
    return DecisionTree(root_ids, records)
