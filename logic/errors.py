# logic/errors.py
"""
Construction-time faults for decision tree declarations.

Lookup misses are not errors: they are reported with the NOT_FOUND sentinel
from logic.tree.
"""

from typing import Iterable, Optional


class DecisionTreeError(Exception):
    """Base class for all structural faults raised while building a tree."""


class ConfigError(DecisionTreeError):
    """The declaration is unusable (no root list, malformed shape...)."""


class DuplicateIdError(ConfigError):
    """The same id is declared twice (repeated table row, repeated or colliding key)."""

    def __init__(self, ids: Iterable[str]):
        self.ids = sorted(set(ids))
        quoted = ", ".join(f'"{i}"' for i in self.ids)
        super().__init__(f"DecisionTree: duplicate ID(s) {quoted} in choice set")


class UnresolvedReferenceError(ConfigError):
    """Strict builds only: a root or child id has no matching node."""

    def __init__(self, ids: Iterable[str]):
        self.ids = list(ids)
        quoted = ", ".join(f'"{i}"' for i in self.ids)
        super().__init__(f"DecisionTree: unknown choice id(s) referenced: {quoted}")


class ParentConflictError(DecisionTreeError):
    """A child id is claimed by two different parents."""

    def __init__(self, child_id: str, existing_parent: Optional[str], new_parent: str):
        self.child_id = child_id
        self.existing_parent = existing_parent
        self.new_parent = new_parent
        super().__init__(
            f'DecisionTree: tried to assign parent "{new_parent}" to child "{child_id}" '
            f'which already has parent "{existing_parent}"'
        )
