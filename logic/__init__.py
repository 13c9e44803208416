# logic package
from .errors import (
    DecisionTreeError,
    ConfigError,
    DuplicateIdError,
    UnresolvedReferenceError,
    ParentConflictError
)
from .tree import (
    NOT_FOUND,
    Choice,
    DecisionTree,
    build_tree
)
from .validate import (
    detect_unresolved_ids,
    detect_orphan_nodes,
    detect_loops,
    detect_duplicate_ids,
    compute_validation_report
)

__all__ = [
    'DecisionTreeError',
    'ConfigError',
    'DuplicateIdError',
    'UnresolvedReferenceError',
    'ParentConflictError',
    'NOT_FOUND',
    'Choice',
    'DecisionTree',
    'build_tree',
    'detect_unresolved_ids',
    'detect_orphan_nodes',
    'detect_loops',
    'detect_duplicate_ids',
    'compute_validation_report'
]
