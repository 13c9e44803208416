# io_utils/declaration.py
"""
Pure IO functions for loading choice declarations and exporting built trees.
No Streamlit dependencies - can be imported by both logic and UI modules.

Two declaration shapes are accepted:
  - mapping: {"initial": [ids...], "choices": {id: {"name": ..., "children": [...]}}}
    A key repeated in the JSON text, or two keys that only differ by
    surrounding whitespace, is rejected with DuplicateIdError.
  - table: one row per choice with ID / Name / Children / Root columns.
    Duplicate ids are possible here and are rejected with DuplicateIdError.
"""

import io
import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

import pandas as pd

from logic.errors import ConfigError, DuplicateIdError
from logic.tree import NOT_FOUND, DecisionTree, build_tree
from logic.validate import detect_duplicate_ids
from utils import (
    CHILDREN_COL, EXPORT_HEADERS, ID_COL, NAME_COL, ROOT_COL,
    drop_blank_rows, ensure_declaration_columns, is_root_flag, normalize_text, split_child_ids,
    validate_headers
)
from utils.constants import CHILD_ID_JOINER, CHILDREN_KEY, CHOICES_KEY, INITIAL_KEY, NAME_KEY


@dataclass
class Declaration:
    """An unvalidated declaration: ordered root ids plus id -> raw choice."""
    roots: List[str]
    choices: Dict[str, Dict[str, Any]]
    source: str = "unspecified"

    def build(self, strict: bool = False) -> DecisionTree:
        return build_tree(self.roots, self.choices, strict=strict)

    def to_mapping(self) -> Dict[str, Any]:
        return {INITIAL_KEY: list(self.roots), CHOICES_KEY: dict(self.choices)}


# ===== Mapping / JSON =====

class _PairsDict(dict):
    """dict built by the JSON decoder that remembers which keys were repeated."""
    duplicate_keys: List[str]


def _pairs_hook(pairs) -> _PairsDict:
    out = _PairsDict()
    out.duplicate_keys = []
    for key, value in pairs:
        if key in out:
            out.duplicate_keys.append(key)
        out[key] = value
    return out


def _duplicate_keys(obj) -> List[str]:
    return list(getattr(obj, "duplicate_keys", []))


def declaration_from_mapping(data: Any, source: str = "mapping") -> Declaration:
    """
    Validate the outer shape of a mapping-form declaration.

    Args:
        data: {"initial": [...], "choices": {...}}
        source: Label recorded on the declaration (file name, "sample"...)

    Returns:
        Declaration

    Raises:
        ConfigError: If the shape is wrong
        DuplicateIdError: If a choice id is declared twice
    """
    if not isinstance(data, dict):
        raise ConfigError("Invalid declaration: expected an object with 'initial' and 'choices'")
    repeated = _duplicate_keys(data)
    if repeated:
        raise ConfigError(f"Invalid declaration: key(s) {', '.join(repeated)} given more than once")

    roots = data.get(INITIAL_KEY)
    if roots is None:
        roots = []
    if isinstance(roots, str) or not isinstance(roots, list):
        raise ConfigError(f"Invalid declaration: '{INITIAL_KEY}' must be a list of choice ids")

    choices = data.get(CHOICES_KEY)
    if not isinstance(choices, dict):
        raise ConfigError(f"Invalid declaration: '{CHOICES_KEY}' must be an object keyed by choice id")

    dups = _duplicate_keys(choices)
    normalized: Dict[str, Dict[str, Any]] = {}
    for key, raw in choices.items():
        node_id = normalize_text(key)
        if node_id in normalized:
            dups.append(node_id)
        normalized[node_id] = raw
        repeated = _duplicate_keys(raw)
        if repeated:
            raise ConfigError(
                f"Invalid declaration: choice '{node_id}' gives {', '.join(repeated)} more than once"
            )
    if dups:
        raise DuplicateIdError([normalize_text(d) for d in dups])

    return Declaration(
        roots=[normalize_text(r) for r in roots],
        choices=normalized,
        source=source,
    )


def load_declaration_json(payload: Union[bytes, str], source: str = "json") -> Declaration:
    """
    Parse JSON bytes/text into a Declaration.

    Raises:
        ConfigError: If the JSON is invalid or has the wrong shape
        DuplicateIdError: If the choices object repeats an id
    """
    try:
        text = payload.decode("utf-8") if isinstance(payload, bytes) else payload
        data = json.loads(text, object_pairs_hook=_pairs_hook)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid JSON: {e}") from e
    return declaration_from_mapping(data, source=source)


# ===== Tables (CSV / DataFrame) =====

def declaration_from_dataframe(df: pd.DataFrame, source: str = "table") -> Declaration:
    """
    Build a Declaration from a table with ID / Name / Children / Root columns.

    Root order follows row order. Blank Children cells mean "leaf"; ids inside a
    cell are separated by ';' or ','.

    Raises:
        ConfigError: If there is no ID column or no rows
        DuplicateIdError: If an id appears on more than one row
    """
    if not isinstance(df, pd.DataFrame):
        raise ConfigError("Invalid declaration table: expected a DataFrame")
    if not validate_headers(df):
        raise ConfigError(f"Invalid declaration table: needs an '{ID_COL}' column and at least one row")

    table = drop_blank_rows(ensure_declaration_columns(df))

    dups = detect_duplicate_ids(table)
    if dups:
        raise DuplicateIdError([i for i, _n in dups])

    roots: List[str] = []
    choices: Dict[str, Dict[str, Any]] = {}
    for _, row in table.iterrows():
        node_id = normalize_text(row[ID_COL])
        raw: Dict[str, Any] = {NAME_KEY: normalize_text(row[NAME_COL])}
        children = split_child_ids(row[CHILDREN_COL])
        if children is not None:
            raw[CHILDREN_KEY] = children
        choices[node_id] = raw
        if is_root_flag(row[ROOT_COL]):
            roots.append(node_id)

    return Declaration(roots=roots, choices=choices, source=source)


def load_declaration_csv(file_or_bytes, source: str = "csv") -> Declaration:
    """Read a CSV (path, file-like or bytes) into a Declaration."""
    if isinstance(file_or_bytes, bytes):
        file_or_bytes = io.BytesIO(file_or_bytes)
    try:
        df = pd.read_csv(file_or_bytes, dtype=str, keep_default_na=False)
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
        raise ConfigError(f"Invalid CSV: {e}") from e
    return declaration_from_dataframe(df, source=source)


# ===== Export =====

def tree_to_dataframe(tree: DecisionTree) -> pd.DataFrame:
    """
    Flatten a built tree to one row per choice.

    Reachable choices come first in depth-first order; unreachable ones follow
    in declaration order.
    """
    rows = []
    emitted = set()

    def _row(node, depth):
        return {
            ID_COL: node.id,
            NAME_COL: node.name,
            "Parent": node.parent or "",
            "Depth": depth,
            CHILDREN_COL: CHILD_ID_JOINER.join(node.children or ()),
            ROOT_COL: "yes" if node.id in tree.roots else "",
        }

    for node, depth in tree.walk():
        rows.append(_row(node, depth))
        emitted.add(node.id)
    for node in tree.nodes.values():
        if node.id not in emitted:
            rows.append(_row(node, len(tree.get_parent_ids(node.id))))

    return pd.DataFrame(rows, columns=EXPORT_HEADERS)


def export_dataframe_to_csv_bytes(df: pd.DataFrame) -> bytes:
    """
    Export DataFrame to CSV bytes.

    Args:
        df: DataFrame to export

    Returns:
        bytes: CSV data as bytes
    """
    return df.to_csv(index=False).encode("utf-8")


def export_tree_json(tree: DecisionTree) -> bytes:
    """Serialize a built tree back to the mapping form as pretty JSON bytes."""
    data = {
        INITIAL_KEY: list(tree.roots),
        CHOICES_KEY: {
            node.id: {k: v for k, v in node.to_dict().items() if k in (NAME_KEY, CHILDREN_KEY)}
            for node in tree.nodes.values()
        },
    }
    return json.dumps(data, indent=2).encode("utf-8")


def parents_as_json(tree: DecisionTree, node_id: str) -> Optional[str]:
    """
    Pretty JSON of the ancestors of node_id (root first), or None if the id is unknown.
    """
    if tree.get_node(node_id) is NOT_FOUND:
        return None
    return json.dumps([p.to_dict() for p in tree.get_parents(node_id)], indent=4)


# ===== Build Log Helper =====

def make_build_log_entry(
    *,
    source: str,
    status: str,
    roots: int = 0,
    choices: int = 0,
    error: Optional[BaseException] = None,
    extra: Optional[Dict[str, str]] = None,
) -> Dict[str, str]:
    """
    Create a standardized build-log row (dict) you can append to a session log list.

    Args:
        source: Where the declaration came from
        status: "ok" or "failed"
        roots: Number of root ids
        choices: Number of declared choices
        error: Exception raised by the build, if any
        extra: Additional fields

    Returns:
        Dict[str, str]: Build log entry
    """
    row = {
        "ts": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "source": source,
        "status": status,
        "roots": str(roots),
        "choices": str(choices),
        "error": f"{type(error).__name__}: {error}" if error is not None else "",
    }
    if extra:
        row.update({str(k): str(v) for k, v in extra.items()})
    return row
