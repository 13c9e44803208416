# utils/helpers.py
import re
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd

from .constants import CHILD_ID_SEPARATORS, DECLARATION_HEADERS, ID_COL, ROOT_TRUTHY


def normalize_text(x) -> str:
    """Return a stripped string, converting NaN/None to ""."""
    try:
        if x is None:
            return ""
        if isinstance(x, float) and np.isnan(x):
            return ""
    except Exception:
        return ""
    return str(x).strip()


_SPLIT_RE = re.compile("|".join(re.escape(s) for s in CHILD_ID_SEPARATORS))


def split_child_ids(value) -> Optional[List[str]]:
    """
    Turn a Children value into an ordered list of ids.

    Lists/tuples are normalized item by item; strings are split on ';' or ','.
    Blank cells (None, NaN, "") mean "no children declared" and return None.
    """
    if isinstance(value, (list, tuple)):
        return [normalize_text(v) for v in value if normalize_text(v) != ""]
    text = normalize_text(value)
    if text == "":
        return None
    return [part.strip() for part in _SPLIT_RE.split(text) if part.strip() != ""]


def is_root_flag(value) -> bool:
    """True for Root cells like 'yes', 'x', 1, True."""
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    text = normalize_text(value).lower()
    if text.endswith(".0"):
        text = text[:-2]
    return text in ROOT_TRUTHY


def validate_headers(df: pd.DataFrame) -> bool:
    """Verify that a declaration table has at least the ID column and one data row."""
    try:
        if not isinstance(df, pd.DataFrame) or df.empty:
            return False
        return ID_COL in [normalize_text(c) for c in df.columns]
    except Exception:
        return False


def ensure_declaration_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Ensure the DataFrame has all declaration columns (creates missing as "") and in order."""
    if not isinstance(df, pd.DataFrame):
        return pd.DataFrame(columns=DECLARATION_HEADERS)
    df2 = df.copy()
    df2.columns = [normalize_text(c) for c in df2.columns]
    for c in DECLARATION_HEADERS:
        if c not in df2.columns:
            df2[c] = ""
    return df2[DECLARATION_HEADERS]


def drop_blank_rows(df: pd.DataFrame) -> pd.DataFrame:
    """Drop rows whose ID cell is blank."""
    if not isinstance(df, pd.DataFrame) or df.empty:
        return df.copy() if isinstance(df, pd.DataFrame) else pd.DataFrame()
    mask_blank = df[ID_COL].map(normalize_text) == ""
    return df[~mask_blank].copy()


def dedupe_preserving_order(ids: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for i in ids:
        if i not in seen:
            seen.add(i)
            out.append(i)
    return out
