# utils package
# utils.state (Streamlit session helpers) is imported explicitly by the UI only,
# so logic/ and io_utils/ stay importable without a running Streamlit session.
from .constants import (
    APP_VERSION, DECLARATION_HEADERS, EXPORT_HEADERS, ID_COL, NAME_COL, CHILDREN_COL,
    ROOT_COL, DEFAULT_TITLE, TAB_ICONS
)
from .helpers import (
    normalize_text, split_child_ids, is_root_flag, validate_headers,
    ensure_declaration_columns, drop_blank_rows
)
from .sample_data import SAMPLE_DECLARATION, SAMPLE_NAME

__all__ = [
    'APP_VERSION', 'DECLARATION_HEADERS', 'EXPORT_HEADERS', 'ID_COL', 'NAME_COL', 'CHILDREN_COL',
    'ROOT_COL', 'DEFAULT_TITLE', 'TAB_ICONS',
    'normalize_text', 'split_child_ids', 'is_root_flag', 'validate_headers',
    'ensure_declaration_columns', 'drop_blank_rows',
    'SAMPLE_DECLARATION', 'SAMPLE_NAME'
]
