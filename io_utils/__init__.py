# io package
from .declaration import (
    Declaration,

    # Loading
    declaration_from_mapping,
    load_declaration_json,
    declaration_from_dataframe,
    load_declaration_csv,

    # Export
    tree_to_dataframe,
    export_dataframe_to_csv_bytes,
    export_tree_json,
    parents_as_json,

    # Build log
    make_build_log_entry
)

__all__ = [
    'Declaration',
    'declaration_from_mapping',
    'load_declaration_json',
    'declaration_from_dataframe',
    'load_declaration_csv',
    'tree_to_dataframe',
    'export_dataframe_to_csv_bytes',
    'export_tree_json',
    'parents_as_json',
    'make_build_log_entry'
]
