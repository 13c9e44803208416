# utils/constants.py

APP_VERSION = "v1.2.0"

# Keys of the mapping-form declaration ({"initial": [...], "choices": {...}})
INITIAL_KEY = "initial"
CHOICES_KEY = "choices"
NAME_KEY = "name"
CHILDREN_KEY = "children"

# Columns of the tabular declaration (CSV / DataFrame / Google Sheet)
ID_COL = "ID"
NAME_COL = "Name"
CHILDREN_COL = "Children"
ROOT_COL = "Root"
DECLARATION_HEADERS = [ID_COL, NAME_COL, CHILDREN_COL, ROOT_COL]

# Columns of the exported tree table
EXPORT_HEADERS = [ID_COL, NAME_COL, "Parent", "Depth", CHILDREN_COL, ROOT_COL]

# Separators accepted inside a Children cell ("a; b" or "a, b")
CHILD_ID_SEPARATORS = (";", ",")
CHILD_ID_JOINER = "; "

# Values of the Root column treated as "this row is a root"
ROOT_TRUTHY = {"1", "true", "yes", "y", "x", "root"}

# Label used for a root's claimant in parent-conflict messages
ROOT_PARENT_LABEL = "<ROOT>"

# Heading shown above the initial choice list
DEFAULT_TITLE = "Do what?"

# UI strings
TAB_ICONS = {
    "source": "📂", "browse": "🧭", "validation": "🔎", "parents": "🪜", "build_log": "📜",
}
