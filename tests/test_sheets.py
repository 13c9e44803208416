import pytest
import pandas as pd
from gspread.exceptions import WorksheetNotFound

import io_utils.sheets as sheets
from utils.constants import DECLARATION_HEADERS


class FakeWorksheet:
    def __init__(self, values):
        self.values = values
        self.cleared = False

    def get_all_values(self):
        return self.values

    def clear(self):
        self.cleared = True


class FakeSpreadsheet:
    def __init__(self, tabs):
        self.tabs = tabs

    def worksheet(self, title):
        if title not in self.tabs:
            raise WorksheetNotFound(title)
        return self.tabs[title]


VALUES = [
    [" ID ", "Name", "Children", "Root", "Notes"],
    ["a", " A ", "b; c", "yes", "ignored"],
    ["b", "B", "", "", ""],
    ["c", "C", "", "", ""],
]


class TestReadWorksheet:
    """Test reading declarations from a worksheet."""

    def test_read_worksheet_with_headers(self):
        """The header row becomes the DataFrame columns."""
        spreadsheet = FakeSpreadsheet({"Choices": FakeWorksheet(VALUES)})
        df = sheets.read_worksheet_with_headers(spreadsheet, "Choices")
        assert list(df.columns) == DECLARATION_HEADERS
        assert df["Name"].tolist() == ["A", "B", "C"]

    def test_empty_worksheet(self):
        """An empty worksheet still gives the declaration columns."""
        spreadsheet = FakeSpreadsheet({"Choices": FakeWorksheet([])})
        df = sheets.read_worksheet_with_headers(spreadsheet, "Choices")
        assert df.empty
        assert list(df.columns) == DECLARATION_HEADERS

    def test_missing_worksheet(self):
        """A missing worksheet propagates the gspread error."""
        with pytest.raises(WorksheetNotFound):
            sheets.read_worksheet_with_headers(FakeSpreadsheet({}), "Choices")

    def test_read_google_sheet_declaration(self, monkeypatch):
        """A worksheet loads into a buildable declaration."""
        spreadsheet = FakeSpreadsheet({"Choices": FakeWorksheet(VALUES)})
        monkeypatch.setattr(sheets, "get_gspread_client_from_secrets", lambda secrets: object())
        monkeypatch.setattr(sheets, "open_spreadsheet", lambda client, sid: spreadsheet)

        decl = sheets.read_google_sheet_declaration("x" * 44, "Choices", {})
        assert decl.source == "sheets:Choices"
        tree = decl.build()
        assert [c.id for c in tree.get_children("a")] == ["b", "c"]
        assert tree.get_parent_name("c") == "A"


class TestOpenSpreadsheet:
    """Test spreadsheet id validation."""

    def test_short_id_rejected(self):
        """Spreadsheet ids that are too short are rejected before any request."""
        with pytest.raises(ValueError):
            sheets.open_spreadsheet(object(), "short")


class TestPushTree:
    """Test exporting a tree to a worksheet."""

    def test_push_tree_to_google_sheets(self, monkeypatch):
        """The flattened tree is written to the named worksheet."""
        from logic.tree import build_tree

        written = {}
        monkeypatch.setattr(sheets, "get_gspread_client_from_secrets", lambda secrets: object())
        monkeypatch.setattr(sheets, "open_spreadsheet", lambda client, sid: "spreadsheet")
        monkeypatch.setattr(
            sheets, "write_dataframe",
            lambda spreadsheet, title, df: written.update(title=title, df=df),
        )

        tree = build_tree(["a"], {"a": {"name": "A", "children": ["b"]}, "b": {"name": "B"}})
        assert sheets.push_tree_to_google_sheets("x" * 44, "Export", tree, {}) == 2
        assert written["title"] == "Export"
        assert isinstance(written["df"], pd.DataFrame)
        assert written["df"]["Depth"].tolist() == ["0", "1"]
