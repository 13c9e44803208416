import pytest
import pandas as pd
import numpy as np

from utils.helpers import (
    drop_blank_rows, ensure_declaration_columns, is_root_flag, normalize_text,
    split_child_ids, validate_headers
)
from utils.constants import DECLARATION_HEADERS


class TestNormalizeText:
    """Test the normalize_text helper function."""

    def test_normalize_text_string(self):
        """Strings are stripped."""
        assert normalize_text("  Hello World  ") == "Hello World"
        assert normalize_text("") == ""

    def test_normalize_text_none_and_nan(self):
        """None and NaN become empty strings."""
        assert normalize_text(None) == ""
        assert normalize_text(np.nan) == ""
        assert normalize_text(float('nan')) == ""

    def test_normalize_text_numbers(self):
        """Numbers are rendered as text."""
        assert normalize_text(123) == "123"
        assert normalize_text(3.14) == "3.14"


class TestSplitChildIds:
    """Test the split_child_ids helper function."""

    def test_semicolons_and_commas(self):
        """Both separators split child ids."""
        assert split_child_ids("a; b;c") == ["a", "b", "c"]
        assert split_child_ids("a, b") == ["a", "b"]

    def test_blank_means_no_children(self):
        """A blank cell means a leaf."""
        assert split_child_ids("") is None
        assert split_child_ids("   ") is None
        assert split_child_ids(None) is None
        assert split_child_ids(np.nan) is None

    def test_lists_are_normalized(self):
        """List input is trimmed item by item."""
        assert split_child_ids([" a ", "", "b"]) == ["a", "b"]
        assert split_child_ids([]) == []

    def test_trailing_separator(self):
        """A trailing separator adds no empty id."""
        assert split_child_ids("a;") == ["a"]


class TestIsRootFlag:
    """Test the is_root_flag helper function."""

    @pytest.mark.parametrize("value", ["yes", "Y", "x", "TRUE", 1, 1.0, True, "1"])
    def test_truthy(self, value):
        """Accepted spellings of a root flag."""
        assert is_root_flag(value) is True

    @pytest.mark.parametrize("value", ["", "no", 0, None, np.nan, False, "0"])
    def test_falsy(self, value):
        """Anything else is not a root."""
        assert is_root_flag(value) is False


class TestDeclarationColumns:
    """Test the table helpers."""

    def test_validate_headers(self):
        """Only the ID column is required."""
        assert validate_headers(pd.DataFrame([["a", "A"]], columns=["ID", "Name"])) is True
        assert validate_headers(pd.DataFrame(columns=["ID"])) is False
        assert validate_headers(pd.DataFrame([["a"]], columns=["Wrong"])) is False
        assert validate_headers(None) is False

    def test_ensure_declaration_columns(self):
        """Missing optional columns are added empty."""
        df = pd.DataFrame({" ID ": ["a"], "Extra": ["z"]})
        result = ensure_declaration_columns(df)
        assert list(result.columns) == DECLARATION_HEADERS
        assert result.loc[0, "ID"] == "a"
        assert result.loc[0, "Children"] == ""

    def test_drop_blank_rows(self):
        """Rows without an id are dropped."""
        df = pd.DataFrame({"ID": ["a", " ", None], "Name": ["A", "", ""]})
        assert drop_blank_rows(df)["ID"].tolist() == ["a"]
