import pytest
import pandas as pd

from logic.tree import Choice, DecisionTree, build_tree
from logic.validate import (
    compute_validation_report, detect_duplicate_ids, detect_loops,
    detect_orphan_nodes, detect_unresolved_ids
)
from utils.constants import DECLARATION_HEADERS
from utils.sample_data import SAMPLE_DECLARATION


@pytest.fixture
def sample_tree():
    return build_tree(SAMPLE_DECLARATION["initial"], SAMPLE_DECLARATION["choices"])


@pytest.fixture
def messy_tree():
    """Unknown child, an orphan and a two-node cycle away from the root."""
    return build_tree(
        ["a", "gone"],
        {
            "a": {"name": "A", "children": ["b", "ghost"]},
            "b": {"name": "B"},
            "lonely": {"name": "Lonely"},
            "x": {"name": "X", "children": ["y"]},
            "y": {"name": "Y", "children": ["x"]},
        },
    )


class TestDetectUnresolvedIds:
    """Test the detect_unresolved_ids function."""

    def test_clean_tree(self, sample_tree):
        """The sample declaration references only known ids."""
        assert detect_unresolved_ids(sample_tree) == []

    def test_reports_roots_and_children(self, messy_tree):
        """Unknown roots are listed before unknown children."""
        result = detect_unresolved_ids(messy_tree)
        assert [(r["node"], r["referenced_by"], r["type"]) for r in result] == [
            ("gone", None, "unresolved_root"),
            ("ghost", "a", "unresolved_child"),
        ]
        for item in result:
            assert "description" in item


class TestDetectOrphanNodes:
    """Test the detect_orphan_nodes function."""

    def test_clean_tree(self, sample_tree):
        """Every sample choice is reachable."""
        assert detect_orphan_nodes(sample_tree) == []

    def test_orphan_found(self, messy_tree):
        """A choice no root reaches is an orphan."""
        assert [o["node"] for o in detect_orphan_nodes(messy_tree)] == ["lonely"]


class TestDetectLoops:
    """Test the detect_loops function."""

    def test_clean_tree(self, sample_tree):
        """The sample has no parent cycles."""
        assert detect_loops(sample_tree) == []

    def test_cycle_reported_once(self, messy_tree):
        """A two-node cycle is reported once, closed at both ends."""
        loops = detect_loops(messy_tree)
        assert len(loops) == 1
        assert set(loops[0]["path"]) == {"x", "y"}
        assert loops[0]["length"] == 2
        assert loops[0]["path"][0] == loops[0]["path"][-1]

    def test_self_parent(self):
        """A node that is its own parent is a loop of length one."""
        tree = DecisionTree(["r"], {"r": Choice(id="r"), "s": Choice(id="s", children=("s",), parent="s")})
        loops = detect_loops(tree)
        assert loops[0]["path"] == ["s", "s"]
        assert loops[0]["length"] == 1


class TestDetectDuplicateIds:
    """Test the detect_duplicate_ids function."""

    def test_duplicates(self):
        """Ids are trimmed before comparing; blank ids are ignored."""
        df = pd.DataFrame({"ID": ["a", "b", " a ", ""], "Name": ["A", "B", "A2", ""]})
        assert detect_duplicate_ids(df) == [("a", 2)]

    def test_empty_df(self):
        """An empty table has no duplicates."""
        assert detect_duplicate_ids(pd.DataFrame(columns=DECLARATION_HEADERS)) == []

    def test_invalid_headers(self):
        """A table without an ID column is not checked."""
        assert detect_duplicate_ids(pd.DataFrame(columns=["Wrong", "Headers"])) == []


class TestComputeValidationReport:
    """Test the compute_validation_report function."""

    def test_sample_is_ok(self, sample_tree):
        """The sample passes with the expected counts."""
        report = compute_validation_report(sample_tree)
        assert report["ok"] is True
        assert report["counts"]["choices"] == 23
        assert report["counts"]["roots"] == 2
        assert report["counts"]["leaves"] == 15
        assert report["counts"]["max_depth"] == 2

    def test_messy_counts(self, messy_tree):
        """Every kind of problem is counted."""
        report = compute_validation_report(messy_tree)
        assert report["ok"] is False
        assert report["counts"]["unresolved"] == 2
        assert report["counts"]["orphans"] == 1
        assert report["counts"]["loops"] == 1
