import pytest

from logic.tree import build_tree
from ui.navigator import Navigator
from utils.constants import DEFAULT_TITLE
from utils.sample_data import SAMPLE_DECLARATION


@pytest.fixture
def nav():
    tree = build_tree(SAMPLE_DECLARATION["initial"], SAMPLE_DECLARATION["choices"])
    return Navigator(tree)


class TestNavigator:
    """Test click/back navigation."""

    def test_starts_at_initial_choices(self, nav):
        """Navigation starts at the roots under the default title."""
        assert nav.current_id is None
        items = nav.items()
        assert [c.id for c in items] == ["stay-in", "go-out"]
        assert nav.heading(items) == DEFAULT_TITLE
        assert nav.breadcrumb() == []

    def test_select_descends(self, nav):
        """Selecting a choice with children shows them under its name."""
        assert nav.select("go-out") is True
        assert nav.current_id == "go-out"
        assert [c.id for c in nav.items()] == ["cinema", "drink", "restaurant"]
        assert nav.heading() == "Go Out"

    def test_select_leaf_is_ignored(self, nav):
        """Leaves cannot be entered."""
        nav.select("go-out")
        nav.select("drink")
        assert nav.select("beer") is False
        assert nav.current_id == "drink"

    def test_select_unknown_is_ignored(self, nav):
        """Unknown ids leave the position alone."""
        assert nav.select("nope") is False
        assert nav.current_id is None

    def test_back(self, nav):
        """Back climbs one level at a time and stops at the roots."""
        nav.select("stay-in")
        nav.select("cook")
        assert [c.name for c in nav.breadcrumb()] == ["Stay In", "Cook a meal"]

        assert nav.back() is True
        assert nav.current_id == "stay-in"
        assert nav.back() is True
        assert nav.current_id is None
        assert nav.back() is False

    def test_reset(self, nav):
        """Reset returns to the initial choices."""
        nav.select("stay-in")
        nav.reset()
        assert nav.current_id is None

    def test_unknown_start_position_falls_back_to_initial(self, nav):
        """A stale position from another tree is dropped."""
        assert Navigator(nav.tree, "nope").current_id is None

    def test_unresolved_children_are_skipped(self):
        """Unresolved child ids are not rendered."""
        tree = build_tree(["a"], {"a": {"name": "A", "children": ["ghost", "b"]}, "b": {"name": "B"}})
        nav = Navigator(tree)
        nav.select("a")
        assert [c.id for c in nav.items()] == ["b"]
        assert nav.heading() == "A"

    def test_empty_children_list_keeps_default_heading(self):
        """A choice with an empty children list can be entered but shows nothing."""
        tree = build_tree(["a"], {"a": {"name": "A", "children": []}})
        nav = Navigator(tree)
        assert nav.select("a") is True
        assert nav.items() == []
        assert nav.heading() == DEFAULT_TITLE
