import pytest

from domain.shared.exceptions import InvalidOperationException
from domain.trees import (
    CHILD_FIRST,
    LEAVES_ONLY,
    SELF_FIRST,
    RecursiveTreeWalker,
    StructuralElementIterator,
)


class TestStructuralElementIterator:

    def test_cursor(self, categories):
        iterator = StructuralElementIterator(categories.roots)

        assert iterator.valid()
        assert iterator.key() == 0
        assert iterator.current() is categories.electronics

        iterator.next()
        assert iterator.key() == 1
        assert iterator.current() is categories.mechanics

        iterator.next()
        assert not iterator.valid()
        assert iterator.current() is None
        assert iterator.key() is None

    def test_rewind(self, categories):
        iterator = StructuralElementIterator(categories.roots)
        iterator.next()
        iterator.next()
        iterator.rewind()
        assert iterator.current() is categories.electronics

    def test_empty(self):
        iterator = StructuralElementIterator([])
        assert not iterator.valid()
        assert not iterator.has_children()
        assert len(iterator) == 0

    def test_has_children(self, categories):
        iterator = StructuralElementIterator(categories.roots)
        assert iterator.has_children()
        iterator.next()
        assert not iterator.has_children()

    def test_get_children(self, categories, as_names):
        iterator = StructuralElementIterator(categories.roots)

        children = iterator.get_children()

        assert isinstance(children, StructuralElementIterator)
        assert as_names(children) == ["Passives", "Semiconductors"]
        assert children.key() == 0

    def test_get_children_of_leaf_is_empty(self, categories):
        iterator = StructuralElementIterator([categories.capacitors])
        assert len(iterator.get_children()) == 0

    def test_get_children_when_exhausted_raises(self, categories):
        iterator = StructuralElementIterator([categories.mechanics])
        iterator.next()
        with pytest.raises(InvalidOperationException):
            iterator.get_children()

    def test_nodes_are_a_snapshot(self, categories, as_names):
        roots = list(categories.roots)
        iterator = StructuralElementIterator(roots)
        roots.clear()
        assert as_names(iterator) == ["Electronics", "Mechanics"]

    def test_iteration_does_not_move_the_cursor(self, categories):
        iterator = StructuralElementIterator(categories.roots)
        list(iterator)
        assert iterator.key() == 0


class TestRecursiveTreeWalker:

    def test_self_first(self, categories, as_names):
        walker = RecursiveTreeWalker(StructuralElementIterator(categories.roots), SELF_FIRST)
        assert as_names(walker) == [
            "Electronics", "Passives", "Capacitors", "Resistors", "Semiconductors", "Mechanics",
        ]

    def test_child_first(self, categories, as_names):
        walker = RecursiveTreeWalker(StructuralElementIterator(categories.roots), CHILD_FIRST)
        assert as_names(walker) == [
            "Capacitors", "Resistors", "Passives", "Semiconductors", "Electronics", "Mechanics",
        ]

    def test_leaves_only(self, categories, as_names):
        walker = RecursiveTreeWalker(StructuralElementIterator(categories.roots), LEAVES_ONLY)
        assert as_names(walker) == ["Capacitors", "Resistors", "Semiconductors", "Mechanics"]

    def test_default_mode_is_self_first(self, categories):
        walker = RecursiveTreeWalker(StructuralElementIterator(categories.roots))
        assert walker.mode is SELF_FIRST

    def test_mode_by_value(self, categories):
        walker = RecursiveTreeWalker(StructuralElementIterator(categories.roots), "child_first")
        assert walker.mode is CHILD_FIRST

    def test_unknown_mode_raises(self, categories):
        with pytest.raises(ValueError):
            RecursiveTreeWalker(StructuralElementIterator(categories.roots), "breadth_first")

    def test_walk_yields_depths(self, categories):
        walker = RecursiveTreeWalker(StructuralElementIterator(categories.roots))
        assert [(depth, element.name) for depth, element in walker.walk()] == [
            (0, "Electronics"),
            (1, "Passives"),
            (2, "Capacitors"),
            (2, "Resistors"),
            (1, "Semiconductors"),
            (0, "Mechanics"),
        ]

    def test_max_depth_zero_returns_roots(self, categories, as_names):
        walker = RecursiveTreeWalker(StructuralElementIterator(categories.roots), max_depth=0)
        assert as_names(walker) == ["Electronics", "Mechanics"]

    def test_leaves_only_with_max_depth_includes_cut_off_elements(self, categories, as_names):
        walker = RecursiveTreeWalker(
            StructuralElementIterator(categories.roots), LEAVES_ONLY, max_depth=1
        )
        assert as_names(walker) == ["Passives", "Semiconductors", "Mechanics"]

    def test_negative_max_depth_raises(self, categories):
        with pytest.raises(ValueError):
            RecursiveTreeWalker(StructuralElementIterator(categories.roots), max_depth=-1)

    def test_walker_can_be_iterated_twice(self, categories, as_names):
        walker = RecursiveTreeWalker(StructuralElementIterator(categories.roots))
        assert as_names(walker) == as_names(walker)

    def test_walks_do_not_share_a_cursor(self, categories):
        walker = RecursiveTreeWalker(StructuralElementIterator(categories.roots))
        pairs = list(zip(walker, walker))
        assert len(pairs) == 6
        assert all(first is second for first, second in pairs)

    def test_walk_does_not_move_the_given_iterator(self, categories):
        iterator = StructuralElementIterator(categories.roots)
        iterator.next()
        walker = RecursiveTreeWalker(iterator)
        list(walker.walk())
        assert iterator.key() == 1

    def test_walk_from_subtree(self, categories, as_names):
        walker = RecursiveTreeWalker(StructuralElementIterator([categories.passives]))
        assert as_names(walker) == ["Passives", "Capacitors", "Resistors"]
