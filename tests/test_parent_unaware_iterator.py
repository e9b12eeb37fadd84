"""Tests for the forward-only, parent-unaware pre-order iterator."""

import pytest

from axistreelib import NoSuchElementError, TreeNode, UnsupportedOperationError
from axistreelib.testing import ChildOnlyTree

REVERSE_MESSAGE = "Reverse iteration over trees in this implementation is not supported."


@pytest.fixture
def child_only_tree():
    return ChildOnlyTree("A", {"A": ["B", "C"], "B": ["D", "E"]})


def test_matches_preorder_on_child_only_tree(child_only_tree):
    it = child_only_tree.preorder_parent_unaware_iterator()
    assert it.to_list() == ["A", "B", "D", "E", "C"]


def test_matches_parent_aware_preorder(sample_tree):
    unaware = list(sample_tree.preorder_parent_unaware_stream())
    assert unaware == list(sample_tree.preorder_stream())


@pytest.mark.parametrize("steps", [0, 2, 5])
def test_previous_always_unsupported(child_only_tree, steps):
    it = child_only_tree.preorder_parent_unaware_iterator()
    for _ in range(steps):
        it.next()
    with pytest.raises(UnsupportedOperationError, match="Reverse iteration"):
        it.previous()
    with pytest.raises(UnsupportedOperationError):
        it.has_previous()


def test_reverse_is_unsupported(child_only_tree):
    it = child_only_tree.preorder_parent_unaware_iterator()
    with pytest.raises(UnsupportedOperationError) as excinfo:
        it.reverse()
    assert str(excinfo.value) == REVERSE_MESSAGE


def test_mutation_is_unsupported(sample_tree):
    it = sample_tree.preorder_parent_unaware_iterator()
    it.next()
    with pytest.raises(UnsupportedOperationError):
        it.remove()
    with pytest.raises(UnsupportedOperationError):
        it.set(TreeNode("Z"))


def test_exhaustion(child_only_tree):
    it = child_only_tree.preorder_parent_unaware_iterator()
    it.to_list()
    assert not it.has_next()
    with pytest.raises(NoSuchElementError):
        it.next()


def test_never_asks_for_parents(child_only_tree):
    # get_parent() raises on this tree, so any parent lookup would fail here
    assert child_only_tree.size() == 5
    assert child_only_tree.get_leaves() == ["D", "E", "C"]
    assert child_only_tree.find(lambda n: n == "E") == "E"


def test_empty_tree():
    tree = ChildOnlyTree(None, {})
    assert tree.preorder_parent_unaware_iterator().to_list() == []
