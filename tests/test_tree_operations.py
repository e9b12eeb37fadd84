"""Tests for the Tree convenience surface, built on the iterators."""

import unittest

import pytest

from axistreelib import (
    AbstractTree,
    FilteredTree,
    NOT_FOUND,
    TreeNodeTree,
    UnsupportedOperationError,
)
from axistreelib.testing import build_sample_tree

from conftest import index_by_value


class ArenaTree(AbstractTree):
    """Nodes are integer handles; structure lives in two lookup tables."""

    def __init__(self, parents, children):
        super().__init__(0)
        self.parents = parents
        self.children = children

    def get_parent(self, node):
        return None if node == self._root else self.parents.get(node)

    def get_child(self, parent, index):
        return self.children.get(parent, [])[index]

    def get_children(self, parent):
        return list(self.children.get(parent, []))

    def get_number_of_children(self, parent):
        return len(self.children.get(parent, []))

    def get_index_of_child(self, parent, child):
        kids = self.children.get(parent, [])
        return kids.index(child) if child in kids else NOT_FOUND


@pytest.fixture
def arena_tree():
    # 0(1(3, 4), 2)
    return ArenaTree(parents={1: 0, 2: 0, 3: 1, 4: 1},
                     children={0: [1, 2], 1: [3, 4]})


def test_leaf_detection_matches_child_count(sample_tree):
    leaves = []
    for node in sample_tree.preorder_stream():
        assert sample_tree.is_leaf(node) == (sample_tree.get_number_of_children(node) == 0)
        if sample_tree.is_leaf(node):
            leaves.append(node.value)
    assert leaves == ["D", "E", "C"]


def test_size_and_leaves(sample_tree):
    assert sample_tree.size() == 5
    assert [n.value for n in sample_tree.get_leaves()] == ["D", "E", "C"]
    assert [n.value for n in sample_tree.leaf_node_stream()] == ["D", "E", "C"]


def test_python_iteration_is_preorder(sample_tree):
    assert [n.value for n in sample_tree] == ["A", "B", "D", "E", "C"]
    assert [n.value for n in sample_tree.stream()] == ["A", "B", "D", "E", "C"]


def test_find(sample_tree):
    assert sample_tree.find(lambda n: n.value == "E").value == "E"
    assert sample_tree.find(lambda n: n.value == "Q") is None


def test_empty_tree_operations():
    tree = TreeNodeTree()
    assert tree.size() == 0
    assert tree.get_leaves() == []
    assert list(tree.postorder_stream()) == []


def test_generic_tree_over_integer_handles(arena_tree):
    assert arena_tree.preorder_iterator().to_list() == [0, 1, 3, 4, 2]
    assert arena_tree.postorder_iterator().to_list() == [3, 4, 1, 2, 0]
    assert list(arena_tree.following_iterator(3)) == [4, 2]
    assert arena_tree.get_leaves() == [3, 4, 2]
    assert arena_tree.subtree(1).preorder_iterator().to_list() == [1, 3, 4]


def test_read_only_tree_rejects_modification(arena_tree):
    assert not arena_tree.supports_modification()
    with pytest.raises(UnsupportedOperationError, match="ArenaTree does not support modification"):
        arena_tree.add(0, None, 5)
    with pytest.raises(UnsupportedOperationError):
        arena_tree.remove(0, 1)
    with pytest.raises(UnsupportedOperationError):
        arena_tree.set(0, 1, 5)


class TestDerivedNavigation(unittest.TestCase):

    def setUp(self):
        self.tree = build_sample_tree()
        self.nodes = index_by_value(self.tree.get_root())

    def test_siblings(self):
        self.assertIs(self.tree.get_next_sibling(self.nodes["B"]), self.nodes["C"])
        self.assertIsNone(self.tree.get_next_sibling(self.nodes["C"]))
        self.assertIs(self.tree.get_previous_sibling(self.nodes["E"]), self.nodes["D"])
        self.assertIsNone(self.tree.get_previous_sibling(self.nodes["D"]))
        self.assertIsNone(self.tree.get_next_sibling(self.nodes["A"]))
        self.assertIsNone(self.tree.get_previous_sibling(None))

    def test_root_of(self):
        self.assertIs(self.tree.root_of(self.nodes["D"]), self.nodes["A"])
        sub = self.tree.subtree(self.nodes["B"])
        self.assertIs(sub.root_of(self.nodes["D"]), self.nodes["B"])

    def test_equality_by_root(self):
        root = self.nodes["A"]
        self.assertEqual(TreeNodeTree(root), TreeNodeTree(root))
        self.assertEqual(hash(TreeNodeTree(root)), hash(TreeNodeTree(root)))
        self.assertNotEqual(TreeNodeTree(root), build_sample_tree())
        self.assertEqual(self.tree.subtree(self.nodes["B"]), TreeNodeTree(self.nodes["B"]))

    def test_filtered_view_is_read_only(self):
        view = FilteredTree(self.tree, lambda node: True)
        self.assertFalse(view.supports_modification())
        self.assertTrue(view.supports_parent_navigation())


if __name__ == "__main__":
    unittest.main()
