"""Tests for the bidirectional post-order iterator."""

import unittest

import pytest

from axistreelib import NoSuchElementError, UnsupportedOperationError
from axistreelib.testing import build_sample_tree, build_wide_tree

from conftest import index_by_value


def values(nodes):
    return [n.value for n in nodes]


def test_visits_fixture_in_postorder(sample_tree):
    assert values(sample_tree.postorder_iterator()) == ["D", "E", "B", "C", "A"]
    assert values(sample_tree.postorder_stream()) == ["D", "E", "B", "C", "A"]


def test_first_previous_returns_start_node(sample_tree):
    it = sample_tree.postorder_iterator()
    assert it.previous().value == "A"


def test_reverse_from_root_is_reversed_postorder(sample_tree):
    reversed_it = sample_tree.postorder_iterator().reverse()
    assert values(reversed_it) == ["A", "C", "B", "E", "D"]


def test_exhaustion_raises_no_such_element(sample_tree):
    it = sample_tree.postorder_iterator()
    it.to_list()
    assert not it.has_next()
    with pytest.raises(NoSuchElementError):
        it.next()


def test_mutation_is_unsupported(sample_tree):
    it = sample_tree.postorder_iterator()
    it.next()
    with pytest.raises(UnsupportedOperationError):
        it.remove()


class TestPostorderNavigation(unittest.TestCase):
    """Cursor movement over the wider fixture."""

    def setUp(self):
        self.tree = build_wide_tree()
        self.nodes = index_by_value(self.tree.get_root())

    def test_forward_backward_symmetry(self):
        it = self.tree.postorder_iterator()
        forward = it.to_list()
        backward = []
        while it.has_previous():
            backward.append(it.previous())
        self.assertEqual(backward, list(reversed(forward)))
        self.assertEqual(values(forward), [
            "child1", "child21", "child221", "child222", "child22",
            "child23", "child2", "child3", "root",
        ])

    def test_forward_from_inner_leaf(self):
        it = self.tree.postorder_iterator(self.nodes["child21"])
        self.assertEqual(values(it), [
            "child21", "child221", "child222", "child22",
            "child23", "child2", "child3", "root",
        ])

    def test_backward_from_leaf_uses_own_previous_sibling(self):
        it = self.tree.postorder_iterator(self.nodes["child23"])
        self.assertIs(it.previous(), self.nodes["child23"])
        self.assertIs(it.previous(), self.nodes["child22"])

    def test_backward_from_last_child_climbs_ancestors(self):
        it = self.tree.postorder_iterator(self.nodes["child3"]).reverse()
        self.assertEqual(values(it), [
            "child3", "child2", "child23", "child22", "child222",
            "child221", "child21", "child1",
        ])

    def test_subtree_stops_at_subtree_root(self):
        sub = self.tree.subtree(self.nodes["child22"])
        self.assertEqual(values(sub.postorder_iterator()), ["child221", "child222", "child22"])
        it = sub.postorder_iterator(self.nodes["child221"])
        self.assertEqual(values(it), ["child221", "child222", "child22"])

    def test_interleaved_moves_stay_consistent(self):
        tree = build_sample_tree()
        it = tree.postorder_iterator()
        self.assertEqual(it.next().value, "D")
        self.assertEqual(it.next().value, "E")
        self.assertEqual(it.previous().value, "E")
        self.assertEqual(it.previous().value, "D")
        self.assertFalse(it.has_previous())
        self.assertEqual(it.next().value, "D")
        self.assertEqual(it.next().value, "E")
        self.assertEqual(it.next().value, "B")


if __name__ == "__main__":
    unittest.main()
