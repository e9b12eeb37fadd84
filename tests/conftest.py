"""Shared fixtures for the AxisTreeLib test suite."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from axistreelib.testing import build_sample_tree, build_wide_tree


def index_by_value(node, into=None):
    """Map value -> TreeNode by walking TreeNode.children directly."""
    if into is None:
        into = {}
    into[node.value] = node
    for child in node.children:
        index_by_value(child, into)
    return into


@pytest.fixture
def sample_tree():
    """A(B(D, E), C)"""
    return build_sample_tree()


@pytest.fixture
def sample_nodes(sample_tree):
    return index_by_value(sample_tree.get_root())


@pytest.fixture
def wide_tree():
    return build_wide_tree()


@pytest.fixture
def wide_nodes(wide_tree):
    return index_by_value(wide_tree.get_root())
