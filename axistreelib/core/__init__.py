"""Core abstractions for AxisTreeLib.

This module contains the fundamental classes that define the AxisTreeLib
architecture: the iterator contract, the tree contract and the plain node.
"""

from .iterator import (
    TreeIterator,
    EmptyTreeIterator,
    ReverseOrderTreeIterator,
    ListTreeIterator,
    ForwardOnlyIterator,
)
from .tree import Tree, AbstractTree, NOT_FOUND
from .node import TreeNode

__all__ = [
    "TreeIterator",
    "EmptyTreeIterator",
    "ReverseOrderTreeIterator",
    "ListTreeIterator",
    "ForwardOnlyIterator",
    "Tree",
    "AbstractTree",
    "NOT_FOUND",
    "TreeNode",
]
