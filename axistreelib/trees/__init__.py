"""Concrete trees for AxisTreeLib.

Each class implements the Tree primitives for one kind of structure, making
every iterator and axis available over it.
"""

from .node_tree import TreeNodeTree
from .subtree import SubTree
from .filtered import FilteredTree
from .filesystem import FileSystemTree
from .type_tree import TypeTree

__all__ = [
    "TreeNodeTree",
    "SubTree",
    "FilteredTree",
    "FileSystemTree",
    "TypeTree",
]
