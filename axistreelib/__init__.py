"""AxisTreeLib - Bidirectional tree traversal with XPath-style axes.

AxisTreeLib walks any hierarchical structure through a small navigation
contract (root, parent, indexed children). Pre-order and post-order cursors
move forwards and backwards without storing a path, and the ancestor, child,
sibling, descendant, following and preceding axes are derived from the same
primitives.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from axistreelib import TreeNode, TreeNodeTree

    tree = TreeNodeTree(TreeNode("A", TreeNode("B"), TreeNode("C")))
    for node in tree.postorder_iterator():
        print(node)
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.1.0"

# core must load before iterators and trees: core.tree imports the iterator
# modules, which in turn import core.iterator.
from .core import (
    TreeIterator,
    EmptyTreeIterator,
    ReverseOrderTreeIterator,
    ListTreeIterator,
    Tree,
    AbstractTree,
    NOT_FOUND,
    TreeNode,
)
from .errors import (
    TreeError,
    NoSuchElementError,
    UnsupportedOperationError,
    TreeStructureError,
    CapabilityMismatchError,
)
from .iterators import (
    PreorderIterator,
    PostorderIterator,
    PreorderParentUnawareIterator,
    AncestorIterator,
    AncestorOrSelfIterator,
    ChildIterator,
    FollowingSiblingIterator,
    PrecedingSiblingIterator,
)
from .trees import (
    TreeNodeTree,
    SubTree,
    FilteredTree,
    FileSystemTree,
    TypeTree,
)
from .config import TraversalOrder, FilterConfig, TraversalConfig
from .planning import TraversalPlan
from .api import (
    traverse_tree,
    count_nodes,
    find_nodes,
    get_leaf_nodes,
    get_tree_paths,
    get_tree_stats,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Core
    "TreeIterator",
    "EmptyTreeIterator",
    "ReverseOrderTreeIterator",
    "ListTreeIterator",
    "Tree",
    "AbstractTree",
    "NOT_FOUND",
    "TreeNode",
    # Errors
    "TreeError",
    "NoSuchElementError",
    "UnsupportedOperationError",
    "TreeStructureError",
    "CapabilityMismatchError",
    # Iterators
    "PreorderIterator",
    "PostorderIterator",
    "PreorderParentUnawareIterator",
    "AncestorIterator",
    "AncestorOrSelfIterator",
    "ChildIterator",
    "FollowingSiblingIterator",
    "PrecedingSiblingIterator",
    # Trees
    "TreeNodeTree",
    "SubTree",
    "FilteredTree",
    "FileSystemTree",
    "TypeTree",
    # Configuration and planning
    "TraversalOrder",
    "FilterConfig",
    "TraversalConfig",
    "TraversalPlan",
    # High-level API
    "traverse_tree",
    "count_nodes",
    "find_nodes",
    "get_leaf_nodes",
    "get_tree_paths",
    "get_tree_stats",
]
