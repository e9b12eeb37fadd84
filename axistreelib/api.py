"""High-level API for AxisTreeLib.

This module provides simple, functional interfaces for common tree traversal
operations. These functions wrap TraversalConfig and TraversalPlan for ease
of use in simple cases.
"""

from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from ._common.config import FilterConfig, TraversalConfig, TraversalOrder
from .core.tree import Tree
from .planning import TraversalPlan


def traverse_tree(
    tree: Tree,
    order: Union[TraversalOrder, str] = TraversalOrder.PREORDER,
    from_node: Any = None,
    reverse: bool = False,
    include_filter: Optional[Callable[[Any], bool]] = None,
    exclude_filter: Optional[Callable[[Any], bool]] = None,
    max_nodes: Optional[int] = None,
) -> Iterator[Any]:
    """Simple interface for tree traversal.

    This is the primary high-level function for traversing trees. It handles
    the common case of wanting to iterate over nodes without dealing with
    configs and plans.

    Args:
        tree: Tree to traverse
        order: Traversal order or axis, as enum or name ("preorder",
            "postorder", "ancestor", "following_sibling", ...)
        from_node: Start node, or context node for axes
        reverse: Walk backwards
        include_filter: Function to determine if node should be yielded
        exclude_filter: Function to determine if node should be skipped
        max_nodes: Stop after yielding this many nodes

    Returns:
        Iterator over the nodes that match the criteria

    Raises:
        CapabilityMismatchError: If the tree can't be traversed this way

    Example:
        >>> tree = TreeNodeTree(build_sample_root())
        >>> [str(n) for n in traverse_tree(tree, "postorder")]
        ['D', 'E', 'B', 'C', 'A']
    """
    config = TraversalConfig(
        order=_parse_order(order),
        from_node=from_node,
        reverse=reverse,
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter
        ),
        max_nodes=max_nodes,
    )

    # Validate eagerly, not on the first next()
    plan = TraversalPlan(config, tree)
    return plan.execute()


def count_nodes(tree: Tree, **kwargs) -> int:
    """Count nodes in a tree that match criteria.

    Args:
        tree: Tree to traverse
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of nodes that match criteria
    """
    return sum(1 for _ in traverse_tree(tree, **kwargs))


def find_nodes(tree: Tree, predicate: Callable[[Any], bool], **kwargs) -> Iterator[Any]:
    """Find nodes that match a predicate.

    Args:
        tree: Tree to traverse
        predicate: Function that returns True for matching nodes
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Iterator over the matching nodes
    """
    kwargs['include_filter'] = predicate
    return traverse_tree(tree, **kwargs)


def get_leaf_nodes(tree: Tree, **kwargs) -> Iterator[Any]:
    """Get the leaf nodes of a tree (nodes with no children)."""
    kwargs.setdefault('include_filter', tree.is_leaf)
    return traverse_tree(tree, **kwargs)


def get_tree_paths(tree: Tree, **kwargs) -> Iterator[List[Any]]:
    """Get paths from the root to each node.

    Args:
        tree: Tree to traverse
        **kwargs: Traversal options (see traverse_tree)

    Yields:
        Lists of nodes, root first, ending with the visited node

    Example:
        >>> for path in get_tree_paths(tree):
        ...     print(" -> ".join(str(n) for n in path))
    """
    for node in traverse_tree(tree, **kwargs):
        yield tree.ancestor_or_self_iterator(node).to_list()


def get_tree_stats(tree: Tree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Trees without parent navigation are walked with an explicit stack that
    carries each node's depth.

    Args:
        tree: Tree to traverse

    Returns:
        Dictionary with tree statistics
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'max_branching': 0,
        'depths': {}
    }

    if tree.supports_parent_navigation():
        walk = ((node, tree.get_depth(node)) for node in tree.preorder_stream())
    else:
        walk = _walk_with_depth(tree)

    for node, depth in walk:
        children = tree.get_number_of_children(node)
        stats['total_nodes'] += 1
        if children == 0:
            stats['leaf_nodes'] += 1
        stats['max_branching'] = max(stats['max_branching'], children)
        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    return stats


# Helper functions

def _walk_with_depth(tree: Tree) -> Iterator[Tuple[Any, int]]:
    """Pre-order (node, depth) pairs using only get_root() and get_children()."""
    root = tree.get_root()
    stack = [] if root is None else [(root, 0)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        stack.extend((child, depth + 1) for child in reversed(tree.get_children(node)))


def _parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse order from string or enum.

    Args:
        order: Order as enum, enum value or enum name

    Returns:
        TraversalOrder enum value
    """
    if isinstance(order, TraversalOrder):
        return order

    aliases = {
        'pre': TraversalOrder.PREORDER,
        'dfs_pre': TraversalOrder.PREORDER,
        'post': TraversalOrder.POSTORDER,
        'dfs_post': TraversalOrder.POSTORDER,
        'parent_unaware': TraversalOrder.PREORDER_PARENT_UNAWARE,
    }

    name = str(order).lower().replace('-', '_')
    if name in aliases:
        return aliases[name]
    for candidate in TraversalOrder:
        if name in (candidate.value, candidate.name.lower()):
            return candidate

    raise ValueError(f"Unknown traversal order: {order}")
