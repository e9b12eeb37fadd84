"""Configuration system for AxisTreeLib.

This module defines how users specify a traversal: which order or axis to
walk, where to start, in which direction, and which nodes to keep.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional


class TraversalOrder(Enum):
    """Which nodes to visit, and in what order.

    Depth-first orders walk the whole tree; axes are relative to a context
    node (TraversalConfig.from_node), in the XPath sense.
    """
    PREORDER = "preorder"                          # Node before children
    POSTORDER = "postorder"                        # Children before node
    PREORDER_PARENT_UNAWARE = "preorder_unaware"   # Pre-order, no parent lookups
    ANCESTOR = "ancestor"
    ANCESTOR_OR_SELF = "ancestor_or_self"
    CHILD = "child"
    DESCENDANT = "descendant"
    DESCENDANT_OR_SELF = "descendant_or_self"
    FOLLOWING = "following"
    FOLLOWING_SIBLING = "following_sibling"
    PRECEDING = "preceding"
    PRECEDING_SIBLING = "preceding_sibling"

    def is_axis(self) -> bool:
        """Check if this order needs a context node."""
        return self not in (
            TraversalOrder.PREORDER,
            TraversalOrder.POSTORDER,
            TraversalOrder.PREORDER_PARENT_UNAWARE,
        )

    def is_bidirectional(self) -> bool:
        """Check if the iterator for this order can move backwards."""
        return self in (
            TraversalOrder.PREORDER,
            TraversalOrder.POSTORDER,
            TraversalOrder.ANCESTOR,
            TraversalOrder.ANCESTOR_OR_SELF,
            TraversalOrder.CHILD,
            TraversalOrder.DESCENDANT_OR_SELF,
        )

    def requires_parent(self) -> bool:
        """Check if the order needs get_parent() on the tree."""
        return self is not TraversalOrder.PREORDER_PARENT_UNAWARE


@dataclass
class FilterConfig:
    """Configuration for filtering nodes during traversal.

    Filtering only decides what is yielded. Unlike FilteredTree it never
    prunes: the children of a rejected node are still visited.
    """

    include_filter: Optional[Callable[[Any], bool]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Exclude predicate

    def should_include(self, node: Any) -> bool:
        """Check if a node should be yielded based on filters.

        Args:
            node: Node to check

        Returns:
            True if node passes all filters
        """
        # Exclusion takes precedence
        if self.exclude_filter and self.exclude_filter(node):
            return False

        if self.include_filter:
            return self.include_filter(node)

        return True

    def is_empty(self) -> bool:
        return self.include_filter is None and self.exclude_filter is None


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal.

    The TraversalPlan validates this configuration against the capabilities
    of the Tree before any node is visited.
    """

    order: TraversalOrder = TraversalOrder.PREORDER
    from_node: Any = None          # Start node; context node for axes
    reverse: bool = False          # Walk backwards from from_node
    filter: FilterConfig = field(default_factory=FilterConfig)
    max_nodes: Optional[int] = None  # Stop after yielding this many nodes

    def validate(self) -> List[str]:
        """Check the configuration for internal consistency.

        Returns:
            List of problems (empty if the configuration is valid)
        """
        errors = []

        if not isinstance(self.order, TraversalOrder):
            errors.append(f"order must be a TraversalOrder, got {self.order!r}")
            return errors

        if self.order.is_axis() and self.from_node is None:
            errors.append(f"{self.order.value} traversal requires from_node")

        if self.order is TraversalOrder.PREORDER_PARENT_UNAWARE and self.from_node is not None:
            errors.append("parent-unaware pre-order always starts at the tree root")

        if self.reverse and not self.order.is_bidirectional():
            errors.append(f"{self.order.value} traversal cannot be reversed")

        if self.max_nodes is not None and self.max_nodes < 0:
            errors.append("max_nodes cannot be negative")

        return errors

    # Convenience constructors for common configurations

    @classmethod
    def preorder(cls, from_node: Any = None) -> 'TraversalConfig':
        return cls(order=TraversalOrder.PREORDER, from_node=from_node)

    @classmethod
    def postorder(cls, from_node: Any = None) -> 'TraversalConfig':
        return cls(order=TraversalOrder.POSTORDER, from_node=from_node)

    @classmethod
    def reverse_postorder(cls, from_node: Any = None) -> 'TraversalConfig':
        """Post-order read backwards: every node before its children, right to left."""
        return cls(order=TraversalOrder.POSTORDER, from_node=from_node, reverse=True)

    @classmethod
    def axis(cls, order: TraversalOrder, node: Any) -> 'TraversalConfig':
        """Create config for walking one axis from a context node.

        Args:
            order: Axis to walk
            node: Context node

        Returns:
            TraversalConfig for the axis
        """
        return cls(order=order, from_node=node)
