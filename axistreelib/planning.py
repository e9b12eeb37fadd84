"""Traversal planning for AxisTreeLib.

The TraversalPlan validates that a TraversalConfig can be satisfied by a
Tree and then builds the iterator that performs the walk.
"""

import logging
from typing import Any, Dict, Iterator, List

from ._common.config import TraversalConfig, TraversalOrder
from .core.iterator import EmptyTreeIterator, ListTreeIterator, TreeIterator
from .core.tree import Tree
from .errors import CapabilityMismatchError

logger = logging.getLogger(__name__)


class TraversalPlan:
    """Validated plan for walking one order or axis of a tree.

    The plan is the bridge between user intent (TraversalConfig) and the
    iterators. Every problem with the configuration, or with what the tree can
    do, is reported at construction time before any node is visited.

    Reverse traversal walks backwards from from_node. Without a from_node it
    starts at the end of the order, so the whole tree is visited backwards.
    """

    def __init__(self, config: TraversalConfig, tree: Tree):
        """Create and validate a traversal plan.

        Args:
            config: User's traversal configuration
            tree: Tree to traverse

        Raises:
            CapabilityMismatchError: If the config is invalid or the tree
                can't satisfy it
        """
        self.config = config
        self.tree = tree

        config_errors = config.validate()
        if config_errors:
            raise CapabilityMismatchError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        capability_issues = self._validate_capabilities()
        if capability_issues:
            raise CapabilityMismatchError(
                f"Tree limitations: {'; '.join(capability_issues)}"
            )

        self.nodes_visited = 0
        self.nodes_yielded = 0
        logger.debug("Planned %s traversal of %s (reverse=%s, max_nodes=%s)",
                     config.order.value, tree.__class__.__name__,
                     config.reverse, config.max_nodes)

    def _validate_capabilities(self) -> List[str]:
        """Check the tree supports what the configuration needs.

        Returns:
            List of capability issues (empty if all satisfied)
        """
        issues = []
        order = self.config.order

        if order.requires_parent() and not self.tree.supports_parent_navigation():
            issues.append(
                f"{order.value} traversal needs parent navigation, "
                f"which {self.tree.__class__.__name__} does not support"
            )

        return issues

    def build_iterator(self) -> Iterator[Any]:
        """Create a fresh iterator positioned for this plan.

        Returns:
            TreeIterator for the bidirectional and sibling orders, or a plain
            Python iterator for the composed axes (descendant, following,
            preceding)
        """
        tree = self.tree
        order = self.config.order
        node = self.config.from_node

        if self.config.reverse:
            return self._build_reverse_iterator()

        if order is TraversalOrder.PREORDER:
            return tree.preorder_iterator(node)
        if order is TraversalOrder.POSTORDER:
            return tree.postorder_iterator(node)
        if order is TraversalOrder.PREORDER_PARENT_UNAWARE:
            return tree.preorder_parent_unaware_iterator()

        factories = {
            TraversalOrder.ANCESTOR: tree.ancestor_iterator,
            TraversalOrder.ANCESTOR_OR_SELF: tree.ancestor_or_self_iterator,
            TraversalOrder.CHILD: tree.child_iterator,
            TraversalOrder.DESCENDANT: tree.descendant_iterator,
            TraversalOrder.DESCENDANT_OR_SELF: tree.descendant_or_self_iterator,
            TraversalOrder.FOLLOWING: tree.following_iterator,
            TraversalOrder.FOLLOWING_SIBLING: tree.following_sibling_iterator,
            TraversalOrder.PRECEDING: tree.preceding_iterator,
            TraversalOrder.PRECEDING_SIBLING: tree.preceding_sibling_iterator,
        }
        return factories[order](node)

    def _build_reverse_iterator(self) -> TreeIterator:
        tree = self.tree
        order = self.config.order
        node = self.config.from_node

        if order is TraversalOrder.ANCESTOR:
            return _from_end(tree.ancestor_iterator(node).to_list())
        if order is TraversalOrder.ANCESTOR_OR_SELF:
            return _from_end(tree.ancestor_or_self_iterator(node).to_list())
        if order is TraversalOrder.CHILD:
            return _from_end(tree.get_children(node))

        if order is TraversalOrder.DESCENDANT_OR_SELF:
            tree = tree.subtree(node)
            node = None

        if node is not None:
            if order is TraversalOrder.PREORDER:
                return tree.preorder_iterator(node).reverse()
            return tree.postorder_iterator(node).reverse()

        root = tree.get_root()
        if root is None:
            return EmptyTreeIterator()

        if order is TraversalOrder.POSTORDER:
            # The root is the last post-order node and previous() from the
            # start node returns the start node itself.
            return tree.postorder_iterator(root).reverse()

        # Park the cursor just after the last pre-order node.
        last = root
        while not tree.is_leaf(last):
            last = tree.get_child(last, tree.get_number_of_children(last) - 1)
        iterator = tree.preorder_iterator(last)
        iterator.next()
        return iterator.reverse()

    def execute(self) -> Iterator[Any]:
        """Execute the traversal plan.

        Yields:
            Nodes in the planned order that pass the filters, stopping after
            max_nodes of them
        """
        self.nodes_visited = 0
        self.nodes_yielded = 0

        max_nodes = self.config.max_nodes
        node_filter = self.config.filter
        if max_nodes == 0:
            return

        for node in self.build_iterator():
            self.nodes_visited += 1
            if not node_filter.should_include(node):
                continue

            self.nodes_yielded += 1
            yield node

            if max_nodes is not None and self.nodes_yielded >= max_nodes:
                break

    def explain(self) -> Dict[str, Any]:
        """Get summary of the traversal plan.

        Useful for debugging and logging.

        Returns:
            Dictionary with plan details
        """
        order = self.config.order
        return {
            'order': order.value,
            'axis': order.is_axis(),
            'from_node': self.config.from_node,
            'direction': 'reverse' if self.config.reverse else 'forward',
            'bidirectional': order.is_bidirectional(),
            'requires_parent': order.requires_parent(),
            'filtered': not self.config.filter.is_empty(),
            'max_nodes': self.config.max_nodes,
            'tree': self.tree.__class__.__name__,
        }


def _from_end(nodes) -> TreeIterator:
    """Reverse view of a list cursor parked after its last node."""
    nodes = list(nodes)
    return ListTreeIterator(nodes, index=len(nodes)).reverse()
