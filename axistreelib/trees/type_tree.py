"""Class hierarchy tree for AxisTreeLib."""

from typing import Optional

from ..core.node import TreeNode
from .node_tree import TreeNodeTree


class TypeTree(TreeNodeTree):
    """The inheritance chain of a class, as a tree of TreeNodes.

    The root holds the most general class and each node's first child is the
    next class down the primary-base chain, ending at the specific class.
    The specific class lists its secondary (mixin) bases as leaf children.

    Example:
        tree = TypeTree(bool)
        tree.values()  # [object, int, bool]
    """

    def __init__(self, specific_type: type, general_type: Optional[type] = object):
        """Build the chain from general_type down to specific_type.

        Args:
            specific_type: Class at the bottom of the chain
            general_type: Class to stop at (None = walk to the top)

        Raises:
            TypeError: If specific_type is not a class
        """
        if not isinstance(specific_type, type):
            raise TypeError(f"Expected a class, got {specific_type!r}")
        self.specific_type = specific_type
        self.general_type = general_type
        super().__init__(self._build_chain(specific_type, general_type))

    @staticmethod
    def _build_chain(specific_type: type, general_type: Optional[type]) -> TreeNode:
        node = TreeNode(specific_type, *(TreeNode(base) for base in specific_type.__bases__[1:]))
        cls = specific_type
        # Follow the first listed base, not the layout base in __base__.
        while cls is not general_type and cls.__bases__:
            cls = cls.__bases__[0]
            node = TreeNode(cls, node)
        return node

    @classmethod
    def for_type(cls, specific_type: type, general_type: Optional[type] = object) -> 'TypeTree':
        return cls(specific_type, general_type)

    def specific_node(self) -> TreeNode:
        """Return the node holding the specific class."""
        return self.find_value(self.specific_type)
