"""Tree iterators for AxisTreeLib.

Depth-first orders and XPath-style axes, all computed from the Tree
primitives. Most callers reach these through the Tree factory methods
(preorder_iterator(), ancestor_iterator(), ...) rather than directly.
"""

from .depth_first import (
    PreorderIterator,
    PostorderIterator,
    PreorderParentUnawareIterator,
)
from .axis import (
    AncestorIterator,
    AncestorOrSelfIterator,
    ChildIterator,
    FollowingSiblingIterator,
    PrecedingSiblingIterator,
)

__all__ = [
    "PreorderIterator",
    "PostorderIterator",
    "PreorderParentUnawareIterator",
    "AncestorIterator",
    "AncestorOrSelfIterator",
    "ChildIterator",
    "FollowingSiblingIterator",
    "PrecedingSiblingIterator",
]
