"""Common components shared across AxisTreeLib.

This internal package contains plain configuration code with no dependency
on trees or iterators. It should NOT be imported directly by users.

Important: This package must NEVER import from core, iterators or trees to
avoid circular dependencies.
"""

from .config import (
    TraversalOrder,
    FilterConfig,
    TraversalConfig,
)

__all__ = [
    'TraversalOrder',
    'FilterConfig',
    'TraversalConfig',
]
