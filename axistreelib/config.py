"""Configuration re-export.

Configuration classes live in the _common package; this module is the public
place to import them from.
"""

from ._common.config import (
    TraversalOrder,
    FilterConfig,
    TraversalConfig,
)

__all__ = [
    'TraversalOrder',
    'FilterConfig',
    'TraversalConfig',
]
