"""Exception taxonomy for AxisTreeLib.

Failures are immediate and local: they are raised at the point of misuse and
are never retried by the library.
"""


class TreeError(Exception):
    """Base class for all AxisTreeLib errors."""
    pass


class NoSuchElementError(TreeError, LookupError):
    """Raised when next() or previous() is called past exhaustion.

    This is a caller protocol violation: always check has_next() or
    has_previous() first.
    """
    pass


class UnsupportedOperationError(TreeError, NotImplementedError):
    """Raised when an iterator or tree lacks the requested capability.

    Examples are remove() on a read-only iterator, previous() on a
    forward-only iterator, or add() on a tree that cannot be modified.
    """
    pass


class TreeStructureError(TreeError):
    """Raised when a tree reports inconsistent structure.

    A parent that does not list a child which claims it as parent is a
    precondition violation of the Tree contract. Sibling lookups raise this
    rather than guessing a position.
    """
    pass


class CapabilityMismatchError(TreeError):
    """Raised when a traversal configuration can't be met by a tree."""
    pass
