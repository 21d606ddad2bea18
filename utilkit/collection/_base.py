"""
Shared helpers for the container types in this package.
"""

from collections.abc import Sequence

from ..core import UnsupportedOperationError


def sequences_equal(left, right):
    """
    Element-wise equality between a container and any other sequence.

    Returns NotImplemented for non-sequences (and for str/bytes) so that
    Python falls back to its default comparison.
    """
    if not isinstance(right, Sequence) or isinstance(right, (str, bytes)):
        return NotImplemented
    if left is right:
        return True
    if len(left) != len(right):
        return False
    return all(a == b for a, b in zip(left, right))


def reject(container, operation: str):
    """Raise UnsupportedOperationError for a rejected mutation."""
    kind = type(container).__name__
    raise UnsupportedOperationError(
        f"{kind} does not support {operation}()",
        operation=operation,
        details={"container": kind}
    )
