"""
Auto-sorting list.

Keeps its elements ordered on every insert, by natural ordering or by a
key function. Only operations that cannot break the ordering are exposed:
there is no append, insert or item assignment.
"""

from bisect import bisect_left, bisect_right, insort_right
from collections.abc import Sequence
from typing import Callable, Iterable, Optional

from ._base import sequences_equal


class SortedList(Sequence):
    """
    List kept in ascending order.

    Elements that compare equal keep their insertion order. Lookups
    (``in``, ``index``, ``count``, ``remove``) use binary search over the
    ordering and then match candidates by equality.

    Args:
        iterable: Initial elements.
        key: Optional key function defining the order, as for ``sorted``.
    """

    def __init__(self, iterable: Iterable = (), key: Optional[Callable] = None):
        self._key = key
        self._items = sorted(iterable, key=key)

    @property
    def key(self) -> Optional[Callable]:
        return self._key

    def _sort_key(self, value):
        return self._key(value) if self._key is not None else value

    def _equal_range(self, value):
        """Return the [lo, hi) slice of elements ordered equal to value."""
        target = self._sort_key(value)
        lo = bisect_left(self._items, target, key=self._key)
        hi = bisect_right(self._items, target, lo=lo, key=self._key)
        return lo, hi

    def _find(self, value, start: int = 0, stop: Optional[int] = None) -> int:
        lo, hi = self._equal_range(value)
        stop = len(self._items) if stop is None else stop
        for i in range(max(lo, start), min(hi, stop)):
            item = self._items[i]
            if item is value or item == value:
                return i
        return -1

    def add(self, value) -> None:
        """Insert value at its sorted position, after any equal elements."""
        insort_right(self._items, value, key=self._key)

    def update(self, values: Iterable) -> None:
        """Add every element of values."""
        self._items.extend(values)
        self._items.sort(key=self._key)

    def remove(self, value) -> None:
        """Remove the first occurrence of value; ValueError if absent."""
        i = self._find(value)
        if i < 0:
            raise ValueError(f"{value!r} is not in list")
        del self._items[i]

    def discard(self, value) -> bool:
        """Remove value if present. Returns True when something was removed."""
        i = self._find(value)
        if i < 0:
            return False
        del self._items[i]
        return True

    def pop(self, index: int = -1):
        return self._items.pop(index)

    def clear(self) -> None:
        self._items.clear()

    def index(self, value, start: int = 0, stop: Optional[int] = None) -> int:
        size = len(self._items)
        if start < 0:
            start = max(start + size, 0)
        if stop is not None and stop < 0:
            stop += size
        i = self._find(value, start, stop)
        if i < 0:
            raise ValueError(f"{value!r} is not in list")
        return i

    def count(self, value) -> int:
        lo, hi = self._equal_range(value)
        return sum(1 for i in range(lo, hi) if self._items[i] == value)

    def __contains__(self, value) -> bool:
        return self._find(value) >= 0

    def __getitem__(self, index):
        return self._items[index]

    def __delitem__(self, index):
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __reversed__(self):
        return reversed(self._items)

    def __eq__(self, other):
        return sequences_equal(self, other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"SortedList({self._items!r})"
