"""
Thread-safe copy-on-write list.

Every write builds a new tuple under a lock and swaps it in; reads and
iteration work on whichever tuple was current when they started, so they
never block and never see a half-applied change.
"""

import threading
from collections.abc import MutableSequence
from typing import Iterable

from ._base import sequences_equal


class CopyOnWriteList(MutableSequence):
    """
    List whose mutations copy the underlying storage.

    Suited to read-mostly data shared between threads. Iterators walk a
    snapshot and are unaffected by later writes.
    """

    def __init__(self, iterable: Iterable = ()):
        self._lock = threading.Lock()
        self._items = tuple(iterable)

    def _replace(self, mutate) -> None:
        with self._lock:
            items = list(self._items)
            mutate(items)
            self._items = tuple(items)

    def snapshot(self) -> tuple:
        """The current elements as an immutable tuple."""
        return self._items

    def __getitem__(self, index):
        if isinstance(index, slice):
            return list(self._items[index])
        return self._items[index]

    def __setitem__(self, index, value):
        def mutate(items):
            items[index] = value
        self._replace(mutate)

    def __delitem__(self, index):
        def mutate(items):
            del items[index]
        self._replace(mutate)

    def insert(self, index: int, value) -> None:
        self._replace(lambda items: items.insert(index, value))

    def append(self, value) -> None:
        self._replace(lambda items: items.append(value))

    def extend(self, values: Iterable) -> None:
        values = list(values)
        self._replace(lambda items: items.extend(values))

    def __iadd__(self, values):
        self.extend(values)
        return self

    def pop(self, index: int = -1):
        popped = []
        self._replace(lambda items: popped.append(items.pop(index)))
        return popped[0]

    def remove(self, value) -> None:
        self._replace(lambda items: items.remove(value))

    def clear(self) -> None:
        with self._lock:
            self._items = ()

    def reverse(self) -> None:
        self._replace(lambda items: items.reverse())

    def sort(self, key=None, reverse=False) -> None:
        self._replace(lambda items: items.sort(key=key, reverse=reverse))

    def add_if_absent(self, value) -> bool:
        """Append value unless an equal element is present. Returns True if added."""
        with self._lock:
            if value in self._items:
                return False
            self._items = self._items + (value,)
            return True

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __contains__(self, value) -> bool:
        return value in self._items

    def __eq__(self, other):
        return sequences_equal(self._items, other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"CopyOnWriteList({list(self._items)!r})"
