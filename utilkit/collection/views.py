"""
View containers backed by another sequence.

Every view keeps a reference to its backing sequence instead of a copy:
reads and (where allowed) writes go straight through to it. Views that
reject structural changes raise UnsupportedOperationError.
"""

import numbers
import threading
from collections.abc import MutableSequence, Sequence

import numpy as np

from ._base import reject, sequences_equal


def _slice_indices(index: slice, size: int) -> range:
    return range(*index.indices(size))


def _check_primitive(value, dtype: np.dtype) -> None:
    """Reject values a PrimitiveList of this dtype would have to cast."""
    if value is None:
        raise TypeError("PrimitiveList does not accept None")
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Expected a number for a {dtype} array, got bool")
    if np.issubdtype(dtype, np.integer):
        if not isinstance(value, numbers.Integral):
            raise TypeError(f"Expected an integer for a {dtype} array, got {type(value).__name__}")
        limits = np.iinfo(dtype)
        if not limits.min <= int(value) <= limits.max:
            raise OverflowError(f"{value} is out of range for {dtype} [{limits.min}, {limits.max}]")
    elif not isinstance(value, numbers.Real):
        raise TypeError(f"Expected a real number for a {dtype} array, got {type(value).__name__}")


class ImmutableList(Sequence):
    """
    Read-only view over a backing sequence.

    Changes made to the backing sequence remain visible; every mutating
    call on the view itself raises UnsupportedOperationError.
    """

    def __init__(self, backing: Sequence = ()):
        self._backing = backing

    def __getitem__(self, index):
        if isinstance(index, slice):
            return ImmutableList(tuple(
                self._backing[i] for i in _slice_indices(index, len(self._backing))
            ))
        return self._backing[index]

    def __len__(self) -> int:
        return len(self._backing)

    def __iter__(self):
        return iter(self._backing)

    def __contains__(self, value) -> bool:
        return value in self._backing

    def __eq__(self, other):
        return sequences_equal(self, other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"ImmutableList({list(self._backing)!r})"

    def __setitem__(self, index, value):
        reject(self, "__setitem__")

    def __delitem__(self, index):
        reject(self, "__delitem__")

    def __iadd__(self, values):
        reject(self, "__iadd__")

    def __imul__(self, count):
        reject(self, "__imul__")

    def append(self, value):
        reject(self, "append")

    def extend(self, values):
        reject(self, "extend")

    def insert(self, index, value):
        reject(self, "insert")

    def remove(self, value):
        reject(self, "remove")

    def pop(self, index=-1):
        reject(self, "pop")

    def clear(self):
        reject(self, "clear")

    def sort(self, key=None, reverse=False):
        reject(self, "sort")

    def reverse(self):
        reject(self, "reverse")


class PrependedSequence(Sequence):
    """A first element followed by the elements of a backing sequence."""

    def __init__(self, first, rest: Sequence):
        if rest is None:
            raise TypeError("rest must not be None")
        self._first = first
        self._rest = rest

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in _slice_indices(index, len(self))]
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("list index out of range")
        if index == 0:
            return self._first
        return self._rest[index - 1]

    def __len__(self) -> int:
        return len(self._rest) + 1


class FixedSizeList(Sequence):
    """
    Fixed-size view writing through to a backing array.

    Elements may be replaced in place (``view[i] = x``, ``sort()``), but
    anything that would change the length raises UnsupportedOperationError.
    """

    def __init__(self, array):
        if array is None:
            raise TypeError("array must not be None")
        self._backing = array

    @property
    def backing(self):
        """The array this view writes through to."""
        return self._backing

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in _slice_indices(index, len(self))]
        return self._backing[index]

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            positions = _slice_indices(index, len(self))
            values = list(value)
            if len(values) != len(positions):
                reject(self, "resize")
            for position, item in zip(positions, values):
                self[position] = item
            return
        self._backing[index] = value

    def __len__(self) -> int:
        return len(self._backing)

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

    def __eq__(self, other):
        return sequences_equal(self, other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def sort(self, key=None, reverse=False) -> None:
        """Sort in place, stable, by replacing elements."""
        for i, value in enumerate(sorted(self, key=key, reverse=reverse)):
            self[i] = value

    def __delitem__(self, index):
        reject(self, "__delitem__")

    def __iadd__(self, values):
        reject(self, "__iadd__")

    def append(self, value):
        reject(self, "append")

    def extend(self, values):
        reject(self, "extend")

    def insert(self, index, value):
        reject(self, "insert")

    def remove(self, value):
        reject(self, "remove")

    def pop(self, index=-1):
        reject(self, "pop")

    def clear(self):
        reject(self, "clear")


class PrimitiveList(FixedSizeList):
    """
    Fixed-size view over a one-dimensional numpy array.

    Elements are stored unboxed in the array and returned as plain Python
    ints or floats. A numpy array of the matching dtype is used directly,
    so writes through the view are visible in the caller's array.

    Values are never cast: an integer view rejects floats and bools with
    TypeError and values outside the dtype's range with OverflowError.
    """

    def __init__(self, values, dtype):
        if values is None:
            raise TypeError("values must not be None")
        dtype = np.dtype(dtype)
        if isinstance(values, np.ndarray) and values.ndim != 1:
            raise ValueError(f"Expected a one-dimensional array, got {values.ndim} dimensions")
        if isinstance(values, np.ndarray) and values.dtype == dtype:
            array = values
        else:
            items = list(values)
            for item in items:
                _check_primitive(item, dtype)
            array = np.array(items, dtype=dtype)
        if array.ndim != 1:
            raise ValueError(f"Expected a one-dimensional array, got {array.ndim} dimensions")
        super().__init__(array)

    @property
    def dtype(self) -> np.dtype:
        return self._backing.dtype

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in _slice_indices(index, len(self))]
        return self._backing[index].item()

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            value = list(value)
            for item in value:
                _check_primitive(item, self.dtype)
        else:
            _check_primitive(value, self.dtype)
        super().__setitem__(index, value)

    def __contains__(self, value) -> bool:
        if value is None:
            return False
        return any(item == value for item in self)


class ReversedList(MutableSequence):
    """
    Live reversed view of a backing sequence.

    Index ``i`` of the view maps to index ``len - 1 - i`` of the backing
    sequence. Structural changes through the view require the backing
    sequence to support ``insert`` and ``del``.
    """

    def __init__(self, backing: MutableSequence):
        if backing is None:
            raise TypeError("backing sequence must not be None")
        self._backing = backing

    @property
    def backing(self) -> MutableSequence:
        """The sequence this view reverses."""
        return self._backing

    def _reverse_index(self, index: int) -> int:
        size = len(self._backing)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("list index out of range")
        return size - 1 - index

    def _reverse_position(self, index: int) -> int:
        size = len(self._backing)
        if index < 0:
            index = max(index + size, 0)
        return size - min(index, size)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in _slice_indices(index, len(self))]
        return self._backing[self._reverse_index(index)]

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            positions = _slice_indices(index, len(self))
            values = list(value)
            if len(values) != len(positions):
                raise ValueError(
                    f"attempt to assign sequence of size {len(values)} "
                    f"to slice of size {len(positions)}"
                )
            for position, item in zip(positions, values):
                self[position] = item
            return
        self._backing[self._reverse_index(index)] = value

    def __delitem__(self, index):
        if isinstance(index, slice):
            targets = sorted(
                (self._reverse_index(i) for i in _slice_indices(index, len(self))),
                reverse=True
            )
            for target in targets:
                del self._backing[target]
            return
        del self._backing[self._reverse_index(index)]

    def insert(self, index: int, value) -> None:
        self._backing.insert(self._reverse_position(index), value)

    def __len__(self) -> int:
        return len(self._backing)

    def __iter__(self):
        return reversed(self._backing)

    def __reversed__(self):
        return iter(self._backing)

    def __eq__(self, other):
        return sequences_equal(self, other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"ReversedList({list(self)!r})"


class SynchronizedList(MutableSequence):
    """
    Wrapper serializing every call on a backing sequence through one lock.

    Each individual call is atomic. Iteration is not: callers must hold
    ``lock`` for the whole loop when other threads may modify the list::

        with synced.lock:
            for item in synced:
                ...
    """

    def __init__(self, backing: MutableSequence, lock=None):
        if backing is None:
            raise TypeError("backing sequence must not be None")
        self._backing = backing
        self.lock = lock if lock is not None else threading.RLock()

    def __getitem__(self, index):
        with self.lock:
            return self._backing[index]

    def __setitem__(self, index, value):
        with self.lock:
            self._backing[index] = value

    def __delitem__(self, index):
        with self.lock:
            del self._backing[index]

    def __len__(self) -> int:
        with self.lock:
            return len(self._backing)

    def __iter__(self):
        # Unsynchronized, hold self.lock while iterating.
        return iter(self._backing)

    def __contains__(self, value) -> bool:
        with self.lock:
            return value in self._backing

    def __eq__(self, other):
        with self.lock:
            if isinstance(other, SynchronizedList):
                other = other._backing
            return sequences_equal(self._backing, other)

    __hash__ = None

    def __repr__(self) -> str:
        with self.lock:
            return f"SynchronizedList({list(self._backing)!r})"

    def insert(self, index: int, value) -> None:
        with self.lock:
            self._backing.insert(index, value)

    def append(self, value) -> None:
        with self.lock:
            self._backing.append(value)

    def extend(self, values) -> None:
        with self.lock:
            self._backing.extend(values)

    def pop(self, index: int = -1):
        with self.lock:
            return self._backing.pop(index)

    def remove(self, value) -> None:
        with self.lock:
            self._backing.remove(value)

    def clear(self) -> None:
        with self.lock:
            self._backing.clear()

    def index(self, value, *args) -> int:
        with self.lock:
            return self._backing.index(value, *args)

    def count(self, value) -> int:
        with self.lock:
            return self._backing.count(value)

    def reverse(self) -> None:
        with self.lock:
            self._backing.reverse()

    def sort(self, key=None, reverse=False) -> None:
        """Sort in place; backings without sort() (e.g. deque) are rewritten element by element."""
        with self.lock:
            if callable(getattr(self._backing, "sort", None)):
                self._backing.sort(key=key, reverse=reverse)
                return
            for i, value in enumerate(sorted(list(self._backing), key=key, reverse=reverse)):
                self._backing[i] = value

    def snapshot(self) -> list:
        """Copy of the current elements, taken under the lock."""
        with self.lock:
            return list(self._backing)
