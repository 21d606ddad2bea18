"""
List utility functions.

Thin helpers over Python's built-in sequences: null-safe predicates and
accessors, factory shortcuts, sort/search/shuffle delegation, live views,
array conversion, and set-style operations on ordered sequences.

``None`` counts as an empty list for the predicates, the accessors,
``empty_list_if_none`` and ``is_equal``. Every other function expects a
real sequence and lets Python raise TypeError otherwise.
"""

import random
from bisect import bisect_left
from collections import Counter, deque
from collections.abc import MutableSequence, Sequence
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Callable, Iterator, List, Optional

import numpy as np

from .cow_list import CopyOnWriteList
from .sorted_list import SortedList
from .views import (
    FixedSizeList,
    ImmutableList,
    PrependedSequence,
    PrimitiveList,
    ReversedList,
    SynchronizedList,
)


_EMPTY_LIST = ImmutableList(())

_random_source: ContextVar[Optional[random.Random]] = ContextVar(
    "utilkit_random_source", default=None
)


# ---------------------------------------------------------------------------
# Predicates and accessors
# ---------------------------------------------------------------------------

def is_empty(seq: Optional[Sequence]) -> bool:
    """Return True if seq is None or has no elements."""
    return seq is None or len(seq) == 0


def is_not_empty(seq: Optional[Sequence]) -> bool:
    """Return True if seq is not None and has at least one element."""
    return seq is not None and len(seq) > 0


def get_first(seq: Optional[Sequence]) -> Any:
    """
    Get the first element.

    Args:
        seq: Sequence to read, may be None.

    Returns:
        The element at index 0, or None if seq is None or empty.
    """
    if is_empty(seq):
        return None
    return seq[0]


def get_last(seq: Optional[Sequence]) -> Any:
    """
    Get the last element.

    Args:
        seq: Sequence to read, may be None.

    Returns:
        The element at index len - 1, or None if seq is None or empty.
    """
    if is_empty(seq):
        return None
    return seq[len(seq) - 1]


# ---------------------------------------------------------------------------
# Construction helpers
# ---------------------------------------------------------------------------

def new_list(*elements) -> list:
    """Create a list holding the given elements."""
    return list(elements)


def new_list_with_capacity(capacity: int) -> list:
    """
    Create an empty list.

    Python lists grow on demand, so the capacity is only validated.

    Raises:
        ValueError: If capacity is negative.
    """
    if capacity < 0:
        raise ValueError(f"Illegal capacity: {capacity}")
    return []


def new_linked_list(*elements) -> deque:
    """Create a doubly-linked deque holding the given elements."""
    return deque(elements)


def new_sorted_list(*elements, key: Optional[Callable] = None) -> SortedList:
    """
    Create a list that keeps itself sorted on insert.

    Args:
        *elements: Initial elements.
        key: Optional key function; natural ordering when omitted.
    """
    return SortedList(elements, key=key)


def new_copy_on_write_list(*elements) -> CopyOnWriteList:
    """Create a thread-safe copy-on-write list holding the given elements."""
    return CopyOnWriteList(elements)


def synchronized_list(seq: MutableSequence) -> SynchronizedList:
    """
    Wrap seq so that every single call runs under one lock.

    Iterating is not atomic: hold ``result.lock`` for the whole loop when
    other threads may modify the list.
    """
    return SynchronizedList(seq)


# ---------------------------------------------------------------------------
# Read-only views
# ---------------------------------------------------------------------------

def empty_list() -> ImmutableList:
    """Return the shared empty immutable list."""
    return _EMPTY_LIST


def empty_list_if_none(seq: Optional[Sequence]) -> Sequence:
    """Return seq, or the shared empty immutable list when seq is None."""
    return _EMPTY_LIST if seq is None else seq


def singleton_list(value) -> ImmutableList:
    """Return an immutable list holding only value."""
    return ImmutableList((value,))


def unmodifiable_list(seq: Sequence) -> ImmutableList:
    """Return a read-only view of seq that reflects later changes to seq."""
    if seq is None:
        raise TypeError("seq must not be None")
    return ImmutableList(seq)


# ---------------------------------------------------------------------------
# Sort, search, shuffle, reverse
# ---------------------------------------------------------------------------

def sort(seq: MutableSequence, key: Optional[Callable] = None, reverse: bool = False) -> None:
    """
    Sort seq in place. The sort is stable.

    Uses the sequence's own ``sort`` when it has one; other mutable
    sequences are rewritten element by element.

    Args:
        seq: Sequence to sort.
        key: Optional key function. Wrap a two-argument comparator with
            ``functools.cmp_to_key``.
        reverse: Sort descending.

    Raises:
        TypeError: If elements cannot be compared with each other.
    """
    sort_method = getattr(seq, "sort", None)
    if callable(sort_method):
        sort_method(key=key, reverse=reverse)
        return

    for i, value in enumerate(sorted(seq, key=key, reverse=reverse)):
        seq[i] = value


def binary_search(sorted_seq: Sequence, value, key: Optional[Callable] = None) -> int:
    """
    Search a sorted sequence.

    The sequence must already be sorted ascending by the same ordering;
    this is not checked and the result is undefined otherwise.

    Args:
        sorted_seq: Sequence sorted by natural order or by key.
        value: Value to look for.
        key: Optional key function applied to elements and to value.

    Returns:
        Index of value if present, else ``-(insertion_point) - 1``.
    """
    target = key(value) if key is not None else value
    index = bisect_left(sorted_seq, target, key=key)
    if index < len(sorted_seq):
        found = sorted_seq[index]
        if key is not None:
            found = key(found)
        if not target < found:
            return index
    return -index - 1


@contextmanager
def random_source(rng: random.Random) -> Iterator[random.Random]:
    """
    Install rng as the default generator for shuffle() in this context.

    Example:
        with random_source(random.Random(42)):
            shuffle(items)
    """
    token = _random_source.set(rng)
    try:
        yield rng
    finally:
        _random_source.reset(token)


def shuffle(seq: MutableSequence, rng: Optional[random.Random] = None) -> None:
    """
    Shuffle seq in place.

    Args:
        seq: Sequence to permute.
        rng: Generator to use. Falls back to the one installed with
            random_source(), then to a freshly seeded generator.
    """
    if rng is None:
        rng = _random_source.get() or random.Random()
    rng.shuffle(seq)


def reverse(seq: MutableSequence) -> MutableSequence:
    """
    Return a live reversed view of seq.

    Changes made through either the view or seq are visible in the other.
    Reversing a reversed view returns the original sequence.
    """
    if isinstance(seq, ReversedList):
        return seq.backing
    return ReversedList(seq)


# ---------------------------------------------------------------------------
# Array / sequence conversion
# ---------------------------------------------------------------------------

def to_array(seq: Sequence) -> list:
    """Copy the elements of seq into a new, independent list."""
    return list(seq)


def as_list(array) -> FixedSizeList:
    """
    Wrap array in a fixed-size view.

    Element assignments write through to array; appending, inserting or
    removing raises UnsupportedOperationError.
    """
    return FixedSizeList(array)


def as_list_with_first(first, rest: Sequence) -> ImmutableList:
    """Return an immutable list of first followed by the elements of rest."""
    return ImmutableList(PrependedSequence(first, rest))


def as_int_list(values) -> PrimitiveList:
    """Fixed-size view over values stored as a numpy int32 array."""
    return PrimitiveList(values, np.int32)


def as_long_list(values) -> PrimitiveList:
    """Fixed-size view over values stored as a numpy int64 array."""
    return PrimitiveList(values, np.int64)


def as_double_list(values) -> PrimitiveList:
    """Fixed-size view over values stored as a numpy float64 array."""
    return PrimitiveList(values, np.float64)


# ---------------------------------------------------------------------------
# Set-style operations
# ---------------------------------------------------------------------------

def is_equal(seq1: Optional[Sequence], seq2: Optional[Sequence]) -> bool:
    """
    Compare two sequences element by element.

    Returns:
        True if both are None, or both have the same length and equal
        elements in the same order.
    """
    if seq1 is seq2:
        return True
    if seq1 is None or seq2 is None or len(seq1) != len(seq2):
        return False

    for item1, item2 in zip(seq1, seq2):
        if not (item1 is item2 or item1 == item2):
            return False
    return True


def union(seq1: Sequence, seq2: Sequence) -> list:
    """Concatenate seq1 and seq2, keeping order and duplicates."""
    result = list(seq1)
    result.extend(seq2)
    return result


def intersection(seq1: Sequence, seq2: Sequence) -> List:
    """
    Elements present in both sequences.

    Counts are taken from the shorter sequence (seq1 on a tie); each match
    while walking the longer sequence consumes one count, so a value never
    appears more often than it does in the shorter sequence. The result
    follows the longer sequence's order. Elements must be hashable.
    """
    smaller, larger = seq1, seq2
    if len(seq1) > len(seq2):
        smaller, larger = seq2, seq1

    remaining = Counter(smaller)
    result = []
    for item in larger:
        if remaining[item] > 0:
            result.append(item)
            remaining[item] -= 1
    return result


if __name__ == "__main__":
    print(f"union: {union([1, 2], [2, 3])}")
    print(f"intersection: {intersection([1, 2, 2, 3], [2, 2, 4])}")
    print(f"binary_search: {binary_search([1, 3, 5, 7], 4)}")

    items = [1, 2, 3]
    view = reverse(items)
    items.append(4)
    print(f"reversed view: {list(view)}")

    with random_source(random.Random(7)):
        shuffle(items)
    print(f"shuffled: {items}")
