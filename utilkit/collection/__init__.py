"""
Collection module providing list helpers and the containers they return.

Depends only on the core module.
"""

from .cow_list import CopyOnWriteList
from .sorted_list import SortedList
from .views import (
    FixedSizeList,
    ImmutableList,
    PrimitiveList,
    ReversedList,
    SynchronizedList
)
from .list_utils import (
    is_empty,
    is_not_empty,
    get_first,
    get_last,
    new_list,
    new_list_with_capacity,
    new_linked_list,
    new_sorted_list,
    new_copy_on_write_list,
    synchronized_list,
    empty_list,
    empty_list_if_none,
    singleton_list,
    unmodifiable_list,
    sort,
    binary_search,
    random_source,
    shuffle,
    reverse,
    to_array,
    as_list,
    as_list_with_first,
    as_int_list,
    as_long_list,
    as_double_list,
    is_equal,
    union,
    intersection
)

__all__ = [
    "CopyOnWriteList",
    "SortedList",
    "FixedSizeList",
    "ImmutableList",
    "PrimitiveList",
    "ReversedList",
    "SynchronizedList",
    "is_empty",
    "is_not_empty",
    "get_first",
    "get_last",
    "new_list",
    "new_list_with_capacity",
    "new_linked_list",
    "new_sorted_list",
    "new_copy_on_write_list",
    "synchronized_list",
    "empty_list",
    "empty_list_if_none",
    "singleton_list",
    "unmodifiable_list",
    "sort",
    "binary_search",
    "random_source",
    "shuffle",
    "reverse",
    "to_array",
    "as_list",
    "as_list_with_first",
    "as_int_list",
    "as_long_list",
    "as_double_list",
    "is_equal",
    "union",
    "intersection"
]
