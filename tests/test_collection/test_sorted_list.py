"""
Tests for the auto-sorting SortedList.
"""

import pytest

from utilkit.collection import SortedList


class TestSortedListInsert:
    """Tests for adding elements."""

    def test_initial_elements_are_sorted(self):
        """Test construction from an unsorted iterable."""
        assert list(SortedList([5, 1, 3])) == [1, 3, 5]

    def test_add_keeps_order(self):
        """Test that each add lands at its sorted position."""
        sorted_list = SortedList()
        for value in [4, 2, 8, 6]:
            sorted_list.add(value)

        assert list(sorted_list) == [2, 4, 6, 8]

    def test_equal_keys_keep_insertion_order(self):
        """Test stability for elements ordered equal."""
        sorted_list = SortedList(key=len)
        sorted_list.add("bb")
        sorted_list.add("a")
        sorted_list.add("cc")

        assert list(sorted_list) == ["a", "bb", "cc"]

    def test_update(self):
        """Test adding several elements at once."""
        sorted_list = SortedList([3])
        sorted_list.update([1, 2])

        assert list(sorted_list) == [1, 2, 3]

    def test_incomparable_element_raises(self):
        """Test that mixing types fails."""
        sorted_list = SortedList([1, 2])

        with pytest.raises(TypeError):
            sorted_list.add("x")

    def test_no_positional_writes(self):
        """Test that operations breaking the order are not offered."""
        sorted_list = SortedList([1, 2])

        assert not hasattr(sorted_list, "append")
        assert not hasattr(sorted_list, "insert")
        with pytest.raises(TypeError):
            sorted_list[0] = 5


class TestSortedListLookup:
    """Tests for membership and position lookups."""

    def test_contains(self):
        """Test membership via binary search."""
        sorted_list = SortedList([1, 3, 5])

        assert 3 in sorted_list
        assert 4 not in sorted_list

    def test_contains_with_key_matches_by_equality(self):
        """Test that elements sharing a key are told apart."""
        sorted_list = SortedList(["ab", "cd"], key=len)

        assert "cd" in sorted_list
        assert "xy" not in sorted_list

    def test_index_and_count(self):
        """Test index of first occurrence and count of duplicates."""
        sorted_list = SortedList([2, 1, 2, 3])

        assert sorted_list.index(2) == 1
        assert sorted_list.count(2) == 2
        assert sorted_list.count(9) == 0

    def test_index_missing_raises(self):
        """Test ValueError for an absent element."""
        with pytest.raises(ValueError):
            SortedList([1]).index(2)

    def test_indexing_and_slicing(self):
        """Test positional reads."""
        sorted_list = SortedList([3, 1, 2])

        assert sorted_list[0] == 1
        assert sorted_list[-1] == 3
        assert sorted_list[1:] == [2, 3]


class TestSortedListRemoval:
    """Tests for removing elements."""

    def test_remove(self):
        """Test removing one occurrence."""
        sorted_list = SortedList([1, 2, 2])
        sorted_list.remove(2)

        assert list(sorted_list) == [1, 2]

    def test_remove_missing_raises(self):
        """Test ValueError for an absent element."""
        with pytest.raises(ValueError):
            SortedList([1]).remove(5)

    def test_discard(self):
        """Test silent removal."""
        sorted_list = SortedList([1, 2])

        assert sorted_list.discard(2) is True
        assert sorted_list.discard(2) is False
        assert list(sorted_list) == [1]

    def test_pop_and_delete(self):
        """Test pop and del by index."""
        sorted_list = SortedList([1, 2, 3, 4])

        assert sorted_list.pop() == 4
        assert sorted_list.pop(0) == 1
        del sorted_list[0]
        assert list(sorted_list) == [3]

    def test_clear(self):
        """Test removing everything."""
        sorted_list = SortedList([1, 2])
        sorted_list.clear()

        assert len(sorted_list) == 0


class TestSortedListEquality:
    """Tests for comparison with other sequences."""

    def test_equals_list(self):
        """Test equality against a plain list."""
        assert SortedList([2, 1]) == [1, 2]
        assert SortedList([2, 1]) != [2, 1]
