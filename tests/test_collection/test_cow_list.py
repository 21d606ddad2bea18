"""
Tests for the copy-on-write list.
"""

import threading

import pytest

from utilkit.collection import CopyOnWriteList


class TestCopyOnWriteListBasics:
    """Tests for list behavior."""

    def test_mutations(self):
        """Test the usual list operations."""
        cow = CopyOnWriteList([3, 1])
        cow.append(2)
        cow.insert(0, 0)
        cow[1] = 30
        del cow[2]
        cow += [5]

        assert cow == [0, 30, 2, 5]
        assert cow.pop() == 5
        cow.remove(30)
        assert list(cow) == [0, 2]

    def test_sort_and_reverse(self):
        """Test in-place reordering."""
        cow = CopyOnWriteList([2, 3, 1])
        cow.sort()
        assert cow == [1, 2, 3]

        cow.reverse()
        assert cow == [3, 2, 1]

    def test_failed_write_leaves_list_unchanged(self):
        """Test that an error during a write swaps nothing in."""
        cow = CopyOnWriteList([1])

        with pytest.raises(ValueError):
            cow.remove(99)
        with pytest.raises(IndexError):
            cow[5] = 0
        assert cow == [1]

    def test_add_if_absent(self):
        """Test conditional append."""
        cow = CopyOnWriteList([1])

        assert cow.add_if_absent(2) is True
        assert cow.add_if_absent(1) is False
        assert cow == [1, 2]

    def test_clear(self):
        """Test removing everything."""
        cow = CopyOnWriteList([1, 2])
        cow.clear()

        assert len(cow) == 0


class TestCopyOnWriteListSnapshots:
    """Tests for snapshot semantics."""

    def test_iterator_sees_snapshot(self):
        """Test that writes during iteration do not affect the iterator."""
        cow = CopyOnWriteList([1, 2, 3])
        seen = []

        for item in cow:
            seen.append(item)
            cow.append(item * 10)

        assert seen == [1, 2, 3]
        assert cow == [1, 2, 3, 10, 20, 30]

    def test_snapshot_is_immutable(self):
        """Test that snapshot() is unaffected by later writes."""
        cow = CopyOnWriteList([1])
        snapshot = cow.snapshot()
        cow.append(2)

        assert snapshot == (1,)

    def test_concurrent_appends(self):
        """Test that concurrent writers do not lose updates."""
        cow = CopyOnWriteList()

        def worker(offset):
            for i in range(200):
                cow.append(offset + i)

        threads = [threading.Thread(target=worker, args=(n * 1000,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(cow) == 800
        assert len(set(cow)) == 800
