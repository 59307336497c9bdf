"""Addressable k-ary min-heaps keyed by integer element IDs."""

from __future__ import annotations

_INVALID_INDEX = -1


class AddressableKHeap:
    """A k-ary min-heap holding elements with IDs from 0 to n - 1, each with a key."""

    def __init__(self, n: int, k: int) -> None:
        if k <= 0:
            raise ValueError(f"parameter k must be strictly positive -- '{k}'")
        self._k = k
        self._heap: list[tuple[int, int]] = []
        self._index: list[int] = []
        self.resize(n)

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, element_id: int) -> bool:
        self._check_id(element_id)
        return self._index[element_id] != _INVALID_INDEX

    def min_id(self) -> int:
        """Return the ID of an element with minimum key."""
        return self.min()[0]

    def min_key(self) -> int:
        """Return the minimum key."""
        return self.min()[1]

    def min(self) -> tuple[int, int]:
        """Return the ID and key of an element with minimum key."""
        if not self._heap:
            raise IndexError("min of empty heap")
        return self._heap[0]

    def clear(self) -> None:
        """Remove all elements."""
        for element_id, _ in self._heap:
            self._index[element_id] = _INVALID_INDEX
        self._heap.clear()

    def resize(self, n: int) -> None:
        """Empty the heap and make it hold elements with IDs from 0 to n - 1."""
        if n < 0:
            raise ValueError(f"negative heap capacity -- '{n}'")
        self.clear()
        self._index = [_INVALID_INDEX] * n

    def insert(self, element_id: int, key: int) -> None:
        """Insert an element with the given ID and key."""
        if element_id in self:
            raise ValueError(f"element already in heap -- '{element_id}'")
        self._heap.append((element_id, key))
        self._sift_up(len(self._heap) - 1)

    def delete_min(self) -> tuple[int, int]:
        """Remove an element with minimum key and return its ID and key."""
        element_id, key = self.min()
        self._index[element_id] = _INVALID_INDEX
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return element_id, key

    def decrease_key(self, element_id: int, new_key: int) -> None:
        """Lower the key of the element with the given ID to new_key."""
        if element_id not in self:
            raise KeyError(element_id)
        idx = self._index[element_id]
        if new_key > self._heap[idx][1]:
            raise ValueError(
                f"new key {new_key} is larger than current key {self._heap[idx][1]}"
            )
        self._heap[idx] = (element_id, new_key)
        self._sift_up(idx)

    def _check_id(self, element_id: int) -> None:
        if not 0 <= element_id < len(self._index):
            raise IndexError(f"element ID out of range -- '{element_id}'")

    def _place(self, idx: int, element: tuple[int, int]) -> None:
        self._heap[idx] = element
        self._index[element[0]] = idx

    def _sift_up(self, idx: int) -> None:
        element = self._heap[idx]
        while idx > 0:
            parent = (idx - 1) // self._k
            if self._heap[parent][1] <= element[1]:
                break
            self._place(idx, self._heap[parent])
            idx = parent
        self._place(idx, element)

    def _sift_down(self, idx: int) -> None:
        element = self._heap[idx]
        size = len(self._heap)
        while True:
            first = idx * self._k + 1
            if first >= size:
                break
            last = min(first + self._k, size)
            min_child = min(range(first, last), key=lambda i: self._heap[i][1])
            if element[1] <= self._heap[min_child][1]:
                break
            self._place(idx, self._heap[min_child])
            idx = min_child
        self._place(idx, element)


class AddressableBinaryHeap(AddressableKHeap):
    """An addressable binary heap."""

    def __init__(self, n: int) -> None:
        super().__init__(n, 2)


class AddressableQuadheap(AddressableKHeap):
    """An addressable 4-ary heap."""

    def __init__(self, n: int) -> None:
        super().__init__(n, 4)