"""A tournament (loser) tree for merging k sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence

_Vertex = tuple[int, int]  # (key, sequence index)


def _minmax(a: _Vertex, b: _Vertex) -> tuple[_Vertex, _Vertex]:
    return (b, a) if b[0] < a[0] else (a, b)


class TournamentTree:
    """Finds the smallest of the leading elements of 2**log_k sorted sequences."""

    def __init__(self, log_k: int, keys: Sequence[int]) -> None:
        if log_k < 0:
            raise ValueError(f"negative log k -- '{log_k}'")
        self.log_k = log_k
        self.k = 1 << log_k
        self._tree: list[_Vertex] = [(0, 0)] * self.k
        self.build(keys)

    def build(self, keys: Sequence[int]) -> None:
        """Rebuild the tree from the leading elements of the k sequences."""
        k = self.k
        if len(keys) != k:
            raise ValueError(f"expected {k} keys, got {len(keys)}")
        winners: list[_Vertex] = [(0, 0)] * k
        tree = self._tree
        for i in range(k - 2, -1, -2):
            parent = (i + k) // 2
            winners[parent], tree[parent] = _minmax((keys[i], i), (keys[i + 1], i + 1))
        for i in range(k - 2, 0, -2):
            parent = i // 2
            winners[parent], tree[parent] = _minmax(winners[i], winners[i + 1])
        tree[0] = winners[1] if k != 1 else (keys[0], 0)

    def min_key(self) -> int:
        """Return the key of the smallest element."""
        return self._tree[0][0]

    def min_seq(self) -> int:
        """Return the index of the sequence the smallest element comes from."""
        return self._tree[0][1]

    def delete_min(self, key_of_next_element: int) -> None:
        """Replace the smallest element by the next one from its sequence."""
        winner = (key_of_next_element, self._tree[0][1])
        node = winner[1] + self.k
        for _ in range(self.log_k):
            node //= 2
            if self._tree[node][0] < winner[0]:
                self._tree[node], winner = winner, self._tree[node]
        self._tree[0] = winner