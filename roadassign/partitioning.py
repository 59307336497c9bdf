"""Separator trees and separator decompositions of graphs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import cmp_to_key

_WORD_BITS = 64
_ALL_ONES = (1 << _WORD_BITS) - 1


def _highest_one_bit(x: int) -> int:
    return x.bit_length() - 1


def _highest_differing_bit(a: int, b: int) -> int:
    return _highest_one_bit(a ^ b)


class SeparatorTree:
    """A separator tree computed by recursive bisection.

    For each vertex and level a bit tells which side the vertex belongs to.
    The bits of a vertex are packed into a 64-bit word, with level 0 in the
    highest bit. Partitions and contraction orders can be read off the tree.
    """

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError(f"negative number of vertices -- '{num_vertices}'")
        self._packed = [0] * num_vertices

    def _bit(self, v: int, level: int) -> int:
        if not 0 <= v < len(self._packed):
            raise IndexError(f"vertex ID out of range -- '{v}'")
        if not 0 <= level < _WORD_BITS:
            raise ValueError(f"level out of range -- '{level}'")
        return _WORD_BITS - level - 1

    def side(self, v: int, level: int) -> bool:
        """Return the side containing v on the given level (levels indexed top-down)."""
        bit = self._bit(v, level)
        return bool((self._packed[v] >> bit) & 1)

    def set_side(self, v: int, level: int, value: bool) -> None:
        """Set the side containing v on the given level."""
        bit = self._bit(v, level)
        if value:
            self._packed[v] |= 1 << bit
        else:
            self._packed[v] &= ~(1 << bit)

    def partition(self, max_cell_size: int) -> list[int]:
        """Return a cell ID for each vertex, with cells of at most max_cell_size vertices."""
        if max_cell_size <= 0:
            raise ValueError(f"cell size not strictly positive -- '{max_cell_size}'")
        packed = self._packed
        n = len(packed)
        order = sorted(range(n), key=lambda v: packed[v])
        ids = [packed[v] for v in order]
        partition = [-1] * n

        first = 0
        cell = 0
        last = max_cell_size
        while last < n:
            while _highest_differing_bit(ids[first], ids[last - 1]) > _highest_differing_bit(
                ids[last - 1], ids[last]
            ):
                last -= 1
            for v in order[first:last]:
                partition[v] = cell
            first = last
            cell += 1
            last += max_cell_size
        for v in order[first:]:
            partition[v] = cell
        return partition

    def contraction_order(self, edges: Iterable[tuple[int, int]]) -> list[int]:
        """Return a contraction order for the graph given by its (tail, head) edges."""
        packed = self._packed
        n = len(packed)
        on_separator = [0] * n
        for tail, head in edges:
            for v in (tail, head):
                if not 0 <= v < n:
                    raise IndexError(f"vertex ID out of range -- '{v}'")
            on_separator[tail] |= ~packed[tail] & packed[head]
            on_separator[head] |= ~packed[head] & packed[tail]

        mask = []
        for bits in on_separator:
            msb = _highest_one_bit(bits)
            mask.append(0 if msb == _WORD_BITS - 1 else (_ALL_ONES << (msb + 1)) & _ALL_ONES)

        def compare(u: int, v: int) -> int:
            min_mask = min(mask[u], mask[v])
            a = packed[u] & min_mask
            b = packed[v] & min_mask
            if a != b:
                return -1 if a < b else 1
            if mask[u] != mask[v]:
                return -1 if mask[u] > mask[v] else 1
            return (u > v) - (u < v)

        return sorted(range(n), key=cmp_to_key(compare))


@dataclass(frozen=True)
class SeparatorNode:
    """A node in a separator decomposition."""

    left_child: int
    right_sibling: int
    first_separator_vertex: int
    last_separator_vertex: int


@dataclass
class SeparatorDecomposition:
    """A rooted tree of separators together with its nested dissection order."""

    tree: list[SeparatorNode] = field(default_factory=list)
    order: list[int] = field(default_factory=list)

    def _node(self, node: int) -> SeparatorNode:
        if not 0 <= node < len(self.tree):
            raise IndexError(f"node index out of range -- '{node}'")
        return self.tree[node]

    def left_child(self, node: int) -> int:
        """Return the index of the left child of the node."""
        return self._node(node).left_child

    def right_sibling(self, node: int) -> int:
        """Return the index of the right sibling of the node."""
        return self._node(node).right_sibling

    def first_separator_vertex(self, node: int) -> int:
        """Return the index in the order of the node's first separator vertex."""
        return self._node(node).first_separator_vertex

    def last_separator_vertex(self, node: int) -> int:
        """Return the index in the order one past the node's last separator vertex."""
        return self._node(node).last_separator_vertex