"""Radix tree node with sorted, first-byte-unique children."""

from __future__ import annotations

from bisect import bisect_left


def _leading_byte(node: RadixNode) -> int:
    return node.fragment[0]


def common_prefix_length(key: bytes, start: int, fragment: bytes) -> int:
    """Number of leading bytes ``key[start:]`` shares with ``fragment``."""
    n = min(len(key) - start, len(fragment))
    i = 0
    while i < n and key[start + i] == fragment[i]:
        i += 1
    return i


class RadixNode:
    """Single node in the radix tree.

    ``fragment`` is the piece of key this node adds to its parent's path.
    ``children`` stay sorted by ``fragment[0]`` and no two of them share a
    leading byte, so a child can be found by binary search.
    """

    __slots__ = ("fragment", "is_leaf", "children")

    def __init__(self, fragment: bytes = b"", is_leaf: bool = False):
        self.fragment: bytes = fragment
        self.is_leaf: bool = is_leaf
        self.children: list[RadixNode] = []

    def lower_bound(self, byte: int) -> int:
        """Index of the first child whose leading byte is >= ``byte``.

        Returns ``len(self.children)`` when every child sorts before it.
        """
        return bisect_left(self.children, byte, key=_leading_byte)

    def split(self, at: int) -> RadixNode:
        """Break this node's fragment at offset ``at``.

        The tail of the fragment, the children and the leaf flag move to a
        new node, which becomes the only child of this one. Returns the new
        node.
        """
        if not 0 < at < len(self.fragment):
            raise ValueError(
                f"split offset {at} outside fragment of length {len(self.fragment)}"
            )
        tail = RadixNode(self.fragment[at:], self.is_leaf)
        tail.children, self.children = self.children, [tail]
        self.fragment = self.fragment[:at]
        self.is_leaf = False
        return tail

    def __repr__(self) -> str:
        leaf = " leaf" if self.is_leaf else ""
        return f"<RadixNode {self.fragment!r}{leaf} children={len(self.children)}>"
