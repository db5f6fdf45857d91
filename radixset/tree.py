"""Compressed prefix tree (PATRICIA-style) holding a set of byte strings."""

from __future__ import annotations

from radixset.constants import KEY_ENCODING
from radixset.node import RadixNode, common_prefix_length

Key = bytes | bytearray | memoryview | str


def as_key(key: Key) -> bytes:
    """Raw bytes for ``key``; str is encoded, anything else is rejected."""
    if isinstance(key, bytes):
        return key
    if isinstance(key, (bytearray, memoryview)):
        return bytes(key)
    if isinstance(key, str):
        return key.encode(KEY_ENCODING)
    raise TypeError(f"key must be bytes-like or str, not {type(key).__name__}")


class RadixTreeSet:
    """Set of byte strings stored in a radix tree.

    Keys sharing a prefix share the nodes for it. The root has an empty
    fragment; its leaf flag stands for the empty key.
    """

    def __init__(self):
        self.root = RadixNode()
        self._size = 0

    def size(self) -> int:
        return self._size

    # insertion

    def insert(self, key: Key) -> bool:
        """Add ``key``. Returns False if it was already present."""
        key = as_key(key)
        end = len(key)
        node = self.root

        if end == 0:
            if node.is_leaf:
                return False
            node.is_leaf = True
            self._size += 1
            return True

        pos = 0
        while True:
            children = node.children
            i = node.lower_bound(key[pos])

            # Every sibling sorts before this byte: append on the right.
            if i == len(children):
                children.append(RadixNode(key[pos:], True))
                self._size += 1
                return True

            child = children[i]
            matched = common_prefix_length(key, pos, child.fragment)

            # Nothing in common with the nearest sibling: insert before it.
            if matched == 0:
                children.insert(i, RadixNode(key[pos:], True))
                self._size += 1
                return True

            pos += matched

            if matched < len(child.fragment):
                child.split(matched)
                if pos == end:
                    # The split point is the new key.
                    child.is_leaf = True
                    self._size += 1
                    return True
            elif pos == end:
                if child.is_leaf:
                    return False
                child.is_leaf = True
                self._size += 1
                return True

            node = child

    # lookup

    def find(self, key: Key) -> bool:
        """True if ``key`` was inserted."""
        key = as_key(key)
        end = len(key)
        node = self.root

        if end == 0:
            return node.is_leaf

        pos = 0
        while True:
            children = node.children
            i = node.lower_bound(key[pos])
            if i == len(children):
                return False

            child = children[i]
            matched = common_prefix_length(key, pos, child.fragment)

            # The child's path runs off the key or diverges from it.
            if matched < len(child.fragment):
                return False

            pos += matched
            if pos == end:
                return child.is_leaf
            node = child

    # diagnostics

    def node_count(self) -> int:
        """Number of nodes below the root."""
        count = 0
        stack = list(self.root.children)
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children)
        return count

    def validate(self) -> None:
        """Raise ValueError if the tree breaks one of its invariants."""
        leaves = 1 if self.root.is_leaf else 0
        if self.root.fragment:
            raise ValueError(f"root fragment is not empty: {self.root.fragment!r}")

        stack: list[tuple[RadixNode, bytes]] = [(self.root, b"")]
        while stack:
            node, path = stack.pop()
            prev = -1
            for child in node.children:
                child_path = path + child.fragment
                if not child.fragment:
                    raise ValueError(f"empty fragment below {path!r}")
                if child.fragment[0] <= prev:
                    raise ValueError(f"children of {path!r} not sorted by leading byte")
                prev = child.fragment[0]
                if child.is_leaf:
                    leaves += 1
                stack.append((child, child_path))

        if leaves != self._size:
            raise ValueError(f"{leaves} leaf paths but size is {self._size}")

    # python protocol

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (bytes, bytearray, memoryview, str)):
            return False
        return self.find(key)

    def __repr__(self) -> str:
        return f"<RadixTreeSet size={self._size}>"
