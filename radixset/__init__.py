"""radixset: a compressed prefix tree (radix tree) string set."""

from radixset.node import RadixNode, common_prefix_length
from radixset.tree import RadixTreeSet, as_key
from radixset.dictionary import (
    Dictionary,
    DictionaryError,
    DuplicateEntryError,
    MissingEntryError,
    read_lines,
)

__all__ = [
    "Dictionary",
    "DictionaryError",
    "DuplicateEntryError",
    "MissingEntryError",
    "RadixNode",
    "RadixTreeSet",
    "as_key",
    "common_prefix_length",
    "read_lines",
]
