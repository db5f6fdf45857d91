"""Dictionary file loader and verifier backed by a radix tree set."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from radixset.constants import LINE_TERMINATOR, LOGGER_NAME
from radixset.tree import RadixTreeSet

log = logging.getLogger(LOGGER_NAME)


class DictionaryError(Exception):
    """A dictionary line broke the insert-once / find-all contract."""

    def __init__(self, path: str, lineno: int, key: bytes, reason: str):
        self.path = path
        self.lineno = lineno
        self.key = key
        super().__init__(f"{path}:{lineno}: {reason}: {key!r}")


class DuplicateEntryError(DictionaryError):
    def __init__(self, path: str, lineno: int, key: bytes):
        super().__init__(path, lineno, key, "duplicate entry")


class MissingEntryError(DictionaryError):
    def __init__(self, path: str, lineno: int, key: bytes):
        super().__init__(path, lineno, key, "entry not found after loading")


def read_lines(path: str) -> Iterator[bytes]:
    """Yield each line of ``path`` as raw bytes without its newline.

    Only the trailing ``\\n`` is removed. Blank lines come out as ``b""``.
    """
    with open(path, "rb") as f:
        for line in f:
            if line.endswith(LINE_TERMINATOR):
                line = line[:-len(LINE_TERMINATOR)]
            yield line


class Dictionary:
    """Word list file inserted into, and checked against, a RadixTreeSet."""

    def __init__(self, path: str, tree: RadixTreeSet | None = None):
        self.path = path
        self.tree = tree if tree is not None else RadixTreeSet()

    def load(self) -> int:
        """Insert every line once. Returns the number of keys added."""
        count = 0
        for lineno, key in enumerate(read_lines(self.path), start=1):
            if not self.tree.insert(key):
                raise DuplicateEntryError(self.path, lineno, key)
            count += 1
        log.info("Loaded %s keys from %s", f"{count:,}", self.path)
        return count

    def verify(self) -> int:
        """Look up every line again. Returns the number of lines checked."""
        count = 0
        for lineno, key in enumerate(read_lines(self.path), start=1):
            if not self.tree.find(key):
                raise MissingEntryError(self.path, lineno, key)
            count += 1
        log.info("Verified %s keys from %s", f"{count:,}", self.path)
        return count

    def __contains__(self, key: object) -> bool:
        return key in self.tree

    def __len__(self) -> int:
        return len(self.tree)
