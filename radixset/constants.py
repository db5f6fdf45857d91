"""Shared constants for radixset."""

from __future__ import annotations

LOGGER_NAME = "radixset"

# str keys are encoded with this before they reach the tree
KEY_ENCODING = "utf-8"

LINE_TERMINATOR = b"\n"

LOG_FORMAT = "[%(levelname)s] %(message)s"
