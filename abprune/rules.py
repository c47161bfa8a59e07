"""Format constants shared by the record reader, tree builder and CLI."""

from __future__ import annotations

# Parent id carried by the root record.
NO_PARENT = -1

# Integer fields per record: node id, parent id, value.
FIELD_COUNT = 3

# Record fields are 32-bit signed integers.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# Tokens that mark an optional header on the first non-blank line of a tree file.
HEADER_MARKERS: tuple[str, ...] = ("结点ID", "节点ID", "node_id", "id")

DEFAULT_TREE_FILE = "tree.txt"

__all__ = [
    "DEFAULT_TREE_FILE",
    "FIELD_COUNT",
    "HEADER_MARKERS",
    "INT_MAX",
    "INT_MIN",
    "NO_PARENT",
]
