"""Custom exception classes for the alpha-beta tree solver."""

from __future__ import annotations

from collections.abc import Sequence


class AlphaBetaError(Exception):
    """Base exception for all solver errors."""


class TreeBuildError(AlphaBetaError):
    """Raised when a record collection cannot be assembled into a tree."""


class NoRootFoundError(TreeBuildError):
    """Raised when no record carries the no-parent sentinel."""

    def __init__(self) -> None:
        super().__init__("No root found: no node has the no-parent sentinel")


class MultipleRootsError(TreeBuildError):
    """Raised when more than one record carries the no-parent sentinel."""

    def __init__(self, root_ids: Sequence[int]) -> None:
        self.root_ids = tuple(root_ids)
        ids = ", ".join(str(node_id) for node_id in self.root_ids)
        super().__init__(f"Multiple roots found: {ids}")


class DuplicateNodeError(TreeBuildError):
    """Raised when a node id is declared twice and duplicates are rejected."""

    def __init__(self, node_id: int) -> None:
        self.node_id = node_id
        super().__init__(f"Duplicate node id: {node_id}")


class MalformedRecordError(AlphaBetaError):
    """Raised when a record is not three integers. Always skipped by callers."""

    def __init__(self, item: object) -> None:
        self.item = item
        super().__init__(f"Malformed record: {item!r}")


class ConfigError(AlphaBetaError, ValueError):
    """Raised when solver configuration is invalid."""


__all__ = [
    "AlphaBetaError",
    "ConfigError",
    "DuplicateNodeError",
    "MalformedRecordError",
    "MultipleRootsError",
    "NoRootFoundError",
    "TreeBuildError",
]
