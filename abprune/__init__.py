"""Alpha-beta search over static game trees with a reproducible prune log."""

from .exceptions import (
    AlphaBetaError,
    ConfigError,
    DuplicateNodeError,
    MalformedRecordError,
    MultipleRootsError,
    NoRootFoundError,
    TreeBuildError,
)
from .records import RawRecord, iter_records, read_records
from .search import PruneKind, PruneRecord, SearchResult, search, search_tree
from .tree import BuildOptions, Node, Role, Tree, build

__all__ = [
    "AlphaBetaError",
    "BuildOptions",
    "ConfigError",
    "DuplicateNodeError",
    "MalformedRecordError",
    "MultipleRootsError",
    "NoRootFoundError",
    "Node",
    "PruneKind",
    "PruneRecord",
    "RawRecord",
    "Role",
    "SearchResult",
    "Tree",
    "TreeBuildError",
    "build",
    "iter_records",
    "read_records",
    "search",
    "search_tree",
]
