"""Alpha-beta search over a built game tree.

The search returns the best move from the root together with an ordered log of
every sibling subtree skipped by a cutoff:

- a maximizer node whose value reaches ``beta`` skips its remaining children
  and logs them as ``beta`` prunes;
- a minimizer node whose value falls to ``alpha`` skips its remaining children
  and logs them as ``alpha`` prunes.

Prune records are appended in the order cutoffs are discovered during the
left-to-right depth-first traversal, so the log is reproducible for a given
tree. At the root, ties keep the first child that reached the best value.

``minimax_value`` and ``analyze_moves`` evaluate without pruning and exist to
cross-check search results.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum

from .tree import Node, Role, Tree

logger = logging.getLogger(__name__)

INF = math.inf


class PruneKind(Enum):
    """Which bound caused a cutoff."""

    ALPHA = "alpha"
    BETA = "beta"


@dataclass(frozen=True)
class PruneRecord:
    """A sibling subtree skipped under ``parent_id``."""

    parent_id: int
    child_id: int
    kind: PruneKind


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search.

    ``best_move_from`` is always the root id. ``best_move_to`` is the chosen
    child, or the root itself when the root is a leaf.
    """

    best_move_from: int
    best_move_to: int
    best_value: int
    prune_records: tuple[PruneRecord, ...] = ()
    nodes_evaluated: int = 0


@dataclass
class SearchTrace:
    """Mutable log owned by a single search invocation."""

    prune_records: list[PruneRecord] = field(default_factory=list)
    nodes: int = 0
    cutoffs: int = 0

    def record_cutoff(self, node: Node, skipped: tuple[Node, ...], kind: PruneKind) -> None:
        self.cutoffs += 1
        for child in skipped:
            self.prune_records.append(PruneRecord(node.id, child.id, kind))
        logger.debug(
            "%s cutoff at node %d skips %s",
            kind.value,
            node.id,
            [child.id for child in skipped],
        )


def search(root: Node) -> SearchResult:
    """Run alpha-beta search from a maximizer root.

    Args:
        root: Root of the tree to search.

    Returns:
        Best move, its value and the ordered prune log.
    """
    assert root.role is Role.MAXIMIZER, f"search root {root.id} must be a maximizer"

    if root.is_leaf:
        return SearchResult(root.id, root.id, root.value, (), nodes_evaluated=1)

    trace = SearchTrace(nodes=1)
    alpha = -INF
    beta = INF
    best_value = -INF
    best_child = root.children[0]

    # The root has no bound above it, so it never prunes its own children.
    for child in root.children:
        value = _min_value(child, alpha, beta, trace)
        if value > best_value:
            best_value = value
            best_child = child
        alpha = max(alpha, best_value)

    logger.info(
        "Best move %d -> %d (value %d), %d nodes evaluated, %d cutoffs, %d prunes",
        root.id,
        best_child.id,
        best_value,
        trace.nodes,
        trace.cutoffs,
        len(trace.prune_records),
    )
    return SearchResult(
        best_move_from=root.id,
        best_move_to=best_child.id,
        best_value=int(best_value),
        prune_records=tuple(trace.prune_records),
        nodes_evaluated=trace.nodes,
    )


def search_tree(tree: Tree) -> SearchResult:
    """Search a built tree from its root."""
    return search(tree.root)


def _max_value(node: Node, alpha: float, beta: float, trace: SearchTrace) -> float:
    assert node.role is Role.MAXIMIZER, f"node {node.id} evaluated as maximizer"
    trace.nodes += 1

    if node.is_leaf:
        return node.value

    value = -INF
    for i, child in enumerate(node.children):
        value = max(value, _min_value(child, alpha, beta, trace))
        if value >= beta:
            trace.record_cutoff(node, node.children[i + 1 :], PruneKind.BETA)
            return value
        alpha = max(alpha, value)

    return value


def _min_value(node: Node, alpha: float, beta: float, trace: SearchTrace) -> float:
    assert node.role is Role.MINIMIZER, f"node {node.id} evaluated as minimizer"
    trace.nodes += 1

    if node.is_leaf:
        return node.value

    value = INF
    for i, child in enumerate(node.children):
        value = min(value, _max_value(child, alpha, beta, trace))
        if value <= alpha:
            trace.record_cutoff(node, node.children[i + 1 :], PruneKind.ALPHA)
            return value
        beta = min(beta, value)

    return value


def minimax_value(node: Node) -> int:
    """Exact minimax value of a node, without pruning."""
    if node.is_leaf:
        return node.value
    values = [minimax_value(child) for child in node.children]
    return max(values) if node.role is Role.MAXIMIZER else min(values)


def analyze_moves(root: Node) -> dict[int, int]:
    """Exact minimax value of every move from ``root``, in child order."""
    return {child.id: minimax_value(child) for child in root.children}


__all__ = [
    "PruneKind",
    "PruneRecord",
    "SearchResult",
    "SearchTrace",
    "analyze_moves",
    "minimax_value",
    "search",
    "search_tree",
]
