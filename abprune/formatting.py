"""Text rendering for search results and trees."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .tree import Role

if TYPE_CHECKING:
    from .search import PruneRecord, SearchResult
    from .tree import Node, Tree

_ROLE_TAGS = {Role.MAXIMIZER: "MAX", Role.MINIMIZER: "MIN"}


def format_prune_record(record: PruneRecord) -> str:
    """
    Render a prune record as ``parent child kind``.

    Returns:
        A string like "4 9 alpha"
    """
    return f"{record.parent_id} {record.child_id} {record.kind.value}"


def format_result(result: SearchResult) -> str:
    """
    Render a search result in the solver's output format.

    The first line is ``from to value``; each prune record follows on its
    own line in log order.
    """
    lines = [f"{result.best_move_from} {result.best_move_to} {result.best_value}"]
    lines.extend(format_prune_record(record) for record in result.prune_records)
    return "\n".join(lines)


def node_label(node: Node) -> str:
    """
    Return a short label for a node.

    Returns:
        A string like "7 (MAX)", with the value appended for leaves: "12 (MIN) = 5"
    """
    label = f"{node.id} ({_ROLE_TAGS[node.role]})"
    if node.is_leaf:
        label += f" = {node.value}"
    return label


def format_tree(tree: Tree, indent: str = "  ") -> str:
    """Render the tree as an indented outline, one node per line."""
    return "\n".join(f"{indent * node.depth}{node_label(node)}" for node in tree.root.iter_subtree())


__all__ = ["format_prune_record", "format_result", "format_tree", "node_label"]
