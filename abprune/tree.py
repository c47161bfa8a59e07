"""Game tree assembly from flat ``(id, parent, value)`` records.

The builder works in two passes over an id-keyed map: the first pass keeps one
record per id, the second wires every record to its parent in encounter order.
The tree is then materialised from the root as immutable ``Node`` values, each
carrying its depth and the role that depth implies (even depths maximise,
odd depths minimise). Records that cannot be reached from the root are not
part of the result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from .exceptions import DuplicateNodeError, MalformedRecordError, MultipleRootsError, NoRootFoundError
from .records import RawRecord

logger = logging.getLogger(__name__)


class Role(Enum):
    """Which player moves at a node."""

    MAXIMIZER = "max"
    MINIMIZER = "min"

    @classmethod
    def for_depth(cls, depth: int) -> Role:
        return cls.MAXIMIZER if depth % 2 == 0 else cls.MINIMIZER

    @property
    def opponent(self) -> Role:
        return Role.MINIMIZER if self is Role.MAXIMIZER else Role.MAXIMIZER


@dataclass(frozen=True)
class Node:
    """A position in the game tree.

    ``children`` keeps the order in which child records were read; that order
    drives evaluation and therefore which siblings get pruned.
    """

    id: int
    parent_id: int
    value: int
    depth: int
    role: Role
    children: tuple[Node, ...] = field(default=(), repr=False)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_root(self) -> bool:
        return self.depth == 0

    def iter_subtree(self) -> Iterator[Node]:
        """Walk this node and its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


@dataclass(frozen=True)
class BuildOptions:
    """Policies for ambiguous input.

    Attributes:
        allow_multiple_roots: Take the first root encountered instead of
            failing when several records have no parent.
        reject_duplicates: Fail on a repeated node id instead of letting the
            later record win.
    """

    allow_multiple_roots: bool = False
    reject_duplicates: bool = False


@dataclass(frozen=True)
class Tree:
    """A rooted, role-annotated game tree.

    Attributes:
        root: The root node (always a maximizer).
        nodes: Every node reachable from the root, keyed by id, in pre-order.
        dropped: Ids that were declared but are not part of the tree
            (orphans, self-parented records, disconnected fragments).
    """

    root: Node
    nodes: Mapping[int, Node]
    dropped: tuple[int, ...] = ()

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes.values())

    def node(self, node_id: int) -> Node:
        """Return the node with the given id.

        Raises:
            KeyError: If the id is not part of the tree.
        """
        return self.nodes[node_id]

    @property
    def height(self) -> int:
        """Depth of the deepest node (0 for a lone root)."""
        return max(node.depth for node in self.nodes.values())


def build(records: Iterable[object], options: BuildOptions | None = None) -> Tree:
    """Assemble a tree from raw records.

    Args:
        records: RawRecords or three-item sequences of integers. Items that
            are not three integers are skipped.
        options: Policies for multiple roots and duplicate ids.

    Returns:
        The tree rooted at the unique record without a parent.

    Raises:
        NoRootFoundError: If no record has the no-parent sentinel.
        MultipleRootsError: If several records do and
            ``options.allow_multiple_roots`` is off.
        DuplicateNodeError: If an id repeats and ``options.reject_duplicates``
            is on.
    """
    if options is None:
        options = BuildOptions()

    declared: dict[int, RawRecord] = {}
    malformed = 0
    for item in records:
        try:
            record = RawRecord.coerce(item)
        except MalformedRecordError as exc:
            logger.debug("%s; skipped", exc)
            malformed += 1
            continue

        if record.node_id in declared:
            if options.reject_duplicates:
                raise DuplicateNodeError(record.node_id)
            logger.debug("Node %d declared again; later record wins", record.node_id)
        # A repeated id keeps its first position but takes the later parent and value.
        declared[record.node_id] = record

    child_ids: dict[int, list[int]] = {node_id: [] for node_id in declared}
    root_ids: list[int] = []
    for record in declared.values():
        if record.is_root:
            root_ids.append(record.node_id)
        elif record.parent_id == record.node_id:
            logger.debug("Node %d names itself as parent; dropped", record.node_id)
        elif record.parent_id not in declared:
            logger.debug("Node %d has unknown parent %d; dropped", record.node_id, record.parent_id)
        else:
            child_ids[record.parent_id].append(record.node_id)

    if not root_ids:
        raise NoRootFoundError()
    if len(root_ids) > 1:
        if not options.allow_multiple_roots:
            raise MultipleRootsError(root_ids)
        logger.warning("Multiple roots %s; using %d", root_ids, root_ids[0])

    root = _assemble(root_ids[0], declared, child_ids)
    nodes = {node.id: node for node in root.iter_subtree()}
    dropped = tuple(node_id for node_id in declared if node_id not in nodes)

    logger.info(
        "Built tree rooted at %d: %d nodes, %d dropped, %d malformed records skipped",
        root.id,
        len(nodes),
        len(dropped),
        malformed,
    )
    return Tree(root=root, nodes=MappingProxyType(nodes), dropped=dropped)


def _assemble(
    root_id: int,
    declared: Mapping[int, RawRecord],
    child_ids: Mapping[int, list[int]],
) -> Node:
    """Materialise the subtree under ``root_id`` bottom-up from an explicit stack.

    Each node is built once all of its children are, so depth is not limited
    by the interpreter stack.
    """
    depths = {root_id: 0}
    built: dict[int, Node] = {}
    stack = [(root_id, False)]
    while stack:
        node_id, expanded = stack.pop()
        if not expanded:
            stack.append((node_id, True))
            for child_id in child_ids[node_id]:
                depths[child_id] = depths[node_id] + 1
                stack.append((child_id, False))
            continue

        record = declared[node_id]
        depth = depths[node_id]
        built[node_id] = Node(
            id=record.node_id,
            parent_id=record.parent_id,
            value=record.value,
            depth=depth,
            role=Role.for_depth(depth),
            children=tuple(built.pop(child_id) for child_id in child_ids[node_id]),
        )

    return built[root_id]


__all__ = [
    "BuildOptions",
    "Node",
    "Role",
    "Tree",
    "build",
]
