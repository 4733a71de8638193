"""In-memory namespace tree holding the root and current-directory references."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from treespace.config.models import LimitsConfig
from treespace.namespace.models import (
    ROOT_MARKER,
    SEPARATOR,
    AllocationFailureError,
    Node,
    NodeKind,
)

logger = logging.getLogger(__name__)


class NamespaceContext:
    """A single rooted tree of nodes stored in an id-keyed arena.

    Parent links are node ids, so nodes never hold references to each other.
    Several contexts can coexist in one process.
    """

    def __init__(self, limits: LimitsConfig | None = None) -> None:
        self.limits = limits or LimitsConfig()
        self._nodes: dict[int, Node] = {}
        self._next_node_id = 0

        root = self.allocate(ROOT_MARKER, "dir", None)
        self._nodes[root.node_id] = root
        self._root_id = root.node_id
        self._current_id = root.node_id

    def __len__(self) -> int:
        return len(self._nodes)

    # ------------------------------------------------------------------
    # Reference points
    # ------------------------------------------------------------------

    @property
    def root(self) -> Node:
        return self._nodes[self._root_id]

    @property
    def current(self) -> Node:
        return self._nodes[self._current_id]

    def chdir(self, node: Node) -> None:
        """Make *node* the start point for relative paths."""
        if not node.is_dir:
            raise ValueError(f"{node.name} is not a directory")
        if node.node_id not in self._nodes:
            raise ValueError(f"node {node.node_id} does not belong to this namespace")
        self._current_id = node.node_id

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def node(self, node_id: int) -> Node:
        return self._nodes[node_id]

    def parent_of(self, node: Node) -> Node | None:
        if node.parent_id is None:
            return None
        return self._nodes[node.parent_id]

    def children(self, node: Node) -> list[Node]:
        return [self._nodes[cid] for cid in node.children]

    def find_child(self, node: Node, name: str, kind: NodeKind | None = None) -> Node | None:
        """First child of *node* named *name* (and of *kind*, if given)."""
        for child in self.children(node):
            if child.name == name and (kind is None or child.kind == kind):
                return child
        return None

    def path_of(self, node: Node) -> str:
        """Absolute path of *node*; ``/`` for the root."""
        parts: list[str] = []
        cur: Node | None = node
        while cur is not None and cur.parent_id is not None:
            parts.append(cur.name)
            cur = self.parent_of(cur)
        return ROOT_MARKER + SEPARATOR.join(reversed(parts))

    def walk(self, node: Node | None = None) -> Iterator[tuple[int, Node]]:
        """Yield ``(depth, node)`` pairs depth-first in child order."""
        stack: list[tuple[int, Node]] = [(0, node or self.root)]
        while stack:
            depth, cur = stack.pop()
            yield depth, cur
            for child in reversed(self.children(cur)):
                stack.append((depth + 1, child))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def allocate(self, name: str, kind: NodeKind, parent: Node | None) -> Node:
        """Build a detached node, enforcing the node capacity.

        The node is not visible in the tree until :meth:`attach` is called.
        """
        max_nodes = self.limits.max_nodes
        if max_nodes is not None and len(self._nodes) >= max_nodes:
            logger.debug("node limit reached (%d), refusing %s", max_nodes, name)
            raise AllocationFailureError(name)
        node = Node(
            node_id=self._next_node_id,
            name=name[: self.limits.node_name_max],
            kind=kind,
            parent_id=parent.node_id if parent is not None else None,
        )
        self._next_node_id += 1
        return node

    def attach(self, node: Node) -> None:
        """Register *node* and append it as the last child of its parent."""
        if node.parent_id is None:
            raise ValueError("only the root may be parentless")
        parent = self._nodes[node.parent_id]
        self._nodes[node.node_id] = node
        parent.children.append(node.node_id)

    def add_node(self, parent: Node, name: str, kind: NodeKind = "dir") -> Node:
        """Allocate and attach a node without any validation."""
        node = self.allocate(name, kind, parent)
        self.attach(node)
        return node
