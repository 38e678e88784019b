"""Read-only traversal of a built graph."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from klotski.models.graph import GraphNode


@dataclass(frozen=True)
class GraphSummary:
    node_count: int
    edge_count: int
    winning_count: int
    max_depth: int
    start_hash: str


def _bfs(root: GraphNode) -> Iterator[tuple[GraphNode, int]]:
    # Nodes are keyed by identity; the builder never shares a signature.
    seen: set[int] = {id(root)}
    queue: deque[tuple[GraphNode, int]] = deque([(root, 0)])
    while queue:
        node, depth = queue.popleft()
        yield node, depth
        for child, _ in node.children:
            if id(child) not in seen:
                seen.add(id(child))
                queue.append((child, depth + 1))


def iter_nodes(root: GraphNode) -> Iterator[GraphNode]:
    """Yield each reachable node once, breadth-first from *root*."""
    for node, _ in _bfs(root):
        yield node


def iter_edges(root: GraphNode) -> Iterator[tuple[GraphNode, GraphNode, str]]:
    """Yield ``(parent, child, move_description)`` for every recorded edge."""
    for node in iter_nodes(root):
        for child, description in node.children:
            yield node, child, description


def find_node(root: GraphNode, state_hash: str) -> GraphNode | None:
    for node in iter_nodes(root):
        if node.state_hash == state_hash:
            return node
    return None


def summarize(root: GraphNode) -> GraphSummary:
    node_count = edge_count = winning_count = max_depth = 0
    for node, depth in _bfs(root):
        node_count += 1
        edge_count += len(node.children)
        if node.is_winning:
            winning_count += 1
        max_depth = max(max_depth, depth)
    return GraphSummary(
        node_count=node_count,
        edge_count=edge_count,
        winning_count=winning_count,
        max_depth=max_depth,
        start_hash=root.state_hash,
    )
