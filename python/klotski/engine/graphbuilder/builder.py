"""Breadth-first construction of the reachable-state graph."""

from __future__ import annotations

import logging
from collections import deque

from klotski.models.board import Board, Direction
from klotski.models.graph import GraphNode

logger = logging.getLogger(__name__)

UNKNOWN_MOVE = "Unknown move"


def describe_move(prev: Board, nxt: Board) -> str:
    """Label the transition *prev* → *nxt*, e.g. ``"Block 3 moved left"``.

    Both boards must list their blocks in the same order, which
    :meth:`Board.clone` guarantees for every successor.
    """
    for before, after in zip(prev.blocks, nxt.blocks):
        if before.x != after.x or before.y != after.y:
            direction = Direction.from_offset(after.x - before.x, after.y - before.y)
            return f"Block {before.id} moved {direction.value}"
    return UNKNOWN_MOVE


class DecisionGraphBuilder:
    """Explores every state reachable from an initial board.

    One :class:`GraphNode` is created per distinct state signature;
    ``nodes`` holds them for the most recent :meth:`build_graph` call.
    There is no cap on the number of states: large boards can exhaust
    memory before the search finishes.
    """

    def __init__(self) -> None:
        self.nodes: dict[str, GraphNode] = {}

    def build_graph(self, initial_board: Board) -> GraphNode:
        """Return the root node; every other state hangs off its edges."""
        root = GraphNode(initial_board, is_starting=True)
        nodes: dict[str, GraphNode] = {root.state_hash: root}
        queue: deque[GraphNode] = deque([root])
        edge_count = 0

        while queue:
            current = queue.popleft()
            for next_board in current.board.next_states():
                next_hash = next_board.state_hash()
                next_node = nodes.get(next_hash)
                if next_node is None:
                    next_node = GraphNode(next_board)
                    nodes[next_hash] = next_node
                    queue.append(next_node)
                    logger.debug("Discovered state %s", next_hash)

                if next_hash != current.state_hash:
                    current.add_child(next_node, describe_move(current.board, next_board))
                    edge_count += 1

        self.nodes = nodes
        logger.info(
            "Explored %d state(s), %d transition(s), %d winning",
            len(nodes),
            edge_count,
            sum(1 for n in nodes.values() if n.is_winning),
        )
        return root
