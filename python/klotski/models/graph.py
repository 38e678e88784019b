"""Graph node model: one canonical board state and its outgoing moves."""

from __future__ import annotations

from typing import NamedTuple

from klotski.models.board import Board


class Edge(NamedTuple):
    child: GraphNode
    move_description: str


class GraphNode:
    """Wraps one board state; identity is its canonical signature.

    ``children`` is filled in discovery order by the graph builder and
    never changes once the build returns.
    """

    def __init__(self, board: Board, is_starting: bool = False) -> None:
        self.board = board
        self.state_hash: str = board.state_hash()
        self.is_winning: bool = board.is_winning()
        self.is_starting = is_starting
        self.children: list[Edge] = []

    def add_child(self, child: GraphNode, move_description: str) -> None:
        self.children.append(Edge(child, move_description))

    def __repr__(self) -> str:
        flags = "".join(
            (" start" if self.is_starting else "", " win" if self.is_winning else "")
        )
        return f"<GraphNode {self.state_hash!r}{flags} children={len(self.children)}>"
