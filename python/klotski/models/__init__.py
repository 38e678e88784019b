from klotski.models.block import Block
from klotski.models.board import Board, Direction
from klotski.models.config import (
    BlockConfig,
    BoardConfig,
    BoardConfigError,
    load_config,
    save_config,
)
from klotski.models.graph import Edge, GraphNode

__all__ = [
    "Block",
    "BlockConfig",
    "Board",
    "BoardConfig",
    "BoardConfigError",
    "Direction",
    "Edge",
    "GraphNode",
    "load_config",
    "save_config",
]
