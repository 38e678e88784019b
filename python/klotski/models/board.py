"""Board model for the Klotski puzzle."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum

from klotski.models.block import Block


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def from_offset(cls, dx: int, dy: int) -> Direction:
        """Classify a displacement, horizontal component first (y grows downwards)."""
        if dx < 0:
            return cls.LEFT
        if dx > 0:
            return cls.RIGHT
        if dy < 0:
            return cls.UP
        return cls.DOWN


_HORIZONTAL = ((-1, 0), (1, 0))
_VERTICAL = ((0, -1), (0, 1))
_ALL_DIRECTIONS = _HORIZONTAL + _VERTICAL


@dataclass
class Board:
    """A complete puzzle configuration.

    Blocks keep their insertion order; :meth:`clone` preserves it, so a
    board and any successor can be compared index by index.  A board is
    never modified once published: successors are always fresh clones.

    The winning block may protrude past the right or bottom edge when it
    is parked exactly on ``(winning_x, winning_y)``, which models a piece
    sliding out through the exit.
    """

    rows: int
    columns: int
    pins_enabled: bool = False
    blocks: list[Block] = field(default_factory=list)
    winning_block_id: int | None = None
    winning_x: int | None = None
    winning_y: int | None = None
    exit_width: int = 1

    # -- construction helpers -------------------------------------------------

    def add_block(self, block: Block) -> None:
        self.blocks.append(block)

    def clone(self) -> Board:
        return Board(
            rows=self.rows,
            columns=self.columns,
            pins_enabled=self.pins_enabled,
            blocks=[b.clone() for b in self.blocks],
            winning_block_id=self.winning_block_id,
            winning_x=self.winning_x,
            winning_y=self.winning_y,
            exit_width=self.exit_width,
        )

    # -- queries --------------------------------------------------------------

    def get_block(self, block_id: int) -> Block | None:
        for block in self.blocks:
            if block.id == block_id:
                return block
        return None

    def state_hash(self) -> str:
        """Order-independent signature, e.g. ``"1:0,0;2:1,0;"``."""
        return "".join(
            f"{b.id}:{b.x},{b.y};" for b in sorted(self.blocks, key=lambda b: b.id)
        )

    def is_winning(self) -> bool:
        if (
            self.winning_block_id is None
            or self.winning_x is None
            or self.winning_y is None
        ):
            return False
        block = self.get_block(self.winning_block_id)
        if block is None:
            return False
        return block.x == self.winning_x and block.y == self.winning_y

    def is_area_free(
        self, x: int, y: int, width: int, height: int, moving: Block
    ) -> bool:
        """Check whether *moving* could occupy the rectangle at (x, y).

        Only the right-edge exception looks at the full winning position;
        the bottom-edge one matches on ``winning_y`` alone.
        """
        is_winner = moving.id == self.winning_block_id
        if x < 0 or y < 0:
            return False
        if x + width > self.columns and not (
            x == self.winning_x and y == self.winning_y and is_winner
        ):
            return False
        if y + height > self.rows and not (y == self.winning_y and is_winner):
            return False

        for block in self.blocks:
            if block.id == moving.id:
                continue
            if block.overlaps(x, y, width, height):
                return False
        return True

    def candidate_directions(self, block: Block) -> tuple[tuple[int, int], ...]:
        """Unit steps worth testing for *block* (pinned blocks keep to their long axis)."""
        if not self.pins_enabled:
            return _ALL_DIRECTIONS
        if block.width > block.height:
            return _HORIZONTAL
        if block.height > block.width:
            return _VERTICAL
        return _ALL_DIRECTIONS

    def possible_moves(self, block: Block) -> Iterator[tuple[Block, int, int]]:
        """Yield every legal ``(block, dx, dy)`` unit move of *block*."""
        for dx, dy in self.candidate_directions(block):
            new_x = block.x + dx
            new_y = block.y + dy
            if not self.is_area_free(new_x, new_y, block.width, block.height, block):
                continue
            if self._is_exit_move(block, new_x, new_y):
                yield block, dx, dy
            elif self._fits(new_x, new_y, block.width, block.height):
                yield block, dx, dy

    def next_states(self) -> Iterator[Board]:
        """Yield one successor board per legal move, in block then direction order."""
        for block in self.blocks:
            for moved, dx, dy in self.possible_moves(block):
                board = self.clone()
                target = board.get_block(moved.id)
                target.x += dx
                target.y += dy
                yield board

    # -- helpers --------------------------------------------------------------

    def _is_exit_move(self, block: Block, x: int, y: int) -> bool:
        return (
            block.id == self.winning_block_id
            and x == self.winning_x
            and y == self.winning_y
            and self.exit_width >= block.width
        )

    def _fits(self, x: int, y: int, width: int, height: int) -> bool:
        return (
            x >= 0
            and y >= 0
            and x + width <= self.columns
            and y + height <= self.rows
        )
