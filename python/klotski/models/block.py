"""Block model: one rectangular puzzle piece."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Block:
    """A ``width``×``height`` piece whose top-left corner sits at (x, y).

    Shape and id never change; only the position does, and only on a
    clone owned by a freshly produced board.
    """

    id: int
    width: int
    height: int
    x: int
    y: int

    def clone(self) -> Block:
        return Block(
            id=self.id,
            width=self.width,
            height=self.height,
            x=self.x,
            y=self.y,
        )

    def overlaps(self, x: int, y: int, width: int, height: int) -> bool:
        """Strict rectangle intersection with the area at (x, y)."""
        return (
            x < self.x + self.width
            and x + width > self.x
            and y < self.y + self.height
            and y + height > self.y
        )
