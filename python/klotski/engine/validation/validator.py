"""Board configuration checks run before a graph is built.

The graph builder trusts its input completely; these checks are the
only place where overlapping or out-of-bounds blocks are caught.
"""

from __future__ import annotations

import logging
from collections import Counter

from klotski.models.config import BlockConfig, BoardConfig, BoardConfigError

logger = logging.getLogger(__name__)


def validate_config(config: BoardConfig) -> list[str]:
    """Return every problem found in *config*; an empty list means valid."""
    errors: list[str] = []
    rows, cols = config.rows, config.columns

    if rows < 1 or cols < 1:
        errors.append(f"Board must have at least 1 row and 1 column ({rows}x{cols}).")
    if config.exit_width < 1:
        errors.append(f"Exit width must be at least 1 (got {config.exit_width}).")

    for block in config.blocks:
        errors.extend(_block_errors(block, rows, cols))

    counts = Counter(b.id for b in config.blocks)
    for block_id, count in counts.items():
        if count > 1:
            errors.append(f"Duplicate block id {block_id}.")

    blocks = config.blocks
    for i in range(len(blocks)):
        for j in range(i + 1, len(blocks)):
            a, b = blocks[i], blocks[j]
            if _overlap(a, b):
                errors.append(f"Blocks {a.id} and {b.id} overlap!")

    if config.winning_block_id is not None:
        errors.extend(_winning_errors(config))

    logger.debug("Validated %dx%d board: %d problem(s)", rows, cols, len(errors))
    return errors


def ensure_valid(config: BoardConfig) -> None:
    """Raise :class:`BoardConfigError` listing all problems, if any."""
    errors = validate_config(config)
    if errors:
        raise BoardConfigError(errors)


# -- helpers ------------------------------------------------------------------


def _block_errors(block: BlockConfig, rows: int, cols: int) -> list[str]:
    errors: list[str] = []
    if block.width < 1 or block.height < 1:
        errors.append(
            f"Block {block.id} has invalid size ({block.width}x{block.height})."
        )
    if block.x < 0 or block.y < 0:
        errors.append(
            f"Block {block.id} has negative position ({block.x}, {block.y})."
        )
    if block.x + block.width > cols or block.y + block.height > rows:
        errors.append(
            f"Block {block.id} does not fit inside the board "
            f"(pos {block.x},{block.y}, size {block.width}x{block.height})."
        )
    return errors


def _overlap(a: BlockConfig, b: BlockConfig) -> bool:
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def _winning_errors(config: BoardConfig) -> list[str]:
    if not any(b.id == config.winning_block_id for b in config.blocks):
        return [f"Winning block ID {config.winning_block_id} does not exist."]
    if config.winning_x is None or config.winning_y is None:
        return ["Winning position must set both x and y."]
    if (
        config.winning_x < 0
        or config.winning_y < 0
        or config.winning_x + config.exit_width > config.columns
    ):
        return ["Winning exit position is outside the board."]
    return []
