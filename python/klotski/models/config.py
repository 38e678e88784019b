"""Board configuration records and their JSON persistence."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from klotski.models.block import Block
from klotski.models.board import Board

# The board editor stores "no winning block" as -1.
NO_WINNING_BLOCK = -1


class BoardConfigError(ValueError):
    """A board configuration cannot be turned into a playable board."""

    def __init__(self, errors: list[str] | str) -> None:
        if isinstance(errors, str):
            errors = [errors]
        self.errors: list[str] = list(errors)
        super().__init__("; ".join(self.errors))


@dataclass
class BlockConfig:
    id: int
    width: int = 1
    height: int = 1
    x: int = 0
    y: int = 0


@dataclass
class BoardConfig:
    """Plain description of a puzzle, as entered in an editor or a file."""

    rows: int = 4
    columns: int = 4
    pins_enabled: bool = True
    winning_block_id: int | None = None
    winning_x: int | None = None
    winning_y: int | None = None
    exit_width: int = 1
    blocks: list[BlockConfig] = field(default_factory=list)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def default(cls) -> BoardConfig:
        """The start-up puzzle: a 2×1 block that must reach (2, 3)."""
        return cls(
            rows=4,
            columns=4,
            pins_enabled=True,
            winning_block_id=1,
            winning_x=2,
            winning_y=3,
            exit_width=2,
            blocks=[BlockConfig(id=1, width=2, height=1, x=0, y=0)],
        )

    @classmethod
    def from_board(cls, board: Board) -> BoardConfig:
        return cls(
            rows=board.rows,
            columns=board.columns,
            pins_enabled=board.pins_enabled,
            winning_block_id=board.winning_block_id,
            winning_x=board.winning_x,
            winning_y=board.winning_y,
            exit_width=board.exit_width,
            blocks=[
                BlockConfig(id=b.id, width=b.width, height=b.height, x=b.x, y=b.y)
                for b in board.blocks
            ],
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BoardConfig:
        """Build a config from its JSON form; absent keys keep their defaults."""
        if not isinstance(data, dict):
            raise BoardConfigError("Board configuration must be a JSON object.")
        defaults = cls()

        raw_blocks = data.get("blocks", [])
        if not isinstance(raw_blocks, list):
            raise BoardConfigError("'blocks' must be a list.")
        blocks: list[BlockConfig] = []
        for i, entry in enumerate(raw_blocks):
            if not isinstance(entry, dict) or "id" not in entry:
                raise BoardConfigError(f"Block entry {i} must be an object with an 'id'.")
            blocks.append(
                BlockConfig(
                    id=_int(entry, "id"),
                    width=_int(entry, "width", 1),
                    height=_int(entry, "height", 1),
                    x=_int(entry, "x", 0),
                    y=_int(entry, "y", 0),
                )
            )

        winning_id = _optional_int(data, "winning_block_id")
        if winning_id == NO_WINNING_BLOCK:
            winning_id = None

        return cls(
            rows=_int(data, "rows", defaults.rows),
            columns=_int(data, "columns", defaults.columns),
            pins_enabled=_bool(data, "pins_enabled", defaults.pins_enabled),
            winning_block_id=winning_id,
            winning_x=_optional_int(data, "winning_x"),
            winning_y=_optional_int(data, "winning_y"),
            exit_width=_int(data, "exit_width", defaults.exit_width),
            blocks=blocks,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "rows": self.rows,
            "columns": self.columns,
            "pins_enabled": self.pins_enabled,
            "winning_block_id": self.winning_block_id,
            "winning_x": self.winning_x,
            "winning_y": self.winning_y,
            "exit_width": self.exit_width,
            "blocks": [
                {"id": b.id, "width": b.width, "height": b.height, "x": b.x, "y": b.y}
                for b in self.blocks
            ],
        }

    def to_board(self, validate: bool = True) -> Board:
        """Create the initial board, blocks in list order.

        With ``validate`` the configuration is checked first and
        :class:`BoardConfigError` lists every problem found.
        """
        if validate:
            # Imported here: the validator depends on this module.
            from klotski.engine.validation import ensure_valid

            ensure_valid(self)

        board = Board(
            rows=self.rows,
            columns=self.columns,
            pins_enabled=self.pins_enabled,
            winning_block_id=self.winning_block_id,
            winning_x=self.winning_x,
            winning_y=self.winning_y,
            exit_width=self.exit_width,
        )
        for b in self.blocks:
            board.add_block(Block(id=b.id, width=b.width, height=b.height, x=b.x, y=b.y))
        return board


# -- persistence --------------------------------------------------------------


def load_config(path: Path) -> BoardConfig:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise BoardConfigError(f"{path}: invalid JSON ({exc.msg}, line {exc.lineno}).") from exc
    except UnicodeDecodeError as exc:
        raise BoardConfigError(f"Not a UTF-8 text file: {path}") from exc
    except OSError as exc:
        raise BoardConfigError(f"Cannot read file ({exc.strerror}): {path}") from exc
    return BoardConfig.from_dict(data)


def save_config(config: BoardConfig, path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config.to_dict(), indent=2) + "\n", encoding="utf-8")


# -- helpers ------------------------------------------------------------------


def _int(data: dict[str, Any], key: str, default: int | None = None) -> int:
    value = data.get(key, default)
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int):
        raise BoardConfigError(f"'{key}' must be an integer (got {value!r}).")
    return value


def _bool(data: dict[str, Any], key: str, default: bool) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise BoardConfigError(f"'{key}' must be true or false (got {value!r}).")
    return value


def _optional_int(data: dict[str, Any], key: str) -> int | None:
    if data.get(key) is None:
        return None
    return _int(data, key)
