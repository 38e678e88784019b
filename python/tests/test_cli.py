"""Command-line entry point, driven through typer's test runner."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from klotski.cli.rich import render_moves
from klotski.engine.graphbuilder import DecisionGraphBuilder
from klotski.main import app
from klotski.models.config import BlockConfig, BoardConfig, load_config, save_config

runner = CliRunner()


# -- helpers ------------------------------------------------------------------


def _write(tmp_path: Path, config: BoardConfig) -> Path:
    path = tmp_path / "board.json"
    save_config(config, path)
    return path


# -- explore ------------------------------------------------------------------


def test_explore_default_puzzle() -> None:
    result = runner.invoke(app, ["explore"])

    assert result.exit_code == 0, result.output
    assert "Decision Graph" in result.output
    assert "Block 1 moved right" in result.output


def test_explore_config_file_with_states(tmp_path: Path) -> None:
    config = BoardConfig(
        rows=2,
        columns=3,
        pins_enabled=False,
        blocks=[BlockConfig(1, x=0, y=0), BlockConfig(2, x=2, y=1)],
    )
    path = _write(tmp_path, config)

    result = runner.invoke(app, ["explore", str(path), "-n", "2"])

    assert result.exit_code == 0, result.output
    assert "Starting board" in result.output
    assert "#0  start" in result.output
    assert "#1" in result.output
    assert "#2" not in result.output


def test_explore_verbose() -> None:
    result = runner.invoke(app, ["explore", "--verbose"])

    assert result.exit_code == 0, result.output


def test_explore_rejects_invalid_config(tmp_path: Path) -> None:
    config = BoardConfig(blocks=[BlockConfig(1), BlockConfig(2)])
    path = _write(tmp_path, config)

    result = runner.invoke(app, ["explore", str(path)])

    assert result.exit_code == 1
    assert "Blocks 1 and 2 overlap!" in result.output
    assert "Decision Graph" not in result.output


def test_render_moves_lists_root_edges() -> None:
    root = DecisionGraphBuilder().build_graph(BoardConfig.default().to_board())

    table = render_moves(root)

    assert table.row_count == len(root.children) == 1


# -- validate -----------------------------------------------------------------


def test_validate_ok(tmp_path: Path) -> None:
    path = _write(tmp_path, BoardConfig.default())

    result = runner.invoke(app, ["validate", str(path)])

    assert result.exit_code == 0
    assert "Configuration OK." in result.output


def test_validate_reports_errors(tmp_path: Path) -> None:
    config = BoardConfig(winning_block_id=4, blocks=[BlockConfig(1, x=-1)])
    path = _write(tmp_path, config)

    result = runner.invoke(app, ["validate", str(path)])

    assert result.exit_code == 1
    assert "Block 1 has negative position (-1, 0)." in result.output
    assert "Winning block ID 4 does not exist." in result.output


def test_validate_malformed_json(tmp_path: Path) -> None:
    path = tmp_path / "board.json"
    path.write_text('{"rows": "many"}')

    result = runner.invoke(app, ["validate", str(path)])

    assert result.exit_code == 1
    assert "'rows' must be an integer" in result.output


def test_validate_non_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "board.json"
    path.write_bytes(b"\xff\xfe{}")

    result = runner.invoke(app, ["validate", str(path)])

    assert result.exit_code == 1
    assert not isinstance(result.exception, UnicodeDecodeError)
    assert "Board configuration errors" in result.output
    assert "Not a UTF-8 text file" in result.output


def test_explore_non_utf8_file(tmp_path: Path) -> None:
    path = tmp_path / "board.json"
    path.write_bytes(b"\xff\xfe{}")

    result = runner.invoke(app, ["explore", str(path)])

    assert result.exit_code == 1
    assert "Not a UTF-8 text file" in result.output


# -- example ------------------------------------------------------------------


def test_example_prints_default_config() -> None:
    result = runner.invoke(app, ["example"])

    assert result.exit_code == 0
    assert json.loads(result.output) == BoardConfig.default().to_dict()


def test_example_writes_file(tmp_path: Path) -> None:
    path = tmp_path / "out" / "board.json"

    result = runner.invoke(app, ["example", "-o", str(path)])

    assert result.exit_code == 0
    assert load_config(path) == BoardConfig.default()
