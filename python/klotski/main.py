"""Klotski decision-graph explorer.

Usage::

    klotski explore                   # default 4×4 puzzle
    klotski explore board.json -n 5   # show the first five states
    klotski validate board.json
    klotski example -o board.json     # write the default config
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

from klotski.cli.rich import print_errors, run
from klotski.engine.validation import validate_config
from klotski.models.config import (
    BoardConfig,
    BoardConfigError,
    load_config,
    save_config,
)

app = typer.Typer(add_completion=False, help="Explore every state of a sliding-block puzzle.")


# -- helpers ------------------------------------------------------------------


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _load(path: Optional[Path]) -> BoardConfig:
    if path is None:
        return BoardConfig.default()
    return load_config(path)


def _fail(errors: list[str]) -> None:
    print_errors(errors)
    raise typer.Exit(code=1)


# -- commands -----------------------------------------------------------------


@app.command()
def explore(
    config: Optional[Path] = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        help="Board configuration JSON. Omit for the default puzzle.",
    ),
    states: int = typer.Option(
        0, "-n", "--states",
        min=0,
        help="Also draw the first N discovered states.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log every discovered state.",
    ),
) -> None:
    """Build and summarise the full reachable-state graph."""
    _setup_logging(verbose)
    try:
        run(_load(config), states=states)
    except BoardConfigError as exc:
        _fail(exc.errors)


@app.command()
def validate(
    config: Path = typer.Argument(..., exists=True, dir_okay=False),
) -> None:
    """Check a board configuration without exploring it."""
    try:
        errors = validate_config(load_config(config))
    except BoardConfigError as exc:
        errors = exc.errors
    if errors:
        _fail(errors)
    typer.echo("Configuration OK.")


@app.command()
def example(
    output: Optional[Path] = typer.Option(
        None, "-o", "--output",
        dir_okay=False,
        help="Write to this file instead of stdout.",
    ),
) -> None:
    """Print the default board configuration as JSON."""
    config = BoardConfig.default()
    if output is None:
        typer.echo(json.dumps(config.to_dict(), indent=2))
        return
    save_config(config, output)
    typer.echo(f"Wrote {output}")


if __name__ == "__main__":
    app()
