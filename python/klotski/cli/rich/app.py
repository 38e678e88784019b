"""Rich terminal frontend — boards, graph summary and move listings.

Shares the backend with any other consumer: it only reads the graph
returned by :class:`DecisionGraphBuilder`.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from klotski.engine.graphbuilder import DecisionGraphBuilder
from klotski.engine.graphwalk import GraphSummary, iter_nodes, summarize
from klotski.models.board import Board
from klotski.models.config import BoardConfig
from klotski.models.graph import GraphNode

console = Console()

_BLOCK_STYLES = (
    "bold red",
    "bold blue",
    "bold green",
    "bold khaki1",
    "bold magenta",
    "bold dark_orange",
    "bold cyan",
    "bold grey70",
)
_WINNING_STYLE = "bold yellow"


# -- board rendering ----------------------------------------------------------


def _cell_owners(board: Board) -> dict[tuple[int, int], int]:
    owners: dict[tuple[int, int], int] = {}
    for block in board.blocks:
        for dx in range(block.width):
            for dy in range(block.height):
                owners[(block.x + dx, block.y + dy)] = block.id
    return owners


def render_board(board: Board) -> Table:
    """Return a Rich Table of the grid, labelling every cell with its block id.

    The grid grows past ``columns``/``rows`` when the winning block is
    parked half-way through the exit.
    """
    owners = _cell_owners(board)
    width = max([board.columns] + [b.x + b.width for b in board.blocks])
    height = max([board.rows] + [b.y + b.height for b in board.blocks])
    label_width = max([1] + [len(str(b.id)) for b in board.blocks])

    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(width):
        table.add_column(width=label_width + 1, justify="center")

    for y in range(height):
        cells: list[str] = []
        for x in range(width):
            block_id = owners.get((x, y))
            if block_id is None:
                outside = x >= board.columns or y >= board.rows
                cells.append("" if outside else "[dim]·[/dim]")
            elif block_id == board.winning_block_id:
                cells.append(f"[{_WINNING_STYLE}]{block_id:>{label_width}}[/]")
            else:
                style = _BLOCK_STYLES[block_id % len(_BLOCK_STYLES)]
                cells.append(f"[{style}]{block_id:>{label_width}}[/]")
        table.add_row(*cells)

    return table


# -- graph rendering ----------------------------------------------------------


def render_summary(summary: GraphSummary) -> Panel:
    stats = Table.grid(padding=(0, 2))
    stats.add_column(style="dim")
    stats.add_column(style="bold yellow", justify="right")
    stats.add_row("States", str(summary.node_count))
    stats.add_row("Transitions", str(summary.edge_count))
    stats.add_row("Winning states", str(summary.winning_count))
    stats.add_row("Max depth", str(summary.max_depth))

    return Panel(
        stats,
        title="[bold cyan]Decision Graph[/bold cyan]",
        subtitle=f"[dim]{summary.start_hash}[/dim]",
        border_style="cyan",
        padding=(1, 2),
    )


def render_moves(node: GraphNode) -> Table:
    """List the outgoing moves of *node* with the state each one reaches."""
    table = Table(box=rich.box.SIMPLE, header_style="bold")
    table.add_column("Move")
    table.add_column("Resulting state", style="dim")
    table.add_column("Win", justify="center")
    for child, description in node.children:
        table.add_row(
            description,
            child.state_hash,
            "[bold green]✓[/bold green]" if child.is_winning else "",
        )
    return table


def _node_panel(node: GraphNode, index: int) -> Panel:
    if node.is_starting:
        title, style = f"#{index}  start", "bright_blue"
    elif node.is_winning:
        title, style = f"#{index}  winning", "green"
    else:
        title, style = f"#{index}", "white"
    return Panel(
        Align.center(render_board(node.board)),
        title=f"[bold]{title}[/bold]",
        subtitle=f"[dim]{node.state_hash}[/dim]",
        border_style=style,
    )


def print_errors(errors: list[str]) -> None:
    body = Text()
    for i, message in enumerate(errors):
        if i:
            body.append("\n")
        body.append("• ", style="red")
        body.append(message)
    console.print(
        Panel(
            body,
            title="[bold red]Board configuration errors[/bold red]",
            border_style="red",
        )
    )


# -- entry point --------------------------------------------------------------


def run(config: BoardConfig, states: int = 0) -> GraphNode:
    """Build the graph for *config* and print it; returns the root node.

    Raises :class:`BoardConfigError` if *config* does not validate.
    """
    board = config.to_board()
    root = DecisionGraphBuilder().build_graph(board)
    summary = summarize(root)

    start = Panel(
        Align.center(render_board(root.board)),
        title="[bold bright_blue]Starting board[/bold bright_blue]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Group(start, render_summary(summary)))

    if root.children:
        console.print(Text("  Moves from the start", style="bold"))
        console.print(render_moves(root))
    else:
        console.print(Text("  No block can move.", style="yellow"))

    if states > 0:
        for index, node in enumerate(iter_nodes(root)):
            if index >= states:
                break
            console.print(_node_panel(node, index))

    return root
