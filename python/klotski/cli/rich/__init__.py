from klotski.cli.rich.app import (
    print_errors,
    render_board,
    render_moves,
    render_summary,
    run,
)

__all__ = ["print_errors", "render_board", "render_moves", "render_summary", "run"]
