"""Rich terminal frontend — styled grid, reveal progress, and stats.

Drives a ``GamePlay`` session purely through its public interface:
``request_shuffle``, ``request_move`` and the reveal callbacks.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from npuzzle.backend.config import PuzzleConfig
from npuzzle.backend.engine.gameplay import GamePlay
from npuzzle.backend.engine.gamerules import MoveRules
from npuzzle.backend.engine.gamestate import Phase
from npuzzle.backend.models.board import Board, MoveOutcome
from npuzzle.frontend.cli.input_handler import DIRECTIONS, get_key_timeout

console = Console()


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: float) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


class _Banner:
    """Status line shared between the reveal callbacks and the draw loop."""

    def __init__(self) -> None:
        self.text = ""

    def randomizing(self) -> None:
        self.text = "[yellow]Randomizing…[/yellow]"

    def halfway(self) -> None:
        self.text = "[yellow]Counting inversions…[/yellow]"

    def randomized(self) -> None:
        self.text = "[bold green]Randomized! Start sliding.[/bold green]"


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, visible: list[int | None]) -> Table:
    """Return a Rich Table for the grid; hidden tiles show as ``?``."""
    width = len(str(board.tile_count - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r in range(board.size):
        cells: list[str] = []
        for c in range(board.size):
            pos = board.position_of(r, c)
            label = visible[pos]
            if pos == board.blank_pos:
                cells.append("[dim]·[/dim]")
            elif label is None:
                cells.append(f"[dim magenta]{'?':>{width}}[/dim magenta]")
            elif board.is_tile_correct(pos):
                cells.append(f"[bold green]{label + 1:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{label + 1:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _draw(game: GamePlay, banner: _Banner, status: str) -> None:
    console.clear()

    board = game.board
    parts = [Align.center(_render_board(board, game.visible_tiles()))]

    if game.phase == Phase.SHUFFLING:
        total = board.tile_count - 1
        parts.append(Text(""))
        parts.append(ProgressBar(total=total, completed=game.progress, width=30))

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(game.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.elapsed_time), style="bold yellow")

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  slide   ", style="dim")
    controls.append("R", style="bold yellow")
    controls.append("  shuffle   ", style="dim")
    controls.append("V", style="bold cyan")
    controls.append("  solve   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    won = game.is_won
    size = game.size
    title = "Solved!" if won else "N-Puzzle"
    style = "bold green" if won else "bright_blue"
    panel = Panel(
        Group(*parts),
        title=f"[bold cyan]{title}  {size}×{size}[/bold cyan]",
        border_style=style,
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    for line in (banner.text, status):
        if line:
            console.print(Align.center(Text.from_markup(f"  {line}")))
    console.print(Align.center(controls))


# -- game loop ----------------------------------------------------------------


def _handle_key(game: GamePlay, key: str, banner: _Banner) -> str:
    """Apply one action and return the status line to show next."""
    if key in DIRECTIONS:
        direction = DIRECTIONS[key]
        position = MoveRules.source_for(direction, game.board)
        if game.request_move(direction, position) == MoveOutcome.REJECTED:
            if game.phase == Phase.SHUFFLING:
                return "[dim]Wait for the tiles to be revealed.[/dim]"
            return ""
        if game.is_won:
            return f"[bold green]Solved in {game.moves} moves![/bold green]"
        return ""
    if key == "shuffle":
        if game.phase == Phase.SHUFFLING:
            return "[dim]Already shuffling.[/dim]"
        banner.randomizing()
        game.request_shuffle()
        return ""
    if key == "solve":
        try:
            game.solve()
        except NotImplementedError:
            return "[yellow]Solver not yet implemented.[/yellow]"
    return ""


def run(config: PuzzleConfig) -> None:
    """Launch the Rich CLI and start with a fresh shuffle."""
    banner = _Banner()
    status = ""
    with GamePlay(
        config,
        on_shuffle_halfway=banner.halfway,
        on_shuffle_complete=banner.randomized,
    ) as game:
        banner.randomizing()
        game.request_shuffle()

        while True:
            _draw(game, banner, status)
            # Poll faster while tiles are still being revealed.
            timeout = 0.1 if game.phase == Phase.SHUFFLING else 0.5
            key = get_key_timeout(timeout)
            if key is None:
                continue
            if key == "quit":
                break
            status = _handle_key(game, key, banner)

    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
