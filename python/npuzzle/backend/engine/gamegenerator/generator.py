"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from npuzzle.backend.engine.gamerules import MoveRules
from npuzzle.backend.models.board import Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles from a random permutation plus a parity fix."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (labels in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def generate(size: int, rng: random.Random | None = None) -> Board:
        """Return a random *solvable*, unsolved board of the given size."""
        return GameGenerator.shuffle(GameGenerator.solved(size), rng)

    @staticmethod
    def shuffle(board: Board, rng: random.Random | None = None) -> Board:
        """Return a new shuffled board holding the same labels as *board*."""
        tiles, blank_pos = GameGenerator.shuffled_state(
            board.tiles, board.blank_marker, board.size, rng
        )
        return Board(size=board.size, tiles=tiles, blank_pos=blank_pos)

    @staticmethod
    def shuffled_state(
        tiles: list[int],
        blank_marker: int,
        size: int,
        rng: random.Random | None = None,
    ) -> tuple[list[int], int]:
        """Shuffle *tiles* into a solvable permutation.

        Returns the new tile list and the position of *blank_marker*.
        The input list is left untouched.
        """
        rng = rng or random.Random()
        candidate = tiles[:]
        rng.shuffle(candidate)

        if not GameGenerator.is_solvable(candidate, size, blank_marker):
            GameGenerator.fix_parity(candidate, blank_marker)
            logger.debug("Corrected parity of shuffled state %s", candidate)

        if candidate == sorted(candidate):
            GameGenerator._nudge(candidate, size, blank_marker)
            logger.debug("Shuffle landed on the goal state; nudged to %s", candidate)

        return candidate, candidate.index(blank_marker)

    # -- solvability ----------------------------------------------------------

    @staticmethod
    def inversion_count(tiles: list[int], blank_marker: int) -> int:
        """Count out-of-order pairs among the non-blank labels."""
        flat = [v for v in tiles if v != blank_marker]
        inversions = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    inversions += 1
        return inversions

    @staticmethod
    def is_solvable(tiles: list[int], size: int, blank_marker: int) -> bool:
        """Return True if *tiles* can reach the goal state by legal moves.

        Odd widths only need an even inversion count. Even widths also
        count the blank's row, measured 0-based from the bottom.
        """
        inversions = GameGenerator.inversion_count(tiles, blank_marker)
        if size % 2 == 1:
            return inversions % 2 == 0
        blank_row_from_bottom = size - 1 - tiles.index(blank_marker) // size
        return (inversions + blank_row_from_bottom) % 2 == 0

    @staticmethod
    def fix_parity(tiles: list[int], blank_marker: int) -> None:
        """Swap the first two non-blank labels in place.

        A single transposition flips inversion parity, turning an
        unsolvable permutation into a solvable one and vice versa.
        """
        first, second = [i for i, v in enumerate(tiles) if v != blank_marker][:2]
        tiles[first], tiles[second] = tiles[second], tiles[first]

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _nudge(tiles: list[int], size: int, blank_marker: int) -> None:
        board = Board(size=size, tiles=tiles, blank_pos=tiles.index(blank_marker))
        _, position = MoveRules.legal_moves(board)[0]
        board.swap_with_blank(position)
