"""Tracks the mutable state of a game in progress."""

from __future__ import annotations

import time
from enum import StrEnum

from npuzzle.backend.models.board import Board


class Phase(StrEnum):
    READY = "ready"
    SHUFFLING = "shuffling"
    PLAYABLE = "playable"


class GameState:
    """Holds the board, reveal progress, move counter, and elapsed time.

    Not thread-safe on its own; ``GamePlay`` is its single writer and
    serializes every access behind one lock.
    """

    def __init__(self, board: Board) -> None:
        self.board = board
        self.phase: Phase = Phase.READY
        self.epoch: int = 0
        self.revealed: set[int] = set(range(board.tile_count))
        self.moves: int = 0
        self._start_time: float = time.time()
        self._running: bool = True

    # -- shuffle cycle --------------------------------------------------------

    def begin_shuffle(self, board: Board) -> int:
        """Install a freshly shuffled board and hide every tile.

        Returns the epoch that identifies this shuffle cycle.
        """
        if __debug__:
            board.check_invariants()
        self.board = board
        self.phase = Phase.SHUFFLING
        self.epoch += 1
        self.revealed = {board.blank_pos}
        self.moves = 0
        self._running = False
        return self.epoch

    def reveal(self, position: int) -> int:
        """Mark *position* as disclosed and return the progress count."""
        self.revealed.add(position)
        return self.progress

    def finish_shuffle(self) -> None:
        self.phase = Phase.PLAYABLE
        self._start_time = time.time()
        self._running = True

    @property
    def progress(self) -> int:
        """Number of non-blank tiles revealed so far."""
        return len(self.revealed - {self.board.blank_pos})

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return time.time() - self._start_time
        return 0.0

    # -- moves ----------------------------------------------------------------

    def increment_moves(self) -> None:
        self.moves += 1

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
