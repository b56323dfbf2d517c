"""Core gameplay logic — shuffle cycles, reveal progress, and moves."""

from __future__ import annotations

import logging
import random
import threading
from typing import Callable

from npuzzle.backend.config import PuzzleConfig
from npuzzle.backend.engine.gamegenerator import GameGenerator
from npuzzle.backend.engine.gamerules import MoveRules
from npuzzle.backend.engine.gamestate import GameState, Phase
from npuzzle.backend.engine.reveal import RevealEvent, RevealScheduler
from npuzzle.backend.models.board import Board, Direction, MoveOutcome

logger = logging.getLogger(__name__)

RevealCallback = Callable[[int, int, int], None]
Callback = Callable[[], None]


class GamePlay:
    """Orchestrates a single game session.

    All reads and writes of ``state`` go through one lock. Reveal events
    arrive on the scheduler's consumer thread; callbacks are invoked on
    that thread after the lock is released, so they may call back into
    the session.
    """

    def __init__(
        self,
        config: PuzzleConfig | None = None,
        *,
        on_reveal_progress: RevealCallback | None = None,
        on_shuffle_halfway: Callback | None = None,
        on_shuffle_complete: Callback | None = None,
        board: Board | None = None,
    ) -> None:
        self.config = config or PuzzleConfig()
        self.size = self.config.size
        if board is not None and board.size != self.size:
            raise ValueError(
                f"Board is {board.size}×{board.size} but the session is "
                f"configured for {self.size}×{self.size}."
            )

        self.on_reveal_progress = on_reveal_progress
        self.on_shuffle_halfway = on_shuffle_halfway
        self.on_shuffle_complete = on_shuffle_complete

        self._rng = random.Random(self.config.seed)
        self._lock = threading.Lock()
        self._playable = threading.Event()
        self._playable.set()
        self._in_session = False

        self.state = GameState(board or GameGenerator.solved(self.size))
        self._scheduler = RevealScheduler(
            self._consume,
            workers=self.config.tile_count,
            delay_range=(self.config.delay_min, self.config.delay_max),
            rng=self._rng,
        )

    @classmethod
    def from_board(cls, board: Board, config: PuzzleConfig | None = None) -> GamePlay:
        """Create a session around an existing board, ready for moves."""
        config = config or PuzzleConfig(size=board.size)
        return cls(config, board=board)

    # -- lifecycle ------------------------------------------------------------

    def close(self) -> None:
        self._scheduler.close()

    def __enter__(self) -> GamePlay:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -- shuffle cycle --------------------------------------------------------

    def request_shuffle(self) -> None:
        """Start a new shuffle and reveal cycle; moves freeze until it ends."""
        with self._lock:
            board = GameGenerator.shuffle(self.state.board, self._rng)
            epoch = self.state.begin_shuffle(board)
            self._playable.clear()
            self._in_session = False
            hidden = [p for p in range(board.tile_count) if p != board.blank_pos]
            self._scheduler.schedule(epoch, hidden)
        logger.info("Shuffle %d started", epoch)
        logger.debug("Shuffle %d tiles: %s", epoch, board.tiles)

    def wait_until_playable(self, timeout: float | None = None) -> bool:
        """Block until the current shuffle has been fully revealed."""
        return self._playable.wait(timeout)

    def _consume(self, event: RevealEvent) -> None:
        """Apply one reveal; runs on the scheduler's consumer thread."""
        with self._lock:
            state = self.state
            if (
                event.epoch != state.epoch
                or state.phase != Phase.SHUFFLING
                or event.position in state.revealed
            ):
                logger.debug("Discarding stale %s (epoch is %d)", event, state.epoch)
                return

            progress = state.reveal(event.position)
            label = state.board.get_tile(event.position)
            total = state.board.tile_count - 1
            complete = progress == total
            if complete:
                state.finish_shuffle()
                self._in_session = True

        # A callback may start a new shuffle; nothing from this cycle may
        # reach the presentation layer after that.
        if self._is_current(event.epoch):
            self._emit(self.on_reveal_progress, event.position, label, progress)
        if progress == total // 2 and self._is_current(event.epoch):
            self._emit(self.on_shuffle_halfway)
        if complete and self._is_current(event.epoch):
            logger.info("Shuffle %d fully revealed", event.epoch)
            self._emit(self.on_shuffle_complete)
            with self._lock:
                if self.state.epoch == event.epoch:
                    self._playable.set()

    def _is_current(self, epoch: int) -> bool:
        with self._lock:
            if self.state.epoch == epoch:
                return True
        logger.debug("Dropping callbacks of superseded shuffle %d", epoch)
        return False

    @staticmethod
    def _emit(callback: Callable[..., None] | None, *args: int) -> None:
        if callback is None:
            return
        try:
            callback(*args)
        except Exception:
            logger.exception("Callback %r raised", callback)

    # -- movement (direction = where the *tile* moves) ------------------------

    def request_move(self, direction: Direction, position: int) -> MoveOutcome:
        """Slide the tile at *position* one cell in *direction* into the blank.

        Rejected while a shuffle is being revealed, or when the blank is
        not the neighbour of *position* in *direction*.
        """
        with self._lock:
            return self._apply(direction, position)

    def move(self, direction: Direction) -> MoveOutcome:
        """Slide whichever tile can travel *direction* into the blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        """
        with self._lock:
            position = MoveRules.source_for(direction, self.state.board)
            return self._apply(direction, position)

    def _apply(self, direction: Direction, position: int) -> MoveOutcome:
        state = self.state
        if state.phase == Phase.SHUFFLING:
            logger.debug("Move %s@%d rejected: grid frozen", direction, position)
            return MoveOutcome.REJECTED

        board = state.board
        if not MoveRules.can_move(direction, position, board.blank_pos, board.size):
            logger.debug(
                "Move %s@%d rejected: blank at %d", direction, position, board.blank_pos
            )
            return MoveOutcome.REJECTED

        board.swap_with_blank(position)
        if __debug__:
            board.check_invariants()
        state.increment_moves()
        return MoveOutcome.APPLIED

    def solve(self) -> list[Direction]:
        raise NotImplementedError("Automatic solving is not implemented.")

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        """A snapshot of the current board."""
        with self._lock:
            return self.state.board.copy()

    @property
    def phase(self) -> Phase:
        with self._lock:
            return self.state.phase

    @property
    def progress(self) -> int:
        with self._lock:
            return self.state.progress

    @property
    def moves(self) -> int:
        with self._lock:
            return self.state.moves

    @property
    def elapsed_time(self) -> float:
        with self._lock:
            return self.state.elapsed_time

    @property
    def in_session(self) -> bool:
        """True once a shuffle has been fully revealed."""
        with self._lock:
            return self._in_session

    @property
    def is_won(self) -> bool:
        with self._lock:
            return self._in_session and self.state.is_solved

    def is_revealed(self, position: int) -> bool:
        with self._lock:
            return position in self.state.revealed

    def visible_tiles(self) -> list[int | None]:
        """Tile labels as the player may see them; ``None`` while hidden."""
        with self._lock:
            state = self.state
            return [
                label if pos in state.revealed else None
                for pos, label in enumerate(state.board.tiles)
            ]
