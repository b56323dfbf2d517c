"""Move legality for the sliding puzzle."""

from __future__ import annotations

from npuzzle.backend.models.board import Board, Direction


class MoveRules:
    """Stateless move validator — all methods are static."""

    @staticmethod
    def can_move(
        direction: Direction, position: int, blank_pos: int, size: int
    ) -> bool:
        """Return True if the tile at *position* can slide into the blank.

        *direction* is where the tile travels, so ``Direction.UP`` needs
        the blank directly above *position*. Positions outside the grid
        are never legal.
        """
        count = size * size
        if not (0 <= position < count and 0 <= blank_pos < count):
            return False

        if direction == Direction.UP:
            return blank_pos == position - size
        if direction == Direction.DOWN:
            return blank_pos == position + size

        # Horizontal neighbours must share a row, otherwise the last cell
        # of one row would touch the first cell of the next.
        same_row = position // size == blank_pos // size
        if direction == Direction.LEFT:
            return same_row and blank_pos == position - 1
        if direction == Direction.RIGHT:
            return same_row and blank_pos == position + 1
        return False

    @staticmethod
    def source_for(direction: Direction, board: Board) -> int:
        """Return the position whose tile would travel *direction* into the blank.

        The result may fall outside the grid; ``can_move`` rejects it then.
        """
        offsets = {
            Direction.UP: board.size,
            Direction.DOWN: -board.size,
            Direction.LEFT: 1,
            Direction.RIGHT: -1,
        }
        return board.blank_pos + offsets[direction]

    @staticmethod
    def legal_moves(board: Board) -> list[tuple[Direction, int]]:
        """Every ``(direction, position)`` pair that is legal on *board*."""
        moves: list[tuple[Direction, int]] = []
        for direction in Direction:
            position = MoveRules.source_for(direction, board)
            if MoveRules.can_move(direction, position, board.blank_pos, board.size):
                moves.append((direction, position))
        return moves
