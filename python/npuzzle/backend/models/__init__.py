from npuzzle.backend.models.board import Board, Direction, MoveOutcome

__all__ = ["Board", "Direction", "MoveOutcome"]
