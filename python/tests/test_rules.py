"""Move validator — legality against plain 2-D grid adjacency."""

from __future__ import annotations

import random

import pytest

from npuzzle.backend.engine.gamerules import MoveRules
from npuzzle.backend.models.board import Board, Direction

# (row, col) step the flung tile takes toward the blank.
_STEPS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


def _grid_adjacent(direction: Direction, position: int, blank: int, size: int) -> bool:
    count = size * size
    if not (0 <= position < count and 0 <= blank < count):
        return False
    r, c = divmod(position, size)
    dr, dc = _STEPS[direction]
    nr, nc = r + dr, c + dc
    return 0 <= nr < size and 0 <= nc < size and blank == nr * size + nc


# -- brute force --------------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_can_move_matches_grid_adjacency(size: int) -> None:
    count = size * size
    for direction in Direction:
        for position in range(-size - 1, count + size + 1):
            for blank in range(-size - 1, count + size + 1):
                expected = _grid_adjacent(direction, position, blank, size)
                assert MoveRules.can_move(direction, position, blank, size) is expected, (
                    f"{direction.value} pos={position} blank={blank} size={size}"
                )


# -- concrete cases -----------------------------------------------------------


def test_tile_above_blank_slides_down() -> None:
    assert MoveRules.can_move(Direction.DOWN, 5, 8, 3)
    assert not MoveRules.can_move(Direction.UP, 5, 8, 3)


@pytest.mark.parametrize(
    "direction, position, blank",
    [
        (Direction.RIGHT, 2, 3),
        (Direction.LEFT, 3, 2),
        (Direction.RIGHT, 5, 6),
        (Direction.LEFT, 6, 5),
    ],
    ids=["r0-end-right", "r1-start-left", "r1-end-right", "r2-start-left"],
)
def test_no_wraparound_between_rows(direction: Direction, position: int, blank: int) -> None:
    assert not MoveRules.can_move(direction, position, blank, 3)


def test_blank_cannot_move_onto_itself() -> None:
    for direction in Direction:
        assert not MoveRules.can_move(direction, 4, 4, 3)


def test_accepts_plain_strings() -> None:
    assert MoveRules.can_move("down", 5, 8, 3)  # type: ignore[arg-type]


def test_legal_moves_on_solved_board() -> None:
    board = Board.solved(3)
    assert MoveRules.legal_moves(board) == [
        (Direction.DOWN, 5),
        (Direction.RIGHT, 7),
    ]


def test_legal_moves_from_centre() -> None:
    board = Board.from_flat(3, [0, 1, 2, 3, 8, 5, 6, 7, 4])
    assert sorted(pos for _, pos in MoveRules.legal_moves(board)) == [1, 3, 5, 7]


# -- invariants under play ----------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4])
def test_random_walk_keeps_permutation(size: int) -> None:
    rng = random.Random(size)
    board = Board.solved(size)
    for _ in range(2_000):
        direction, position = rng.choice(MoveRules.legal_moves(board))
        assert MoveRules.can_move(direction, position, board.blank_pos, size)
        board.swap_with_blank(position)
        board.check_invariants()
