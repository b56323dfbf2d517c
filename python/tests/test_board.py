"""Board model — construction, geometry, and integrity checks."""

from __future__ import annotations

import pytest

from npuzzle.backend.config import PuzzleConfig
from npuzzle.backend.models.board import Board


# -- construction -------------------------------------------------------------


@pytest.mark.parametrize("size", [2, 3, 4, 5])
def test_solved_is_identity(size: int) -> None:
    board = Board.solved(size)
    assert board.tiles == list(range(size * size))
    assert board.blank_pos == size * size - 1
    assert board.blank_marker == size * size - 1
    assert board.is_solved()
    board.check_invariants()


def test_solved_rejects_degenerate_size() -> None:
    with pytest.raises(ValueError):
        Board.solved(1)


def test_from_flat_derives_blank() -> None:
    board = Board.from_flat(3, [0, 1, 2, 3, 4, 8, 6, 7, 5])
    assert board.blank_pos == 5
    assert not board.is_solved()


def test_from_flat_copies_input() -> None:
    flat = [0, 1, 2, 3, 4, 5, 6, 8, 7]
    board = Board.from_flat(3, flat)
    board.swap_with_blank(8)
    assert flat == [0, 1, 2, 3, 4, 5, 6, 8, 7]


@pytest.mark.parametrize(
    "flat",
    [
        [0, 1, 2, 3],
        [0, 1, 2, 3, 4, 5, 6, 7, 7],
        [0, 1, 2, 3, 4, 5, 6, 7, 9],
    ],
    ids=["short", "duplicate", "out-of-range"],
)
def test_from_flat_rejects_malformed(flat: list[int]) -> None:
    with pytest.raises(ValueError):
        Board.from_flat(3, flat)


# -- geometry -----------------------------------------------------------------


def test_position_mapping_round_trips() -> None:
    board = Board.solved(4)
    for pos in range(16):
        r, c = board.row_col(pos)
        assert (r, c) == (pos // 4, pos % 4)
        assert board.position_of(r, c) == pos


def test_rows_view() -> None:
    board = Board.from_flat(3, [0, 1, 2, 3, 4, 8, 6, 7, 5])
    assert board.rows() == [[0, 1, 2], [3, 4, 8], [6, 7, 5]]


def test_is_tile_correct() -> None:
    board = Board.from_flat(3, [1, 0, 2, 3, 4, 5, 6, 7, 8])
    assert not board.is_tile_correct(0)
    assert not board.is_tile_correct(1)
    assert board.is_tile_correct(2)


# -- mutation & integrity -----------------------------------------------------


def test_swap_with_blank_moves_blank() -> None:
    board = Board.solved(3)
    board.swap_with_blank(5)
    assert board.tiles == [0, 1, 2, 3, 4, 8, 6, 7, 5]
    assert board.blank_pos == 5
    board.check_invariants()


def test_copy_is_independent() -> None:
    board = Board.solved(3)
    clone = board.copy()
    clone.swap_with_blank(7)
    assert board.is_solved()
    assert clone.blank_pos == 7


def test_check_invariants_catches_stale_blank() -> None:
    board = Board.solved(3)
    board.blank_pos = 0
    with pytest.raises(AssertionError):
        board.check_invariants()


def test_check_invariants_catches_duplicate_label() -> None:
    board = Board.solved(3)
    board.tiles[0] = 1
    with pytest.raises(AssertionError):
        board.check_invariants()


# -- configuration ------------------------------------------------------------


def test_config_defaults() -> None:
    config = PuzzleConfig()
    assert config.size == 3
    assert config.tile_count == 9
    assert config.delay_min == pytest.approx(0.3)
    assert config.delay_max == pytest.approx(3.3)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"size": 1},
        {"delay_min": -0.1},
        {"delay_min": 1.0, "delay_max": 0.5},
    ],
    ids=["size", "negative-delay", "inverted-delay"],
)
def test_config_rejects_invalid(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        PuzzleConfig(**kwargs)
