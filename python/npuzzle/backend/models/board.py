"""Board model for the sliding puzzle game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    """Direction a flung tile travels toward the blank."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class MoveOutcome(StrEnum):
    APPLIED = "applied"
    REJECTED = "rejected"


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a flat row-major list of ints. The label
    ``size * size - 1`` marks the blank. A position is an index into
    ``tiles``; it maps to ``(position // size, position % size)``.
    """

    size: int
    tiles: list[int]
    blank_pos: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (``tiles[i] == i``, blank last)."""
        if size < 2:
            raise ValueError(f"Board size must be at least 2, got {size}.")
        count = size * size
        return cls(size=size, tiles=list(range(count)), blank_pos=count - 1)

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [0, 1, 2, 3, 4, 8, 6, 7, 5])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        tiles = list(flat)
        return cls(size=size, tiles=tiles, blank_pos=tiles.index(size * size - 1))

    # -- geometry -------------------------------------------------------------

    @property
    def blank_marker(self) -> int:
        return self.size * self.size - 1

    @property
    def tile_count(self) -> int:
        return self.size * self.size

    def row_col(self, position: int) -> tuple[int, int]:
        return divmod(position, self.size)

    def position_of(self, row: int, col: int) -> int:
        return row * self.size + col

    # -- queries --------------------------------------------------------------

    def get_tile(self, position: int) -> int:
        return self.tiles[position]

    def rows(self) -> list[list[int]]:
        """Return a 2-D copy of the tiles, one list per grid row."""
        n = self.size
        return [self.tiles[r * n : (r + 1) * n] for r in range(n)]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        return all(label == pos for pos, label in enumerate(self.tiles))

    def is_tile_correct(self, position: int) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.tiles[position] == position

    def check_invariants(self) -> None:
        """Assert permutation integrity and the cached blank position."""
        assert len(self.tiles) == self.tile_count, "tile count changed"
        assert sorted(self.tiles) == list(range(self.tile_count)), (
            f"tiles are not a permutation: {self.tiles}"
        )
        assert self.tiles[self.blank_pos] == self.blank_marker, (
            f"blank_pos {self.blank_pos} does not hold the blank marker"
        )

    # -- mutation -------------------------------------------------------------

    def swap_with_blank(self, position: int) -> None:
        """Exchange the tile at *position* with the blank.

        Callers must have validated the move; this does no legality check.
        """
        bp = self.blank_pos
        self.tiles[bp], self.tiles[position] = self.tiles[position], self.tiles[bp]
        self.blank_pos = position

    def copy(self) -> Board:
        return Board(size=self.size, tiles=self.tiles[:], blank_pos=self.blank_pos)
