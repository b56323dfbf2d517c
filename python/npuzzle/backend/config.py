"""Tunable settings for a puzzle session."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SIZE = 3

# Each reveal fires after OFFSET + uniform(0, SPAN) seconds.
REVEAL_DELAY_OFFSET = 0.3
REVEAL_DELAY_SPAN = 3.0


@dataclass(frozen=True)
class PuzzleConfig:
    size: int = DEFAULT_SIZE
    delay_min: float = REVEAL_DELAY_OFFSET
    delay_max: float = REVEAL_DELAY_OFFSET + REVEAL_DELAY_SPAN
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.size < 2:
            raise ValueError(f"Grid size must be at least 2, got {self.size}.")
        if self.delay_min < 0:
            raise ValueError(f"delay_min must be >= 0, got {self.delay_min}.")
        if self.delay_max < self.delay_min:
            raise ValueError(
                f"delay_max ({self.delay_max}) is smaller than "
                f"delay_min ({self.delay_min})."
            )

    @property
    def tile_count(self) -> int:
        return self.size * self.size
