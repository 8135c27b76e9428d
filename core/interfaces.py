# core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

Coord = Tuple[int, int]

class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def delta(self) -> Coord:
        return self.value

    def opposite(self) -> "Direction":
        return _OPPOSITE[self]

_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

class Quit:
    """Intent asking the loop to stop. Use the QUIT singleton."""
    _instance: Optional["Quit"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "QUIT"

QUIT = Quit()

Intent = Union[Direction, Quit]

class Outcome(Enum):
    CONTINUED = "continued"
    GREW = "grew"
    LOST = "lost"

@dataclass(frozen=True)
class Snapshot:
    grid_size: int
    snake: Tuple[Coord, ...]   # head first
    food: Optional[Coord]      # None once the snake fills the grid
    dir: Direction
    step_count: int
    terminated: bool
    reason: str | None

    @property
    def score(self) -> int:
        return len(self.snake)

@dataclass(frozen=True)
class GameResult:
    outcome: str               # "quit" | "lost"
    score: int                 # snake length at exit
    ticks: int
    elapsed: float             # wall-clock seconds since loop start
