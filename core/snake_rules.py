# core/snake_rules.py  (pure rules, no terminal / pygame)
from __future__ import annotations
from typing import Iterable, List, Optional
import random

from .interfaces import Coord, Direction, Outcome, Quit, Snapshot
from config import AppConfig

class Rules:
    def __init__(self, cfg: AppConfig):
        self.cfg = cfg
        self.rng = random.Random(cfg.seed)
        self._reset_state()

    def seed(self, seed: Optional[int]):
        self.rng = random.Random(seed)

    def _reset_state(self):
        g = self.cfg.grid_size
        c = g // 2
        bx, by = self.cfg.start_dir.opposite().delta
        # body trails behind the head, opposite to the starting direction
        self.snake: List[Coord] = [self.wrap((c + bx*i, c + by*i)) for i in range(self.cfg.start_len)]
        self.dir = self.cfg.start_dir
        self.food = self._place_food()
        self.step_count = 0
        self.terminated = False
        self.reason = None

    def reset(self) -> Snapshot:
        self._reset_state()
        return self.snapshot()

    @property
    def length(self) -> int:
        return len(self.snake)

    @property
    def head(self) -> Coord:
        return self.snake[0]

    def wrap(self, p: Coord) -> Coord:
        """Toroidal wrap, each axis on its own."""
        g = self.cfg.grid_size
        return (p[0] % g, p[1] % g)

    def _place_food(self) -> Optional[Coord]:
        # reject-and-resample: only free cells are candidates
        occ = set(self.snake)
        g = self.cfg.grid_size
        free = [(x, y) for y in range(g) for x in range(g) if (x, y) not in occ]
        if not free:
            return None
        return self.rng.choice(free)

    def resolve_direction(self, intents: Iterable) -> Direction:
        """Last direction in the batch wins; a reversal is ignored while the body has a neck."""
        dirs = [i for i in intents if not isinstance(i, Quit)]
        if not dirs:
            return self.dir
        cand = dirs[-1]
        if cand == self.dir.opposite() and len(self.snake) > 1:
            return self.dir
        return cand

    def step(self, intents: Iterable = ()) -> Outcome:
        if self.terminated:
            raise RuntimeError("step() called after the game was lost")
        self.dir = self.resolve_direction(intents)
        self.step_count += 1

        hx, hy = self.snake[0]
        dx, dy = self.dir.delta
        new_head = self.wrap((hx+dx, hy+dy))

        if new_head == self.food:
            # the food cell becomes the head and the tail stays: +1 length
            self.snake.insert(0, self.food)
            self.food = self._place_food()
            outcome = Outcome.GREW
        else:
            self.snake.insert(0, new_head)
            self.snake.pop()
            outcome = Outcome.CONTINUED

        if self.snake[0] in self.snake[1:]:
            self.terminated, self.reason = True, "self"
            outcome = Outcome.LOST

        self._check_invariants()
        return outcome

    def _check_invariants(self) -> None:
        g = self.cfg.grid_size
        assert len(self.snake) >= 1, "snake lost its head"
        assert all(0 <= x < g and 0 <= y < g for x, y in self.snake), f"snake out of bounds: {self.snake}"
        assert self.food is None or (0 <= self.food[0] < g and 0 <= self.food[1] < g), "food out of bounds"

    def snapshot(self) -> Snapshot:
        return Snapshot(
            grid_size=self.cfg.grid_size,
            snake=tuple(self.snake),
            food=self.food,
            dir=self.dir,
            step_count=self.step_count,
            terminated=self.terminated,
            reason=self.reason,
        )

    def get_state(self) -> dict:
        """Pure-Python, JSON-serializable state (plus RNG)."""
        return {
            "snake": [list(p) for p in self.snake],
            "dir": self.dir.name,
            "food": list(self.food) if self.food is not None else None,
            "step_count": self.step_count,
            "terminated": self.terminated,
            "reason": self.reason,
            "rng_state": self.rng.getstate(),
        }

    def set_state(self, state: dict) -> None:
        """Restore exact internal state (including RNG)."""
        self.snake = list(map(tuple, state["snake"]))
        self.dir = Direction[state["dir"]]
        self.food = tuple(state["food"]) if state["food"] is not None else None
        self.step_count = int(state.get("step_count", 0))
        self.terminated = bool(state.get("terminated", False))
        self.reason = state.get("reason")
        if "rng_state" in state:
            rs = state["rng_state"]
            # json turns the inner tuple into a list
            self.rng.setstate((rs[0], tuple(rs[1]), rs[2]))
        self._check_invariants()
