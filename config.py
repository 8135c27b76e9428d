# config.py
from dataclasses import dataclass, replace
from typing import Optional, Literal

from core.interfaces import Direction

KEYMAPS = ("azerty", "qwerty")
FRONTENDS = ("terminal", "window")

@dataclass(frozen=True, slots=True)
class AppConfig:
    # simulation
    grid_size: int = 30
    start_len: int = 1
    start_dir: Direction = Direction.DOWN
    seed: Optional[int] = None

    # game loop
    fps: float = 5.0                     # ticks per second (200 ms per tick)
    queue_max: int = 8                   # pending intents kept between ticks

    # input
    keymap: Literal["azerty", "qwerty"] = "azerty"
    poll_timeout: float = 0.05           # seconds per inkey() wait

    # render
    frontend: Literal["terminal", "window"] = "terminal"
    render_cell: int = 24
    render_title: str = "Snake"
    render_show_hud: bool = True
    show_legend: bool = True

    # tick log (csv), disabled when None
    log_path: Optional[str] = None

    def __post_init__(self):
        if self.grid_size < 1:
            raise ValueError(f"grid_size must be >= 1, got {self.grid_size}")
        if self.fps <= 0:
            raise ValueError(f"fps must be > 0, got {self.fps}")
        if not (1 <= self.start_len <= self.grid_size):
            raise ValueError(f"start_len must be in [1, {self.grid_size}], got {self.start_len}")
        if self.queue_max < 1:
            raise ValueError(f"queue_max must be >= 1, got {self.queue_max}")
        if self.keymap not in KEYMAPS:
            raise ValueError(f"unknown keymap {self.keymap!r}, expected one of {KEYMAPS}")
        if self.frontend not in FRONTENDS:
            raise ValueError(f"unknown frontend {self.frontend!r}, expected one of {FRONTENDS}")

    @property
    def tick_sec(self) -> float:
        return 1.0 / self.fps

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
