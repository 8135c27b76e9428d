# viz/render_iface.py
from __future__ import annotations
from typing import Protocol
from config import AppConfig
from core.interfaces import Snapshot, GameResult

class Renderer(Protocol):
    """What the game loop needs from a presenter. Failures propagate."""
    def open(self, cfg: AppConfig) -> None: ...
    def draw(self, snap: Snapshot) -> None: ...
    def show_result(self, result: GameResult) -> None: ...
    def close(self) -> None: ...
