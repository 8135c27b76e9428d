# viz/renderer_headless.py
from __future__ import annotations
from typing import List, Optional
from config import AppConfig
from core.interfaces import Snapshot, GameResult

class HeadlessRenderer:
    """Draws nothing; keeps what it was given so runs can be inspected."""
    def __init__(self):
        self.cfg: Optional[AppConfig] = None
        self.frames: List[Snapshot] = []
        self.result: Optional[GameResult] = None
        self.closed = False

    def open(self, cfg: AppConfig) -> None:
        self.cfg = cfg
    def draw(self, snap: Snapshot) -> None:
        self.frames.append(snap)
    def show_result(self, result: GameResult) -> None:
        self.result = result
    def close(self) -> None:
        self.closed = True
