# viz/renderer_pygame.py
from __future__ import annotations
import pygame as pg
from typing import Optional
from config import AppConfig
from core.interfaces import Snapshot, GameResult
from core.intent_queue import IntentQueue
from viz.frame import hud
from viz.keyboard import PygameKeyboard
import viz.renderer_colors as theme

class PygameRenderer:
    """Window presenter.

    pygame only delivers events on the thread that owns the window, so this
    presenter also pumps keyboard events into `intents` on every draw.
    """
    def __init__(self, intents: Optional[IntentQueue] = None):
        self.cell = 24
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.intents = intents
        self.keyboard: Optional[PygameKeyboard] = None
        self._auto_flip = True

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cell = cfg.render_cell
        self.keyboard = PygameKeyboard(cfg.keymap)

        if self.surf is None:
            pg.init()
            pg.display.set_caption(cfg.render_title)
            side = cfg.grid_size * self.cell
            self.surf = pg.display.set_mode((side, side))
            self._auto_flip = True

    def attach_surface(self, surface: pg.Surface) -> None:
        """Draw onto an existing surface (no window, no flip)."""
        if not pg.get_init():
            pg.init()
        self.surf = surface
        self._auto_flip = False

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell

        if self.intents is not None and self.keyboard is not None:
            self.keyboard.poll(self.intents)

        surf.fill(theme.BG)

        if s.food is not None:
            fx, fy = s.food
            pg.draw.rect(surf, theme.FOOD, pg.Rect(fx * c, fy * c, c, c))

        for i, (x, y) in enumerate(s.snake):
            col = theme.HEAD if i == 0 else theme.BODY
            pg.draw.rect(surf, col, pg.Rect(x * c, y * c, c, c))

        if self.cfg.render_show_hud:
            self._blit_text(hud(s), (6, 4))

        if self._auto_flip:
            pg.display.flip()

    def show_result(self, result: GameResult) -> None:
        # window is gone by now; report on the console like the terminal frontend
        print(f"[{result.outcome}] score={result.score} ticks={result.ticks} time={result.elapsed:.1f}s")

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None

    def _blit_text(self, text: str, pos) -> None:
        font = pg.font.SysFont(None, 22)
        self.surf.blit(font.render(text, True, theme.TEXT), pos)
