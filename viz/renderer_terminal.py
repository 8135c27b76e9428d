# viz/renderer_terminal.py
from __future__ import annotations
from contextlib import ExitStack
from typing import Optional

from blessed import Terminal

from config import AppConfig
from core.interfaces import Snapshot, GameResult
from viz.frame import render_frame, legend, hud, result_text, HEAD, BODY, FOOD

class TerminalRenderer:
    """Full redraw of the grid on a blessed Terminal.

    `open()` switches the terminal to fullscreen + cbreak (no line buffering,
    no echo) with the cursor hidden; `close()` restores it. Callers pair them
    with try/finally so every exit path restores the terminal.
    """
    def __init__(self, term: Optional[Terminal] = None):
        self.term = term if term is not None else Terminal()
        self.cfg: Optional[AppConfig] = None
        self._modes: Optional[ExitStack] = None
        self._paint = {}

    def open(self, cfg: AppConfig) -> None:
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        t = self.term
        self._paint = {HEAD: t.bold_green(HEAD), BODY: t.green(BODY), FOOD: t.red(FOOD)}

        stack = ExitStack()
        try:
            stack.enter_context(t.fullscreen())
            stack.enter_context(t.cbreak())
            stack.enter_context(t.hidden_cursor())
        except BaseException:
            stack.close()
            raise
        self._modes = stack
        self._write(t.home + t.clear)

    def draw(self, snap: Snapshot) -> None:
        assert self.cfg is not None, "Renderer not opened"
        frame = render_frame(snap)
        rows = ["".join(self._paint.get(ch, ch) for ch in row) for row in frame]
        parts = [self.term.home, "\n".join(rows), "\n", hud(snap), self.term.clear_eol]
        if self.cfg.show_legend:
            parts += ["\n", legend(self.cfg.keymap)]
        self._write("".join(parts))

    def show_result(self, result: GameResult) -> None:
        # called once the terminal is back to normal mode
        self._write(result_text(result) + "\n")

    def close(self) -> None:
        if self._modes is not None:
            modes, self._modes = self._modes, None
            modes.close()

    def _write(self, text: str) -> None:
        stream = self.term.stream
        stream.write(text)
        stream.flush()
