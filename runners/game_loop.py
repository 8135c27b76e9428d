# runners/game_loop.py
from __future__ import annotations
from typing import Any, Callable, Dict, Optional
import time

from config import AppConfig
from core.interfaces import GameResult, Outcome, Quit
from core.intent_queue import IntentQueue
from core.snake_rules import Rules
from viz.render_iface import Renderer

class GameLoop:
    """
    Fixed-timestep driver, the only caller of `Rules.step`.

    Per tick: drain intents -> step -> draw -> sleep out the rest of the tick.
    A slow tick is not made up for: the next one starts right away and the
    game just runs slower, it never steps twice.
    """
    def __init__(
        self,
        cfg: AppConfig,
        rules: Rules,
        intents: IntentQueue,
        renderer: Renderer,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
        on_tick: Optional[Callable[[Dict[str, Any]], None]] = None,
    ):
        self.cfg = cfg
        self.rules = rules
        self.intents = intents
        self.renderer = renderer
        self._clock = clock
        self._sleep = sleep
        self._on_tick = on_tick
        self.ticks = 0

    def run(self) -> GameResult:
        tick_sec = self.cfg.tick_sec
        t_start = self._clock()
        try:
            self.renderer.draw(self.rules.snapshot())
            return self._loop(t_start, tick_sec)
        except KeyboardInterrupt:
            # ctrl+c is a quit key, not a crash
            return self._result("quit", t_start)

    def _loop(self, t_start: float, tick_sec: float) -> GameResult:
        while True:
            t0 = self._clock()
            batch = self.intents.drain_all()
            if any(isinstance(i, Quit) for i in batch):
                return self._result("quit", t_start)

            outcome = self.rules.step(batch)
            self.ticks += 1
            self.renderer.draw(self.rules.snapshot())

            dt = self._clock() - t0
            if self._on_tick is not None:
                self._on_tick({
                    "tick": self.ticks,
                    "outcome": outcome.value,
                    "length": self.rules.length,
                    "tick_sec": dt,
                    "overrun": dt >= tick_sec,
                    "pending": len(self.intents),
                    "dropped": self.intents.dropped,
                })

            if outcome is Outcome.LOST:
                return self._result("lost", t_start)

            # the hook's time counts against the tick too
            spent = self._clock() - t0
            if tick_sec > spent:
                self._sleep(tick_sec - spent)

    def _result(self, outcome: str, t_start: float) -> GameResult:
        return GameResult(
            outcome=outcome,
            score=self.rules.length,
            ticks=self.ticks,
            elapsed=self._clock() - t_start,
        )
