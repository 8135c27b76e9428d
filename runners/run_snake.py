# runners/run_snake.py
from __future__ import annotations
from typing import Optional

from config import AppConfig
from core.interfaces import GameResult
from core.intent_queue import IntentQueue
from core.snake_rules import Rules
from runners.game_loop import GameLoop
from runners.logging import CSVLogger, TICK_KEYS, make_tick_logger
from viz.keyboard import KeyboardCapture

def make_frontend(cfg: AppConfig, intents: IntentQueue, term=None):
    """Returns (renderer, keyboard capture or None) for cfg.frontend."""
    if cfg.frontend == "window":
        from viz.renderer_pygame import PygameRenderer
        return PygameRenderer(intents), None
    from viz.renderer_terminal import TerminalRenderer
    rend = TerminalRenderer(term)
    kbd = KeyboardCapture(rend.term, intents, keymap=cfg.keymap, poll_timeout=cfg.poll_timeout)
    return rend, kbd

def main(cfg: Optional[AppConfig] = None, term=None) -> GameResult:
    cfg = cfg or AppConfig()
    rules = Rules(cfg)
    intents = IntentQueue(cfg.queue_max)

    logger = CSVLogger(cfg.log_path, fieldnames=TICK_KEYS) if cfg.log_path else None
    on_tick = make_tick_logger(logger) if logger else None

    rend, kbd = make_frontend(cfg, intents, term)
    loop = GameLoop(cfg, rules, intents, rend, on_tick=on_tick)

    try:
        rend.open(cfg)
        if kbd is not None:
            kbd.start()
        result = loop.run()
    finally:
        # terminal back to normal on every path, including errors
        rend.close()
        if logger is not None:
            logger.close()
        if kbd is not None:
            kbd.stop(timeout=0)

    rend.show_result(result)
    return result
