# viz/keyboard.py
from __future__ import annotations
from typing import Dict, Optional
import threading

import pygame as pg

from core.interfaces import Direction, Intent, QUIT
from core.intent_queue import IntentQueue

# blessed key names, shared by every layout
TERMINAL_KEYS: Dict[str, Intent] = {
    "KEY_UP": Direction.UP,
    "KEY_DOWN": Direction.DOWN,
    "KEY_LEFT": Direction.LEFT,
    "KEY_RIGHT": Direction.RIGHT,
    "KEY_ESCAPE": QUIT,
}

LETTER_KEYS: Dict[str, Dict[str, Intent]] = {
    "azerty": {"z": Direction.UP, "s": Direction.DOWN, "q": Direction.LEFT, "d": Direction.RIGHT, "a": QUIT},
    "qwerty": {"w": Direction.UP, "s": Direction.DOWN, "a": Direction.LEFT, "d": Direction.RIGHT, "q": QUIT},
}

CTRL_C = "\x03"

def classify_key(key, keymap: str = "azerty") -> Optional[Intent]:
    """Map a blessed Keystroke (or plain str) to an intent; None for anything else."""
    if not key:
        return None
    name = getattr(key, "name", None)
    if name in TERMINAL_KEYS:
        return TERMINAL_KEYS[name]
    if getattr(key, "is_sequence", False):
        return None
    ch = str(key)
    if ch == CTRL_C:
        return QUIT
    return LETTER_KEYS[keymap].get(ch.lower())


class KeyboardCapture:
    """Reads keys on its own daemon thread and pushes intents into the queue.

    Never touches game state; the loop does not wait for it on exit.
    """
    def __init__(self, term, queue: IntentQueue, keymap: str = "azerty", poll_timeout: float = 0.05):
        self._term = term
        self._queue = queue
        self._keymap = keymap
        self._poll_timeout = poll_timeout
        self._t: Optional[threading.Thread] = None
        self._stop = threading.Event()

    def start(self) -> None:
        if self._t is not None:
            return
        self._stop.clear()
        self._t = threading.Thread(target=self._run, name="KeyboardCapture", daemon=True)
        self._t.start()

    def _run(self) -> None:
        while not self._stop.is_set():
            key = self._term.inkey(timeout=self._poll_timeout)
            intent = classify_key(key, self._keymap)
            if intent is not None:
                self._queue.push(intent)

    def stop(self, timeout: float = 1.0) -> None:
        self._stop.set()
        if self._t is not None:
            self._t.join(timeout=timeout)
        self._t = None

    def is_alive(self) -> bool:
        return self._t is not None and self._t.is_alive()


class PygameKeyboard:
    """Classifies pygame events. Must be polled on the thread owning the window."""
    def __init__(self, keymap: str = "azerty"):
        self.keymap = keymap
        self._keys: Dict[int, Intent] = {
            pg.K_UP: Direction.UP,
            pg.K_DOWN: Direction.DOWN,
            pg.K_LEFT: Direction.LEFT,
            pg.K_RIGHT: Direction.RIGHT,
            pg.K_ESCAPE: QUIT,
        }

    def classify(self, e) -> Optional[Intent]:
        if e.type == pg.QUIT:
            return QUIT
        if e.type != pg.KEYDOWN:
            return None
        if e.key in self._keys:
            return self._keys[e.key]
        if e.key == pg.K_c and (getattr(e, "mod", 0) & pg.KMOD_CTRL):
            return QUIT
        # pygame letter keycodes are their ascii codes
        ch = chr(e.key) if 32 <= e.key < 127 else ""
        return LETTER_KEYS[self.keymap].get(ch.lower())

    def poll(self, queue: IntentQueue) -> None:
        for e in pg.event.get():
            intent = self.classify(e)
            if intent is not None:
                queue.push(intent)
