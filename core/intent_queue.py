# core/intent_queue.py
from __future__ import annotations
from collections import deque
from typing import Deque, List
import threading

from .interfaces import Intent

class IntentQueue:
    """Bounded mailbox between the input thread and the game loop.

    - One producer pushes, one consumer drains once per tick.
    - `drain_all()` swaps the whole backlog out under the lock, so an intent
      pushed during a drain lands in that drain or the next, never both.
    - When full, the oldest pending intent is dropped to keep the newest.
    """

    def __init__(self, maxsize: int = 8) -> None:
        if maxsize < 1:
            raise ValueError("maxsize must be >= 1")
        self._maxsize = int(maxsize)
        self._buf: Deque[Intent] = deque(maxlen=self._maxsize)
        self._lock = threading.Lock()
        self._dropped = 0

    def push(self, intent: Intent) -> None:
        with self._lock:
            if len(self._buf) == self._maxsize:
                self._dropped += 1
            self._buf.append(intent)

    def drain_all(self) -> List[Intent]:
        with self._lock:
            items = list(self._buf)
            self._buf.clear()
        return items

    def __len__(self) -> int:
        with self._lock:
            return len(self._buf)

    def capacity(self) -> int:
        return self._maxsize

    @property
    def dropped(self) -> int:
        return self._dropped
