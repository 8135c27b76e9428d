from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable

TICK_KEYS = ["tick", "outcome", "length", "tick_sec", "overrun", "pending", "dropped"]

class Logger(Protocol):
    def log(self, step: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        scalars = {"tick": step, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",   # don't crash on unseen keys
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "CSVLogger":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def make_tick_logger(logger: Logger, every: int = 1) -> Callable[[Dict[str, Any]], None]:
    """
    Returns a function(stats) -> None for GameLoop(on_tick=...) that logs every
    Nth tick, plus the final one (so the end of a game is always recorded).
    """
    every = max(1, int(every))

    def _on_tick(stats: Dict[str, Any]) -> None:
        tick = stats.get("tick")
        if tick is None:
            return
        last = stats.get("outcome") == "lost"
        if tick % every != 0 and not last:
            return
        scalars = {k: stats.get(k) for k in TICK_KEYS if k != "tick"}
        logger.log(int(tick), scalars)
        if last:
            logger.flush()
    return _on_tick
