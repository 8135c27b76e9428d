# viz/frame.py  (pure: Snapshot -> characters, no terminal I/O)
from __future__ import annotations
import numpy as np

from core.interfaces import Snapshot, GameResult

EMPTY = "."
BODY = "0"
HEAD = "@"
FOOD = "*"

GAMEOVER = (
    "  ____                       ___\n"
    " / ___| __ _ _ __ ___   ___ / _ \\__   _____ _ __\n"
    "| |  _ / _` | '_ ` _ \\ / _ \\ | | \\ \\ / / _ \\ '__|\n"
    "| |_| | (_| | | | | | |  __/ |_| |\\ V /  __/ |\n"
    " \\____|\\__,_|_| |_| |_|\\___|\\___/  \\_/ \\___|_|\n"
)

_LEGEND_KEYS = {
    "azerty": ("z", "s", "q", "d", "a"),
    "qwerty": ("w", "s", "a", "d", "q"),
}

def render_frame(snap: Snapshot) -> np.ndarray:
    """Full frame as a (grid, grid) array of single characters, indexed [y, x]."""
    g = snap.grid_size
    frame = np.full((g, g), EMPTY, dtype="<U1")
    if snap.food is not None:
        fx, fy = snap.food
        frame[fy, fx] = FOOD
    for x, y in snap.snake[1:]:
        frame[y, x] = BODY
    hx, hy = snap.snake[0]
    frame[hy, hx] = HEAD
    return frame

def frame_to_text(frame: np.ndarray, newline: str = "\n") -> str:
    return newline.join("".join(row) for row in frame)

def legend(keymap: str = "azerty", newline: str = "\n") -> str:
    up, down, left, right, quit_ = _LEGEND_KEYS[keymap]
    rows = [
        "   Key  |  Action",
        "--------|--------",
        f"  {up} / ^ |   Up",
        f"  {down} / v |   Down",
        f"  {left} / < |   Left",
        f"  {right} / > |   Right",
        f"  {quit_} /Esc|   Quit",
        " ctrl+c |   Quit",
    ]
    return newline.join(rows)

def hud(snap: Snapshot) -> str:
    return f"Score: {snap.score}   Ticks: {snap.step_count}"

def result_text(result: GameResult, newline: str = "\n") -> str:
    lines = []
    if result.outcome == "lost":
        lines.append(GAMEOVER.replace("\n", newline).rstrip())
        lines.append("The snake ate itself.")
    else:
        lines.append("Quit.")
    lines.append(f"Final score: {result.score}   Time: {result.elapsed:.1f}s   Ticks: {result.ticks}")
    return newline.join(lines)
