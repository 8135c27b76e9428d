import argparse
import os
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame as pg

from config import AppConfig, KEYMAPS, FRONTENDS
from runners.run_snake import main as run_snake

DEFAULTS = AppConfig()

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Snake on a wrap-around grid.")
    p.add_argument("mode", nargs="?", default="terminal", choices=FRONTENDS)
    p.add_argument("--grid", type=int, default=DEFAULTS.grid_size, help="grid side, in cells")
    p.add_argument("--fps", type=float, default=DEFAULTS.fps, help="ticks per second")
    p.add_argument("--start-len", type=int, default=DEFAULTS.start_len)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--keymap", choices=KEYMAPS, default=DEFAULTS.keymap)
    p.add_argument("--log", dest="log_path", default=None, help="write a per-tick CSV log here")
    p.add_argument("--no-legend", dest="show_legend", action="store_false")
    return p, p.parse_args(argv)

def build_config(p: argparse.ArgumentParser, args) -> AppConfig:
    try:
        return AppConfig(
            grid_size=args.grid,
            fps=args.fps,
            start_len=args.start_len,
            seed=args.seed,
            keymap=args.keymap,
            frontend=args.mode,
            log_path=args.log_path,
            show_legend=args.show_legend,
        )
    except ValueError as e:
        p.error(str(e))

def main(argv=None) -> int:
    p, args = parse_args(argv)
    cfg = build_config(p, args)
    try:
        run_snake(cfg)
    except (OSError, pg.error) as e:
        print(f"snake: I/O failure: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
