# src/ppmaze/cli.py
# `ppmaze` entry point. With no arguments: 10x10 maze, fresh seed, out.ppm.

import argparse
import logging
from typing import List, Optional

from .config import DEFAULT, MazeConfig
from .mapgen.generator import generate_maze
from .render.ppm import save_as_ppm
from .render.raster import draw_maze

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ppmaze", description="Generate a perfect maze as a PPM image.")
    p.add_argument("--size", type=int, help=f"Cells per side (default {DEFAULT.size})")
    p.add_argument("--seed", type=int, help="Seed for a reproducible maze")
    p.add_argument("--out", type=str, dest="output", help=f"PPM output path (default {DEFAULT.output})")
    p.add_argument("--png", type=str, help="Also write a PNG copy here")
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug")
    return p

def config_from_args(args: argparse.Namespace) -> MazeConfig:
    return DEFAULT.with_overrides(size=args.size, seed=args.seed, output=args.output)

def run(cfg: MazeConfig, png: Optional[str] = None) -> None:
    env = generate_maze(cfg.size, seed=cfg.seed)
    pixels = draw_maze(env, cfg.open_size, cfg.border)
    try:
        save_as_ppm(pixels, cfg.output)
    except OSError as e:
        raise SystemExit(f"ERROR: Failed to save maze as ppm: {e}")
    if png:
        from .render.png import save_as_png
        try:
            save_as_png(pixels, png)
        except OSError as e:
            raise SystemExit(f"ERROR: Failed to save maze as png: {e}")

def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    level = {0: logging.WARNING, 1: logging.INFO}.get(args.verbose, logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    cfg = config_from_args(args)
    if cfg.size < 1:
        raise SystemExit(f"ERROR: --size must be >= 1, got {cfg.size}")
    run(cfg, png=args.png)

if __name__ == "__main__":
    main()
