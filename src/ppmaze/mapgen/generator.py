# src/ppmaze/mapgen/generator.py
# One-call maze generation: env + random source + carve.

import logging
import time
from typing import Optional

from ..config import MAZE_SIZE
from ..rng import PMRandom, RandomSource, make_rng
from .backtrack import MazeEnv, carve_maze

logger = logging.getLogger(__name__)


def generate_maze(size: int = MAZE_SIZE, seed: Optional[int] = None,
                  rng: Optional[RandomSource] = None) -> MazeEnv:
    """
    Build a size×size perfect maze.

    An injected `rng` wins; otherwise a PMRandom is built from `seed`
    (or from a fresh system seed when `seed` is None).
    """
    if rng is None:
        rng = make_rng(seed)
    env = MazeEnv.init(size)

    logger.info("Generating %dx%d maze (seed=%s)", size, size, rng.seed if isinstance(rng, PMRandom) else seed)
    t0 = time.perf_counter()
    carve_maze(env, rng)
    logger.info("Carved %d walls in %.4fs", len(env.removed_walls), time.perf_counter() - t0)
    return env
