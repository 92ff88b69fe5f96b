# src/ppmaze/render/raster.py
# Rasterize a carved maze into a square buffer of packed 0xRRGGBB ints.
# Layout per axis: border | cell | border | cell | ... | border

from typing import List

from ..config import BORDER_THICKNESS, OPEN_COLOR, OPEN_PATH_SIZE, SOLID_COLOR, image_size
from ..mapgen.backtrack import MazeEnv
from ..walls import WallKind

Pixels = List[List[int]]

def new_pixels(side: int, color: int = OPEN_COLOR) -> Pixels:
    return [[color] * side for _ in range(side)]

def fill_rect(pixels: Pixels, rx: int, ry: int, rw: int, rh: int, color: int) -> None:
    h = len(pixels)
    w = len(pixels[0]) if h else 0
    if rx < 0 or ry < 0 or rx + rw > w or ry + rh > h:
        raise ValueError(f"rect ({rx}, {ry}, {rw}, {rh}) exceeds {w}x{h} buffer")
    for y in range(ry, ry + rh):
        row = pixels[y]
        for x in range(rx, rx + rw):
            row[x] = color

def draw_maze(env: MazeEnv, open_size: int = OPEN_PATH_SIZE, border: int = BORDER_THICKNESS) -> Pixels:
    """
    Draw every border line in SOLID_COLOR, then punch each removed wall open.

    Openings are anchored at the wall's target cell: a VERTICAL wall opens a
    border×open strip on the target's left line, a HORIZONTAL wall an
    open×border strip on its top line.
    """
    n = env.size
    pitch = open_size + border
    pixels = new_pixels(image_size(n, open_size, border))

    # column lines
    for r in range(n):
        for c in range(n + 1):
            fill_rect(pixels, c * pitch, r * pitch, border, open_size + 2 * border, SOLID_COLOR)
    # row lines
    for r in range(n + 1):
        for c in range(n):
            fill_rect(pixels, c * pitch, r * pitch, open_size + 2 * border, border, SOLID_COLOR)

    for wall in env.removed_walls:
        tr, tc = wall.target.row, wall.target.col
        if wall.kind is WallKind.VERTICAL:
            fill_rect(pixels, tc * pitch, tr * pitch + border, border, open_size, OPEN_COLOR)
        else:
            fill_rect(pixels, tc * pitch + border, tr * pitch, open_size, border, OPEN_COLOR)
    return pixels
