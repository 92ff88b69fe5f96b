# src/ppmaze/render/surface.py
from __future__ import annotations
from typing import List

import pygame

from .ppm import buffer_size, rgb_bytes

def to_surface(pixels: List[List[int]], scale: int = 1) -> pygame.Surface:
    """
    Convert a pixel buffer to a pygame.Surface.
    Works without a display; call .convert() yourself once a window exists.
    """
    w, h = buffer_size(pixels)
    surf = pygame.image.frombuffer(rgb_bytes(pixels), (w, h), "RGB").copy()
    if scale != 1:
        surf = pygame.transform.scale(surf, (w * scale, h * scale))
    return surf
