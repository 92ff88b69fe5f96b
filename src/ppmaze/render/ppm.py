# src/ppmaze/render/ppm.py
"""
Binary PPM (P6) writer: ASCII header, then raw R,G,B bytes row-major.
"""

import logging
import os
from typing import List, Tuple

logger = logging.getLogger(__name__)

def rgb_components(pixel: int) -> Tuple[int, int, int]:
    """Split 0xRRGGBB into (r, g, b)."""
    return (pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF

def buffer_size(pixels: List[List[int]]) -> Tuple[int, int]:
    """Return (width, height), rejecting empty or ragged buffers."""
    h = len(pixels)
    if h == 0 or not pixels[0]:
        raise ValueError("pixel buffer is empty")
    w = len(pixels[0])
    if any(len(row) != w for row in pixels):
        raise ValueError("pixel buffer rows differ in length")
    return w, h

def rgb_bytes(pixels: List[List[int]]) -> bytes:
    buffer_size(pixels)
    out = bytearray()
    for row in pixels:
        for pixel in row:
            out.extend(rgb_components(pixel))
    return bytes(out)

def encode_ppm(pixels: List[List[int]]) -> bytes:
    w, h = buffer_size(pixels)
    return f"P6\n{w} {h} 255\n".encode("ascii") + rgb_bytes(pixels)

def save_as_ppm(pixels: List[List[int]], path: str) -> None:
    data = encode_ppm(pixels)
    if os.path.exists(path):
        os.remove(path)
    with open(path, "wb") as f:
        f.write(data)
    logger.debug("Wrote %d bytes to %s", len(data), path)
