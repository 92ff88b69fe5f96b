# src/ppmaze/render/png.py
# PNG export using Pillow, for viewers that do not read PPM.

import logging
import os
from typing import List

from PIL import Image

from .ppm import buffer_size, rgb_bytes

logger = logging.getLogger(__name__)

def to_image(pixels: List[List[int]], scale: int = 1) -> Image.Image:
    w, h = buffer_size(pixels)
    img = Image.frombytes("RGB", (w, h), rgb_bytes(pixels))
    if scale != 1:
        if scale < 1:
            raise ValueError("scale must be >= 1")
        img = img.resize((w * scale, h * scale), Image.NEAREST)
    return img

def save_as_png(pixels: List[List[int]], path: str, scale: int = 1) -> None:
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    to_image(pixels, scale).save(path, format="PNG")
    logger.debug("Wrote %s", path)
