from PIL import Image

from ppmaze.mapgen.generator import generate_maze
from ppmaze.render.png import save_as_png, to_image
from ppmaze.render.raster import draw_maze

def test_to_image_matches_buffer():
    pixels = [[0x32A852, 0x000000]]
    img = to_image(pixels)
    assert img.mode == "RGB" and img.size == (2, 1)
    assert img.getpixel((0, 0)) == (0x32, 0xA8, 0x52)
    assert img.getpixel((1, 0)) == (0, 0, 0)

def test_save_png_scaled(tmp_path):
    path = tmp_path / "sub" / "maze.png"
    save_as_png(draw_maze(generate_maze(3, seed=4)), str(path), scale=3)
    with Image.open(path) as img:
        assert img.format == "PNG"
        assert img.size == (34 * 3, 34 * 3)
        # corner wall pixel scaled to a 3x3 block
        assert img.getpixel((2, 2)) == (0x32, 0xA8, 0x52)
        assert img.getpixel((3, 3)) == (0, 0, 0)
