# tests/test_cli.py
import pytest
from PIL import Image

from ppmaze.cli import main
from ppmaze.mapgen.generator import generate_maze
from ppmaze.render.ppm import encode_ppm
from ppmaze.render.raster import draw_maze

def test_no_arguments_writes_out_ppm(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    main([])
    data = (tmp_path / "out.ppm").read_bytes()
    assert data.startswith(b"P6\n111 111 255\n")
    assert len(data) == len(b"P6\n111 111 255\n") + 111 * 111 * 3

def test_seeded_run_is_reproducible(tmp_path):
    out = tmp_path / "m.ppm"
    main(["--size", "5", "--seed", "31", "--out", str(out)])
    assert out.read_bytes() == encode_ppm(draw_maze(generate_maze(5, seed=31)))

def test_png_copy(tmp_path):
    out, png = tmp_path / "m.ppm", tmp_path / "m.png"
    main(["--size", "3", "--seed", "1", "--out", str(out), "--png", str(png)])
    with Image.open(png) as img:
        assert img.size == (34, 34)

def test_write_failure_exits_nonzero(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--out", str(tmp_path / "missing" / "out.ppm")])
    assert "Failed to save maze as ppm" in str(exc.value.code)

def test_bad_size_exits(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(["--size", "0", "--out", str(tmp_path / "x.ppm")])
    assert "--size" in str(exc.value.code)
