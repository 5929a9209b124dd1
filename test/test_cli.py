import numpy as np
from PIL import Image

from seam_shrink import cli
from seam_shrink.image_io import load_grid, save_grid


def _write_image(path, h=10, w=12):
    src = np.random.RandomState(9).randint(0, 256, (h, w, 3)).astype(np.uint8)
    Image.fromarray(src).save(path)
    return src


def test_load_and_save(tmp_path):
    src = _write_image(tmp_path / "src.png")
    grid = load_grid(tmp_path / "src.png")
    assert grid.size == (12, 10)
    assert (grid.crop() == src).all()

    grid.width = 7
    save_grid(grid, tmp_path / "nested" / "dst.png")
    dst = np.asarray(Image.open(tmp_path / "nested" / "dst.png"))
    assert (dst == src[:, :7]).all()


def test_resize(tmp_path):
    _write_image(tmp_path / "src.png")
    args = ["-in", str(tmp_path / "src.png"), "-out", str(tmp_path / "dst.png")]
    args += ["-width", "3", "-height", "2"]
    args += ["--energy-out", str(tmp_path / "energy.png")]
    code = cli.main(args)
    assert code == 0
    with Image.open(tmp_path / "dst.png") as dst:
        assert dst.size == (9, 8)
    with Image.open(tmp_path / "energy.png") as energy:
        assert energy.size == (12, 10)
        assert energy.mode == "L"


def test_too_many_seams(tmp_path):
    _write_image(tmp_path / "src.png")
    args = ["-in", str(tmp_path / "src.png"), "-out", str(tmp_path / "dst.png")]
    code = cli.main(args + ["-width", "12"])
    assert code == 1
    assert not (tmp_path / "dst.png").exists()


def test_missing_source(tmp_path):
    args = ["-in", str(tmp_path / "missing.png"), "-out", str(tmp_path / "dst.png")]
    code = cli.main(args)
    assert code == 1
