import pytest
from PIL import Image

from ichigo.engine.imageref import ImageRef


def _write_png(path, size, colour):
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", size, colour).save(path)


def test_image_is_none_before_load():
    assert ImageRef(path="assets/nothing.png").image() is None


def test_load_reads_image(tmp_path):
    _write_png(tmp_path / "assets" / "a.png", (12, 7), (1, 2, 3, 255))
    ref = ImageRef(path="assets/a.png")
    ref.load(tmp_path)
    img = ref.image()
    assert img.size == (12, 7)
    assert img.getpixel((0, 0)) == (1, 2, 3, 255)


def test_same_path_uses_cache(tmp_path):
    _write_png(tmp_path / "b.png", (4, 4), (9, 9, 9, 255))
    a = ImageRef(path="b.png")
    b = ImageRef(path="b.png")
    a.load(tmp_path)
    b.load(tmp_path)
    assert a.image() is b.image()


def test_missing_file_raises(tmp_path):
    ref = ImageRef(path="missing.png")
    with pytest.raises(FileNotFoundError):
        ref.load(tmp_path)
    assert ref.image() is None


def test_str():
    assert str(ImageRef(path="assets/x.png")) == "ImageRef{assets/x.png}"