"""Tests for output image inspection."""

from PIL import Image
from launcher.image_info import describe_image


def test_describe_png(tmp_path):
    path = tmp_path / "img.png"
    Image.new("RGB", (4, 3), (255, 0, 0)).save(path)

    info = describe_image(path)

    assert info.format == "PNG"
    assert (info.width, info.height) == (4, 3)
    assert info.mode == "RGB"


def test_describe_binary_ppm(tmp_path):
    path = tmp_path / "img.ppm"
    path.write_bytes(b"P6\n2 1\n255\n" + bytes([255, 0, 0, 0, 0, 255]))

    info = describe_image(path)

    assert info.format == "PPM"
    assert (info.width, info.height) == (2, 1)


def test_undecodable_file_returns_none(tmp_path):
    path = tmp_path / "img.png"
    path.write_bytes(b"error: could not compile `ch01`\n")

    assert describe_image(path) is None


def test_describe_leaves_file_untouched(tmp_path):
    path = tmp_path / "img.png"
    Image.new("RGB", (2, 2)).save(path)
    before = path.read_bytes()

    describe_image(path)

    assert path.read_bytes() == before
