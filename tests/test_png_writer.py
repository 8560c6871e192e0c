import os

import numpy as np
import pytest
from PIL import Image

from mandelzoom.video.png_writer import EncodingError, frame_name, frame_path, save_frame


@pytest.mark.parametrize("index, expected", [(0, "00000"), (7, "00007"), (12345, "12345")])
def test_frame_name_is_five_digit(index, expected):
    assert frame_name(index) == expected


def test_frame_path():
    assert frame_path("out", 7) == os.path.join("out", "frame_00007.png")


def test_save_frame_writes_rgba_png(tmp_path):
    pixels = np.zeros((3, 5, 4), dtype=np.uint8)
    pixels[..., 3] = 255
    pixels[1, 4] = (10, 20, 30, 255)

    path = save_frame(pixels, str(tmp_path), 3)

    assert path == frame_path(str(tmp_path), 3)
    with Image.open(path) as img:
        assert img.mode == "RGBA"
        assert img.size == (5, 3)
        assert img.getpixel((4, 1)) == (10, 20, 30, 255)


def test_save_frame_missing_directory_is_encoding_error(tmp_path):
    pixels = np.zeros((2, 2, 4), dtype=np.uint8)
    with pytest.raises(EncodingError):
        save_frame(pixels, str(tmp_path / "missing"), 0)


@pytest.mark.parametrize("pixels", [
    np.zeros((2, 2, 3), dtype=np.uint8),
    np.zeros((2, 2), dtype=np.uint8),
    np.zeros((2, 2, 4), dtype=np.float32),
])
def test_save_frame_rejects_non_rgba_buffers(tmp_path, pixels):
    with pytest.raises(EncodingError):
        save_frame(pixels, str(tmp_path), 0)
