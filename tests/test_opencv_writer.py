import os

import numpy as np
import pytest

from mandelzoom.video.opencv_writer import collect_frames, encode_with_opencv
from mandelzoom.video.png_writer import EncodingError, save_frame


def _frame(height, width, value):
    pixels = np.full((height, width, 4), value, dtype=np.uint8)
    pixels[..., 3] = 255
    return pixels


def test_collect_frames_uses_natural_order(tmp_path):
    for name in ("frame_10.png", "frame_2.png", "frame_1.png", "notes.txt"):
        (tmp_path / name).write_bytes(b"")
    assert [os.path.basename(p) for p in collect_frames(str(tmp_path))] == [
        "frame_1.png", "frame_2.png", "frame_10.png",
    ]


def test_encode_without_frames_raises(tmp_path):
    with pytest.raises(ValueError):
        encode_with_opencv(input_dir=str(tmp_path), output_file=str(tmp_path / "out.mp4"), fps=30)


def test_encode_writes_video(tmp_path):
    for i in range(3):
        save_frame(_frame(32, 48, 40 * i), str(tmp_path), i)
    output = tmp_path / "zoom.mp4"

    written = encode_with_opencv(input_dir=str(tmp_path), output_file=str(output), fps=10)

    assert written == 3
    assert output.exists()
    assert output.stat().st_size > 0


def test_encode_rejects_mixed_frame_sizes(tmp_path):
    save_frame(_frame(32, 48, 0), str(tmp_path), 0)
    save_frame(_frame(16, 16, 0), str(tmp_path), 1)
    with pytest.raises(EncodingError):
        encode_with_opencv(input_dir=str(tmp_path), output_file=str(tmp_path / "out.mp4"), fps=10)
