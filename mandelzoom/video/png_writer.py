from __future__ import annotations

import os

import numpy as np
from PIL import Image

FRAME_PREFIX = "frame_"


class EncodingError(RuntimeError):
    """A frame could not be written to disk."""


def frame_name(frame_index: int) -> str:
    return f"{frame_index:05d}"


def frame_path(frames_dir: str, frame_index: int) -> str:
    return os.path.join(frames_dir, f"{FRAME_PREFIX}{frame_name(frame_index)}.png")


def save_frame(pixels: np.ndarray, frames_dir: str, frame_index: int) -> str:
    """Encode an RGBA frame buffer as PNG and return the written path."""
    if pixels.ndim != 3 or pixels.shape[2] != 4 or pixels.dtype != np.uint8:
        raise EncodingError(f"Frame {frame_index}: expected uint8 RGBA buffer, got {pixels.dtype} {pixels.shape}")

    path = frame_path(frames_dir, frame_index)
    try:
        img = Image.fromarray(pixels)
        img.save(path, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodingError(f"Frame {frame_index}: failed to write {path}: {e}") from e
    return path
