from __future__ import annotations

import glob
import os

import cv2
from natsort import natsorted

from mandelzoom.util.logging_setup import get_logger
from mandelzoom.video.png_writer import FRAME_PREFIX, EncodingError

def collect_frames(input_dir: str) -> list:
    return natsorted(glob.glob(os.path.join(input_dir, f"{FRAME_PREFIX}*.png")))

def encode_with_opencv(*, input_dir: str, output_file: str, fps: int) -> int:
    """Stitch the rendered frames in `input_dir` into an MP4 file. Returns the number of frames written."""
    logger = get_logger()

    frames = collect_frames(input_dir)
    if not frames:
        raise ValueError(f"No frames found in {input_dir}")

    first = cv2.imread(frames[0])
    if first is None:
        raise EncodingError(f"Failed to read first frame: {frames[0]}")
    h, w, _ = first.shape

    fourcc = cv2.VideoWriter_fourcc(*"mp4v")
    out = cv2.VideoWriter(output_file, fourcc, fps, (w, h))
    if not out.isOpened():
        raise EncodingError(f"Failed to open VideoWriter for {output_file}")

    logger.info("Encoding video %s from %s frames (%sx%s @ %sfps)", output_file, len(frames), w, h, fps)
    try:
        for i, path in enumerate(frames):
            img = first if i == 0 else cv2.imread(path)
            if img is None:
                raise EncodingError(f"Failed to read frame: {path}")
            if img.shape[0] != h or img.shape[1] != w:
                raise EncodingError(f"Frame {path} is {img.shape[1]}x{img.shape[0]}, expected {w}x{h}")
            out.write(img)
            if i % 200 == 0:
                logger.info("Encoded %s/%s frames", i, len(frames))
    finally:
        out.release()
    logger.info("Video written: %s", output_file)
    return len(frames)
