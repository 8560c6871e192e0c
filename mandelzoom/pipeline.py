from __future__ import annotations

import os
from typing import Any, Dict, List

from tqdm import tqdm

from mandelzoom.renderer import render_sequence
from mandelzoom.util.logging_setup import get_logger
from mandelzoom.video.png_writer import EncodingError, save_frame

def _ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)

def run_zoom(*, cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Render every frame of the zoom described by a normalised config and write it
    to cfg["frames_dir"]. Stops at the first frame that fails to encode.
    """
    logger = get_logger()

    width = int(cfg["width"])
    height = int(cfg["height"])
    frames = int(cfg["frames"])
    final_zoom = float(cfg["final_zoom"])
    xcenter, ycenter = (float(cfg["center"][0]), float(cfg["center"][1]))
    max_iter = int(cfg["max_iter"])
    frames_dir = str(cfg["frames_dir"])

    _ensure_dir(frames_dir)

    logger.info("Render start frames=%s size=%sx%s center=(%s, %s) final_zoom=%s iter=%s",
                frames, width, height, xcenter, ycenter, final_zoom, max_iter)

    sequence = render_sequence(
        width=width, height=height, frame_count=frames,
        xcenter=xcenter, ycenter=ycenter, final_zoom=final_zoom, max_iter=max_iter,
    )
    paths: List[str] = []
    for frame in tqdm(sequence, total=frames, unit="frame", disable=not cfg.get("progress", True)):
        try:
            path = save_frame(frame.pixels, frames_dir, frame.index)
        except EncodingError:
            logger.error("Aborting after %s of %s frames", len(paths), frames)
            raise
        paths.append(path)
        logger.info("Saved frame %s -> %s (ver_span=%s)", frame.index, path, frame.window.ver_span)

    logger.info("Render complete frames_dir=%s", frames_dir)
    return {"frames_dir": frames_dir, "frames": frames, "width": width, "height": height, "paths": paths}
