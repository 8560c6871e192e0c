from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np
from numba import njit, prange

from mandelzoom.escape import escape_count
from mandelzoom.geometry import FrameWindow, frame_window, zoom_denominators
from mandelzoom.palette import colorize
from mandelzoom.util.logging_setup import get_logger

CHANNELS = 4


@dataclass
class RenderedFrame:
    index: int
    window: FrameWindow
    pixels: np.ndarray


def allocate_frame(width: int, height: int) -> np.ndarray:
    """RGBA frame buffer; pixel (x, y) lives at buf[y, x]."""
    return np.zeros((height, width, CHANNELS), dtype=np.uint8)


@njit(parallel=True, cache=True)
def _render_rows(buf, cr_left, cr_delta, ci_top, ci_delta, max_iter):
    height = buf.shape[0]
    width = buf.shape[1]
    for y in prange(height):
        ci = ci_top - y * ci_delta
        for x in range(width):
            cr = cr_left + x * cr_delta
            r, g, b, a = colorize(escape_count(cr, ci, max_iter), max_iter)
            buf[y, x, 0] = r
            buf[y, x, 1] = g
            buf[y, x, 2] = b
            buf[y, x, 3] = a


def render_frame(window: FrameWindow, max_iter: int, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Fill a frame buffer for `window`. Every pixel is overwritten, so `out` may be
    a buffer left over from a previous frame of the same size.
    """
    shape = (window.height, window.width, CHANNELS)
    if out is None:
        out = allocate_frame(window.width, window.height)
    elif out.shape != shape or out.dtype != np.uint8:
        raise ValueError(f"Frame buffer must be uint8 with shape {shape}, got {out.dtype} {out.shape}.")

    _render_rows(out, window.cr_left, window.cr_delta, window.ci_top, window.ci_delta, max_iter)
    return out


def render_sequence(
    *,
    width: int,
    height: int,
    frame_count: int,
    xcenter: float,
    ycenter: float,
    final_zoom: float,
    max_iter: int,
) -> Iterator[RenderedFrame]:
    """
    Lazily render `frame_count` frames zooming geometrically from the full view
    (vertical span 4.0) down to a magnification of `final_zoom` around
    (xcenter, ycenter). Arguments are expected to be validated already
    (see mandelzoom.config.normalise_config).
    """
    logger = get_logger()

    for index, denom in enumerate(zoom_denominators(frame_count, final_zoom)):
        window = frame_window(width, height, xcenter, ycenter, denom)
        logger.debug("[Frame %05d] render start zoom=%s ver_span=%s hor_span=%s iter=%s",
                     index, denom, window.ver_span, window.hor_span, max_iter)
        start = time.perf_counter()
        pixels = render_frame(window, max_iter)
        logger.debug("[Frame %05d] render done in %.2fs", index, time.perf_counter() - start)
        yield RenderedFrame(index=index, window=window, pixels=pixels)
