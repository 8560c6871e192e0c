"""Plane windows for an exponential zoom sequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

# Height of the first (unzoomed) frame in plane units.
BASE_SPAN = 4.0


@dataclass(frozen=True)
class FrameWindow:
    """The region of the complex plane sampled by one frame."""

    width: int
    height: int
    ver_span: float
    hor_span: float
    ci_top: float
    cr_left: float
    ci_delta: float
    cr_delta: float

    def cr(self, x: int) -> float:
        return self.cr_left + x * self.cr_delta

    def ci(self, y: int) -> float:
        # Image rows go down, the imaginary axis goes up.
        return self.ci_top - y * self.ci_delta


def zoom_multiplier(frame_count: int, final_zoom: float) -> float:
    return final_zoom ** (1.0 / (frame_count - 1))


def zoom_denominators(frame_count: int, final_zoom: float) -> Iterator[float]:
    """
    Yield the magnification of each frame: 1.0 for the first frame, then the
    previous value times a constant multiplier, so that the last frame reaches
    `final_zoom`.
    """
    multiplier = zoom_multiplier(frame_count, final_zoom)
    denom = 1.0
    for _ in range(frame_count):
        yield denom
        denom *= multiplier


def frame_window(width: int, height: int, xcenter: float, ycenter: float, denom: float) -> FrameWindow:
    ver_span = BASE_SPAN / denom
    hor_span = ver_span * (width - 1) / (height - 1)
    return FrameWindow(
        width=width,
        height=height,
        ver_span=ver_span,
        hor_span=hor_span,
        ci_top=ycenter + ver_span / 2,
        cr_left=xcenter - hor_span / 2,
        ci_delta=ver_span / (height - 1),
        cr_delta=hor_span / (width - 1),
    )
